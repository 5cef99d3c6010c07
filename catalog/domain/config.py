"""
商品目录模块配置文件。
从项目设置中获取商品目录模块的配置。
"""
from refactorshop import settings

# 获取商品目录模块配置，如果不存在则使用默认值
CATALOG_SETTINGS = getattr(settings, 'CATALOG_SETTINGS', {})

# 是否在创建仓储时加载示例商品
SEED_SAMPLE_CATALOG = CATALOG_SETTINGS.get('SEED_SAMPLE_CATALOG', False)

# 价格展示的小数位数
PRICE_DECIMAL_PLACES = CATALOG_SETTINGS.get('PRICE_DECIMAL_PLACES', 2)

# 价格展示的货币符号
CURRENCY_SYMBOL = CATALOG_SETTINGS.get('CURRENCY_SYMBOL', '€')
