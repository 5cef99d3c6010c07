"""
基础配置文件。
包含各环境共用的配置。
"""
from .env import *

# 日志配置，各环境按需覆盖level
LOGGING = {
    'level': LOG_LEVEL or 'INFO',
    'format': LOG_FORMAT,
}

# 商品目录模块配置
CATALOG_SETTINGS = {
    'SEED_SAMPLE_CATALOG': False,
    'PRICE_DECIMAL_PLACES': CATALOG_PRICE_DECIMAL_PLACES,
    'CURRENCY_SYMBOL': CATALOG_CURRENCY_SYMBOL,
}
