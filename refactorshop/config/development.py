"""
开发环境配置文件。
包含开发环境特定的配置。
"""
from .base import *

# 日志配置 - 开发环境更详细的日志
LOGGING = {
    **LOGGING,
    'level': LOG_LEVEL or 'DEBUG',
}

# 商品目录开发环境配置
CATALOG_SETTINGS = {
    **CATALOG_SETTINGS,
    # 开发环境默认加载示例商品
    'SEED_SAMPLE_CATALOG': True if CATALOG_SEED_SAMPLE is None else CATALOG_SEED_SAMPLE,
}
