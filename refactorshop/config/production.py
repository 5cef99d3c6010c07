"""
生产环境配置文件。
包含生产环境特定的配置。
"""
from .base import *

# 日志配置 - 生产环境更关注错误和警告
LOGGING = {
    **LOGGING,
    'level': LOG_LEVEL or 'WARNING',
}

# 商品目录生产环境配置，商品由外部写入
CATALOG_SETTINGS = {
    **CATALOG_SETTINGS,
    'SEED_SAMPLE_CATALOG': bool(CATALOG_SEED_SAMPLE),
}
