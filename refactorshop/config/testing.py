"""
测试环境配置文件。
包含测试环境特定的配置。
"""
from .base import *

# 简化日志配置
LOGGING = {
    **LOGGING,
    'level': LOG_LEVEL or 'ERROR',
}

# 商品目录测试环境配置，测试自行准备数据
CATALOG_SETTINGS = {
    **CATALOG_SETTINGS,
    'SEED_SAMPLE_CATALOG': bool(CATALOG_SEED_SAMPLE),
}
