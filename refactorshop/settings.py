"""
refactorshop项目配置。

此文件作为配置入口点，根据环境变量加载相应的配置模块。
"""
from loguru import logger

from .config.env import get_env

# 确定当前环境
REFACTORSHOP_ENV = get_env('REFACTORSHOP_ENV', default='development')

# 根据环境加载相应的配置
if REFACTORSHOP_ENV == 'production':
    from .config.production import *
elif REFACTORSHOP_ENV == 'testing':
    from .config.testing import *
else:  # 默认使用开发环境配置
    from .config.development import *

logger.debug(f"使用{REFACTORSHOP_ENV}环境配置")
