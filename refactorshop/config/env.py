"""
环境变量处理模块。
负责加载和处理环境变量。
"""
import os
import warnings
from typing import Any, Optional

from dotenv import load_dotenv
from loguru import logger


# 从当前文件同级目录加载.env文件
def load_env_file() -> bool:
    """从当前文件同级目录加载.env文件"""
    # .env文件位置
    env_path = os.path.join(os.path.dirname(__file__), '.env')

    if not os.path.exists(env_path):
        logger.debug(f"环境变量文件不存在: {env_path}，将使用默认值")
        return False

    loaded = load_dotenv(dotenv_path=env_path, encoding='utf-8')
    logger.debug(f"加载环境变量文件: {env_path}")
    return loaded

# 尝试加载环境变量
load_env_file()

# 视为真值的字符串
TRUE_VALUES = ('true', 'yes', '1', 'y')


def get_env(name: str, default: Any = None, cast_type: Optional[type] = None) -> Any:
    """
    读取环境变量，支持bool和int转换

    Args:
        name: 环境变量名称
        default: 环境变量不存在或无法转换时返回的值
        cast_type: bool或int，None时返回原始字符串

    Returns:
        转换后的环境变量值
    """
    raw = os.environ.get(name)
    if raw is None:
        return default

    if cast_type is bool:
        return raw.strip().lower() in TRUE_VALUES

    if cast_type is int:
        try:
            return int(raw)
        except ValueError:
            warnings.warn(f"环境变量{name}的值'{raw}'不是整数，使用默认值{default!r}")
            return default

    return raw


# 日志配置
LOG_LEVEL = get_env('LOG_LEVEL')
LOG_FORMAT = get_env(
    'LOG_FORMAT',
    default='{time:YYYY-MM-DD HH:mm:ss} | {level} | {name}:{function}:{line} - {message}'
)

# 商品目录配置
CATALOG_SEED_SAMPLE = get_env('CATALOG_SEED_SAMPLE', cast_type=bool)
CATALOG_PRICE_DECIMAL_PLACES = get_env('CATALOG_PRICE_DECIMAL_PLACES', default=2, cast_type=int)
CATALOG_CURRENCY_SYMBOL = get_env('CATALOG_CURRENCY_SYMBOL', default='€')
