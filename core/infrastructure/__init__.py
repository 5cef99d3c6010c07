"""
基础设施层包。
提供日志配置等基础设施组件。
"""

# 日志配置
from core.infrastructure.logging import setup_logging

__all__ = [
    'setup_logging',
]
