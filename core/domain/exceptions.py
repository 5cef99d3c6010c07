"""
领域异常模块。
包含领域模型中使用的各种异常类。
"""
from typing import Any, Optional


class DomainException(Exception):
    """
    领域异常基类。
    所有领域模型中的异常都应继承自此类。
    """

    def __init__(self, message: str):
        """
        初始化领域异常。

        Args:
            message: 异常消息
        """
        self.message = message
        super().__init__(self.message)


class ValidationException(DomainException):
    """
    数据验证异常。
    当数据验证失败时抛出。
    """

    def __init__(self, field_name: Optional[str] = None, message: str = "数据验证失败"):
        """
        初始化数据验证异常。

        Args:
            field_name: 字段名称
            message: 异常消息
        """
        if field_name:
            full_message = f"字段'{field_name}'验证失败: {message}"
        else:
            full_message = message
        super().__init__(full_message)
        self.field_name = field_name
        self.reason = message


class InvalidValueException(ValidationException, ValueError):
    """
    无效值异常。
    当标量值格式错误或不在值域内时抛出，例如空ID、未知分类、非数字价格。
    """


class NegativeValueException(InvalidValueException):
    """
    负值异常。
    当数值合法但小于零时抛出。
    """

    def __init__(self, field_name: str, value: Any):
        """
        初始化负值异常。

        Args:
            field_name: 字段名称
            value: 收到的负值
        """
        super().__init__(field_name, f"不能为负数: {value}")
        self.value = value


class InvalidRangeException(DomainException, ValueError):
    """
    无效区间异常。
    当区间下限大于上限时抛出。
    """

    def __init__(self, range_name: str, lower: Any, upper: Any):
        """
        初始化无效区间异常。

        Args:
            range_name: 区间名称
            lower: 区间下限
            upper: 区间上限
        """
        message = f"{range_name}的下限({lower})不能大于上限({upper})"
        super().__init__(message)
        self.range_name = range_name
        self.lower = lower
        self.upper = upper
