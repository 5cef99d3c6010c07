"""
商品目录领域模型中的值对象。
包含分类(Category)和价格(Price)两个值对象。
"""
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, localcontext
from typing import Any, Tuple

from core.domain import ValueObject, InvalidValueException, NegativeValueException


class Category(ValueObject):
    """
    商品分类值对象。
    分类名称必须属于固定的分类词表。
    """

    VALID_CATEGORIES: Tuple[str, ...] = (
        'food',
        'clothes',
        'toiletries',
        'free-shipping',
        'new',
        'offer',
        'limited-edition',
    )

    def __init__(self, value: str):
        """
        初始化分类值对象。

        Args:
            value: 分类名称

        Raises:
            InvalidValueException: 分类为空或不在分类词表中
        """
        if value is None or (isinstance(value, str) and not value.strip()):
            raise InvalidValueException('category', "分类不能为空")

        if not Category.is_valid(value):
            raise InvalidValueException('category', f"无效的分类: {value}")

        self._value = value

    @property
    def value(self) -> str:
        """获取分类名称"""
        return self._value

    @classmethod
    def valid_categories(cls) -> Tuple[str, ...]:
        """
        获取全部合法分类，顺序与声明顺序一致。

        Returns:
            合法分类名称元组
        """
        return cls.VALID_CATEGORIES

    @classmethod
    def is_valid(cls, value: Any) -> bool:
        """
        检查分类名称是否合法，不会抛出异常。

        Args:
            value: 待检查的分类名称

        Returns:
            如果分类名称非空且属于分类词表，则返回True；否则返回False
        """
        if not isinstance(value, str) or not value.strip():
            return False
        return value in cls.VALID_CATEGORIES

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"Category({self._value!r})"


class Price(ValueObject):
    """
    价格值对象。
    表示一个有限、非负的金额，内部使用Decimal保存。
    """

    def __init__(self, value: Any):
        """
        初始化价格值对象。

        Args:
            value: 价格数值，支持int、float、Decimal和数字字符串

        Raises:
            InvalidValueException: 价格为空、不是数字、NaN或无穷大
            NegativeValueException: 价格为负数
        """
        amount = self._to_decimal(value)

        if amount < 0:
            raise NegativeValueException('price', value)

        # -0与0等价，去掉符号位
        if amount == 0:
            amount = amount.copy_abs()

        self._value = amount

    @staticmethod
    def _to_decimal(value: Any) -> Decimal:
        # bool是int的子类，需要单独排除
        if value is None or isinstance(value, bool):
            raise InvalidValueException('price', "价格必须是有效数字")

        if isinstance(value, Decimal):
            amount = value
        elif isinstance(value, int):
            amount = Decimal(value)
        elif isinstance(value, float):
            # 通过str转换，避免二进制浮点误差，例如0.99 -> Decimal('0.99')
            amount = Decimal(str(value))
        elif isinstance(value, str):
            try:
                amount = Decimal(value.strip())
            except InvalidOperation:
                raise InvalidValueException('price', f"价格必须是有效数字: {value!r}") from None
        else:
            raise InvalidValueException('price', f"价格必须是有效数字: {value!r}")

        if not amount.is_finite():
            raise InvalidValueException('price', f"价格必须是有限数值: {value!r}")

        return amount

    @property
    def value(self) -> Decimal:
        """获取价格数值"""
        return self._value

    def greater_than(self, other: 'Price') -> bool:
        return self._value > other._value

    def greater_than_or_equal(self, other: 'Price') -> bool:
        return self._value >= other._value

    def less_than(self, other: 'Price') -> bool:
        return self._value < other._value

    def less_than_or_equal(self, other: 'Price') -> bool:
        return self._value <= other._value

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Price):
            return NotImplemented
        return self.less_than(other)

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Price):
            return NotImplemented
        return self.less_than_or_equal(other)

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Price):
            return NotImplemented
        return self.greater_than(other)

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Price):
            return NotImplemented
        return self.greater_than_or_equal(other)

    def to_fixed(self, digits: int = 2) -> str:
        """
        按固定小数位数格式化价格，使用四舍五入(ROUND_HALF_UP)。

        Args:
            digits: 小数位数

        Returns:
            格式化后的价格字符串，例如"1.50"

        Raises:
            InvalidValueException: 如果小数位数为负数
        """
        if isinstance(digits, bool) or not isinstance(digits, int) or digits < 0:
            raise InvalidValueException('digits', f"小数位数必须是非负整数: {digits!r}")

        with localcontext() as ctx:
            # 精度需容纳全部整数位和小数位
            ctx.prec = max(ctx.prec, self._value.adjusted() + digits + 2)
            ctx.rounding = ROUND_HALF_UP
            quantum = Decimal(1).scaleb(-digits)
            return format(self._value.quantize(quantum), 'f')

    def __str__(self) -> str:
        """
        返回价格的普通十进制表示。

        Returns:
            价格的字符串表示，例如"0.99"
        """
        return format(self._value, 'f')

    def __repr__(self) -> str:
        return f"Price({str(self)!r})"
