"""
商品目录领域模型中的实体。
包含商品(Product)实体定义。
"""
from typing import Any, Iterable, List, Optional

from core.domain import Entity, InvalidValueException
from catalog.domain.value_objects import Category, Price


def _is_blank(value: Any) -> bool:
    return value is None or not str(value).strip()


class Product(Entity):
    """
    商品实体。
    构造后不可变，更新时由仓储整体替换。
    """

    def __init__(
        self,
        id: str,
        name: str,
        price: Price,
        categories: Iterable[Category],
        has_stock: bool
    ):
        """
        初始化商品实体。

        按ID、名称、分类、价格、库存的顺序检查不变量，报告第一个不满足的条件。

        Args:
            id: 商品ID
            name: 商品名称
            price: 商品价格
            categories: 商品分类，至少一个
            has_stock: 是否有库存

        Raises:
            InvalidValueException: ID为空、名称为空、没有分类或类型不正确
        """
        if _is_blank(id):
            raise InvalidValueException('id', "商品ID不能为空")

        if _is_blank(name):
            raise InvalidValueException('name', "商品名称不能为空")

        categories = tuple(categories or ())
        if not categories:
            raise InvalidValueException('categories', "商品至少需要一个分类")

        if not isinstance(price, Price):
            raise InvalidValueException('price', f"价格必须是Price类型: {price!r}")

        for category in categories:
            if not isinstance(category, Category):
                raise InvalidValueException('categories', f"分类必须是Category类型: {category!r}")

        if not isinstance(has_stock, bool):
            raise InvalidValueException('has_stock', f"库存状态必须是布尔值: {has_stock!r}")

        super().__init__(id)
        self._name = name
        self._price = price
        self._categories = categories
        self._has_stock = has_stock

    @classmethod
    def create(
        cls,
        id: str,
        name: str,
        price: Any,
        categories: Iterable[str],
        has_stock: bool = True
    ) -> 'Product':
        """
        根据原始数据创建商品，负责构造价格和分类值对象。

        Args:
            id: 商品ID
            name: 商品名称
            price: 价格数值
            categories: 分类名称列表
            has_stock: 是否有库存

        Returns:
            新的商品实体
        """
        return cls(
            id=id,
            name=name,
            price=price if isinstance(price, Price) else Price(price),
            categories=[c if isinstance(c, Category) else Category(c) for c in (categories or [])],
            has_stock=has_stock
        )

    @property
    def name(self) -> str:
        """获取商品名称"""
        return self._name

    @property
    def price(self) -> Price:
        """获取商品价格"""
        return self._price

    @property
    def categories(self) -> List[Category]:
        """获取商品分类的副本"""
        return list(self._categories)

    @property
    def has_stock(self) -> bool:
        """是否有库存"""
        return self._has_stock

    def belongs_to_category(self, category: Category) -> bool:
        """
        检查商品是否属于指定分类。

        Args:
            category: 分类

        Returns:
            如果任一商品分类与之相等，则返回True；否则返回False
        """
        return any(own.equals(category) for own in self._categories)

    def is_in_price_range(
        self,
        min_price: Optional[Price] = None,
        max_price: Optional[Price] = None
    ) -> bool:
        """
        检查商品价格是否在区间内，上下限均包含在内。

        Args:
            min_price: 最低价格，None表示不限
            max_price: 最高价格，None表示不限

        Returns:
            价格在区间内返回True，否则返回False
        """
        if min_price is not None and self._price.less_than(min_price):
            return False

        if max_price is not None and self._price.greater_than(max_price):
            return False

        return True

    def __repr__(self) -> str:
        return (
            f"Product(id={self.id!r}, name={self._name!r}, price={self._price!r}, "
            f"categories={[c.value for c in self._categories]!r}, has_stock={self._has_stock!r})"
        )
