"""
商品过滤器。
ProductFilter保存过滤参数，并在构造时组合出有效的过滤条件链；
ProductFilterBuilder提供链式构造方式。
"""
from typing import Any, Iterable, List, Optional, Tuple

from core.domain import InvalidRangeException, InvalidValueException
from catalog.domain.criteria import (
    FilterCriterion,
    CategoryCriterion,
    PriceCriterion,
    StockCriterion,
)
from catalog.domain.entities import Product
from catalog.domain.value_objects import Category, Price


class ProductFilter:
    """
    商品过滤器值对象。

    维度之间是"与"关系(分类 且 价格 且 库存)，分类维度内部是"或"关系
    (商品拥有任一指定分类即可)。没有约束的维度不参与判断，
    空过滤器匹配所有商品。
    """

    def __init__(
        self,
        categories: Optional[Iterable[Category]] = None,
        min_price: Optional[Price] = None,
        max_price: Optional[Price] = None,
        has_stock: Optional[bool] = None
    ):
        """
        初始化商品过滤器。

        Args:
            categories: 分类列表，为空表示不按分类过滤
            min_price: 最低价格(包含)
            max_price: 最高价格(包含)
            has_stock: 库存状态，None表示不按库存过滤

        Raises:
            InvalidValueException: 参数类型不正确
            InvalidRangeException: 最低价格大于最高价格
        """
        categories = tuple(categories or ())
        for category in categories:
            if not isinstance(category, Category):
                raise InvalidValueException('categories', f"分类必须是Category类型: {category!r}")

        for field_name, bound in (('min_price', min_price), ('max_price', max_price)):
            if bound is not None and not isinstance(bound, Price):
                raise InvalidValueException(field_name, f"价格必须是Price类型: {bound!r}")

        if has_stock is not None and not isinstance(has_stock, bool):
            raise InvalidValueException('has_stock', f"库存状态必须是布尔值: {has_stock!r}")

        if min_price is not None and max_price is not None and min_price.greater_than(max_price):
            raise InvalidRangeException('价格区间', min_price, max_price)

        self._categories = categories
        self._min_price = min_price
        self._max_price = max_price
        self._has_stock = has_stock
        self._criteria = self._build_criteria()

    def _build_criteria(self) -> Tuple[FilterCriterion, ...]:
        criteria = []

        if self.has_category_filter():
            criteria.append(CategoryCriterion(self._categories))

        if self.has_price_filter():
            criteria.append(PriceCriterion(self._min_price, self._max_price))

        if self.has_stock_filter():
            criteria.append(StockCriterion(self._has_stock))

        return tuple(criteria)

    @staticmethod
    def builder() -> 'ProductFilterBuilder':
        """
        创建新的过滤器构造器，每次调用返回独立的实例。

        Returns:
            过滤器构造器
        """
        return ProductFilterBuilder()

    @property
    def categories(self) -> List[Category]:
        """获取分类列表的副本"""
        return list(self._categories)

    @property
    def min_price(self) -> Optional[Price]:
        """获取最低价格"""
        return self._min_price

    @property
    def max_price(self) -> Optional[Price]:
        """获取最高价格"""
        return self._max_price

    @property
    def has_stock(self) -> Optional[bool]:
        """获取库存条件，None表示不限"""
        return self._has_stock

    @property
    def criteria(self) -> Tuple[FilterCriterion, ...]:
        """获取有效的过滤条件，顺序为分类、价格、库存"""
        return self._criteria

    def is_empty(self) -> bool:
        """没有任何维度带有约束时返回True"""
        return not (self.has_category_filter() or self.has_price_filter() or self.has_stock_filter())

    def has_category_filter(self) -> bool:
        """是否设置了分类条件"""
        return len(self._categories) > 0

    def has_price_filter(self) -> bool:
        """是否设置了最低或最高价格"""
        return self._min_price is not None or self._max_price is not None

    def has_stock_filter(self) -> bool:
        """是否设置了库存条件"""
        return self._has_stock is not None

    def matches(self, product: Product) -> bool:
        """
        判断商品是否满足所有过滤条件。

        Args:
            product: 商品实体

        Returns:
            所有条件都满足时返回True，空过滤器总是返回True
        """
        return all(criterion.matches(product) for criterion in self._criteria)

    def matches_category(self, category: Category) -> bool:
        """
        单独判断分类维度，供仓储逐字段过滤使用。

        Args:
            category: 待判断的分类

        Returns:
            没有分类约束，或分类在过滤列表中时返回True
        """
        if not self.has_category_filter():
            return True
        return any(own.equals(category) for own in self._categories)

    def matches_price(self, price: Price) -> bool:
        """
        单独判断价格维度，上下限均包含在内。

        Args:
            price: 待判断的价格

        Returns:
            没有价格约束，或价格在区间内时返回True
        """
        if not self.has_price_filter():
            return True

        if self._min_price is not None and price.less_than(self._min_price):
            return False

        if self._max_price is not None and price.greater_than(self._max_price):
            return False

        return True

    def _key(self) -> tuple:
        return (self._categories, self._min_price, self._max_price, self._has_stock)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, ProductFilter):
            return False
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return (
            f"ProductFilter(categories={[c.value for c in self._categories]!r}, "
            f"min_price={self._min_price!r}, max_price={self._max_price!r}, "
            f"has_stock={self._has_stock!r})"
        )


class ProductFilterBuilder:
    """
    商品过滤器构造器。
    每个with方法覆盖对应字段并返回构造器本身，build()时才进行校验。
    """

    def __init__(self):
        self._categories: List[Category] = []
        self._min_price: Optional[Price] = None
        self._max_price: Optional[Price] = None
        self._has_stock: Optional[bool] = None

    def with_categories(self, categories: Iterable[Category]) -> 'ProductFilterBuilder':
        """替换整个分类列表"""
        self._categories = list(categories)
        return self

    def with_category(self, category: Category) -> 'ProductFilterBuilder':
        """追加一个分类"""
        self._categories.append(category)
        return self

    def with_min_price(self, min_price: Price) -> 'ProductFilterBuilder':
        self._min_price = min_price
        return self

    def with_max_price(self, max_price: Price) -> 'ProductFilterBuilder':
        self._max_price = max_price
        return self

    def with_price_range(self, min_price: Price, max_price: Price) -> 'ProductFilterBuilder':
        self._min_price = min_price
        self._max_price = max_price
        return self

    def with_stock_filter(self, has_stock: bool) -> 'ProductFilterBuilder':
        self._has_stock = has_stock
        return self

    def with_in_stock_only(self) -> 'ProductFilterBuilder':
        return self.with_stock_filter(True)

    def with_out_of_stock_only(self) -> 'ProductFilterBuilder':
        return self.with_stock_filter(False)

    def build(self) -> ProductFilter:
        """
        构造商品过滤器。

        Returns:
            新的不可变商品过滤器

        Raises:
            InvalidValueException: 参数类型不正确
            InvalidRangeException: 最低价格大于最高价格
        """
        return ProductFilter(
            categories=self._categories,
            min_price=self._min_price,
            max_price=self._max_price,
            has_stock=self._has_stock
        )
