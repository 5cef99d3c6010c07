"""
商品目录应用服务层的查询对象。
定义用于查询商品的查询。
"""
from typing import Any, Iterable, List, Optional

from catalog.domain.filters import ProductFilter
from catalog.domain.value_objects import Category, Price


class FilterProductsQuery:
    """
    过滤商品的查询。
    保存调用方传入的原始参数，由to_filter()转换为领域过滤器。
    """

    def __init__(
        self,
        categories: Optional[Iterable[str]] = None,
        min_price: Optional[Any] = None,
        max_price: Optional[Any] = None,
        has_stock: Optional[bool] = None
    ):
        """
        初始化过滤商品查询。

        Args:
            categories: 分类名称列表
            min_price: 最低价格
            max_price: 最高价格
            has_stock: 库存状态，None表示不限
        """
        self.categories: List[str] = list(categories or [])
        self.min_price = min_price
        self.max_price = max_price
        self.has_stock = has_stock

    def to_filter(self) -> ProductFilter:
        """
        转换为领域过滤器。

        Returns:
            商品过滤器

        Raises:
            InvalidValueException: 分类或价格无效
            InvalidRangeException: 最低价格大于最高价格
        """
        builder = ProductFilter.builder().with_categories(
            Category(category) for category in self.categories
        )

        if self.min_price is not None:
            builder.with_min_price(Price(self.min_price))
        if self.max_price is not None:
            builder.with_max_price(Price(self.max_price))
        if self.has_stock is not None:
            builder.with_stock_filter(self.has_stock)

        return builder.build()
