"""
商品过滤条件。
每个条件负责一个过滤维度(分类、价格、库存)，由ProductFilter组合为"与"链。
"""
from abc import ABC, abstractmethod
from typing import Iterable, Optional

from core.domain import ValueObject
from catalog.domain.entities import Product
from catalog.domain.value_objects import Category, Price


class FilterCriterion(ValueObject, ABC):
    """
    过滤条件接口。
    实现类必须是无副作用的纯判断。
    """

    @abstractmethod
    def matches(self, product: Product) -> bool:
        """
        判断商品是否满足该条件。

        Args:
            product: 商品实体

        Returns:
            满足条件返回True，否则返回False
        """
        pass


class CategoryCriterion(FilterCriterion):
    """分类条件：商品拥有任一指定分类即匹配，分类列表为空时总是匹配"""

    def __init__(self, categories: Iterable[Category]):
        """
        初始化分类条件。

        Args:
            categories: 可接受的分类，为空时不做限制
        """
        self._categories = tuple(categories)

    @property
    def categories(self) -> tuple:
        """获取可接受的分类"""
        return self._categories

    def matches(self, product: Product) -> bool:
        """商品拥有任一指定分类时返回True"""
        if not self._categories:
            return True
        return any(product.belongs_to_category(category) for category in self._categories)


class PriceCriterion(FilterCriterion):
    """价格条件：上下限均包含在内，缺省的边界不做限制"""

    def __init__(self, min_price: Optional[Price] = None, max_price: Optional[Price] = None):
        """
        初始化价格条件。

        Args:
            min_price: 最低价格，None表示不限
            max_price: 最高价格，None表示不限
        """
        self._min_price = min_price
        self._max_price = max_price

    @property
    def min_price(self) -> Optional[Price]:
        """获取最低价格"""
        return self._min_price

    @property
    def max_price(self) -> Optional[Price]:
        """获取最高价格"""
        return self._max_price

    def matches(self, product: Product) -> bool:
        """商品价格位于区间内时返回True"""
        return product.is_in_price_range(self._min_price, self._max_price)


class StockCriterion(FilterCriterion):
    """库存条件"""

    def __init__(self, has_stock: bool):
        """
        初始化库存条件。

        Args:
            has_stock: 要求的库存状态
        """
        self._has_stock = has_stock

    @property
    def has_stock(self) -> bool:
        """获取要求的库存状态"""
        return self._has_stock

    def matches(self, product: Product) -> bool:
        """商品库存状态与条件一致时返回True"""
        return product.has_stock == self._has_stock
