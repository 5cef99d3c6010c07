"""
商品目录领域模型包。
提供商品相关的实体、值对象、过滤条件、过滤器、仓储接口和领域服务。
"""

# 值对象
from catalog.domain.value_objects import Category, Price

# 实体
from catalog.domain.entities import Product

# 过滤条件
from catalog.domain.criteria import (
    FilterCriterion,
    CategoryCriterion,
    PriceCriterion,
    StockCriterion,
)

# 过滤器
from catalog.domain.filters import ProductFilter, ProductFilterBuilder

# 仓储接口
from catalog.domain.repositories import ProductRepository

# 领域服务
from catalog.domain.services import sort_by_stock, stock_priority_key

__all__ = [
    # 值对象
    'Category',
    'Price',

    # 实体
    'Product',

    # 过滤条件
    'FilterCriterion',
    'CategoryCriterion',
    'PriceCriterion',
    'StockCriterion',

    # 过滤器
    'ProductFilter',
    'ProductFilterBuilder',

    # 仓储接口
    'ProductRepository',

    # 领域服务
    'sort_by_stock',
    'stock_priority_key',
]
