"""
商品目录领域服务。
定义按库存优先排序商品的规则。
"""
from typing import Iterable, List

from catalog.domain.entities import Product


def stock_priority_key(product: Product) -> int:
    """
    库存优先排序键：有库存为0，无库存为1。

    Args:
        product: 商品实体

    Returns:
        排序键
    """
    return 0 if product.has_stock else 1


def sort_by_stock(products: Iterable[Product]) -> List[Product]:
    """
    将有库存的商品排在无库存的商品之前。
    sorted是稳定排序，两组内部保持输入顺序；输入不会被修改。

    Args:
        products: 商品列表

    Returns:
        排序后的新列表
    """
    return sorted(products, key=stock_priority_key)
