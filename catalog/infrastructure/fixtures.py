"""
示例商品目录。
"""
from typing import List

from catalog.domain.entities import Product


SAMPLE_CATALOG = (
    # (ID, 名称, 价格, 分类, 是否有库存)
    ('3', 'Apple', '0.99', ('food', 'free-shipping'), True),
    ('1', 'Banana', '1.50', ('food',), False),
    ('2', 'T-Shirt', '15.99', ('clothes', 'new'), True),
    ('4', 'Shampoo', '8.50', ('toiletries', 'offer'), True),
    ('5', 'Limited Watch', '299.99', ('limited-edition',), False),
)


def sample_products() -> List[Product]:
    """
    构造示例商品，每次调用返回新的列表。

    Returns:
        示例商品列表
    """
    return [
        Product.create(id=id, name=name, price=price, categories=categories, has_stock=has_stock)
        for id, name, price, categories, has_stock in SAMPLE_CATALOG
    ]
