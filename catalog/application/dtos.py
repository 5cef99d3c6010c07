"""
商品目录应用服务层的数据传输对象(DTOs)。
定义应用服务与展示层通信使用的数据结构。
"""
from typing import Any, Dict, List

from catalog.domain import config
from catalog.domain.entities import Product


class ProductDTO:
    """商品数据传输对象，用于返回商品信息"""

    def __init__(
        self,
        id: str,
        name: str,
        price: str,
        currency: str,
        categories: List[str],
        has_stock: bool
    ):
        """
        初始化商品DTO。

        Args:
            id: 商品ID
            name: 商品名称
            price: 按配置小数位数格式化的价格
            currency: 货币符号
            categories: 分类名称列表
            has_stock: 是否有库存
        """
        self.id = id
        self.name = name
        self.price = price
        self.currency = currency
        self.categories = categories
        self.has_stock = has_stock

    @classmethod
    def from_entity(cls, product: Product) -> 'ProductDTO':
        """
        从商品实体创建DTO。

        Args:
            product: 商品实体

        Returns:
            商品DTO
        """
        return cls(
            id=product.id,
            name=product.name,
            price=product.price.to_fixed(config.PRICE_DECIMAL_PLACES),
            currency=config.CURRENCY_SYMBOL,
            categories=[category.value for category in product.categories],
            has_stock=product.has_stock
        )

    def to_dict(self) -> Dict[str, Any]:
        """
        转换为字典表示。

        Returns:
            商品的字典表示
        """
        return {
            "id": self.id,
            "name": self.name,
            "price": self.price,
            "currency": self.currency,
            "categories": list(self.categories),
            "has_stock": self.has_stock,
        }

    def __str__(self) -> str:
        return f"{self.name} - {self.currency}{self.price} [{', '.join(self.categories)}]"
