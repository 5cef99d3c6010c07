"""
商品过滤应用服务。
协调商品仓储和领域过滤规则，返回按库存优先排序的商品。
"""
from typing import Any, List, Optional

from loguru import logger

from catalog.domain.entities import Product
from catalog.domain.filters import ProductFilter
from catalog.domain.repositories import ProductRepository
from catalog.domain.services import sort_by_stock
from catalog.application.commands import SaveProductCommand
from catalog.application.queries import FilterProductsQuery


class ProductFilterService:
    """
    商品过滤应用服务。
    仓储抛出的异常会记录日志后原样向上传播。
    """

    def __init__(self, product_repository: ProductRepository):
        """
        初始化商品过滤应用服务。

        Args:
            product_repository: 商品仓储
        """
        self.product_repository = product_repository

    # ==================== 查询处理方法 ====================

    def filter_products(self, product_filter: ProductFilter) -> List[Product]:
        """
        过滤商品，有库存的商品排在前面。

        Args:
            product_filter: 商品过滤器

        Returns:
            排序后的匹配商品列表
        """
        try:
            products = self.product_repository.find_by_filter(product_filter)
        except Exception as e:
            logger.error(f"过滤商品失败: {e}")
            raise

        return sort_by_stock(products)

    def search(self, query: FilterProductsQuery) -> List[Product]:
        """
        根据原始查询参数过滤商品。

        Args:
            query: 过滤商品查询

        Returns:
            排序后的匹配商品列表

        Raises:
            InvalidValueException: 查询参数无效
            InvalidRangeException: 最低价格大于最高价格
        """
        return self.filter_products(query.to_filter())

    def get_all_products(self) -> List[Product]:
        """
        获取全部商品，有库存的商品排在前面。

        Returns:
            排序后的商品列表
        """
        try:
            products = self.product_repository.get_all()
        except Exception as e:
            logger.error(f"获取商品列表失败: {e}")
            raise

        return sort_by_stock(products)

    def get_product_by_id(self, id: Any) -> Optional[Product]:
        """
        获取单个商品。

        Args:
            id: 商品ID

        Returns:
            商品实体，如果不存在则返回None
        """
        try:
            return self.product_repository.get_by_id(id)
        except Exception as e:
            logger.error(f"获取商品失败: ID={id}, {e}")
            raise

    # ==================== 命令处理方法 ====================

    def save_product(self, product: Product) -> Product:
        """
        保存商品，ID已存在时整体替换。

        Args:
            product: 商品实体

        Returns:
            保存后的商品
        """
        try:
            return self.product_repository.save(product)
        except Exception as e:
            logger.error(f"保存商品失败: ID={product.id}, {e}")
            raise

    def create_product(self, command: SaveProductCommand) -> Product:
        """
        根据命令构造商品并保存。

        Args:
            command: 保存商品命令

        Returns:
            保存后的商品

        Raises:
            InvalidValueException: 命令中的数据无效
        """
        product = Product.create(
            id=command.id,
            name=command.name,
            price=command.price,
            categories=command.categories,
            has_stock=command.has_stock
        )
        return self.save_product(product)

    def remove_product(self, id: Any) -> None:
        """
        删除商品，商品不存在时不做任何处理。

        Args:
            id: 商品ID
        """
        try:
            self.product_repository.delete(id)
        except Exception as e:
            logger.error(f"删除商品失败: ID={id}, {e}")
            raise
