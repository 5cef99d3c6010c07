"""
商品仓储的内存实现。
"""
import threading
from typing import Any, Iterable, List, Optional

from loguru import logger

from catalog.domain.entities import Product
from catalog.domain.filters import ProductFilter
from catalog.domain.repositories import ProductRepository


class InMemoryProductRepository(ProductRepository):
    """
    基于内存列表的商品仓储实现。
    商品按插入顺序保存，更新时保留原位置。
    """

    def __init__(self, initial_products: Optional[Iterable[Product]] = None):
        """
        初始化内存商品仓储。

        Args:
            initial_products: 初始商品
        """
        self._products: List[Product] = list(initial_products or [])
        self._lock = threading.RLock()

    def get_all(self) -> List[Product]:
        """
        获取全部商品，按加入顺序返回副本。

        Returns:
            商品列表
        """
        with self._lock:
            return list(self._products)

    def find_by_filter(self, product_filter: ProductFilter) -> List[Product]:
        """
        按过滤器逐字段扫描商品。

        Args:
            product_filter: 商品过滤器

        Returns:
            匹配的商品列表
        """
        with self._lock:
            snapshot = list(self._products)

        if product_filter.is_empty():
            return snapshot

        result = [product for product in snapshot if self._matches(product_filter, product)]
        logger.debug(f"过滤商品: {product_filter!r}，匹配{len(result)}/{len(snapshot)}个")
        return result

    @staticmethod
    def _matches(product_filter: ProductFilter, product: Product) -> bool:
        if product_filter.has_category_filter():
            if not any(product_filter.matches_category(c) for c in product.categories):
                return False

        if product_filter.has_price_filter():
            if not product_filter.matches_price(product.price):
                return False

        if product_filter.has_stock_filter():
            if product.has_stock != product_filter.has_stock:
                return False

        return True

    def get_by_id(self, id: Any) -> Optional[Product]:
        """
        根据ID获取商品。

        Args:
            id: 商品ID

        Returns:
            商品实体，ID为空或不存在时返回None
        """
        if id is None or not str(id).strip():
            return None

        with self._lock:
            return next((p for p in self._products if p.id == id), None)

    def save(self, product: Product) -> Product:
        """
        保存商品，ID已存在时原位替换，否则追加到末尾。

        Args:
            product: 商品实体

        Returns:
            保存的商品
        """
        with self._lock:
            for index, existing in enumerate(self._products):
                if existing.id == product.id:
                    self._products[index] = product
                    logger.debug(f"更新商品: ID={product.id}")
                    break
            else:
                self._products.append(product)
                logger.debug(f"新增商品: ID={product.id}")

        return product

    def delete(self, id: Any) -> None:
        """
        删除商品，ID为空或不存在时不做任何处理。

        Args:
            id: 商品ID
        """
        if id is None or not str(id).strip():
            return

        with self._lock:
            remaining = [p for p in self._products if p.id != id]
            if len(remaining) != len(self._products):
                logger.debug(f"删除商品: ID={id}")
            self._products = remaining

    def __len__(self) -> int:
        with self._lock:
            return len(self._products)
