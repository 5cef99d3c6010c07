"""
商品目录领域模型中的仓储接口。
定义用于保存和检索商品实体的仓储接口。
"""
from abc import abstractmethod
from typing import Any, List, Optional

from core.domain.repositories import Repository
from catalog.domain.entities import Product
from catalog.domain.filters import ProductFilter


class ProductRepository(Repository[Product]):
    """
    商品仓储接口。
    实现可以基于内存、数据库或远程服务，实现自身的异常直接向上传播。
    """

    @abstractmethod
    def get_all(self) -> List[Product]:
        """
        获取全部商品。

        Returns:
            商品列表
        """
        pass

    @abstractmethod
    def find_by_filter(self, product_filter: ProductFilter) -> List[Product]:
        """
        查找满足过滤器的商品。

        Args:
            product_filter: 商品过滤器

        Returns:
            匹配的商品列表，保持仓储中的顺序
        """
        pass

    @abstractmethod
    def get_by_id(self, id: Any) -> Optional[Product]:
        """
        根据ID获取商品。

        Args:
            id: 商品ID

        Returns:
            找到的商品；ID为空或商品不存在时返回None
        """
        pass

    @abstractmethod
    def save(self, product: Product) -> Product:
        """
        保存商品，ID已存在时整体替换，否则新增。

        Args:
            product: 要保存的商品

        Returns:
            保存后的商品
        """
        pass

    @abstractmethod
    def delete(self, id: Any) -> None:
        """
        根据ID删除商品，商品不存在时不做任何处理。

        Args:
            id: 商品ID
        """
        pass
