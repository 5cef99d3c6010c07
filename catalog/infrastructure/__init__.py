"""
商品目录基础设施层包。
提供商品仓储实现、示例数据和工厂。
"""
from catalog.infrastructure.repositories.in_memory_product_repository import InMemoryProductRepository
from catalog.infrastructure.factory import CatalogInfrastructureFactory

__all__ = [
    'InMemoryProductRepository',
    'CatalogInfrastructureFactory',
]
