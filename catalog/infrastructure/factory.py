"""
商品目录基础设施层工厂。
负责创建和管理基础设施层对象，包括仓储和服务实例。
"""
from typing import Any, Dict, Optional

from loguru import logger

from core.infrastructure.logging import setup_logging
from catalog.domain import config
from catalog.domain.repositories import ProductRepository
from catalog.application.product_filter_service import ProductFilterService
from catalog.infrastructure.fixtures import sample_products
from catalog.infrastructure.repositories.in_memory_product_repository import InMemoryProductRepository


class CatalogInfrastructureFactory:
    """
    商品目录基础设施层工厂类。
    负责创建商品目录的仓储和应用服务实例。
    """

    def __init__(self, seed_sample_catalog: Optional[bool] = None):
        """
        初始化商品目录基础设施层工厂。

        Args:
            seed_sample_catalog: 是否加载示例商品，None时使用模块配置
        """
        if seed_sample_catalog is None:
            seed_sample_catalog = config.SEED_SAMPLE_CATALOG
        self.seed_sample_catalog = seed_sample_catalog

        # 存储已创建的实例
        self._product_repository = None
        self._product_filter_service = None

    def create_product_repository(self) -> ProductRepository:
        """
        创建商品仓储。

        Returns:
            商品仓储实例
        """
        if self._product_repository is None:
            initial_products = sample_products() if self.seed_sample_catalog else []
            self._product_repository = InMemoryProductRepository(initial_products)
            logger.info(f"创建内存商品仓储，初始商品{len(initial_products)}个")

        return self._product_repository

    def create_product_filter_service(self) -> ProductFilterService:
        """
        创建商品过滤应用服务。

        Returns:
            商品过滤应用服务实例
        """
        if self._product_filter_service is None:
            self._product_filter_service = ProductFilterService(
                product_repository=self.create_product_repository()
            )

        return self._product_filter_service

    def initialize_services(self, logging_config: Optional[Dict[str, Any]] = None) -> ProductFilterService:
        """
        初始化日志和所有服务。

        Args:
            logging_config: 日志配置，None时使用项目设置中的LOGGING

        Returns:
            商品过滤应用服务实例
        """
        if logging_config is None:
            from refactorshop import settings
            logging_config = getattr(settings, 'LOGGING', {})
        setup_logging(logging_config)

        return self.create_product_filter_service()
