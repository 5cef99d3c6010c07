"""
商品目录应用服务层包。
提供商品过滤应用服务、数据传输对象、命令和查询。
"""

# DTO
from catalog.application.dtos import ProductDTO

# 命令
from catalog.application.commands import SaveProductCommand

# 查询
from catalog.application.queries import FilterProductsQuery

# 应用服务
from catalog.application.product_filter_service import ProductFilterService

__all__ = [
    # DTO
    'ProductDTO',

    # 命令
    'SaveProductCommand',

    # 查询
    'FilterProductsQuery',

    # 应用服务
    'ProductFilterService',
]
