"""
商品目录应用服务层的命令对象。
定义用于修改商品目录的命令。
"""
from typing import Any, Iterable


class SaveProductCommand:
    """保存商品命令，ID已存在时替换原商品"""

    def __init__(
        self,
        id: str,
        name: str,
        price: Any,
        categories: Iterable[str],
        has_stock: bool = True
    ):
        """
        初始化保存商品命令。

        Args:
            id: 商品ID
            name: 商品名称
            price: 商品价格
            categories: 分类名称列表
            has_stock: 是否有库存
        """
        self.id = id
        self.name = name
        self.price = price
        self.categories = list(categories or [])
        self.has_stock = has_stock
