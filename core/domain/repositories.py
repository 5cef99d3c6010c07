"""
仓储接口模块。
定义仓储接口，用于持久化和检索领域对象。
"""
from abc import ABC, abstractmethod
from typing import Any, Generic, List, Optional, TypeVar

T = TypeVar('T')


class Repository(Generic[T], ABC):
    """
    仓储接口。
    定义了所有仓储必须实现的基本操作。
    """

    @abstractmethod
    def get_all(self) -> List[T]:
        """
        获取全部实体。

        Returns:
            实体列表，修改该列表不会影响仓储内容
        """
        pass

    @abstractmethod
    def get_by_id(self, id: Any) -> Optional[T]:
        """
        根据ID获取实体。

        Args:
            id: 实体ID

        Returns:
            找到的实体，如果不存在则返回None
        """
        pass

    @abstractmethod
    def save(self, entity: T) -> T:
        """
        保存实体。
        如果实体已存在则更新，否则创建。

        Args:
            entity: 要保存的实体

        Returns:
            保存后的实体
        """
        pass

    @abstractmethod
    def delete(self, id: Any) -> None:
        """
        根据ID删除实体。
        实体不存在时不做任何处理。

        Args:
            id: 实体ID
        """
        pass
