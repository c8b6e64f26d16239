"""
空间索引
邻域查询接口和线性扫描的参考实现
"""

from typing import Generic, Iterable, List, TypeVar

from .distance import get_distance_function
from .point import PointData

T = TypeVar('T', bound=PointData)


class SpatialIndex(Generic[T]):
    """
    空间索引基类（子类需实现查询方法）

    all() 返回的顺序决定聚类时的遍历顺序。neighbors() 返回与查询点距离
    不超过 epsilon 的所有记录，查询点自身（距离为0）也包含在结果中。
    """

    def all(self) -> List[T]:
        """
        返回索引中的所有记录

        Returns:
            记录列表
        """
        raise NotImplementedError

    def neighbors(self, point: PointData, epsilon: float) -> List[T]:
        """
        查找距离查询点不超过epsilon的记录

        Args:
            point: 查询点
            epsilon: 邻域半径

        Returns:
            邻域内的记录列表
        """
        raise NotImplementedError

    def __len__(self) -> int:
        return len(self.all())


class ListSpatialIndex(SpatialIndex[T]):
    """线性扫描索引，每次查询计算到所有记录的距离，O(N)"""

    def __init__(self, items: Iterable[T], metric: str = 'euclidean'):
        """
        初始化线性扫描索引

        Args:
            items: 要索引的记录，保持插入顺序
            metric: 距离度量方式，支持'euclidean'和'haversine'
        """
        self.metric = metric
        self._distance = get_distance_function(metric)
        self._items: List[T] = list(items)

    def all(self) -> List[T]:
        return list(self._items)

    def neighbors(self, point: PointData, epsilon: float) -> List[T]:
        location = point.point
        return [
            item for item in self._items
            if self._distance(location, item.point) <= epsilon
        ]

    def __len__(self) -> int:
        return len(self._items)
