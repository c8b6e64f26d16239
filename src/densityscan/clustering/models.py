"""
聚类数据结构定义
点位置协议、点记录、聚类和聚类结果集
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, Iterator, List, TypeVar

from ..spatial.point import Point, PointData

T = TypeVar('T', bound=PointData)


class ClusterType(Enum):
    """点的聚类状态，默认为 UNKNOWN"""

    UNKNOWN = 0  # 尚未访问
    NOISE = 1  # 不满足 epsilon 和最小点数条件
    CLUSTER_BORDER = 2  # 在某个核心点的邻域内，但自身邻居数不足
    CLUSTER_CORE = 3  # 邻居数满足最小点数条件


class PointInfo(Generic[T]):
    """保存单个点在聚类过程中的状态"""

    __slots__ = ('_item', 'cluster_type')

    def __init__(self, item: T):
        """
        初始化点记录

        Args:
            item: 被包装的原始对象
        """
        self._item = item
        self.cluster_type = ClusterType.UNKNOWN

    @property
    def item(self) -> T:
        """原始对象"""
        return self._item

    @property
    def point(self) -> Point:
        """点的坐标，来自原始对象"""
        return self._item.point

    def __repr__(self) -> str:
        return f"PointInfo(item={self._item!r}, cluster_type={self.cluster_type.name})"


@dataclass
class Cluster(Generic[T]):
    """一个聚类，按发现顺序保存原始对象"""

    objects: List[T] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self) -> Iterator[T]:
        return iter(self.objects)


@dataclass
class ClusterSet(Generic[T]):
    """聚类结果：所有聚类以及未被聚类的噪声对象"""

    clusters: List[Cluster[T]] = field(default_factory=list)
    unclustered_objects: List[T] = field(default_factory=list)

    @property
    def n_clusters(self) -> int:
        """聚类数量"""
        return len(self.clusters)

    @property
    def n_noise(self) -> int:
        """噪声点数量"""
        return len(self.unclustered_objects)
