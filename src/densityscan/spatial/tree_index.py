"""
基于树结构的空间索引
使用KDTree / BallTree加速邻域查询
"""

from typing import Iterable, List

import numpy as np
from scipy.spatial import KDTree
from sklearn.neighbors import BallTree

from .distance import EARTH_RADIUS_M, SUPPORTED_METRICS, get_distance_function
from .index import SpatialIndex, T
from .point import PointData


def _to_array(items: List[PointData]) -> np.ndarray:
    """将记录的坐标转换为形状为(n_samples, 2)的数组"""
    return np.array([[item.point.x, item.point.y] for item in items],
                    dtype=np.float64).reshape(-1, 2)


def _widen(radius: float) -> float:
    """放宽查询半径，候选点随后按精确距离过滤"""
    return float(np.nextafter(radius, np.inf) * (1.0 + 1e-9))


class KDTreeSpatialIndex(SpatialIndex[T]):
    """基于scipy KDTree的索引（仅支持欧氏距离）"""

    def __init__(self, items: Iterable[T]):
        """
        构建KDTree索引

        Args:
            items: 要索引的记录，保持插入顺序
        """
        self.metric = 'euclidean'
        self._distance = get_distance_function(self.metric)
        self._items: List[T] = list(items)
        self._tree = KDTree(_to_array(self._items)) if self._items else None

    def all(self) -> List[T]:
        return list(self._items)

    def neighbors(self, point: PointData, epsilon: float) -> List[T]:
        if self._tree is None:
            return []

        location = point.point
        # 按存储顺序返回，与线性扫描结果一致
        indices = self._tree.query_ball_point([location.x, location.y], _widen(epsilon),
                                              return_sorted=True)
        return [self._items[i] for i in indices
                if self._distance(location, self._items[i].point) <= epsilon]

    def __len__(self) -> int:
        return len(self._items)


class BallTreeSpatialIndex(SpatialIndex[T]):
    """基于scikit-learn BallTree的索引，支持Haversine距离（米）"""

    def __init__(self, items: Iterable[T], metric: str = 'haversine'):
        """
        构建BallTree索引

        Args:
            items: 要索引的记录，保持插入顺序
            metric: 距离度量方式，支持'euclidean'和'haversine'
        """
        if metric not in SUPPORTED_METRICS:
            raise ValueError(f"不支持的度量方式: {metric}")

        self.metric = metric
        self._distance = get_distance_function(metric)
        self._items: List[T] = list(items)
        self._tree = None

        if self._items:
            self._tree = BallTree(self._prepare(_to_array(self._items)), metric=metric)

    def _prepare(self, coordinates: np.ndarray) -> np.ndarray:
        """Haversine度量需要[纬度, 经度]的弧度值"""
        if self.metric == 'haversine':
            return np.radians(coordinates)
        return coordinates

    def _radius(self, epsilon: float) -> float:
        """将以米为单位的半径转换为单位球面上的弧度"""
        if self.metric == 'haversine':
            return epsilon / EARTH_RADIUS_M
        return epsilon

    def all(self) -> List[T]:
        return list(self._items)

    def neighbors(self, point: PointData, epsilon: float) -> List[T]:
        if self._tree is None:
            return []

        location = point.point
        query = self._prepare(np.array([[location.x, location.y]], dtype=np.float64))
        indices = self._tree.query_radius(query, r=_widen(self._radius(epsilon)))[0]
        return [self._items[i] for i in np.sort(indices)
                if self._distance(location, self._items[i].point) <= epsilon]

    def __len__(self) -> int:
        return len(self._items)
