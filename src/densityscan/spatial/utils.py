"""
空间索引工具函数
"""

from typing import Iterable

from .index import ListSpatialIndex, SpatialIndex, T
from .tree_index import BallTreeSpatialIndex, KDTreeSpatialIndex

SUPPORTED_INDEX_METHODS = ('list', 'kdtree', 'balltree')


def build_spatial_index(items: Iterable[T], method: str = 'list',
                        metric: str = 'euclidean') -> SpatialIndex[T]:
    """
    构建空间索引以加速邻域查询

    Args:
        items: 要索引的记录
        method: 索引方法，支持'list'、'kdtree'或'balltree'
        metric: 距离度量方式，支持'euclidean'和'haversine'

    Returns:
        空间索引对象
    """
    if method == 'list':
        return ListSpatialIndex(items, metric=metric)

    elif method == 'kdtree':
        if metric != 'euclidean':
            raise ValueError(f"KDTree索引不支持度量方式: {metric}")
        return KDTreeSpatialIndex(items)

    elif method == 'balltree':
        return BallTreeSpatialIndex(items, metric=metric)

    else:
        raise ValueError(f"不支持的索引方法: {method}")
