"""
空间索引模块
邻域查询接口、线性扫描实现和基于树的加速实现
"""

from .point import Point, PointData
from .distance import euclidean_distance, haversine_distance, get_distance_function
from .index import SpatialIndex, ListSpatialIndex
from .tree_index import KDTreeSpatialIndex, BallTreeSpatialIndex
from .utils import build_spatial_index

__all__ = [
    'Point',
    'PointData',
    'euclidean_distance',
    'haversine_distance',
    'get_distance_function',
    'SpatialIndex',
    'ListSpatialIndex',
    'KDTreeSpatialIndex',
    'BallTreeSpatialIndex',
    'build_spatial_index'
]
