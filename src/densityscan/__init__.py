"""
densityscan: DBSCAN密度聚类库
"""

from .spatial import (Point, PointData, SpatialIndex, ListSpatialIndex,
                      KDTreeSpatialIndex, BallTreeSpatialIndex, build_spatial_index)
from .clustering import (ClusterType, PointInfo, Cluster, ClusterSet, DBSCANSequential,
                         calculate_clusters, calculate_clusters_from_index)

__version__ = '0.1.0'

__all__ = [
    'Point',
    'PointData',
    'SpatialIndex',
    'ListSpatialIndex',
    'KDTreeSpatialIndex',
    'BallTreeSpatialIndex',
    'build_spatial_index',
    'ClusterType',
    'PointInfo',
    'Cluster',
    'ClusterSet',
    'DBSCANSequential',
    'calculate_clusters',
    'calculate_clusters_from_index'
]
