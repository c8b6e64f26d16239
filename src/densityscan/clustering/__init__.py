"""
聚类算法模块
包含DBSCAN聚类引擎、点记录和聚类结果结构
"""

from .models import ClusterType, PointInfo, Cluster, ClusterSet
from .dbscan_sequential import (DBSCANSequential, IndexedPoint, calculate_clusters,
                                calculate_clusters_from_index)
from .utils import validate_parameters, cluster_set_to_labels, compute_cluster_stats

__all__ = [
    'ClusterType',
    'PointInfo',
    'Cluster',
    'ClusterSet',
    'DBSCANSequential',
    'IndexedPoint',
    'calculate_clusters',
    'calculate_clusters_from_index',
    'validate_parameters',
    'cluster_set_to_labels',
    'compute_cluster_stats'
]
