"""
聚类工具函数
参数校验、不变量检查、标签转换和聚类统计
"""

import math
import numbers
from typing import Dict, Iterable, List, Sequence

import numpy as np

from .models import ClusterSet, ClusterType, PointInfo

# 噪声点的标签
NOISE_LABEL = -1


def validate_parameters(epsilon: float, minimum_points_per_cluster: int) -> None:
    """
    校验DBSCAN参数

    Args:
        epsilon: 邻域半径，必须为非负数
        minimum_points_per_cluster: 最小点数（包含点自身），必须为正整数

    Raises:
        ValueError: 参数不合法
    """
    if isinstance(epsilon, bool) or not isinstance(epsilon, numbers.Real):
        raise ValueError(f"epsilon必须是数值: {epsilon!r}")
    if math.isnan(epsilon) or epsilon < 0:
        raise ValueError(f"epsilon必须是非负数: {epsilon}")

    if (isinstance(minimum_points_per_cluster, bool)
            or not isinstance(minimum_points_per_cluster, numbers.Integral)):
        raise ValueError(f"minimum_points_per_cluster必须是整数: {minimum_points_per_cluster!r}")
    if minimum_points_per_cluster < 1:
        raise ValueError(f"minimum_points_per_cluster必须大于等于1: {minimum_points_per_cluster}")


def check_all_classified(points: Iterable[PointInfo]) -> None:
    """
    检查聚类结束后所有点都已分类

    Raises:
        RuntimeError: 存在仍为UNKNOWN的点（内部逻辑错误）
    """
    unknown = [p for p in points if p.cluster_type == ClusterType.UNKNOWN]
    if unknown:
        raise RuntimeError(f"聚类结束后仍有 {len(unknown)} 个点未分类")


def cluster_set_to_labels(cluster_set: ClusterSet, n_samples: int) -> np.ndarray:
    """
    将以行索引为对象的聚类结果转换为标签数组

    Args:
        cluster_set: 聚类结果，对象需带有index属性
        n_samples: 总样本数

    Returns:
        标签数组，聚类编号从0开始，噪声为-1
    """
    labels = np.full(n_samples, NOISE_LABEL, dtype=np.int32)

    for cluster_id, cluster in enumerate(cluster_set.clusters):
        for obj in cluster:
            labels[obj.index] = cluster_id

    return labels


def compute_cluster_stats(labels: np.ndarray, cluster_types: Sequence[ClusterType],
                          execution_time: float = 0.0) -> Dict:
    """
    计算聚类统计信息

    Args:
        labels: 标签数组
        cluster_types: 每个点最终的分类
        execution_time: 聚类耗时（秒）

    Returns:
        包含聚类统计信息的字典
    """
    cluster_labels: List[int] = [int(label) for label in np.unique(labels) if label != NOISE_LABEL]

    stats = {
        'n_clusters': len(cluster_labels),
        'n_noise': int(np.sum(labels == NOISE_LABEL)),
        'n_core_points': sum(1 for t in cluster_types if t == ClusterType.CLUSTER_CORE),
        'n_border_points': sum(1 for t in cluster_types if t == ClusterType.CLUSTER_BORDER),
        'execution_time': execution_time,
        'cluster_sizes': {}
    }

    for label in cluster_labels:
        stats['cluster_sizes'][label] = int(np.sum(labels == label))

    return stats
