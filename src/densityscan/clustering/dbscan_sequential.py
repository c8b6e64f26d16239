"""
串行DBSCAN实现
经典的密度聚类算法：点分类和区域生长
"""

import time
import warnings
from collections import deque
from dataclasses import dataclass
from typing import Iterable, List

import numpy as np

from ..spatial.index import ListSpatialIndex, SpatialIndex
from ..spatial.point import Point
from ..spatial.utils import build_spatial_index
from .models import Cluster, ClusterSet, ClusterType, PointInfo, T
from .utils import (check_all_classified, cluster_set_to_labels,
                    compute_cluster_stats, validate_parameters)

# 线性扫描索引在该点数以上给出性能警告
LIST_INDEX_WARNING_THRESHOLD = 10000


def calculate_clusters(data: Iterable[T], epsilon: float,
                       minimum_points_per_cluster: int) -> ClusterSet[T]:
    """
    使用默认的线性扫描索引运行DBSCAN

    该操作为O(N^2)，N为数据点数量。

    Args:
        data: 待聚类的对象集合
        epsilon: 邻域半径
        minimum_points_per_cluster: 形成聚类或扩展聚类所需的最小点数（包含点自身）

    Returns:
        聚类结果，包含聚类列表和未聚类对象列表
    """
    point_infos = [PointInfo(item) for item in data]

    return calculate_clusters_from_index(
        ListSpatialIndex(point_infos),
        epsilon,
        minimum_points_per_cluster
    )


def calculate_clusters_from_index(index: SpatialIndex[PointInfo[T]], epsilon: float,
                                  minimum_points_per_cluster: int) -> ClusterSet[T]:
    """
    在预先构建好的空间索引上运行DBSCAN

    Args:
        index: 包含PointInfo记录的空间索引
        epsilon: 邻域半径
        minimum_points_per_cluster: 形成聚类或扩展聚类所需的最小点数（包含点自身）

    Returns:
        聚类结果，包含聚类列表和未聚类对象列表
    """
    validate_parameters(epsilon, minimum_points_per_cluster)

    points = index.all()
    clusters: List[Cluster[T]] = []

    for p in points:
        if p.cluster_type != ClusterType.UNKNOWN:  # 已访问的点
            continue

        candidates = index.neighbors(p, epsilon)

        if len(candidates) >= minimum_points_per_cluster:
            # 发现核心点，开始新的聚类
            clusters.append(
                _build_cluster(index, p, candidates, epsilon, minimum_points_per_cluster)
            )
        else:
            p.cluster_type = ClusterType.NOISE

    check_all_classified(points)

    return ClusterSet(
        clusters=clusters,
        unclustered_objects=[p.item for p in points if p.cluster_type == ClusterType.NOISE]
    )


def _build_cluster(index: SpatialIndex[PointInfo[T]], point: PointInfo[T],
                   neighborhood: List[PointInfo[T]], epsilon: float,
                   minimum_points_per_cluster: int) -> Cluster[T]:
    """
    从核心点出发进行广度优先的区域生长

    Args:
        index: 空间索引
        point: 种子核心点
        neighborhood: 种子点的邻域
        epsilon: 邻域半径
        minimum_points_per_cluster: 最小点数

    Returns:
        按发现顺序排列的聚类
    """
    if len(neighborhood) < minimum_points_per_cluster:
        raise RuntimeError(
            f"种子点邻域大小 {len(neighborhood)} 小于最小点数 {minimum_points_per_cluster}"
        )

    objects = [point.item]
    point.cluster_type = ClusterType.CLUSTER_CORE

    # 队列允许重复，出队时跳过已归属的点
    queue = deque(neighborhood)
    while queue:
        new_point = queue.popleft()
        if new_point.cluster_type in (ClusterType.CLUSTER_BORDER, ClusterType.CLUSTER_CORE):
            continue

        # 之前标记为噪声的点可以在这里被重新归为边界点
        new_neighbors = index.neighbors(new_point, epsilon)
        if len(new_neighbors) >= minimum_points_per_cluster:
            new_point.cluster_type = ClusterType.CLUSTER_CORE
            queue.extend(new_neighbors)
        else:
            new_point.cluster_type = ClusterType.CLUSTER_BORDER

        objects.append(new_point.item)

    return Cluster(objects=objects)


@dataclass(frozen=True)
class IndexedPoint:
    """数组中的一行，带有行索引"""

    index: int
    point: Point


class DBSCANSequential:
    """串行版本的DBSCAN聚类算法（基于numpy数组的接口）"""

    def __init__(self, eps: float = 0.5, min_samples: int = 5,
                 metric: str = 'euclidean', index: str = 'list'):
        """
        初始化DBSCAN参数

        Args:
            eps: 邻域半径（haversine度量下单位为米）
            min_samples: 核心点的最小邻居数（包含点自身）
            metric: 距离度量方式，支持'euclidean'和'haversine'
            index: 空间索引方法，支持'list'、'kdtree'和'balltree'
        """
        self.eps = eps
        self.min_samples = min_samples
        self.metric = metric
        self.index = index

        self.cluster_set_ = None
        self.labels_ = None
        self.core_sample_indices_ = None
        self.components_ = None
        self._cluster_types = []
        self.execution_time = 0

    def fit(self, points: np.ndarray) -> 'DBSCANSequential':
        """
        执行DBSCAN聚类

        Args:
            points: 形状为(n_samples, 2)的numpy数组

        Returns:
            self: 返回聚类器实例
        """
        points = np.asarray(points, dtype=np.float64)
        if points.ndim != 2 or points.shape[1] != 2:
            raise ValueError(f"输入必须是形状为(n_samples, 2)的数组，实际形状: {points.shape}")

        validate_parameters(self.eps, self.min_samples)

        n_samples = points.shape[0]
        if self.index == 'list' and n_samples > LIST_INDEX_WARNING_THRESHOLD:
            warnings.warn(f"数据点数量为 {n_samples}，线性扫描索引为O(N^2)，"
                          f"建议使用 index='kdtree' 或 index='balltree'")

        start_time = time.time()

        records = [
            PointInfo(IndexedPoint(i, Point(float(row[0]), float(row[1]))))
            for i, row in enumerate(points)
        ]
        spatial_index = build_spatial_index(records, method=self.index, metric=self.metric)

        cluster_set = calculate_clusters_from_index(spatial_index, self.eps, self.min_samples)

        # 保存结果
        self.cluster_set_ = cluster_set
        self._cluster_types = [record.cluster_type for record in records]
        self.labels_ = cluster_set_to_labels(cluster_set, n_samples)
        self.core_sample_indices_ = np.array(
            [i for i, t in enumerate(self._cluster_types) if t == ClusterType.CLUSTER_CORE],
            dtype=np.int32
        )
        self.components_ = points[self.core_sample_indices_]
        self.execution_time = time.time() - start_time

        return self

    def fit_predict(self, points: np.ndarray) -> np.ndarray:
        """
        执行聚类并返回标签

        Args:
            points: 形状为(n_samples, 2)的numpy数组

        Returns:
            标签数组，噪声为-1
        """
        return self.fit(points).labels_

    def get_cluster_stats(self) -> dict:
        """
        获取聚类统计信息

        Returns:
            包含聚类统计信息的字典
        """
        if self.labels_ is None:
            return {}

        return compute_cluster_stats(self.labels_, self._cluster_types, self.execution_time)
