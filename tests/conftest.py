"""
pytest配置和共享fixture

提供:
- 带名称的测试点类型
- 典型数据集（网格、分离点团、共享边界点）
- 记录查询过程的空间索引
"""

from dataclasses import dataclass
from typing import List, Sequence, Tuple

import numpy as np
import pytest

from densityscan.clustering.models import ClusterType
from densityscan.spatial.index import ListSpatialIndex
from densityscan.spatial.point import Point


# ==============================================================================
# 测试点类型
# ==============================================================================

@dataclass(frozen=True)
class Location:
    """带名称的测试点"""

    name: str
    point: Point


def make_locations(coordinates: Sequence[Tuple[float, float]], prefix: str = "p") -> List[Location]:
    """按顺序创建测试点，名称为 prefix + 序号"""
    return [Location(f"{prefix}{i}", Point(x, y)) for i, (x, y) in enumerate(coordinates)]


def names(items) -> List[str]:
    """提取对象名称列表"""
    return [item.name for item in items]


class RecordingIndex(ListSpatialIndex):
    """记录每次邻域查询时查询点状态的线性扫描索引"""

    def __init__(self, items, metric: str = 'euclidean'):
        super().__init__(items, metric=metric)
        self.queries: List[Tuple[object, ClusterType]] = []

    def neighbors(self, point, epsilon):
        self.queries.append((point, point.cluster_type))
        return super().neighbors(point, epsilon)


# ==============================================================================
# 数据集
# ==============================================================================

@pytest.fixture
def grid_locations() -> List[Location]:
    """3x3单位间距网格，按行排列: p0=(0,0), p1=(1,0), ..., p8=(2,2)"""
    return make_locations([(x, y) for y in range(3) for x in range(3)])


@pytest.fixture
def two_blobs() -> List[Location]:
    """两个相距很远的密集点团，各4个点"""
    blob_a = make_locations([(0.0, 0.0), (0.0, 0.5), (0.5, 0.0), (0.5, 0.5)], prefix="a")
    blob_b = make_locations([(10.0, 10.0), (10.0, 10.5), (10.5, 10.0), (10.5, 10.5)], prefix="b")
    return blob_a + blob_b


@pytest.fixture
def shared_border():
    """
    x轴上的两个聚类和它们之间的一个边界点（eps=1.0, minPts=4）

    a组: 0.0, 0.3, 0.6, 1.0；边界点 m: 2.0；c组: 3.0, 3.4, 3.7, 4.0
    m 只有3个邻居（a3、自身、c0），两侧都能到达它。
    """
    group_a = make_locations([(0.0, 0.0), (0.3, 0.0), (0.6, 0.0), (1.0, 0.0)], prefix="a")
    middle = Location("m", Point(2.0, 0.0))
    group_c = make_locations([(3.0, 0.0), (3.4, 0.0), (3.7, 0.0), (4.0, 0.0)], prefix="c")
    return group_a, middle, group_c


@pytest.fixture
def random_locations() -> List[Location]:
    """固定随机种子的均匀分布点"""
    rng = np.random.default_rng(0)
    coordinates = rng.uniform(0.0, 10.0, size=(80, 2))
    return make_locations([(float(x), float(y)) for x, y in coordinates])


@pytest.fixture
def blob_array() -> np.ndarray:
    """两个点团加一个孤立点的数组"""
    return np.array([
        [0.0, 0.0], [0.0, 0.5], [0.5, 0.0], [0.5, 0.5],
        [10.0, 10.0], [10.0, 10.5], [10.5, 10.0], [10.5, 10.5],
        [50.0, 50.0],
    ])
