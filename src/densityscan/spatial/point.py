"""
点坐标与位置协议
"""

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class Point:
    """二维坐标点（haversine度量下 x 为纬度，y 为经度）"""

    x: float
    y: float


class PointData(Protocol):
    """可聚类对象需要满足的协议：提供一个坐标"""

    @property
    def point(self) -> Point:
        ...
