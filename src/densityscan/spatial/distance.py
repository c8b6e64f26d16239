"""
距离度量函数
欧氏距离和Haversine距离（使用Numba加速）
"""

import math
from typing import Callable

from numba import jit

from .point import Point

# 地球平均半径（米）
EARTH_RADIUS_M = 6371000.0

SUPPORTED_METRICS = ('euclidean', 'haversine')


def euclidean_distance(point1: Point, point2: Point) -> float:
    """
    计算两个点之间的欧氏距离

    Args:
        point1: 第一个点
        point2: 第二个点

    Returns:
        欧氏距离
    """
    return math.hypot(point1.x - point2.x, point1.y - point2.y)


@jit(nopython=True)
def _haversine(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """使用Numba编译的Haversine公式，输入为十进制度数，返回米"""
    lat1_rad = math.radians(lat1)
    lat2_rad = math.radians(lat2)
    dlat = lat2_rad - lat1_rad
    dlon = math.radians(lon2) - math.radians(lon1)

    a = math.sin(dlat / 2) ** 2 + math.cos(lat1_rad) * math.cos(lat2_rad) * math.sin(dlon / 2) ** 2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_M * c


def haversine_distance(point1: Point, point2: Point) -> float:
    """
    计算两个地理坐标点之间的Haversine距离

    Args:
        point1: 第一个点 (x=纬度, y=经度)
        point2: 第二个点 (x=纬度, y=经度)

    Returns:
        两点之间的距离（米）
    """
    return _haversine(float(point1.x), float(point1.y), float(point2.x), float(point2.y))


def get_distance_function(metric: str) -> Callable[[Point, Point], float]:
    """
    根据度量名称返回距离函数

    Args:
        metric: 距离度量方式，支持'euclidean'和'haversine'

    Returns:
        距离函数
    """
    if metric == 'euclidean':
        return euclidean_distance
    elif metric == 'haversine':
        return haversine_distance
    else:
        raise ValueError(f"不支持的度量方式: {metric}")
