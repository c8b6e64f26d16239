"""
点数据加载器
从CSV文件加载坐标，或生成用于测试的合成数据
"""

import warnings
from pathlib import Path
from typing import Optional, Sequence, Tuple, Union

import numpy as np
import pandas as pd


def load_points_csv(file_path: Union[str, Path],
                    columns: Sequence[str] = ('x', 'y'),
                    nrows: Optional[int] = None) -> np.ndarray:
    """
    从CSV文件加载点坐标

    Args:
        file_path: CSV文件路径（需包含表头）
        columns: 两个坐标列的列名，haversine度量下为(纬度列, 经度列)
        nrows: 限制加载的行数

    Returns:
        形状为(n_samples, 2)的numpy数组
    """
    if len(columns) != 2:
        raise ValueError(f"需要正好两个坐标列，实际为: {list(columns)}")

    df = pd.read_csv(file_path, nrows=nrows)

    missing = [col for col in columns if col not in df.columns]
    if missing:
        raise ValueError(f"CSV文件 {file_path} 缺少列: {missing}")

    coordinates = df[list(columns)].apply(pd.to_numeric, errors='coerce')

    n_invalid = int(coordinates.isna().any(axis=1).sum())
    if n_invalid > 0:
        warnings.warn(f"跳过 {n_invalid} 行缺失或无效的坐标")
        coordinates = coordinates.dropna()

    return coordinates.to_numpy(dtype=np.float64)


def generate_test_data(n_points: int, n_centers: int = 3, spread: float = 0.5,
                       data_range: Tuple[float, float] = (0.0, 10.0),
                       seed: int = 42) -> np.ndarray:
    """
    生成测试数据（围绕随机中心的高斯分布点团）

    Args:
        n_points: 点数
        n_centers: 点团数量
        spread: 每个点团的标准差
        data_range: 点团中心的取值范围
        seed: 随机种子

    Returns:
        形状为(n_points, 2)的测试数据数组
    """
    if n_points < 0:
        raise ValueError(f"点数不能为负数: {n_points}")
    if n_centers < 1:
        raise ValueError(f"点团数量必须大于等于1: {n_centers}")

    rng = np.random.default_rng(seed)
    centers = rng.uniform(low=data_range[0], high=data_range[1], size=(n_centers, 2))

    # 每个点随机分配到一个中心
    assignments = rng.integers(0, n_centers, size=n_points)
    points = centers[assignments] + rng.normal(scale=spread, size=(n_points, 2))

    return points
