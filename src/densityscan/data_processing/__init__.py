"""
数据处理模块
点坐标的加载和测试数据生成
"""

from .loader import load_points_csv, generate_test_data

__all__ = [
    'load_points_csv',
    'generate_test_data'
]
