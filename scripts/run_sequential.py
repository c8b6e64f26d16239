#!/usr/bin/env python3
"""
运行串行DBSCAN聚类算法
从CSV加载坐标（或生成合成数据），输出聚类统计并保存结果
"""

import sys
from pathlib import Path

# 添加src目录到Python路径
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

import numpy as np
import time
import argparse
import json
from typing import Any, Dict, Optional

from densityscan.clustering.dbscan_sequential import DBSCANSequential
from densityscan.data_processing.loader import load_points_csv, generate_test_data


def load_data(data_path: Optional[str], x_column: str, y_column: str,
              n_points: int) -> np.ndarray:
    """
    加载点数据

    Args:
        data_path: CSV文件路径，为None时生成合成数据
        x_column: 第一个坐标列名
        y_column: 第二个坐标列名
        n_points: 合成数据的点数

    Returns:
        点数据数组
    """
    print("=" * 60)
    print("数据加载")
    print("=" * 60)

    start_time = time.time()

    if data_path:
        print(f"加载文件: {data_path}")
        points = load_points_csv(data_path, columns=(x_column, y_column))
    else:
        print(f"生成 {n_points} 个测试点...")
        points = generate_test_data(n_points)

    if len(points) == 0:
        raise ValueError("没有加载到任何点数据")

    print(f"加载了 {len(points)} 个点")
    print(f"数据加载耗时: {time.time() - start_time:.2f} 秒")

    return points


def run_sequential_dbscan(points: np.ndarray,
                          eps: float = 0.5,
                          min_samples: int = 5,
                          metric: str = 'euclidean',
                          index: str = 'list') -> Dict[str, Any]:
    """
    运行串行DBSCAN算法

    Args:
        points: 点数据
        eps: 邻域半径
        min_samples: 最小样本数（包含点自身）
        metric: 距离度量
        index: 空间索引方法

    Returns:
        聚类结果和性能数据
    """
    print("\n" + "=" * 60)
    print("运行串行DBSCAN聚类")
    print("=" * 60)

    print(f"算法参数:")
    print(f"  eps (邻域半径): {eps}")
    print(f"  min_samples (最小样本数): {min_samples}")
    print(f"  metric (距离度量): {metric}")
    print(f"  index (空间索引): {index}")
    print(f"  数据点数量: {len(points)}")

    dbscan = DBSCANSequential(
        eps=eps,
        min_samples=min_samples,
        metric=metric,
        index=index
    )
    dbscan.fit(points)

    stats = dbscan.get_cluster_stats()

    print(f"\n聚类结果:")
    print(f"  聚类数量: {stats['n_clusters']}")
    print(f"  核心点数量: {stats['n_core_points']}")
    print(f"  边界点数量: {stats['n_border_points']}")
    print(f"  噪声点数量: {stats['n_noise']}")
    print(f"  总点数: {len(points)}")

    if stats['cluster_sizes']:
        print(f"  聚类大小分布:")
        for label, size in list(stats['cluster_sizes'].items())[:10]:  # 显示前10个聚类
            print(f"    聚类 {label}: {size} 个点")
        if len(stats['cluster_sizes']) > 10:
            print(f"    ... 还有 {len(stats['cluster_sizes']) - 10} 个聚类")

    print(f"\n执行时间: {stats['execution_time']:.4f} 秒")

    return {
        'algorithm': 'DBSCAN_Sequential',
        'parameters': {
            'eps': eps,
            'min_samples': min_samples,
            'metric': metric,
            'index': index,
            'n_points': len(points)
        },
        'results': {
            'n_clusters': stats['n_clusters'],
            'n_core_points': stats['n_core_points'],
            'n_border_points': stats['n_border_points'],
            'n_noise': stats['n_noise'],
            'cluster_sizes': stats['cluster_sizes'],
            'labels': dbscan.labels_.tolist()
        },
        'performance': {
            'execution_time': stats['execution_time']
        }
    }


def save_results(result: Dict[str, Any], output_dir: str = "./results") -> None:
    """
    保存聚类结果

    Args:
        result: 聚类结果
        output_dir: 输出目录
    """
    output_path = Path(output_dir)
    output_path.mkdir(parents=True, exist_ok=True)

    result_file = output_path / "sequential_results.json"
    with open(result_file, 'w', encoding='utf-8') as f:
        json.dump(result, f, indent=2, default=str)

    summary_file = output_path / "sequential_summary.txt"
    with open(summary_file, 'w', encoding='utf-8') as f:
        f.write("串行DBSCAN聚类结果摘要\n")
        f.write("=" * 50 + "\n\n")

        f.write("算法参数:\n")
        for key, value in result['parameters'].items():
            f.write(f"  {key}: {value}\n")

        f.write("\n聚类结果:\n")
        f.write(f"  聚类数量: {result['results']['n_clusters']}\n")
        f.write(f"  核心点数量: {result['results']['n_core_points']}\n")
        f.write(f"  边界点数量: {result['results']['n_border_points']}\n")
        f.write(f"  噪声点数量: {result['results']['n_noise']}\n")

        f.write("\n性能统计:\n")
        f.write(f"  执行时间: {result['performance']['execution_time']:.4f} 秒\n")

    print(f"结果已保存到: {result_file}")
    print(f"摘要已保存到: {summary_file}")


def main():
    """主函数"""
    parser = argparse.ArgumentParser(description='运行串行DBSCAN聚类算法')
    parser.add_argument('--data', type=str,
                        help='CSV数据文件路径（不指定时生成合成数据）')
    parser.add_argument('--x-column', type=str, default='x',
                        help='第一个坐标列名（haversine度量下为纬度，默认: x）')
    parser.add_argument('--y-column', type=str, default='y',
                        help='第二个坐标列名（haversine度量下为经度，默认: y）')
    parser.add_argument('--n-points', type=int, default=1000,
                        help='合成数据点数（默认: 1000）')
    parser.add_argument('--eps', type=float, default=0.5,
                        help='DBSCAN邻域半径（默认: 0.5）')
    parser.add_argument('--min-samples', type=int, default=5,
                        help='DBSCAN最小样本数，包含点自身（默认: 5）')
    parser.add_argument('--metric', type=str, default='euclidean',
                        choices=['euclidean', 'haversine'],
                        help='距离度量方式（默认: euclidean）')
    parser.add_argument('--index', type=str, default='list',
                        choices=['list', 'kdtree', 'balltree'],
                        help='空间索引方法（默认: list）')
    parser.add_argument('--output-dir', type=str, default='./results/sequential',
                        help='输出目录（默认: ./results/sequential）')

    args = parser.parse_args()

    try:
        print("串行DBSCAN聚类算法")
        print("=" * 60)

        # 1. 加载数据
        points = load_data(args.data, args.x_column, args.y_column, args.n_points)

        # 2. 运行串行DBSCAN
        result = run_sequential_dbscan(
            points,
            eps=args.eps,
            min_samples=args.min_samples,
            metric=args.metric,
            index=args.index
        )

        # 3. 保存结果
        save_results(result, args.output_dir)

        print("\n" + "=" * 60)
        print("串行DBSCAN聚类完成")
        print("=" * 60)

        print(f"\n聚类摘要:")
        print(f"  数据点: {len(points)}")
        print(f"  聚类数: {result['results']['n_clusters']}")
        print(f"  噪声点: {result['results']['n_noise']}")
        print(f"  执行时间: {result['performance']['execution_time']:.4f} 秒")

    except Exception as e:
        print(f"错误: {e}")
        import traceback
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
