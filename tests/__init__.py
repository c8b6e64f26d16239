"""densityscan测试包

- test_dbscan.py: 聚类引擎（点分类、区域生长、结果划分）
- test_spatial_index.py: 空间索引和距离度量
- test_estimator.py: 基于数组的DBSCANSequential接口
- test_loader.py: 数据加载和测试数据生成
"""
