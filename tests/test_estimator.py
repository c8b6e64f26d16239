"""
DBSCANSequential单元测试

测试基于numpy数组的接口：标签、核心点、统计信息和输入校验。
"""

import numpy as np
import pytest

from densityscan.clustering import dbscan_sequential
from densityscan.clustering.dbscan_sequential import DBSCANSequential, IndexedPoint
from densityscan.data_processing.loader import generate_test_data


class TestDBSCANSequential:
    """数组接口的聚类结果"""

    def test_labels_for_blobs_and_noise(self, blob_array):
        dbscan = DBSCANSequential(eps=1.0, min_samples=4).fit(blob_array)

        np.testing.assert_array_equal(dbscan.labels_, [0, 0, 0, 0, 1, 1, 1, 1, -1])
        assert dbscan.labels_.dtype == np.int32

    def test_core_samples_and_components(self, blob_array):
        dbscan = DBSCANSequential(eps=1.0, min_samples=4).fit(blob_array)

        np.testing.assert_array_equal(dbscan.core_sample_indices_, np.arange(8))
        np.testing.assert_array_equal(dbscan.components_, blob_array[:8])

    def test_cluster_set_holds_row_indices(self, blob_array):
        dbscan = DBSCANSequential(eps=1.0, min_samples=4).fit(blob_array)

        cluster_set = dbscan.cluster_set_
        assert all(isinstance(obj, IndexedPoint) for obj in cluster_set.clusters[0])
        assert [obj.index for obj in cluster_set.unclustered_objects] == [8]

    def test_fit_predict(self, blob_array):
        dbscan = DBSCANSequential(eps=1.0, min_samples=4)
        labels = dbscan.fit_predict(blob_array)

        np.testing.assert_array_equal(labels, dbscan.labels_)

    def test_cluster_stats(self, blob_array):
        dbscan = DBSCANSequential(eps=1.0, min_samples=4).fit(blob_array)
        stats = dbscan.get_cluster_stats()

        assert stats['n_clusters'] == 2
        assert stats['n_noise'] == 1
        assert stats['n_core_points'] == 8
        assert stats['n_border_points'] == 0
        assert stats['cluster_sizes'] == {0: 4, 1: 4}
        assert stats['execution_time'] >= 0

    def test_stats_before_fit(self):
        assert DBSCANSequential().get_cluster_stats() == {}

    def test_grid_core_and_border_counts(self):
        """3x3网格：5个核心点，4个角点为边界点"""
        grid = np.array([[x, y] for y in range(3) for x in range(3)], dtype=float)
        dbscan = DBSCANSequential(eps=1.0, min_samples=4).fit(grid)
        stats = dbscan.get_cluster_stats()

        np.testing.assert_array_equal(dbscan.labels_, np.zeros(9))
        assert stats['n_core_points'] == 5
        assert stats['n_border_points'] == 4
        np.testing.assert_array_equal(dbscan.core_sample_indices_, [1, 3, 4, 5, 7])

    def test_empty_input(self):
        dbscan = DBSCANSequential(eps=1.0, min_samples=4).fit(np.empty((0, 2)))

        assert len(dbscan.labels_) == 0
        assert dbscan.components_.shape == (0, 2)
        assert dbscan.get_cluster_stats()['n_clusters'] == 0

    @pytest.mark.parametrize("index", ['kdtree', 'balltree'])
    def test_accelerated_indexes_match_list(self, index):
        points = generate_test_data(300, n_centers=4, spread=0.4, seed=1)

        reference = DBSCANSequential(eps=0.3, min_samples=5, index='list').fit_predict(points)
        accelerated = DBSCANSequential(eps=0.3, min_samples=5, index=index).fit_predict(points)

        np.testing.assert_array_equal(accelerated, reference)

    def test_haversine_with_balltree(self):
        """经纬度坐标，eps单位为米"""
        rng = np.random.default_rng(3)
        points = np.vstack([
            np.array([39.90, 116.40]) + rng.uniform(0.0, 0.002, size=(10, 2)),
            np.array([39.95, 116.45]) + rng.uniform(0.0, 0.002, size=(10, 2)),
            [[40.50, 117.00]],
        ])

        labels = DBSCANSequential(eps=500.0, min_samples=4, metric='haversine',
                                  index='balltree').fit_predict(points)
        reference = DBSCANSequential(eps=500.0, min_samples=4, metric='haversine',
                                     index='list').fit_predict(points)

        np.testing.assert_array_equal(labels, reference)
        np.testing.assert_array_equal(labels, [0] * 10 + [1] * 10 + [-1])


class TestDBSCANSequentialValidation:
    """输入和参数校验"""

    @pytest.mark.parametrize("points", [
        np.zeros((5, 3)),
        np.zeros(5),
        np.zeros((2, 2, 2)),
    ])
    def test_invalid_shape(self, points):
        with pytest.raises(ValueError):
            DBSCANSequential().fit(points)

    def test_invalid_eps(self, blob_array):
        with pytest.raises(ValueError):
            DBSCANSequential(eps=-1.0).fit(blob_array)

    def test_invalid_min_samples(self, blob_array):
        with pytest.raises(ValueError):
            DBSCANSequential(min_samples=0).fit(blob_array)

    def test_invalid_index_method(self, blob_array):
        with pytest.raises(ValueError):
            DBSCANSequential(index='rtree').fit(blob_array)

    def test_invalid_metric(self, blob_array):
        with pytest.raises(ValueError):
            DBSCANSequential(metric='cosine').fit(blob_array)

    def test_large_input_warning_for_list_index(self, blob_array, monkeypatch):
        monkeypatch.setattr(dbscan_sequential, 'LIST_INDEX_WARNING_THRESHOLD', 5)

        with pytest.warns(UserWarning, match="kdtree"):
            DBSCANSequential(eps=1.0, min_samples=4).fit(blob_array)
