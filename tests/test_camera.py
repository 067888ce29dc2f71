"""Unit tests for camera ray generation and pixel sampling."""

import numpy as np
import pytest

from camera.camera import Camera
from camera.sampling import multi_jitter
from core.vector import Vector3
from conftest import assert_vec_close

ORIGIN = Vector3(0.0, 0.0, 0.0)


class TestCamera:
    def test_basis_looking_down_negative_z(self):
        camera = Camera(ORIGIN, Vector3(0.0, 0.0, -1.0), 2.0)
        assert_vec_close(camera.forward, Vector3(0.0, 0.0, -1.0))
        assert_vec_close(camera.right, Vector3(1.0, 0.0, 0.0))
        assert_vec_close(camera.up, Vector3(0.0, 1.0, 0.0))
        assert_vec_close(camera.viewport_top_left, Vector3(-1.0, 0.5, -1.0))

    def test_perspective_rays(self):
        camera = Camera(ORIGIN, Vector3(0.0, 0.0, -1.0), 2.0)
        center = camera.get_ray(0.5, 0.5)
        assert center.origin == ORIGIN
        assert_vec_close(center.direction, Vector3(0.0, 0.0, -1.0))
        corner = camera.get_ray(0.0, 0.0)
        assert_vec_close(corner.direction, Vector3(-1.0, 0.5, -1.0))
        bottom_right = camera.get_ray(1.0, 1.0)
        assert_vec_close(bottom_right.direction, Vector3(1.0, -0.5, -1.0))

    def test_orthographic_rays_are_parallel(self):
        camera = Camera(ORIGIN, Vector3(0.0, 0.0, -1.0), 1.0, orthographic=True)
        a = camera.get_ray(0.0, 0.0)
        b = camera.get_ray(1.0, 1.0)
        assert_vec_close(a.direction, b.direction)
        assert_vec_close(a.origin, Vector3(-0.5, 0.5, -1.0))
        assert_vec_close(b.origin, Vector3(0.5, -0.5, -1.0))

    def test_update_after_move(self):
        camera = Camera(ORIGIN, Vector3(0.0, 0.0, -1.0), 1.0)
        camera.position = Vector3(0.0, 0.0, 5.0)
        camera.look_at = Vector3(0.0, 0.0, 10.0)
        camera.update_camera()
        assert_vec_close(camera.forward, Vector3(0.0, 0.0, 1.0))
        assert_vec_close(camera.get_ray(0.5, 0.5).direction, Vector3(0.0, 0.0, 1.0))


class TestMultiJitter:
    @pytest.mark.parametrize("n", [1, 2, 4, 7])
    def test_shape_and_range(self, n, rng):
        samples = multi_jitter(n, rng)
        assert samples.shape == (n, n, 2)
        assert np.all(samples >= 0.0)
        assert np.all(samples < 1.0)

    @pytest.mark.parametrize("n", [2, 3, 5])
    def test_one_sample_per_coarse_cell(self, n, rng):
        samples = multi_jitter(n, rng)
        rows = np.floor(samples[..., 0] * n).astype(int)
        cols = np.floor(samples[..., 1] * n).astype(int)
        rr, cc = np.meshgrid(np.arange(n), np.arange(n), indexing="ij")
        np.testing.assert_array_equal(rows, rr)
        np.testing.assert_array_equal(cols, cc)

    @pytest.mark.parametrize("n", [2, 3, 5])
    def test_one_sample_per_fine_stratum(self, n, rng):
        samples = multi_jitter(n, rng)
        for axis in (0, 1):
            strata = np.floor(samples[..., axis] * n * n).astype(int).ravel()
            assert sorted(strata) == list(range(n * n))

    def test_single_sample_is_pixel_center(self, rng):
        np.testing.assert_allclose(multi_jitter(1, rng), [[[0.5, 0.5]]])

    def test_seeded(self):
        a = multi_jitter(4, np.random.default_rng(5))
        b = multi_jitter(4, np.random.default_rng(5))
        np.testing.assert_array_equal(a, b)
