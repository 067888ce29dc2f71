"""Unit tests for triangle intersection (Möller–Trumbore)."""

import math

import pytest

from core.ray import Ray
from core.vector import Vector3
from geometry.triangle import Triangle
from conftest import assert_vec_close


def floor_triangle(material, **normals):
    """Triangle in the y=0 plane, wound so its face normal points up."""
    return Triangle(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, 1.0), Vector3(1.0, 0.0, 0.0),
                    material, **normals)


class TestTriangleIntersection:
    def test_face_normal_from_winding(self, gray):
        tri = floor_triangle(gray)
        assert_vec_close(tri.face_normal, Vector3(0.0, 1.0, 0.0))
        assert_vec_close(tri.n0, Vector3(0.0, 1.0, 0.0))

    def test_hit_from_above(self, gray):
        tri = floor_triangle(gray)
        ray = Ray(Vector3(0.2, 2.0, 0.2), Vector3(0.0, -1.0, 0.0))
        rec = tri.hit(ray, 0.001, math.inf)
        assert rec is not None
        assert rec.t == pytest.approx(2.0)
        assert_vec_close(rec.p, Vector3(0.2, 0.0, 0.2))
        assert_vec_close(rec.normal, Vector3(0.0, 1.0, 0.0))
        assert rec.front_face
        assert rec.material is gray

    def test_hit_from_below_flips_normal(self, gray):
        tri = floor_triangle(gray)
        ray = Ray(Vector3(0.2, -2.0, 0.2), Vector3(0.0, 1.0, 0.0))
        rec = tri.hit(ray, 0.001, math.inf)
        assert rec is not None
        assert not rec.front_face
        assert_vec_close(rec.normal, Vector3(0.0, -1.0, 0.0))

    def test_miss_outside_edges(self, gray):
        tri = floor_triangle(gray)
        ray = Ray(Vector3(0.8, 2.0, 0.8), Vector3(0.0, -1.0, 0.0))
        assert tri.hit(ray, 0.001, math.inf) is None

    def test_parallel_ray_misses(self, gray):
        tri = floor_triangle(gray)
        ray = Ray(Vector3(-1.0, 0.0, 0.2), Vector3(1.0, 0.0, 0.0))
        assert tri.hit(ray, 0.001, math.inf) is None

    def test_behind_origin_misses(self, gray):
        tri = floor_triangle(gray)
        ray = Ray(Vector3(0.2, 2.0, 0.2), Vector3(0.0, 1.0, 0.0))
        assert tri.hit(ray, 0.001, math.inf) is None

    def test_interval_limits(self, gray):
        tri = floor_triangle(gray)
        ray = Ray(Vector3(0.2, 2.0, 0.2), Vector3(0.0, -1.0, 0.0))
        assert tri.hit(ray, 0.001, 1.5) is None
        assert tri.hit(ray, 2.5, math.inf) is None

    def test_tiny_triangle_hit_head_on(self, gray):
        tri = Triangle(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, 1e-4), Vector3(1e-4, 0.0, 0.0), gray)
        ray = Ray(Vector3(2e-5, 1.0, 2e-5), Vector3(0.0, -1.0, 0.0))
        rec = tri.hit(ray, 0.001, math.inf)
        assert rec is not None
        assert rec.t == pytest.approx(1.0)

    def test_degenerate_triangle_misses(self, gray):
        tri = Triangle(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, 0.0), Vector3(1.0, 0.0, 0.0), gray)
        ray = Ray(Vector3(0.5, 1.0, 0.0), Vector3(0.0, -1.0, 0.0))
        assert tri.hit(ray, 0.001, math.inf) is None


class TestSmoothShading:
    def test_normal_is_barycentric_blend(self, gray):
        tilt = Vector3(1.0, 1.0, 0.0).normalize()
        up = Vector3(0.0, 1.0, 0.0)
        tri = floor_triangle(gray, n0=up, n1=up, n2=tilt)
        # Directly above v2 the blend is the v2 normal.
        ray = Ray(Vector3(1.0, 3.0, 0.0), Vector3(0.0, -1.0, 0.0))
        rec = tri.hit(ray, 0.001, math.inf)
        assert rec is not None
        assert_vec_close(rec.normal, tilt, tol=1e-6)

    def test_blend_differs_from_face_normal_inside(self, gray):
        tilt = Vector3(1.0, 1.0, 0.0).normalize()
        up = Vector3(0.0, 1.0, 0.0)
        tri = floor_triangle(gray, n0=up, n1=up, n2=tilt)
        ray = Ray(Vector3(0.25, 3.0, 0.25), Vector3(0.0, -1.0, 0.0))
        rec = tri.hit(ray, 0.001, math.inf)
        expected = tri.get_normal(0.25, 0.25)
        assert_vec_close(rec.normal, expected)
        assert rec.normal.x > 0.0
        assert rec.normal.length() == pytest.approx(1.0)


class TestTriangleBoundingBox:
    def test_box_covers_vertices(self, gray):
        tri = Triangle(Vector3(0.0, 0.0, 0.0), Vector3(2.0, 1.0, 0.0), Vector3(0.0, 3.0, -1.0), gray)
        box = tri.bounding_box()
        for v in (tri.v0, tri.v1, tri.v2):
            assert box.contains(v)
        assert box.minimum.x == 0.0 and box.maximum.y == 3.0

    def test_flat_triangle_box_is_padded_and_hittable(self, gray):
        tri = floor_triangle(gray)
        box = tri.bounding_box()
        assert box.minimum.y < 0.0 < box.maximum.y
        ray = Ray(Vector3(0.2, 2.0, 0.2), Vector3(0.0, -1.0, 0.0))
        assert box.hit(ray, 0.001, math.inf)
