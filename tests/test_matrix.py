"""Tests for the 4x4 transform helpers."""

import math
import numpy as np
import pytest
from libray.core.errors import InvalidGeometryError
from libray.core.matrix import (
    as_transform, identity, inverse, rotation_x, rotation_y, rotation_z, scaling,
    transform_point, transform_vector, translation,
)
from libray.core.ray import Ray
from libray.core.vector import Vector3
from libray.geometry.clock import clock_points


class TestTransforms:

    def test_translation_moves_points(self):
        m = translation(5, -3, 2)
        assert transform_point(m, Vector3(-3, 4, 5)) == Vector3(2, 1, 7)

    def test_translation_leaves_vectors(self):
        m = translation(5, -3, 2)
        assert transform_vector(m, Vector3(-3, 4, 5)) == Vector3(-3, 4, 5)

    def test_inverse_translation(self):
        m = inverse(translation(5, -3, 2))
        assert transform_point(m, Vector3(-3, 4, 5)).isclose(Vector3(-8, 7, 3))

    def test_scaling(self):
        m = scaling(2, 3, 4)
        assert transform_point(m, Vector3(-4, 6, 8)) == Vector3(-8, 18, 32)
        assert transform_vector(inverse(m), Vector3(-4, 6, 8)).isclose(Vector3(-2, 2, 2))

    def test_reflection_by_negative_scale(self):
        m = scaling(-1, 1, 1)
        assert transform_vector(inverse(m), Vector3(2, 3, 4)).isclose(Vector3(-2, 3, 4))

    def test_rotations_quarter_turn(self):
        quarter = math.pi / 2
        assert transform_point(rotation_x(quarter), Vector3(0, 1, 0)).isclose(Vector3(0, 0, 1))
        assert transform_point(rotation_y(quarter), Vector3(0, 0, 1)).isclose(Vector3(1, 0, 0))
        assert transform_point(rotation_z(quarter), Vector3(0, 1, 0)).isclose(Vector3(-1, 0, 0))

    def test_chained_transform_applies_right_to_left(self):
        m = translation(10, 5, 7) @ scaling(5, 5, 5) @ rotation_x(math.pi / 2)
        assert transform_point(m, Vector3(1, 0, 1)).isclose(Vector3(15, 0, 7))

    def test_rotation_matches_clock_points(self):
        center = Vector3(50, 50, 0)
        expected = clock_points(center, 35.0, 12)
        for i, point in enumerate(expected):
            m = translation(50, 50, 0) @ rotation_z(i * math.pi / 6) @ scaling(35, 35, 1)
            assert transform_point(m, Vector3(1, 0, 0)).isclose(point)

    def test_inverse_round_trip(self):
        m = translation(1, 2, 3) @ rotation_y(0.3) @ scaling(2, 0.5, 4)
        np.testing.assert_allclose(m @ inverse(m), identity(), atol=1e-12)

    def test_singular_matrix_rejected(self):
        with pytest.raises(InvalidGeometryError):
            inverse(scaling(1, 0, 1))

    @pytest.mark.parametrize("matrix", [np.identity(3), np.full((4, 4), np.nan)])
    def test_bad_shape_or_entries_rejected(self, matrix):
        with pytest.raises(InvalidGeometryError):
            as_transform(matrix)


class TestRayTransform:

    def test_translate_ray(self):
        ray = Ray(Vector3(1, 2, 3), Vector3(0, 1, 0)).transform(translation(3, 4, 5))
        assert ray.origin == Vector3(4, 6, 8)
        assert ray.direction == Vector3(0, 1, 0)

    def test_scale_ray(self):
        ray = Ray(Vector3(1, 2, 3), Vector3(0, 1, 0)).transform(scaling(2, 3, 4))
        assert ray.origin == Vector3(2, 6, 12)
        assert ray.direction == Vector3(0, 3, 0)

    def test_original_ray_unchanged(self):
        ray = Ray(Vector3(1, 2, 3), Vector3(0, 1, 0))
        ray.transform(scaling(2, 3, 4))
        assert ray.origin == Vector3(1, 2, 3)
