"""Tests for the numpy matrix builders."""

import math

import numpy as np
import pytest

from maps.errors import NotSimilarityError, SingularMatrixError
from maps.geometry import matrix
from maps.geometry.point import Point


def test_builders_apply_after_existing_matrix():
    m = matrix.identity()
    m = matrix.shift(m, 1.0, 0.0)
    m = matrix.scale(m, 2.0, 2.0)

    # Shift first, then scale: (0, 0) -> (1, 0) -> (2, 0).
    assert matrix.transform_point(Point(0.0, 0.0), m) == Point(2.0, 0.0)


def test_rotate_is_counter_clockwise():
    m = matrix.rotate_angle(matrix.identity(), math.pi / 2)
    assert matrix.transform_point(Point(1.0, 0.0), m).almost_equal(Point(0.0, 1.0), 1e-12)


def test_translation_lives_in_last_row():
    m = matrix.shift(matrix.identity(), 7.0, -3.0)
    assert m[2, 0] == 7.0
    assert m[2, 1] == -3.0


def test_inverse_round_trips():
    m = matrix.shift(matrix.rotate_angle(matrix.scale(matrix.identity(), 3.0, 3.0), 0.4), 5.0, 6.0)
    np.testing.assert_allclose(m @ matrix.inverse(m), np.identity(3), atol=1e-12)


def test_inverse_of_singular_matrix_raises():
    with pytest.raises(SingularMatrixError):
        matrix.inverse(np.zeros((3, 3)))


def test_inverse_rejects_non_finite_values():
    m = matrix.identity()
    m[0, 0] = math.inf
    with pytest.raises(SingularMatrixError):
        matrix.inverse(m)


def test_as_matrix_validates_shape():
    assert matrix.as_matrix([[1, 0, 0], [0, 1, 0], [0, 0, 1]]).dtype == np.float64
    with pytest.raises(ValueError):
        matrix.as_matrix([[1, 0], [0, 1]])


class TestCheckSimilarity:
    def test_accepts_rotation_scale_shift(self):
        m = matrix.shift(matrix.scale(matrix.rotate_angle(matrix.identity(), 1.1), 4.0, 4.0), 3.0, 2.0)
        matrix.check_similarity(m)

    def test_accepts_axis_flip(self):
        matrix.check_similarity(matrix.scale(matrix.identity(), 0.5, -0.5))

    def test_rejects_shear(self):
        sheared = np.array([[1.0, 0.0, 0.0], [0.5, 1.0, 0.0], [0.0, 0.0, 1.0]])
        with pytest.raises(NotSimilarityError):
            matrix.check_similarity(sheared)

    def test_rejects_uneven_scale(self):
        with pytest.raises(NotSimilarityError):
            matrix.check_similarity(matrix.scale(matrix.identity(), 2.0, 1.0))

    def test_rejects_projective_column(self):
        m = matrix.identity()
        m[0, 2] = 0.01
        with pytest.raises(NotSimilarityError):
            matrix.check_similarity(m)

    def test_rejects_collapsed_axis(self):
        with pytest.raises(NotSimilarityError):
            matrix.check_similarity(matrix.scale(matrix.identity(), 0.0, 0.0))
