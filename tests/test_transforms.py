import math

import numpy as np
import pytest

from softrender.transforms import (
    get_view_matrix,
    identity_model_matrix,
    perspective_matrix,
    reversed_z_perspective_matrix,
    rotation_z_matrix,
    spot_model_matrix,
    spot_projection_matrix,
)


def ndc(matrix, point):
    clip = matrix @ np.append(np.asarray(point, dtype=float), 1.0)
    return clip[:3] / clip[3]


def test_view_moves_eye_to_origin():
    view = get_view_matrix((1, 2, 3))
    np.testing.assert_allclose(view @ np.array([1, 2, 3, 1.0]), [0, 0, 0, 1])


def test_view_keeps_directions():
    view = get_view_matrix((4, -5, 6))
    np.testing.assert_allclose(view @ np.array([1, 0, 0, 0.0]), [1, 0, 0, 0])


def test_rotation_zero_is_identity():
    np.testing.assert_allclose(rotation_z_matrix(0), np.identity(4))


def test_rotation_quarter_turn_maps_x_to_y():
    m = rotation_z_matrix(90)
    np.testing.assert_allclose(m @ np.array([1, 0, 0, 1.0]), [0, 1, 0, 1], atol=1e-12)


@pytest.mark.parametrize("angle", [10, 45, 123, -70])
def test_rotation_is_orthonormal(angle):
    m = rotation_z_matrix(angle)
    np.testing.assert_allclose(m @ m.T, np.identity(4), atol=1e-12)
    assert math.isclose(np.linalg.det(m), 1.0)


def test_rotation_composes():
    np.testing.assert_allclose(
        rotation_z_matrix(30) @ rotation_z_matrix(40), rotation_z_matrix(70), atol=1e-12
    )


@pytest.mark.parametrize("angle", [0, 45, 300])
def test_identity_model_ignores_angle(angle):
    np.testing.assert_array_equal(identity_model_matrix(angle), np.identity(4))


def test_spot_model_without_rotation_is_scale():
    np.testing.assert_allclose(spot_model_matrix(0), np.diag([2.5, 2.5, 2.5, 1.0]))


@pytest.mark.parametrize("angle", [30, 140, -90])
def test_spot_model_scales_lengths(angle):
    m = spot_model_matrix(angle)
    v = m @ np.array([1, 0, 0, 0.0])
    assert math.isclose(np.linalg.norm(v[:3]), 2.5)
    assert v[1] == 0


@pytest.mark.parametrize("near,far", [(0.1, 50), (1, 10), (2, 100)])
def test_perspective_maps_near_and_far(near, far):
    m = perspective_matrix(45, 1, near, far)
    assert math.isclose(ndc(m, (0, 0, near))[2], 1.0)
    assert math.isclose(ndc(m, (0, 0, far))[2], -1.0)


def test_perspective_aspect_ratio_scales_x():
    m = perspective_matrix(60, 2, 0.1, 50)
    assert math.isclose(m[0, 0] * 2, m[1, 1])


@pytest.mark.parametrize("near,far", [(0.1, 50), (1, 10)])
def test_reversed_z_maps_negative_planes(near, far):
    m = reversed_z_perspective_matrix(45, 1, near, far)
    assert math.isclose(ndc(m, (0, 0, -near))[2], 1.0)
    assert math.isclose(ndc(m, (0, 0, -far))[2], -1.0)


def test_spot_projection_flips_image():
    spot = spot_projection_matrix(45, 1, 0.1, 50)
    plain = perspective_matrix(45, 1, 0.1, 50)
    np.testing.assert_allclose(spot[0], -plain[0])
    np.testing.assert_allclose(spot[1], -plain[1])
    np.testing.assert_allclose(spot[3], plain[3])


@pytest.mark.parametrize(
    "build", [perspective_matrix, reversed_z_perspective_matrix, spot_projection_matrix]
)
def test_equal_planes_raise(build):
    with pytest.raises(ValueError):
        build(45, 1, 5, 5)


@pytest.mark.parametrize(
    "build", [perspective_matrix, reversed_z_perspective_matrix, spot_projection_matrix]
)
def test_zero_fov_raises(build):
    with pytest.raises(ValueError):
        build(0, 1, 0.1, 50)