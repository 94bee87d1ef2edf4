import math

import numpy as np
import pytest

from rasterpot.transform import (
    identity,
    look_at,
    normalize,
    perspective,
    rotate_x,
    rotate_y,
    rotate_z,
    translate,
)


def _apply(matrix, point):
    vec = np.append(np.asarray(point, dtype=float), 1.0)
    out = matrix @ vec
    return out[:3] / out[3]


def test_identity_leaves_points_unchanged():
    point = [1.5, -2.0, 7.0]
    assert np.allclose(_apply(identity(), point), point)


def test_translate_moves_point_by_offset():
    point = np.array([1.0, 2.0, 3.0])
    offset = np.array([0.5, -4.0, 5.0])
    assert np.allclose(_apply(translate(identity(), offset), point), point + offset)


def test_translate_does_not_modify_input():
    base = identity()
    translate(base, [1, 2, 3])
    assert np.array_equal(base, np.eye(4))


@pytest.mark.parametrize("rotate", [rotate_x, rotate_y, rotate_z])
def test_rotation_then_inverse_is_identity(rotate):
    angle = 0.73
    back = rotate(rotate(identity(), angle), -angle)
    assert np.allclose(back, identity())


@pytest.mark.parametrize("rotate", [rotate_x, rotate_y, rotate_z])
def test_rotation_preserves_length(rotate):
    point = np.array([3.0, -1.0, 2.0])
    moved = _apply(rotate(identity(), 1.1), point)
    assert np.linalg.norm(moved) == pytest.approx(np.linalg.norm(point))


def test_rotate_y_quarter_turn_sends_x_to_minus_z():
    moved = _apply(rotate_y(identity(), math.pi / 2), [1, 0, 0])
    assert np.allclose(moved, [0, 0, -1])


def test_rotate_x_quarter_turn_sends_y_to_z():
    moved = _apply(rotate_x(identity(), math.pi / 2), [0, 1, 0])
    assert np.allclose(moved, [0, 0, 1])


def test_rotate_z_full_turn_is_identity():
    assert np.allclose(rotate_z(identity(), 2 * math.pi), identity())


def test_perspective_maps_near_and_far_planes_to_ndc_bounds():
    near, far = 0.1, 10.0
    proj = perspective(math.pi / 2, 4 / 3, near, far)
    z_near = _apply(proj, [0, 0, -near])[2]
    z_far = _apply(proj, [0, 0, -far])[2]
    assert z_near == pytest.approx(-1.0)
    assert z_far == pytest.approx(-z_near)


def test_perspective_frustum_edge_meets_far_plane_value():
    fovy, near, far = math.pi / 3, 0.1, 10.0
    proj = perspective(fovy, 1.0, near, far)
    depth = 5.0
    edge = _apply(proj, [0, depth * math.tan(fovy / 2), -depth])
    far_point = _apply(proj, [0, 0, -far])
    assert edge[1] == pytest.approx(far_point[2])


def test_perspective_aspect_scales_x():
    proj_wide = perspective(math.pi / 2, 2.0, 0.1, 10.0)
    proj_square = perspective(math.pi / 2, 1.0, 0.1, 10.0)
    point = [1.0, 1.0, -3.0]
    assert _apply(proj_wide, point)[0] * 2 == pytest.approx(_apply(proj_square, point)[0])


def test_perspective_rejects_degenerate_planes():
    with pytest.raises(ValueError):
        perspective(math.pi / 2, 1.0, 1.0, 1.0)


def test_look_at_puts_eye_at_origin_and_center_on_negative_z():
    eye = np.array([1.0, 2.0, 3.0])
    center = np.array([4.0, 2.0, 7.0])
    view = look_at(eye, center, [0, 1, 0])
    assert np.allclose(_apply(view, eye), np.zeros(3))
    distance = np.linalg.norm(center - eye)
    assert np.allclose(_apply(view, center), [0, 0, -distance])


def test_look_at_rotation_is_orthonormal():
    view = look_at([0, 0, 0], [1, 2, 3], [0, 1, 0])
    rot = view[:3, :3]
    assert np.allclose(rot @ rot.T, np.eye(3))


def test_normalize_gives_unit_vector_in_same_direction():
    vec = np.array([3.0, 4.0, 12.0])
    unit = normalize(vec)
    assert np.linalg.norm(unit) == pytest.approx(1.0)
    assert np.allclose(np.cross(unit, vec), np.zeros(3))


def test_normalize_zero_vector_stays_zero():
    assert np.array_equal(normalize([0.0, 0.0, 0.0]), np.zeros(3))