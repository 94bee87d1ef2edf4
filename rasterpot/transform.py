"""Homogeneous 4x4 transforms for a right-handed, OpenGL-style pipeline.

Matrices act on column vectors, so ``matrix @ point`` transforms a point and
every builder composes on the right: ``translate(m, v)`` is ``m @ T(v)``.
"""

import math

import numpy as np

_EPSILON = float(np.finfo(np.float32).eps)


def identity():
    """Return a fresh 4x4 identity matrix."""
    return np.eye(4)


def translate(matrix, offset):
    """Return ``matrix`` followed on the right by a translation by ``offset``."""
    step = np.eye(4)
    step[:3, 3] = np.asarray(offset, dtype=float).reshape(-1)[:3]
    return np.asarray(matrix, dtype=float) @ step


def _rotation(first, second, angle):
    rot = np.eye(4)
    c, s = math.cos(angle), math.sin(angle)
    rot[first, first] = c
    rot[first, second] = -s
    rot[second, first] = s
    rot[second, second] = c
    return rot


def rotate_x(matrix, angle):
    """Return ``matrix`` followed by a rotation of ``angle`` radians about X."""
    return np.asarray(matrix, dtype=float) @ _rotation(1, 2, angle)


def rotate_y(matrix, angle):
    """Return ``matrix`` followed by a rotation of ``angle`` radians about Y."""
    return np.asarray(matrix, dtype=float) @ _rotation(2, 0, angle)


def rotate_z(matrix, angle):
    """Return ``matrix`` followed by a rotation of ``angle`` radians about Z."""
    return np.asarray(matrix, dtype=float) @ _rotation(0, 1, angle)


def perspective(fovy, aspect, near, far):
    """Build a perspective projection mapping depth ``[-near, -far]`` to ``[-1, 1]``."""
    if aspect == 0 or near == far:
        raise ValueError("degenerate perspective: aspect must be non-zero and near != far")
    focal = 1.0 / math.tan(fovy / 2)
    inverse_depth = 1.0 / (near - far)
    proj = np.zeros((4, 4))
    proj[0, 0] = focal / aspect
    proj[1, 1] = focal
    proj[2, 2] = (near + far) * inverse_depth
    proj[2, 3] = 2 * near * far * inverse_depth
    proj[3, 2] = -1.0
    return proj


def normalize(vector):
    """Return ``vector`` scaled to unit length, or zeros if it is too short."""
    vec = np.asarray(vector, dtype=float)
    length = float(np.linalg.norm(vec))
    if length < _EPSILON:
        return np.zeros_like(vec)
    return vec / length


def look_at(eye, center, up):
    """Build a view matrix placing ``eye`` at the origin looking towards ``center``."""
    eye = np.asarray(eye, dtype=float)
    forward = normalize(np.asarray(center, dtype=float) - eye)
    side = normalize(np.cross(forward, np.asarray(up, dtype=float)))
    upward = np.cross(side, forward)
    view = np.eye(4)
    view[0, :3] = side
    view[1, :3] = upward
    view[2, :3] = -forward
    view[0, 3] = -side @ eye
    view[1, 3] = -upward @ eye
    view[2, 3] = forward @ eye
    return view