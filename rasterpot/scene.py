"""Scene rendering: model placement, camera projection and the per-frame draw."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

import numpy as np

from rasterpot.graphics import ShaderContext, Vertex
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

NEAR_PLANE = 0.1
FAR_PLANE = 10.0


@dataclass
class Model:
    """A mesh with its placement in the world.

    ``faces`` lists corners as (position, texcoord, normal) indices counted
    from 1; every three consecutive corners form one triangle.
    """

    positions: np.ndarray
    texcoords: np.ndarray
    normals: np.ndarray
    faces: List[Tuple[int, int, int]]
    material: int = 0
    position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    yaw: float = 0.0
    pitch: float = 0.0
    roll: float = 0.0

    def __post_init__(self):
        self.positions = np.asarray(self.positions, dtype=float).reshape(-1, 3)
        self.texcoords = np.asarray(self.texcoords, dtype=float).reshape(-1, 2)
        self.normals = np.asarray(self.normals, dtype=float).reshape(-1, 3)
        self.faces = [tuple(int(i) for i in corner) for corner in self.faces]
        self.position = np.asarray(self.position, dtype=float).reshape(3).copy()

    def matrix(self):
        """Model-to-world transform: translation, then roll, pitch and yaw."""
        m = translate(identity(), self.position)
        m = rotate_z(m, math.radians(self.roll))
        m = rotate_x(m, math.radians(self.pitch))
        return rotate_y(m, math.radians(self.yaw))


def view_projection(camera, aspect):
    """Combined projection and view matrix for ``camera``."""
    proj = perspective(math.radians(camera.fovy), aspect, NEAR_PLANE, FAR_PLANE)
    view = look_at(camera.position, camera.position + camera.direction, [0.0, 1.0, 0.0])
    return proj @ view


def _lookup(table, index, what):
    row = index - 1
    if not 0 <= row < len(table):
        raise IndexError(f"{what} index {index} out of range")
    return table[row]


def _triangles(model):
    if len(model.faces) % 3:
        raise ValueError("face corner count is not a multiple of three")
    for start in range(0, len(model.faces), 3):
        yield model.faces[start:start + 3]


def _corner(model, corner, transform, model_m):
    pos_idx, tex_idx, norm_idx = corner
    position = _lookup(model.positions, pos_idx, "position")
    texcoord = _lookup(model.texcoords, tex_idx, "texcoord")
    normal = _lookup(model.normals, norm_idx, "normal")
    clip = transform @ np.append(position, 1.0)
    ndc = clip / clip[3]
    world_normal = normalize((model_m @ np.append(normal, 0.0))[:3])
    return Vertex(position=ndc[:3], normal=world_normal, texcoord=texcoord)


def _to_screen(vertex, width, height):
    x, y, depth = vertex.position
    vertex.position = np.array(
        [x * width / 2 + width // 2, -y * height / 2 + height // 2, depth]
    )
    vertex.normal = vertex.normal * np.array([1.0, -1.0, 1.0])


def render(framebuffer, camera, models: Sequence[Model], materials, textures, light):
    """Draw ``models`` into ``framebuffer`` and return the finished image.

    The framebuffer is cleared after the image is copied out, ready for the
    next frame.
    """
    aspect = framebuffer.width / framebuffer.height
    vp = view_projection(camera, aspect)
    to_light = -np.asarray(light, dtype=float)
    box_high = np.array([aspect, 1.0, 1.0])
    box_low = -box_high

    for model in models:
        model_m = model.matrix()
        transform = vp @ model_m
        material = materials[model.material]
        for triangle in _triangles(model):
            vertices = [_corner(model, c, transform, model_m) for c in triangle]
            if not any(
                np.all((v.position >= box_low) & (v.position <= box_high))
                for v in vertices
            ):
                continue
            for vertex in vertices:
                _to_screen(vertex, framebuffer.width, framebuffer.height)
            ctx = ShaderContext(
                vertices=vertices,
                to_light=to_light,
                material=material,
                textures=textures,
            )
            framebuffer.draw_triangle(ctx)

    image = framebuffer.color.copy()
    framebuffer.clear()
    return image