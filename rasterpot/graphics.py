"""Software rasteriser: colour and depth buffers, triangle fill and shading."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional, Sequence

import numpy as np

_MIN_LIGHT = 0.01


def _vec(values, size):
    arr = np.asarray(values, dtype=float).reshape(-1)
    if arr.shape != (size,):
        raise ValueError(f"expected {size} components, got {arr.size}")
    return arr


@dataclass
class Vertex:
    """A triangle corner: screen position (x, y, depth), normal, UV and colour."""

    position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    normal: np.ndarray = field(default_factory=lambda: np.zeros(3))
    texcoord: np.ndarray = field(default_factory=lambda: np.zeros(2))
    color: np.ndarray = field(default_factory=lambda: np.zeros(3))

    def __post_init__(self):
        self.position = _vec(self.position, 3)
        self.normal = _vec(self.normal, 3)
        self.texcoord = _vec(self.texcoord, 2)
        self.color = _vec(self.color, 3)


@dataclass
class Material:
    """Surface description: a diffuse colour and an optional diffuse texture index."""

    diffuse_color: np.ndarray = field(default_factory=lambda: np.zeros(3))
    diffuse_map: Optional[int] = None

    def __post_init__(self):
        self.diffuse_color = _vec(self.diffuse_color, 3)


@dataclass
class ShaderContext:
    """Everything the shader needs for one triangle.

    ``textures`` holds float images of shape (height, width, channels) with
    values in [0, 1]; ``Material.diffuse_map`` indexes into it.
    """

    vertices: Sequence[Vertex]
    to_light: np.ndarray = field(default_factory=lambda: np.zeros(3))
    material: Material = field(default_factory=Material)
    textures: Sequence[np.ndarray] = ()

    def __post_init__(self):
        self.vertices = tuple(self.vertices)
        if len(self.vertices) != 3:
            raise ValueError("a triangle needs exactly three vertices")
        self.to_light = _vec(self.to_light, 3)


def signed_area(a, b, c):
    """Signed area of triangle ``abc`` in screen space (y pointing down).

    Works on single points or on arrays of points along the last axis.
    """
    a, b, c = (np.asarray(p, dtype=float) for p in (a, b, c))
    return -(
        (a[..., 1] - c[..., 1]) * (b[..., 0] - c[..., 0])
        + (b[..., 1] - c[..., 1]) * (c[..., 0] - a[..., 0])
    ) / 2


def _weights(positions, points):
    areas = np.stack(
        [
            signed_area(positions[1], positions[2], points),
            signed_area(positions[2], positions[0], points),
            signed_area(positions[0], positions[1], points),
        ],
        axis=-1,
    )
    total = areas.sum(axis=-1)
    inside = np.all(areas >= 0, axis=-1) & (total != 0)
    return areas, total, inside


def barycentric(triangle, point):
    """Barycentric weights of ``point`` in ``triangle``, or None if it lies outside."""
    positions = np.asarray(triangle, dtype=float)
    areas, total, inside = _weights(positions, np.asarray(point, dtype=float))
    if not inside:
        return None
    return areas / total


def _shade_many(ctx, weights):
    count = len(weights)
    material = ctx.material
    colors = np.zeros((count, 3))
    if material.diffuse_map is not None:
        texture = np.asarray(ctx.textures[material.diffuse_map], dtype=float)
        height, width = texture.shape[:2]
        uv = np.array([v.texcoord for v in ctx.vertices])
        xs = np.trunc((weights @ uv[:, 0]) * width)
        ys = np.trunc((1 - weights @ uv[:, 1]) * height)
        hit = (xs >= 0) & (xs < width) & (ys >= 0) & (ys < height)
        colors[hit] = texture[ys[hit].astype(int), xs[hit].astype(int), :3]
    elif np.any(material.diffuse_color != 0):
        colors[:] = material.diffuse_color
    normals = weights @ np.array([v.normal for v in ctx.vertices])
    light = normals @ ctx.to_light
    light = np.where(light > _MIN_LIGHT, light, _MIN_LIGHT)
    return colors * light[:, None]


def shade(ctx, weights):
    """Colour of the point with barycentric ``weights`` on the context's triangle."""
    return _shade_many(ctx, np.asarray(weights, dtype=float).reshape(1, 3))[0]


class Framebuffer:
    """A colour buffer of RGB floats paired with a depth buffer."""

    def __init__(self, width, height):
        if width <= 0 or height <= 0:
            raise ValueError("framebuffer dimensions must be positive")
        self.width = int(width)
        self.height = int(height)
        self.color = np.zeros((self.height, self.width, 3))
        self.depth = np.full((self.height, self.width), np.inf)

    def clear(self):
        """Reset colours to black and depths to infinity."""
        self.color.fill(0.0)
        self.depth.fill(np.inf)

    def draw_triangle(self, ctx):
        """Rasterise the context's triangle with depth testing and shading."""
        positions = np.array([v.position for v in ctx.vertices])
        low = np.maximum(positions[:, :2].min(axis=0), 0.0)
        high = np.minimum(positions[:, :2].max(axis=0), [self.width, self.height])
        if not (np.all(np.isfinite(low)) and np.all(np.isfinite(high))):
            return
        xs = np.arange(int(low[0]), math.ceil(high[0]))
        ys = np.arange(int(low[1]), math.ceil(high[1]))
        if xs.size == 0 or ys.size == 0:
            return
        grid_x, grid_y = np.meshgrid(xs, ys)
        px, py = grid_x.ravel(), grid_y.ravel()
        points = np.column_stack([px, py]).astype(float)
        areas, total, inside = _weights(positions, points)
        if not inside.any():
            return
        weights = areas[inside] / total[inside, None]
        px, py = px[inside], py[inside]
        depth = weights @ positions[:, 2]
        visible = ~(depth > self.depth[py, px])
        if not visible.any():
            return
        px, py, weights = px[visible], py[visible], weights[visible]
        self.depth[py, px] = depth[visible]
        self.color[py, px] = _shade_many(ctx, weights)