"""A small depth-buffered software rasterizer."""

__version__ = "0.1.0"
__all__ = ["camera", "graphics", "scene", "transform"]