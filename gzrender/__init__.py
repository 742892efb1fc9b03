"""Software renderer: pixel display, triangle rasterization, transforms and a camera pipeline."""

__version__ = "0.3.0"
__all__ = ["types", "framebuffer", "rasterizer", "transforms", "renderer", "apps"]