"""Bounding volumes, materials, a camera, parametric surfaces and primitive meshes for 3D viewers."""

__version__ = "0.1.0"

__all__ = ["bounds", "material", "camera", "surfaces", "primitives"]