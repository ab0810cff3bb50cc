"""Core runtime pieces of a small game engine: registry, buffers, reflection, cameras, meshes, timing."""

__version__ = "0.1.0"