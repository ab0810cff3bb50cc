"""Mesh geometry: textured vertices and triangle indices."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

_UINT32_LIMIT = 2**32


def _floats(values: Iterable[float], count: int, name: str) -> tuple[float, ...]:
    result = tuple(float(v) for v in values)
    if len(result) != count:
        raise ValueError(f"{name} needs {count} components, got {len(result)}")
    return result


@dataclass(frozen=True)
class Vertex:
    """A vertex position with its texture coordinate.

    Equal vertices hash alike, so they can be deduplicated through a dict.
    """

    position: tuple[float, float, float]
    texture_coord: tuple[float, float] = (0.0, 0.0)

    def __post_init__(self) -> None:
        object.__setattr__(self, "position", _floats(self.position, 3, "position"))
        object.__setattr__(
            self, "texture_coord", _floats(self.texture_coord, 2, "texture_coord")
        )


@dataclass(frozen=True)
class Mesh:
    """Immutable vertices and the indices that join them into triangles."""

    vertices: tuple[Vertex, ...]
    indices: tuple[int, ...]

    def __post_init__(self) -> None:
        vertices = tuple(self.vertices)
        for vertex in vertices:
            if not isinstance(vertex, Vertex):
                raise TypeError(f"expected Vertex, got {type(vertex).__name__}")
        indices = tuple(self.indices)
        for index in indices:
            if not isinstance(index, int) or isinstance(index, bool):
                raise TypeError(f"index {index!r} is not an int")
            if not 0 <= index < _UINT32_LIMIT:
                raise ValueError(f"index {index} is outside the unsigned 32-bit range")
        object.__setattr__(self, "vertices", vertices)
        object.__setattr__(self, "indices", indices)