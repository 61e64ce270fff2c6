"""Merging of duplicate triangle corners into indexed vertex buffers."""

from __future__ import annotations

import struct
from collections.abc import Sequence
from dataclasses import dataclass, field
from itertools import chain

__all__ = [
    "IndexedMesh",
    "IndexedTangentMesh",
    "is_near",
    "find_similar_vertex",
    "index_vbo",
    "index_vbo_slow",
    "index_vbo_tbn",
]

Vec2 = tuple[float, float]
Vec3 = tuple[float, float, float]

_TOLERANCE = 0.01
_MAX_VERTICES = 0x10000  # indices are 16-bit


def is_near(a: float, b: float) -> bool:
    """Return True if two components can be considered equal."""
    return abs(a - b) < _TOLERANCE


def find_similar_vertex(
    vertex: Sequence[float],
    uv: Sequence[float],
    normal: Sequence[float],
    vertices: Sequence[Sequence[float]],
    uvs: Sequence[Sequence[float]],
    normals: Sequence[Sequence[float]],
) -> int | None:
    """Return the index of the first stored vertex near to the given one, or None."""
    wanted = tuple(chain(vertex, uv, normal))
    for index, candidate in enumerate(zip(vertices, uvs, normals)):
        if all(is_near(a, b) for a, b in zip(wanted, chain.from_iterable(candidate))):
            return index
    return None


@dataclass
class IndexedMesh:
    """Unique vertex attributes and the 16-bit indices that draw them."""

    indices: list[int] = field(default_factory=list)
    vertices: list[Vec3] = field(default_factory=list)
    uvs: list[Vec2] = field(default_factory=list)
    normals: list[Vec3] = field(default_factory=list)

    def _add(self, vertex: Sequence[float], uv: Sequence[float], normal: Sequence[float]) -> int:
        if len(self.vertices) >= _MAX_VERTICES:
            raise OverflowError(
                f"more than {_MAX_VERTICES} unique vertices cannot use 16-bit indices"
            )
        self.vertices.append(tuple(vertex))  # type: ignore[arg-type]
        self.uvs.append(tuple(uv))  # type: ignore[arg-type]
        self.normals.append(tuple(normal))  # type: ignore[arg-type]
        return len(self.vertices) - 1


@dataclass
class IndexedTangentMesh(IndexedMesh):
    """An indexed mesh that also carries summed tangents and bitangents."""

    tangents: list[Vec3] = field(default_factory=list)
    bitangents: list[Vec3] = field(default_factory=list)


def index_vbo_slow(
    vertices: Sequence[Sequence[float]],
    uvs: Sequence[Sequence[float]],
    normals: Sequence[Sequence[float]],
) -> IndexedMesh:
    """Index corners, merging those whose attributes are all near each other."""
    mesh = IndexedMesh()
    for vertex, uv, normal in zip(vertices, uvs, normals, strict=True):
        index = find_similar_vertex(vertex, uv, normal, mesh.vertices, mesh.uvs, mesh.normals)
        if index is None:
            index = mesh._add(vertex, uv, normal)
        mesh.indices.append(index)
    return mesh


def index_vbo(
    vertices: Sequence[Sequence[float]],
    uvs: Sequence[Sequence[float]],
    normals: Sequence[Sequence[float]],
) -> IndexedMesh:
    """Index corners, merging only those whose attributes are bitwise identical."""
    mesh = IndexedMesh()
    seen: dict[bytes, int] = {}
    for vertex, uv, normal in zip(vertices, uvs, normals, strict=True):
        key = struct.pack("<3d2d3d", *vertex, *uv, *normal)
        index = seen.get(key)
        if index is None:
            index = seen[key] = mesh._add(vertex, uv, normal)
        mesh.indices.append(index)
    return mesh


def index_vbo_tbn(
    vertices: Sequence[Sequence[float]],
    uvs: Sequence[Sequence[float]],
    normals: Sequence[Sequence[float]],
    tangents: Sequence[Sequence[float]],
    bitangents: Sequence[Sequence[float]],
) -> IndexedTangentMesh:
    """Index corners like :func:`index_vbo_slow`, summing tangents of merged corners."""
    mesh = IndexedTangentMesh()
    for vertex, uv, normal, tangent, bitangent in zip(
        vertices, uvs, normals, tangents, bitangents, strict=True
    ):
        index = find_similar_vertex(vertex, uv, normal, mesh.vertices, mesh.uvs, mesh.normals)
        if index is None:
            index = mesh._add(vertex, uv, normal)
            mesh.tangents.append(tuple(tangent))  # type: ignore[arg-type]
            mesh.bitangents.append(tuple(bitangent))  # type: ignore[arg-type]
        else:
            mesh.tangents[index] = tuple(  # type: ignore[assignment]
                a + b for a, b in zip(mesh.tangents[index], tangent)
            )
            mesh.bitangents[index] = tuple(  # type: ignore[assignment]
                a + b for a, b in zip(mesh.bitangents[index], bitangent)
            )
        mesh.indices.append(index)
    return mesh