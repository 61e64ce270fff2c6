"""Per-corner tangent and bitangent computation for normal mapping."""

from __future__ import annotations

import math
from collections.abc import Sequence

__all__ = ["compute_tangent_basis"]

Vec3 = tuple[float, float, float]


def _sub(a: Sequence[float], b: Sequence[float]) -> tuple[float, ...]:
    return tuple(x - y for x, y in zip(a, b))


def _scale(a: Sequence[float], factor: float) -> tuple[float, ...]:
    return tuple(x * factor for x in a)


def _dot(a: Sequence[float], b: Sequence[float]) -> float:
    return sum(x * y for x, y in zip(a, b))


def _cross(a: Sequence[float], b: Sequence[float]) -> Vec3:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def compute_tangent_basis(
    vertices: Sequence[Sequence[float]],
    uvs: Sequence[Sequence[float]],
    normals: Sequence[Sequence[float]],
) -> tuple[list[Vec3], list[Vec3]]:
    """Return ``(tangents, bitangents)``, one of each per triangle corner.

    Tangents are orthogonalised against the corner normal, normalised and
    flipped where needed so the basis is right-handed; bitangents are the raw
    per-triangle values.
    """
    if not len(vertices) == len(uvs) == len(normals):
        raise ValueError("vertices, uvs and normals must have the same length")
    if len(vertices) % 3:
        raise ValueError("vertex count must be a multiple of three")

    raw_tangents: list[Vec3] = []
    bitangents: list[Vec3] = []
    corners = iter(zip(vertices, uvs))
    for (v0, uv0), (v1, uv1), (v2, uv2) in zip(corners, corners, corners):
        delta_pos1, delta_pos2 = _sub(v1, v0), _sub(v2, v0)
        delta_uv1, delta_uv2 = _sub(uv1, uv0), _sub(uv2, uv0)

        determinant = delta_uv1[0] * delta_uv2[1] - delta_uv1[1] * delta_uv2[0]
        if determinant == 0:
            raise ValueError("triangle has a degenerate UV mapping")
        r = 1.0 / determinant

        tangent = _scale(_sub(_scale(delta_pos1, delta_uv2[1]), _scale(delta_pos2, delta_uv1[1])), r)
        bitangent = _scale(_sub(_scale(delta_pos2, delta_uv1[0]), _scale(delta_pos1, delta_uv2[0])), r)
        raw_tangents.extend([tangent] * 3)  # type: ignore[list-item]
        bitangents.extend([bitangent] * 3)  # type: ignore[list-item]

    tangents: list[Vec3] = []
    for normal, tangent, bitangent in zip(normals, raw_tangents, bitangents):
        orthogonal = _sub(tangent, _scale(normal, _dot(normal, tangent)))
        length = math.sqrt(_dot(orthogonal, orthogonal))
        if length == 0:
            raise ValueError("tangent is parallel to the normal")
        unit = _scale(orthogonal, 1.0 / length)
        if _dot(_cross(normal, unit), bitangent) < 0.0:
            unit = _scale(unit, -1.0)
        tangents.append(unit)  # type: ignore[arg-type]

    return tangents, bitangents