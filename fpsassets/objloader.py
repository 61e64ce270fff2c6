"""Reading of Wavefront OBJ meshes into flat, per-corner triangle lists."""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import TypeVar

__all__ = [
    "ObjFormatError",
    "ObjMesh",
    "parse_obj",
    "parse_obj_positions",
    "load_obj",
    "load_obj_positions",
]

logger = logging.getLogger(__name__)

Vec2 = tuple[float, float]
Vec3 = tuple[float, float, float]

_T = TypeVar("_T")

_FULL_CORNER = re.compile(r"([+-]?\d+)/([+-]?\d+)/([+-]?\d+)")
_POSITION_CORNER = re.compile(r"([+-]?\d+)//([+-]?\d+)")


class ObjFormatError(ValueError):
    """Raised when an OBJ document cannot be read by this simple parser."""


@dataclass
class ObjMesh:
    """Triangle corners with one position, UV and normal per corner."""

    vertices: list[Vec3] = field(default_factory=list)
    uvs: list[Vec2] = field(default_factory=list)
    normals: list[Vec3] = field(default_factory=list)


def _statements(text: str) -> Iterator[tuple[int, str, list[str]]]:
    for lineno, line in enumerate(text.splitlines(), start=1):
        words = line.split()
        if words:
            yield lineno, words[0], words[1:]


def _floats(args: Sequence[str], count: int, keyword: str, lineno: int) -> tuple[float, ...]:
    if len(args) < count:
        raise ObjFormatError(
            f"line {lineno}: '{keyword}' needs {count} numbers, got {len(args)}"
        )
    try:
        return tuple(float(arg) for arg in args[:count])
    except ValueError as exc:
        raise ObjFormatError(f"line {lineno}: bad number in '{keyword}' statement") from exc


def _face(args: Sequence[str], pattern: re.Pattern[str], lineno: int) -> list[tuple[int, ...]]:
    """Return the index groups of the first three corners of a face."""
    if len(args) < 3:
        raise ObjFormatError(f"line {lineno}: a face needs three corners")
    corners = []
    for token in args[:3]:
        match = pattern.fullmatch(token)
        if match is None:
            raise ObjFormatError(
                f"line {lineno}: face corner {token!r} can't be read by this simple "
                "parser; try exporting with other options"
            )
        corners.append(tuple(int(group) for group in match.groups()))
    return corners


def _lookup(items: Sequence[_T], index: int, kind: str) -> _T:
    if not 1 <= index <= len(items):
        raise ObjFormatError(f"{kind} index {index} is out of range 1..{len(items)}")
    return items[index - 1]


def parse_obj(text: str) -> ObjMesh:
    """Parse an OBJ document whose faces are written as ``v/vt/vn`` triangles.

    The V texture coordinate is negated on reading. Only the first three
    corners of a face are used.
    """
    positions: list[Vec3] = []
    uvs: list[Vec2] = []
    normals: list[Vec3] = []
    corners: list[tuple[int, ...]] = []

    for lineno, keyword, args in _statements(text):
        if keyword == "v":
            positions.append(_floats(args, 3, keyword, lineno))  # type: ignore[arg-type]
        elif keyword == "vt":
            u, v = _floats(args, 2, keyword, lineno)
            uvs.append((u, -v))
        elif keyword == "vn":
            normals.append(_floats(args, 3, keyword, lineno))  # type: ignore[arg-type]
        elif keyword == "f":
            corners.extend(_face(args, _FULL_CORNER, lineno))

    return ObjMesh(
        vertices=[_lookup(positions, v, "vertex") for v, _, _ in corners],
        uvs=[_lookup(uvs, t, "uv") for _, t, _ in corners],
        normals=[_lookup(normals, n, "normal") for _, _, n in corners],
    )


def parse_obj_positions(text: str) -> list[Vec3]:
    """Parse an OBJ document whose faces are written as ``v//vn`` triangles.

    Only positions are returned, one per triangle corner.
    """
    positions: list[Vec3] = []
    corners: list[tuple[int, ...]] = []

    for lineno, keyword, args in _statements(text):
        if keyword == "v":
            positions.append(_floats(args, 3, keyword, lineno))  # type: ignore[arg-type]
        elif keyword == "f":
            corners.extend(_face(args, _POSITION_CORNER, lineno))

    return [_lookup(positions, v, "vertex") for v, _ in corners]


def load_obj(path: str | os.PathLike[str]) -> ObjMesh:
    """Read and parse a ``v/vt/vn`` OBJ file."""
    logger.info("Loading OBJ file %s", path)
    return parse_obj(Path(path).read_text())


def load_obj_positions(path: str | os.PathLike[str]) -> list[Vec3]:
    """Read a ``v//vn`` OBJ file and return its triangle corner positions."""
    logger.info("Loading OBJ file %s", path)
    return parse_obj_positions(Path(path).read_text())