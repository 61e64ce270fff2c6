"""Screen-space quads for drawing text from a 16x16 glyph atlas."""

from __future__ import annotations

from dataclasses import dataclass, field

__all__ = ["TextGeometry", "build_text_geometry"]

Vec2 = tuple[float, float]

_CELLS = 16
_CELL = 1.0 / _CELLS


@dataclass
class TextGeometry:
    """Two triangles per character: positions and matching atlas UVs."""

    vertices: list[Vec2] = field(default_factory=list)
    uvs: list[Vec2] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.vertices)


def build_text_geometry(text: str, x: int, y: int, size: int) -> TextGeometry:
    """Lay out ``text`` from ``(x, y)`` with square glyphs of side ``size``.

    Each character code selects a cell of a 16x16 atlas, so codes must be
    below 256.
    """
    geometry = TextGeometry()
    for i, character in enumerate(text):
        code = ord(character)
        if code >= _CELLS * _CELLS:
            raise ValueError(f"character {character!r} is not in the glyph atlas")

        left = float(x + i * size)
        right = left + size
        bottom = float(y)
        top = bottom + size
        up_left, up_right = (left, top), (right, top)
        down_left, down_right = (left, bottom), (right, bottom)
        geometry.vertices += [up_left, down_left, up_right, down_right, up_right, down_left]

        uv_x = (code % _CELLS) / _CELLS
        uv_y = (code // _CELLS) / _CELLS
        uv_up_left, uv_up_right = (uv_x, uv_y), (uv_x + _CELL, uv_y)
        uv_down_left, uv_down_right = (uv_x, uv_y + _CELL), (uv_x + _CELL, uv_y + _CELL)
        geometry.uvs += [
            uv_up_left, uv_down_left, uv_up_right,
            uv_down_right, uv_up_right, uv_down_left,
        ]
    return geometry