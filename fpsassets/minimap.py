"""Flat, normalised geometry for the on-screen minimap."""

from __future__ import annotations

import os

from fpsassets.objloader import ObjFormatError, load_obj_positions

__all__ = ["MinimapError", "Minimap"]

Vec3 = tuple[float, float, float]

_HOUSE_COLOR: Vec3 = (0.44, 0.225, 0.03)
_FLOOR_COLOR: Vec3 = (0.6, 0.6, 0.6)
# The running maximum starts at the smallest positive single-precision float.
_FLT_MIN = 1.1754943508222875e-38
_FLT_MAX = 3.4028234663852886e38


class MinimapError(Exception):
    """Raised when minimap geometry cannot be loaded or produced."""


class Minimap:
    """A top-down view of a mesh, with x and z mapped into ``[-1, 1]``."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        try:
            self.vertices: list[Vec3] = load_obj_positions(path)
        except (OSError, ObjFormatError) as exc:
            raise MinimapError(f"error loading minimap from {path}") from exc
        self.house_color: Vec3 = _HOUSE_COLOR
        self.floor_color: Vec3 = _FLOOR_COLOR

    def coords(self) -> list[float]:
        """Return six floats per corner: normalised x, normalised z, height, colour.

        Corners at height zero take the floor colour, all others the house colour.
        """
        if not self.vertices:
            raise MinimapError("error retrieving minimap coordinates: no vertices")

        xs = [x for x, _, _ in self.vertices]
        zs = [z for _, _, z in self.vertices]
        low_x, high_x = min(_FLT_MAX, *xs), max(_FLT_MIN, *xs)
        low_z, high_z = min(_FLT_MAX, *zs), max(_FLT_MIN, *zs)
        if high_x == low_x or high_z == low_z:
            raise MinimapError("minimap has no extent along the x or z axis")

        result: list[float] = []
        for x, y, z in self.vertices:
            color = self.floor_color if y == 0.0 else self.house_color
            result += [
                2 * (x - low_x) / (high_x - low_x) - 1,
                2 * (z - low_z) / (high_z - low_z) - 1,
                y,
                *color,
            ]
        return result