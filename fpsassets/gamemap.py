"""The level geometry: the textured map mesh and the sun that lights it."""

from __future__ import annotations

import os

from fpsassets.objloader import load_obj, load_obj_positions
from fpsassets.texture import BmpImage, load_bmp

__all__ = ["GameMap"]

Vec3 = tuple[float, float, float]

_SUN_POSITION: Vec3 = (15.0, 15.0, 15.0)
_SUN_SCALE = 3.0


class GameMap:
    """A map mesh with its BMP texture, plus a sun mesh placed around it.

    The sun mesh is moved to the sun position and then scaled by three.
    Loading errors from the OBJ and BMP readers propagate unchanged.
    """

    def __init__(
        self,
        map_path: str | os.PathLike[str],
        texture_path: str | os.PathLike[str],
        sun_path: str | os.PathLike[str],
    ) -> None:
        self.sun_position: Vec3 = _SUN_POSITION
        self.mesh = load_obj(map_path)
        self.texture: BmpImage = load_bmp(texture_path)
        self.sun_vertices: list[Vec3] = [
            tuple((c + offset) * _SUN_SCALE for c, offset in zip(vertex, self.sun_position))  # type: ignore[misc]
            for vertex in load_obj_positions(sun_path)
        ]

    def map_coords(self) -> list[float]:
        """Interleave position, UV and normal of every map corner into one flat list."""
        return [
            component
            for vertex, uv, normal in zip(self.mesh.vertices, self.mesh.uvs, self.mesh.normals)
            for component in (*vertex, *uv, *normal)
        ]

    def sun_coords(self) -> list[float]:
        """Flatten the placed sun corner positions."""
        return [component for vertex in self.sun_vertices for component in vertex]

    def map_coords_size(self) -> int:
        """Total number of position, UV and normal entries of the map mesh."""
        return len(self.mesh.vertices) + len(self.mesh.uvs) + len(self.mesh.normals)

    def sun_coords_size(self) -> int:
        """Number of sun corners."""
        return len(self.sun_vertices)