"""Loading of OBJ meshes and BMP/DDS textures, and preparation of vertex, text, map and minimap data for a small first-person game."""

__version__ = "0.1.0"
__all__ = ["gamemap", "minimap", "objloader", "tangentspace", "text2d", "texture", "vboindexer"]