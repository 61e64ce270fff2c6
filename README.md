# fpsassets

Pure-Python helpers that get the assets of a small first-person game ready for
rendering. Every function returns plain lists, tuples and dataclasses, so any
renderer can use the results. The package has no dependencies outside the
standard library.

## Modules

- **`fpsassets.objloader`** reads Wavefront OBJ files.
  - `parse_obj(text)` / `load_obj(path)` read faces written as `v/vt/vn`. They
    return an `ObjMesh` that has `vertices`, `uvs` and `normals`, one entry per
    triangle corner. The V texture coordinate is negated when it is read.
  - `parse_obj_positions(text)` / `load_obj_positions(path)` read faces written
    as `v//vn`. They return only the corner positions.
  - Only the first three corners of each face are used. Unknown statements are
    skipped. If a number is malformed, a face corner is in an unexpected form, or
    an index is out of range, `ObjFormatError` (a `ValueError`) is raised.
- **`fpsassets.vboindexer`** merges duplicate triangle corners into indexed
  buffers.
  - `index_vbo` merges corners whose position, UV and normal are exactly equal.
  - `index_vbo_slow` merges corners whose components all lie within 0.01 of each
    other (see `is_near` and `find_similar_vertex`).
  - `index_vbo_tbn` merges corners the same way as `index_vbo_slow`, and also
    adds up the tangents and bitangents of merged corners. It returns an
    `IndexedTangentMesh`.
  - The other two functions return an `IndexedMesh`, which has `indices`,
    `vertices`, `uvs` and `normals`.
  - Indices are 16-bit. If there are more than 65536 unique vertices,
    `OverflowError` is raised.
- **`fpsassets.tangentspace`**: `compute_tangent_basis(vertices, uvs, normals)`
  returns `(tangents, bitangents)`, one of each per corner. Each tangent is
  orthogonalised against its normal, normalised, and flipped where that is needed
  to keep the basis right-handed. `ValueError` is raised in these cases:
  - the input lengths do not match;
  - the number of corners is not a multiple of three;
  - a triangle has a degenerate UV mapping;
  - a tangent is parallel to its normal.
- **`fpsassets.texture`** decodes texture files.
  - `parse_bmp(data)` / `load_bmp(path)` decode uncompressed 24-bit BMP images
    into a `BmpImage`, which has `width`, `height`, `data_pos`, `image_size` and
    the raw BGR `pixels`.
  - `parse_dds(data)` / `load_dds(path)` decode DXT1, DXT3 and DXT5 DDS files
    into a `DdsTexture`. It has a `CompressedFormat` and one `DdsMipLevel` per
    mipmap level, with the compressed bytes of each level.
  - If the data is malformed or of an unsupported kind, `TextureError` (a
    `ValueError`) is raised.
- **`fpsassets.text2d`**: `build_text_geometry(text, x, y, size)` builds a
  `TextGeometry`. It holds two triangles per character, with the matching UVs in
  a 16×16 glyph atlas. A character with a code of 256 or more raises
  `ValueError`.
- **`fpsassets.gamemap`**: `GameMap(map_path, texture_path, sun_path)` loads
  three files:
  - a `v/vt/vn` map mesh;
  - its BMP texture;
  - a `v//vn` sun mesh, which is moved to `(15, 15, 15)` and then scaled by
    three.

  Its methods are:
  - `map_coords()` gives x, y, z, u, v, nx, ny, nz for each corner in one flat
    list.
  - `sun_coords()` flattens the sun positions.
  - `map_coords_size()` and `sun_coords_size()` give the entry counts.
- **`fpsassets.minimap`**: `Minimap(path)` loads a `v//vn` mesh.
  - `coords()` returns six floats per corner: x and z normalised into
    `[-1, 1]`, the height, and an RGB colour. Corners at height zero take the
    floor colour and all other corners the house colour.
  - `MinimapError` is raised in three cases: the file cannot be loaded, it has
    no vertices, or it has no extent along x or z.

## Installation

```
pip install .
```

Install the `test` extra to run the test suite:

```
pip install ".[test]"
pytest
```

## Example

```python
from fpsassets.objloader import load_obj
from fpsassets.vboindexer import index_vbo
from fpsassets.texture import load_bmp

mesh = load_obj("textures/mapv1.obj")
indexed = index_vbo(mesh.vertices, mesh.uvs, mesh.normals)
print(len(indexed.indices), "indices,", len(indexed.vertices), "unique vertices")

image = load_bmp("textures/texture.bmp")
print(image.width, image.height)
```

```python
from fpsassets.gamemap import GameMap
from fpsassets.minimap import Minimap

level = GameMap("textures/mapv1.obj", "textures/texture.bmp", "textures/sun.obj")
interleaved = level.map_coords()   # x, y, z, u, v, nx, ny, nz per corner

minimap = Minimap("textures/map2d.obj")
points = minimap.coords()          # x, z, height, r, g, b per corner
```

## What this package does not do

It only prepares data. It does not:

- open a window or read keyboard and mouse input;
- compile shaders or upload buffers and textures to a GPU;
- run a game loop or draw anything.

There is no command to start a game. Hand the lists it returns to a renderer of
your choice.