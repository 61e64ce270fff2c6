import math

import pytest

from fpsassets.tangentspace import compute_tangent_basis

VERTICES = [(0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (0.0, 1.0, 0.0)]
UVS = [(0.0, 0.0), (1.0, 0.0), (0.0, 1.0)]
NORMALS = [(0.0, 0.0, 1.0)] * 3


def _dot(a, b):
    return sum(x * y for x, y in zip(a, b))


def _cross(a, b):
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def test_axis_aligned_triangle():
    tangents, bitangents = compute_tangent_basis(VERTICES, UVS, NORMALS)
    assert tangents == [pytest.approx((1.0, 0.0, 0.0))] * 3
    assert bitangents == [pytest.approx((0.0, 1.0, 0.0))] * 3


def test_output_lengths_match_input():
    vertices = VERTICES * 2
    tangents, bitangents = compute_tangent_basis(vertices, UVS * 2, NORMALS * 2)
    assert len(tangents) == len(vertices)
    assert len(bitangents) == len(vertices)


def test_mirrored_uvs_keep_basis_right_handed():
    uvs = [(0.0, 0.0), (1.0, 0.0), (0.0, -1.0)]
    tangents, bitangents = compute_tangent_basis(VERTICES, uvs, NORMALS)
    for normal, tangent, bitangent in zip(NORMALS, tangents, bitangents):
        assert _dot(_cross(normal, tangent), bitangent) >= 0.0
    assert tangents[0] == pytest.approx((-1.0, 0.0, 0.0))


def test_tangents_are_orthonormal_to_tilted_normals():
    normals = [(0.6, 0.0, 0.8)] * 3
    tangents, _ = compute_tangent_basis(VERTICES, UVS, normals)
    for normal, tangent in zip(normals, tangents):
        assert _dot(normal, tangent) == pytest.approx(0.0, abs=1e-12)
        assert math.sqrt(_dot(tangent, tangent)) == pytest.approx(1.0)


def test_bitangents_are_not_normalised():
    vertices = [(0.0, 0.0, 0.0), (2.0, 0.0, 0.0), (0.0, 2.0, 0.0)]
    _, bitangents = compute_tangent_basis(vertices, UVS, NORMALS)
    assert bitangents[0] == pytest.approx(vertices[2])


def test_degenerate_uvs_raise():
    with pytest.raises(ValueError):
        compute_tangent_basis(VERTICES, [(0.0, 0.0)] * 3, NORMALS)


def test_tangent_parallel_to_normal_raises():
    with pytest.raises(ValueError):
        compute_tangent_basis(VERTICES, UVS, [(1.0, 0.0, 0.0)] * 3)


def test_vertex_count_must_be_multiple_of_three():
    with pytest.raises(ValueError):
        compute_tangent_basis(VERTICES[:2], UVS[:2], NORMALS[:2])


def test_mismatched_lengths_raise():
    with pytest.raises(ValueError):
        compute_tangent_basis(VERTICES, UVS[:2], NORMALS)