"""Triangle meshes for the basic solids: cone, cylinder and cube.

Each builder returns a :class:`MeshData` with per-vertex positions, normals,
tangents, bitangents and texture coordinates, a flat triangle index list and
the bounds of the mesh.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np

from meshgeom.bounds import BoundingBox, BoundingSphere

_Z_AXIS = np.array([0.0, 0.0, 1.0])


@dataclass
class MeshData:
    """Vertex attributes, triangle indices and bounds of a generated mesh."""

    name: str
    positions: np.ndarray
    normals: np.ndarray
    tangents: np.ndarray
    bitangents: np.ndarray
    tex_coords: np.ndarray
    indices: np.ndarray
    bounding_box: BoundingBox = field(default_factory=BoundingBox)
    bounding_sphere: BoundingSphere = field(default_factory=BoundingSphere)

    @property
    def vertex_count(self) -> int:
        return len(self.positions)

    @property
    def triangles(self) -> np.ndarray:
        """The indices grouped three to a row."""
        return self.indices.reshape(-1, 3)


def _check_grid(slices: int, stacks: int) -> None:
    if slices < 1:
        raise ValueError(f"slices must be at least 1, got {slices}")
    if stacks < 1:
        raise ValueError(f"stacks must be at least 1, got {stacks}")


def _normalize_rows(vectors: np.ndarray) -> np.ndarray:
    lengths = np.linalg.norm(vectors, axis=-1, keepdims=True)
    safe = np.where(lengths > 0.0, lengths, 1.0)
    return np.where(lengths > 0.0, vectors / safe, 0.0)


def _side_indices(slices: int, stacks: int) -> list[int]:
    indices: list[int] = []
    for i in range(slices):
        start = i * (stacks + 1)
        following = (i + 1) * (stacks + 1)
        for j in range(stacks):
            indices += [
                following + j + 1,
                start + j + 1,
                start + j,
                following + j + 1,
                start + j,
                following + j,
            ]
    return indices


def _cap_ring(
    radius: float, z: float, slices: int, normal_z: float, mirror_s: bool
) -> tuple[np.ndarray, ...]:
    """Rim vertices of a flat cap at height ``z`` facing ``normal_z``."""
    theta = np.arange(slices + 1) * (2.0 * math.pi / slices)
    nx, ny = np.cos(theta), np.sin(theta)
    count = slices + 1
    positions = np.column_stack([radius * nx, radius * ny, np.full(count, z)])
    normals = np.tile([0.0, 0.0, normal_z], (count, 1))
    tangents = _normalize_rows(np.column_stack([radius * nx, radius * ny, np.zeros(count)]))
    bitangents = np.cross(tangents, np.array([0.0, 0.0, normal_z]))
    s = ((-nx if mirror_s else nx) + 1.0) * 0.5
    t = (ny + 1.0) * 0.5
    tex = np.column_stack([s, t])
    return positions, normals, tangents, bitangents, tex


def _cap_center(z: float, normal_z: float) -> tuple[np.ndarray, ...]:
    return (
        np.array([[0.0, 0.0, z]]),
        np.array([[0.0, 0.0, normal_z]]),
        np.array([[1.0, 0.0, z]]),
        np.array([[0.0, 1.0, z]]),
        np.array([[0.5, 0.5]]),
    )


def _assemble(name: str, parts: list[tuple[np.ndarray, ...]], indices: list[int]) -> MeshData:
    positions, normals, tangents, bitangents, tex = (
        np.vstack([part[k] for part in parts]) for k in range(5)
    )
    return MeshData(
        name=name,
        positions=positions,
        normals=normals,
        tangents=tangents,
        bitangents=bitangents,
        tex_coords=tex,
        indices=np.asarray(indices, dtype=np.uint32),
    )


def _bounds_from_points(mesh: MeshData, sphere_radius: float) -> None:
    lo = mesh.positions.min(axis=0)
    hi = mesh.positions.max(axis=0)
    mesh.bounding_box = BoundingBox(lo[0], hi[0], lo[1], hi[1], lo[2], hi[2])
    cx, cy, cz = mesh.bounding_box.center()
    mesh.bounding_sphere = BoundingSphere(cx, cy, cz, sphere_radius)


def _side_grid(slices: int, stacks: int, s_max: float, t_max: float):
    theta = np.arange(slices + 1) * (2.0 * math.pi / slices)
    s = np.arange(slices + 1) / slices * s_max
    t = np.arange(stacks + 1) / stacks * t_max
    ss, tt = np.meshgrid(s, t, indexing="ij")
    tex = np.column_stack([ss.ravel(), tt.ravel()])
    return theta, tex


def make_cone(
    radius: float,
    height: float,
    slices: int,
    stacks: int,
    s_max: float = 1,
    t_max: float = 1,
) -> MeshData:
    """A cone with its base centred at z = -height/2 and apex at z = height/2."""
    _check_grid(slices, stacks)
    radius, height = float(radius), float(height)
    theta, tex = _side_grid(slices, stacks, s_max, t_max)
    phi = np.arange(stacks + 1) * (height / stacks)
    slope = math.tan(math.atan(radius / height))

    ring = radius - phi * slope
    nx, ny = np.cos(theta)[:, None], np.sin(theta)[:, None]
    x = ring[None, :] * nx
    y = ring[None, :] * ny
    z = np.broadcast_to(phi[None, :] - height / 2.0, x.shape)
    positions = np.stack([x, y, z], axis=-1)

    axis_distance = np.sqrt(x * x + y * y)
    raw_normals = _normalize_rows(np.stack([x, y, slope * axis_distance], axis=-1))
    normals = raw_normals.copy()
    normals[:, -1] = normals[:, -2]
    tangents = np.broadcast_to(_Z_AXIS, positions.shape)
    bitangents = np.cross(raw_normals, _Z_AXIS)

    side = tuple(
        a.reshape(-1, 3) for a in (positions, normals, tangents, bitangents)
    ) + (tex,)
    parts = [side, _cap_ring(radius, -height / 2.0, slices, -1.0, True), _cap_center(-height / 2.0, -1.0)]

    indices = _side_indices(slices, stacks)
    base = (slices + 1) * (stacks + 1)
    center = base + slices + 1
    for j in range(base, base + slices):
        indices += [j, center, j + 1]

    mesh = _assemble("Cone", parts, indices)
    _bounds_from_points(mesh, math.sqrt(radius * radius + (height / 2.0) ** 2))
    return mesh


def make_cylinder(
    radius: float,
    height: float,
    slices: int,
    stacks: int,
    s_max: float = 1,
    t_max: float = 1,
) -> MeshData:
    """A closed cylinder about the z axis, centred at the origin."""
    _check_grid(slices, stacks)
    radius, height = float(radius), float(height)
    theta, tex = _side_grid(slices, stacks, s_max, t_max)
    phi = np.arange(stacks + 1) * (1.0 / stacks)

    nx, ny = np.cos(theta)[:, None], np.sin(theta)[:, None]
    x = np.broadcast_to(nx * radius, (slices + 1, stacks + 1))
    y = np.broadcast_to(ny * radius, (slices + 1, stacks + 1))
    z = np.broadcast_to(phi[None, :] * height - height / 2.0, x.shape)
    positions = np.stack([x, y, z], axis=-1)
    normals = _normalize_rows(np.stack([x, y, np.zeros_like(x)], axis=-1))
    tangents = np.broadcast_to(_Z_AXIS, positions.shape)
    bitangents = np.cross(normals, _Z_AXIS)

    side = tuple(
        a.reshape(-1, 3) for a in (positions, normals, tangents, bitangents)
    ) + (tex,)
    half = height / 2.0
    bottom_center = _cap_center(-half, -half - 1.0)
    parts = [
        side,
        _cap_ring(radius, -half, slices, -1.0, True),
        bottom_center,
        _cap_ring(radius, half, slices, 1.0, False),
        _cap_center(half, 1.0),
    ]

    indices = _side_indices(slices, stacks)
    base = (slices + 1) * (stacks + 1)
    bottom_center_index = base + slices + 1
    for j in range(base, base + slices):
        indices += [j, bottom_center_index, j + 1]
    top_center_index = base + 2 * slices + 3
    top_start = base + slices + 2
    for j in range(top_start, top_start + slices):
        indices += [j, j + 1, top_center_index]

    mesh = _assemble("Cylinder", parts, indices)
    _bounds_from_points(mesh, math.sqrt(radius * radius + half * half))
    return mesh


def _per_face(values_per_face: list[tuple[float, ...]]) -> np.ndarray:
    return np.array([value for value in values_per_face for _ in range(4)], dtype=float)


def make_cube(size: float = 1.0) -> MeshData:
    """An axis-aligned cube of edge ``size`` centred at the origin."""
    side = float(size) / 2.0
    a = side
    positions = np.array(
        [
            # Front
            (-a, -a, a), (-a, -a, -a), (a, -a, -a), (a, -a, a),
            # Right
            (a, -a, a), (a, -a, -a), (a, a, -a), (a, a, a),
            # Back
            (-a, a, a), (a, a, a), (a, a, -a), (-a, a, -a),
            # Left
            (-a, -a, a), (-a, a, a), (-a, a, -a), (-a, -a, -a),
            # Bottom
            (-a, -a, -a), (-a, a, -a), (a, a, -a), (a, -a, -a),
            # Top
            (-a, -a, a), (a, -a, a), (a, a, a), (-a, a, a),
        ],
        dtype=float,
    )
    normals = _per_face(
        [(0, -1, 0), (1, 0, 0), (0, 1, 0), (-1, 0, 0), (0, 0, -1), (0, 0, 1)]
    )
    tangents = _per_face(
        [(1, 0, 0), (0, 1, 0), (-1, 0, 0), (0, 1, 0), (0, 1, 0), (1, 0, 0)]
    )
    bitangents = _per_face(
        [(0, 0, -1), (0, 0, 1), (0, 0, 1), (0, 0, -1), (1, 0, 0), (0, 1, 0)]
    )
    tex = np.tile([(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)], (6, 1))
    indices = [
        index
        for face in range(6)
        for index in (4 * face, 4 * face + 1, 4 * face + 2, 4 * face, 4 * face + 2, 4 * face + 3)
    ]
    mesh = MeshData(
        name="Cube",
        positions=positions,
        normals=normals,
        tangents=tangents,
        bitangents=bitangents,
        tex_coords=tex,
        indices=np.asarray(indices, dtype=np.uint32),
    )
    mesh.bounding_sphere = BoundingSphere(0.0, 0.0, 0.0, math.sqrt(3) * (float(size) / 2))
    mesh.bounding_box = BoundingBox(-side, side, -side, side, -side, side)
    return mesh