"""Axis-aligned boxes and bounding spheres used to bound meshes."""

from __future__ import annotations

from typing import NamedTuple, Sequence

import numpy as np

FLOAT_MAX = float(np.finfo(np.float32).max)

_TOUCH_TOLERANCE = 0.00000001


def _vec(values: Sequence[float]) -> np.ndarray:
    array = np.asarray(values, dtype=float)
    if array.shape != (3,):
        raise ValueError(f"expected a 3-component vector, got shape {array.shape}")
    return array


def _normalized(vector: np.ndarray) -> np.ndarray:
    length = float(np.linalg.norm(vector))
    if length == 0.0:
        return np.zeros(3)
    return vector / length


def _fuzzy_equal(a: float, b: float) -> bool:
    return abs(a - b) * 100000.0 <= min(abs(a), abs(b))


class Rect(NamedTuple):
    """An integer screen rectangle."""

    x: int
    y: int
    width: int
    height: int


class Aabb:
    """Axis-aligned bounding box that grows as points and boxes are added."""

    def __init__(self, point: Sequence[float] | None = None) -> None:
        self.min = np.zeros(3)
        self.max = np.zeros(3)
        self.reset()
        if point is not None:
            self.add_point(point)

    def add_point(self, point: Sequence[float]) -> None:
        """Grow the box to include ``point``."""
        p = _vec(point)
        self.min = np.fmin(self.min, p)
        self.max = np.fmax(self.max, p)

    def add_box(self, other: Aabb) -> None:
        """Grow the box to include another box."""
        self.min = np.fmin(self.min, other.min)
        self.max = np.fmax(self.max, other.max)

    def reset(self) -> None:
        """Make the box empty, so that any point added replaces it."""
        self.min = np.full(3, FLOAT_MAX)
        self.max = np.full(3, -FLOAT_MAX)

    def diagonal(self) -> np.ndarray:
        """The vector from the minimum to the maximum corner."""
        return self.max - self.min


class BoundingBox:
    """A box given by its limits along each axis."""

    def __init__(
        self,
        x_min: float = 0.0,
        x_max: float = 0.0,
        y_min: float = 0.0,
        y_max: float = 0.0,
        z_min: float = 0.0,
        z_max: float = 0.0,
    ) -> None:
        self.set_limits(x_min, x_max, y_min, y_max, z_min, z_max)

    def set_limits(
        self,
        x_min: float,
        x_max: float,
        y_min: float,
        y_max: float,
        z_min: float,
        z_max: float,
    ) -> None:
        self.x_min = float(x_min)
        self.x_max = float(x_max)
        self.y_min = float(y_min)
        self.y_max = float(y_max)
        self.z_min = float(z_min)
        self.z_max = float(z_max)

    def limits(self) -> tuple[float, float, float, float, float, float]:
        """Return (x_min, x_max, y_min, y_max, z_min, z_max)."""
        return (self.x_min, self.x_max, self.y_min, self.y_max, self.z_min, self.z_max)

    def center(self) -> np.ndarray:
        return np.array(
            [
                (self.x_max + self.x_min) / 2,
                (self.y_max + self.y_min) / 2,
                (self.z_max + self.z_min) / 2,
            ]
        )

    def bounding_radius(self) -> float:
        """Distance from the center to the maximum corner."""
        corner = np.array([self.x_max, self.y_max, self.z_max])
        return float(np.linalg.norm(corner - self.center()))

    def contains(self, point: Sequence[float]) -> bool:
        x, y, z = _vec(point)
        return (
            self.x_min <= x <= self.x_max
            and self.y_min <= y <= self.y_max
            and self.z_min <= z <= self.z_max
        )

    def add_box(self, other: BoundingBox) -> None:
        """Grow the limits to include another box."""
        self.x_max = max(self.x_max, other.x_max)
        self.x_min = min(self.x_min, other.x_min)
        self.y_max = max(self.y_max, other.y_max)
        self.y_min = min(self.y_min, other.y_min)
        self.z_max = max(self.z_max, other.z_max)
        self.z_min = min(self.z_min, other.z_min)

    def corners(self) -> list[np.ndarray]:
        return [
            np.array([x, y, z])
            for z in (self.z_min, self.z_max)
            for y in (self.y_min, self.y_max)
            for x in (self.x_min, self.x_max)
        ]

    def project(
        self,
        model_view: Sequence[Sequence[float]],
        projection: Sequence[Sequence[float]],
        viewport: Sequence[float],
        window_height: float,
    ) -> Rect:
        """Project the box to the screen and return the enclosing window rectangle.

        ``viewport`` is (x, y, width, height); the rectangle's y axis points down
        from the top of a window ``window_height`` high.
        """
        transform = np.asarray(projection, dtype=float) @ np.asarray(model_view, dtype=float)
        vx, vy, vw, vh = (float(value) for value in viewport)
        xs: list[float] = []
        ys: list[float] = []
        for corner in self.corners():
            clip = transform @ np.append(corner, 1.0)
            w = clip[3]
            if abs(w) <= 0.00001:
                w = 1.0
            ndc = clip / w * 0.5 + 0.5
            xs.append(ndc[0] * vw + vx)
            ys.append(ndc[1] * vh + vy)
        x_lo, x_hi = min(xs), max(xs)
        y_lo, y_hi = min(ys), max(ys)
        return Rect(
            int(x_lo),
            int(window_height - y_hi),
            int(x_hi - x_lo),
            int(y_hi - y_lo),
        )


def solve_quadratic(a: float, b: float, c: float) -> tuple[float, float] | None:
    """Real roots of a*x^2 + b*x + c in ascending order, or None if there are none."""
    discr = b * b - 4.0 * a * c
    if discr < 0:
        return None
    if discr == 0:
        x0 = x1 = -0.5 * b / a
    else:
        root = float(np.sqrt(discr))
        q = -0.5 * (b + root) if b > 0 else -0.5 * (b - root)
        x0 = q / a
        x1 = c / q
    if x0 > x1:
        x0, x1 = x1, x0
    return x0, x1


class BoundingSphere:
    """A sphere enclosing a mesh, able to absorb other spheres."""

    def __init__(
        self, cx: float = 0.0, cy: float = 0.0, cz: float = 0.0, radius: float = 1.0
    ) -> None:
        self.center = np.array([cx, cy, cz], dtype=float)
        self.radius = float(radius)

    def set_center(self, x: float, y: float, z: float) -> None:
        self.center = np.array([x, y, z], dtype=float)

    def add_sphere(self, other: BoundingSphere) -> None:
        """Grow this sphere into the smallest sphere enclosing both."""
        same_center = all(
            _fuzzy_equal(float(a), float(b)) for a, b in zip(self.center, other.center)
        )
        if same_center and _fuzzy_equal(self.radius, other.radius):
            return

        if not self.center.any() and self.radius == 0:
            self.center = other.center.copy()
            self.radius = other.radius
            return

        smaller = min(self.radius, other.radius)
        larger = max(self.radius, other.radius)
        distance = float(np.linalg.norm(self.center - other.center))
        if distance <= larger - smaller:
            if self.radius == smaller:
                self.center = other.center.copy()
                self.radius = other.radius
            return

        to_this_end = _normalized(self.center - other.center)
        to_other_end = _normalized(other.center - self.center)
        this_end = self.center + to_this_end * self.radius
        other_end = other.center + to_other_end * other.radius
        self.radius = float(np.linalg.norm(this_end - other_end)) / 2
        self.center = this_end + to_other_end * self.radius

    def intersects_with_ray(
        self, ray_pos: Sequence[float], ray_dir: Sequence[float]
    ) -> bool:
        """Whether the ray from ``ray_pos`` along ``ray_dir`` meets the sphere."""
        direction = _vec(ray_dir)
        oc = _vec(ray_pos) - self.center
        a = float(direction @ direction)
        b = 2.0 * float(oc @ direction)
        c = float(oc @ oc) - self.radius * self.radius
        roots = solve_quadratic(a, b, c)
        if roots is None:
            return False
        t0, t1 = roots
        if abs(t0) - abs(t1) <= _TOUCH_TOLERANCE:
            return True
        if t0 > t1:
            t0, t1 = t1, t0
        if t0 < 0:
            t0 = t1
            if t0 < 0:
                return False
        return True