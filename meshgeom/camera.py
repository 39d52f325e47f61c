"""A viewing camera that produces view and projection matrices.

All angles are in degrees. Matrices are 4x4 numpy arrays in row-major
order and act on column vectors: ``clip = projection @ view @ point``.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Sequence

import numpy as np

_FUZZY = 0.00001
_DEG_TO_RAD = math.pi / 180.0


class ViewProjection(Enum):
    """Standard viewing directions."""

    TOP_VIEW = 0
    BOTTOM_VIEW = 1
    FRONT_VIEW = 2
    REAR_VIEW = 3
    LEFT_VIEW = 4
    RIGHT_VIEW = 5
    NE_ISOMETRIC_VIEW = 6
    SE_ISOMETRIC_VIEW = 7
    NW_ISOMETRIC_VIEW = 8
    SW_ISOMETRIC_VIEW = 9
    DIMETRIC_VIEW = 10
    TRIMETRIC_VIEW = 11


class ProjectionType(Enum):
    ORTHOGRAPHIC = 0
    PERSPECTIVE = 1


# (view direction, right vector, up vector) for each standard view.
_PRESETS: dict[ViewProjection, tuple[tuple[float, float, float], ...]] = {
    ViewProjection.TOP_VIEW: ((0.0, 0.0, -1.0), (1.0, 0.0, 0.0), (0.0, 1.0, 0.0)),
    ViewProjection.BOTTOM_VIEW: ((0.0, 0.0, 1.0), (1.0, 0.0, 0.0), (0.0, -1.0, 0.0)),
    ViewProjection.FRONT_VIEW: ((0.0, 1.0, 0.0), (1.0, 0.0, 0.0), (0.0, 0.0, 1.0)),
    ViewProjection.REAR_VIEW: ((0.0, -1.0, 0.0), (-1.0, 0.0, 0.0), (0.0, 0.0, 1.0)),
    ViewProjection.LEFT_VIEW: ((-1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0)),
    ViewProjection.RIGHT_VIEW: ((1.0, 0.0, 0.0), (0.0, -1.0, 0.0), (0.0, 0.0, 1.0)),
    ViewProjection.DIMETRIC_VIEW: ((-2.0, 2.0, -1.0), (1.0, 1.0, 0.0), (-1.0, 1.0, 0.0)),
    ViewProjection.TRIMETRIC_VIEW: (
        (-0.486, 0.732, -0.477),
        (1.181, 0.778, 0.010),
        (-0.363, 0.568, 1.243),
    ),
    ViewProjection.NW_ISOMETRIC_VIEW: ((1.0, -1.0, -1.0), (-1.0, -1.0, 0.0), (1.0, -1.0, 1.0)),
    ViewProjection.SW_ISOMETRIC_VIEW: ((1.0, 1.0, -1.0), (1.0, -1.0, 0.0), (1.0, 1.0, 0.0)),
    ViewProjection.NE_ISOMETRIC_VIEW: ((-1.0, -1.0, -1.0), (-1.0, 1.0, 0.0), (-1.0, -1.0, 1.0)),
    ViewProjection.SE_ISOMETRIC_VIEW: ((-1.0, 1.0, -1.0), (1.0, 1.0, 0.0), (-1.0, 1.0, 0.0)),
}


def _vec3(values: Sequence[float]) -> np.ndarray:
    array = np.asarray(values, dtype=float)
    if array.shape != (3,):
        raise ValueError(f"expected a 3-component vector, got shape {array.shape}")
    return array


def _fuzzy_is_null(value: float) -> bool:
    return abs(value) <= _FUZZY


def _normalized(vector: np.ndarray) -> np.ndarray:
    length_squared = float(vector @ vector)
    if _fuzzy_is_null(length_squared - 1.0):
        return vector.copy()
    if not _fuzzy_is_null(length_squared):
        return vector / math.sqrt(length_squared)
    return np.zeros(3)


def _translation(x: float, y: float, z: float) -> np.ndarray:
    matrix = np.identity(4)
    matrix[:3, 3] = (x, y, z)
    return matrix


def _scaling(factor: float) -> np.ndarray:
    return np.diag([factor, factor, factor, 1.0])


def look_at(
    eye: Sequence[float], center: Sequence[float], up: Sequence[float]
) -> np.ndarray:
    """A view matrix looking from ``eye`` towards ``center``.

    If ``eye`` and ``center`` coincide the identity is returned.
    """
    eye_v = _vec3(eye)
    forward = _vec3(center) - eye_v
    if all(_fuzzy_is_null(float(c)) for c in forward):
        return np.identity(4)
    forward = _normalized(forward)
    side = _normalized(np.cross(forward, _vec3(up)))
    up_vector = np.cross(side, forward)
    rotation = np.identity(4)
    rotation[0, :3] = side
    rotation[1, :3] = up_vector
    rotation[2, :3] = -forward
    return rotation @ _translation(*(-eye_v))


def ortho(
    left: float, right: float, bottom: float, top: float, near: float, far: float
) -> np.ndarray:
    """An orthographic projection; degenerate extents give the identity."""
    if left == right or bottom == top or near == far:
        return np.identity(4)
    width = right - left
    height = top - bottom
    clip = far - near
    matrix = np.identity(4)
    matrix[0, 0] = 2.0 / width
    matrix[0, 3] = -(left + right) / width
    matrix[1, 1] = 2.0 / height
    matrix[1, 3] = -(top + bottom) / height
    matrix[2, 2] = -2.0 / clip
    matrix[2, 3] = -(near + far) / clip
    return matrix


def perspective(fov: float, aspect: float, near: float, far: float) -> np.ndarray:
    """A perspective projection with vertical field of view ``fov``.

    Degenerate parameters give the identity.
    """
    if near == far or aspect == 0:
        return np.identity(4)
    half_angle = fov / 2.0 * _DEG_TO_RAD
    sine = math.sin(half_angle)
    if sine == 0:
        return np.identity(4)
    cotan = math.cos(half_angle) / sine
    clip = far - near
    matrix = np.zeros((4, 4))
    matrix[0, 0] = cotan / aspect
    matrix[1, 1] = cotan
    matrix[2, 2] = -(near + far) / clip
    matrix[2, 3] = -(2.0 * near * far) / clip
    matrix[3, 2] = -1.0
    return matrix


def frustum(
    left: float, right: float, bottom: float, top: float, near: float, far: float
) -> np.ndarray:
    """A perspective projection given by its near-plane extents."""
    if left == right or bottom == top or near == far:
        return np.identity(4)
    width = right - left
    height = top - bottom
    clip = far - near
    matrix = np.zeros((4, 4))
    matrix[0, 0] = 2.0 * near / width
    matrix[0, 2] = (left + right) / width
    matrix[1, 1] = 2.0 * near / height
    matrix[1, 2] = (top + bottom) / height
    matrix[2, 2] = -(near + far) / clip
    matrix[2, 3] = -2.0 * near * far / clip
    matrix[3, 2] = -1.0
    return matrix


def _quaternion_from_rotation(rot: np.ndarray) -> tuple[float, float, float, float]:
    """Quaternion (w, x, y, z) of the upper-left 3x3 part of ``rot``."""
    axis = [0.0, 0.0, 0.0]
    trace = rot[0, 0] + rot[1, 1] + rot[2, 2]
    if trace > 0.00000001:
        s = 2.0 * math.sqrt(trace + 1.0)
        scalar = 0.25 * s
        axis[0] = (rot[2, 1] - rot[1, 2]) / s
        axis[1] = (rot[0, 2] - rot[2, 0]) / s
        axis[2] = (rot[1, 0] - rot[0, 1]) / s
    else:
        following = (1, 2, 0)
        i = 0
        if rot[1, 1] > rot[0, 0]:
            i = 1
        if rot[2, 2] > rot[i, i]:
            i = 2
        j = following[i]
        k = following[j]
        s = 2.0 * math.sqrt(max(rot[i, i] - rot[j, j] - rot[k, k] + 1.0, 0.0))
        if s == 0.0:
            return 1.0, 0.0, 0.0, 0.0
        axis[i] = 0.25 * s
        scalar = (rot[k, j] - rot[j, k]) / s
        axis[j] = (rot[j, i] + rot[i, j]) / s
        axis[k] = (rot[k, i] + rot[i, k]) / s
    return float(scalar), float(axis[0]), float(axis[1]), float(axis[2])


def _euler_angles(matrix: np.ndarray) -> tuple[float, float, float]:
    """(pitch, yaw, roll) in degrees: rotations about x, y and z."""
    w, x, y, z = _quaternion_from_rotation(matrix[:3, :3])
    xx, xy, xz, xw = x * x, x * y, x * z, x * w
    yy, yz, yw = y * y, y * z, y * w
    zz, zw = z * z, z * w
    length_squared = xx + yy + zz + w * w
    if not _fuzzy_is_null(length_squared - 1.0) and not _fuzzy_is_null(length_squared):
        xx, xy, xz, xw = (v / length_squared for v in (xx, xy, xz, xw))
        yy, yz, yw = (v / length_squared for v in (yy, yz, yw))
        zz, zw = zz / length_squared, zw / length_squared

    pitch = math.asin(min(max(-2.0 * (yz - xw), -1.0), 1.0))
    if pitch < math.pi / 2:
        if pitch > -math.pi / 2:
            yaw = math.atan2(2.0 * (xz + yw), 1.0 - 2.0 * (xx + yy))
            roll = math.atan2(2.0 * (xy + zw), 1.0 - 2.0 * (xx + zz))
        else:
            roll = 0.0
            yaw = -math.atan2(-2.0 * (xy - zw), 1.0 - 2.0 * (yy + zz))
    else:
        roll = 0.0
        yaw = math.atan2(-2.0 * (xy - zw), 1.0 - 2.0 * (yy + zz))
    return math.degrees(pitch), math.degrees(yaw), math.degrees(roll)


def _wrap_turn(angle: float) -> float:
    return 0.0 if angle > 360.0 or angle < -360.0 else angle


class Camera:
    """A camera with position, orientation, zoom and a projection."""

    def __init__(
        self,
        width: float = 100.0,
        height: float = 50.0,
        view_range: float = 200.0,
        fov: float = 45.0,
    ) -> None:
        self._width = float(width)
        self._height = float(height)
        self._view_range = float(view_range)
        self._fov = float(fov)
        self._projection_type = ProjectionType.ORTHOGRAPHIC
        self.view_projection = ViewProjection.SE_ISOMETRIC_VIEW
        self.projection_matrix = np.identity(4)
        self.view_matrix = np.identity(4)
        self.reset_all()
        self.update_projection_matrix()

    # Screen and projection parameters

    @property
    def width(self) -> float:
        return self._width

    @property
    def height(self) -> float:
        return self._height

    def set_screen_size(self, width: float, height: float) -> None:
        self._width = float(width)
        self._height = float(height)
        self.update_projection_matrix()

    @property
    def screen_size(self) -> tuple[int, int]:
        return int(self._width), int(self._height)

    @property
    def aspect_ratio(self) -> float:
        return self._width / self._height

    @property
    def fov(self) -> float:
        return self._fov

    @fov.setter
    def fov(self, value: float) -> None:
        self._fov = float(value)
        self.update_projection_matrix()

    @property
    def view_range(self) -> float:
        return self._view_range

    @view_range.setter
    def view_range(self, value: float) -> None:
        self._view_range = float(value)
        self.update_projection_matrix()

    @property
    def projection_type(self) -> ProjectionType:
        return self._projection_type

    @projection_type.setter
    def projection_type(self, value: ProjectionType) -> None:
        self._projection_type = ProjectionType(value)
        self.update_projection_matrix()

    @property
    def zoom(self) -> float:
        return self._zoom

    @zoom.setter
    def zoom(self, factor: float) -> None:
        self._zoom = float(factor)
        self.update_view_matrix()

    # Matrices

    def reset_all(self) -> None:
        """Put the camera at the origin looking down -z with no zoom."""
        self.position = np.zeros(3)
        self.view_dir = np.array([0.0, 0.0, -1.0])
        self.right_vector = np.array([1.0, 0.0, 0.0])
        self.up_vector = np.array([0.0, 1.0, 0.0])
        self.rotated_x = self.rotated_y = self.rotated_z = 0.0
        self._zoom = 1.0
        self.view_matrix = np.identity(4)
        self.update_view_matrix()

    def update_view_matrix(self) -> None:
        """Rebuild the view matrix and the rotation angles from the camera vectors."""
        view_point = self.position + self.view_dir
        self.view_matrix = look_at(self.position, view_point, self.up_vector) @ _scaling(
            self._zoom
        )
        pitch, yaw, roll = _euler_angles(self.view_matrix)
        self.rotated_y, self.rotated_z, self.rotated_x = pitch, yaw, roll

    def update_projection_matrix(self) -> None:
        """Rebuild the projection matrix from the screen size, range and field of view."""
        w = self._width
        h = self._height
        half_range = self._view_range / 2
        if h == 0:
            h = 1.0
        if self._projection_type is ProjectionType.ORTHOGRAPHIC:
            if w <= h:
                self.projection_matrix = ortho(
                    -half_range,
                    half_range,
                    -half_range * h / w,
                    half_range * h / w,
                    -half_range * 1000,
                    half_range * 1000,
                )
            else:
                self.projection_matrix = ortho(
                    -half_range * w / h,
                    half_range * w / h,
                    -half_range,
                    half_range,
                    -half_range * 1000,
                    half_range * 1000,
                )
        else:
            aspect_y_scale = 1.0
            if w / h < 1.0:
                aspect_y_scale *= w / h
            fov = (
                math.atan(math.tan(self._fov * math.pi / 360.0) / aspect_y_scale)
                * 360.0
                / math.pi
            )
            shift = -self._view_range * 4
            self.projection_matrix = perspective(
                fov, w / h, 1.0, self._view_range * 1000.0
            ) @ _translation(0.0, 0.0, shift)

    # Orientation

    def rotate_x(self, angle: float) -> None:
        """Pitch the view direction towards the up vector."""
        self.rotated_x = _wrap_turn(self.rotated_x + angle)
        radians = angle * _DEG_TO_RAD
        self.view_dir = _normalized(
            self.view_dir * math.cos(radians) + self.up_vector * math.sin(radians)
        )
        self.up_vector = np.cross(self.view_dir, self.right_vector) * -1
        self.update_view_matrix()

    def rotate_y(self, angle: float) -> None:
        """Turn the view direction about the up vector."""
        self.rotated_y = _wrap_turn(self.rotated_y + angle)
        radians = angle * _DEG_TO_RAD
        self.view_dir = _normalized(
            self.view_dir * math.cos(radians) - self.right_vector * math.sin(radians)
        )
        self.right_vector = np.cross(self.view_dir, self.up_vector)
        self.update_view_matrix()

    def rotate_z(self, angle: float) -> None:
        """Roll the right vector about the view direction."""
        self.rotated_z = _wrap_turn(self.rotated_z + angle)
        radians = angle * _DEG_TO_RAD
        self.right_vector = _normalized(
            self.right_vector * math.cos(radians) + self.up_vector * math.sin(radians)
        )
        self.up_vector = np.cross(self.view_dir, self.right_vector) * -1
        self.update_view_matrix()

    def rotation_angles(self) -> tuple[float, float, float]:
        """Angles about the y, z and x axes, in degrees, read from the view matrix."""
        pitch, yaw, roll = _euler_angles(self.view_matrix)
        return yaw, roll, pitch

    # Position

    def move(self, dx: float, dy: float, dz: float) -> None:
        self.position = self.position + np.array([dx, dy, dz], dtype=float)
        self.update_view_matrix()

    def move_forward(self, distance: float) -> None:
        """Move against the view direction by ``distance``."""
        self.position = self.position + self.view_dir * -distance
        self.update_view_matrix()

    def move_upward(self, distance: float) -> None:
        self.position = self.position + self.up_vector * distance
        self.update_view_matrix()

    def move_across(self, distance: float) -> None:
        self.position = self.position + self.right_vector * distance
        self.update_view_matrix()

    def set_position(self, x: float, y: float, z: float) -> None:
        self.position = np.array([x, y, z], dtype=float)
        self.update_view_matrix()

    # Views

    def set_view(self, projection: ViewProjection) -> None:
        """Orient the camera along one of the standard views, keeping its position."""
        self.view_projection = ViewProjection(projection)
        view_dir, right, up = _PRESETS[self.view_projection]
        self.view_dir = np.array(view_dir, dtype=float)
        self.right_vector = np.array(right, dtype=float)
        self.up_vector = np.array(up, dtype=float)
        self.rotated_x = self.rotated_y = self.rotated_z = 0.0
        self.update_view_matrix()

    def set_view_vectors(
        self,
        position: Sequence[float],
        view_dir: Sequence[float],
        up_dir: Sequence[float],
        right_dir: Sequence[float],
    ) -> None:
        self.position = _vec3(position)
        self.view_dir = _vec3(view_dir)
        self.up_vector = _vec3(up_dir)
        self.right_vector = _vec3(right_dir)
        self.update_view_matrix()

    def compute_stereo_view_projection(
        self, width: int, height: int, iod: float, depth_z: float, left_eye: bool
    ) -> None:
        """Apply the off-axis frustum and shifted eye of one stereo eye.

        Both matrices are multiplied onto the current ones.
        """
        direction = 1.0 if left_eye else -1.0
        aspect = width / height
        near = 1.0
        far = self._view_range
        frustum_shift = (iod / 2) * near / depth_z
        top = math.tan(self._fov / 2) * near
        right = aspect * top + frustum_shift * direction
        left = -aspect * top + frustum_shift * direction
        bottom = -top
        self.projection_matrix = self.projection_matrix @ frustum(
            left, right, bottom, top, near, far
        )
        eye_offset = np.array([direction * iod / 2, 0.0, 0.0])
        view_point = self.position + self.view_dir
        self.view_matrix = self.view_matrix @ look_at(
            self.position - self.view_dir + eye_offset,
            view_point + eye_offset,
            self.up_vector,
        )