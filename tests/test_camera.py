import math

import numpy as np
import pytest

from meshgeom.camera import (
    Camera,
    ProjectionType,
    ViewProjection,
    frustum,
    look_at,
    ortho,
    perspective,
)


def _ndc(matrix, point):
    clip = matrix @ np.append(np.asarray(point, dtype=float), 1.0)
    return clip[:3] / clip[3]


def _stereo_camera(left_eye):
    cam = Camera(100, 50, 200, 45)
    cam.projection_matrix = np.identity(4)
    cam.view_matrix = np.identity(4)
    cam.compute_stereo_view_projection(100, 50, 0.5, 10.0, left_eye)
    return cam


def test_look_at_standard_orientation_is_identity():
    m = look_at((0, 0, 0), (0, 0, -1), (0, 1, 0))
    assert np.allclose(m, np.identity(4))


def test_look_at_maps_eye_to_origin():
    eye = (1.0, 2.0, 5.0)
    m = look_at(eye, (0, 0, 0), (0, 1, 0))
    assert np.allclose(m @ np.append(eye, 1.0), [0, 0, 0, 1])


def test_look_at_coincident_points_give_identity():
    m = look_at((1, 1, 1), (1, 1, 1), (0, 1, 0))
    assert np.array_equal(m, np.identity(4))


def test_ortho_maps_box_corners_to_unit_cube():
    m = ortho(-2, 2, -1, 1, 1, 10)
    assert np.allclose(_ndc(m, (2, 1, -1)), [1, 1, -1])
    assert np.allclose(_ndc(m, (-2, -1, -10)), [-1, -1, 1])


@pytest.mark.parametrize("args", [(1, 1, -1, 1, 1, 2), (-1, 1, 2, 2, 1, 2), (-1, 1, -1, 1, 3, 3)])
def test_degenerate_ortho_and_frustum_give_identity(args):
    assert np.array_equal(ortho(*args), np.identity(4))
    assert np.array_equal(frustum(*args), np.identity(4))


def test_perspective_maps_near_and_far_planes():
    m = perspective(60.0, 1.5, 1.0, 10.0)
    assert _ndc(m, (0, 0, -1))[2] == pytest.approx(-1.0)
    assert _ndc(m, (0, 0, -10))[2] == pytest.approx(1.0)
    edge = math.tan(math.radians(30.0)) * 4.0
    assert _ndc(m, (0, edge, -4.0))[1] == pytest.approx(1.0)


def test_perspective_degenerate_gives_identity():
    assert np.array_equal(perspective(45.0, 0.0, 1.0, 10.0), np.identity(4))
    assert np.array_equal(perspective(0.0, 1.0, 1.0, 10.0), np.identity(4))


def test_symmetric_frustum_matches_perspective():
    fov, aspect, near, far = 50.0, 1.25, 2.0, 40.0
    top = math.tan(math.radians(fov / 2)) * near
    f = frustum(-top * aspect, top * aspect, -top, top, near, far)
    assert np.allclose(f, perspective(fov, aspect, near, far))


def test_screen_size_and_aspect():
    cam = Camera(100, 50, 200, 45)
    assert cam.aspect_ratio == 2.0
    assert cam.screen_size == (100, 50)
    cam.set_screen_size(30, 60)
    assert cam.aspect_ratio == 0.5
    assert cam.screen_size == (30, 60)


@pytest.mark.parametrize("size", [(100, 50), (50, 100), (80, 80)])
def test_orthographic_projection_keeps_pixels_square(size):
    cam = Camera(*size, 200, 45)
    p = cam.projection_matrix
    assert p[0, 0] / p[1, 1] == pytest.approx(size[1] / size[0])
    assert np.allclose(p[3], [0, 0, 0, 1])


def test_orthographic_wide_window_spans_view_range_vertically():
    cam = Camera(100, 50, 200, 45)
    assert cam.projection_matrix[1, 1] * cam.view_range / 2 == pytest.approx(1.0)


def test_perspective_projection_type():
    cam = Camera(100, 50, 200, 45)
    cam.projection_type = ProjectionType.PERSPECTIVE
    p = cam.projection_matrix
    assert cam.projection_type is ProjectionType.PERSPECTIVE
    assert p[3, 2] == pytest.approx(-1.0)
    assert p[1, 1] / p[0, 0] == pytest.approx(cam.aspect_ratio)
    cam.projection_type = ProjectionType.ORTHOGRAPHIC
    assert np.allclose(cam.projection_matrix[3], [0, 0, 0, 1])


def test_zero_height_is_treated_as_one():
    cam = Camera(100, 50, 200, 45)
    cam.set_screen_size(100, 0)
    p = cam.projection_matrix
    assert np.all(np.isfinite(p))
    # With height taken as one the window is wide: the view range spans it vertically.
    assert p[1, 1] * cam.view_range / 2 == pytest.approx(1.0)
    assert p[0, 0] / p[1, 1] == pytest.approx(1.0 / 100.0)


def test_fov_and_range_setters_rebuild_projection():
    cam = Camera(100, 50, 200, 45)
    cam.projection_type = ProjectionType.PERSPECTIVE
    before = cam.projection_matrix.copy()
    cam.fov = 30.0
    assert cam.fov == 30.0
    assert cam.projection_matrix[1, 1] > before[1, 1]
    cam.view_range = 400.0
    assert cam.view_range == 400.0
    assert not np.allclose(cam.projection_matrix, before)


def test_default_camera_has_no_rotation():
    cam = Camera()
    assert np.allclose(cam.view_matrix, np.identity(4))
    assert cam.rotation_angles() == pytest.approx((0.0, 0.0, 0.0))


@pytest.mark.parametrize(
    "steps",
    [[("rotate_x", 30)], [("rotate_y", 45), ("rotate_x", -20)], [("rotate_z", 70), ("rotate_y", 10)]],
)
def test_rotations_keep_view_matrix_orthonormal(steps):
    cam = Camera()
    for name, angle in steps:
        getattr(cam, name)(angle)
    r = cam.view_matrix[:3, :3]
    assert np.allclose(r @ r.T, np.identity(3))
    assert np.linalg.norm(cam.view_dir) == pytest.approx(1.0)


def test_rotate_x_back_and_forth_restores_direction():
    cam = Camera()
    original = cam.view_dir.copy()
    cam.rotate_x(30)
    assert not np.allclose(cam.view_dir, original)
    cam.rotate_x(-30)
    assert np.allclose(cam.view_dir, original)


def test_rotate_z_shows_up_as_roll_about_x_slot():
    cam = Camera()
    cam.rotate_z(30)
    assert cam.rotated_x == pytest.approx(-30.0)
    assert cam.rotated_z == pytest.approx(0.0, abs=1e-9)


def test_move_and_directional_moves():
    cam = Camera()
    cam.move(1, 2, 3)
    assert np.allclose(cam.position, [1, 2, 3])
    cam.set_position(0, 0, 0)
    cam.move_forward(5)
    assert np.allclose(cam.position, -cam.view_dir * 5)
    cam.set_position(0, 0, 0)
    cam.move_upward(2)
    assert np.allclose(cam.position, cam.up_vector * 2)
    cam.set_position(0, 0, 0)
    cam.move_across(3)
    assert np.allclose(cam.position, cam.right_vector * 3)


def test_view_matrix_maps_position_to_origin():
    cam = Camera()
    cam.set_position(4, -2, 7)
    assert np.allclose(cam.view_matrix @ np.array([4, -2, 7, 1.0]), [0, 0, 0, 1])


def test_zoom_scales_view_matrix():
    cam = Camera()
    cam.zoom = 2.0
    assert cam.zoom == 2.0
    assert np.linalg.det(cam.view_matrix[:3, :3]) == pytest.approx(2.0**3)


@pytest.mark.parametrize("view", list(ViewProjection))
def test_standard_views_look_down_negative_z(view):
    cam = Camera()
    cam.set_position(1, 2, 3)
    cam.set_view(view)
    assert cam.view_projection is view
    assert np.allclose(cam.position, [1, 2, 3])
    direction = cam.view_dir / np.linalg.norm(cam.view_dir)
    assert np.allclose(cam.view_matrix[:3, :3] @ direction, [0, 0, -1], atol=1e-9)


def test_set_view_front_direction():
    cam = Camera()
    cam.set_view(ViewProjection.FRONT_VIEW)
    assert np.allclose(cam.view_dir, [0, 1, 0])
    assert np.allclose(cam.up_vector, [0, 0, 1])


def test_rotation_angles_permute_stored_angles():
    cam = Camera()
    cam.set_view(ViewProjection.SE_ISOMETRIC_VIEW)
    assert cam.rotation_angles() == pytest.approx(
        (cam.rotated_z, cam.rotated_x, cam.rotated_y)
    )


def test_set_view_vectors():
    cam = Camera()
    cam.set_view_vectors((0, 0, 10), (0, 0, -1), (0, 1, 0), (1, 0, 0))
    assert np.allclose(cam.position, [0, 0, 10])
    assert np.allclose(cam.view_matrix @ np.array([0, 0, 10, 1.0]), [0, 0, 0, 1])


def test_set_view_vectors_rejects_bad_shape():
    cam = Camera()
    with pytest.raises(ValueError):
        cam.set_view_vectors((0, 0), (0, 0, -1), (0, 1, 0), (1, 0, 0))


def test_reset_all_restores_defaults():
    cam = Camera()
    cam.move(3, 3, 3)
    cam.zoom = 4.0
    cam.rotate_y(40)
    cam.reset_all()
    assert np.allclose(cam.position, [0, 0, 0])
    assert cam.zoom == 1.0
    assert np.allclose(cam.view_matrix, np.identity(4))


def test_stereo_eyes_are_mirrored():
    left_cam = _stereo_camera(True)
    right_cam = _stereo_camera(False)
    # The left eye's frustum is shifted right, the right eye's left.
    assert left_cam.projection_matrix[0, 2] > 0
    assert right_cam.projection_matrix[0, 2] < 0
    assert left_cam.projection_matrix[0, 2] == pytest.approx(-right_cam.projection_matrix[0, 2])
    assert left_cam.projection_matrix[1, 1] == pytest.approx(right_cam.projection_matrix[1, 1])
    # The left eye sits at +x, so its view translation is negative in x.
    assert left_cam.view_matrix[0, 3] < 0
    assert right_cam.view_matrix[0, 3] > 0
    assert left_cam.view_matrix[0, 3] == pytest.approx(-right_cam.view_matrix[0, 3])


def test_stereo_view_puts_eye_at_origin():
    cam = Camera(100, 50, 200, 45)
    cam.view_matrix = np.identity(4)
    cam.compute_stereo_view_projection(100, 50, 0.5, 10.0, True)
    eye = cam.position - cam.view_dir + np.array([0.25, 0.0, 0.0])
    assert np.allclose(cam.view_matrix @ np.append(eye, 1.0), [0, 0, 0, 1])