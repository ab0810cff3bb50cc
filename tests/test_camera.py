import math

import numpy as np
import pytest

from meowcore.camera import (
    FAR_PLANE,
    MOVE_SPEED,
    NEAR_PLANE,
    TURN_SPEED,
    CameraController,
    PerspectiveCamera,
    look_at,
    perspective,
)


def _project(matrix, point):
    clip = matrix @ np.array([*point, 1.0])
    return clip[:3] / clip[3]


def test_perspective_fixed_entries():
    matrix = perspective(math.radians(45.0), 2.0, 0.1, 50.0)
    assert matrix[3, 2] == -1.0
    assert matrix[3, 3] == 0.0
    assert matrix[1, 1] == pytest.approx(2.0 * matrix[0, 0])


def test_perspective_maps_near_and_far_planes():
    near, far = 0.5, 20.0
    matrix = perspective(math.radians(60.0), 1.5, near, far)
    assert _project(matrix, (0.0, 0.0, -near))[2] == pytest.approx(-1.0)
    assert _project(matrix, (0.0, 0.0, -far))[2] == pytest.approx(1.0)


def test_perspective_rejects_bad_arguments():
    with pytest.raises(ValueError):
        perspective(1.0, 0.0, 0.1, 10.0)
    with pytest.raises(ValueError):
        perspective(1.0, 1.0, 5.0, 5.0)


def test_look_at_moves_eye_to_origin_and_target_down_negative_z():
    eye = (3.0, 2.0, -4.0)
    target = (3.0, 2.0, 6.0)
    view = look_at(eye, target, (0.0, 1.0, 0.0))
    assert np.allclose(view @ np.array([*eye, 1.0]), [0.0, 0.0, 0.0, 1.0])
    moved = view @ np.array([*target, 1.0])
    assert np.allclose(moved[:2], [0.0, 0.0])
    assert moved[2] == pytest.approx(-10.0)


def test_look_at_rotation_is_orthonormal():
    view = look_at((1.0, 2.0, 3.0), (-2.0, 0.5, 7.0), (0.0, 1.0, 0.0))
    rotation = view[:3, :3]
    assert np.allclose(rotation @ rotation.T, np.identity(3))


def test_controller_starts_with_given_position():
    controller = CameraController((0.0, 2.0, -10.0))
    assert np.allclose(controller.position, [0.0, 2.0, -10.0])


def test_controller_axes_are_unit_and_perpendicular():
    controller = CameraController((0.0, 0.0, 0.0))
    controller.look_around(37.0, -12.0)
    assert np.linalg.norm(controller.direction) == pytest.approx(1.0)
    assert np.linalg.norm(controller.up) == pytest.approx(1.0)
    assert float(np.dot(controller.direction, controller.up)) == pytest.approx(
        0.0, abs=1e-9
    )


def test_look_around_zero_keeps_direction():
    controller = CameraController((1.0, 1.0, 1.0))
    before = controller.direction
    controller.look_around(0.0, 0.0)
    assert np.allclose(controller.direction, before)


def test_full_horizontal_turn_restores_direction():
    controller = CameraController((0.0, 0.0, 0.0))
    before = controller.direction
    controller.look_around(TURN_SPEED * 360.0, 0.0)
    assert np.allclose(controller.direction, before)


def test_horizontal_turn_changes_direction():
    controller = CameraController((0.0, 0.0, 0.0))
    before = controller.direction
    controller.look_around(TURN_SPEED * 90.0, 0.0)
    assert not np.allclose(controller.direction, before)
    assert controller.direction[1] == pytest.approx(before[1])


def test_move_forward_goes_against_direction():
    controller = CameraController((0.0, 0.0, 0.0))
    direction = controller.direction
    controller.move_forward(0.5)
    assert np.allclose(controller.position, -direction * MOVE_SPEED * 0.5)


def test_forward_then_backward_returns():
    controller = CameraController((4.0, -1.0, 2.0))
    controller.move_forward(0.3)
    controller.move_backward(0.3)
    assert np.allclose(controller.position, [4.0, -1.0, 2.0])


def test_move_up_and_down_change_height_only():
    controller = CameraController((4.0, -1.0, 2.0))
    controller.move_up(0.2)
    assert np.allclose(controller.position, [4.0, -1.0 + MOVE_SPEED * 0.2, 2.0])
    controller.move_down(0.2)
    assert np.allclose(controller.position, [4.0, -1.0, 2.0])


def test_controller_position_is_a_copy():
    controller = CameraController((0.0, 0.0, 0.0))
    position = controller.position
    position[0] = 99.0
    assert controller.position[0] == 0.0


def test_perspective_camera_projection_matches_settings():
    camera = PerspectiveCamera(800.0, 400.0)
    expected = perspective(math.radians(45.0), 2.0, NEAR_PLANE, FAR_PLANE)
    assert np.allclose(camera.projection_matrix(), expected)


def test_perspective_camera_rejects_zero_height():
    with pytest.raises(ValueError):
        PerspectiveCamera(800.0, 0.0)


def test_configure_looks_opposite_direction():
    camera = PerspectiveCamera(100.0, 100.0)
    position = (1.0, 2.0, 3.0)
    direction = (0.0, 0.0, -2.0)
    camera.configure(position, (0.0, 1.0, 0.0), direction)
    assert np.allclose(camera.position, position)
    view = camera.view_matrix()
    target = np.array(position) - np.array(direction)
    moved = view @ np.array([*target, 1.0])
    assert np.allclose(moved[:2], [0.0, 0.0])
    assert moved[2] == pytest.approx(-np.linalg.norm(direction))


def test_camera_follows_controller():
    controller = CameraController((0.0, 2.0, -10.0))
    camera = PerspectiveCamera(1000.0, 500.0)
    camera.configure(controller.position, controller.up, controller.direction)
    view = camera.view_matrix()
    assert np.allclose(
        view @ np.array([*controller.position, 1.0]), [0.0, 0.0, 0.0, 1.0]
    )
    assert np.allclose(view[2, :3], controller.direction)