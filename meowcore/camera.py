"""Perspective camera and a free-flying controller that steers it."""

from __future__ import annotations

import math
from typing import Iterable

import numpy as np

MOVE_SPEED = 5.0
TURN_SPEED = 15.0
INITIAL_HORIZONTAL_ANGLE = -90.0
INITIAL_VERTICAL_ANGLE = -10.0

FIELD_OF_VIEW_DEGREES = 45.0
NEAR_PLANE = 0.01
FAR_PLANE = 100.0

_Y_AXIS = (0.0, 1.0, 0.0)


def _vec3(values: Iterable[float]) -> np.ndarray:
    vector = np.array(values, dtype=float)
    if vector.shape != (3,):
        raise ValueError(f"expected 3 components, got shape {vector.shape}")
    return vector


def _normalize(vector: np.ndarray) -> np.ndarray:
    return vector / math.sqrt(float(np.dot(vector, vector)))


def perspective(fov_y: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Right-handed projection matrix mapping depth to [-1, 1]; ``fov_y`` in radians."""
    if aspect == 0.0:
        raise ValueError("aspect ratio must not be zero")
    if near == far:
        raise ValueError("near and far planes must differ")
    tan_half = math.tan(fov_y / 2.0)
    matrix = np.zeros((4, 4))
    matrix[0, 0] = 1.0 / (aspect * tan_half)
    matrix[1, 1] = 1.0 / tan_half
    matrix[2, 2] = -(far + near) / (far - near)
    matrix[2, 3] = -(2.0 * far * near) / (far - near)
    matrix[3, 2] = -1.0
    return matrix


def look_at(
    eye: Iterable[float], target: Iterable[float], up: Iterable[float]
) -> np.ndarray:
    """Right-handed view matrix placing ``eye`` at the origin, looking down -z."""
    eye_v = _vec3(eye)
    forward = _normalize(_vec3(target) - eye_v)
    side = _normalize(np.cross(forward, _vec3(up)))
    true_up = np.cross(side, forward)
    matrix = np.identity(4)
    matrix[0, :3] = side
    matrix[1, :3] = true_up
    matrix[2, :3] = -forward
    matrix[0, 3] = -float(np.dot(side, eye_v))
    matrix[1, 3] = -float(np.dot(true_up, eye_v))
    matrix[2, 3] = float(np.dot(forward, eye_v))
    return matrix


def _quaternion(angle_degrees: float, axis: np.ndarray) -> tuple[float, ...]:
    half = math.radians(angle_degrees / 2.0)
    sin_half = math.sin(half)
    return (
        axis[0] * sin_half,
        axis[1] * sin_half,
        axis[2] * sin_half,
        math.cos(half),
    )


def _conjugate(q: tuple[float, ...]) -> tuple[float, ...]:
    x, y, z, w = q
    return (-x, -y, -z, w)


def _multiply(l: tuple[float, ...], r: tuple[float, ...]) -> tuple[float, ...]:
    lx, ly, lz, lw = l
    rx, ry, rz, rw = r
    return (
        lx * rw + lw * rx + ly * rz - lz * ry,
        ly * rw + lw * ry + lz * rx - lx * rz,
        lz * rw + lw * rz + lx * ry - ly * rx,
        lw * rw - lx * rx - ly * ry - lz * rz,
    )


def _multiply_vector(q: tuple[float, ...], v: np.ndarray) -> tuple[float, ...]:
    qx, qy, qz, qw = q
    vx, vy, vz = v
    return (
        qw * vx + qy * vz - qz * vy,
        qw * vy + qz * vx - qx * vz,
        qw * vz + qx * vy - qy * vx,
        -(qx * vx) - qy * vy - qz * vz,
    )


def _rotate(vector: np.ndarray, angle_degrees: float, axis: np.ndarray) -> np.ndarray:
    rotation = _quaternion(angle_degrees, axis)
    result = _multiply(_multiply_vector(rotation, vector), _conjugate(rotation))
    return np.array(result[:3])


class CameraController:
    """Tracks a camera position and viewing direction driven by user input.

    ``direction`` points away from where the camera looks; moving forward
    moves against it.
    """

    def __init__(self, position: Iterable[float]) -> None:
        self._position = _vec3(position)
        self._horizontal_angle = INITIAL_HORIZONTAL_ANGLE
        self._vertical_angle = INITIAL_VERTICAL_ANGLE
        self._up = np.array(_Y_AXIS)
        self._direction = np.array((0.0, 0.0, 1.0))
        self.look_around(0.0, 0.0)

    @property
    def position(self) -> np.ndarray:
        return self._position.copy()

    @property
    def up(self) -> np.ndarray:
        return self._up.copy()

    @property
    def direction(self) -> np.ndarray:
        return self._direction.copy()

    def look_around(self, delta_x: float, delta_y: float) -> None:
        """Turn by mouse movement, scaled down by the turn speed."""
        self._horizontal_angle += delta_x / TURN_SPEED
        self._vertical_angle += delta_y / TURN_SPEED

        y_axis = np.array(_Y_AXIS)
        view = _normalize(
            _rotate(np.array((-1.0, 0.0, 0.0)), self._horizontal_angle, y_axis)
        )
        horizontal_axis = _normalize(np.cross(y_axis, view))
        view = _normalize(_rotate(view, self._vertical_angle, horizontal_axis))

        self._direction = view
        self._up = _normalize(np.cross(view, horizontal_axis))

    def move_forward(self, delta: float) -> None:
        self._position = self._position - self._direction * (MOVE_SPEED * delta)

    def move_backward(self, delta: float) -> None:
        self._position = self._position + self._direction * (MOVE_SPEED * delta)

    def move_up(self, delta: float) -> None:
        self._position[1] += MOVE_SPEED * delta

    def move_down(self, delta: float) -> None:
        self._position[1] -= MOVE_SPEED * delta


class PerspectiveCamera:
    """A camera with a fixed 45 degree perspective sized to a viewport."""

    def __init__(self, width: float, height: float) -> None:
        if height == 0:
            raise ValueError("height must not be zero")
        self._projection = perspective(
            math.radians(FIELD_OF_VIEW_DEGREES),
            float(width) / float(height),
            NEAR_PLANE,
            FAR_PLANE,
        )
        self._position = np.array((0.0, 1.0, -10.0))
        self._target = np.array((0.0, 1.0, 0.0))
        self._up = np.array(_Y_AXIS)

    @property
    def position(self) -> np.ndarray:
        return self._position.copy()

    def configure(
        self,
        position: Iterable[float],
        up: Iterable[float],
        direction: Iterable[float],
    ) -> None:
        """Place the camera, looking opposite to ``direction``."""
        self._position = _vec3(position)
        self._up = _vec3(up)
        self._target = self._position - _vec3(direction)

    def projection_matrix(self) -> np.ndarray:
        return self._projection.copy()

    def view_matrix(self) -> np.ndarray:
        return look_at(self._position, self._target, self._up)