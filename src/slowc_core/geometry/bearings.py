"""
항공기 속도 벡터 계산 (East/North 좌표계 사용)
"""
import numpy as np
from numpy.typing import ArrayLike

# 1 knot = 1.68781 ft/s
KNOTS_TO_FPS = 1.68781


def bearing_to_velocity(bearing: ArrayLike, velocity: ArrayLike) -> np.ndarray:
    """
    Bearing과 지상속도를 East/North 속도 벡터로 변환

    Args:
        bearing: degrees from north, clockwise (array-like)
        velocity: ground speed in knots (array-like)

    Returns:
        np.ndarray of shape (N, 2): [vx_east, vy_north] in ft/s
    """
    # bearing=0°(North) → vx=0, vy=speed
    # bearing=90°(East) → vx=speed, vy=0
    fps = np.asarray(velocity, dtype=float) * KNOTS_TO_FPS
    theta = np.asarray(bearing, dtype=float) * np.pi / 180
    return np.column_stack((fps * np.sin(theta), fps * np.cos(theta)))


def calculate_relative_velocity(ac1_velocity: ArrayLike, ac2_velocity: ArrayLike) -> np.ndarray:
    """
    상대 속도 벡터 계산 (aircraft2 relative to aircraft1)

    Args:
        ac1_velocity: (N, 2) velocities of aircraft 1
        ac2_velocity: (N, 2) velocities of aircraft 2

    Returns:
        (N, 2) relative velocity [vrx, vry]
    """
    return np.asarray(ac2_velocity, dtype=float) - np.asarray(ac1_velocity, dtype=float)
