"""
Coordinate System Transformation (flat Earth)

좌표계 정의:
-------------
Local tangent plane, 조우 중심점(lon0, lat0)을 원점으로 사용:
   - x = East (feet)
   - y = North (feet)
   - 두 항공기는 반드시 같은 원점으로 투영해야 함

Equirectangular 근사:
   x = R_e * (lon - lon0) * cos(lat0)
   y = R_e * (lat - lat0)
수십 NM 이내의 조우에서만 유효
"""

import numpy as np
from numpy.typing import ArrayLike

from ..encounter.types import EncounterContext, FlightTrajectory

FT_PER_M = 3.28084
# WGS-84 equatorial radius
EARTH_RADIUS_FT = 6378137.0 * FT_PER_M


def encounter_origin(trajectory1: FlightTrajectory, trajectory2: FlightTrajectory) -> EncounterContext:
    """
    Centroid of both trajectories, used as the shared projection origin.

    The mean is taken over the combined samples of both aircraft, not
    averaged per trajectory.

    Returns:
        EncounterContext(lon0, lat0) in degrees
    """
    n = trajectory1.longitude.size + trajectory2.longitude.size
    if n == 0:
        return EncounterContext(lon0=float("nan"), lat0=float("nan"))

    # 궤적별 합을 더해 평균: 두 궤적의 순서를 바꿔도 원점이 비트 단위로 같음
    lon0 = (np.sum(trajectory1.longitude) + np.sum(trajectory2.longitude)) / n
    lat0 = (np.sum(trajectory1.latitude) + np.sum(trajectory2.latitude)) / n
    return EncounterContext(lon0=float(lon0), lat0=float(lat0))


def lonlat_to_xy(longitude: ArrayLike, latitude: ArrayLike, lon0: float, lat0: float) -> np.ndarray:
    """
    Project geodetic coordinates onto the local East/North plane.

    Args:
        longitude: degrees (array-like)
        latitude: degrees (array-like)
        lon0: origin longitude (degrees)
        lat0: origin latitude (degrees)

    Returns:
        np.ndarray of shape (N, 2): [x_east, y_north] in feet
    """
    longitude = np.asarray(longitude, dtype=float)
    latitude = np.asarray(latitude, dtype=float)

    x_east = EARTH_RADIUS_FT * np.radians(longitude - lon0) * np.cos(np.radians(lat0))
    y_north = EARTH_RADIUS_FT * np.radians(latitude - lat0)
    return np.column_stack((x_east, y_north))


def xy_to_lonlat(x_east: ArrayLike, y_north: ArrayLike, lon0: float, lat0: float) -> np.ndarray:
    """
    Inverse of lonlat_to_xy.

    Returns:
        np.ndarray of shape (N, 2): [longitude, latitude] in degrees
    """
    x_east = np.asarray(x_east, dtype=float)
    y_north = np.asarray(y_north, dtype=float)

    longitude = lon0 + np.degrees(x_east / (EARTH_RADIUS_FT * np.cos(np.radians(lat0))))
    latitude = lat0 + np.degrees(y_north / EARTH_RADIUS_FT)
    return np.column_stack((longitude, latitude))
