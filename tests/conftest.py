"""
공통 테스트 헬퍼: 로컬 East/North(feet) 좌표로 조우 시나리오를 만들고
flat Earth 역변환으로 경위도 궤적을 생성
"""
import numpy as np
import pytest

from slowc_core import FlightTrajectory
from slowc_core.geometry import xy_to_lonlat

LON0 = -77.0
LAT0 = 38.9
ALT_FT = 10000.0


def make_trajectory(timestamps, x_east, y_north, altitude, bearing, speed_kts,
                    lon0=LON0, lat0=LAT0):
    """
    Build a FlightTrajectory from local offsets (feet) around (lon0, lat0).
    Scalars are broadcast over the timestamps.
    """
    t = np.asarray(timestamps, dtype=float)
    n = t.size
    x = np.broadcast_to(np.asarray(x_east, dtype=float), (n,))
    y = np.broadcast_to(np.asarray(y_north, dtype=float), (n,))
    lonlat = xy_to_lonlat(x, y, lon0, lat0)
    return FlightTrajectory(
        timestamp=t,
        longitude=lonlat[:, 0],
        latitude=lonlat[:, 1],
        altitude=np.broadcast_to(np.asarray(altitude, dtype=float), (n,)),
        bearing=np.broadcast_to(np.asarray(bearing, dtype=float), (n,)),
        velocity=np.broadcast_to(np.asarray(speed_kts, dtype=float), (n,)),
    )


def head_on_pair(timestamps, separation_ft, speed_kts, alt1=ALT_FT, alt2=ALT_FT):
    """
    Aircraft 1 at x=-sep/2 heading East, aircraft 2 at x=+sep/2 heading West.
    Positions are frozen snapshots; only the reported velocity closes them.
    """
    half = 0.5 * np.asarray(separation_ft, dtype=float)
    ac1 = make_trajectory(timestamps, -half, 0.0, alt1, 90.0, speed_kts)
    ac2 = make_trajectory(timestamps, half, 0.0, alt2, 270.0, speed_kts)
    return ac1, ac2


@pytest.fixture
def timestamps():
    return np.arange(0.0, 10.0, 1.0)


@pytest.fixture
def crossing_pair():
    """
    Converging crossing encounter flown with real kinematics:
    aircraft 1 eastbound, aircraft 2 northbound, 300 ft apart vertically.
    """
    t = np.arange(0.0, 120.0, 2.0)
    v_fps = 250.0 * 1.68781
    x1 = -30000.0 + v_fps * t
    y2 = -25000.0 + v_fps * t
    ac1 = make_trajectory(t, x1, 0.0, ALT_FT, 90.0, 250.0)
    ac2 = make_trajectory(t, 0.0, y2, ALT_FT + 300.0, 0.0, 250.0)
    return ac1, ac2
