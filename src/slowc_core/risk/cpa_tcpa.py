"""
Closest Point of Approach (CPA), Time to CPA (tCPA), Hazard Zone 크기 계산

모든 함수는 시점별 배열에 대해 벡터 연산으로 동작하며 시점 간 상태는 없음
"""
import logging
from typing import Optional, Tuple

import numpy as np
from numpy.typing import ArrayLike

from ..encounter.types import DMOD_FT, TAU_MOD_THR_S, PerSampleGeometry, WellClearThresholds
from ..geometry.bearings import calculate_relative_velocity

logger = logging.getLogger(__name__)

# R이 이 값보다 작으면 Rdot 계산이 불가능 (x/0)
RANGE_EPS_FT = 1e-4


def hazard_zone_radius(
    range_rate: ArrayLike,
    range_: ArrayLike,
    dmod: float = DMOD_FT,
    tau_mod_thr: float = TAU_MOD_THR_S
) -> np.ndarray:
    """
    Horizontal size of the hazard zone (TauMod_thr boundary).

    S = max(DMOD, 0.5 * (sqrt((Rdot * tau)^2 + 4 * DMOD^2) - Rdot * tau))
    S = DMOD where R < 1e-4 ft

    Args:
        range_rate: Rdot (ft/s), negative = closing
        range_: horizontal range R (feet)
        dmod: DMOD (feet)
        tau_mod_thr: TauMod threshold (seconds)

    Returns:
        S (feet)
    """
    range_rate = np.asarray(range_rate, dtype=float)
    range_ = np.asarray(range_, dtype=float)

    rt = range_rate * tau_mod_thr
    s = np.maximum(dmod, 0.5 * (np.sqrt(rt**2 + 4 * dmod**2) - rt))
    return np.where(range_ < RANGE_EPS_FT, dmod, s)


def calculate_cpa_tcpa(
    dx: ArrayLike,
    dy: ArrayLike,
    vrx: ArrayLike,
    vry: ArrayLike
) -> Tuple[np.ndarray, np.ndarray]:
    """
    tCPA와 HMD (projected horizontal miss distance) 계산

    Formulas:
    - tCPA = -(d · vr) / ||vr||²
      tCPA = 0 if ||vr||² == 0 or d · vr > 0 (not closing)
    - HMD = || d + vr · tCPA ||

    where d = (dx, dy) is the position of aircraft2 relative to aircraft1
    and vr = (vrx, vry) its relative velocity.

    Returns:
        (tcpa, hmd) arrays; HMD equals the current range wherever tCPA = 0
    """
    dx = np.asarray(dx, dtype=float)
    dy = np.asarray(dy, dtype=float)
    vrx = np.asarray(vrx, dtype=float)
    vry = np.asarray(vry, dtype=float)

    dot = dx * vrx + dy * vry
    rel_speed_sq = vrx**2 + vry**2

    # 평행 이동 또는 멀어지는 중이면 현재 거리가 유지된다고 본다
    no_approach = (rel_speed_sq == 0) | (dot > 0)
    with np.errstate(divide='ignore', invalid='ignore'):
        tcpa = np.where(no_approach, 0.0, -dot / rel_speed_sq)

    hmd = np.sqrt((dx + vrx * tcpa)**2 + (dy + vry * tcpa)**2)
    return tcpa, hmd


def compute_encounter_geometry(
    ac1_xyz: ArrayLike,
    ac2_xyz: ArrayLike,
    ac1_velocity: ArrayLike,
    ac2_velocity: ArrayLike,
    thresholds: Optional[WellClearThresholds] = None
) -> PerSampleGeometry:
    """
    두 항공기의 시점별 상대 기하 계산

    Args:
        ac1_xyz: (N, 3) aircraft 1 [x_east, y_north, altitude] in feet
        ac2_xyz: (N, 3) aircraft 2 [x_east, y_north, altitude] in feet
        ac1_velocity: (N, 2) aircraft 1 [vx_east, vy_north] in ft/s
        ac2_velocity: (N, 2) aircraft 2 [vx_east, vy_north] in ft/s
        thresholds: Well Clear thresholds (default RTCA values)

    Returns:
        PerSampleGeometry
    """
    if thresholds is None:
        thresholds = WellClearThresholds()

    ac1_xyz = np.asarray(ac1_xyz, dtype=float).reshape(-1, 3)
    ac2_xyz = np.asarray(ac2_xyz, dtype=float).reshape(-1, 3)

    d_xyz = ac2_xyz - ac1_xyz
    dx = d_xyz[:, 0]
    dy = d_xyz[:, 1]
    dh = np.abs(d_xyz[:, 2])

    relative_velocity = calculate_relative_velocity(ac1_velocity, ac2_velocity).reshape(-1, 2)
    vrx = relative_velocity[:, 0]
    vry = relative_velocity[:, 1]

    range_ = np.sqrt(dx**2 + dy**2)

    coincident = range_ < RANGE_EPS_FT
    with np.errstate(divide='ignore', invalid='ignore'):
        range_rate = np.where(coincident, 0.0, (dx * vrx + dy * vry) / range_)

    s = hazard_zone_radius(range_rate, range_, thresholds.dmod, thresholds.tau_mod_thr)
    tcpa, hmd = calculate_cpa_tcpa(dx, dy, vrx, vry)

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Geometry: %d samples, %d coincident, %d without projected approach",
            range_.size,
            int(np.count_nonzero(coincident)),
            int(np.count_nonzero(tcpa == 0)),
        )

    return PerSampleGeometry(
        dx=dx,
        dy=dy,
        dh=dh,
        vrx=vrx,
        vry=vry,
        range=range_,
        range_rate=range_rate,
        hazard_radius=s,
        tcpa=tcpa,
        hmd=hmd,
    )
