"""
Well Clear 침투 비율 및 Fernandez-Gausti squircular 연산자

Penetration ratio가 1이면 해당 축에서 Well Clear 경계 또는 바깥,
0이면 상대 항공기와 같은 위치
"""
from typing import Optional, Tuple

import numpy as np
from numpy.typing import ArrayLike

from ..encounter.types import PenetrationRatios, WellClearThresholds


def penetration_ratios(
    range_: ArrayLike,
    hazard_radius: ArrayLike,
    hmd: ArrayLike,
    dh: ArrayLike,
    thresholds: Optional[WellClearThresholds] = None
) -> PenetrationRatios:
    """
    Three penetration components (range, HMD, vertical separation).

    - RangePen = min(R / S, 1)
    - HMDPen   = min(HMD / DMOD, 1)
    - DHPen    = min(dH / DH_thr, 1)

    Inputs are non-negative, so only the upper clamp is applied.
    """
    if thresholds is None:
        thresholds = WellClearThresholds()

    range_pen = np.minimum(np.asarray(range_, dtype=float) / np.asarray(hazard_radius, dtype=float), 1.0)
    hmd_pen = np.minimum(np.asarray(hmd, dtype=float) / thresholds.dmod, 1.0)
    dh_pen = np.minimum(np.asarray(dh, dtype=float) / thresholds.dh_thr, 1.0)
    return PenetrationRatios(range_pen=range_pen, hmd_pen=hmd_pen, dh_pen=dh_pen)


def fg_norm(x: ArrayLike, y: ArrayLike) -> np.ndarray:
    """
    The Fernandez-Gausti squircular operator.

    FGnorm(x, y) = sqrt(x² + (1 - x²) · y²),  x, y ∈ [0, 1]

    Callers keep the reference argument order (range-like ratio first) so
    results match the reference formulation bit for bit.
    """
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)
    return np.sqrt(x**2 + (1 - x**2) * y**2)


def blend_penetration(ratios: PenetrationRatios) -> Tuple[np.ndarray, np.ndarray]:
    """
    Two-stage squircular blend.

    hpen  = FGnorm(RangePen, HMDPen)
    total = FGnorm(hpen, DHPen)

    Returns:
        (hpen, total)
    """
    hpen = fg_norm(ratios.range_pen, ratios.hmd_pen)
    return hpen, fg_norm(hpen, ratios.dh_pen)
