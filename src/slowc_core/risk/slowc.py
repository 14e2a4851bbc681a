"""
Severity Loss of Well Clear (SLoWC)

RTCA SC-228 Closed-Loop Metrics White Paper의 SLoWC 지표 계산.
Pratt & Kay의 SLoWC 정의를 따른다.

SLoWC = 100 · (1 - FGnorm(FGnorm(RangePen, HMDPen), DHPen))
    - 0: Well Clear 유지
    - 100: 완전 침투 (충돌)

Pipeline:
    trajectories → flat Earth 투영 / 속도 벡터 → 상대 기하 (R, S, tCPA, HMD)
    → 침투 비율 3개 → squircular blend 2단계 → [0, 100] 스케일
"""
import logging
from typing import Optional

import numpy as np

from ..encounter.types import (
    EncounterContext,
    FlightTrajectory,
    SLoWCResult,
    WellClearThresholds,
    is_flight_trajectory,
)
from ..exceptions import AlignmentMismatch, TypeViolation
from ..geometry import bearing_to_velocity, encounter_origin, lonlat_to_xy
from ..utils import timestamps_match
from .cpa_tcpa import compute_encounter_geometry
from .penetration import blend_penetration, penetration_ratios

logger = logging.getLogger(__name__)


class SLoWCCalculator:
    """
    두 항공기 궤적의 시점별 SLoWC 계산

    Attributes:
        thresholds: Well Clear 임계값 (기본값: DMOD=4000 ft, DH_thr=450 ft,
                    TauMod_thr=35 s)

    Notes:
        - 시점 간 의존성 없음: 각 시점의 값은 해당 시점 입력과 공통 원점에만 의존
        - 입력 검증 실패 시 기하 계산 전에 예외 발생
    """

    def __init__(self, thresholds: Optional[WellClearThresholds] = None):
        self.thresholds = thresholds if thresholds is not None else WellClearThresholds()

    def validate(self, trajectory1, trajectory2):
        """
        Raise TypeViolation / AlignmentMismatch for incompatible inputs.
        """
        for name, traj in (("trajectory1", trajectory1), ("trajectory2", trajectory2)):
            if not is_flight_trajectory(traj):
                logger.warning("Rejected %s of type %s", name, type(traj).__name__)
                raise TypeViolation(
                    f"Both arguments must be instances of FlightTrajectory "
                    f"({name} is {type(traj).__name__})"
                )

        if not timestamps_match(trajectory1.timestamp, trajectory2.timestamp):
            logger.warning(
                "Timestamp mismatch: %d vs %d samples",
                len(trajectory1), len(trajectory2),
            )
            raise AlignmentMismatch("Trajectories must have matching time stamps")

    def evaluate(
        self,
        trajectory1: FlightTrajectory,
        trajectory2: FlightTrajectory,
        context: Optional[EncounterContext] = None
    ) -> SLoWCResult:
        """
        SLoWC와 중간 값 전체 계산

        Args:
            trajectory1: 첫 번째 항공기 궤적
            trajectory2: 두 번째 항공기 궤적
            context: 투영 원점. None이면 두 궤적의 centroid 사용.
                     궤적 일부만 계산할 때 전체 조우의 원점을 넘기면
                     전체 계산 결과와 동일한 값을 얻는다.

        Returns:
            SLoWCResult
        """
        self.validate(trajectory1, trajectory2)

        if context is None:
            context = encounter_origin(trajectory1, trajectory2)
        logger.debug(
            "SLoWC: %d samples, origin lon0=%.6f lat0=%.6f",
            len(trajectory1), context.lon0, context.lat0,
        )

        # Flat Earth approximation of aircraft position and velocity
        ac1_xyz = np.column_stack((
            lonlat_to_xy(trajectory1.longitude, trajectory1.latitude, context.lon0, context.lat0),
            trajectory1.altitude,
        ))
        ac2_xyz = np.column_stack((
            lonlat_to_xy(trajectory2.longitude, trajectory2.latitude, context.lon0, context.lat0),
            trajectory2.altitude,
        ))
        ac1_velocity = bearing_to_velocity(trajectory1.bearing, trajectory1.velocity)
        ac2_velocity = bearing_to_velocity(trajectory2.bearing, trajectory2.velocity)

        geometry = compute_encounter_geometry(
            ac1_xyz, ac2_xyz, ac1_velocity, ac2_velocity, self.thresholds
        )
        ratios = penetration_ratios(
            geometry.range, geometry.hazard_radius, geometry.hmd, geometry.dh, self.thresholds
        )
        hpen, total_pen = blend_penetration(ratios)

        return SLoWCResult(
            timestamp=np.array(trajectory1.timestamp),
            slowc=100 * (1 - total_pen),
            geometry=geometry,
            ratios=ratios,
            horizontal_pen=hpen,
            context=context,
        )

    def calculate(self, trajectory1: FlightTrajectory, trajectory2: FlightTrajectory) -> np.ndarray:
        """
        Returns:
            SLoWC series in [0, 100], index-aligned with the timestamps
        """
        return self.evaluate(trajectory1, trajectory2).slowc


def calculate_slowc(trajectory1: FlightTrajectory, trajectory2: FlightTrajectory) -> np.ndarray:
    """
    Calculate the severity loss of well clear (SLoWC) metric.

    Args:
        trajectory1: FlightTrajectory of the first aircraft
        trajectory2: FlightTrajectory of the second aircraft

    Returns:
        np.ndarray of SLoWC values in [0, 100]. 0 means well clear, 100 means
        full penetration (collision).

    Raises:
        TypeViolation: an argument is not a FlightTrajectory
        AlignmentMismatch: the timestamp arrays differ
    """
    return SLoWCCalculator().calculate(trajectory1, trajectory2)
