"""
SLoWC 계산에 사용되는 데이터 타입 정의

- FlightTrajectory: 항공기 한 대의 시계열 (6개 병렬 배열)
- EncounterContext: 조우 단위의 공통 투영 원점
- PerSampleGeometry / PenetrationRatios: 시점별 파생 값
- WellClearThresholds: DAA Well Clear 임계값
"""
from dataclasses import dataclass, fields
from typing import Iterable, NamedTuple, Optional, Tuple

import numpy as np

from ..exceptions import TypeViolation
from ..utils import as_float_array


# DAA Well Clear thresholds (RTCA SC-228)
DMOD_FT = 4000.0
DH_THR_FT = 450.0
TAU_MOD_THR_S = 35.0


@dataclass(eq=False)
class FlightTrajectory:
    """
    Time series of one aircraft's state, stored as six parallel arrays.

    Attributes:
        timestamp: seconds, non-decreasing
        longitude: decimal degrees
        latitude: decimal degrees
        altitude: feet
        bearing: degrees clockwise from true north, [0, 360)
        velocity: ground speed in knots

    All arrays are coerced to 1-D float64 and must have identical length;
    malformed input raises TypeViolation at construction.
    """
    # None 기본값: 누락된 필드도 __post_init__에서 TypeViolation으로 처리
    timestamp: Optional[np.ndarray] = None
    longitude: Optional[np.ndarray] = None
    latitude: Optional[np.ndarray] = None
    altitude: Optional[np.ndarray] = None
    bearing: Optional[np.ndarray] = None
    velocity: Optional[np.ndarray] = None

    def __post_init__(self):
        lengths = {}
        for f in fields(self):
            try:
                arr = as_float_array(getattr(self, f.name), f.name)
            except TypeError as e:
                raise TypeViolation(f"Malformed flight trajectory: {e}") from e
            # 외부에서 배열을 수정해도 궤적이 바뀌지 않도록 읽기 전용 사본 보관
            arr = arr.copy()
            arr.setflags(write=False)
            setattr(self, f.name, arr)
            lengths[f.name] = arr.shape[0]

        if len(set(lengths.values())) > 1:
            detail = ", ".join(f"{k}={v}" for k, v in lengths.items())
            raise TypeViolation(
                f"Flight trajectory arrays must have identical length ({detail})"
            )

    def __len__(self) -> int:
        return int(self.timestamp.shape[0])

    def subset(self, index) -> "FlightTrajectory":
        """
        Return a new trajectory holding only the selected samples.

        Args:
            index: int, slice, boolean mask, or integer index array

        Returns:
            FlightTrajectory (a single int still yields a length-1 trajectory)
        """
        if isinstance(index, (int, np.integer)):
            index = [int(index)]
        return FlightTrajectory(
            **{f.name: getattr(self, f.name)[index] for f in fields(self)}
        )

    @classmethod
    def from_states(
        cls,
        samples: Iterable[Tuple[float, float, float, float, float, float]]
    ) -> "FlightTrajectory":
        """
        Build a trajectory from per-sample tuples.

        Args:
            samples: iterable of (timestamp, longitude, latitude, altitude,
                     bearing, velocity)
        """
        try:
            rows = [tuple(s) for s in samples]
        except TypeError as e:
            raise TypeViolation(f"Each trajectory sample must be a sequence of 6 values: {e}") from e
        if any(len(r) != 6 for r in rows):
            raise TypeViolation("Each trajectory sample must have exactly 6 values")
        if not rows:
            return cls(*([[]] * 6))
        columns = list(zip(*rows))
        return cls(*columns)


def is_flight_trajectory(obj) -> bool:
    """True only for validated FlightTrajectory instances."""
    return isinstance(obj, FlightTrajectory)


class EncounterContext(NamedTuple):
    """
    조우 단위 공통 투영 원점 (degrees)
    """
    lon0: float
    lat0: float


class PerSampleGeometry(NamedTuple):
    """
    시점별 상대 기하 (feet, ft/s, seconds)
    """
    dx: np.ndarray               # East, aircraft2 - aircraft1
    dy: np.ndarray               # North, aircraft2 - aircraft1
    dh: np.ndarray               # |altitude2 - altitude1|
    vrx: np.ndarray              # relative velocity, East
    vry: np.ndarray              # relative velocity, North
    range: np.ndarray            # horizontal range R
    range_rate: np.ndarray       # Rdot, negative = closing
    hazard_radius: np.ndarray    # S
    tcpa: np.ndarray             # time to CPA
    hmd: np.ndarray              # horizontal miss distance


class PenetrationRatios(NamedTuple):
    """
    Well Clear 침투 비율, 각 값은 [0, 1]
    """
    range_pen: np.ndarray
    hmd_pen: np.ndarray
    dh_pen: np.ndarray


@dataclass(frozen=True)
class WellClearThresholds:
    """
    DAA Well Clear 임계값

    Attributes:
        dmod: minimum horizontal hazard-zone radius (feet)
        dh_thr: vertical threshold (feet)
        tau_mod_thr: modified tau threshold (seconds)
    """
    dmod: float = DMOD_FT
    dh_thr: float = DH_THR_FT
    tau_mod_thr: float = TAU_MOD_THR_S

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if not np.isfinite(value) or value <= 0:
                raise ValueError(f"{f.name} must be a positive finite number, got {value}")


class SLoWCResult(NamedTuple):
    """
    SLoWC 계산 결과와 중간 값 전체
    """
    timestamp: np.ndarray
    slowc: np.ndarray
    geometry: PerSampleGeometry
    ratios: PenetrationRatios
    horizontal_pen: np.ndarray
    context: EncounterContext

    def peak(self) -> Optional[Tuple[float, float]]:
        """
        Highest severity within this encounter.

        Returns:
            (timestamp, slowc) of the first maximum, or None for an empty series
        """
        if self.slowc.size == 0:
            return None
        i = int(np.argmax(self.slowc))
        return float(self.timestamp[i]), float(self.slowc[i])
