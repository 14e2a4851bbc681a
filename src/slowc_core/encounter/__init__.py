"""
Encounter data types
"""
from .types import (
    FlightTrajectory,
    EncounterContext,
    PerSampleGeometry,
    PenetrationRatios,
    WellClearThresholds,
    SLoWCResult,
    is_flight_trajectory,
    DMOD_FT,
    DH_THR_FT,
    TAU_MOD_THR_S,
)

__all__ = [
    'FlightTrajectory',
    'EncounterContext',
    'PerSampleGeometry',
    'PenetrationRatios',
    'WellClearThresholds',
    'SLoWCResult',
    'is_flight_trajectory',
    'DMOD_FT',
    'DH_THR_FT',
    'TAU_MOD_THR_S',
]
