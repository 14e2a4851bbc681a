"""
SLoWC Core - Severity Loss of Well Clear for Pairwise Aircraft Encounters

Computes the RTCA SC-228 SLoWC metric, a per-timestep severity in [0, 100],
from two time-aligned flight trajectories.
"""

from .encounter.types import (
    FlightTrajectory,
    EncounterContext,
    PerSampleGeometry,
    PenetrationRatios,
    WellClearThresholds,
    SLoWCResult,
    is_flight_trajectory,
)
from .exceptions import SLoWCError, TypeViolation, AlignmentMismatch
from .geometry import bearing_to_velocity, encounter_origin, lonlat_to_xy
from .risk import (
    SLoWCCalculator,
    calculate_slowc,
    compute_encounter_geometry,
    fg_norm,
    penetration_ratios,
)


__version__ = "0.1.0"
__author__ = "Airspace Safety Analysis Lab"

__all__ = [
    # Main entry points
    "SLoWCCalculator",
    "calculate_slowc",

    # Components
    "encounter_origin",
    "lonlat_to_xy",
    "bearing_to_velocity",
    "compute_encounter_geometry",
    "penetration_ratios",
    "fg_norm",

    # Types
    "FlightTrajectory",
    "EncounterContext",
    "PerSampleGeometry",
    "PenetrationRatios",
    "WellClearThresholds",
    "SLoWCResult",
    "is_flight_trajectory",

    # Errors
    "SLoWCError",
    "TypeViolation",
    "AlignmentMismatch",
]
