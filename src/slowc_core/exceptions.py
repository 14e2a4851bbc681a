"""
SLoWC 계산 오류 정의

Two failure kinds surface to callers; both are raised before any geometry is
computed, so a call either returns a full series or nothing.
"""


class SLoWCError(Exception):
    """Base class for all errors raised by slowc_core."""


class TypeViolation(SLoWCError, TypeError):
    """An argument is not a well-formed FlightTrajectory."""


class AlignmentMismatch(SLoWCError, ValueError):
    """The two trajectories are not sampled at the same timestamps."""
