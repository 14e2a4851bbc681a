"""
Risk Assessment Module

Well Clear 침투 심각도 평가:
- CPA/tCPA, Hazard Zone 계산
- Penetration ratio 및 squircular blend
- SLoWC 지표
"""

from .cpa_tcpa import (
    RANGE_EPS_FT,
    calculate_cpa_tcpa,
    compute_encounter_geometry,
    hazard_zone_radius,
)

from .penetration import (
    blend_penetration,
    fg_norm,
    penetration_ratios,
)

from .slowc import (
    SLoWCCalculator,
    calculate_slowc,
)

__all__ = [
    # CPA/tCPA functions
    'RANGE_EPS_FT',
    'calculate_cpa_tcpa',
    'compute_encounter_geometry',
    'hazard_zone_radius',

    # Penetration
    'blend_penetration',
    'fg_norm',
    'penetration_ratios',

    # SLoWC
    'SLoWCCalculator',
    'calculate_slowc',
]
