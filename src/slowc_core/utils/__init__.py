from .utils import (
    as_float_array,
    timestamps_match,
)

__all__ = [
    'as_float_array',
    'timestamps_match',
]
