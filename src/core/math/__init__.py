"""
Core math modules

Математические примитивы для работы с углами.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import is_valid_float

# Angles
from src.core.math.angles import (
    PI,
    TWO_PI,
    canonicalize_rad,
    deg_to_rad,
    is_canonical_rad,
    rad_to_deg,
)

__all__ = [
    # Numerical Safeguards
    "is_valid_float",
    # Angles — Constants
    "PI",
    "TWO_PI",
    # Angles — Functions
    "canonicalize_rad",
    "deg_to_rad",
    "is_canonical_rad",
    "rad_to_deg",
]
