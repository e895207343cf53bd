"""
Domain models and value objects.

Contains the Angle value type and the arithmetic built on it.
"""

from src.core.domain.angle import (
    DEFAULT_APPROX_PREC,
    Angle,
    add,
    scale,
    subtract,
)

__all__ = [
    # Angle model
    "Angle",
    "DEFAULT_APPROX_PREC",
    # Angle arithmetic
    "add",
    "subtract",
    "scale",
]
