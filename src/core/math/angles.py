"""
Angles — Каноническое представление плоских углов

Чистые float-функции без состояния:
- Приведение угла в радианах к каноническому интервалу (-pi, pi]
- Конверсии радианы ↔ градусы

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. canonicalize_rad(r) ∈ (-pi, pi] для любого конечного r
2. canonicalize_rad(r) ≡ r (mod 2pi)
3. Канонизация идемпотентна: уже канонический угол не изменяется
4. NaN/Inf проходят без изменений (без исключений)
"""

import math
from typing import Final

from src.core.math.numerical_safeguards import is_valid_float

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

PI: Final[float] = math.pi

# Полный оборот
TWO_PI: Final[float] = 2.0 * math.pi


# =============================================================================
# КАНОНИЗАЦИЯ
# =============================================================================


def is_canonical_rad(rad: float) -> bool:
    """
    Проверка, лежит ли угол в каноническом интервале (-pi, pi].

    Args:
        rad: Угол в радианах

    Returns:
        True если -pi < rad <= pi (NaN → False)
    """
    return -PI < rad <= PI


def canonicalize_rad(rad: float) -> float:
    """
    Приведение угла к каноническому интервалу (-pi, pi].

    Алгоритм (один шаг для любого числа оборотов):
        side = copysign(pi, rad)
        f = frac((rad - side) / 2pi)
        result = -side + 2pi * f
        -pi (граница вне интервала) → pi

    Args:
        rad: Угол в радианах (любое значение)

    Returns:
        Канонический угол в радианах

    Examples:
        >>> canonicalize_rad(0.5)
        0.5
        >>> canonicalize_rad(-math.pi)
        3.141592653589793
        >>> canonicalize_rad(3 * math.pi / 2)
        -1.5707963267948966
    """
    if is_canonical_rad(rad):
        return rad

    # modf(±inf) даёт ±0.0, что превратило бы Inf в конечное ∓pi
    if not is_valid_float(rad):
        return rad

    side = math.copysign(PI, rad)
    frac, _ = math.modf((rad - side) / TWO_PI)
    result = -side + TWO_PI * frac

    # Нечётные кратные pi (frac == 0 при side = pi) и округление дают ровно -pi
    if result <= -PI:
        return PI
    return result


# =============================================================================
# КОНВЕРСИИ
# =============================================================================


def rad_to_deg(rad: float) -> float:
    """Радианы → градусы (без канонизации)"""
    return rad / PI * 180.0


def deg_to_rad(deg: float) -> float:
    """Градусы → радианы (без канонизации)"""
    return deg / 180.0 * PI
