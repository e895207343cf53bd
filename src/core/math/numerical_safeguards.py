"""
Numerical Safeguards — проверки валидности float

Угловая арифметика тотальна над float: NaN/Inf не отклоняются и не
санитизируются, а проходят насквозь. Модуль даёт единый предикат, которым
математические функции отделяют конечные значения от NaN/Inf, чтобы
не применять к ним формулы, рассчитанные на конечные входы.
"""

import math


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)
