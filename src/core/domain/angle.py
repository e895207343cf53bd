"""
Angle — Модель плоского угла

Immutable Pydantic модель с каноническим представлением угла в радианах
в интервале (-pi, pi]. Может использоваться вместо float для удобства.

Канонизация выполняется один раз, при конструировании (field_validator):
и фабрики, и прямой вызов Angle(rad=...) дают канонический угол.
model_construct() и model_copy(update=...) валидацию пропускают и для
Angle не поддерживаются. Все арифметические операции возвращают новый
экземпляр.
"""

import math
from typing import Final

from pydantic import BaseModel, Field, TypeAdapter, field_validator

from src.core.math import angles


# Точность по умолчанию для is_approx.
# Исторически документирована как градусы, но сравнивается с разностью в радианах.
DEFAULT_APPROX_PREC: Final[float] = 1e-5

# Та же проверка, что у поля rad: int принимается, str и bool нет
_STRICT_FLOAT: Final[TypeAdapter[float]] = TypeAdapter(float, config={"strict": True})


# =============================================================================
# ANGLE MODEL
# =============================================================================


class Angle(BaseModel):
    """
    Модель плоского угла.

    Immutable модель (frozen=True). Каноническое значение хранится в
    радианах, -pi < rad <= pi.

    Angle() без аргументов даёт неинициализированный placeholder (rad=NaN)
    для контекстов с отложенным присваиванием. Читать его до присваивания
    канонического значения нельзя: это нарушение предусловия вызывающей
    стороной, а не ошибка, о которой сообщается.
    """

    # Публичное только для использования как interface type, читать через get_rad()
    rad: float = Field(
        default=math.nan,
        strict=True,  # str и bool не принимаются
        description="Угол в радианах, -pi < rad <= pi",
    )

    model_config = {"frozen": True}  # Immutable

    @field_validator("rad")
    @classmethod
    def canonize(cls, v: float) -> float:
        """Приведение к каноническому интервалу (-pi, pi]"""
        return angles.canonicalize_rad(float(v))

    # -------------------------------------------------------------------------
    # Фабрики
    # -------------------------------------------------------------------------

    @classmethod
    def from_rad(cls, rad: float) -> "Angle":
        """
        Угол из радиан.

        Args:
            rad: Угол в радианах (любое значение)

        Returns:
            Канонический Angle
        """
        return cls(rad=rad)

    @classmethod
    def from_deg(cls, deg: float) -> "Angle":
        """
        Угол из градусов.

        Args:
            deg: Угол в градусах (любое значение)

        Returns:
            Канонический Angle
        """
        deg = _STRICT_FLOAT.validate_python(deg)
        return cls(rad=angles.deg_to_rad(deg))

    @classmethod
    def unset(cls) -> "Angle":
        """Явный неинициализированный placeholder (rad=NaN)"""
        return cls()

    # -------------------------------------------------------------------------
    # Статические конверсии (без канонизации)
    # -------------------------------------------------------------------------

    @staticmethod
    def rad_to_deg(rad: float) -> float:
        """Радианы → градусы"""
        return angles.rad_to_deg(rad)

    @staticmethod
    def deg_to_rad(deg: float) -> float:
        """Градусы → радианы"""
        return angles.deg_to_rad(deg)

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    def get_rad(self) -> float:
        """Каноническое значение угла в радианах"""
        return self.rad

    def get_deg(self) -> float:
        """Каноническое значение угла в градусах, (-180, 180]"""
        return angles.rad_to_deg(self.rad)

    def is_set(self) -> bool:
        """
        Было ли присвоено значение.

        False для placeholder Angle(), а также для угла, построенного из NaN:
        эти два случая неразличимы.
        """
        return not math.isnan(self.rad)

    def is_approx(self, other: "Angle", prec: float = DEFAULT_APPROX_PREC) -> bool:
        """
        Приближённое равенство двух углов.

        Допуск prec сравнивается напрямую с разностью в радианах
        (в исторической документации он описан как градусы).
        Переход через ±pi не учитывается.

        Args:
            other: Угол для сравнения
            prec: Допуск

        Returns:
            True если |other.rad - self.rad| < prec
        """
        return abs(other.rad - self.rad) < prec

    # -------------------------------------------------------------------------
    # Операторы
    # -------------------------------------------------------------------------

    def __add__(self, other: object) -> "Angle":
        if not isinstance(other, Angle):
            return NotImplemented
        return add(self, other)

    def __sub__(self, other: object) -> "Angle":
        if not isinstance(other, Angle):
            return NotImplemented
        return subtract(self, other)

    def __mul__(self, k: object) -> "Angle":
        if not isinstance(k, (int, float)):
            return NotImplemented
        return scale(self, k)

    def __rmul__(self, k: object) -> "Angle":
        if not isinstance(k, (int, float)):
            return NotImplemented
        return scale(k, self)

    def __str__(self) -> str:
        # rad в стиле потока C (6 значащих цифр), градусы с одним знаком
        return f"{self.rad:g}[{self.get_deg():3.1f}deg]"


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


def add(a: Angle, b: Angle) -> Angle:
    """Сумма углов (канонизированная)"""
    return Angle.from_rad(a.get_rad() + b.get_rad())


def subtract(a: Angle, b: Angle) -> Angle:
    """Разность углов (канонизированная)"""
    return Angle.from_rad(a.get_rad() - b.get_rad())


def scale(a: Angle | float, k: Angle | float) -> Angle:
    """
    Умножение угла на скаляр (канонизированное).

    Коммутативно: скаляр может стоять с любой стороны,
    scale(angle, 2.0) == scale(2.0, angle).

    Args:
        a: Angle или скаляр
        k: Скаляр или Angle

    Returns:
        Канонический Angle

    Raises:
        TypeError: Если оба аргумента Angle или ни один из них
    """
    if isinstance(a, Angle) and not isinstance(k, Angle):
        return Angle.from_rad(a.get_rad() * k)
    if isinstance(k, Angle) and not isinstance(a, Angle):
        return Angle.from_rad(a * k.get_rad())
    raise TypeError(
        f"scale expects one Angle and one scalar, "
        f"got {type(a).__name__} and {type(k).__name__}"
    )
