"""
Rational — Каноническое рациональное число

Immutable Pydantic модель, представляющая несократимую дробь numerator/denominator.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ (проверяются при каждом валидируемом создании):
1. denominator > 0 (знак всегда хранится в numerator)
2. gcd(|numerator|, denominator) == 1
3. denominator != 1 (целые значения всегда представлены как int)

Прямое создание Rational(...) с неканоническими полями запрещено
(pydantic.ValidationError). Используйте make()/new() из constructor.

Операторы Python (+, -, *, /, **, ==, <, ...) являются тонкими обёртками над
функциями arithmetic/comparator/power и не содержат собственной логики.
"""

import math
from fractions import Fraction
from typing import Union

from pydantic import BaseModel, Field, model_validator


# =============================================================================
# RATIONAL MODEL
# =============================================================================


class Rational(BaseModel):
    """
    Несократимая дробь с положительным знаменателем >= 2.

    Immutable модель (frozen=True): все операции создают новый экземпляр.
    """

    numerator: int = Field(..., strict=True, description="Числитель (несёт знак)")
    denominator: int = Field(..., strict=True, ge=2, description="Знаменатель (>= 2)")

    model_config = {"frozen": True}  # Immutable

    @model_validator(mode="after")
    def validate_canonical_form(self) -> "Rational":
        """Проверка несократимости дроби."""
        if self.numerator == 0:
            raise ValueError("Zero must be represented as int 0, not as Rational")

        if math.gcd(self.numerator, self.denominator) != 1:
            raise ValueError(
                f"Rational {self.numerator}/{self.denominator} is not reduced; "
                f"use make() to construct rationals"
            )

        return self

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def __add__(self, other):
        if not is_number(other):
            return NotImplemented
        from src.ratio.core.arithmetic import add

        return add(self, other)

    def __radd__(self, other):
        if not is_number(other):
            return NotImplemented
        from src.ratio.core.arithmetic import add

        return add(other, self)

    def __sub__(self, other):
        if not is_number(other):
            return NotImplemented
        from src.ratio.core.arithmetic import sub

        return sub(self, other)

    def __rsub__(self, other):
        if not is_number(other):
            return NotImplemented
        from src.ratio.core.arithmetic import sub

        return sub(other, self)

    def __mul__(self, other):
        if not is_number(other):
            return NotImplemented
        from src.ratio.core.arithmetic import mul

        return mul(self, other)

    def __rmul__(self, other):
        if not is_number(other):
            return NotImplemented
        from src.ratio.core.arithmetic import mul

        return mul(other, self)

    def __truediv__(self, other):
        if not is_number(other):
            return NotImplemented
        from src.ratio.core.arithmetic import div

        return div(self, other)

    def __rtruediv__(self, other):
        if not is_number(other):
            return NotImplemented
        from src.ratio.core.arithmetic import div

        return div(other, self)

    def __pow__(self, exponent):
        if not isinstance(exponent, int) or isinstance(exponent, bool):
            return NotImplemented
        from src.ratio.core.power import pow_

        return pow_(self, exponent)

    def __neg__(self):
        from src.ratio.core.arithmetic import negate

        return negate(self)

    def __pos__(self):
        return self

    def __abs__(self):
        from src.ratio.core.arithmetic import abs_

        return abs_(self)

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def __eq__(self, other):
        if not is_number(other):
            return NotImplemented
        if isinstance(other, float) and math.isnan(other):
            return False
        from src.ratio.core.comparator import compare

        return compare(self, other) == 0

    def __hash__(self) -> int:
        # Совпадает с hash(float) для значений, точно представимых в float
        return hash(Fraction(self.numerator, self.denominator))

    def __lt__(self, other):
        if not is_number(other):
            return NotImplemented
        from src.ratio.core.comparator import lt

        return lt(self, other)

    def __le__(self, other):
        if not is_number(other):
            return NotImplemented
        from src.ratio.core.comparator import lte

        return lte(self, other)

    def __gt__(self, other):
        if not is_number(other):
            return NotImplemented
        from src.ratio.core.comparator import gt

        return gt(self, other)

    def __ge__(self, other):
        if not is_number(other):
            return NotImplemented
        from src.ratio.core.comparator import gte

        return gte(self, other)

    # -------------------------------------------------------------------------
    # Конверсии
    # -------------------------------------------------------------------------

    def __float__(self) -> float:
        from src.ratio.core.presentation import to_float

        return to_float(self)

    def __str__(self) -> str:
        from src.ratio.core.presentation import to_string

        return to_string(self)

    def __repr__(self) -> str:
        from src.ratio.core.presentation import to_string

        return to_string(self)


# Результат любой операции ядра: целое или несократимая дробь
Number = Union[int, Rational]


# =============================================================================
# TYPE CHECKS
# =============================================================================


def is_integer(value: object) -> bool:
    """
    Проверка, является ли значение целым операндом.

    bool не считается числом, хотя и является подклассом int.
    """
    return isinstance(value, int) and not isinstance(value, bool)


def is_number(value: object) -> bool:
    """
    Проверка, является ли значение допустимым операндом (int, float, Rational).
    """
    return is_integer(value) or isinstance(value, (float, Rational))
