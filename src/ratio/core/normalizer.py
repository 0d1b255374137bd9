"""
Normalizer — Приведение дроби к канонической форме

Единственное место, где создаются Rational с валидацией инвариантов:
- сокращение на gcd(numerator, denominator)
- перенос знака в числитель
- collapse: дробь со знаменателем 1 возвращается как int

Операция идемпотентна: normalize(r.numerator, r.denominator) == r.
"""

import math

from src.ratio.core.rational import Number, Rational, is_integer


# =============================================================================
# EXCEPTIONS
# =============================================================================


class DivisionByZero(ZeroDivisionError):
    """
    Нулевой знаменатель при создании дроби или при делении.

    Подкласс ZeroDivisionError, поэтому перехватывается стандартным
    `except ZeroDivisionError`.
    """

    def __init__(self, message: str = "division by zero"):
        super().__init__(message)


# =============================================================================
# GCD
# =============================================================================


def gcd(a: int, b: int) -> int:
    """
    Наибольший общий делитель (алгоритм Евклида).

    gcd(a, 0) = |a|, gcd(0, b) = |b|, gcd(a, b) = gcd(b, a mod b).
    Результат всегда неотрицательный.

    Examples:
        >>> gcd(100, 300)
        100
        >>> gcd(-4, 6)
        2
        >>> gcd(0, -7)
        7
    """
    return math.gcd(a, b)


# =============================================================================
# NORMALIZE
# =============================================================================


def normalize(numerator: int, denominator: int) -> Number:
    """
    Приведение пары (numerator, denominator) к канонической форме.

    Args:
        numerator: Числитель (int)
        denominator: Знаменатель (int, != 0)

    Returns:
        int если дробь целая, иначе несократимый Rational с denominator >= 2

    Raises:
        DivisionByZero: Если denominator == 0
        TypeError: Если numerator или denominator не int

    Examples:
        >>> normalize(100, 300)
        1 <|> 3
        >>> normalize(6, -3)
        -2
    """
    if not (is_integer(numerator) and is_integer(denominator)):
        raise TypeError(
            f"normalize expects int operands, got "
            f"{type(numerator).__name__} and {type(denominator).__name__}"
        )

    if denominator == 0:
        raise DivisionByZero(f"zero denominator: {numerator}/0")

    divisor = gcd(numerator, denominator)
    numerator //= divisor
    denominator //= divisor

    # Знак всегда в числителе
    if denominator < 0:
        numerator = -numerator
        denominator = -denominator

    if denominator == 1:
        return numerator

    return Rational(numerator=numerator, denominator=denominator)
