"""
Comparator — Полный порядок над int | float | Rational

Сравнение дробей выполняется перекрёстным умножением без деления,
поэтому точность не теряется:

    a/b ? c/d  ⇔  a·d ? c·b     (b, d > 0 по инварианту Rational)

Конечный float сначала переводится в дробь через float_to_rational(value, digits),
так же как в arithmetic, поэтому compare(a, b) совпадает со знаком sub(a, b).
±inf больше (меньше) любого конечного значения. NaN и нечисловые операнды
не сравниваются (ComparisonError).
"""

import math

from src.ratio.core.float_conversion import DEFAULT_MAX_FLOAT_DIGITS, float_to_rational
from src.ratio.core.rational import Rational, is_number


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ComparisonError(TypeError):
    """Операнды не могут быть упорядочены или сравнены на равенство."""

    def __init__(self, message: str = "These things cannot be compared."):
        super().__init__(message)


# =============================================================================
# COMPARE
# =============================================================================


def compare(a, b, digits: int = DEFAULT_MAX_FLOAT_DIGITS) -> int:
    """
    Сравнение двух чисел.

    Args:
        a: int, float или Rational
        b: int, float или Rational
        digits: Точность конверсии float (десятичных знаков)

    Returns:
        -1 если a < b
         0 если a == b
        +1 если a > b

    Raises:
        ComparisonError: Если операнды нечисловые или несравнимые (NaN)

    Examples:
        >>> compare(make(1, 3), make(1, 2))
        -1
        >>> compare(make(4, 2), 2)
        0
        >>> compare(make(1, 10**400), 0.5)
        -1
    """
    if not (is_number(a) and is_number(b)):
        raise ComparisonError(f"These things cannot be compared: {a!r}, {b!r}")

    if _is_nan(a) or _is_nan(b):
        raise ComparisonError(f"These things cannot be compared: {a!r}, {b!r}")

    # Бесконечность: дробью не представима, сравнивается по знаку
    if _is_inf(a) or _is_inf(b):
        if isinstance(a, float) and isinstance(b, float):
            return _compare_native(a, b)
        if _is_inf(a):
            return 1 if a > 0 else -1
        return -1 if b > 0 else 1

    if isinstance(a, float):
        a = float_to_rational(a, digits)
    if isinstance(b, float):
        b = float_to_rational(b, digits)

    if isinstance(a, Rational) and isinstance(b, Rational):
        return _compare_native(a.numerator * b.denominator, b.numerator * a.denominator)

    if isinstance(a, Rational):
        return _compare_native(a.numerator, b * a.denominator)

    if isinstance(b, Rational):
        return _compare_native(a * b.denominator, b.numerator)

    return _compare_native(a, b)


def _is_nan(value) -> bool:
    return isinstance(value, float) and math.isnan(value)


def _is_inf(value) -> bool:
    return isinstance(value, float) and math.isinf(value)


def _compare_native(a, b) -> int:
    if a > b:
        return 1
    if a < b:
        return -1
    if a == b:
        return 0
    raise ComparisonError(f"These things cannot be compared: {a!r}, {b!r}")


# =============================================================================
# PREDICATES
# =============================================================================


def gt(a, b, digits: int = DEFAULT_MAX_FLOAT_DIGITS) -> bool:
    """True если a > b."""
    return compare(a, b, digits) == 1


def lt(a, b, digits: int = DEFAULT_MAX_FLOAT_DIGITS) -> bool:
    """True если a < b."""
    return compare(a, b, digits) == -1


def gte(a, b, digits: int = DEFAULT_MAX_FLOAT_DIGITS) -> bool:
    """True если a >= b."""
    return compare(a, b, digits) >= 0


def lte(a, b, digits: int = DEFAULT_MAX_FLOAT_DIGITS) -> bool:
    """True если a <= b."""
    return compare(a, b, digits) <= 0
