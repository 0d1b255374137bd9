"""
Power — Целочисленное возведение в степень

Возведение в степень возведением в квадрат (O(log n) умножений).
Все промежуточные умножения и обращение основания выполняются через
arithmetic.mul/div, поэтому результат точный.

Показатель — только int (корни не поддерживаются).
"""

from src.ratio.core.arithmetic import coerce, div, mul
from src.ratio.core.float_conversion import DEFAULT_MAX_FLOAT_DIGITS
from src.ratio.core.rational import Number, is_integer


def pow_(base, exponent: int, digits: int = DEFAULT_MAX_FLOAT_DIGITS) -> Number:
    """
    Возведение base в целую степень exponent.

    Args:
        base: int, float или Rational (float конвертируется в дробь)
        exponent: Целый показатель (может быть отрицательным)
        digits: Точность конверсии float (десятичных знаков)

    Returns:
        int или Rational

    Raises:
        TypeError: Если exponent не int
        DivisionByZero: Если base == 0 и exponent < 0

    Examples:
        >>> pow_(2, 4)
        16
        >>> pow_(2, -4)
        1 <|> 16
        >>> pow_(make(3, 2), 10)
        59049 <|> 1024
    """
    if not is_integer(exponent):
        raise TypeError(f"exponent must be int, got {type(exponent).__name__}")

    base = coerce(base, digits)

    # Малые степени
    if exponent == 1:
        return base
    if exponent == 2:
        return mul(base, base)
    if exponent == 3:
        return mul(mul(base, base), base)

    if exponent < 0:
        base = div(1, base)
        exponent = -exponent

    result = 1
    while exponent > 1:
        if exponent % 2 == 1:
            result = mul(base, result)
        base = mul(base, base)
        exponent //= 2

    if exponent == 1:
        result = mul(base, result)

    return result
