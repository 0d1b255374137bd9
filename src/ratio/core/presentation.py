"""
Presentation — Текстовое представление и конверсия в float
"""

from src.ratio.core.rational import Rational, is_number


def to_string(value) -> str:
    """
    Строковое представление числа.

    Examples:
        >>> to_string(make(10, 7))
        '10 <|> 7'
        >>> to_string(5)
        '5'
    """
    if isinstance(value, Rational):
        return f"{value.numerator} <|> {value.denominator}"

    if not is_number(value):
        raise TypeError(f"unsupported operand type: {type(value).__name__}")

    return str(value)


def to_float(value) -> float:
    """
    Конверсия в float. Операция в общем случае необратима.
    """
    if isinstance(value, Rational):
        return value.numerator / value.denominator

    if not is_number(value):
        raise TypeError(f"unsupported operand type: {type(value).__name__}")

    return float(value)
