"""
Arithmetic — Точная арифметика над int | Rational

Модуль реализует сложение, вычитание, умножение, деление, смену знака,
модуль и знак с диспетчеризацией по типам операндов.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждый результат проходит через normalize (канонический вид, collapse в int)
2. Операнды никогда не изменяются, всегда создаётся новое значение
3. float-операнды сначала переводятся в дробь через float_to_rational(value, digits)
4. Деление на ноль → DivisionByZero (без fallback-значений)

ФОРМУЛЫ:
    a/b + c/d = (a·d + c·b) / (b·d)     (без предварительного LCM)
    a/b · c/d = (a·c) / (b·d)
    (a/b) / (c/d) = (a·d) / (b·c)
"""

import math

from src.ratio.core.float_conversion import DEFAULT_MAX_FLOAT_DIGITS, float_to_rational
from src.ratio.core.normalizer import DivisionByZero, normalize
from src.ratio.core.rational import Number, Rational, is_integer

# =============================================================================
# ПРИВЕДЕНИЕ ОПЕРАНДОВ
# =============================================================================


def coerce(value, digits: int = DEFAULT_MAX_FLOAT_DIGITS) -> Number:
    """
    Приведение операнда к int | Rational.

    Args:
        value: int, float или Rational
        digits: Точность конверсии float (десятичных знаков)

    Returns:
        int или Rational (float конвертируется через float_to_rational)

    Raises:
        TypeError: Если тип операнда не поддерживается
    """
    if is_integer(value) or isinstance(value, Rational):
        return value

    if isinstance(value, float):
        return float_to_rational(value, digits)

    raise TypeError(f"unsupported operand type: {type(value).__name__}")


# =============================================================================
# СЛОЖЕНИЕ И ВЫЧИТАНИЕ
# =============================================================================


def add(a, b, digits: int = DEFAULT_MAX_FLOAT_DIGITS) -> Number:
    """
    Сложение a + b.

    Examples:
        >>> add(make(1, 2), make(1, 3))
        5 <|> 6
        >>> add(2.3, 0.3)
        13 <|> 5
    """
    a = coerce(a, digits)
    b = coerce(b, digits)

    if is_integer(a) and is_integer(b):
        return a + b

    if is_integer(a):
        return normalize(a * b.denominator + b.numerator, b.denominator)

    if is_integer(b):
        return normalize(b * a.denominator + a.numerator, a.denominator)

    if a.denominator == b.denominator:
        return normalize(a.numerator + b.numerator, a.denominator)

    # Перекрёстное умножение; промежуточная дробь может быть несократимой,
    # сокращение выполняет normalize
    return normalize(
        a.numerator * b.denominator + b.numerator * a.denominator,
        a.denominator * b.denominator,
    )


def sub(a, b, digits: int = DEFAULT_MAX_FLOAT_DIGITS) -> Number:
    """Вычитание a - b = a + (-b)."""
    a = coerce(a, digits)
    b = coerce(b, digits)

    if is_integer(a) and is_integer(b):
        return a - b

    return add(a, negate(b), digits)


def negate(value, digits: int = DEFAULT_MAX_FLOAT_DIGITS) -> Number:
    """
    Смена знака.

    Для Rational(n, d) возвращается Rational(-n, d) без повторной нормализации:
    смена знака числителя не нарушает ни gcd, ни знак знаменателя.
    """
    value = coerce(value, digits)

    if is_integer(value):
        return -value

    return Rational.model_construct(numerator=-value.numerator, denominator=value.denominator)


def plus(value, digits: int = DEFAULT_MAX_FLOAT_DIGITS) -> Number:
    """Унарный плюс: int и Rational без изменений, float → дробь."""
    return coerce(value, digits)


# =============================================================================
# УМНОЖЕНИЕ И ДЕЛЕНИЕ
# =============================================================================


def mul(a, b, digits: int = DEFAULT_MAX_FLOAT_DIGITS) -> Number:
    """
    Умножение a * b.

    Examples:
        >>> mul(make(2, 3), 10)
        20 <|> 3
    """
    a = coerce(a, digits)
    b = coerce(b, digits)

    if is_integer(a) and is_integer(b):
        return a * b

    if is_integer(a):
        return normalize(b.numerator * a, b.denominator)

    if is_integer(b):
        return normalize(a.numerator * b, a.denominator)

    return normalize(a.numerator * b.numerator, a.denominator * b.denominator)


def div(a, b, digits: int = DEFAULT_MAX_FLOAT_DIGITS) -> Number:
    """
    Деление a / b.

    Результат: int, если деление нацело, иначе Rational.

    Raises:
        DivisionByZero: Если b равно нулю (в т.ч. float, округлённый до 0)

    Examples:
        >>> div(make(1, 3), 2)
        1 <|> 6
        >>> div(make(2, 3), make(8, 3))
        1 <|> 4
    """
    a = coerce(a, digits)
    b = coerce(b, digits)

    # Rational никогда не равен нулю, достаточно проверить int
    if is_integer(b) and b == 0:
        raise DivisionByZero(f"division by zero: {a} / 0")

    if is_integer(a) and is_integer(b):
        return normalize(a, b)

    if is_integer(b):
        return normalize(a.numerator, a.denominator * b)

    if is_integer(a):
        # 6 / (2/3) = 6 · 3/2
        return normalize(a * b.denominator, b.numerator)

    return normalize(a.numerator * b.denominator, a.denominator * b.numerator)


# =============================================================================
# МОДУЛЬ И ЗНАК
# =============================================================================


def abs_(value, digits: int = DEFAULT_MAX_FLOAT_DIGITS) -> Number:
    """
    Абсолютное значение.

    Examples:
        >>> abs_(make(-5, 2))
        5 <|> 2
    """
    value = coerce(value, digits)

    if is_integer(value):
        return abs(value)

    return normalize(abs(value.numerator), value.denominator)


def sign(value) -> int:
    """
    Знак числа: 1 (положительное), -1 (отрицательное), 0 (ноль).

    Для float конверсия не выполняется, используется обычное сравнение.

    Raises:
        ValueError: Если value равно NaN
        TypeError: Если тип не поддерживается
    """
    if isinstance(value, Rational):
        value = value.numerator
    elif isinstance(value, float):
        if math.isnan(value):
            raise ValueError("sign of NaN is undefined")
    elif not is_integer(value):
        raise TypeError(f"unsupported operand type: {type(value).__name__}")

    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0
