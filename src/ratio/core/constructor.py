"""
Constructor — Публичный способ создания рациональных чисел

make(numerator, denominator) (алиас new) — единственный допустимый конструктор:
- отклоняет нулевой знаменатель (DivisionByZero, включая 0/0)
- float-операнды переводит в дробь через float_to_rational(value, digits)
- если хотя бы один операнд Rational, сводит создание к делению:
  make(1/2, 3/4) == div(1/2, 3/4) == 2/3
- пару int передаёт в normalize

Float: base-2 float не представляет десятичные дроби точно, поэтому они
округляются до `digits` знаков. По возможности используйте int.
"""

from src.ratio.core.arithmetic import div
from src.ratio.core.float_conversion import DEFAULT_MAX_FLOAT_DIGITS, float_to_rational
from src.ratio.core.normalizer import DivisionByZero, normalize
from src.ratio.core.rational import Number, Rational, is_integer, is_number


# =============================================================================
# CONSTRUCTOR
# =============================================================================


def make(numerator, denominator, digits: int = DEFAULT_MAX_FLOAT_DIGITS) -> Number:
    """
    Создание рационального числа numerator / denominator в канонической форме.

    Args:
        numerator: int, float или Rational
        denominator: int, float или Rational (не ноль)
        digits: Точность конверсии float (десятичных знаков)

    Returns:
        int если значение целое, иначе Rational

    Raises:
        DivisionByZero: Если denominator равен нулю
        TypeError: Если тип операнда не поддерживается

    Examples:
        >>> make(100, 300)
        1 <|> 3
        >>> make(1.5, 4)
        3 <|> 8
        >>> make(10, 5)
        2
    """
    if not (is_number(numerator) and is_number(denominator)):
        raise TypeError(
            f"unsupported operand types: "
            f"{type(numerator).__name__} and {type(denominator).__name__}"
        )

    if is_integer(denominator) and denominator == 0:
        raise DivisionByZero(f"zero denominator: {numerator}/0")

    if isinstance(numerator, float):
        return make(float_to_rational(numerator, digits), denominator, digits)

    if isinstance(denominator, float):
        return make(numerator, float_to_rational(denominator, digits), digits)

    if is_integer(numerator) and is_integer(denominator):
        return normalize(numerator, denominator)

    return div(numerator, denominator, digits)


def new(numerator, denominator, digits: int = DEFAULT_MAX_FLOAT_DIGITS) -> Number:
    """Префиксный алиас make()."""
    return make(numerator, denominator, digits)


# =============================================================================
# ACCESSORS
# =============================================================================


def numerator(value, digits: int = DEFAULT_MAX_FLOAT_DIGITS) -> int:
    """
    Числитель значения как рационального числа.

    int → само значение, float → числитель после конверсии.
    """
    if isinstance(value, float):
        value = float_to_rational(value, digits)

    if is_integer(value):
        return value

    if isinstance(value, Rational):
        return value.numerator

    raise TypeError(f"unsupported operand type: {type(value).__name__}")


def denominator(value, digits: int = DEFAULT_MAX_FLOAT_DIGITS) -> int:
    """
    Знаменатель значения как рационального числа.

    int → 1, float → знаменатель после конверсии.
    """
    if isinstance(value, float):
        value = float_to_rational(value, digits)

    if is_integer(value):
        return 1

    if isinstance(value, Rational):
        return value.denominator

    raise TypeError(f"unsupported operand type: {type(value).__name__}")


def is_rational(value: object) -> bool:
    """
    True только для Rational (несократимая нецелая дробь).

    Для int, float и прочих типов False. Чтобы проверить float,
    сначала сконвертируйте его: is_rational(plus(20.234)) → True.
    """
    return isinstance(value, Rational)
