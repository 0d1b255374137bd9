"""
Float Conversion — Перевод float в точную дробь

Base-2 float не может точно представить большинство десятичных дробей
(0.1 хранится как 3602879701896397/36028797018963968). Поэтому перед
конверсией значение округляется до `digits` десятичных знаков, а затем
кратчайшее десятичное представление округлённого float переводится
в точную дробь:

    0.1    → 1/10
    1.5    → 3/2
    -123.456 → -15432/125

Точность передаётся явно параметром `digits` (default: DEFAULT_MAX_FLOAT_DIGITS),
глобальной изменяемой конфигурации нет.
"""

import logging
import math
from decimal import Decimal
from typing import Final

from src.ratio.core.normalizer import normalize
from src.ratio.core.rational import Number

logger = logging.getLogger(__name__)

# =============================================================================
# ПАРАМЕТРЫ ТОЧНОСТИ
# =============================================================================

# Количество десятичных знаков, до которого округляется float перед конверсией
DEFAULT_MAX_FLOAT_DIGITS: Final[int] = 10


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_digits(digits: int) -> None:
    """
    Валидация параметра точности.

    Raises:
        TypeError: Если digits не int
        ValueError: Если digits < 0
    """
    if not isinstance(digits, int) or isinstance(digits, bool):
        raise TypeError(f"digits must be int, got {type(digits).__name__}")

    if digits < 0:
        raise ValueError(f"digits must be non-negative, got {digits}")


# =============================================================================
# КОНВЕРСИЯ
# =============================================================================


def float_to_rational(value: float, digits: int = DEFAULT_MAX_FLOAT_DIGITS) -> Number:
    """
    Конверсия float → int | Rational с округлением до `digits` знаков.

    Args:
        value: Исходное значение (конечный float)
        digits: Количество десятичных знаков после запятой (default: 10)

    Returns:
        Каноническое значение (int если округлённое значение целое)

    Raises:
        TypeError: Если value не float
        ValueError: Если value NaN/Inf или digits < 0

    Examples:
        >>> float_to_rational(1.5)
        3 <|> 2
        >>> float_to_rational(20.0)
        20
        >>> float_to_rational(0.333333333333)
        3333333333 <|> 10000000000
    """
    if not isinstance(value, float):
        raise TypeError(f"float_to_rational expects float, got {type(value).__name__}")

    if not math.isfinite(value):
        raise ValueError(f"value must be a valid float (not NaN/Inf), got {value}")

    validate_digits(digits)

    rounded = round(value, digits)
    if rounded != value:
        logger.debug("float %r rounded to %r (%d digits)", value, rounded, digits)

    # repr даёт кратчайшую десятичную запись, однозначно восстанавливающую float
    numerator, denominator = Decimal(repr(rounded)).as_integer_ratio()
    return normalize(numerator, denominator)
