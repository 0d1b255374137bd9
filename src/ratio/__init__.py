"""
ratio — точная рациональная арифметика

Замена float для вычислений, где нужны точные дроби (финансы, символьные
вычисления). Результаты всегда в канонической форме; целые значения
возвращаются как int.

    >>> from src.ratio import add, make
    >>> add(make(1, 2), make(1, 3))
    5 <|> 6
"""

from src.ratio.core import (
    DEFAULT_MAX_FLOAT_DIGITS,
    ComparisonError,
    DivisionByZero,
    Number,
    Rational,
    abs_,
    add,
    compare,
    denominator,
    div,
    float_to_rational,
    gt,
    gte,
    is_rational,
    lt,
    lte,
    make,
    mul,
    negate,
    new,
    normalize,
    numerator,
    plus,
    pow_,
    sign,
    sub,
    to_float,
    to_string,
)

__version__ = "0.6.1"

__all__ = [
    # Types
    "Number",
    "Rational",
    # Exceptions
    "ComparisonError",
    "DivisionByZero",
    # Construction
    "DEFAULT_MAX_FLOAT_DIGITS",
    "float_to_rational",
    "make",
    "new",
    "normalize",
    "numerator",
    "denominator",
    "is_rational",
    # Arithmetic
    "abs_",
    "add",
    "div",
    "mul",
    "negate",
    "plus",
    "pow_",
    "sign",
    "sub",
    # Comparison
    "compare",
    "gt",
    "gte",
    "lt",
    "lte",
    # Presentation
    "to_float",
    "to_string",
]
