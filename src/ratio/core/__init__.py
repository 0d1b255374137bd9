"""
Core модули ratio

Точная рациональная арифметика: каноническая форма, смешанная арифметика
int/Rational, сравнение и целочисленное возведение в степень.
"""

from src.ratio.core.rational import Number, Rational, is_integer, is_number
from src.ratio.core.normalizer import DivisionByZero, gcd, normalize
from src.ratio.core.float_conversion import (
    DEFAULT_MAX_FLOAT_DIGITS,
    float_to_rational,
    validate_digits,
)
from src.ratio.core.arithmetic import (
    abs_,
    add,
    coerce,
    div,
    mul,
    negate,
    plus,
    sign,
    sub,
)
from src.ratio.core.constructor import denominator, is_rational, make, new, numerator
from src.ratio.core.comparator import ComparisonError, compare, gt, gte, lt, lte
from src.ratio.core.power import pow_
from src.ratio.core.presentation import to_float, to_string

__all__ = [
    # Types
    "Number",
    "Rational",
    "is_integer",
    "is_number",
    # Normalizer
    "DivisionByZero",
    "gcd",
    "normalize",
    # Float conversion
    "DEFAULT_MAX_FLOAT_DIGITS",
    "float_to_rational",
    "validate_digits",
    # Arithmetic
    "abs_",
    "add",
    "coerce",
    "div",
    "mul",
    "negate",
    "plus",
    "sign",
    "sub",
    # Constructor
    "denominator",
    "is_rational",
    "make",
    "new",
    "numerator",
    # Comparator
    "ComparisonError",
    "compare",
    "gt",
    "gte",
    "lt",
    "lte",
    # Power
    "pow_",
    # Presentation
    "to_float",
    "to_string",
]
