"""
Тесты для Normalizer и модели Rational

Проверяемые инварианты:
1. denominator > 0, знак всегда в числителе
2. gcd(|numerator|, denominator) == 1
3. denominator != 1 (collapse в int)
4. Идемпотентность normalize
5. Прямое создание неканонического Rational запрещено
"""

import math

import pytest
from pydantic import ValidationError

from src.ratio.core.normalizer import DivisionByZero, gcd, normalize
from src.ratio.core.rational import Rational, is_integer, is_number


def assert_canonical(value):
    """Проверка канонической формы результата."""
    if isinstance(value, Rational):
        assert value.denominator > 1
        assert math.gcd(abs(value.numerator), value.denominator) == 1
    else:
        assert is_integer(value)


# =============================================================================
# ТЕСТЫ: GCD
# =============================================================================


class TestGcd:
    """Тесты gcd: алгоритм Евклида."""

    def test_base_cases(self):
        """gcd(a, 0) = |a|, gcd(0, b) = |b|."""
        assert gcd(7, 0) == 7
        assert gcd(-7, 0) == 7
        assert gcd(0, 5) == 5
        assert gcd(0, -5) == 5

    def test_common_divisor(self):
        assert gcd(100, 300) == 100
        assert gcd(12, 18) == 6
        assert gcd(17, 5) == 1

    def test_result_is_non_negative(self):
        """Результат неотрицательный при любых знаках."""
        assert gcd(-4, 6) == 2
        assert gcd(4, -6) == 2
        assert gcd(-4, -6) == 2


# =============================================================================
# ТЕСТЫ: NORMALIZE
# =============================================================================


class TestNormalize:
    """Тесты normalize: сокращение, знак, collapse."""

    def test_reduces_fraction(self):
        assert normalize(100, 300) == Rational(numerator=1, denominator=3)
        assert normalize(6, 8) == Rational(numerator=3, denominator=4)

    def test_sign_moves_to_numerator(self):
        """Отрицательный знаменатель переносит знак в числитель."""
        assert normalize(1, -3) == Rational(numerator=-1, denominator=3)
        assert normalize(-1, -3) == Rational(numerator=1, denominator=3)

    def test_collapse_to_int(self):
        """Знаменатель 1 после сокращения → int."""
        result = normalize(10, 5)
        assert result == 2
        assert type(result) is int

        assert normalize(6, -3) == -2
        assert normalize(7, 1) == 7

    def test_zero_numerator_collapses_to_zero(self):
        assert normalize(0, 5) == 0
        assert normalize(0, -5) == 0

    def test_zero_denominator_raises(self):
        with pytest.raises(DivisionByZero):
            normalize(1, 0)

        with pytest.raises(DivisionByZero):
            normalize(0, 0)

    def test_division_by_zero_is_zero_division_error(self):
        """DivisionByZero перехватывается как ZeroDivisionError."""
        with pytest.raises(ZeroDivisionError):
            normalize(3, 0)

    def test_non_integer_operands_raise(self):
        with pytest.raises(TypeError, match="int operands"):
            normalize(1.5, 2)

        with pytest.raises(TypeError, match="int operands"):
            normalize(True, 2)

    @pytest.mark.parametrize(
        "numerator,denominator",
        [(1, 2), (-3, 9), (100, -300), (0, 7), (12, 4), (-49, -14), (10**30, 6 * 10**20)],
    )
    def test_canonical_form(self, numerator, denominator):
        assert_canonical(normalize(numerator, denominator))

    @pytest.mark.parametrize(
        "numerator,denominator",
        [(1, 2), (-3, 9), (100, -300), (12, 4), (-49, -14)],
    )
    def test_idempotent(self, numerator, denominator):
        """normalize(normalize(n, d)) == normalize(n, d)."""
        first = normalize(numerator, denominator)
        if isinstance(first, Rational):
            again = normalize(first.numerator, first.denominator)
        else:
            again = normalize(first, 1)
        assert again == first


# =============================================================================
# ТЕСТЫ: RATIONAL MODEL
# =============================================================================


class TestRationalModel:
    """Тесты pydantic-модели Rational."""

    def test_valid_construction(self):
        r = Rational(numerator=-5, denominator=2)
        assert r.numerator == -5
        assert r.denominator == 2

    def test_rejects_unreduced(self):
        with pytest.raises(ValidationError, match="not reduced"):
            Rational(numerator=2, denominator=4)

    def test_rejects_denominator_one(self):
        with pytest.raises(ValidationError):
            Rational(numerator=3, denominator=1)

    def test_rejects_negative_denominator(self):
        with pytest.raises(ValidationError):
            Rational(numerator=1, denominator=-3)

    def test_rejects_zero_numerator(self):
        with pytest.raises(ValidationError, match="int 0"):
            Rational(numerator=0, denominator=3)

    def test_rejects_non_int_fields(self):
        """strict=True: float и bool не принимаются."""
        with pytest.raises(ValidationError):
            Rational(numerator=1.0, denominator=3)

        with pytest.raises(ValidationError):
            Rational(numerator=True, denominator=3)

    def test_frozen(self):
        r = Rational(numerator=1, denominator=3)
        with pytest.raises(ValidationError):
            r.numerator = 2

    def test_hashable_and_equal_by_value(self):
        a = normalize(2, 6)
        b = normalize(-1, -3)
        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1


class TestTypeChecks:
    """Тесты is_integer / is_number."""

    def test_is_integer(self):
        assert is_integer(5)
        assert not is_integer(True)
        assert not is_integer(5.0)

    def test_is_number(self):
        assert is_number(5)
        assert is_number(5.0)
        assert is_number(Rational(numerator=1, denominator=2))
        assert not is_number(False)
        assert not is_number("5")
        assert not is_number(None)
