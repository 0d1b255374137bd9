"""
Тесты для Presentation и сквозных сценариев публичного API
"""

import pytest

from src.ratio import (
    Rational,
    add,
    div,
    make,
    mul,
    pow_,
    to_float,
    to_string,
)


class TestToString:
    """Тесты to_string."""

    def test_rational(self):
        assert to_string(make(10, 7)) == "10 <|> 7"
        assert to_string(make(-1, 3)) == "-1 <|> 3"

    def test_int(self):
        assert to_string(make(10, 5)) == "2"
        assert to_string(-8) == "-8"

    def test_repr_matches_to_string(self):
        assert repr(make(10, 7)) == "10 <|> 7"
        assert repr([make(1, 2), 3]) == "[1 <|> 2, 3]"
        assert f"{make(-1, 3)!r}" == to_string(make(-1, 3))

    def test_unsupported_raises(self):
        with pytest.raises(TypeError):
            to_string("10")


class TestToFloat:
    """Тесты to_float."""

    def test_values(self):
        assert to_float(make(1, 4)) == 0.25
        assert to_float(3) == 3.0
        assert to_float(0.5) == 0.5

    def test_unsupported_raises(self):
        with pytest.raises(TypeError):
            to_float(None)


class TestScenarios:
    """Сквозные сценарии через пакет src.ratio."""

    def test_scenarios(self):
        assert make(100, 300) == Rational(numerator=1, denominator=3)
        assert add(make(1, 2), make(1, 3)) == Rational(numerator=5, denominator=6)
        assert mul(make(2, 3), 10) == Rational(numerator=20, denominator=3)
        assert div(make(1, 3), 2) == Rational(numerator=1, denominator=6)
        assert pow_(2, -4) == Rational(numerator=1, denominator=16)
        assert pow_(make(3, 2), 10) == Rational(numerator=59049, denominator=1024)

    def test_exact_cents(self):
        """0.1 + 0.2 == 0.3 точно, в отличие от float."""
        assert add(0.1, 0.2) == make(3, 10)
        assert 0.1 + 0.2 != 0.3

    def test_operator_expression(self):
        price = make(1999, 100)
        total = price * 3 - make(1, 2)
        assert total == make(5947, 100)
        assert str(total) == "5947 <|> 100"
