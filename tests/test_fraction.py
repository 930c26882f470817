"""
Tests for fracfmt_core.fraction — the exact value type, gcd and simplify.
"""

import dataclasses

import pytest

from fracfmt_core.errors import DivisionByZero, MalformedLiteral
from fracfmt_core.fraction import Fraction, digits_to_int, gcd, int_to_digits, simplify, to_int


# ═══════════════════════════════════════════════════════════════════════
#  gcd
# ═══════════════════════════════════════════════════════════════════════


class TestGcd:

    @pytest.mark.parametrize("a,b,expected", [
        (12, 18, 6),
        (18, 12, 6),
        (-12, 18, 6),
        (12, -18, 6),
        (0, 5, 5),
        (5, 0, 5),
        (0, 0, 0),
        (7, 13, 1),
    ])
    def test_values(self, a, b, expected):
        assert gcd(a, b) == expected

    def test_beyond_256_bits(self):
        assert gcd(2 ** 300 * 3, 2 ** 200 * 9) == 2 ** 200 * 3


# ═══════════════════════════════════════════════════════════════════════
#  simplify
# ═══════════════════════════════════════════════════════════════════════


class TestSimplify:

    def test_six_quarters(self):
        assert simplify(Fraction(6, 4)) == Fraction(3, 2)

    def test_zero_becomes_canonical(self):
        assert simplify(Fraction(0, 5)) == Fraction(0, 1)

    def test_negative_numerator(self):
        assert simplify(Fraction(-6, 4)) == Fraction(-3, 2)

    def test_sign_placement_preserved(self):
        assert simplify(Fraction(6, -4)) == Fraction(3, -2)

    def test_already_reduced(self):
        assert simplify(Fraction(3, 7)) == Fraction(3, 7)

    def test_token_amount(self):
        assert simplify(Fraction(1_500_000, 10 ** 6)) == Fraction(3, 2)

    def test_zero_denominator_raises(self):
        with pytest.raises(DivisionByZero):
            simplify(Fraction(1, 0))

    def test_division_by_zero_is_zero_division_error(self):
        with pytest.raises(ZeroDivisionError):
            simplify(Fraction(0, 0))


# ═══════════════════════════════════════════════════════════════════════
#  Fraction value type
# ═══════════════════════════════════════════════════════════════════════


class TestFraction:

    @pytest.mark.parametrize("num,den,sign", [
        (3, 4, 1),
        (-3, 4, -1),
        (3, -4, -1),
        (-3, -4, 1),
        (0, 4, 0),
        (0, -4, 0),
    ])
    def test_sign(self, num, den, sign):
        assert Fraction(num, den).sign == sign

    def test_default_denominator(self):
        assert Fraction(5) == Fraction(5, 1)

    def test_not_reduced_on_construction(self):
        f = Fraction(6, 4)
        assert (f.num, f.den) == (6, 4)
        assert f != Fraction(3, 2)

    def test_immutable(self):
        f = Fraction(1, 2)
        with pytest.raises(dataclasses.FrozenInstanceError):
            f.num = 3

    def test_str(self):
        assert str(Fraction(-1, 3)) == "-1/3"

    def test_from_amount(self):
        assert Fraction.from_amount(1_500_000, 6) == Fraction(1_500_000, 10 ** 6)

    def test_from_amount_string(self):
        """Amounts arrive as strings across the JSON boundary."""
        f = Fraction.from_amount("115792089237316195423570985008687907853269984665640564039457584007913129639935")
        assert f.num == 2 ** 256 - 1
        assert f.den == 10 ** 18

    def test_from_amount_negative_decimals(self):
        with pytest.raises(ValueError):
            Fraction.from_amount(1, -1)


# ═══════════════════════════════════════════════════════════════════════
#  to_int
# ═══════════════════════════════════════════════════════════════════════


class TestToInt:

    @pytest.mark.parametrize("raw,expected", [
        (42, 42),
        ("42", 42),
        ("-42", -42),
        ("+42", 42),
        ("000", 0),
    ])
    def test_accepts(self, raw, expected):
        assert to_int(raw) == expected

    @pytest.mark.parametrize("raw", ["", "-", "1.5", "12a", " 12", "0x10", "1_000"])
    def test_rejects_malformed_strings(self, raw):
        with pytest.raises(MalformedLiteral):
            to_int(raw)

    @pytest.mark.parametrize("raw", [1.5, True, None])
    def test_rejects_other_types(self, raw):
        with pytest.raises(TypeError):
            to_int(raw)

    def test_long_string_amount(self):
        assert to_int("7" * 5000) == 7 * (10 ** 5000 - 1) // 9


# ═══════════════════════════════════════════════════════════════════════
#  Digit conversion for arbitrarily long integers
# ═══════════════════════════════════════════════════════════════════════


class TestDigitConversion:

    @pytest.mark.parametrize("n", [0, 7, -7, 10 ** 999, -(10 ** 999)])
    def test_short_matches_str(self, n):
        assert int_to_digits(n) == str(n)

    def test_power_of_ten(self):
        assert int_to_digits(10 ** 5000) == "1" + "0" * 5000

    def test_chunk_padding(self):
        """Inner chunks keep their leading zeros."""
        n = 10 ** 2500 + 1
        assert int_to_digits(n) == "1" + "0" * 2499 + "1"

    def test_negative(self):
        assert int_to_digits(-(10 ** 5000)) == "-1" + "0" * 5000

    def test_parse_long(self):
        assert digits_to_int("1" + "0" * 5000) == 10 ** 5000

    def test_parse_signed(self):
        assert digits_to_int("-1" + "0" * 4999 + "1") == -(10 ** 5000 + 1)
        assert digits_to_int("+" + "9" * 2001) == 10 ** 2001 - 1

    def test_inverse(self):
        n = 3 ** 12000
        assert digits_to_int(int_to_digits(n)) == n

    def test_str_of_huge_fraction(self):
        assert str(Fraction(1, 10 ** 5000)) == "1/1" + "0" * 5000
