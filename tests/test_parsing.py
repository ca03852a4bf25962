"""
test_parsing.py — Tests for decimal-literal parsing and Ratio
"""

from decimal import Decimal
from fractions import Fraction

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from exactmoney import (
    FormatError,
    InvalidArgumentError,
    PrecisionExceededError,
    Ratio,
    parse_ratio,
    parse_scaled_amount,
    render_scaled_amount,
)


# ==============================================================================
# UNIT TESTS: parse_scaled_amount
# ==============================================================================

class TestParseScaledAmount:

    @pytest.mark.parametrize("literal,decimals,expected", [
        ("10.50", 2, 1050),
        ("12.3", 2, 1230),
        ("12", 2, 1200),
        ("0.01", 2, 1),
        (".25", 2, 25),
        ("7.", 2, 700),
        ("-5.25", 2, -525),
        ("-0.00", 2, 0),
        ("1000", 0, 1000),
        ("1.500", 3, 1500),
        ("0.000000000000000001", 18, 1),
        ("00012.30", 2, 1230),
    ])
    def test_valid_literals(self, literal, decimals, expected):
        assert parse_scaled_amount(literal, decimals) == expected

    def test_huge_amount_is_exact(self):
        literal = "123456789012345678901234567890.12"
        assert parse_scaled_amount(literal, 2) == 12345678901234567890123456789012

    def test_precision_exceeded(self):
        with pytest.raises(PrecisionExceededError) as exc_info:
            parse_scaled_amount("100.001", 2)
        err = exc_info.value
        assert err.digits == 3
        assert err.decimals == 2
        assert err.literal == "100.001"
        assert err.code == "PRECISION_EXCEEDED"

    def test_precision_exceeded_zero_decimals(self):
        with pytest.raises(PrecisionExceededError):
            parse_scaled_amount("1.5", 0)

    def test_trailing_zeros_still_count_as_digits(self):
        with pytest.raises(PrecisionExceededError):
            parse_scaled_amount("1.500", 2)

    @pytest.mark.parametrize("literal,reason", [
        ("1e5", "scientific"),
        ("2E-3", "scientific"),
        ("1,000.00", "invalid characters"),
        ("1 000", "invalid characters"),
        ("+5", "invalid characters"),
        ("$5", "invalid characters"),
        ("", "no digits"),
        ("-", "no digits"),
        (".", "no digits"),
        ("1.2.3", "multiple decimal points"),
        ("1-2", "misplaced minus"),
        ("--5", "misplaced minus"),
    ])
    def test_format_errors(self, literal, reason):
        with pytest.raises(FormatError) as exc_info:
            parse_scaled_amount(literal, 2)
        assert reason in exc_info.value.reason
        assert exc_info.value.code == "INVALID_FORMAT"

    def test_format_error_is_not_precision_error(self):
        """Callers treat the two differently: syntax bug vs business rule."""
        with pytest.raises(FormatError):
            try:
                parse_scaled_amount("1,5", 2)
            except PrecisionExceededError:
                pytest.fail("format problem reported as precision problem")

    def test_non_string_raises_type_error(self):
        with pytest.raises(TypeError):
            parse_scaled_amount(10.5, 2)

    @pytest.mark.parametrize("decimals", [-1, 19, 2.0, True])
    def test_invalid_decimals(self, decimals):
        with pytest.raises(InvalidArgumentError):
            parse_scaled_amount("1", decimals)


class TestRender:

    @pytest.mark.parametrize("value,decimals,expected", [
        (1050, 2, "10.50"),
        (5, 2, "0.05"),
        (-525, 2, "-5.25"),
        (-5, 2, "-0.05"),
        (0, 2, "0.00"),
        (1000, 0, "1000"),
        (-7, 0, "-7"),
        (1500, 3, "1.500"),
        (1, 18, "0.000000000000000001"),
    ])
    def test_render(self, value, decimals, expected):
        assert render_scaled_amount(value, decimals) == expected


# ==============================================================================
# UNIT TESTS: Ratio
# ==============================================================================

class TestRatio:

    @pytest.mark.parametrize("literal,numerator,denominator", [
        ("2", 2, 1),
        ("0.555", 555, 1000),
        ("-1.50", -150, 100),
        ("1.5", 15, 10),
        (".5", 5, 10),
    ])
    def test_parse_ratio_counts_digits(self, literal, numerator, denominator):
        assert parse_ratio(literal) == Ratio(numerator, denominator)

    def test_parse_ratio_rejects_scientific(self):
        with pytest.raises(FormatError):
            parse_ratio("1e-7")

    def test_of_int(self):
        assert Ratio.of(3) == Ratio(3, 1)

    def test_of_float_uses_shortest_repr(self):
        assert Ratio.of(0.1) == Ratio(1, 10)
        assert Ratio.of(1.5) == Ratio(15, 10)

    def test_of_float_with_exponent_repr_rejected(self):
        with pytest.raises(FormatError):
            Ratio.of(1e-7)

    def test_of_non_finite_float_rejected(self):
        with pytest.raises(FormatError):
            Ratio.of(float("nan"))
        with pytest.raises(FormatError):
            Ratio.of(float("inf"))

    def test_of_decimal(self):
        assert Ratio.of(Decimal("0.25")).as_fraction() == Fraction(1, 4)

    def test_of_fraction(self):
        assert Ratio.of(Fraction(2, 3)) == Ratio(2, 3)

    def test_of_ratio_is_identity(self):
        ratio = Ratio(7, 8)
        assert Ratio.of(ratio) is ratio

    def test_of_bool_rejected(self):
        with pytest.raises(TypeError):
            Ratio.of(True)

    def test_of_unknown_type_rejected(self):
        with pytest.raises(TypeError):
            Ratio.of([1])

    def test_denominator_must_be_positive(self):
        with pytest.raises(InvalidArgumentError):
            Ratio(1, 0)
        with pytest.raises(InvalidArgumentError):
            Ratio(1, -2)

    def test_ratio_is_immutable(self):
        ratio = Ratio(1, 2)
        with pytest.raises(AttributeError):
            ratio.numerator = 3


# ==============================================================================
# PROPERTY-BASED TESTS
# ==============================================================================

@st.composite
def literal_strategy(draw, decimals):
    """Valid decimal literals with at most `decimals` fractional digits."""
    sign = draw(st.sampled_from(["", "-"]))
    integer = draw(st.integers(min_value=0, max_value=10**20))
    digits = draw(st.integers(min_value=0, max_value=decimals))
    if digits == 0:
        return f"{sign}{integer}"
    fraction = draw(st.integers(min_value=0, max_value=10**digits - 1))
    return f"{sign}{integer}.{fraction:0{digits}d}"


class TestParsingProperties:

    @given(data=st.data(), decimals=st.integers(min_value=0, max_value=18))
    @settings(max_examples=500)
    def test_round_trip(self, data, decimals):
        """parse(render(parse(L, d)), d) == parse(L, d)"""
        literal = data.draw(literal_strategy(decimals))
        value = parse_scaled_amount(literal, decimals)
        assert parse_scaled_amount(render_scaled_amount(value, decimals), decimals) == value

    @given(value=st.integers(min_value=-10**30, max_value=10**30),
           decimals=st.integers(min_value=0, max_value=18))
    @settings(max_examples=500)
    def test_render_then_parse_is_identity(self, value, decimals):
        assert parse_scaled_amount(render_scaled_amount(value, decimals), decimals) == value

    @given(data=st.data(), decimals=st.integers(min_value=0, max_value=18))
    @settings(max_examples=300)
    def test_scaled_value_matches_exact_fraction(self, data, decimals):
        literal = data.draw(literal_strategy(decimals))
        value = parse_scaled_amount(literal, decimals)
        assert Fraction(value, 10**decimals) == parse_ratio(literal).as_fraction()
