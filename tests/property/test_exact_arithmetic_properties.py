"""Property test: exact decimal and fraction arithmetic.

Uses hypothesis to check ScaledDecimal and Fraction against the standard
library's fractions.Fraction as an exact oracle:
text round-trip, scale invariance, self-division, truncating division,
the divide/remainder identity, and the fraction reduction invariants.
"""

import fractions
import math

from hypothesis import assume, given, settings, strategies as st

from src.core.math import Fraction, ScaledDecimal, divide, power, remainder

unscaled_values = st.integers(min_value=-(10**40), max_value=10**40)
scales = st.integers(min_value=0, max_value=25)
digit_counts = st.integers(min_value=0, max_value=30)

decimals = st.builds(ScaledDecimal, unscaled_values, scales)
nonzero_decimals = decimals.filter(lambda value: not value.is_zero())

small_ints = st.integers(min_value=-(10**12), max_value=10**12)
nonzero_small_ints = small_ints.filter(lambda value: value != 0)


def as_oracle(value: ScaledDecimal) -> fractions.Fraction:
    return fractions.Fraction(value.unscaled, 10**value.scale)


def truncated(value: fractions.Fraction, digit_count: int) -> fractions.Fraction:
    """value, усечённое к нулю до digit_count дробных цифр."""
    return fractions.Fraction(int(value * 10**digit_count), 10**digit_count)


# =============================================================================
# SCALED DECIMAL
# =============================================================================


@given(value=decimals)
@settings(max_examples=200)
def test_text_round_trip(value):
    """parse(str(x)) == x, and the text is already canonical."""
    parsed = ScaledDecimal.parse(str(value))

    assert parsed == value
    assert str(parsed) == str(value)
    canonical = value.canonical()
    assert (parsed.unscaled, parsed.scale) == (canonical.unscaled, canonical.scale)


@given(value=decimals, extra=st.integers(min_value=0, max_value=10))
def test_scale_invariance(value, extra):
    """Appending zeros to unscaled and scale does not change the value."""
    padded = ScaledDecimal(value.unscaled * 10**extra, value.scale + extra)

    assert padded == value
    assert hash(padded) == hash(value)
    assert str(padded) == str(value)


@given(value=decimals, digits=digit_counts)
def test_self_division_is_one(value, digits):
    assert divide(value, value, digits) == 1


@given(left=decimals, right=decimals)
def test_add_and_multiply_are_exact(left, right):
    assert as_oracle(left + right) == as_oracle(left) + as_oracle(right)
    assert as_oracle(left - right) == as_oracle(left) - as_oracle(right)
    assert as_oracle(left * right) == as_oracle(left) * as_oracle(right)


@given(left=decimals, right=decimals)
def test_ordering_matches_oracle(left, right):
    expected = as_oracle(left) < as_oracle(right)
    assert (left < right) == expected
    assert (left == right) == (as_oracle(left) == as_oracle(right))


@given(dividend=decimals, divisor=nonzero_decimals, digits=digit_counts)
@settings(max_examples=200)
def test_divide_truncates_toward_zero(dividend, divisor, digits):
    quotient = divide(dividend, divisor, digits)
    expected = truncated(as_oracle(dividend) / as_oracle(divisor), digits)

    assert as_oracle(quotient) == expected
    assert quotient.scale <= digits


@given(dividend=decimals, divisor=nonzero_decimals, digits=digit_counts)
@settings(max_examples=200)
def test_divide_remainder_identity(dividend, divisor, digits):
    quotient = divide(dividend, divisor, digits)
    rest = remainder(dividend, divisor, digits)

    assert dividend == divisor * quotient + rest
    # Остаток меньше делителя, масштабированного на 10^-digits
    assert abs(as_oracle(rest)) < abs(as_oracle(divisor)) / 10**digits
    if not rest.is_zero():
        assert rest.sign == dividend.sign


@given(value=decimals, exponent=st.integers(min_value=0, max_value=12))
def test_positive_power_is_exact(value, exponent):
    assert as_oracle(value**exponent) == as_oracle(value) ** exponent


@given(value=decimals)
def test_trivial_powers(value):
    assert power(value, 0) == 1
    assert power(value, 1) == value


@given(
    value=nonzero_decimals,
    exponent=st.integers(min_value=1, max_value=6),
    digits=digit_counts,
)
def test_negative_power_inverts_positive_power(value, exponent, digits):
    expected = divide(ScaledDecimal.ONE, power(value, exponent), digits)
    assert power(value, -exponent, digits) == expected


# =============================================================================
# FRACTION
# =============================================================================


def assert_reduced(fraction: Fraction) -> None:
    assert fraction.denominator > 0
    assert math.gcd(fraction.numerator, fraction.denominator) == 1
    if fraction.numerator == 0:
        assert fraction.denominator == 1


@given(numerator=small_ints, denominator=nonzero_small_ints)
def test_construction_is_reduced(numerator, denominator):
    fraction = Fraction(numerator, denominator)

    assert_reduced(fraction)
    assert fractions.Fraction(fraction.numerator, fraction.denominator) == (
        fractions.Fraction(numerator, denominator)
    )


@given(
    operations=st.lists(
        st.tuples(
            st.sampled_from(["add", "subtract", "multiply", "divide"]),
            small_ints,
            nonzero_small_ints,
        ),
        min_size=1,
        max_size=12,
    )
)
@settings(max_examples=100)
def test_operation_chain_matches_oracle(operations):
    fraction = Fraction(1)
    oracle = fractions.Fraction(1)

    for method, numerator, denominator in operations:
        operand = Fraction(numerator, denominator)
        expected_operand = fractions.Fraction(numerator, denominator)
        if method == "divide":
            assume(numerator != 0)
            oracle /= expected_operand
        elif method == "add":
            oracle += expected_operand
        elif method == "subtract":
            oracle -= expected_operand
        else:
            oracle *= expected_operand

        getattr(fraction, method)(operand)
        assert_reduced(fraction)

    assert (fraction.numerator, fraction.denominator) == (
        oracle.numerator,
        oracle.denominator,
    )


@given(numerator=small_ints, denominator=nonzero_small_ints, digits=digit_counts)
def test_to_decimal_matches_divide(numerator, denominator, digits):
    fraction = Fraction(numerator, denominator)
    expected = truncated(fractions.Fraction(numerator, denominator), digits)

    assert as_oracle(fraction.to_decimal(digits)) == expected

    assert fraction.to_decimal(digits) == divide(
        ScaledDecimal(numerator), ScaledDecimal(denominator), digits
    )


@given(value=decimals)
def test_from_decimal_is_exact(value):
    fraction = Fraction.from_decimal(value)

    assert_reduced(fraction)
    assert fractions.Fraction(fraction.numerator, fraction.denominator) == (
        as_oracle(value)
    )
