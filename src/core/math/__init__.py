"""
Core math modules для точной арифметики

Десятичные числа и дроби неограниченной точности поверх встроенного int.
"""

# Errors
from src.core.math.errors import (
    DivideByZeroError,
    ExactArithmeticError,
    FormatError,
)

# Integer Ops
from src.core.math.integer_ops import (
    align_scales,
    digit_count,
    digits_to_int,
    format_int,
    int_to_digits,
    pow10,
    reduce_ratio,
    strip_trailing_zeros,
    truncating_divmod,
)

# Numeral Grammar
from src.core.math.numeral_grammar import (
    NUMERAL_PATTERN,
    parse_numeral,
    split_numeral,
)

# ScaledDecimal
from src.core.math.scaled_decimal import (
    DEFAULT_PRECISION,
    ScaledDecimal,
    add,
    divide,
    multiply,
    power,
    remainder,
    subtract,
)

# Fraction
from src.core.math.fraction import Fraction

__all__ = [
    # Errors
    "DivideByZeroError",
    "ExactArithmeticError",
    "FormatError",
    # Integer Ops
    "align_scales",
    "digit_count",
    "digits_to_int",
    "format_int",
    "int_to_digits",
    "pow10",
    "reduce_ratio",
    "strip_trailing_zeros",
    "truncating_divmod",
    # Numeral Grammar
    "NUMERAL_PATTERN",
    "parse_numeral",
    "split_numeral",
    # ScaledDecimal — Constants
    "DEFAULT_PRECISION",
    # ScaledDecimal — Types
    "ScaledDecimal",
    # ScaledDecimal — Functions
    "add",
    "divide",
    "multiply",
    "power",
    "remainder",
    "subtract",
    # Fraction
    "Fraction",
]
