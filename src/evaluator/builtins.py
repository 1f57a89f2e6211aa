"""Встроенные функции evaluator.

Все параметры и результаты — ScaledDecimal. Параметры digits и
exponent должны быть целыми; digits приводится в диапазон
PrecisionPolicy, а exponent вне политики отклоняется.

Функции:
- divide(a, b, digits), remainder(a, b, digits)
- power(x, e), power_digits(x, e, digits)
- ratio(p, q, digits): точное p / q через Fraction, затем digits цифр
- abs(x), negate(x)
"""

import logging
from typing import TYPE_CHECKING

from src.core.domain.precision import PrecisionPolicy
from src.core.math.fraction import Fraction
from src.core.math.integer_ops import format_int
from src.core.math.scaled_decimal import ScaledDecimal, divide, power, remainder
from src.evaluator.errors import OperandError

if TYPE_CHECKING:
    from src.evaluator.session import EvaluationSession

logger = logging.getLogger(__name__)


def _integer_operand(value: ScaledDecimal, parameter: str) -> int:
    canonical = value.canonical()
    if canonical.scale != 0:
        raise OperandError(f"{parameter} must be an integer, got {value}")
    return canonical.unscaled


def _digit_count(policy: PrecisionPolicy, value: ScaledDecimal) -> int:
    requested = _integer_operand(value, "digits")
    clamped = policy.clamp_digit_count(requested)
    if clamped != requested:
        logger.debug("Clamped digit count %s to %d", format_int(requested), clamped)
    return clamped


def _exponent(policy: PrecisionPolicy, value: ScaledDecimal) -> int:
    exponent = _integer_operand(value, "exponent")
    if not policy.allows_exponent(exponent):
        raise OperandError(
            f"exponent {format_int(exponent)} exceeds the allowed magnitude "
            f"{policy.max_exponent_magnitude}"
        )
    return exponent


def install_builtin_functions(session: "EvaluationSession") -> None:
    """Регистрация встроенных функций в сессии."""
    policy = session.config.precision

    def divide_digits(a: ScaledDecimal, b: ScaledDecimal, digits: ScaledDecimal) -> ScaledDecimal:
        return divide(a, b, _digit_count(policy, digits))

    def remainder_digits(
        a: ScaledDecimal, b: ScaledDecimal, digits: ScaledDecimal
    ) -> ScaledDecimal:
        return remainder(a, b, _digit_count(policy, digits))

    def power_default(x: ScaledDecimal, e: ScaledDecimal) -> ScaledDecimal:
        return power(x, _exponent(policy, e), policy.clamp_digit_count())

    def power_digits(x: ScaledDecimal, e: ScaledDecimal, digits: ScaledDecimal) -> ScaledDecimal:
        return power(x, _exponent(policy, e), _digit_count(policy, digits))

    def ratio(p: ScaledDecimal, q: ScaledDecimal, digits: ScaledDecimal) -> ScaledDecimal:
        fraction = Fraction.from_decimal(p)
        fraction.divide(Fraction.from_decimal(q))
        return fraction.to_decimal(_digit_count(policy, digits))

    session.register_function("divide", divide_digits, 3)
    session.register_function("remainder", remainder_digits, 3)
    session.register_function("power", power_default, 2)
    session.register_function("power_digits", power_digits, 3)
    session.register_function("ratio", ratio, 3)
    session.register_function("abs", abs, 1)
    session.register_function("negate", lambda x: -x, 1)
