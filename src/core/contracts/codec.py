"""
Contract Codec — ScaledDecimal / Fraction / EvaluationOutcome ↔ JSON-совместимые dict

Целые неограниченной точности передаются строками цифр, чтобы
JSON-потребители с ограниченным целым типом не теряли точность.
Декодирование всегда сначала валидирует данные против схемы.
"""

from typing import Any, Dict

from src.core.contracts.validators import (
    validate_evaluation_outcome,
    validate_fraction,
    validate_scaled_decimal,
)
from src.core.domain.outcome import EvaluationOutcome
from src.core.math.fraction import Fraction
from src.core.math.integer_ops import digits_to_int, format_int
from src.core.math.scaled_decimal import ScaledDecimal


def _text_to_int(text: str) -> int:
    if text.startswith("-"):
        return -digits_to_int(text[1:])
    return digits_to_int(text)


# =============================================================================
# SCALED DECIMAL
# =============================================================================


def scaled_decimal_to_contract(value: ScaledDecimal) -> Dict[str, Any]:
    """Каноническая форма значения → dict по схеме scaled_decimal."""
    canonical = value.canonical()
    return {"unscaled": format_int(canonical.unscaled), "scale": canonical.scale}


def scaled_decimal_from_contract(data: Dict[str, Any]) -> ScaledDecimal:
    """
    dict по схеме scaled_decimal → каноническое значение.

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
    """
    validate_scaled_decimal(data)
    return ScaledDecimal.from_unscaled(_text_to_int(data["unscaled"]), data["scale"])


# =============================================================================
# FRACTION
# =============================================================================


def fraction_to_contract(value: Fraction) -> Dict[str, Any]:
    return {
        "numerator": format_int(value.numerator),
        "denominator": format_int(value.denominator),
    }


def fraction_from_contract(data: Dict[str, Any]) -> Fraction:
    """
    dict по схеме fraction → новая сокращённая дробь.

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
    """
    validate_fraction(data)
    return Fraction(_text_to_int(data["numerator"]), _text_to_int(data["denominator"]))


# =============================================================================
# EVALUATION OUTCOME
# =============================================================================


def evaluation_outcome_to_contract(outcome: EvaluationOutcome) -> Dict[str, Any]:
    """
    EvaluationOutcome → dict, проверенный по схеме evaluation_outcome.

    Raises:
        jsonschema.ValidationError: Если модель нарушает контракт
    """
    data = outcome.model_dump(mode="json", exclude_none=True)
    validate_evaluation_outcome(data)
    return data
