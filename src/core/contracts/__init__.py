"""
Contract Validation Module

Модуль для валидации JSON контрактов значений точной арифметики
и их кодирования в JSON-совместимые dict.
"""

from .codec import (
    evaluation_outcome_to_contract,
    fraction_from_contract,
    fraction_to_contract,
    scaled_decimal_from_contract,
    scaled_decimal_to_contract,
)
from .validators import (
    ContractValidator,
    EvaluationOutcomeValidator,
    FractionValidator,
    ScaledDecimalValidator,
    SchemaLoader,
    validate_evaluation_outcome,
    validate_fraction,
    validate_scaled_decimal,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ScaledDecimalValidator",
    "FractionValidator",
    "EvaluationOutcomeValidator",
    # Functions
    "validate_scaled_decimal",
    "validate_fraction",
    "validate_evaluation_outcome",
    # Codec
    "scaled_decimal_to_contract",
    "scaled_decimal_from_contract",
    "fraction_to_contract",
    "fraction_from_contract",
    "evaluation_outcome_to_contract",
]
