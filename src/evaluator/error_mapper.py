"""Перевод ошибок вычисления в EvaluationOutcome для пользователя.

Ядро поднимает типизированные ошибки (FormatError, DivideByZeroError),
сессия — EvaluationError. Здесь они превращаются в результат со
стабильным кодом и читаемым сообщением вместо необработанного исключения.
Неожиданные исключения сюда не попадают и пробрасываются дальше.
"""

from dataclasses import dataclass
from typing import Dict

from src.core.domain.outcome import EvaluationOutcome
from src.core.math.errors import DivideByZeroError, ExactArithmeticError, FormatError
from src.evaluator.errors import EvaluationError

# Ошибки, которые граница evaluator переводит в результат
HANDLED_ERRORS = (ExactArithmeticError, EvaluationError)


@dataclass(frozen=True)
class ErrorDescription:
    """Код ошибки и шаблон сообщения для пользователя."""

    error_code: str
    user_message: str


# Сообщения для пользователя по типу ошибки ядра
CORE_ERROR_DESCRIPTIONS: Dict[type, ErrorDescription] = {
    FormatError: ErrorDescription("FORMAT_ERROR", "Invalid number: {detail}"),
    DivideByZeroError: ErrorDescription(
        "DIVIDE_BY_ZERO", "Division by zero is not defined: {detail}"
    ),
}


def describe_error(error: BaseException) -> ErrorDescription:
    """
    Описание ошибки для пользователя.

    Args:
        error: Ошибка ядра или evaluator

    Returns:
        ErrorDescription с кодом и сообщением

    Raises:
        TypeError: Если ошибка не относится к HANDLED_ERRORS
    """
    if isinstance(error, EvaluationError):
        return ErrorDescription(error.code, error.message)

    for error_type, description in CORE_ERROR_DESCRIPTIONS.items():
        if isinstance(error, error_type):
            return ErrorDescription(
                description.error_code,
                description.user_message.format(detail=error),
            )

    if isinstance(error, ExactArithmeticError):
        return ErrorDescription("ARITHMETIC_ERROR", f"Calculation failed: {error}")

    raise TypeError(f"Unhandled error type: {type(error).__name__}")


def map_exception_to_outcome(error: BaseException) -> EvaluationOutcome:
    """Ошибка → EvaluationOutcome со status=error."""
    description = describe_error(error)
    return EvaluationOutcome.failed(description.error_code, description.user_message)
