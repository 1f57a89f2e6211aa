"""Ошибки границы evaluator.

Поднимаются сессией при обращении к неизвестным именам, неверной арности
вызова и недопустимых операндах. Как и ошибки ядра, переводятся в
EvaluationOutcome через error_mapper.
"""


class EvaluationError(Exception):
    """Базовая ошибка evaluator с машиночитаемым кодом."""

    code: str = "EVALUATION_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UnknownNameError(EvaluationError, KeyError):
    """Переменная или функция не объявлена в сессии."""

    code = "UNKNOWN_NAME"

    def __str__(self) -> str:
        # KeyError по умолчанию оборачивает сообщение в кавычки
        return self.message


class ArityError(EvaluationError, TypeError):
    """Функция вызвана с неверным количеством аргументов."""

    code = "ARITY_MISMATCH"


class OperandError(EvaluationError, ValueError):
    """Операнд вне допустимой области (нецелое digit_count, слишком большой exponent)."""

    code = "INVALID_OPERAND"
