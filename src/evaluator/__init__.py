"""Evaluator — граница между формулами пользователя и ядром точной арифметики.

- Сессия с переменными (включая prior result) и функциями
- Встроенные функции с политикой точности
- Перевод ошибок ядра в EvaluationOutcome
"""

from .error_mapper import describe_error, map_exception_to_outcome
from .errors import ArityError, EvaluationError, OperandError, UnknownNameError
from .session import EvaluationSession, EvaluatorConfig, RegisteredFunction

__all__ = [
    "EvaluationSession",
    "EvaluatorConfig",
    "RegisteredFunction",
    "EvaluationError",
    "UnknownNameError",
    "ArityError",
    "OperandError",
    "describe_error",
    "map_exception_to_outcome",
]
