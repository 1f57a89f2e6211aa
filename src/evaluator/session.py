"""Evaluation Session — сторона evaluator, потребляющая ядро точной арифметики.

Сессия хранит:
- Именованные переменные со значениями ScaledDecimal (включая "prior result",
  обновляемый после каждого успешного вычисления)
- Именованные функции с параметрами и результатом ScaledDecimal

Разбор текста формулы выполняется внешним парсером: он компилирует текст
в callable, принимающий сессию и возвращающий ScaledDecimal. Сессия
выполняет его и переводит ошибки ядра в EvaluationOutcome.

Сессия принадлежит одному владельцу (одна сессия на пользователя/окно)
и не синхронизируется внутри.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Callable, Dict, Final, Optional, Union

from src.core.domain.outcome import EvaluationOutcome
from src.core.domain.precision import PrecisionPolicy
from src.core.math.scaled_decimal import ScaledDecimal
from src.evaluator.error_mapper import HANDLED_ERRORS, map_exception_to_outcome
from src.evaluator.errors import ArityError, UnknownNameError

logger = logging.getLogger(__name__)

CompiledFormula = Callable[["EvaluationSession"], ScaledDecimal]
SessionFunction = Callable[..., ScaledDecimal]
Argument = Union[ScaledDecimal, int, str]

NAME_PATTERN: Final[re.Pattern[str]] = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class EvaluatorConfig:
    """Конфигурация сессии.

    - precision: ограничения digit_count и показателей степени
    - prior_result_name: имя переменной с результатом предыдущего вычисления
    - install_builtins: регистрировать ли встроенные функции
    """

    precision: PrecisionPolicy = field(default_factory=PrecisionPolicy)
    prior_result_name: str = "ans"
    install_builtins: bool = True


@dataclass(frozen=True)
class RegisteredFunction:
    """Функция, доступная формулам."""

    name: str
    func: SessionFunction
    arity: int


def _validate_name(name: str) -> None:
    if not isinstance(name, str) or NAME_PATTERN.fullmatch(name) is None:
        raise ValueError(f"Invalid identifier: {name!r}")


def _coerce_argument(value: ScaledDecimal | int) -> ScaledDecimal:
    if isinstance(value, ScaledDecimal):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return ScaledDecimal.from_integer(value)
    raise TypeError(f"Expected ScaledDecimal or int, got {type(value).__name__}")


# =============================================================================
# SESSION
# =============================================================================


class EvaluationSession:
    """Переменные, функции и выполнение скомпилированных формул."""

    def __init__(self, config: Optional[EvaluatorConfig] = None):
        self.config = config or EvaluatorConfig()
        self._variables: Dict[str, ScaledDecimal] = {}
        self._functions: Dict[str, RegisteredFunction] = {}

        self.declare_variable(self.config.prior_result_name, ScaledDecimal.ZERO)

        if self.config.install_builtins:
            # Импорт здесь: builtins зависит от EvaluationSession
            from src.evaluator.builtins import install_builtin_functions

            install_builtin_functions(self)

    # -------------------------------------------------------------------------
    # Переменные
    # -------------------------------------------------------------------------

    def declare_variable(
        self, name: str, initial: ScaledDecimal = ScaledDecimal.ZERO
    ) -> None:
        """
        Объявление переменной.

        Raises:
            ValueError: Недопустимое имя или переменная уже объявлена
        """
        _validate_name(name)
        if name in self._variables:
            raise ValueError(f"Variable already declared: {name}")
        self._variables[name] = _coerce_argument(initial).canonical()
        logger.debug("Declared variable %s = %s", name, initial)

    def get_variable(self, name: str) -> ScaledDecimal:
        """
        Raises:
            UnknownNameError: Переменная не объявлена
        """
        try:
            return self._variables[name]
        except KeyError:
            raise UnknownNameError(f"Unknown variable: {name}") from None

    def set_variable(self, name: str, value: ScaledDecimal | int) -> None:
        """
        Raises:
            UnknownNameError: Переменная не объявлена
        """
        if name not in self._variables:
            raise UnknownNameError(f"Unknown variable: {name}")
        self._variables[name] = _coerce_argument(value).canonical()

    @property
    def prior_result(self) -> ScaledDecimal:
        """Результат последнего успешного вычисления (ZERO до первого)."""
        return self._variables[self.config.prior_result_name]

    @property
    def variable_names(self) -> list[str]:
        return sorted(self._variables)

    # -------------------------------------------------------------------------
    # Функции
    # -------------------------------------------------------------------------

    def register_function(
        self, name: str, func: SessionFunction, arity: int, replace: bool = False
    ) -> None:
        """
        Регистрация функции с фиксированным числом параметров ScaledDecimal.

        Raises:
            ValueError: Недопустимое имя, отрицательная арность или повторная
                регистрация без replace=True
        """
        _validate_name(name)
        if arity < 0:
            raise ValueError(f"arity must be non-negative, got {arity}")
        if name in self._functions and not replace:
            raise ValueError(f"Function already registered: {name}")

        self._functions[name] = RegisteredFunction(name=name, func=func, arity=arity)
        logger.debug("Registered function %s/%d", name, arity)

    def has_function(self, name: str) -> bool:
        return name in self._functions

    @property
    def function_names(self) -> list[str]:
        return sorted(self._functions)

    def call_function(self, name: str, *arguments: ScaledDecimal | int) -> ScaledDecimal:
        """
        Вызов зарегистрированной функции.

        Raises:
            UnknownNameError: Функция не зарегистрирована
            ArityError: Неверное количество аргументов
            FormatError, DivideByZeroError, EvaluationError: из самой функции
        """
        registered = self._functions.get(name)
        if registered is None:
            raise UnknownNameError(f"Unknown function: {name}")
        if len(arguments) != registered.arity:
            raise ArityError(
                f"Function {name} expects {registered.arity} argument(s), "
                f"got {len(arguments)}"
            )

        values = [_coerce_argument(argument) for argument in arguments]
        result = registered.func(*values)
        if not isinstance(result, ScaledDecimal):
            raise TypeError(
                f"Function {name} returned {type(result).__name__}, expected ScaledDecimal"
            )
        return result.canonical()

    # -------------------------------------------------------------------------
    # Вычисление
    # -------------------------------------------------------------------------

    def evaluate(self, compiled: CompiledFormula) -> EvaluationOutcome:
        """
        Выполнение скомпилированной формулы.

        При успехе результат сохраняется в prior result. Ошибки ядра и
        evaluator переводятся в EvaluationOutcome; prior result при этом
        не меняется. Прочие исключения пробрасываются.
        """
        try:
            result = compiled(self)
        except HANDLED_ERRORS as error:
            outcome = map_exception_to_outcome(error)
            logger.warning(
                "Evaluation failed: %s (%s)", outcome.message, outcome.error_code
            )
            return outcome

        if not isinstance(result, ScaledDecimal):
            raise TypeError(
                f"Compiled formula returned {type(result).__name__}, expected ScaledDecimal"
            )

        result = result.canonical()
        self._variables[self.config.prior_result_name] = result
        logger.info("Evaluation succeeded: %s", result)
        return EvaluationOutcome.ok(str(result))

    def evaluate_call(self, name: str, *arguments: Argument) -> EvaluationOutcome:
        """
        Вызов функции как отдельного вычисления.

        Строковые аргументы разбираются через ScaledDecimal.parse, поэтому
        ошибка формата тоже возвращается как EvaluationOutcome.
        """

        def compiled(session: "EvaluationSession") -> ScaledDecimal:
            values = [
                ScaledDecimal.parse(argument) if isinstance(argument, str) else argument
                for argument in arguments
            ]
            return session.call_function(name, *values)

        return self.evaluate(compiled)
