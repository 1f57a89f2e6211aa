"""
ScaledDecimal — десятичное число неограниченной точности

Значение = unscaled / 10 ** scale, где unscaled — int неограниченной
точности, scale >= 0.

Модуль обеспечивает:
- Разбор и форматирование канонической текстовой формы
- Сравнение и равенство по значению (инвариантно к scale)
- Точные сложение, вычитание, умножение
- Деление с заданным количеством дробных цифр (усечение к нулю, без округления)
- Остаток того же деления
- Возведение в целую степень (точное для exponent >= 0)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждая операция возвращает новый экземпляр в канонической форме:
   нет хвостовых нулей дробной части, ноль — (0, 0)
2. Равенство и порядок определены на значении, а не на (unscaled, scale)
3. x / x = 1 для любого x, включая 0 / 0 (явное соглашение)
4. Переполнение невозможно: точность ограничена только памятью
5. Деление и остаток усекают к нулю и никогда не округляют

Прямой конструктор ScaledDecimal(unscaled, scale) не каноникализирует
значение (удобно в тестах); from_unscaled и все операции — каноникализируют.
"""

from dataclasses import dataclass
from typing import Any, ClassVar, Final, Optional, Union

from src.core.math.errors import DivideByZeroError, FormatError
from src.core.math.integer_ops import (
    align_scales,
    digit_count,
    format_int,
    int_to_digits,
    pow10,
    strip_trailing_zeros,
    truncating_divmod,
)
from src.core.math.numeral_grammar import parse_numeral

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Количество дробных цифр для оператора '/' и отрицательных степеней
DEFAULT_PRECISION: Final[int] = 8

DecimalLike = Union["ScaledDecimal", int]


# =============================================================================
# SCALED DECIMAL
# =============================================================================


@dataclass(frozen=True, eq=False, repr=False)
class ScaledDecimal:
    """
    Неизменяемое десятичное число: unscaled × 10^-scale.

    Экземпляры можно свободно разделять между потоками без синхронизации.
    """

    unscaled: int = 0
    scale: int = 0

    ZERO: ClassVar["ScaledDecimal"]
    ONE: ClassVar["ScaledDecimal"]
    TWO: ClassVar["ScaledDecimal"]

    def __post_init__(self) -> None:
        if isinstance(self.unscaled, bool) or not isinstance(self.unscaled, int):
            raise TypeError(
                f"unscaled must be int, got {type(self.unscaled).__name__}"
            )
        if isinstance(self.scale, bool) or not isinstance(self.scale, int):
            raise TypeError(f"scale must be int, got {type(self.scale).__name__}")
        if self.scale < 0:
            raise ValueError(
                f"scale must be non-negative, got {format_int(self.scale)}"
            )

    # -------------------------------------------------------------------------
    # Создание
    # -------------------------------------------------------------------------

    @classmethod
    def from_integer(cls, value: int) -> "ScaledDecimal":
        """Целое значение (scale = 0)."""
        return cls(value, 0)

    @classmethod
    def from_unscaled(cls, unscaled: int, scale: int) -> "ScaledDecimal":
        """Значение unscaled / 10^scale в канонической форме."""
        return cls(unscaled, scale).canonical()

    @classmethod
    def parse(cls, text: Any) -> "ScaledDecimal":
        """
        Разбор текста числа.

        Args:
            text: Например "012.345000", "-.5", "42"

        Returns:
            Каноническое значение

        Raises:
            FormatError: Пустой текст, None, лишняя '.', недопустимые символы
        """
        unscaled, scale = parse_numeral(text)
        return cls(unscaled, scale)

    @classmethod
    def try_parse(cls, text: Any) -> tuple[bool, Optional["ScaledDecimal"]]:
        """
        Разбор без исключения.

        Returns:
            (True, значение) при успехе, (False, None) при ошибке формата
        """
        try:
            return True, cls.parse(text)
        except FormatError:
            return False, None

    # -------------------------------------------------------------------------
    # Свойства
    # -------------------------------------------------------------------------

    @property
    def digit_count(self) -> int:
        """Количество десятичных цифр в |unscaled| (не зависит от scale)."""
        return digit_count(self.unscaled)

    @property
    def sign(self) -> int:
        """-1, 0 или 1."""
        return (self.unscaled > 0) - (self.unscaled < 0)

    def is_zero(self) -> bool:
        return self.unscaled == 0

    def canonical(self) -> "ScaledDecimal":
        """Каноническая форма (возвращает self, если уже каноническая)."""
        unscaled, scale = strip_trailing_zeros(self.unscaled, self.scale)
        if unscaled == self.unscaled and scale == self.scale:
            return self
        return ScaledDecimal(unscaled, scale)

    # -------------------------------------------------------------------------
    # Форматирование
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        unscaled, scale = strip_trailing_zeros(self.unscaled, self.scale)
        digits = int_to_digits(unscaled)
        sign = "-" if unscaled < 0 else ""

        if scale == 0:
            return sign + digits

        # Минимум одна цифра в целой части ("0.05", а не ".05")
        digits = digits.zfill(scale + 1)
        return f"{sign}{digits[:-scale]}.{digits[-scale:]}"

    def __repr__(self) -> str:
        return f"ScaledDecimal('{self}')"

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def compare_to(self, other: DecimalLike) -> int:
        """
        Сравнение по значению: -1, 0 или 1.

        Оба операнда выравниваются к max(scale) перед сравнением.
        """
        other = _coerce(other)
        left, right, _ = align_scales(
            self.unscaled, self.scale, other.unscaled, other.scale
        )
        return (left > right) - (left < right)

    def __eq__(self, other: object) -> bool:
        if not _is_operand(other):
            return NotImplemented
        return self.compare_to(other) == 0

    def __lt__(self, other: object) -> bool:
        if not _is_operand(other):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: object) -> bool:
        if not _is_operand(other):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not _is_operand(other):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: object) -> bool:
        if not _is_operand(other):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __hash__(self) -> int:
        unscaled, scale = strip_trailing_zeros(self.unscaled, self.scale)
        # Целые значения хешируются как int, т.к. ScaledDecimal(5) == 5
        if scale == 0:
            return hash(unscaled)
        return hash((unscaled, scale))

    def __bool__(self) -> bool:
        return self.unscaled != 0

    def __int__(self) -> int:
        """Целая часть с усечением к нулю."""
        quotient, _ = truncating_divmod(self.unscaled, pow10(self.scale))
        return quotient

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def __neg__(self) -> "ScaledDecimal":
        return ScaledDecimal.from_unscaled(-self.unscaled, self.scale)

    def __pos__(self) -> "ScaledDecimal":
        return self.canonical()

    def __abs__(self) -> "ScaledDecimal":
        return ScaledDecimal.from_unscaled(abs(self.unscaled), self.scale)

    def __add__(self, other: object) -> "ScaledDecimal":
        if not _is_operand(other):
            return NotImplemented
        return add(self, other)

    def __radd__(self, other: object) -> "ScaledDecimal":
        if not _is_integer(other):
            return NotImplemented
        return add(other, self)

    def __sub__(self, other: object) -> "ScaledDecimal":
        if not _is_operand(other):
            return NotImplemented
        return subtract(self, other)

    def __rsub__(self, other: object) -> "ScaledDecimal":
        if not _is_integer(other):
            return NotImplemented
        return subtract(other, self)

    def __mul__(self, other: object) -> "ScaledDecimal":
        if not _is_operand(other):
            return NotImplemented
        return multiply(self, other)

    def __rmul__(self, other: object) -> "ScaledDecimal":
        if not _is_integer(other):
            return NotImplemented
        return multiply(other, self)

    def __truediv__(self, other: object) -> "ScaledDecimal":
        if not _is_operand(other):
            return NotImplemented
        return divide(self, other, DEFAULT_PRECISION)

    def __rtruediv__(self, other: object) -> "ScaledDecimal":
        if not _is_integer(other):
            return NotImplemented
        return divide(other, self, DEFAULT_PRECISION)

    def __mod__(self, other: object) -> "ScaledDecimal":
        if not _is_operand(other):
            return NotImplemented
        return remainder(self, other, DEFAULT_PRECISION)

    def __rmod__(self, other: object) -> "ScaledDecimal":
        if not _is_integer(other):
            return NotImplemented
        return remainder(other, self, DEFAULT_PRECISION)

    def __pow__(self, exponent: object) -> "ScaledDecimal":
        if isinstance(exponent, bool) or not isinstance(exponent, int):
            return NotImplemented
        return power(self, exponent)

    def divide(
        self, divisor: DecimalLike, digit_count: int = DEFAULT_PRECISION
    ) -> "ScaledDecimal":
        """См. divide(); ScaledDecimal.divide(a, b, k) эквивалентен divide(a, b, k)."""
        return divide(self, divisor, digit_count)

    def remainder(
        self, divisor: DecimalLike, digit_count: int = DEFAULT_PRECISION
    ) -> "ScaledDecimal":
        """См. remainder()."""
        return remainder(self, divisor, digit_count)

    def power(
        self, exponent: int, digit_count: Optional[int] = None
    ) -> "ScaledDecimal":
        """См. power()."""
        return power(self, exponent, digit_count)


ScaledDecimal.ZERO = ScaledDecimal(0, 0)
ScaledDecimal.ONE = ScaledDecimal(1, 0)
ScaledDecimal.TWO = ScaledDecimal(2, 0)


# =============================================================================
# ВСПОМОГАТЕЛЬНЫЕ ФУНКЦИИ
# =============================================================================


def _is_integer(value: object) -> bool:
    # bool является подклассом int, но операндом не считается
    return isinstance(value, int) and not isinstance(value, bool)


def _is_operand(value: object) -> bool:
    return isinstance(value, ScaledDecimal) or _is_integer(value)


def _coerce(value: DecimalLike) -> ScaledDecimal:
    """int → ScaledDecimal; ScaledDecimal возвращается как есть."""
    if isinstance(value, ScaledDecimal):
        return value
    if _is_integer(value):
        return ScaledDecimal(value, 0)
    raise TypeError(f"Expected ScaledDecimal or int, got {type(value).__name__}")


def _validate_digit_count(digit_count: int) -> None:
    if isinstance(digit_count, bool) or not isinstance(digit_count, int):
        raise TypeError(f"digit_count must be int, got {type(digit_count).__name__}")
    if digit_count < 0:
        raise ValueError(
            f"digit_count must be non-negative, got {format_int(digit_count)}"
        )


def _working_division(
    dividend: ScaledDecimal, divisor: ScaledDecimal, digit_count: int
) -> tuple[int, int, int]:
    """
    Общая часть divide и remainder.

    Оба операнда выравниваются к scale = max(s1, s2); делимое домножается
    на 10^digit_count, затем выполняется деление с усечением к нулю:

        aligned_a * 10^k = q * aligned_b + r

    q — частное с ровно digit_count дробными цифрами, r — остаток
    на рабочем масштабе scale + digit_count.

    Returns:
        (quotient, leftover, working_scale)
    """
    left, right, scale = align_scales(
        dividend.unscaled, dividend.scale, divisor.unscaled, divisor.scale
    )
    quotient, leftover = truncating_divmod(left * pow10(digit_count), right)
    return quotient, leftover, scale + digit_count


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


def add(left: DecimalLike, right: DecimalLike) -> ScaledDecimal:
    """Точная сумма."""
    left, right = _coerce(left), _coerce(right)
    a, b, scale = align_scales(left.unscaled, left.scale, right.unscaled, right.scale)
    return ScaledDecimal.from_unscaled(a + b, scale)


def subtract(left: DecimalLike, right: DecimalLike) -> ScaledDecimal:
    """Точная разность."""
    left, right = _coerce(left), _coerce(right)
    a, b, scale = align_scales(left.unscaled, left.scale, right.unscaled, right.scale)
    return ScaledDecimal.from_unscaled(a - b, scale)


def multiply(left: DecimalLike, right: DecimalLike) -> ScaledDecimal:
    """Точное произведение: unscaled = u1 * u2, scale = s1 + s2."""
    left, right = _coerce(left), _coerce(right)
    return ScaledDecimal.from_unscaled(
        left.unscaled * right.unscaled, left.scale + right.scale
    )


def divide(
    dividend: DecimalLike,
    divisor: DecimalLike,
    digit_count: int = DEFAULT_PRECISION,
) -> ScaledDecimal:
    """
    Деление с ровно digit_count дробными цифрами (усечение к нулю).

    Знак результата = sign(dividend) × sign(divisor). digit_count не
    ограничен; ограничение (например, [0, 1000]) — политика вызывающего кода.

    Args:
        dividend: Делимое
        divisor: Делитель
        digit_count: Количество дробных цифр результата (>= 0)

    Returns:
        Каноническое частное

    Raises:
        DivideByZeroError: divisor == 0 и dividend != 0
        ValueError: digit_count < 0

    Examples:
        >>> divide(ScaledDecimal(1234567, 5), 2)
        ScaledDecimal('6.172835')
        >>> divide(ScaledDecimal.ZERO, ScaledDecimal.ZERO)
        ScaledDecimal('1')
    """
    dividend, divisor = _coerce(dividend), _coerce(divisor)
    _validate_digit_count(digit_count)

    if divisor.is_zero():
        # Соглашение x / x = 1 распространяется и на 0 / 0
        if dividend.is_zero():
            return ScaledDecimal.ONE
        raise DivideByZeroError(f"Cannot divide {dividend} by zero")

    quotient, _, _ = _working_division(dividend, divisor, digit_count)
    return ScaledDecimal.from_unscaled(quotient, digit_count)


def remainder(
    dividend: DecimalLike,
    divisor: DecimalLike,
    digit_count: int = DEFAULT_PRECISION,
) -> ScaledDecimal:
    """
    Остаток деления divide(dividend, divisor, digit_count).

    Остаток выражен на рабочем масштабе деления max(s1, s2) + digit_count;
    для целых операндов это ровно digit_count дробных цифр:
    remainder(100, 3, 2) == 0.01. Для дробных операндов масштаб намеренно
    больше digit_count, а не равен ему: remainder(1, 0.3, 2) == 0.001
    (1 == 0.3 * 3.33 + 0.001), иначе равенство ниже не было бы точным.
    Всегда выполняется точное равенство:

        dividend == divisor * divide(dividend, divisor, k) + remainder(dividend, divisor, k)

    Знак остатка совпадает со знаком делимого.

    Raises:
        DivideByZeroError: divisor == 0 и dividend != 0
        ValueError: digit_count < 0
    """
    dividend, divisor = _coerce(dividend), _coerce(divisor)
    _validate_digit_count(digit_count)

    if divisor.is_zero():
        # 0 / 0 = 1 без остатка
        if dividend.is_zero():
            return ScaledDecimal.ZERO
        raise DivideByZeroError(f"Cannot divide {dividend} by zero")

    _, leftover, working_scale = _working_division(dividend, divisor, digit_count)
    return ScaledDecimal.from_unscaled(leftover, working_scale)


def power(
    value: DecimalLike, exponent: int, digit_count: Optional[int] = None
) -> ScaledDecimal:
    """
    Возведение в целую степень.

    - exponent == 0 → ONE для любого value (включая 0)
    - exponent > 0 → точный результат, digit_count не используется
    - exponent < 0 → divide(ONE, value^|exponent|, digit_count),
      digit_count по умолчанию DEFAULT_PRECISION

    Raises:
        TypeError: exponent не int
        DivideByZeroError: value == 0 при exponent < 0

    Examples:
        >>> power(ScaledDecimal(5), -2)
        ScaledDecimal('0.04')
        >>> power(ScaledDecimal(-2), 3)
        ScaledDecimal('-8')
    """
    value = _coerce(value)
    if isinstance(exponent, bool) or not isinstance(exponent, int):
        raise TypeError(f"exponent must be int, got {type(exponent).__name__}")

    if exponent == 0:
        return ScaledDecimal.ONE

    magnitude = abs(exponent)
    raised = ScaledDecimal.from_unscaled(
        value.unscaled**magnitude, value.scale * magnitude
    )
    if exponent > 0:
        return raised

    if digit_count is None:
        digit_count = DEFAULT_PRECISION
    return divide(ScaledDecimal.ONE, raised, digit_count)
