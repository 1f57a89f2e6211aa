"""
Fraction — сокращённая дробь из двух int неограниченной точности

Значение = numerator / denominator.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ (восстанавливаются после каждой операции):
1. denominator > 0
2. gcd(|numerator|, denominator) == 1
3. numerator == 0 → denominator == 1

Модель владения:
- add / subtract / multiply / divide / power изменяют получателя на месте
  и возвращают None (как и операторы +=, -=, *=, /=)
- Бинарные операторы +, -, *, / возвращают новую дробь, не трогая операнды
- Экземпляр принадлежит одному владельцу: одновременное изменение из
  нескольких потоков не поддерживается, синхронизация — на вызывающем коде.
  Дробь изменяема, поэтому не хешируется.
"""

from typing import Optional, Union

from src.core.math.errors import DivideByZeroError
from src.core.math.integer_ops import format_int, pow10, reduce_ratio
from src.core.math.scaled_decimal import DEFAULT_PRECISION, ScaledDecimal, divide

FractionLike = Union["Fraction", int]


def _is_integer(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _as_ratio(operand: FractionLike) -> tuple[int, int]:
    """Операнд → (numerator, denominator)."""
    if isinstance(operand, Fraction):
        return operand.numerator, operand.denominator
    if _is_integer(operand):
        return operand, 1
    raise TypeError(f"Expected Fraction or int, got {type(operand).__name__}")


class Fraction:
    """
    Изменяемая сокращённая дробь.

    Examples:
        >>> f = Fraction(100, 50)
        >>> (f.numerator, f.denominator)
        (2, 1)
        >>> f = Fraction(5, 3)
        >>> f.add(1)
        >>> f.to_decimal()
        ScaledDecimal('2.66666666')
    """

    __slots__ = ("_numerator", "_denominator")

    def __init__(self, numerator: int, denominator: int = 1):
        """
        Args:
            numerator: Числитель
            denominator: Знаменатель (не 0)

        Raises:
            DivideByZeroError: Если denominator == 0
            TypeError: Если аргументы не int
        """
        if not _is_integer(numerator) or not _is_integer(denominator):
            raise TypeError(
                f"numerator and denominator must be int, got "
                f"{type(numerator).__name__} and {type(denominator).__name__}"
            )
        if denominator == 0:
            raise DivideByZeroError("Fraction denominator must not be zero")

        self._numerator, self._denominator = reduce_ratio(numerator, denominator)

    # -------------------------------------------------------------------------
    # Создание
    # -------------------------------------------------------------------------

    @classmethod
    def from_ratio(cls, numerator: int, denominator: int) -> "Fraction":
        return cls(numerator, denominator)

    @classmethod
    def from_integer(cls, value: int) -> "Fraction":
        return cls(value, 1)

    @classmethod
    def from_decimal(cls, value: ScaledDecimal) -> "Fraction":
        """Точная дробь unscaled / 10^scale."""
        return cls(value.unscaled, pow10(value.scale))

    def copy(self) -> "Fraction":
        clone = Fraction.__new__(Fraction)
        clone._numerator = self._numerator
        clone._denominator = self._denominator
        return clone

    # -------------------------------------------------------------------------
    # Свойства
    # -------------------------------------------------------------------------

    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    def is_zero(self) -> bool:
        return self._numerator == 0

    def _assign(self, numerator: int, denominator: int) -> None:
        self._numerator, self._denominator = reduce_ratio(numerator, denominator)

    # -------------------------------------------------------------------------
    # Изменяющая арифметика
    # -------------------------------------------------------------------------

    def add(self, operand: FractionLike) -> None:
        """self = (n1*d2 + n2*d1) / (d1*d2)"""
        n2, d2 = _as_ratio(operand)
        self._assign(
            self._numerator * d2 + n2 * self._denominator, self._denominator * d2
        )

    def subtract(self, operand: FractionLike) -> None:
        """self = (n1*d2 - n2*d1) / (d1*d2)"""
        n2, d2 = _as_ratio(operand)
        self._assign(
            self._numerator * d2 - n2 * self._denominator, self._denominator * d2
        )

    def multiply(self, operand: FractionLike) -> None:
        """self = (n1*n2) / (d1*d2)"""
        n2, d2 = _as_ratio(operand)
        self._assign(self._numerator * n2, self._denominator * d2)

    def divide(self, operand: FractionLike) -> None:
        """
        Умножение на обратную дробь.

        Raises:
            DivideByZeroError: Если числитель делителя равен 0
        """
        n2, d2 = _as_ratio(operand)
        if n2 == 0:
            raise DivideByZeroError("Cannot divide a fraction by zero")
        self._assign(self._numerator * d2, self._denominator * n2)

    def power(self, exponent: int) -> None:
        """
        Возведение в целую степень.

        - 0 → 1/1 (в том числе для нулевой дроби)
        - exponent > 0 → (n^e, d^e), точно
        - exponent < 0 → обращение, затем степень |exponent|

        Raises:
            DivideByZeroError: Отрицательная степень нулевой дроби
        """
        if not _is_integer(exponent):
            raise TypeError(f"exponent must be int, got {type(exponent).__name__}")

        if exponent == 0:
            self._numerator, self._denominator = 1, 1
            return

        numerator, denominator = self._numerator, self._denominator
        if exponent < 0:
            if numerator == 0:
                raise DivideByZeroError("Cannot raise zero to a negative power")
            numerator, denominator = denominator, numerator

        magnitude = abs(exponent)
        self._assign(numerator**magnitude, denominator**magnitude)

    # -------------------------------------------------------------------------
    # Сравнение и конверсия
    # -------------------------------------------------------------------------

    def compare_to(self, other: FractionLike) -> int:
        """
        -1, 0 или 1.

        Знаменатели всегда положительны, поэтому достаточно сравнить
        перекрёстные произведения n1*d2 и n2*d1.
        """
        n2, d2 = _as_ratio(other)
        left = self._numerator * d2
        right = n2 * self._denominator
        return (left > right) - (left < right)

    def to_decimal(self, digit_count: Optional[int] = None) -> ScaledDecimal:
        """
        Конверсия в ScaledDecimal с digit_count дробными цифрами (усечение).

        Дробь не изменяется. По умолчанию DEFAULT_PRECISION.
        """
        if digit_count is None:
            digit_count = DEFAULT_PRECISION
        return divide(
            ScaledDecimal.from_integer(self._numerator),
            ScaledDecimal.from_integer(self._denominator),
            digit_count,
        )

    # -------------------------------------------------------------------------
    # Протоколы Python
    # -------------------------------------------------------------------------

    __hash__ = None  # type: ignore[assignment]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Fraction) and not _is_integer(other):
            return NotImplemented
        return self.compare_to(other) == 0  # type: ignore[arg-type]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Fraction) and not _is_integer(other):
            return NotImplemented
        return self.compare_to(other) < 0  # type: ignore[arg-type]

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Fraction) and not _is_integer(other):
            return NotImplemented
        return self.compare_to(other) <= 0  # type: ignore[arg-type]

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Fraction) and not _is_integer(other):
            return NotImplemented
        return self.compare_to(other) > 0  # type: ignore[arg-type]

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Fraction) and not _is_integer(other):
            return NotImplemented
        return self.compare_to(other) >= 0  # type: ignore[arg-type]

    def __bool__(self) -> bool:
        return self._numerator != 0

    def __neg__(self) -> "Fraction":
        result = self.copy()
        result._numerator = -result._numerator
        return result

    def __abs__(self) -> "Fraction":
        result = self.copy()
        result._numerator = abs(result._numerator)
        return result

    def _binary(self, operation: str, operand: object) -> "Fraction":
        result = self.copy()
        getattr(result, operation)(operand)
        return result

    def __add__(self, other: object) -> "Fraction":
        if not isinstance(other, Fraction) and not _is_integer(other):
            return NotImplemented
        return self._binary("add", other)

    def __radd__(self, other: object) -> "Fraction":
        if not _is_integer(other):
            return NotImplemented
        return self._binary("add", other)

    def __sub__(self, other: object) -> "Fraction":
        if not isinstance(other, Fraction) and not _is_integer(other):
            return NotImplemented
        return self._binary("subtract", other)

    def __rsub__(self, other: object) -> "Fraction":
        if not _is_integer(other):
            return NotImplemented
        return Fraction(other)._binary("subtract", self)  # type: ignore[arg-type]

    def __mul__(self, other: object) -> "Fraction":
        if not isinstance(other, Fraction) and not _is_integer(other):
            return NotImplemented
        return self._binary("multiply", other)

    def __rmul__(self, other: object) -> "Fraction":
        if not _is_integer(other):
            return NotImplemented
        return self._binary("multiply", other)

    def __truediv__(self, other: object) -> "Fraction":
        if not isinstance(other, Fraction) and not _is_integer(other):
            return NotImplemented
        return self._binary("divide", other)

    def __rtruediv__(self, other: object) -> "Fraction":
        if not _is_integer(other):
            return NotImplemented
        return Fraction(other)._binary("divide", self)  # type: ignore[arg-type]

    def __pow__(self, exponent: object) -> "Fraction":
        if not _is_integer(exponent):
            return NotImplemented
        return self._binary("power", exponent)

    def __iadd__(self, other: object) -> "Fraction":
        if not isinstance(other, Fraction) and not _is_integer(other):
            return NotImplemented
        self.add(other)  # type: ignore[arg-type]
        return self

    def __isub__(self, other: object) -> "Fraction":
        if not isinstance(other, Fraction) and not _is_integer(other):
            return NotImplemented
        self.subtract(other)  # type: ignore[arg-type]
        return self

    def __imul__(self, other: object) -> "Fraction":
        if not isinstance(other, Fraction) and not _is_integer(other):
            return NotImplemented
        self.multiply(other)  # type: ignore[arg-type]
        return self

    def __itruediv__(self, other: object) -> "Fraction":
        if not isinstance(other, Fraction) and not _is_integer(other):
            return NotImplemented
        self.divide(other)  # type: ignore[arg-type]
        return self

    def __str__(self) -> str:
        return f"{format_int(self._numerator)}/{format_int(self._denominator)}"

    def __repr__(self) -> str:
        numerator = format_int(self._numerator)
        denominator = format_int(self._denominator)
        return f"Fraction({numerator}, {denominator})"
