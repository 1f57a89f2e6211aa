"""
Integer Ops — примитивы над целыми неограниченной точности

Общие помощники для ScaledDecimal и Fraction. Единственный примитив —
встроенный int Python (неограниченная точность, gcd через math.gcd).

Модуль обеспечивает:
- Степени десяти с кэшированием
- Подсчёт десятичных цифр без конвертации в строку
- Конвертацию int <-> строка цифр без ограничения int_max_str_digits
- Каноникализацию (снятие хвостовых нулей дробной части)
- Выравнивание масштабов
- Деление с усечением к нулю
- Сокращение дробей

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каноническая форма нуля — (0, 0)
2. truncating_divmod: n == q * d + r, знак r совпадает со знаком n
3. reduce_ratio: знаменатель > 0, gcd(|n|, d) == 1, ноль → 0/1
"""

import math
from functools import lru_cache
from typing import Final

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# log10(2) для оценки количества цифр по bit_length
_LOG10_2: Final[float] = math.log10(2)

# Размер блока при конвертации int <-> str.
# Должен быть меньше sys.get_int_max_str_digits() (по умолчанию 4300)
STR_CHUNK_DIGITS: Final[int] = 4000


# =============================================================================
# СТЕПЕНИ ДЕСЯТИ И ЦИФРЫ
# =============================================================================


@lru_cache(maxsize=256)
def pow10(exponent: int) -> int:
    """
    10 ** exponent с кэшированием.

    Raises:
        ValueError: Если exponent < 0
    """
    if exponent < 0:
        raise ValueError(
            f"exponent must be non-negative, got {format_int(exponent)}"
        )
    return 10**exponent


def digit_count(value: int) -> int:
    """
    Количество десятичных цифр в |value|.

    Оценка по bit_length с точной коррекцией через сравнение со степенями 10.

    Examples:
        >>> digit_count(0)
        1
        >>> digit_count(-1234)
        4
        >>> digit_count(10**20)
        21
    """
    magnitude = abs(value)
    if magnitude < 10:
        return 1

    digits = int(magnitude.bit_length() * _LOG10_2) + 1

    # Оценка может ошибаться на единицу в любую сторону
    while digits > 1 and magnitude < pow10(digits - 1):
        digits -= 1
    while magnitude >= pow10(digits):
        digits += 1

    return digits


def digits_to_int(digits: str) -> int:
    """
    Строка ASCII-цифр → int (пустая строка → 0).

    Длинные строки конвертируются блоками по STR_CHUNK_DIGITS,
    поэтому лимит int_max_str_digits интерпретатора не мешает.
    """
    if not digits:
        return 0
    if len(digits) <= STR_CHUNK_DIGITS:
        return int(digits)

    value = 0
    for start in range(0, len(digits), STR_CHUNK_DIGITS):
        chunk = digits[start : start + STR_CHUNK_DIGITS]
        value = value * pow10(len(chunk)) + int(chunk)
    return value


def int_to_digits(value: int) -> str:
    """
    |value| → строка десятичных цифр (без знака).

    Обратная операция к digits_to_int, также работает блоками.
    """
    magnitude = abs(value)
    base = pow10(STR_CHUNK_DIGITS)
    if magnitude < base:
        return str(magnitude)

    chunks = []
    while magnitude:
        magnitude, chunk = divmod(magnitude, base)
        chunks.append(chunk)

    # Старший блок без дополнения нулями, остальные ровно STR_CHUNK_DIGITS цифр
    head = str(chunks[-1])
    tail = [str(chunk).zfill(STR_CHUNK_DIGITS) for chunk in reversed(chunks[:-1])]
    return head + "".join(tail)


def format_int(value: int) -> str:
    """
    value → десятичная строка со знаком.

    Замена str(int) для значений любой длины.

    Examples:
        >>> format_int(-42)
        '-42'
    """
    return ("-" if value < 0 else "") + int_to_digits(value)


# =============================================================================
# МАСШТАБ
# =============================================================================


def strip_trailing_zeros(unscaled: int, scale: int) -> tuple[int, int]:
    """
    Каноникализация пары (unscaled, scale).

    Снимает хвостовые нули дробной части, уменьшая scale (но не ниже 0).
    Ноль всегда приводится к (0, 0).

    Examples:
        >>> strip_trailing_zeros(1000, 2)
        (10, 0)
        >>> strip_trailing_zeros(12345000, 6)
        (12345, 3)
        >>> strip_trailing_zeros(0, 5)
        (0, 0)
    """
    if unscaled == 0:
        return 0, 0

    while scale > 0 and unscaled % 10 == 0:
        unscaled //= 10
        scale -= 1

    return unscaled, scale


def align_scales(
    unscaled_a: int, scale_a: int, unscaled_b: int, scale_b: int
) -> tuple[int, int, int]:
    """
    Выравнивание двух значений к общему масштабу max(scale_a, scale_b).

    Returns:
        (aligned_a, aligned_b, scale)
    """
    if scale_a == scale_b:
        return unscaled_a, unscaled_b, scale_a
    if scale_a < scale_b:
        return unscaled_a * pow10(scale_b - scale_a), unscaled_b, scale_b
    return unscaled_a, unscaled_b * pow10(scale_a - scale_b), scale_a


# =============================================================================
# ДЕЛЕНИЕ И ДРОБИ
# =============================================================================


def truncating_divmod(numerator: int, denominator: int) -> tuple[int, int]:
    """
    Целочисленное деление с усечением к нулю.

    В отличие от divmod (floor), частное усекается к нулю,
    а остаток имеет знак делимого: numerator == q * denominator + r.

    Raises:
        ZeroDivisionError: Если denominator == 0

    Examples:
        >>> truncating_divmod(7, 2)
        (3, 1)
        >>> truncating_divmod(-7, 2)
        (-3, -1)
    """
    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        quotient = -quotient
    return quotient, numerator - quotient * denominator


def reduce_ratio(numerator: int, denominator: int) -> tuple[int, int]:
    """
    Сокращение дроби и нормализация знака.

    Знаменатель должен быть ненулевым (проверяется вызывающим кодом).

    Returns:
        (numerator, denominator) с denominator > 0 и gcd == 1; ноль → (0, 1)
    """
    if numerator == 0:
        return 0, 1

    if denominator < 0:
        numerator, denominator = -numerator, -denominator

    divisor = math.gcd(numerator, denominator)
    return numerator // divisor, denominator // divisor
