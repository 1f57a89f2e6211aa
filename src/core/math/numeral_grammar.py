"""
Numeral Grammar — разбор текстовой записи десятичного числа

Грамматика:
    numeral := ['-'] digits ['.' digits]
    digits  := [0-9]*

Хотя бы одна цифра обязательна (в целой или дробной части), поэтому
".3" и "-.5" допустимы (пустая целая часть считается нулём), а "-", "."
и "" — нет. Принимаются только ASCII-цифры; пробелы, '+', экспонента
и любые другие символы отклоняются.

Каноникализация: ведущие нули целой части и хвостовые нули дробной
части отбрасываются, scale уменьшается соответственно.
"""

import re
from typing import Any, Final

from src.core.math.errors import FormatError
from src.core.math.integer_ops import digits_to_int, strip_trailing_zeros

# =============================================================================
# ГРАММАТИКА
# =============================================================================

NUMERAL_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"(?P<sign>-)?(?P<integer>[0-9]*)(?:\.(?P<fraction>[0-9]*))?"
)


# =============================================================================
# РАЗБОР
# =============================================================================


def split_numeral(text: Any) -> tuple[bool, str, str]:
    """
    Разбиение текста на знак, целые и дробные цифры.

    Args:
        text: Текст числа

    Returns:
        (negative, integer_digits, fraction_digits)

    Raises:
        FormatError: Если text не str или не соответствует грамматике
    """
    if text is None:
        raise FormatError("Numeral text must not be None")
    if not isinstance(text, str):
        raise FormatError(f"Numeral text must be str, got {type(text).__name__}")
    if not text:
        raise FormatError("Numeral text must not be empty")

    match = NUMERAL_PATTERN.fullmatch(text)
    if match is None:
        if text.count(".") > 1:
            raise FormatError(f"Numeral has more than one '.': {text!r}")
        raise FormatError(f"Numeral contains invalid characters: {text!r}")

    integer_digits = match.group("integer")
    fraction_digits = match.group("fraction") or ""

    if not integer_digits and not fraction_digits:
        raise FormatError(f"Numeral has no digits: {text!r}")

    return match.group("sign") is not None, integer_digits, fraction_digits


def parse_numeral(text: Any) -> tuple[int, int]:
    """
    Разбор текста в каноническую пару (unscaled, scale).

    Examples:
        >>> parse_numeral("012.345000")
        (12345, 3)
        >>> parse_numeral("-.5")
        (-5, 1)
        >>> parse_numeral("-0.000")
        (0, 0)
    """
    negative, integer_digits, fraction_digits = split_numeral(text)

    # Хвостовые нули дробной части не влияют на значение
    fraction_digits = fraction_digits.rstrip("0")

    unscaled = digits_to_int(integer_digits.lstrip("0") + fraction_digits)
    if negative:
        unscaled = -unscaled

    return strip_trailing_zeros(unscaled, len(fraction_digits))
