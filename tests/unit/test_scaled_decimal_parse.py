"""
Тесты разбора и форматирования ScaledDecimal

Проверяет:
1. Грамматику: знак, точка, пустая целая часть
2. Каноникализацию ведущих и хвостовых нулей
3. Отказы: None, "", лишняя точка, недопустимые символы
4. try_parse без исключений
5. Каноническую текстовую форму
"""

import pytest

from src.core.math import FormatError, ScaledDecimal, parse_numeral, split_numeral

UINT64_MAX = 18446744073709551615


# =============================================================================
# ТЕСТЫ: Успешный разбор
# =============================================================================


class TestParse:
    """Тесты ScaledDecimal.parse"""

    def test_leading_and_trailing_zeros_stripped(self) -> None:
        value = ScaledDecimal.parse("012.345000")
        assert value == ScaledDecimal(12345, 3)
        assert (value.unscaled, value.scale) == (12345, 3)
        assert str(value) == "12.345"

    def test_float_point_value(self) -> None:
        parsed = ScaledDecimal.parse("00012345.67890")
        assert parsed == ScaledDecimal(1234567890, 5)
        assert ScaledDecimal(123456789, 4) == ScaledDecimal(1234567890, 5)

    def test_many_unnecessary_zeros(self) -> None:
        parsed = ScaledDecimal.parse(
            "0000000000000000000000000000000000000000057.05800000000000000000"
        )
        assert parsed.digit_count == 5
        assert str(parsed) == "57.058"

    def test_uint64_max_round_trip(self) -> None:
        text = str(UINT64_MAX)
        assert str(ScaledDecimal.parse(text)) == text

    def test_just_dot_three(self) -> None:
        parsed = ScaledDecimal.parse(".3")
        assert parsed == ScaledDecimal(3, 1)
        assert str(parsed) == "0.3"

    def test_negative_without_integer_part(self) -> None:
        assert ScaledDecimal.parse("-.5") == ScaledDecimal(-5, 1)

    def test_trailing_dot_accepted(self) -> None:
        assert ScaledDecimal.parse("5.") == ScaledDecimal(5)

    def test_negative_zero_is_canonical_zero(self) -> None:
        parsed = ScaledDecimal.parse("-0.000")
        assert (parsed.unscaled, parsed.scale) == (0, 0)
        assert str(parsed) == "0"

    def test_integer_with_trailing_zeros_keeps_them(self) -> None:
        """Нули целой части значимы"""
        parsed = ScaledDecimal.parse("1500")
        assert (parsed.unscaled, parsed.scale) == (1500, 0)

    def test_very_long_numeral(self) -> None:
        """Длиннее лимита int_max_str_digits интерпретатора"""
        text = "9" * 6000 + "." + "1" * 5000
        parsed = ScaledDecimal.parse(text)
        assert parsed.scale == 5000
        assert parsed.digit_count == 11000
        assert str(parsed) == text


# =============================================================================
# ТЕСТЫ: Ошибки формата
# =============================================================================


class TestParseFailures:
    """Тесты отказов разбора"""

    def test_none_input(self) -> None:
        with pytest.raises(FormatError):
            ScaledDecimal.parse(None)

    def test_empty_string(self) -> None:
        with pytest.raises(FormatError):
            ScaledDecimal.parse("")

    def test_almost_valid_value(self) -> None:
        with pytest.raises(FormatError):
            ScaledDecimal.parse("123a567")

    def test_two_dots(self) -> None:
        with pytest.raises(FormatError, match="more than one"):
            ScaledDecimal.parse("123.567.980")

    @pytest.mark.parametrize(
        "text", ["-", ".", "-.", "+1", " 1", "1 ", "1e5", "--1", "1-", "١٢٣", "0x10"]
    )
    def test_invalid_numerals(self, text: str) -> None:
        with pytest.raises(FormatError):
            ScaledDecimal.parse(text)

    def test_non_string_input(self) -> None:
        with pytest.raises(FormatError, match="must be str"):
            ScaledDecimal.parse(12)

    def test_format_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            ScaledDecimal.parse("abc")


class TestTryParse:
    """Тесты ScaledDecimal.try_parse"""

    def test_fails_with_empty_string(self) -> None:
        ok, value = ScaledDecimal.try_parse("")
        assert ok is False
        assert value is None

    def test_fails_with_invalid_character(self) -> None:
        ok, _ = ScaledDecimal.try_parse("123a")
        assert ok is False

    def test_fails_with_none(self) -> None:
        ok, _ = ScaledDecimal.try_parse(None)
        assert ok is False

    def test_succeeds(self) -> None:
        ok, value = ScaledDecimal.try_parse("012.345000")
        assert ok is True
        assert value == ScaledDecimal(12345, 3)


# =============================================================================
# ТЕСТЫ: Грамматика
# =============================================================================


class TestNumeralGrammar:
    """Тесты split_numeral / parse_numeral"""

    def test_split_parts(self) -> None:
        assert split_numeral("-012.50") == (True, "012", "50")
        assert split_numeral(".3") == (False, "", "3")
        assert split_numeral("7") == (False, "7", "")

    def test_parse_numeral_is_canonical(self) -> None:
        assert parse_numeral("012.345000") == (12345, 3)
        assert parse_numeral("10.00") == (10, 0)
        assert parse_numeral("0") == (0, 0)


# =============================================================================
# ТЕСТЫ: Форматирование
# =============================================================================


class TestFormat:
    """Тесты str(ScaledDecimal)"""

    @pytest.mark.parametrize(
        "unscaled,scale,expected",
        [
            (0, 0, "0"),
            (5, 2, "0.05"),
            (-5, 2, "-0.05"),
            (12345, 3, "12.345"),
            (-1000, 2, "-10"),
            (100, 2, "1"),
            (7777777, 3, "7777.777"),
        ],
    )
    def test_canonical_text(self, unscaled: int, scale: int, expected: str) -> None:
        assert str(ScaledDecimal(unscaled, scale)) == expected

    def test_repr(self) -> None:
        assert repr(ScaledDecimal(12345, 3)) == "ScaledDecimal('12.345')"
