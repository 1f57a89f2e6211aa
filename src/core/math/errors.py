"""
Errors — типизированные ошибки точной арифметики

Таксономия:
- FormatError: текст не соответствует грамматике числа (включая None и "")
- DivideByZeroError: деление на ноль (кроме соглашения x / x = 1, в т.ч. 0 / 0)

Ядро не логирует и не восстанавливается: ошибка поднимается к вызывающему коду.
Перевод ошибок в пользовательские сообщения выполняется на границе evaluator.
"""


class ExactArithmeticError(Exception):
    """Базовый класс всех ошибок ядра точной арифметики."""

    pass


class FormatError(ExactArithmeticError, ValueError):
    """
    Текст не соответствует грамматике числа.

    Грамматика: необязательный ведущий '-', цифры, необязательная '.' и цифры.
    Хотя бы одна цифра обязательна.
    """

    pass


class DivideByZeroError(ExactArithmeticError, ZeroDivisionError):
    """
    Деление на нулевой операнд.

    Исключение: dividend == divisor == 0 даёт ONE (соглашение x / x = 1).
    Также поднимается при создании Fraction с нулевым знаменателем и при
    обращении нулевой дроби.
    """

    pass
