"""
PrecisionPolicy — политика ограничения точности и показателей степени

Ядро (ScaledDecimal, Fraction) не ограничивает digit_count и показатели
степени: рост int ограничен только памятью. Вызывающий код, принимающий
недоверенные параметры, обязан наложить внешние ограничения.

Immutable Pydantic модель с параметрами по умолчанию:
- digit_count по умолчанию: 8 (DEFAULT_PRECISION)
- диапазон digit_count: [0, 1000]
- |exponent| <= 100_000
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from src.core.math.scaled_decimal import DEFAULT_PRECISION


# =============================================================================
# PRECISION POLICY
# =============================================================================


class PrecisionPolicy(BaseModel):
    """
    Политика точности для границы evaluator.

    Immutable модель (frozen=True).
    """

    default_digit_count: int = Field(
        DEFAULT_PRECISION, ge=0, description="digit_count, если вызывающий не указал"
    )
    min_digit_count: int = Field(0, ge=0, description="Нижняя граница digit_count")
    max_digit_count: int = Field(
        1000, ge=0, description="Верхняя граница digit_count"
    )
    max_exponent_magnitude: int = Field(
        100_000, gt=0, description="Максимальный |exponent| для power"
    )

    model_config = {"frozen": True}  # Immutable

    @field_validator("max_digit_count")
    @classmethod
    def validate_max_not_below_min(cls, v: int, info) -> int:
        """Проверка, что max_digit_count >= min_digit_count"""
        if "min_digit_count" in info.data:
            min_digit_count = info.data["min_digit_count"]
            if v < min_digit_count:
                raise ValueError(
                    f"max_digit_count {v} must be >= min_digit_count {min_digit_count}"
                )
        return v

    def clamp_digit_count(self, requested: Optional[int] = None) -> int:
        """
        Приведение запрошенного digit_count в допустимый диапазон.

        Args:
            requested: Запрошенное значение (None → default_digit_count)

        Returns:
            Значение в [min_digit_count, max_digit_count]
        """
        if requested is None:
            requested = self.default_digit_count
        return max(self.min_digit_count, min(requested, self.max_digit_count))

    def allows_exponent(self, exponent: int) -> bool:
        """True если |exponent| <= max_exponent_magnitude."""
        return abs(exponent) <= self.max_exponent_magnitude
