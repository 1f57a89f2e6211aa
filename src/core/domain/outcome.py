"""
EvaluationOutcome — результат одного вычисления на границе evaluator

Immutable Pydantic модель. Соответствует JSON Schema
(src/core/contracts/schema/evaluation_outcome.json).

Либо status=ok и value (каноническая текстовая форма ScaledDecimal),
либо status=error, error_code и message для пользователя.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, model_validator


# =============================================================================
# ENUMS
# =============================================================================


class EvaluationStatus(str, Enum):
    """Статус вычисления"""

    OK = "ok"
    ERROR = "error"


# =============================================================================
# EVALUATION OUTCOME MODEL
# =============================================================================


class EvaluationOutcome(BaseModel):
    """
    Результат вычисления формулы или вызова функции.

    Immutable модель (frozen=True).
    """

    status: EvaluationStatus = Field(..., description="ok или error")
    value: Optional[str] = Field(
        None,
        pattern=r"^-?[0-9]+(\.[0-9]*[1-9])?$",
        description="Каноническая текстовая форма результата",
    )
    error_code: Optional[str] = Field(
        None, pattern="^[A-Z_]+$", description="Машиночитаемый код ошибки"
    )
    message: Optional[str] = Field(
        None, min_length=1, description="Сообщение для пользователя"
    )

    model_config = {"frozen": True}  # Immutable

    @model_validator(mode="after")
    def validate_status_fields(self) -> "EvaluationOutcome":
        """ok требует value; error требует error_code и message."""
        if self.status == EvaluationStatus.OK:
            if self.value is None:
                raise ValueError("ok outcome requires value")
            if self.error_code is not None:
                raise ValueError("ok outcome must not carry error_code")
        else:
            if self.error_code is None or self.message is None:
                raise ValueError("error outcome requires error_code and message")
            if self.value is not None:
                raise ValueError("error outcome must not carry value")
        return self

    @classmethod
    def ok(cls, value: str) -> "EvaluationOutcome":
        return cls(status=EvaluationStatus.OK, value=value)

    @classmethod
    def failed(cls, error_code: str, message: str) -> "EvaluationOutcome":
        return cls(status=EvaluationStatus.ERROR, error_code=error_code, message=message)

    @property
    def succeeded(self) -> bool:
        return self.status == EvaluationStatus.OK
