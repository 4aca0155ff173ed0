"""LimitResult — результат численного вычисления предела.

Immutable Pydantic модель: односторонние пределы, общий предел и грубая
классификация типа предела (finite / infinite / does-not-exist).
"""

import math
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, model_validator


# =============================================================================
# ENUMS
# =============================================================================


class LimitType(str, Enum):
    """Тип предела."""

    FINITE = "finite"
    INFINITE = "infinite"
    DOES_NOT_EXIST = "does-not-exist"


# =============================================================================
# MODELS
# =============================================================================


class LimitResult(BaseModel):
    """Результат evaluate_limit.

    Инварианты:
    - exists=True требует конечного value
    - value заполнен только при exists=True (для одностороннего запроса
      value повторяет результат этой стороны, в т.ч. ±inf)
    - limit_type выводится из left_limit/right_limit детерминированно
    """

    exists: bool = Field(..., description="Предел существует и конечен")
    value: Optional[float] = Field(None, description="Значение предела")
    left_limit: Optional[float] = Field(None, description="Левый предел")
    right_limit: Optional[float] = Field(None, description="Правый предел")
    limit_type: LimitType = Field(..., description="Классификация типа предела")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_exists_has_finite_value(self) -> "LimitResult":
        """Существующий предел обязан иметь конечное значение."""
        if self.exists and (self.value is None or not math.isfinite(self.value)):
            raise ValueError(f"exists=True requires a finite value, got {self.value}")
        return self

    def to_contract(self) -> dict:
        """Сериализация в dict для limit_result контракта."""
        return {
            "exists": self.exists,
            "value": self.value,
            "left_limit": self.left_limit,
            "right_limit": self.right_limit,
            "limit_type": self.limit_type.value,
        }
