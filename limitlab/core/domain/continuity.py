"""Continuity — классификация непрерывности функции в точке.

Immutable Pydantic модель. Создаётся заново при каждом вызове, не кэшируется.
"""

from enum import Enum

from pydantic import BaseModel, Field, model_validator


# =============================================================================
# ENUMS
# =============================================================================


class DiscontinuityType(str, Enum):
    """Тип разрыва (NONE — функция непрерывна)."""

    NONE = "none"
    REMOVABLE = "removable"
    JUMP = "jump"
    INFINITE = "infinite"
    OSCILLATING = "oscillating"


# =============================================================================
# MODELS
# =============================================================================


class ContinuityResult(BaseModel):
    """Результат check_continuity."""

    is_continuous: bool = Field(..., description="Функция непрерывна в точке")
    discontinuity_type: DiscontinuityType = Field(..., description="Тип разрыва")
    description: str = Field(..., min_length=1, description="Человекочитаемое описание")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_type_matches_flag(self) -> "ContinuityResult":
        """is_continuous ⇔ discontinuity_type == NONE."""
        if self.is_continuous != (self.discontinuity_type is DiscontinuityType.NONE):
            raise ValueError(
                f"is_continuous={self.is_continuous} contradicts "
                f"discontinuity_type={self.discontinuity_type.value}"
            )
        return self

    def to_contract(self) -> dict:
        """Сериализация в dict для continuity_result контракта."""
        return {
            "is_continuous": self.is_continuous,
            "discontinuity_type": self.discontinuity_type.value,
            "description": self.description,
        }
