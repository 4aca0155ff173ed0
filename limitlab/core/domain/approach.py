"""Approach — направление приближения и шаг численной аппроксимации.

Immutable Pydantic модель одного шага последовательности x → a.
"""

from enum import Enum

from pydantic import BaseModel, Field


# =============================================================================
# ENUMS
# =============================================================================


class ApproachDirection(str, Enum):
    """Сторона, с которой x приближается к точке a."""

    LEFT = "left"
    RIGHT = "right"
    BOTH = "both"


# =============================================================================
# MODELS
# =============================================================================


class ApproximationStep(BaseModel):
    """Один шаг численной аппроксимации предела.

    Содержит:
    - x: точка выборки (a ∓ distance)
    - fx: значение функции в x (может быть NaN/±inf, не фильтруется)
    - distance: |x - a|
    """

    x: float = Field(..., description="Точка выборки")
    fx: float = Field(..., description="fn(x); NaN если функция не определена")
    distance: float = Field(..., ge=0.0, description="Расстояние до точки приближения")

    model_config = {"frozen": True}

    def to_contract(self) -> dict:
        """Сериализация в dict для approximation_step контракта."""
        return {"x": self.x, "fx": self.fx, "distance": self.distance}
