"""EpsilonDelta — результат исследования ε-δ условия в точке."""

from typing import Optional

from pydantic import BaseModel, Field


class EpsilonDeltaOutcome(BaseModel):
    """Результат explore_epsilon_delta.

    Содержит:
    - epsilon: допуск по значению функции
    - delta: δ, выбранное вызывающей стороной
    - found_delta: наибольшее найденное δ (None — ни одно δ не подошло)
    - delta_is_valid: выполняется ли ε-δ условие для выбранного δ
    """

    epsilon: float = Field(..., gt=0.0, description="Допуск ε")
    delta: float = Field(..., ge=0.0, description="Выбранное δ")
    found_delta: Optional[float] = Field(None, gt=0.0, description="Найденное наибольшее δ")
    delta_is_valid: bool = Field(..., description="Выбранное δ удовлетворяет ε")

    model_config = {"frozen": True}

    def to_contract(self) -> dict:
        """Сериализация в dict для epsilon_delta_outcome контракта."""
        return {
            "epsilon": self.epsilon,
            "delta": self.delta,
            "found_delta": self.found_delta,
            "delta_is_valid": self.delta_is_valid,
        }
