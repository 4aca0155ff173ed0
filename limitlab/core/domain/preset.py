"""Preset — дескриптор функции из реестра примеров.

Ядро вычислений потребляет из дескриптора только callable, а также
(опционально) область отображения и список интересных точек.
"""

from typing import Callable

from pydantic import BaseModel, Field, model_validator


class DomainRange(BaseModel):
    """Диапазон x для исследования функции."""

    min: float = Field(..., description="Левая граница")
    max: float = Field(..., description="Правая граница")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_bounds(self) -> "DomainRange":
        """Проверка min < max."""
        if self.min >= self.max:
            raise ValueError(f"min must be < max, got [{self.min}, {self.max}]")
        return self

    def contains(self, x: float) -> bool:
        """x лежит в [min, max]."""
        return self.min <= x <= self.max


class FunctionPreset(BaseModel):
    """Пример функции с заранее известным поведением пределов."""

    id: str = Field(..., min_length=1, description="Уникальный идентификатор")
    name: str = Field(..., min_length=1, description="Отображаемое имя")
    description: str = Field(..., description="Краткое описание")
    fn: Callable[[float], float] = Field(..., description="Функция одной переменной")
    domain: DomainRange = Field(..., description="Диапазон отображения")
    interesting_points: tuple[float, ...] = Field(
        default=(), description="Точки, где поведение предела показательно"
    )
    latex: str = Field(..., description="Формула в LaTeX")
    expected_behavior: str = Field(..., description="Ожидаемое поведение")

    model_config = {"frozen": True}
