"""Epsilon-Delta Solver — наибольшее δ для заданного ε

Определение предела: для любого ε > 0 существует δ > 0 такое, что
    0 < |x - a| < δ  ⇒  |f(x) - L| < ε

Решатель ищет наибольшее δ ∈ (0, max_delta) бинарным поиском:
- кандидат δ проверяется выборкой внутренних точек (a - δ, a + δ) без a
- δ валидно, если все f(x) конечны и |f(x) - L| < ε
- валидно → нижняя граница, ищем больше; невалидно → ищем меньше
- остановка после max_iterations итераций или при ширине интервала < precision

Объём работы на вызов ограничен: max_iterations × 2 × (test_points - 1) вызовов f.
"""

import logging
import math
from dataclasses import dataclass
from typing import Final, Optional

from limitlab.core.domain.epsilon_delta import EpsilonDeltaOutcome
from limitlab.core.math.numerical_safeguards import (
    COINCIDENCE_EPS,
    RealFunction,
    safe_evaluate,
)

logger = logging.getLogger(__name__)

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# ε по умолчанию для исследования ε-δ
DEFAULT_EPSILON: Final[float] = 0.5

# δ по умолчанию для исследования ε-δ
DEFAULT_DELTA: Final[float] = 0.3

# Верхняя граница поиска δ
DEFAULT_MAX_DELTA: Final[float] = 1.0


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class DeltaSearchConfig:
    """Конфигурация бинарного поиска δ."""

    max_iterations: int = 50
    precision: float = 1e-10  # Остановка при high - low < precision
    test_points: int = 20  # Шаг выборки 2δ / test_points


# =============================================================================
# ПРОВЕРКА КАНДИДАТА
# =============================================================================


def _interior_samples(approach_point: float, delta: float, test_points: int):
    """Внутренние точки (a - δ, a + δ) с обеих сторон, исключая саму a."""
    step = (2.0 * delta) / test_points
    coincidence = COINCIDENCE_EPS * max(1.0, abs(approach_point))

    for i in range(1, test_points):
        for x in (approach_point - delta + step * i, approach_point + delta - step * i):
            offset = abs(x - approach_point)
            if offset < coincidence or offset >= delta:
                continue
            yield x


def delta_works_for_epsilon(
    fn: RealFunction,
    approach_point: float,
    limit_value: float,
    epsilon: float,
    delta: float,
    config: Optional[DeltaSearchConfig] = None,
) -> bool:
    """
    Выполняется ли ε-δ условие для конкретного δ.

    Args:
        fn: Функция одной вещественной переменной
        approach_point: Точка a
        limit_value: Предел L (должен быть конечным)
        epsilon: Допуск ε по значению
        delta: Проверяемое δ
        config: Конфигурация выборки (default: DeltaSearchConfig())

    Returns:
        True если все выборочные f(x) конечны и |f(x) - L| < ε

    Examples:
        >>> delta_works_for_epsilon(lambda x: 2 * x, 1.0, 2.0, 0.5, 0.2)
        True
        >>> delta_works_for_epsilon(lambda x: 2 * x, 1.0, 2.0, 0.5, 0.5)
        False
    """
    if not math.isfinite(limit_value):
        return False

    cfg = config or DeltaSearchConfig()

    for x in _interior_samples(approach_point, delta, cfg.test_points):
        fx = safe_evaluate(fn, x)
        if not math.isfinite(fx) or abs(fx - limit_value) >= epsilon:
            return False

    return True


# =============================================================================
# ПОИСК δ
# =============================================================================


def find_delta_for_epsilon(
    fn: RealFunction,
    approach_point: float,
    limit_value: float,
    epsilon: float,
    max_delta: float = DEFAULT_MAX_DELTA,
    config: Optional[DeltaSearchConfig] = None,
) -> float | None:
    """
    Наибольшее δ из (0, max_delta), удовлетворяющее ε-δ условию.

    Args:
        fn: Функция одной вещественной переменной
        approach_point: Точка a
        limit_value: Предел L
        epsilon: Допуск ε по значению
        max_delta: Верхняя граница поиска (default: 1.0)
        config: Конфигурация поиска (default: DeltaSearchConfig())

    Returns:
        Найденное δ или None, если L не конечен или даже наименьший
        проверенный кандидат не подошёл

    Examples:
        >>> find_delta_for_epsilon(lambda x: x, 0.0, float("inf"), 0.1) is None
        True
    """
    if not math.isfinite(limit_value):
        logger.debug("No delta for non-finite limit value %s", limit_value)
        return None

    cfg = config or DeltaSearchConfig()

    low = 0.0
    high = max_delta
    working_delta: float | None = None

    for _ in range(cfg.max_iterations):
        mid = (low + high) / 2.0

        if delta_works_for_epsilon(fn, approach_point, limit_value, epsilon, mid, cfg):
            working_delta = mid
            low = mid
        else:
            high = mid

        if high - low < cfg.precision:
            break

    if working_delta is None:
        logger.debug(
            "No delta found for epsilon=%s at a=%s (L=%s)",
            epsilon,
            approach_point,
            limit_value,
        )

    return working_delta


def explore_epsilon_delta(
    fn: RealFunction,
    approach_point: float,
    limit_value: float,
    epsilon: float = DEFAULT_EPSILON,
    delta: float = DEFAULT_DELTA,
    max_delta: float = DEFAULT_MAX_DELTA,
    config: Optional[DeltaSearchConfig] = None,
) -> EpsilonDeltaOutcome:
    """
    Найденное δ для ε вместе с проверкой δ, выбранного вызывающей стороной.

    Args:
        fn: Функция одной вещественной переменной
        approach_point: Точка a
        limit_value: Предел L
        epsilon: Допуск ε (default: DEFAULT_EPSILON)
        delta: Выбранное δ (default: DEFAULT_DELTA)
        max_delta: Верхняя граница поиска
        config: Конфигурация поиска

    Returns:
        EpsilonDeltaOutcome
    """
    return EpsilonDeltaOutcome(
        epsilon=epsilon,
        delta=delta,
        found_delta=find_delta_for_epsilon(
            fn, approach_point, limit_value, epsilon, max_delta, config
        ),
        delta_is_valid=delta_works_for_epsilon(
            fn, approach_point, limit_value, epsilon, delta, config
        ),
    )
