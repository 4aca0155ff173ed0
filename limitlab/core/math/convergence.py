"""
Convergence Detector — предел последовательности значений функции

Превращает последовательность ApproximationStep в одно значение предела:
- конечное число (последовательность сходится)
- +inf / -inf (вертикальная асимптота)
- None (предел не обнаружен: осцилляция, разрыв, недостаток данных)

АЛГОРИТМ:
1. Дивергенция: среди всех конечных значений (>= 3) модуль растёт более
   чем в DIVERGENCE_GROWTH_FACTOR раз на каждом шаге и последний модуль
   > DIVERGENCE_MAGNITUDE, знак постоянный → ±inf
2. Окно из CONVERGENCE_WINDOW последних значений (ближайших к a):
   - +inf в окне → +inf, -inf в окне → -inf
   - меньше двух конечных значений → None
3. Сходимость по разностям соседних конечных значений (пороги умножаются
   на max(1, |последнее значение|)):
   - последняя разность < tolerance → сходится
   - разности строго убывают и последняя < CONVERGENCE_SECONDARY_THRESHOLD
     → сходится
4. Fallback: все значения окна в пределах tolerance × 100 (с тем же
   масштабом) от последнего
   → сходится (медленная, но стабильная сходимость)
5. Иначе → None

Эвристика эмпирическая: это приближение, а не доказательство сходимости.
"""

import logging
import math
from typing import Final, Sequence

from limitlab.core.domain.approach import ApproximationStep
from limitlab.core.math.numerical_safeguards import (
    CONVERGENCE_SECONDARY_THRESHOLD,
    LIMIT_TOLERANCE,
    RELAXED_TOLERANCE_MULT,
    is_close,
)

logger = logging.getLogger(__name__)

# =============================================================================
# ПАРАМЕТРЫ ДЕТЕКЦИИ
# =============================================================================

# Количество последних значений, по которым решается сходимость
CONVERGENCE_WINDOW: Final[int] = 3

# Минимальный рост модуля между соседними значениями для дивергенции
DIVERGENCE_GROWTH_FACTOR: Final[float] = 5.0

# Модуль последнего значения, начиная с которого рост считается дивергенцией
DIVERGENCE_MAGNITUDE: Final[float] = 1e6

# Минимальное количество конечных значений для проверки дивергенции
DIVERGENCE_MIN_SAMPLES: Final[int] = 3


# =============================================================================
# ДИВЕРГЕНЦИЯ
# =============================================================================


def detect_divergence(values: Sequence[float]) -> float | None:
    """
    Детекция неограниченного роста значений одного знака.

    Args:
        values: Значения функции от дальнего к ближнему

    Returns:
        +inf / -inf при дивергенции, None иначе

    Examples:
        >>> detect_divergence([1.0, 10.0, 100.0, 1e3, 1e4, 1e5, 1e6, 1e7])
        inf
        >>> detect_divergence([-1.0, -10.0, -100.0, -1e7])
        -inf
        >>> detect_divergence([1.0, 0.5, 0.25]) is None
        True
    """
    finite = [v for v in values if math.isfinite(v)]
    if len(finite) < DIVERGENCE_MIN_SAMPLES:
        return None

    magnitudes = [abs(v) for v in finite]
    growing = all(
        later > earlier * DIVERGENCE_GROWTH_FACTOR
        for earlier, later in zip(magnitudes, magnitudes[1:])
    )
    if not growing or magnitudes[-1] <= DIVERGENCE_MAGNITUDE:
        return None

    if all(v > 0 for v in finite):
        return math.inf
    if all(v < 0 for v in finite):
        return -math.inf

    # Рост модуля со сменой знака (например 1/x·(-1)^n): не асимптота одного знака
    return None


# =============================================================================
# СХОДИМОСТЬ
# =============================================================================


def _differences_strictly_decreasing(diffs: Sequence[float]) -> bool:
    if len(diffs) < 2:
        return False
    return all(later < earlier for earlier, later in zip(diffs, diffs[1:]))


def detect_limit(
    sequence: Sequence[ApproximationStep],
    tolerance: float = LIMIT_TOLERANCE,
) -> float | None:
    """
    Предел последовательности значений функции.

    Args:
        sequence: Шаги аппроксимации от дальнего к ближнему
        tolerance: Абсолютная толерантность сходимости

    Returns:
        Конечное значение (последнее конечное значение окна), +inf, -inf
        или None если предел не обнаружен
    """
    values = [step.fx for step in sequence]

    diverging = detect_divergence(values)
    if diverging is not None:
        logger.debug("Sequence diverges to %s", diverging)
        return diverging

    window = values[-CONVERGENCE_WINDOW:]

    # Явное ±inf у точки означает асимптоту
    if any(v == math.inf for v in window):
        return math.inf
    if any(v == -math.inf for v in window):
        return -math.inf

    finite = [v for v in window if math.isfinite(v)]
    if len(finite) < 2:
        logger.debug("Not enough finite samples near the point: %d", len(finite))
        return None

    last_value = finite[-1]
    # Пороги масштабируются на модуль значения: для |f| <= 1 они абсолютные
    scale = max(1.0, abs(last_value))
    diffs = [abs(later - earlier) for earlier, later in zip(finite, finite[1:])]
    last_diff = diffs[-1]

    if last_diff < tolerance * scale:
        return last_value

    if (
        _differences_strictly_decreasing(diffs)
        and last_diff < CONVERGENCE_SECONDARY_THRESHOLD * scale
    ):
        return last_value

    relaxed = tolerance * RELAXED_TOLERANCE_MULT * scale
    if all(is_close(v, last_value, relaxed) for v in finite):
        return last_value

    logger.debug("No limit detected: last differences %s", diffs)
    return None
