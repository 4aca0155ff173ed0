"""
Sequence Generator — последовательности x → a с одной стороны

Генерирует конечную последовательность точек выборки, строго приближающихся
к точке a: расстояния 1, 0.1, 0.01, ... (геометрическое сжатие STEP_FACTOR).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. distance строго убывает по последовательности
2. NaN/±inf значения функции НЕ фильтруются
3. Исключения функции под тестом превращаются в NaN (safe_evaluate)
4. Нет побочных эффектов, результат детерминирован
"""

from typing import Final

from limitlab.core.domain.approach import ApproachDirection, ApproximationStep
from limitlab.core.math.numerical_safeguards import RealFunction, safe_evaluate

# =============================================================================
# ПАРАМЕТРЫ ПОСЛЕДОВАТЕЛЬНОСТИ
# =============================================================================

# Количество шагов аппроксимации (последнее расстояние 1e-9)
DEFAULT_APPROXIMATION_STEPS: Final[int] = 10

# Множитель сжатия расстояния на каждом шаге (в 10 раз ближе)
STEP_FACTOR: Final[float] = 0.1

# Начальное расстояние от точки приближения
INITIAL_DISTANCE: Final[float] = 1.0


# =============================================================================
# ЧИСЛЕННАЯ АППРОКСИМАЦИЯ
# =============================================================================


def numerical_limit_approximation(
    fn: RealFunction,
    approach_point: float,
    direction: ApproachDirection | str,
    steps: int = DEFAULT_APPROXIMATION_STEPS,
    step_factor: float = STEP_FACTOR,
) -> list[ApproximationStep]:
    """
    Последовательность значений функции при x → a с одной стороны.

    Каждый шаг вычисляет fn(a - distance) (слева) или fn(a + distance)
    (справа) и записывает (x, fx, distance). distance — номинальный шаг;
    |x - a| совпадает с ним с точностью до округления a ± distance.
    Последовательность обрывается, когда a ± distance == a (при |a| ≳ 1e8
    последние шаги меньше шага float), так что f(a) никогда не вычисляется.

    Args:
        fn: Функция одной вещественной переменной
        approach_point: Точка приближения a
        direction: LEFT или RIGHT
        steps: Количество шагов (default: 10)
        step_factor: Множитель сжатия расстояния, 0 < step_factor < 1

    Returns:
        Список ApproximationStep от дальнего к ближнему (не длиннее steps)

    Raises:
        ValueError: Если direction == BOTH или не является направлением

    Examples:
        >>> seq = numerical_limit_approximation(lambda x: x * x, 2.0, "right", steps=2)
        >>> [s.x for s in seq]
        [3.0, 2.1]
    """
    direction = ApproachDirection(direction)
    if direction is ApproachDirection.BOTH:
        raise ValueError("Sequence direction must be 'left' or 'right', got 'both'")

    sign = -1.0 if direction is ApproachDirection.LEFT else 1.0

    result: list[ApproximationStep] = []
    distance = INITIAL_DISTANCE

    for _ in range(steps):
        x = approach_point + sign * distance
        if x == approach_point:
            # distance меньше шага float вблизи a
            break
        result.append(
            ApproximationStep(x=x, fx=safe_evaluate(fn, x), distance=distance)
        )
        distance *= step_factor

    return result
