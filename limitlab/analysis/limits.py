"""Limit Evaluator — односторонние и двусторонние пределы

Оркестрирует генерацию последовательности и детекцию сходимости:
1. Левый предел: x → a⁻ (a - 1, a - 0.1, ..., a - 1e-9)
2. Правый предел: x → a⁺
3. Двусторонний: обе стороны независимо + классификация типа предела

Классификация limit_type (обе стороны):
- обе стороны не обнаружены (None) → DOES_NOT_EXIST
- хотя бы одна сторона бесконечна → INFINITE
- обе конечны и равны в пределах толерантности → FINITE
- обе конечны и не равны, или одна None → DOES_NOT_EXIST
"""

import logging
from typing import Final

from limitlab.core.domain.approach import ApproachDirection
from limitlab.core.domain.limit_result import LimitResult, LimitType
from limitlab.core.math.convergence import detect_limit
from limitlab.core.math.numerical_safeguards import (
    LIMIT_TOLERANCE,
    RealFunction,
    is_finite_limit,
    is_indeterminate,
    is_infinite_limit,
    limits_are_equal,
    safe_evaluate,
)
from limitlab.core.math.sequence import numerical_limit_approximation

logger = logging.getLogger(__name__)

# Смещение пробных точек для is_valid_approach_point
APPROACH_PROBE_OFFSET: Final[float] = 1e-3


# =============================================================================
# ОДНОСТОРОННИЕ ПРЕДЕЛЫ
# =============================================================================


def evaluate_left_limit(
    fn: RealFunction,
    approach_point: float,
    tolerance: float = LIMIT_TOLERANCE,
) -> float | None:
    """Левый предел fn при x → a⁻: конечное значение, ±inf или None."""
    sequence = numerical_limit_approximation(fn, approach_point, ApproachDirection.LEFT)
    return detect_limit(sequence, tolerance)


def evaluate_right_limit(
    fn: RealFunction,
    approach_point: float,
    tolerance: float = LIMIT_TOLERANCE,
) -> float | None:
    """Правый предел fn при x → a⁺: конечное значение, ±inf или None."""
    sequence = numerical_limit_approximation(fn, approach_point, ApproachDirection.RIGHT)
    return detect_limit(sequence, tolerance)


# =============================================================================
# КЛАССИФИКАЦИЯ
# =============================================================================


def _classify_one_sided(limit: float | None) -> LimitType:
    if is_infinite_limit(limit):
        return LimitType.INFINITE
    if is_finite_limit(limit):
        return LimitType.FINITE
    return LimitType.DOES_NOT_EXIST


def classify_limit_type(
    left: float | None,
    right: float | None,
    tolerance: float = LIMIT_TOLERANCE,
) -> LimitType:
    """
    Тип двустороннего предела по односторонним пределам.

    Args:
        left: Левый предел (или None)
        right: Правый предел (или None)
        tolerance: Толерантность равенства пределов

    Returns:
        LimitType

    Examples:
        >>> classify_limit_type(None, None)
        <LimitType.DOES_NOT_EXIST: 'does-not-exist'>
        >>> classify_limit_type(float("-inf"), float("inf"))
        <LimitType.INFINITE: 'infinite'>
        >>> classify_limit_type(2.0, 2.0)
        <LimitType.FINITE: 'finite'>
    """
    if left is None and right is None:
        return LimitType.DOES_NOT_EXIST

    if is_infinite_limit(left) or is_infinite_limit(right):
        return LimitType.INFINITE

    if limits_are_equal(left, right, tolerance):
        return LimitType.FINITE

    return LimitType.DOES_NOT_EXIST


# =============================================================================
# ПРЕДЕЛ
# =============================================================================


def evaluate_limit(
    fn: RealFunction,
    approach_point: float,
    direction: ApproachDirection | str = ApproachDirection.BOTH,
    tolerance: float = LIMIT_TOLERANCE,
) -> LimitResult:
    """
    Численное вычисление предела fn в точке approach_point.

    Для LEFT/RIGHT заполняется только соответствующая сторона, value
    повторяет её результат. Для BOTH предел существует, только если обе
    стороны конечны и равны в пределах толерантности; value — середина
    между левым и правым пределом.

    Args:
        fn: Функция одной вещественной переменной
        approach_point: Точка приближения a
        direction: LEFT, RIGHT или BOTH (default: BOTH)
        tolerance: Толерантность сходимости и равенства пределов

    Returns:
        LimitResult
    """
    direction = ApproachDirection(direction)

    if direction is ApproachDirection.LEFT:
        left_limit = evaluate_left_limit(fn, approach_point, tolerance)
        return LimitResult(
            exists=is_finite_limit(left_limit),
            value=left_limit,
            left_limit=left_limit,
            right_limit=None,
            limit_type=_classify_one_sided(left_limit),
        )

    if direction is ApproachDirection.RIGHT:
        right_limit = evaluate_right_limit(fn, approach_point, tolerance)
        return LimitResult(
            exists=is_finite_limit(right_limit),
            value=right_limit,
            left_limit=None,
            right_limit=right_limit,
            limit_type=_classify_one_sided(right_limit),
        )

    left_limit = evaluate_left_limit(fn, approach_point, tolerance)
    right_limit = evaluate_right_limit(fn, approach_point, tolerance)

    exists = limits_are_equal(left_limit, right_limit, tolerance)
    limit_type = classify_limit_type(left_limit, right_limit, tolerance)

    logger.debug(
        "Limit at %r: left=%s right=%s type=%s",
        approach_point,
        left_limit,
        right_limit,
        limit_type.value,
    )

    # value: середина между левым и правым пределом
    value = left_limit + (right_limit - left_limit) / 2.0 if exists else None

    return LimitResult(
        exists=exists,
        value=value,
        left_limit=left_limit,
        right_limit=right_limit,
        limit_type=limit_type,
    )


# =============================================================================
# ТОЧКА ПРИБЛИЖЕНИЯ
# =============================================================================


def is_valid_approach_point(fn: RealFunction, point: float) -> bool:
    """
    Имеет ли смысл исследовать предел в точке.

    Функция вычисляется в point ± APPROACH_PROBE_OFFSET; точка валидна, если
    хотя бы с одной стороны значение определено (конечное или ±inf, не NaN).

    Examples:
        >>> is_valid_approach_point(lambda x: 1 / x, 0.0)
        True
        >>> is_valid_approach_point(lambda x: float("nan"), 0.0)
        False
    """
    near_left = safe_evaluate(fn, point - APPROACH_PROBE_OFFSET)
    near_right = safe_evaluate(fn, point + APPROACH_PROBE_OFFSET)
    return not is_indeterminate(near_left) or not is_indeterminate(near_right)
