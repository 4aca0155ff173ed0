"""
limitlab — численное исследование пределов функции одной переменной.

Публичные операции ядра: evaluate_limit, evaluate_left_limit,
evaluate_right_limit, check_continuity, numerical_limit_approximation,
find_delta_for_epsilon, is_valid_approach_point.
"""

from limitlab.analysis import (
    check_continuity,
    delta_works_for_epsilon,
    evaluate_left_limit,
    evaluate_limit,
    evaluate_right_limit,
    explore_epsilon_delta,
    find_delta_for_epsilon,
    is_valid_approach_point,
)
from limitlab.core.domain import (
    ApproachDirection,
    ApproximationStep,
    ContinuityResult,
    DiscontinuityType,
    EpsilonDeltaOutcome,
    LimitResult,
    LimitType,
)
from limitlab.core.math import LIMIT_TOLERANCE, numerical_limit_approximation

__all__ = [
    "LIMIT_TOLERANCE",
    # Operations
    "check_continuity",
    "delta_works_for_epsilon",
    "evaluate_left_limit",
    "evaluate_limit",
    "evaluate_right_limit",
    "explore_epsilon_delta",
    "find_delta_for_epsilon",
    "is_valid_approach_point",
    "numerical_limit_approximation",
    # Value objects
    "ApproachDirection",
    "ApproximationStep",
    "ContinuityResult",
    "DiscontinuityType",
    "EpsilonDeltaOutcome",
    "LimitResult",
    "LimitType",
]
