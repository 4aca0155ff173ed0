"""Analysis — вычисление пределов, классификация непрерывности и ε-δ поиск.

- Limit Evaluator: односторонние/двусторонние пределы и тип предела
- Continuity Classifier: none / removable / jump / infinite / oscillating
- Epsilon-Delta Solver: наибольшее δ для заданного ε
"""

from .continuity import check_continuity
from .epsilon_delta import (
    DEFAULT_DELTA,
    DEFAULT_EPSILON,
    DEFAULT_MAX_DELTA,
    DeltaSearchConfig,
    delta_works_for_epsilon,
    explore_epsilon_delta,
    find_delta_for_epsilon,
)
from .limits import (
    APPROACH_PROBE_OFFSET,
    classify_limit_type,
    evaluate_left_limit,
    evaluate_limit,
    evaluate_right_limit,
    is_valid_approach_point,
)

__all__ = [
    # Limit Evaluator
    "APPROACH_PROBE_OFFSET",
    "classify_limit_type",
    "evaluate_left_limit",
    "evaluate_limit",
    "evaluate_right_limit",
    "is_valid_approach_point",
    # Continuity Classifier
    "check_continuity",
    # Epsilon-Delta Solver
    "DEFAULT_DELTA",
    "DEFAULT_EPSILON",
    "DEFAULT_MAX_DELTA",
    "DeltaSearchConfig",
    "delta_works_for_epsilon",
    "explore_epsilon_delta",
    "find_delta_for_epsilon",
]
