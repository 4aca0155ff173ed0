"""
Core math modules для limitlab

Численные примитивы: безопасная выборка, генерация последовательностей
и детекция сходимости.
"""

# Numerical Safeguards
from limitlab.core.math.numerical_safeguards import (
    # Epsilon constants
    COINCIDENCE_EPS,
    CONVERGENCE_SECONDARY_THRESHOLD,
    LIMIT_EQUALITY_TOLERANCE_MULT,
    LIMIT_TOLERANCE,
    RELAXED_TOLERANCE_MULT,
    # Types
    RealFunction,
    # Safe sampling
    safe_evaluate,
    # NaN/Inf classification
    is_finite_limit,
    is_indeterminate,
    is_infinite_limit,
    is_valid_float,
    # Epsilon comparisons
    is_close,
    is_close_scaled,
    limits_are_equal,
    # Formatting
    format_number,
)

# Sequence Generator
from limitlab.core.math.sequence import (
    DEFAULT_APPROXIMATION_STEPS,
    INITIAL_DISTANCE,
    STEP_FACTOR,
    numerical_limit_approximation,
)

# Convergence Detector
from limitlab.core.math.convergence import (
    CONVERGENCE_WINDOW,
    DIVERGENCE_GROWTH_FACTOR,
    DIVERGENCE_MAGNITUDE,
    DIVERGENCE_MIN_SAMPLES,
    detect_divergence,
    detect_limit,
)

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "COINCIDENCE_EPS",
    "CONVERGENCE_SECONDARY_THRESHOLD",
    "LIMIT_EQUALITY_TOLERANCE_MULT",
    "LIMIT_TOLERANCE",
    "RELAXED_TOLERANCE_MULT",
    # Numerical Safeguards — Types
    "RealFunction",
    # Numerical Safeguards — Safe sampling
    "safe_evaluate",
    # Numerical Safeguards — NaN/Inf classification
    "is_finite_limit",
    "is_indeterminate",
    "is_infinite_limit",
    "is_valid_float",
    # Numerical Safeguards — Epsilon comparisons
    "is_close",
    "is_close_scaled",
    "limits_are_equal",
    # Numerical Safeguards — Formatting
    "format_number",
    # Sequence Generator
    "DEFAULT_APPROXIMATION_STEPS",
    "INITIAL_DISTANCE",
    "STEP_FACTOR",
    "numerical_limit_approximation",
    # Convergence Detector
    "CONVERGENCE_WINDOW",
    "DIVERGENCE_GROWTH_FACTOR",
    "DIVERGENCE_MAGNITUDE",
    "DIVERGENCE_MIN_SAMPLES",
    "detect_divergence",
    "detect_limit",
]
