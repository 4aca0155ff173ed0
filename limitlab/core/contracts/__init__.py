"""
Contract Validation Module

Модуль для валидации JSON контрактов результатов limitlab.
"""

from .validators import (
    ApproximationStepValidator,
    ContinuityResultValidator,
    ContractValidator,
    EpsilonDeltaOutcomeValidator,
    LimitResultValidator,
    SchemaLoader,
    validate_approximation_step,
    validate_continuity_result,
    validate_epsilon_delta_outcome,
    validate_limit_result,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ApproximationStepValidator",
    "LimitResultValidator",
    "ContinuityResultValidator",
    "EpsilonDeltaOutcomeValidator",
    # Functions
    "validate_approximation_step",
    "validate_limit_result",
    "validate_continuity_result",
    "validate_epsilon_delta_outcome",
]
