"""
Domain models and value objects.

Contains immutable results of limit evaluation: approximation steps,
limit/continuity results, epsilon-delta outcomes and preset descriptors.
"""

from limitlab.core.domain.approach import ApproachDirection, ApproximationStep
from limitlab.core.domain.continuity import ContinuityResult, DiscontinuityType
from limitlab.core.domain.epsilon_delta import EpsilonDeltaOutcome
from limitlab.core.domain.limit_result import LimitResult, LimitType
from limitlab.core.domain.preset import DomainRange, FunctionPreset

__all__ = [
    # Approach
    "ApproachDirection",
    "ApproximationStep",
    # Limit result
    "LimitResult",
    "LimitType",
    # Continuity
    "ContinuityResult",
    "DiscontinuityType",
    # Epsilon-delta
    "EpsilonDeltaOutcome",
    # Presets
    "DomainRange",
    "FunctionPreset",
]
