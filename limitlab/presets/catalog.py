"""Catalog — реестр функций-примеров с показательным поведением пределов.

Реестр — простое отображение id → FunctionPreset, построенное один раз при
импорте. Ядро вычислений его не импортирует: оно получает только callable.

Функции возвращают NaN / ±inf в особой точке вместо исключения.
"""

import math
from types import MappingProxyType
from typing import Final, Mapping, Optional

from limitlab.core.domain.preset import DomainRange, FunctionPreset

# Аргументы ближе к особой точке считаются попаданием в неё
SINGULARITY_EPS: Final[float] = 1e-15


# =============================================================================
# ФУНКЦИИ
# =============================================================================


def _square(x: float) -> float:
    return x * x


def _rational_hole(x: float) -> float:
    if abs(x - 1.0) < SINGULARITY_EPS:
        return math.nan
    return (x * x - 1.0) / (x - 1.0)


def _floor(x: float) -> float:
    return float(math.floor(x))


def _reciprocal(x: float) -> float:
    if abs(x) < SINGULARITY_EPS:
        return math.inf if x > 0 else -math.inf
    return 1.0 / x


def _sine_over_x(x: float) -> float:
    if abs(x) < SINGULARITY_EPS:
        return math.nan
    return math.sin(x) / x


def _sign(x: float) -> float:
    if abs(x) < SINGULARITY_EPS:
        return math.nan
    return abs(x) / x


def _sine_of_reciprocal(x: float) -> float:
    if abs(x) < SINGULARITY_EPS:
        return math.nan
    return math.sin(1.0 / x)


def _piecewise(x: float) -> float:
    if x < 0:
        return x + 1.0
    if x > 0:
        return x * x
    return math.nan


# =============================================================================
# PRESETS
# =============================================================================


LIMIT_PRESETS: Final[tuple[FunctionPreset, ...]] = (
    FunctionPreset(
        id="polynomial",
        name="Polynomial",
        description="A simple continuous function where limits always exist",
        fn=_square,
        domain=DomainRange(min=-3.0, max=3.0),
        interesting_points=(0.0, 1.0, -1.0, 2.0),
        latex="f(x) = x^2",
        expected_behavior="Continuous everywhere - limit equals function value",
    ),
    FunctionPreset(
        id="rational",
        name="Rational (Removable)",
        description='Has a "hole" at x=1 where limit exists but function is undefined',
        fn=_rational_hole,
        domain=DomainRange(min=-2.0, max=4.0),
        interesting_points=(1.0, 0.0, 2.0),
        latex="f(x) = \\frac{x^2 - 1}{x - 1}",
        expected_behavior="Removable discontinuity at x=1: limit is 2 but f(1) undefined",
    ),
    FunctionPreset(
        id="step",
        name="Floor Function",
        description="Jumps at every integer - left and right limits differ",
        fn=_floor,
        domain=DomainRange(min=-2.0, max=4.0),
        interesting_points=(0.0, 1.0, 2.0, 3.0),
        latex="f(x) = \\lfloor x \\rfloor",
        expected_behavior="Jump discontinuity at integers: left limit ≠ right limit",
    ),
    FunctionPreset(
        id="reciprocal",
        name="Reciprocal",
        description="Vertical asymptote at x=0 - limit is infinite",
        fn=_reciprocal,
        domain=DomainRange(min=-3.0, max=3.0),
        interesting_points=(0.0, 1.0, -1.0),
        latex="f(x) = \\frac{1}{x}",
        expected_behavior="Infinite discontinuity at x=0: limit approaches ±∞",
    ),
    FunctionPreset(
        id="sine-over-x",
        name="Sine/x",
        description="Famous limit: approaches 1 as x→0 despite f(0) being undefined",
        fn=_sine_over_x,
        domain=DomainRange(min=-10.0, max=10.0),
        interesting_points=(0.0,),
        latex="f(x) = \\frac{\\sin(x)}{x}",
        expected_behavior="Removable discontinuity at x=0: limit is 1 (famous result)",
    ),
    FunctionPreset(
        id="absolute",
        name="Sign Function",
        description="Left limit is -1, right limit is +1 at x=0",
        fn=_sign,
        domain=DomainRange(min=-3.0, max=3.0),
        interesting_points=(0.0,),
        latex="f(x) = \\frac{|x|}{x}",
        expected_behavior="Jump discontinuity at x=0: left limit = -1, right limit = +1",
    ),
    FunctionPreset(
        id="oscillating",
        name="Oscillating",
        description="Oscillates infinitely fast near x=0 - limit does not exist",
        fn=_sine_of_reciprocal,
        domain=DomainRange(min=-2.0, max=2.0),
        interesting_points=(0.0,),
        latex="f(x) = \\sin\\left(\\frac{1}{x}\\right)",
        expected_behavior="Oscillating: limit does not exist at x=0",
    ),
    FunctionPreset(
        id="piecewise",
        name="Piecewise",
        description="Different formulas for different regions",
        fn=_piecewise,
        domain=DomainRange(min=-3.0, max=3.0),
        interesting_points=(0.0, -1.0, 1.0),
        latex="f(x) = \\begin{cases} x+1 & x < 0 \\\\ x^2 & x > 0 \\end{cases}",
        expected_behavior="Jump at x=0: left limit = 1, right limit = 0",
    ),
)

# Read-only индекс id → preset
PRESETS_BY_ID: Final[Mapping[str, FunctionPreset]] = MappingProxyType(
    {preset.id: preset for preset in LIMIT_PRESETS}
)


def get_limit_preset(preset_id: str) -> Optional[FunctionPreset]:
    """
    Preset по идентификатору.

    Examples:
        >>> get_limit_preset("polynomial").name
        'Polynomial'
        >>> get_limit_preset("nonexistent") is None
        True
    """
    return PRESETS_BY_ID.get(preset_id)
