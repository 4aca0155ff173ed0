"""Continuity Classifier — непрерывность и тип разрыва в точке

Функция непрерывна в точке a, если:
1. f(a) определено
2. lim(x→a) f(x) существует
3. lim(x→a) f(x) = f(a)

Порядок проверок (decision list, первое совпадение выигрывает):
1. f(a) конечно, предел существует и равен f(a) (tolerance × 100,
   абсолютно или относительно) → NONE
2. Предел существует, но f(a) не определено или не равно пределу → REMOVABLE
3. Оба односторонних предела конечны и отличаются >= tolerance → JUMP
4. Хотя бы один односторонний предел бесконечен → INFINITE
5. Иначе → OSCILLATING

Порядок важен: случай 2 проверяется до JUMP/INFINITE, т.к. устранимый
разрыв сосуществует с равными конечными односторонними пределами.
"""

from limitlab.analysis.limits import evaluate_limit
from limitlab.core.domain.approach import ApproachDirection
from limitlab.core.domain.continuity import ContinuityResult, DiscontinuityType
from limitlab.core.math.numerical_safeguards import (
    LIMIT_TOLERANCE,
    RELAXED_TOLERANCE_MULT,
    RealFunction,
    format_number,
    is_close_scaled,
    is_finite_limit,
    is_infinite_limit,
    is_valid_float,
    safe_evaluate,
)


def check_continuity(
    fn: RealFunction,
    point: float,
    tolerance: float = LIMIT_TOLERANCE,
) -> ContinuityResult:
    """
    Классификация непрерывности fn в точке point.

    Args:
        fn: Функция одной вещественной переменной
        point: Исследуемая точка
        tolerance: Толерантность сходимости и сравнений

    Returns:
        ContinuityResult (новый объект при каждом вызове)

    Examples:
        >>> check_continuity(lambda x: x * x, 2.0).discontinuity_type
        <DiscontinuityType.NONE: 'none'>
    """
    function_value = safe_evaluate(fn, point)
    function_defined = is_valid_float(function_value)

    limit = evaluate_limit(fn, point, ApproachDirection.BOTH, tolerance)
    left, right = limit.left_limit, limit.right_limit

    # Case 1: непрерывность
    if (
        function_defined
        and limit.exists
        and is_close_scaled(
            function_value, limit.value, tolerance * RELAXED_TOLERANCE_MULT
        )
    ):
        return ContinuityResult(
            is_continuous=True,
            discontinuity_type=DiscontinuityType.NONE,
            description="Function is continuous at this point",
        )

    # Case 2: устранимый разрыв
    if limit.exists:
        actual = (
            f"f({format_number(point)}) = {format_number(function_value)}"
            if function_defined
            else f"f({format_number(point)}) is undefined"
        )
        return ContinuityResult(
            is_continuous=False,
            discontinuity_type=DiscontinuityType.REMOVABLE,
            description=(
                f"Removable discontinuity: limit is {format_number(limit.value)} "
                f"but {actual}"
            ),
        )

    # Case 3: скачок
    if (
        is_finite_limit(left)
        and is_finite_limit(right)
        and abs(left - right) >= tolerance
    ):
        return ContinuityResult(
            is_continuous=False,
            discontinuity_type=DiscontinuityType.JUMP,
            description=(
                f"Jump discontinuity: left limit = {format_number(left)}, "
                f"right limit = {format_number(right)}"
            ),
        )

    # Case 4: бесконечный разрыв
    if is_infinite_limit(left) or is_infinite_limit(right):
        return ContinuityResult(
            is_continuous=False,
            discontinuity_type=DiscontinuityType.INFINITE,
            description="Infinite discontinuity: function approaches ±∞",
        )

    # Case 5: осцилляция
    return ContinuityResult(
        is_continuous=False,
        discontinuity_type=DiscontinuityType.OSCILLATING,
        description="Oscillating discontinuity: limit does not exist due to oscillation",
    )
