"""
Тесты для Limit Evaluator

Покрытие:
- Полиномы: предел равен значению функции
- Устранимый разрыв: (x²-1)/(x-1), sin(x)/x
- Скачок: floor
- Вертикальная асимптота: 1/x
- Осцилляция: sin(1/x)
- Односторонние запросы (LEFT/RIGHT)
- Классификация limit_type
- is_valid_approach_point
- Детерминизм
"""

import math

import pytest

from limitlab.analysis.limits import (
    APPROACH_PROBE_OFFSET,
    classify_limit_type,
    evaluate_left_limit,
    evaluate_limit,
    evaluate_right_limit,
    is_valid_approach_point,
)
from limitlab.core.domain import ApproachDirection, LimitType


# =============================================================================
# ФУНКЦИИ
# =============================================================================


def _rational(x: float) -> float:
    return (x * x - 1) / (x - 1)


def _sine_over_x(x: float) -> float:
    return math.sin(x) / x


def _reciprocal(x: float) -> float:
    return 1 / x


def _sine_of_reciprocal(x: float) -> float:
    return math.sin(1 / x)


POLYNOMIALS = [
    pytest.param(lambda x: x * x, id="x^2"),
    pytest.param(lambda x: x**3 - 2 * x + 1, id="x^3-2x+1"),
    pytest.param(lambda x: 3 * x**4 - x + 7, id="3x^4-x+7"),
    pytest.param(lambda x: 5.0, id="constant"),
    pytest.param(lambda x: -0.5 * x + 2, id="linear"),
]


# =============================================================================
# ТЕСТЫ: Полиномы
# =============================================================================


class TestPolynomialLimits:
    """Для полиномов предел равен f(a)."""

    @pytest.mark.parametrize("fn", POLYNOMIALS)
    @pytest.mark.parametrize("a", [-1.5, 0.0, 0.5, 2.0])
    def test_limit_equals_function_value(self, fn, a):
        """lim f(x) = f(a) в пределах 1e-4."""
        result = evaluate_limit(fn, a)
        assert result.exists is True
        assert result.value == pytest.approx(fn(a), abs=1e-4)
        assert result.limit_type is LimitType.FINITE

    def test_one_sided_limits_equal(self):
        """Левый и правый пределы x² в 2 равны 4."""
        result = evaluate_limit(lambda x: x * x, 2.0)
        assert result.left_limit == pytest.approx(4.0, abs=1e-6)
        assert result.right_limit == pytest.approx(4.0, abs=1e-6)
        assert result.value == pytest.approx(4.0, abs=1e-6)

    @pytest.mark.parametrize(
        "fn, a",
        [
            pytest.param(lambda x: x**4, 40.0, id="x^4@40"),
            pytest.param(lambda x: x**3, 200.0, id="x^3@200"),
            pytest.param(lambda x: x * x, 1000.0, id="x^2@1000"),
        ],
    )
    def test_high_slope_polynomials(self, fn, a):
        """Большие |f'(a)| и |f(a)|: предел по-прежнему равен f(a)."""
        result = evaluate_limit(fn, a)
        assert result.exists is True
        assert result.value == pytest.approx(fn(a), abs=1e-4)
        assert result.limit_type is LimitType.FINITE

    def test_value_is_midpoint_of_sides(self):
        """value лежит между левым и правым пределом."""
        result = evaluate_limit(lambda x: 3 * x, 1.0)
        assert result.left_limit < result.value < result.right_limit
        assert result.value == pytest.approx(3.0, abs=1e-12)


# =============================================================================
# ТЕСТЫ: Устранимый разрыв
# =============================================================================


class TestRemovableLimits:
    """Предел существует, хотя f(a) не определено."""

    def test_rational_hole(self):
        """(x²-1)/(x-1) → 2 при x → 1."""
        result = evaluate_limit(_rational, 1.0)
        assert result.exists is True
        assert result.value == pytest.approx(2.0, abs=1e-4)
        assert result.limit_type is LimitType.FINITE

    def test_sine_over_x(self):
        """sin(x)/x → 1 при x → 0."""
        result = evaluate_limit(_sine_over_x, 0.0)
        assert result.exists is True
        assert result.value == pytest.approx(1.0, abs=1e-4)


# =============================================================================
# ТЕСТЫ: Скачок
# =============================================================================


class TestJumpLimits:
    """Односторонние пределы конечны, но различны."""

    def test_floor_left_limit(self):
        """Левый предел floor в 2 равен 1."""
        assert evaluate_left_limit(math.floor, 2.0) == pytest.approx(1.0, abs=1e-4)

    def test_floor_right_limit(self):
        """Правый предел floor в 2 равен 2."""
        assert evaluate_right_limit(math.floor, 2.0) == pytest.approx(2.0, abs=1e-4)

    def test_floor_limit_does_not_exist(self):
        """Двусторонний предел floor в целой точке не существует."""
        result = evaluate_limit(math.floor, 2.0)
        assert result.exists is False
        assert result.value is None
        assert result.limit_type is LimitType.DOES_NOT_EXIST

    def test_floor_between_integers(self):
        """Между целыми предел floor существует."""
        result = evaluate_limit(math.floor, 2.5)
        assert result.exists is True
        assert result.value == 2.0


# =============================================================================
# ТЕСТЫ: Вертикальная асимптота
# =============================================================================


class TestInfiniteLimits:
    """1/x при x → 0."""

    def test_one_sided_infinities(self):
        """Слева -inf, справа +inf."""
        assert evaluate_left_limit(_reciprocal, 0.0) == -math.inf
        assert evaluate_right_limit(_reciprocal, 0.0) == math.inf

    def test_two_sided_infinite(self):
        """Тип предела INFINITE, предел не существует."""
        result = evaluate_limit(_reciprocal, 0.0)
        assert result.limit_type is LimitType.INFINITE
        assert result.exists is False
        assert result.value is None
        assert result.left_limit == -math.inf
        assert result.right_limit == math.inf

    def test_same_sign_infinity(self):
        """1/x² → +inf с обеих сторон."""
        result = evaluate_limit(lambda x: 1 / (x * x), 0.0)
        assert result.left_limit == math.inf
        assert result.right_limit == math.inf
        assert result.limit_type is LimitType.INFINITE
        assert result.exists is False

    def test_overflowing_function(self):
        """exp(1/x) справа от 0 растёт до переполнения → +inf."""
        assert evaluate_right_limit(lambda x: math.exp(1 / x), 0.0) == math.inf
        assert evaluate_left_limit(lambda x: math.exp(1 / x), 0.0) == pytest.approx(0.0)


# =============================================================================
# ТЕСТЫ: Осцилляция
# =============================================================================


class TestOscillatingLimits:
    """sin(1/x) при x → 0."""

    def test_no_one_sided_limits(self):
        """Ни один односторонний предел не обнаружен."""
        assert evaluate_left_limit(_sine_of_reciprocal, 0.0) is None
        assert evaluate_right_limit(_sine_of_reciprocal, 0.0) is None

    def test_does_not_exist(self):
        """Тип предела DOES_NOT_EXIST."""
        result = evaluate_limit(_sine_of_reciprocal, 0.0)
        assert result.exists is False
        assert result.value is None
        assert result.limit_type is LimitType.DOES_NOT_EXIST


# =============================================================================
# ТЕСТЫ: Односторонние запросы
# =============================================================================


class TestDirectionalQueries:
    """direction = LEFT / RIGHT."""

    def test_left_only(self):
        """LEFT заполняет только левую сторону."""
        result = evaluate_limit(math.floor, 2.0, ApproachDirection.LEFT)
        assert result.exists is True
        assert result.value == pytest.approx(1.0)
        assert result.left_limit == pytest.approx(1.0)
        assert result.right_limit is None
        assert result.limit_type is LimitType.FINITE

    def test_right_only(self):
        """RIGHT заполняет только правую сторону."""
        result = evaluate_limit(math.floor, 2.0, "right")
        assert result.value == pytest.approx(2.0)
        assert result.left_limit is None
        assert result.right_limit == pytest.approx(2.0)

    def test_one_sided_infinite(self):
        """Бесконечный односторонний предел: value повторяет ±inf."""
        result = evaluate_limit(_reciprocal, 0.0, ApproachDirection.LEFT)
        assert result.exists is False
        assert result.value == -math.inf
        assert result.limit_type is LimitType.INFINITE

    def test_one_sided_undetected(self):
        """Необнаруженный односторонний предел."""
        result = evaluate_limit(_sine_of_reciprocal, 0.0, ApproachDirection.RIGHT)
        assert result.exists is False
        assert result.value is None
        assert result.limit_type is LimitType.DOES_NOT_EXIST


# =============================================================================
# ТЕСТЫ: Классификация limit_type
# =============================================================================


class TestClassifyLimitType:
    """Правила classify_limit_type."""

    def test_both_undetected(self):
        assert classify_limit_type(None, None) is LimitType.DOES_NOT_EXIST

    def test_either_infinite(self):
        assert classify_limit_type(math.inf, 1.0) is LimitType.INFINITE
        assert classify_limit_type(1.0, -math.inf) is LimitType.INFINITE
        assert classify_limit_type(None, math.inf) is LimitType.INFINITE

    def test_equal_finite(self):
        assert classify_limit_type(2.0, 2.0 + 1e-9) is LimitType.FINITE

    def test_unequal_finite(self):
        assert classify_limit_type(1.0, 2.0) is LimitType.DOES_NOT_EXIST

    def test_one_side_missing(self):
        assert classify_limit_type(None, 2.0) is LimitType.DOES_NOT_EXIST
        assert classify_limit_type(2.0, None) is LimitType.DOES_NOT_EXIST


# =============================================================================
# ТЕСТЫ: Валидность точки приближения
# =============================================================================


class TestIsValidApproachPoint:
    """Пробные точки point ± APPROACH_PROBE_OFFSET."""

    def test_probe_offset(self):
        assert APPROACH_PROBE_OFFSET == 1e-3

    def test_regular_point(self):
        assert is_valid_approach_point(lambda x: x * x, 1.0)

    def test_asymptote_is_valid(self):
        """Точка асимптоты валидна: рядом значения определены."""
        assert is_valid_approach_point(_reciprocal, 0.0)

    def test_infinite_values_count_as_defined(self):
        """±inf рядом с точкой — определённые значения."""
        assert is_valid_approach_point(lambda x: math.inf, 0.0)

    def test_one_side_defined(self):
        """Достаточно одной определённой стороны."""
        assert is_valid_approach_point(math.sqrt, 0.0)

    def test_undefined_everywhere(self):
        """NaN с обеих сторон — точка невалидна."""
        assert not is_valid_approach_point(lambda x: math.nan, 0.0)
        assert not is_valid_approach_point(math.sqrt, -5.0)


# =============================================================================
# ТЕСТЫ: Детерминизм
# =============================================================================


@pytest.mark.parametrize(
    "fn, a",
    [
        (lambda x: x * x, 2.0),
        (_rational, 1.0),
        (math.floor, 2.0),
        (_reciprocal, 0.0),
        (_sine_of_reciprocal, 0.0),
    ],
)
def test_evaluate_limit_is_idempotent(fn, a):
    """Повторный вызов даёт идентичный результат."""
    assert evaluate_limit(fn, a) == evaluate_limit(fn, a)


# =============================================================================
# ТЕСТЫ: Нечисловые результаты функции
# =============================================================================


class TestNonRealResults:
    """complex/None вместо float трактуются как "не определено"."""

    def test_square_root_by_power(self):
        """x ** 0.5 слева от 0 возвращает complex: левый предел не обнаружен."""
        result = evaluate_limit(lambda x: x**0.5, 0.0)
        assert result.left_limit is None
        assert result.right_limit == pytest.approx(0.0, abs=1e-4)
        assert result.exists is False
        assert result.limit_type is LimitType.DOES_NOT_EXIST

    def test_none_on_one_side(self):
        """Функция возвращает None слева."""
        fn = lambda x: None if x < 0 else x  # noqa: E731
        assert evaluate_left_limit(fn, 0.0) is None
        assert evaluate_right_limit(fn, 0.0) == pytest.approx(0.0, abs=1e-8)

    def test_approach_point_with_complex_side(self):
        assert is_valid_approach_point(lambda x: x**0.5, 0.0) is True
        assert is_valid_approach_point(lambda x: x**0.5, -5.0) is False
