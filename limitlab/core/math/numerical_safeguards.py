"""
Numerical Safeguards — Tolerances & Safe Sampling Primitives

Модуль обеспечивает численную устойчивость всех вычислений пределов:
- Epsilon-параметры сходимости, сравнения и ε-δ поиска
- Безопасная выборка функции: исключения → NaN (функция считается тотальной)
- NaN/Inf классификация значений без их санитизации
- Epsilon-сравнения float с учётом машинной точности
- Форматирование чисел для текстовых описаний результатов

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Вызов функции под тестом никогда не пробрасывает исключение наружу
2. NaN/Inf ПРОПАГИРУЮТ без изменений (интерпретируются выше по цепочке)
3. Float сравнения всегда учитывают толерантность
4. Все операции детерминированы и воспроизводимы
"""

import logging
import math
from typing import Callable, Final

logger = logging.getLogger(__name__)

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Толерантность сходимости по умолчанию
# Используется в детекции сходимости и сравнении односторонних пределов
LIMIT_TOLERANCE: Final[float] = 1e-8

# Вторичный (ослабленный) порог сходимости
# Применяется, если разности последовательности строго убывают
CONVERGENCE_SECONDARY_THRESHOLD: Final[float] = 1e-3

# Множитель ослабленной толерантности (tolerance × 100)
# Fallback "все значения близки" и сравнение f(a) с пределом
RELAXED_TOLERANCE_MULT: Final[float] = 100.0

# Множитель толерантности равенства односторонних пределов (tolerance × 1000)
# Абсолютное сравнение около нуля, относительное для больших значений
LIMIT_EQUALITY_TOLERANCE_MULT: Final[float] = 1000.0

# Выборки ближе к точке приближения считаются совпадающими с ней
# Масштабируется на max(1, |a|)
COINCIDENCE_EPS: Final[float] = 1e-15

# Функция, которую можно вызвать на точке выборки
RealFunction = Callable[[float], float]


# =============================================================================
# БЕЗОПАСНАЯ ВЫБОРКА
# =============================================================================


def safe_evaluate(fn: RealFunction, x: float) -> float:
    """
    Безопасное вычисление fn(x) на границе выборки.

    Функция под тестом — чёрный ящик: может делить на ноль, выходить за
    область определения math-функций или переполняться. Такие исключения
    означают "функция не определена в этой точке" и превращаются в NaN.
    Так же трактуется результат, не приводимый к float: x ** 0.5 при x < 0
    возвращает complex, функция может вернуть None.

    NaN/Inf, возвращённые самой функцией, НЕ санитизируются — они
    передаются дальше без изменений.

    Args:
        fn: Функция одной вещественной переменной
        x: Точка выборки

    Returns:
        float(fn(x)) или NaN, если вычисление завершилось исключением

    Examples:
        >>> safe_evaluate(lambda x: x * x, 3.0)
        9.0
        >>> safe_evaluate(lambda x: 1 / x, 0.0)
        nan
        >>> safe_evaluate(lambda x: float("inf"), 0.0)
        inf
    """
    try:
        return float(fn(x))
    except (ArithmeticError, ValueError, TypeError) as e:
        # ZeroDivisionError, OverflowError, math domain error;
        # TypeError: complex или None вместо вещественного результата
        logger.debug("Function undefined at x=%r: %s", x, e)
        return math.nan


# =============================================================================
# NaN/Inf КЛАССИФИКАЦИЯ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное, False если NaN или Inf
    """
    return math.isfinite(value)


def is_indeterminate(value: float) -> bool:
    """Значение не определено (NaN). Бесконечности определены."""
    return math.isnan(value)


def is_infinite_limit(value: float | None) -> bool:
    """Предел обнаружен и бесконечен (+inf или -inf)."""
    return value is not None and math.isinf(value)


def is_finite_limit(value: float | None) -> bool:
    """Предел обнаружен и конечен."""
    return value is not None and math.isfinite(value)


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_close(a: float, b: float, tol: float) -> bool:
    """
    Абсолютное сравнение двух float: abs(a - b) < tol.

    Args:
        a: Первое значение
        b: Второе значение
        tol: Абсолютная толерантность (строгое неравенство)

    Returns:
        True если значения отличаются меньше чем на tol

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10, 1e-8)
        True
        >>> is_close(1.0, 1.1, 1e-8)
        False
    """
    return abs(a - b) < tol


def is_close_scaled(a: float, b: float, tol: float) -> bool:
    """
    Сравнение двух конечных float: абсолютно около нуля, относительно для
    больших по модулю значений.

    Examples:
        >>> is_close_scaled(1e6, 1e6 + 1e-3, 1e-8)
        True
        >>> is_close_scaled(0.0, 1e-6, 1e-8)
        False
    """
    abs_diff = abs(a - b)
    if abs_diff < tol:
        return True

    max_abs = max(abs(a), abs(b))
    return abs_diff / max_abs < tol


def limits_are_equal(
    left: float | None,
    right: float | None,
    tolerance: float = LIMIT_TOLERANCE,
) -> bool:
    """
    Равенство двух односторонних пределов с учётом толерантности.

    Оба предела должны быть обнаружены и конечны. Сравнение выполняется с
    толерантностью tolerance × LIMIT_EQUALITY_TOLERANCE_MULT: абсолютно для
    значений около нуля, относительно для больших по модулю значений.
    Ослабление нужно, т.к. односторонние пределы берутся в точках a ∓ 1e-9 и
    для функций с большой производной отличаются на slope × 2e-9.

    Args:
        left: Левый предел (или None)
        right: Правый предел (или None)
        tolerance: Базовая толерантность

    Returns:
        True если пределы равны в пределах толерантности

    Examples:
        >>> limits_are_equal(4.0 - 4e-9, 4.0 + 4e-9)
        True
        >>> limits_are_equal(1.0, 2.0)
        False
        >>> limits_are_equal(None, 2.0)
        False
    """
    if not is_finite_limit(left) or not is_finite_limit(right):
        return False

    return is_close_scaled(left, right, tolerance * LIMIT_EQUALITY_TOLERANCE_MULT)


# =============================================================================
# ФОРМАТИРОВАНИЕ
# =============================================================================


def format_number(value: float) -> str:
    """
    Компактное текстовое представление числа для описаний.

    Целые значения печатаются без дробной части, остальные округляются до
    4 знаков с отбрасыванием хвостовых нулей.

    Examples:
        >>> format_number(2.0)
        '2'
        >>> format_number(0.5)
        '0.5'
        >>> format_number(1.999999999)
        '2'
        >>> format_number(-0.33333)
        '-0.3333'
    """
    if not math.isfinite(value):
        return str(value)

    if value.is_integer():
        return str(int(value))

    text = f"{value:.4f}".rstrip("0").rstrip(".")
    if text == "-0":
        return "0"
    return text
