"""
Numerical Safeguards — Stride Preconditions & ULP Primitives

Модуль содержит предусловия для построения stride-последовательностей
и примитивы сравнения float с точностью до ULP:
- Проверка шага: step != 0, не NaN, не Inf
- Проверка границ: NaN запрещён, ±Inf допустим (неограниченная последовательность)
- Знак шага через аддитивный ноль distance-типа (работает для timedelta)
- ULP-расстояние между float для контроля накопления ошибки округления

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Нулевой шаг никогда не проходит конструирование (InvalidStrideStep)
2. Знак шага определяется сравнением с нулём того же distance-типа
3. NaN не попадает ни в шаг, ни в границы
"""

import math
import struct
from datetime import date, datetime, timedelta
from decimal import Decimal
from typing import Any, Final

from stridekit.core.domain.measurable import zero_of

# =============================================================================
# ПАРАМЕТРЫ ТОЧНОСТИ
# =============================================================================

# Допуск (в ULP) между значением stride на индексе i и start + i * step
DEFAULT_ULP_TOLERANCE: Final[int] = 1


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidStrideStep(ValueError):
    """
    Шаг stride нарушает предусловие конструирования.

    Нулевой шаг дал бы бесконечную последовательность из одного значения,
    NaN/Inf шаг — последовательность, которая никогда не достигает границы.
    Это ошибка вызывающего кода, а не восстанавливаемое состояние.
    """


class InvalidStrideBound(ValueError):
    """Граница stride (start или end) равна NaN."""


# =============================================================================
# FLOAT ВАЛИДАЦИЯ
# =============================================================================


def is_valid_float(value: Any) -> bool:
    """
    Проверка, является ли значение конечным числом.

    Для не-float типов (int, Fraction, timedelta, пользовательские типы)
    всегда True: у них нет NaN/Inf.

    Args:
        value: Проверяемое значение

    Returns:
        False если value — NaN или ±Inf (float или Decimal), иначе True
    """
    if isinstance(value, float):
        return math.isfinite(value)
    if isinstance(value, Decimal):
        return value.is_finite()
    return True


def is_nan(value: Any) -> bool:
    """True если value — NaN (float или Decimal)."""
    if isinstance(value, float):
        return math.isnan(value)
    if isinstance(value, Decimal):
        return value.is_nan()
    return False


# =============================================================================
# ЗНАК ШАГА
# =============================================================================


def is_zero_step(step: Any) -> bool:
    """True если шаг равен нулю своего distance-типа."""
    return step == zero_of(step)


def is_ascending(step: Any) -> bool:
    """True для положительного шага (последовательность возрастает)."""
    return step > zero_of(step)


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_step(step: Any) -> None:
    """
    Валидация шага stride.

    Args:
        step: Шаг (значение distance-типа)

    Raises:
        InvalidStrideStep: Если шаг NaN, ±Inf или равен нулю
    """
    if not is_valid_float(step):
        raise InvalidStrideStep(f"stride step must be finite, got {step!r}")

    if is_zero_step(step):
        raise InvalidStrideStep(f"stride step must be non-zero, got {step!r}")


def validate_step_moves(start: Any, step: Any) -> None:
    """
    Проверка, что шаг действительно сдвигает start.

    date + timedelta отбрасывает часы, минуты и микросекунды: шаг не из
    целого числа дней либо не сдвигает date вовсе, либо сдвигает на
    расстояние, отличное от step.

    Args:
        start: Исходное значение
        step: Шаг

    Raises:
        InvalidStrideStep: Если start — date (не datetime), а step не кратен дню
    """
    if isinstance(start, date) and not isinstance(start, datetime):
        if isinstance(step, timedelta) and (step.seconds or step.microseconds):
            raise InvalidStrideStep(
                f"date stride step must be a whole number of days, got {step!r}"
            )


def validate_bound(value: Any, name: str) -> None:
    """
    Валидация границы stride.

    ±Inf допустим: stride_to(0.0, inf, 1.0) — корректная ленивая
    неограниченная последовательность.

    Args:
        value: Граница (start или end)
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        InvalidStrideBound: Если value равен NaN
    """
    if is_nan(value):
        raise InvalidStrideBound(f"stride {name} must not be NaN, got {value!r}")


# =============================================================================
# ULP-СРАВНЕНИЯ
# =============================================================================


def _ordered_bits(value: float) -> int:
    """Отображение float в int с сохранением порядка (для подсчёта ULP)."""
    (bits,) = struct.unpack("<q", struct.pack("<d", value))
    if bits < 0:
        bits = -(bits & 0x7FFFFFFFFFFFFFFF)
    return bits


def ulp_distance(a: float, b: float) -> int:
    """
    Количество представимых float между a и b.

    -0.0 и 0.0 считаются равными (расстояние 0).

    Args:
        a: Первое значение (конечное)
        b: Второе значение (конечное)

    Returns:
        Неотрицательное число шагов ULP

    Raises:
        ValueError: Если a или b — NaN/Inf

    Examples:
        >>> ulp_distance(1.0, 1.0)
        0
        >>> ulp_distance(1.0, math.nextafter(1.0, 2.0))
        1
    """
    if not (math.isfinite(a) and math.isfinite(b)):
        raise ValueError(f"ulp_distance requires finite values, got {a!r}, {b!r}")

    return abs(_ordered_bits(float(a)) - _ordered_bits(float(b)))


def is_within_ulps(a: float, b: float, ulps: int = DEFAULT_ULP_TOLERANCE) -> bool:
    """
    Проверка, что a и b отличаются не более чем на `ulps` единиц ULP.

    Args:
        a: Первое значение
        b: Второе значение
        ulps: Допуск в ULP (default: DEFAULT_ULP_TOLERANCE)

    Returns:
        True если ulp_distance(a, b) <= ulps
    """
    if ulps < 0:
        raise ValueError(f"ulps must be non-negative, got {ulps}")

    return ulp_distance(a, b) <= ulps
