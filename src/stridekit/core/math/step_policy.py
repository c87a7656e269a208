"""
Step Policy — выбор формулы шага для пары (value type, distance type)

Три взаимоисключающих правила, выбор по возможностям типов (не по значениям):

    ACCUMULATE             value_{i+1} = advanced(value_i, step)
                           любой измеримый тип; index всегда None
    ORIGIN_RELATIVE        value_{i+1} = advanced(start, (i + 1) * step)
                           distance-тип floating point
    FUSED_ORIGIN_RELATIVE  value_{i+1} = start + (i + 1) * step, одно округление
                           value-тип совпадает с floating distance-типом

Побеждает самое специфичное правило. Решение принимается один раз на пару
типов и кэшируется (functools.lru_cache); на каждом шаге не пересматривается.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Для точных distance-типов (int, Fraction, timedelta) — только ACCUMULATE:
   результат точный и монотонный
2. Для floating distance-типов ошибка на индексе i ограничена ошибкой
   вычисления start + i * step, а не накапливается аддитивно по шагам
3. Cursor неизменяем: каждый шаг создаёт новый StrideCursor
"""

import logging
import math
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from fractions import Fraction
from functools import lru_cache
from typing import Any, Callable, Generic, Optional, TypeVar

from stridekit.core.domain.measurable import advanced

logger = logging.getLogger(__name__)

V = TypeVar("V")

AddingProduct = Callable[[Any, int, Any], Any]


# =============================================================================
# ENUMS
# =============================================================================


class StepPolicy(str, Enum):
    """Формула вычисления следующего значения stride"""

    ACCUMULATE = "accumulate"
    ORIGIN_RELATIVE = "origin_relative"
    FUSED_ORIGIN_RELATIVE = "fused_origin_relative"

    @property
    def tracks_index(self) -> bool:
        """True если политика пересчитывает значение от start по индексу."""
        return self is not StepPolicy.ACCUMULATE


# =============================================================================
# FUSED MULTIPLY-ADD
# =============================================================================


def _float_adding_product(start: float, n: int, step: float) -> float:
    """
    start + n * step с единственным округлением.

    Вычисление в рациональных числах точно; float(Fraction) округляет
    один раз (round-half-even), как fused multiply-add.
    """
    if not (math.isfinite(start) and math.isfinite(step)):
        return start + n * step

    return float(Fraction(start) + n * Fraction(step))


def _decimal_adding_product(start: Decimal, n: int, step: Decimal) -> Decimal:
    """start + n * step через Decimal.fma (одно округление в текущем контексте)."""
    return step.fma(n, start)


# Floating distance-типы и их fused-операции
_FLOATING_DISTANCE_TYPES: dict[type, AddingProduct] = {
    float: _float_adding_product,
    Decimal: _decimal_adding_product,
}


def _adding_product_for(distance_type: type) -> Optional[AddingProduct]:
    for floating_type in distance_type.__mro__:
        if floating_type in _FLOATING_DISTANCE_TYPES:
            return _FLOATING_DISTANCE_TYPES[floating_type]
    return None


def is_floating_distance(distance_type: type) -> bool:
    """True если distance_type (или его предок) зарегистрирован как floating."""
    return _adding_product_for(distance_type) is not None


def register_floating_distance(
    distance_type: type,
    adding_product: Optional[AddingProduct] = None,
) -> None:
    """
    Регистрация пользовательского floating-point distance-типа.

    Args:
        distance_type: Тип расстояния (например, обёртка над float)
        adding_product: Функция (start, n, step) → start + n * step
            с одним округлением. Если None — используется start + n * step
            (два округления, но без накопления ошибки).
    """
    if adding_product is None:
        adding_product = _plain_adding_product

    _FLOATING_DISTANCE_TYPES[distance_type] = adding_product
    resolve_step_policy.cache_clear()
    logger.info("Registered floating distance type %s", distance_type.__name__)


def unregister_floating_distance(distance_type: type) -> None:
    """Удаление пользовательского floating distance-типа из реестра."""
    if distance_type in (float, Decimal):
        raise ValueError(
            f"built-in floating distance type {distance_type.__name__} cannot be removed"
        )

    _FLOATING_DISTANCE_TYPES.pop(distance_type, None)
    resolve_step_policy.cache_clear()


def _plain_adding_product(start: Any, n: int, step: Any) -> Any:
    return start + n * step


def adding_product(start: Any, n: int, step: Any) -> Any:
    """
    start + n * step с минимальным числом округлений для типа step.

    Raises:
        TypeError: Если тип step не зарегистрирован как floating distance
    """
    fused = _adding_product_for(type(step))
    if fused is None:
        raise TypeError(f"{type(step).__name__} is not a floating distance type")

    return fused(start, n, step)


# =============================================================================
# POLICY RESOLUTION
# =============================================================================


@lru_cache(maxsize=None)
def resolve_step_policy(value_type: type, distance_type: type) -> StepPolicy:
    """
    Выбор политики шага для пары типов.

    Args:
        value_type: Тип значений последовательности (type(start))
        distance_type: Тип шага (type(step))

    Returns:
        StepPolicy — самое специфичное применимое правило
    """
    if not is_floating_distance(distance_type):
        policy = StepPolicy.ACCUMULATE
    elif value_type is distance_type:
        policy = StepPolicy.FUSED_ORIGIN_RELATIVE
    else:
        policy = StepPolicy.ORIGIN_RELATIVE

    logger.debug(
        "Resolved step policy %s for (%s, %s)",
        policy.value,
        value_type.__name__,
        distance_type.__name__,
    )
    return policy


# =============================================================================
# CURSOR
# =============================================================================


@dataclass(frozen=True)
class StrideCursor(Generic[V]):
    """
    Состояние итерации: текущее значение и индекс шага.

    index равен None для ACCUMULATE (простое накопление) и номеру текущего
    значения от start для политик, пересчитывающих значение по индексу.
    """

    index: Optional[int]
    value: V


def initial_cursor(policy: StepPolicy, start: V) -> StrideCursor[V]:
    """Cursor на start: index 0 для index-политик, None для ACCUMULATE."""
    return StrideCursor(index=0 if policy.tracks_index else None, value=start)


def advance_cursor(
    policy: StepPolicy,
    cursor: StrideCursor[V],
    start: V,
    step: Any,
) -> StrideCursor[V]:
    """
    Следующий cursor по формуле политики.

    Args:
        policy: Политика шага
        cursor: Текущий cursor
        start: Исходное значение последовательности
        step: Шаг

    Returns:
        Новый StrideCursor (исходный не изменяется)

    Raises:
        ValueError: Если index-политика получила cursor без index
    """
    if policy is StepPolicy.ACCUMULATE:
        return StrideCursor(index=None, value=advanced(cursor.value, step))

    if cursor.index is None:
        raise ValueError(f"{policy.value} cursor must carry an index, got {cursor!r}")
    n = cursor.index + 1

    if policy is StepPolicy.ORIGIN_RELATIVE:
        return StrideCursor(index=n, value=advanced(start, n * step))

    return StrideCursor(index=n, value=adding_product(start, n, step))
