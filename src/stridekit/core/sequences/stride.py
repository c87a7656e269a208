"""
Публичные конструкторы stride-последовательностей.
"""

from typing import Any, Optional, TypeVar, Union

from stridekit.core.sequences.closed import StrideThrough
from stridekit.core.sequences.half_open import StrideTo

V = TypeVar("V")

_MISSING: Any = object()


def stride_to(start: V, end: V, step: Any) -> StrideTo[V]:
    """
    Half-open stride: значения от start с шагом step строго до end.

    Args:
        start: Первое значение
        end: Граница (не включается)
        step: Шаг (distance-тип значения), ненулевой

    Returns:
        Ленивая перезапускаемая последовательность StrideTo

    Raises:
        InvalidStrideStep: Если step равен нулю, NaN или Inf
    """
    return StrideTo(start, end, step)


def stride_through(start: V, end: V, step: Any) -> StrideThrough[V]:
    """
    Closed stride: значения от start с шагом step до end включительно.

    end выдаётся только если stride попадает в него точно.

    Raises:
        InvalidStrideStep: Если step равен нулю, NaN или Inf
    """
    return StrideThrough(start, end, step)


def stride(
    start: V,
    *,
    to: Optional[V] = _MISSING,
    through: Optional[V] = _MISSING,
    by: Any,
) -> Union[StrideTo[V], StrideThrough[V]]:
    """
    Keyword-форма: stride(1, to=10, by=2) или stride(0, through=9, by=3).

    Raises:
        TypeError: Если не задан ровно один из `to` / `through`
    """
    if (to is _MISSING) == (through is _MISSING):
        raise TypeError("stride() requires exactly one of 'to' or 'through'")

    if to is not _MISSING:
        return stride_to(start, to, by)
    return stride_through(start, through, by)
