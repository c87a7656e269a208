"""
Measurable — контракт измеримого значения

Единственный способ, которым stride-последовательности работают со значениями:
- distance(a, b) → D   (расстояние от a до b в distance-типе D)
- advanced(a, n) → V   (сдвиг a на расстояние n)

Встроенные регистрации:
- numbers.Real (int, float, Fraction), Decimal: b - a / a + n
- date, datetime: b - a / a + n, distance-тип timedelta
- Strideable: методы distance_to / advanced_by

КОНТРАКТ (не проверяется в runtime):
1. advanced(a, distance(a, b)) == b для точных distance-типов,
   ≈ b для floating-point distance-типов
2. distance антисимметрична: distance(a, b) == -distance(b, a)
3. Порядок выводится из distance: a < b ⇔ distance(a, b) > 0

Нарушение контракта не детектируется: симптом — неверная или
бесконечная последовательность.
"""

import numbers
from abc import ABC, abstractmethod
from datetime import date
from decimal import Decimal
from functools import singledispatch
from typing import Any, ClassVar


# =============================================================================
# EXCEPTIONS
# =============================================================================


class NotStrideableError(TypeError):
    """Тип значения не поддерживает distance / advanced."""


# =============================================================================
# STRIDEABLE BASE CLASS
# =============================================================================


class Strideable(ABC):
    """
    Базовый класс для пользовательских измеримых типов.

    Подкласс реализует distance_to / advanced_by и объявляет distance_type.
    Сравнения (<, <=, ==, >, >=) выводятся из distance_to.

    Если distance_type — сам класс (self-distance), выведенные сравнения
    рекурсивно вызывали бы сами себя через distance_to: такой подкласс
    обязан определить собственные __lt__ и __eq__, иначе определение класса
    отклоняется. Арифметика сдвига (+, -) для self-distance типов запрещена:
    `v + v` неоднозначно (значение + значение или значение + расстояние).
    """

    distance_type: ClassVar[type]

    def __init_subclass__(cls, self_distance: bool = False, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)

        if not self_distance:
            return

        cls.distance_type = cls
        for name in ("__lt__", "__eq__"):
            if _uses_derived(cls, name):
                raise TypeError(
                    f"{cls.__name__} is its own distance_type and must define "
                    f"{name} explicitly; the distance-derived comparison would "
                    f"recurse into itself"
                )

    @abstractmethod
    def distance_to(self, other: Any) -> Any:
        """Расстояние от self до other (в distance_type)."""

    @abstractmethod
    def advanced_by(self, n: Any) -> Any:
        """Значение, сдвинутое на расстояние n."""

    # -------------------------------------------------------------------------
    # Порядок, выведенный из distance_to
    # -------------------------------------------------------------------------

    def _sign_to(self, other: Any) -> int:
        d = self.distance_to(other)
        if isinstance(d, Strideable) and (
            _uses_derived(type(d), "__lt__") or _uses_derived(type(d), "__eq__")
        ):
            raise TypeError(
                f"{type(self).__name__} measures distance in {type(d).__name__}, "
                f"which derives its ordering from distance_to; define __lt__ "
                f"and __eq__ on {type(d).__name__}"
            )
        zero = zero_of(d)
        if d > zero:
            return 1
        if d < zero:
            return -1
        return 0

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self._sign_to(other) > 0

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return not other < self

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return other < self

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return not self < other

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self._sign_to(other) == 0

    # -------------------------------------------------------------------------
    # Арифметика сдвига
    # -------------------------------------------------------------------------

    def _check_offset_arithmetic(self) -> None:
        if type(self).distance_type is type(self):
            raise TypeError(
                f"offset arithmetic is ambiguous for {type(self).__name__}: "
                f"value type and distance type coincide"
            )

    def __add__(self, n: Any) -> Any:
        self._check_offset_arithmetic()
        if isinstance(n, Strideable):
            return NotImplemented
        return self.advanced_by(n)

    def __radd__(self, n: Any) -> Any:
        return self.__add__(n)

    def __sub__(self, n: Any) -> Any:
        self._check_offset_arithmetic()
        if isinstance(n, Strideable):
            return NotImplemented
        return self.advanced_by(-n)


def zero_of(d: Any) -> Any:
    """
    Аддитивный ноль distance-типа.

    d - d даёт ноль того же типа для int, float, Decimal, Fraction и
    timedelta, поэтому `d > zero_of(d)` корректно и там, где сравнение
    с литералом 0 не определено.

    Для self-distance типов `d - d` запрещено (неоднозначная арифметика
    сдвига), ноль берётся из контракта: d.distance_to(d).
    """
    if isinstance(d, Strideable) and type(d).distance_type is type(d):
        return d.distance_to(d)
    return d - d


def _uses_derived(cls: type, name: str) -> bool:
    """True если cls наследует сравнение `name` от Strideable без переопределения."""
    return getattr(cls, name) is getattr(Strideable, name)


# =============================================================================
# GENERIC DISTANCE / ADVANCED
# =============================================================================


@singledispatch
def distance(a: Any, b: Any) -> Any:
    """
    Расстояние от a до b.

    Args:
        a: Исходное значение
        b: Целевое значение

    Returns:
        Значение distance-типа D, такое что advanced(a, D) ≈ b

    Raises:
        NotStrideableError: Если тип a не зарегистрирован
    """
    raise NotStrideableError(f"{type(a).__name__} values cannot be strided")


@singledispatch
def advanced(a: Any, n: Any) -> Any:
    """
    Значение a, сдвинутое на расстояние n.

    Raises:
        NotStrideableError: Если тип a не зарегистрирован
    """
    raise NotStrideableError(f"{type(a).__name__} values cannot be strided")


@distance.register(Strideable)
def _distance_strideable(a: Strideable, b: Any) -> Any:
    return a.distance_to(b)


@advanced.register(Strideable)
def _advanced_strideable(a: Strideable, n: Any) -> Any:
    return a.advanced_by(n)


@distance.register(numbers.Real)
@distance.register(Decimal)
@distance.register(date)
def _distance_arithmetic(a: Any, b: Any) -> Any:
    return b - a


@advanced.register(numbers.Real)
@advanced.register(Decimal)
@advanced.register(date)
def _advanced_arithmetic(a: Any, n: Any) -> Any:
    return a + n


def is_strideable(value: Any) -> bool:
    """True если для типа value зарегистрированы distance / advanced."""
    return distance.dispatch(type(value)) is not distance.dispatch(object)
