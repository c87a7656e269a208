"""
Общая часть half-open и closed stride-последовательностей.

Последовательность — неизменяемая обёртка над StrideDescriptor и политикой
шага. Каждый вызов iter() создаёт независимый итератор со своим cursor,
поэтому одну последовательность можно обходить многократно и параллельно.
"""

from abc import ABC, abstractmethod
from typing import Any, Generic, Iterator, TypeVar

from stridekit.core.domain.measurable import NotStrideableError, is_strideable
from stridekit.core.math.numerical_safeguards import is_nan
from stridekit.core.math.step_policy import (
    StepPolicy,
    StrideCursor,
    advance_cursor,
    initial_cursor,
    resolve_step_policy,
)
from stridekit.core.sequences.descriptor import StrideDescriptor

V = TypeVar("V")


def has_crossed(value: Any, end: Any, ascending: bool) -> bool:
    """
    Граничный тест: value достиг или прошёл end в направлении шага.

    step > 0: value >= end
    step < 0: value <= end
    """
    if ascending:
        return value >= end
    return value <= end


class StrideIterator(ABC, Generic[V]):
    """
    Базовый итератор: владеет cursor и продвигает его по политике шага.

    Один итератор — один писатель: конкурентный next() из нескольких
    потоков не поддерживается.
    """

    __slots__ = ("_start", "_end", "_step", "_ascending", "_policy", "_cursor")

    def __init__(self, descriptor: StrideDescriptor, policy: StepPolicy) -> None:
        self._start = descriptor.start
        self._end = descriptor.end
        self._step = descriptor.step
        self._ascending = descriptor.ascending
        self._policy = policy
        self._cursor: StrideCursor[V] = initial_cursor(policy, descriptor.start)

    def __iter__(self) -> "StrideIterator[V]":
        return self

    @abstractmethod
    def __next__(self) -> V:
        """Следующее значение или StopIteration за границей."""

    @property
    def cursor(self) -> StrideCursor[V]:
        """Текущий cursor (неизменяемый снимок)."""
        return self._cursor

    def _advance(self) -> V:
        """Вернуть текущее значение и заменить cursor следующим."""
        candidate = self._cursor.value
        self._cursor = advance_cursor(self._policy, self._cursor, self._start, self._step)
        return candidate


class StrideSequence(ABC, Generic[V]):
    """
    Ленивая, конечная (при достижимой границе), перезапускаемая последовательность.

    Подклассы задают класс итератора и быстрый тест исключения для `in`.
    """

    iterator_class: type[StrideIterator]

    def __init__(self, start: V, end: V, step: Any) -> None:
        if not is_strideable(start):
            raise NotStrideableError(f"{type(start).__name__} values cannot be strided")
        self._descriptor = StrideDescriptor.checked(start, end, step)
        self._policy = resolve_step_policy(type(start), type(step))

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def descriptor(self) -> StrideDescriptor:
        return self._descriptor

    @property
    def policy(self) -> StepPolicy:
        return self._policy

    @property
    def start(self) -> V:
        return self._descriptor.start

    @property
    def end(self) -> V:
        return self._descriptor.end

    @property
    def step(self) -> Any:
        return self._descriptor.step

    # -------------------------------------------------------------------------
    # Iteration
    # -------------------------------------------------------------------------

    def __iter__(self) -> Iterator[V]:
        return self.iterator_class(self._descriptor, self._policy)

    def __contains__(self, value: Any) -> bool:
        """
        Проверка вхождения.

        Сначала быстрый тест границ (definitely_excludes), затем обход,
        прекращающийся, как только последовательность прошла value.
        Несравнимые типы и NaN не входят в последовательность.
        """
        if is_nan(value):
            return False

        try:
            if self.definitely_excludes(value):
                return False
        except TypeError:
            return False

        ascending = self._descriptor.ascending
        for element in self:
            if element == value:
                return True
            if (element > value) if ascending else (element < value):
                return False
        return False

    @abstractmethod
    def definitely_excludes(self, value: Any) -> bool:
        """
        True если value гарантированно не входит в последовательность.

        False означает «неизвестно»: нужен полный обход.
        """

    def __eq__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._descriptor == other._descriptor

    def __hash__(self) -> int:
        """
        Хэш по типу и (start, end, step).

        Как и у tuple, требует хэшируемых границ и шага: Strideable с
        выведенным __eq__ нехэшируем, и hash() такой последовательности
        поднимает TypeError.
        """
        return hash((type(self), self.start, self.end, self.step))

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(start={self.start!r}, end={self.end!r}, step={self.step!r})"
        )
