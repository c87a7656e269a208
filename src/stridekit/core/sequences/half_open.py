"""
StrideTo — half-open stride: start, start + step, ... строго до end.

end никогда не выдаётся, даже если достижим точно.
"""

from typing import Any, TypeVar

from stridekit.core.sequences.base import StrideIterator, StrideSequence, has_crossed

V = TypeVar("V")


class StrideToIterator(StrideIterator[V]):
    """
    Итератор half-open stride.

    Исчерпание идемпотентно: на границе cursor не продвигается, поэтому
    каждый следующий вызов снова упирается в ту же границу.
    """

    __slots__ = ()

    def __next__(self) -> V:
        if has_crossed(self._cursor.value, self._end, self._ascending):
            raise StopIteration
        return self._advance()


class StrideTo(StrideSequence[V]):
    """
    Последовательность stride(from: start, to: end, by: step).

    Examples:
        >>> list(StrideTo(1, 10, 2))
        [1, 3, 5, 7, 9]
        >>> list(StrideTo(10, 1, -3))
        [10, 7, 4]
        >>> list(StrideTo(5, 1, 1))
        []
    """

    iterator_class = StrideToIterator

    def definitely_excludes(self, value: Any) -> bool:
        if self.descriptor.ascending:
            return value < self.start or self.end <= value
        return value > self.start or self.end >= value
