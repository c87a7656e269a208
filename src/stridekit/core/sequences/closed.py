"""
StrideThrough — closed stride: start, start + step, ... включая end.

end выдаётся ровно один раз, если последовательность попадает в него точно.
Замена строгого сравнения на нестрогое здесь не годится: для граничных
значений (максимум домена) cursor пришлось бы продвинуть за пределы
представимого диапазона. Поэтому выдача end — отдельное одноразовое событие.
"""

from typing import Any, TypeVar

from stridekit.core.math.step_policy import StepPolicy
from stridekit.core.sequences.base import StrideIterator, StrideSequence, has_crossed
from stridekit.core.sequences.descriptor import StrideDescriptor

V = TypeVar("V")


class StrideThroughIterator(StrideIterator[V]):
    """Итератор closed stride с одноразовым флагом end_emitted."""

    __slots__ = ("_end_emitted",)

    def __init__(self, descriptor: StrideDescriptor, policy: StepPolicy) -> None:
        super().__init__(descriptor, policy)
        self._end_emitted = False

    @property
    def end_emitted(self) -> bool:
        return self._end_emitted

    def __next__(self) -> V:
        candidate = self._cursor.value

        if has_crossed(candidate, self._end, self._ascending):
            if candidate == self._end and not self._end_emitted:
                self._end_emitted = True
                return candidate
            raise StopIteration

        return self._advance()


class StrideThrough(StrideSequence[V]):
    """
    Последовательность stride(from: start, through: end, by: step).

    end не обязан быть достижим: если stride в него не попадает,
    последовательность заканчивается последним значением до границы.

    Examples:
        >>> list(StrideThrough(0, 9, 3))
        [0, 3, 6, 9]
        >>> list(StrideThrough(1, 10, 2))
        [1, 3, 5, 7, 9]
    """

    iterator_class = StrideThroughIterator

    def definitely_excludes(self, value: Any) -> bool:
        if self.descriptor.ascending:
            return value < self.start or self.end < value
        return value > self.start or self.end > value
