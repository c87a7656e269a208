"""
StrideDescriptor — неизменяемое описание stride (start, end, step)

Immutable Pydantic модель. Значения хранятся как есть (Any): stride работает
с любым измеримым типом, приведение типов не выполняется.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator

from stridekit.core.math.numerical_safeguards import (
    is_ascending,
    validate_bound,
    validate_step,
    validate_step_moves,
)


class StrideDescriptor(BaseModel):
    """
    Описание stride: от start к end с шагом step.

    start уже за end относительно знака step — корректное описание
    пустой последовательности, не ошибка.
    """

    start: Any
    end: Any
    step: Any

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    @model_validator(mode="after")
    def validate_preconditions(self) -> "StrideDescriptor":
        """Шаг ненулевой и конечный, границы не NaN."""
        validate_step(self.step)
        validate_step_moves(self.start, self.step)
        validate_bound(self.start, "start")
        validate_bound(self.end, "end")
        return self

    @classmethod
    def checked(cls, start: Any, end: Any, step: Any) -> "StrideDescriptor":
        """
        Конструирование с предусловиями, поднимающими доменные исключения.

        Raises:
            InvalidStrideStep: Если шаг нулевой, NaN, Inf или не сдвигает date
            InvalidStrideBound: Если start или end равен NaN
        """
        validate_step(step)
        validate_step_moves(start, step)
        validate_bound(start, "start")
        validate_bound(end, "end")
        return cls(start=start, end=end, step=step)

    @property
    def ascending(self) -> bool:
        """True для положительного шага."""
        return is_ascending(self.step)

