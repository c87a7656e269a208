"""
Тесты для контракта Measurable

Проверяет:
1. distance / advanced для встроенных типов (int, float, Decimal, Fraction, date)
2. Strideable: порядок, выведенный из distance_to
3. Арифметику сдвига и её запрет для self-distance типов
4. Отклонение self-distance классов без собственных сравнений
"""

from datetime import date, datetime, timedelta
from decimal import Decimal
from fractions import Fraction
from typing import Any

import pytest

from stridekit import InvalidStrideStep, stride_through, stride_to
from stridekit.core.domain import (
    NotStrideableError,
    Strideable,
    advanced,
    distance,
    is_strideable,
    zero_of,
)

# =============================================================================
# ТЕСТОВЫЕ ИЗМЕРИМЫЕ ТИПЫ
# =============================================================================


class Meters(Strideable):
    """Позиция на оси в метрах, расстояние — float."""

    distance_type = float

    def __init__(self, value: float) -> None:
        self.value = value

    def distance_to(self, other: "Meters") -> float:
        return other.value - self.value

    def advanced_by(self, n: float) -> "Meters":
        return Meters(self.value + n)

    def __repr__(self) -> str:
        return f"Meters({self.value!r})"


class Tick(Strideable, self_distance=True):
    """Self-distance тип: расстояние между тиками — тоже Tick."""

    def __init__(self, n: int) -> None:
        self.n = n

    def distance_to(self, other: "Tick") -> "Tick":
        return Tick(other.n - self.n)

    def advanced_by(self, n: "Tick") -> "Tick":
        return Tick(self.n + n.n)

    def __lt__(self, other: Any) -> bool:
        return self.n < other.n

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, Tick) and self.n == other.n


# =============================================================================
# ВСТРОЕННЫЕ ТИПЫ
# =============================================================================


class TestBuiltinDistance:
    """Тесты distance / advanced для встроенных типов"""

    def test_int(self) -> None:
        assert distance(3, 10) == 7
        assert distance(10, 3) == -7
        assert advanced(3, 7) == 10

    def test_float(self) -> None:
        assert distance(1.5, 4.0) == 2.5
        assert advanced(1.5, 2.5) == 4.0

    def test_decimal(self) -> None:
        assert distance(Decimal("1.5"), Decimal("2")) == Decimal("0.5")
        assert advanced(Decimal("1.5"), Decimal("0.5")) == Decimal("2.0")

    def test_fraction(self) -> None:
        assert distance(Fraction(1, 3), Fraction(1, 2)) == Fraction(1, 6)
        assert advanced(Fraction(1, 3), Fraction(1, 6)) == Fraction(1, 2)

    def test_date_uses_timedelta(self) -> None:
        assert distance(date(2024, 1, 1), date(2024, 1, 8)) == timedelta(days=7)
        assert advanced(date(2024, 1, 31), timedelta(days=1)) == date(2024, 2, 1)

    def test_datetime_uses_timedelta(self) -> None:
        start = datetime(2024, 1, 1, 12, 0)
        assert distance(start, datetime(2024, 1, 1, 13, 30)) == timedelta(minutes=90)
        assert advanced(start, timedelta(hours=-12)) == datetime(2024, 1, 1, 0, 0)

    def test_round_trip_exact_for_int(self) -> None:
        """Инвариант: advanced(a, distance(a, b)) == b для точных типов"""
        for a, b in [(0, 0), (-5, 12), (1_000_000, -3)]:
            assert advanced(a, distance(a, b)) == b

    def test_unregistered_type_rejected(self) -> None:
        with pytest.raises(NotStrideableError, match="str values cannot be strided"):
            distance("a", "b")

        with pytest.raises(TypeError):
            advanced(object(), 1)

    def test_is_strideable(self) -> None:
        assert is_strideable(1)
        assert is_strideable(1.0)
        assert is_strideable(Decimal("1"))
        assert is_strideable(date(2024, 1, 1))
        assert is_strideable(Meters(0.0))
        assert not is_strideable("a")
        assert not is_strideable(None)

    def test_zero_of(self) -> None:
        assert zero_of(5) == 0
        assert zero_of(-2.5) == 0.0
        assert zero_of(timedelta(days=3)) == timedelta(0)


# =============================================================================
# STRIDEABLE
# =============================================================================


class TestDerivedOrdering:
    """Порядок Strideable выводится из distance_to"""

    def test_less_than(self) -> None:
        assert Meters(1.0) < Meters(2.0)
        assert not Meters(2.0) < Meters(1.0)
        assert not Meters(1.0) < Meters(1.0)

    def test_equality(self) -> None:
        assert Meters(1.0) == Meters(1.0)
        assert Meters(1.0) != Meters(1.5)

    def test_non_strict_comparisons(self) -> None:
        assert Meters(1.0) <= Meters(1.0)
        assert Meters(1.0) <= Meters(2.0)
        assert Meters(2.0) >= Meters(1.0)
        assert Meters(2.0) > Meters(1.0)

    def test_foreign_type_not_equal(self) -> None:
        assert Meters(1.0) != 1.0

    def test_foreign_type_not_ordered(self) -> None:
        with pytest.raises(TypeError):
            Meters(1.0) < 2.0  # noqa: B015


class TestOffsetArithmetic:
    """Арифметика сдвига для distance_type, отличного от самого типа"""

    def test_add_distance(self) -> None:
        assert Meters(1.0) + 0.5 == Meters(1.5)
        assert 0.5 + Meters(1.0) == Meters(1.5)

    def test_subtract_distance(self) -> None:
        assert Meters(1.0) - 0.25 == Meters(0.75)

    def test_in_place_add(self) -> None:
        m = Meters(1.0)
        m += 2.0
        assert m == Meters(3.0)

    def test_value_plus_value_rejected(self) -> None:
        with pytest.raises(TypeError):
            Meters(1.0) + Meters(2.0)


class TestSelfDistance:
    """Self-distance типы: собственные сравнения обязательны, сдвиг запрещён"""

    def test_distance_type_is_class(self) -> None:
        assert Tick.distance_type is Tick

    def test_own_ordering_used(self) -> None:
        assert Tick(1) < Tick(2)
        assert Tick(2) >= Tick(2)
        assert Tick(3) == Tick(3)

    def test_offset_arithmetic_is_ambiguous(self) -> None:
        with pytest.raises(TypeError, match="ambiguous"):
            Tick(1) + Tick(2)

    def test_strides_with_own_ordering(self) -> None:
        assert list(stride_to(Tick(0), Tick(6), Tick(2))) == [Tick(0), Tick(2), Tick(4)]
        assert list(stride_through(Tick(6), Tick(0), Tick(-3))) == [Tick(6), Tick(3), Tick(0)]

    def test_membership_without_value_arithmetic(self) -> None:
        ticks = stride_to(Tick(0), Tick(6), Tick(2))
        assert Tick(4) in ticks
        assert Tick(3) not in ticks
        assert Tick(6) not in ticks

    def test_zero_taken_from_distance_to(self) -> None:
        """Ноль self-distance типа — distance_to(d, d), без `d - d`"""
        assert zero_of(Tick(5)) == Tick(0)

        with pytest.raises(TypeError, match="ambiguous"):
            Tick(5) - Tick(5)

    def test_zero_step_rejected(self) -> None:
        with pytest.raises(InvalidStrideStep):
            stride_to(Tick(0), Tick(6), Tick(0))

    def test_generic_advanced_still_works(self) -> None:
        assert advanced(Tick(1), Tick(2)) == Tick(3)
        assert distance(Tick(1), Tick(4)) == Tick(3)

    def test_missing_comparisons_rejected_at_definition(self) -> None:
        with pytest.raises(TypeError, match="must define __lt__"):

            class Broken(Strideable, self_distance=True):
                def distance_to(self, other: Any) -> Any:
                    return other

                def advanced_by(self, n: Any) -> Any:
                    return self

    def test_missing_equality_rejected_at_definition(self) -> None:
        with pytest.raises(TypeError, match="must define __eq__"):

            class HalfBroken(Strideable, self_distance=True):
                def distance_to(self, other: Any) -> Any:
                    return other

                def advanced_by(self, n: Any) -> Any:
                    return self

                def __lt__(self, other: Any) -> bool:
                    return False

    def test_late_self_distance_detected_on_compare(self) -> None:
        """distance_type, назначенный после определения класса, ловится при сравнении"""

        class Loop(Strideable):
            def distance_to(self, other: Any) -> Any:
                return Loop()

            def advanced_by(self, n: Any) -> Any:
                return self

        Loop.distance_type = Loop

        with pytest.raises(TypeError, match="derives its ordering"):
            Loop() < Loop()  # noqa: B015
