"""
Тесты для DiscretizedCurve

Проверяемые инварианты:
1. Цена постоянна на [k*s, (k+1)*s) и равна inner.price_at(k*s)
2. Квантование усекает к нулю (не floor) для t < 0
3. step_size == 0 → DivideByZero для любого t
4. Ошибки внутренней кривой пропагируются без изменений
5. Обёртка работает с любой PriceCurve
"""

import pytest

from decay_pricing.core.curves import (
    CurveKind,
    DiscretizedCurve,
    ExponentialCurve,
    LinearCurve,
    PriceCurve,
)
from decay_pricing.core.errors import DivideByZero, InvalidParameter, PriceUnderflow
from decay_pricing.core.math.fixed_point import WAD


class _IdentityCurve:
    """Минимальная кривая: цена равна времени."""

    def price_at(self, time_since_start: int) -> int:
        return time_since_start


@pytest.fixture
def linear() -> LinearCurve:
    return LinearCurve(initial_price=10 * WAD, decay_rate=-WAD)


@pytest.fixture
def stepped(linear) -> DiscretizedCurve:
    """Линейная кривая с шагом 5.0."""
    return DiscretizedCurve(inner=linear, step_size=5 * WAD)


# =============================================================================
# ТЕСТЫ: Квантование
# =============================================================================


class TestQuantize:
    """Тесты квантования времени."""

    def test_positive_time(self, stepped):
        assert stepped.quantize(7 * WAD) == 5 * WAD
        assert stepped.quantize(5 * WAD) == 5 * WAD
        assert stepped.quantize(10 * WAD - 1) == 5 * WAD
        assert stepped.quantize(10 * WAD) == 10 * WAD

    def test_truncates_toward_zero_not_floor(self):
        """t = -1, step = 10 → 0 (floor дал бы -10)."""
        curve = DiscretizedCurve(inner=_IdentityCurve(), step_size=10)
        assert curve.quantize(-1) == 0
        assert curve.quantize(-9) == 0
        assert curve.quantize(-10) == -10
        assert curve.quantize(-15) == -10

    def test_negative_step_same_grid(self):
        """Отрицательный шаг даёт ту же сетку, что и |step|."""
        positive = DiscretizedCurve(inner=_IdentityCurve(), step_size=10)
        negative = DiscretizedCurve(inner=_IdentityCurve(), step_size=-10)
        for t in (-25, -10, -1, 0, 1, 9, 10, 37):
            assert negative.quantize(t) == positive.quantize(t)

    def test_zero_step_raises(self, linear):
        curve = DiscretizedCurve(inner=linear, step_size=0)
        with pytest.raises(DivideByZero, match="step_size is zero"):
            curve.quantize(WAD)


# =============================================================================
# ТЕСТЫ: price_at
# =============================================================================


class TestDiscretizedPrice:
    """Тесты ступенчатой цены."""

    def test_scenario_linear_step_five(self, stepped):
        """price_at(7.0) == price_at(5.0) == 15.0."""
        assert stepped.price_at(7 * WAD) == 15 * WAD
        assert stepped.price_at(5 * WAD) == 15 * WAD

    def test_constant_on_half_open_interval(self, stepped, linear):
        """На [k*s, (k+1)*s) цена равна inner.price_at(k*s)."""
        step = 5 * WAD
        for k in range(4):
            expected = linear.price_at(k * step)
            for t in (k * step, k * step + 1, k * step + step // 2, (k + 1) * step - 1):
                assert stepped.price_at(t) == expected

    def test_changes_at_step_boundary(self, stepped):
        assert stepped.price_at(10 * WAD - 1) == 15 * WAD
        assert stepped.price_at(10 * WAD) == 20 * WAD

    def test_negative_time_truncates_to_zero(self, stepped):
        """t ∈ (-5, 0] → цена при t' = 0."""
        assert stepped.price_at(-1) == 10 * WAD
        assert stepped.price_at(-4 * WAD) == 10 * WAD
        assert stepped.price_at(-5 * WAD) == 5 * WAD

    def test_wraps_exponential(self):
        inner = ExponentialCurve(initial_price=100 * WAD, decay_percent=WAD // 2)
        curve = DiscretizedCurve(inner=inner, step_size=WAD)

        assert curve.price_at(WAD + WAD // 2) == inner.price_at(WAD)
        assert curve.price_at(WAD // 2) == inner.price_at(0)
        assert curve.price_at(3 * WAD - 1) == inner.price_at(2 * WAD)

    def test_wraps_any_price_curve(self):
        curve = DiscretizedCurve(inner=_IdentityCurve(), step_size=100)
        assert curve.price_at(250) == 200

    def test_zero_step_fails_for_any_time(self, linear):
        """step_size = 0 → DivideByZero для любого t (и это ZeroDivisionError)."""
        curve = DiscretizedCurve(inner=linear, step_size=0)
        for t in (0, 1, -1, 7 * WAD, -7 * WAD):
            with pytest.raises(DivideByZero):
                curve.price_at(t)

        with pytest.raises(ZeroDivisionError):
            curve.price_at(WAD)

    def test_inner_errors_propagate(self):
        """PriceUnderflow внутренней кривой не перехватывается."""
        inner = LinearCurve(initial_price=10 * WAD, decay_rate=-WAD)
        curve = DiscretizedCurve(inner=inner, step_size=WAD)
        with pytest.raises(PriceUnderflow):
            curve.price_at(-11 * WAD - WAD // 2)


# =============================================================================
# ТЕСТЫ: Конструирование
# =============================================================================


class TestDiscretizedConstruction:
    """Тесты конструирования обёртки."""

    def test_attributes(self, stepped, linear):
        assert stepped.inner is linear
        assert stepped.step_size == 5 * WAD
        assert stepped.kind == CurveKind.DISCRETIZED
        assert stepped.inner.initial_price == linear.initial_price

    def test_no_initial_price_on_wrapper(self):
        """Обёртка не требует initial_price от внутренней кривой."""
        curve = DiscretizedCurve(inner=_IdentityCurve(), step_size=1)
        assert not hasattr(curve, "initial_price")
        assert curve.price_at(5) == 5

    def test_inner_must_be_price_curve(self):
        with pytest.raises(InvalidParameter, match="price_at"):
            DiscretizedCurve(inner=object(), step_size=WAD)

    def test_step_must_be_int(self, linear):
        with pytest.raises(InvalidParameter):
            DiscretizedCurve(inner=linear, step_size=0.5)

    def test_zero_step_allowed_at_construction(self, linear):
        curve = DiscretizedCurve(inner=linear, step_size=0)
        assert curve.step_size == 0

    def test_satisfies_protocol(self, stepped):
        assert isinstance(stepped, PriceCurve)

    def test_nested_wrapper(self, linear):
        """Обёртка над обёрткой: применяются оба квантования."""
        outer = DiscretizedCurve(
            inner=DiscretizedCurve(inner=linear, step_size=2 * WAD),
            step_size=3 * WAD,
        )
        # 7.0 → 6.0 (шаг 3) → 6.0 (шаг 2) → 16.0
        assert outer.price_at(7 * WAD) == 16 * WAD
