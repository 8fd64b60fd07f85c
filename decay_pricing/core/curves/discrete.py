"""
DiscretizedCurve — квантование времени для любой ценовой кривой

ФОРМУЛА:
    t' = trunc(t / step_size) * step_size
    price(t) = inner.price_at(t')

Цена становится ступенчатой: постоянна на каждом интервале длины step_size
(например, обновление раз в блок вместо непрерывного дрейфа).

ВАЖНО: деление с усечением К НУЛЮ, не floor.
    t = -1, step_size = 10  →  t' = 0  (а не -10)
Поэтому интервал вокруг нуля (-step_size, step_size) целиком отображается в 0.

Шаг:
- step_size == 0 → DivideByZero из price_at (для любого t)
- step_size < 0 допустим: trunc(t / -s) * -s == trunc(t / s) * s,
  сетка совпадает с шагом |s|
"""

import logging
from dataclasses import dataclass
from typing import Generic, TypeVar

from decay_pricing.core.curves.base import CurveKind, PriceCurve, validate_wad
from decay_pricing.core.errors import DivideByZero, InvalidParameter
from decay_pricing.core.math.fixed_point import div_trunc

logger = logging.getLogger(__name__)

CurveT = TypeVar("CurveT", bound=PriceCurve)


@dataclass(frozen=True)
class DiscretizedCurve(Generic[CurveT]):
    """
    Обёртка, квантующая время перед делегированием во внутреннюю кривую.

    Владеет ровно одной внутренней кривой и шагом; параметры внутренней
    кривой не дублирует.

    Attributes:
        inner: Внутренняя кривая (LinearCurve, ExponentialCurve или любая PriceCurve)
        step_size: Шаг квантования времени (WAD)

    Examples:
        >>> linear = LinearCurve(initial_price=10 * WAD, decay_rate=-WAD)
        >>> curve = DiscretizedCurve(inner=linear, step_size=5 * WAD)
        >>> curve.price_at(7 * WAD) == 15 * WAD
        True
    """

    inner: CurveT
    step_size: int

    kind = CurveKind.DISCRETIZED

    def __post_init__(self) -> None:
        if not isinstance(self.inner, PriceCurve):
            raise InvalidParameter(
                f"inner must implement price_at, got {type(self.inner).__name__}"
            )
        validate_wad(self.step_size, "step_size")

        if self.step_size == 0:
            logger.warning("Discretized curve with step_size=0: every price_at call will fail")

        logger.debug(
            "Discretized curve: step_size=%d inner=%s",
            self.step_size,
            type(self.inner).__name__,
        )

    def quantize(self, time_since_start: int) -> int:
        """
        Квантование времени к сетке step_size (усечение к нулю).

        Args:
            time_since_start: Время с начала продажи (WAD, знаковое)

        Returns:
            trunc(t / step_size) * step_size

        Raises:
            DivideByZero: Если step_size == 0

        Examples:
            >>> curve.quantize(-1)  # step_size = 10
            0
        """
        if self.step_size == 0:
            raise DivideByZero(
                f"step_size is zero, cannot quantize time_since_start={time_since_start}"
            )

        return div_trunc(time_since_start, self.step_size) * self.step_size

    def price_at(self, time_since_start: int) -> int:
        """
        Цена в момент time_since_start с квантованием времени.

        Ошибки внутренней кривой пропагируются без изменений.

        Raises:
            DivideByZero: Если step_size == 0
        """
        return self.inner.price_at(self.quantize(time_since_start))
