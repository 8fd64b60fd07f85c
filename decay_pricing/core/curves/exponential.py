"""
ExponentialCurve — экспоненциальный закон цены (Dutch auction)

ФОРМУЛЫ:
    decay_rate = ln(1 - decay_percent)
    price(t) = initial_price * exp(decay_rate * t)

decay_percent — доля, на которую падает цена за единицу времени:
при decay_percent = 0.1 цена через t = 1 равна 0.9 * initial_price.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. 0 < decay_percent < WAD, иначе InvalidParameter (до вызова ln)
2. decay_rate < 0, иначе InvalidParameter
3. При t >= 0 цена строго убывает к нулю, при t < 0 — растёт
4. Переполнение exp пропагируется как FixedPointOverflow
"""

import logging
from dataclasses import dataclass, field

from decay_pricing.core.curves.base import CurveKind, to_price, validate_wad
from decay_pricing.core.errors import InvalidParameter
from decay_pricing.core.math.fixed_point import WAD, exp, ln, mul

logger = logging.getLogger(__name__)


def decay_rate_from_percent(decay_percent: int) -> int:
    """
    Вычисление decay_rate = ln(1 - decay_percent).

    Args:
        decay_percent: Доля падения цены за единицу времени (WAD)

    Returns:
        decay_rate (WAD), строго < 0

    Raises:
        InvalidParameter: Если decay_percent вне (0, WAD) или ln(...) >= 0

    Examples:
        >>> decay_rate_from_percent(WAD // 2)
        -693147180559945309
    """
    if not 0 < decay_percent < WAD:
        raise InvalidParameter(
            f"decay_percent must be in (0, {WAD}), got {decay_percent}"
        )

    decay_rate = ln(WAD - decay_percent)

    if decay_rate >= 0:
        raise InvalidParameter(
            f"decay_rate must be negative, got {decay_rate} "
            f"(decay_percent={decay_percent})"
        )

    return decay_rate


@dataclass(frozen=True)
class ExponentialCurve:
    """
    Экспоненциальная ценовая кривая.

    Attributes:
        initial_price: Масштаб цены (WAD), price_at(0) == initial_price
        decay_percent: Доля падения за единицу времени (WAD), 0 < p < WAD
        decay_rate: ln(1 - decay_percent) (WAD), вычисляется при конструировании
    """

    initial_price: int
    decay_percent: int
    decay_rate: int = field(init=False)

    kind = CurveKind.EXPONENTIAL

    def __post_init__(self) -> None:
        validate_wad(self.initial_price, "initial_price")
        validate_wad(self.decay_percent, "decay_percent")

        try:
            decay_rate = decay_rate_from_percent(self.decay_percent)
        except InvalidParameter:
            logger.warning("Rejected exponential curve: decay_percent=%d", self.decay_percent)
            raise

        # frozen dataclass: производное поле устанавливается в обход __setattr__
        object.__setattr__(self, "decay_rate", decay_rate)

        logger.debug(
            "Exponential curve: initial_price=%d decay_percent=%d decay_rate=%d",
            self.initial_price,
            self.decay_percent,
            self.decay_rate,
        )

    def price_at(self, time_since_start: int) -> int:
        """
        Цена в момент time_since_start.

        Args:
            time_since_start: Время с начала продажи (WAD, знаковое)

        Returns:
            mul(initial_price, exp(mul(decay_rate, t)))

        Raises:
            FixedPointOverflow: Если decay_rate * t слишком велик по модулю (t << 0)
            PriceUnderflow: Если initial_price < 0
        """
        growth = exp(mul(self.decay_rate, time_since_start))
        return to_price(mul(self.initial_price, growth))
