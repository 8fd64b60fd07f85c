"""
LinearCurve — аффинный закон цены

ФОРМУЛА:
    price(t) = initial_price - decay_rate * t

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. decay_rate < 0 (иначе InvalidParameter при конструировании)
2. Вычитание выполняется в неограниченном python int, переполнения нет
3. Отрицательная цена → PriceUnderflow, без clamp в 0

ЗНАК: при decay_rate < 0 и t > 0 произведение decay_rate * t отрицательно,
поэтому цена РАСТЁТ со временем. Так задан закон, знак не инвертируется.
"""

import logging
from dataclasses import dataclass

from decay_pricing.core.curves.base import CurveKind, to_price, validate_wad
from decay_pricing.core.errors import InvalidParameter
from decay_pricing.core.math.fixed_point import mul

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LinearCurve:
    """
    Линейная ценовая кривая.

    Attributes:
        initial_price: Цена при t = 0 (WAD), знак не проверяется
        decay_rate: Изменение цены за единицу времени (WAD), строго < 0

    Examples:
        >>> curve = LinearCurve(initial_price=10 * WAD, decay_rate=-WAD)
        >>> curve.price_at(2 * WAD) == 12 * WAD
        True
    """

    initial_price: int
    decay_rate: int

    kind = CurveKind.LINEAR

    def __post_init__(self) -> None:
        validate_wad(self.initial_price, "initial_price")
        validate_wad(self.decay_rate, "decay_rate")

        if self.decay_rate >= 0:
            logger.warning("Rejected linear curve: decay_rate=%d", self.decay_rate)
            raise InvalidParameter(f"decay_rate must be negative, got {self.decay_rate}")

        logger.debug(
            "Linear curve: initial_price=%d decay_rate=%d",
            self.initial_price,
            self.decay_rate,
        )

    def price_at(self, time_since_start: int) -> int:
        """
        Цена в момент time_since_start.

        Args:
            time_since_start: Время с начала продажи (WAD, знаковое)

        Returns:
            initial_price - mul(decay_rate, t)

        Raises:
            PriceUnderflow: Если цена отрицательна
            FixedPointOverflow: Если decay_rate * t вне int256
        """
        return to_price(self.initial_price - mul(self.decay_rate, time_since_start))
