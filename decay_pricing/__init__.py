"""
decay_pricing — ценовые кривые с затуханием (Dutch auction) в fixed-point

Цена единицы актива как детерминированная функция времени с начала продажи.
Все значения в WAD (10**18 = 1.0).
"""

from decay_pricing.core.curves import (
    DiscretizedCurve,
    ExponentialCurve,
    LinearCurve,
    PriceCurve,
    build_curve,
)
from decay_pricing.core.errors import (
    DivideByZero,
    FixedPointDomainError,
    FixedPointOverflow,
    InvalidParameter,
    InvalidResult,
    PriceCurveError,
    PriceUnderflow,
)
from decay_pricing.core.math import WAD

__all__ = [
    "WAD",
    # Curves
    "PriceCurve",
    "LinearCurve",
    "ExponentialCurve",
    "DiscretizedCurve",
    "build_curve",
    # Errors
    "PriceCurveError",
    "InvalidParameter",
    "InvalidResult",
    "PriceUnderflow",
    "DivideByZero",
    "FixedPointOverflow",
    "FixedPointDomainError",
]
