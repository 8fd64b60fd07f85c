"""
Ценовые кривые (Dutch auction / decaying price)

LinearCurve и ExponentialCurve — законы цены, DiscretizedCurve — обёртка,
квантующая время. Все кривые immutable и удовлетворяют протоколу PriceCurve.
"""

from decay_pricing.core.curves.base import (
    CurveKind,
    PriceCurve,
    to_price,
    validate_wad,
)
from decay_pricing.core.curves.config import (
    CurveConfig,
    DiscretizedCurveConfig,
    ExponentialCurveConfig,
    LinearCurveConfig,
    build_curve,
    curve_to_config,
    parse_curve_config,
)
from decay_pricing.core.curves.discrete import DiscretizedCurve
from decay_pricing.core.curves.exponential import (
    ExponentialCurve,
    decay_rate_from_percent,
)
from decay_pricing.core.curves.linear import LinearCurve
from decay_pricing.core.curves.schedule import (
    MAX_SCHEDULE_POINTS_DEFAULT,
    price_schedule,
    step_boundaries,
)

__all__ = [
    # Base — Types
    "CurveKind",
    "PriceCurve",
    # Base — Functions
    "to_price",
    "validate_wad",
    # Curves
    "LinearCurve",
    "ExponentialCurve",
    "DiscretizedCurve",
    "decay_rate_from_percent",
    # Config
    "CurveConfig",
    "LinearCurveConfig",
    "ExponentialCurveConfig",
    "DiscretizedCurveConfig",
    "build_curve",
    "curve_to_config",
    "parse_curve_config",
    # Schedule
    "MAX_SCHEDULE_POINTS_DEFAULT",
    "price_schedule",
    "step_boundaries",
]
