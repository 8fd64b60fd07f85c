"""
Core math modules для decay_pricing

Fixed-point примитивы (WAD, 18 знаков) с детерминированным округлением к нулю.
"""

from decay_pricing.core.math.fixed_point import (
    # Constants
    DECIMAL_PRECISION,
    EXP_MAX_INPUT,
    EXP_MIN_INPUT,
    FIXED_DECIMALS,
    INT256_MAX,
    INT256_MIN,
    UINT256_MAX,
    WAD,
    # Range
    check_int256,
    is_int256,
    # Arithmetic
    div_trunc,
    exp,
    ln,
    mul,
    unsafe_mul,
    # Conversions
    from_fixed,
    to_fixed,
    to_fixed_decimal,
)

__all__ = [
    # Fixed Point — Constants
    "DECIMAL_PRECISION",
    "EXP_MAX_INPUT",
    "EXP_MIN_INPUT",
    "FIXED_DECIMALS",
    "INT256_MAX",
    "INT256_MIN",
    "UINT256_MAX",
    "WAD",
    # Fixed Point — Range
    "check_int256",
    "is_int256",
    # Fixed Point — Arithmetic
    "div_trunc",
    "exp",
    "ln",
    "mul",
    "unsafe_mul",
    # Fixed Point — Conversions
    "from_fixed",
    "to_fixed",
    "to_fixed_decimal",
]
