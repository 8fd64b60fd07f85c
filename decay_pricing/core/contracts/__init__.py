"""
Contract Validation Module

Модуль для валидации JSON конфигураций ценовых кривых.
"""

from .validators import (
    ContractValidator,
    PriceCurveValidator,
    SchemaLoader,
    validate_price_curve,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "PriceCurveValidator",
    # Functions
    "validate_price_curve",
]
