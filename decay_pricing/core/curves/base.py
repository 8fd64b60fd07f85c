"""
PriceCurve — общий контракт ценовых кривых

Кривая — чистая функция времени с момента старта продажи:

    price_at(time_since_start) -> price

Оба значения в WAD (10**18 = 1.0). Время знаковое (может быть < 0),
цена — беззнаковая (uint256). Кривые immutable, вызов price_at не имеет
побочных эффектов и безопасен из любого числа потоков.

Варианты:
- LinearCurve (linear.py): аффинный закон
- ExponentialCurve (exponential.py): initial_price * exp(decay_rate * t)
- DiscretizedCurve (discrete.py): обёртка, квантующая время
"""

from enum import Enum
from typing import Protocol, runtime_checkable

from decay_pricing.core.errors import InvalidParameter, InvalidResult, PriceUnderflow
from decay_pricing.core.math.fixed_point import UINT256_MAX


# =============================================================================
# ENUMS
# =============================================================================


class CurveKind(str, Enum):
    """Тип закона цены"""

    LINEAR = "linear"
    EXPONENTIAL = "exponential"
    DISCRETIZED = "discretized"


# =============================================================================
# CONTRACT
# =============================================================================


@runtime_checkable
class PriceCurve(Protocol):
    """
    Capability ценовой кривой.

    Любой объект с price_at(int) -> int удовлетворяет контракту и может быть
    обёрнут в DiscretizedCurve.
    """

    def price_at(self, time_since_start: int) -> int:
        """
        Цена в момент time_since_start.

        Args:
            time_since_start: Время с начала продажи (WAD, знаковое)

        Returns:
            Цена (WAD, 0 <= price <= UINT256_MAX)
        """
        ...


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_wad(value: int, name: str) -> None:
    """
    Валидация, что значение — fixed-point int.

    float запрещён: кривые работают только в точной целочисленной арифметике.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        InvalidParameter: Если value не int (bool тоже отвергается)
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidParameter(
            f"{name} must be a fixed-point int (WAD), got {type(value).__name__}: {value!r}"
        )


# =============================================================================
# RESULT CONVERSION
# =============================================================================


def to_price(value: int) -> int:
    """
    Интерпретация знакового результата как беззнаковой цены.

    Никакого clamp: отрицательная цена и выход за uint256 — ошибки.

    Args:
        value: Знаковый результат формулы кривой

    Returns:
        value без изменений

    Raises:
        PriceUnderflow: Если value < 0
        InvalidResult: Если value > UINT256_MAX
    """
    if value < 0:
        raise PriceUnderflow(f"Price is negative: {value}")

    if value > UINT256_MAX:
        raise InvalidResult(f"Price exceeds uint256: {value}")

    return value
