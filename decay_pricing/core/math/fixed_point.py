"""
Fixed-Point Math — знаковая 18-десятичная арифметика (WAD)

Модуль реализует fixed-point примитивы, на которых строятся ценовые кривые:
- WAD-масштаб: целое 10**18 представляет 1.0
- Умножение с усечением к нулю (checked и unchecked варианты)
- Целочисленное деление с усечением к нулю (не floor!)
- Натуральный логарифм и экспонента
- Конверсии int/Decimal ↔ WAD

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все значения — python int в диапазоне int256 (проверяется в checked путях)
2. Округление везде к нулю: int(Decimal) и div_trunc
3. ln(WAD) == 0 и exp(0) == WAD точно
4. Все операции детерминированы: Decimal контекст фиксирован, float не используется
"""

from decimal import Context, Decimal, InvalidOperation, Overflow, ROUND_HALF_EVEN
from typing import Final

from decay_pricing.core.errors import (
    DivideByZero,
    FixedPointDomainError,
    FixedPointOverflow,
)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Количество десятичных знаков fixed-point представления
FIXED_DECIMALS: Final[int] = 18

# 1.0 в fixed-point
WAD: Final[int] = 10**FIXED_DECIMALS

# Диапазон знаковых значений (int256)
INT256_MIN: Final[int] = -(2**255)
INT256_MAX: Final[int] = 2**255 - 1

# Максимум беззнакового результата (uint256)
UINT256_MAX: Final[int] = 2**256 - 1

# Граница переполнения exp: exp(x) для x >= EXP_MAX_INPUT не помещается в int256
EXP_MAX_INPUT: Final[int] = 135305999368893231589

# Нижняя граница exp: для x <= EXP_MIN_INPUT результат округляется в 0
EXP_MIN_INPUT: Final[int] = -42139678854452767551

# Точность Decimal контекста для ln/exp (значащих цифр).
# int256 занимает 78 цифр, запас покрывает дробную часть с 18 знаками.
DECIMAL_PRECISION: Final[int] = 100

_WAD_DECIMAL: Final[Decimal] = Decimal(WAD)


def _context() -> Context:
    # Новый контекст на вызов: Context не потокобезопасен при общем использовании
    return Context(prec=DECIMAL_PRECISION, rounding=ROUND_HALF_EVEN, traps=[InvalidOperation, Overflow])


# =============================================================================
# ДИАПАЗОН
# =============================================================================


def is_int256(value: int) -> bool:
    """Проверка, что значение помещается в int256."""
    return INT256_MIN <= value <= INT256_MAX


def check_int256(value: int, operation: str) -> int:
    """
    Проверка диапазона int256.

    Args:
        value: Результат операции
        operation: Имя операции (для сообщения об ошибке)

    Returns:
        value без изменений

    Raises:
        FixedPointOverflow: Если value вне int256
    """
    if not is_int256(value):
        raise FixedPointOverflow(f"{operation} overflows int256: {value}")
    return value


# =============================================================================
# ДЕЛЕНИЕ И УМНОЖЕНИЕ
# =============================================================================


def div_trunc(numerator: int, denominator: int) -> int:
    """
    Целочисленное деление с усечением к нулю.

    ВАЖНО: в отличие от оператора //, который округляет к -inf,
    здесь -7 / 2 = -3 (а не -4).

    Args:
        numerator: Числитель
        denominator: Знаменатель

    Returns:
        trunc(numerator / denominator)

    Raises:
        DivideByZero: Если denominator == 0

    Examples:
        >>> div_trunc(7, 2)
        3
        >>> div_trunc(-7, 2)
        -3
        >>> div_trunc(-1, 10)
        0
    """
    if denominator == 0:
        raise DivideByZero(f"Division by zero: {numerator} / 0")

    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        return -quotient
    return quotient


def unsafe_mul(a: int, b: int) -> int:
    """
    Fixed-point умножение без проверки переполнения.

    (a * b) / WAD с усечением к нулю. Для путей, где вызывающий код
    уже ограничил входы.
    """
    return div_trunc(a * b, WAD)


def mul(a: int, b: int) -> int:
    """
    Checked fixed-point умножение.

    Формула: (a * b) / WAD с усечением к нулю.
    Промежуточное произведение a * b обязано помещаться в int256,
    тогда и результат гарантированно в int256.

    Args:
        a: Множитель (WAD)
        b: Множитель (WAD)

    Returns:
        Произведение (WAD)

    Raises:
        FixedPointOverflow: Если a * b вне int256

    Examples:
        >>> mul(2 * WAD, 3 * WAD) == 6 * WAD
        True
        >>> mul(-1, WAD // 2)  # -0.5 units → 0 (к нулю)
        0
    """
    product = check_int256(a * b, "mul")
    return div_trunc(product, WAD)


# =============================================================================
# LN / EXP
# =============================================================================


def ln(x: int) -> int:
    """
    Натуральный логарифм fixed-point значения.

    Args:
        x: Аргумент (WAD), x > 0

    Returns:
        ln(x / WAD) * WAD, усечённое к нулю

    Raises:
        FixedPointDomainError: Если x <= 0

    Examples:
        >>> ln(WAD)
        0
        >>> ln(WAD // 2)
        -693147180559945309
    """
    if x <= 0:
        raise FixedPointDomainError(f"ln undefined for x <= 0, got {x}")

    ctx = _context()
    value = ctx.ln(ctx.divide(Decimal(x), _WAD_DECIMAL))
    return int(ctx.multiply(value, _WAD_DECIMAL))


def exp(x: int) -> int:
    """
    Натуральная экспонента fixed-point значения.

    Поведение на границах:
    - x <= EXP_MIN_INPUT → 0 (результат меньше 1 wei)
    - x >= EXP_MAX_INPUT → FixedPointOverflow

    Args:
        x: Показатель (WAD)

    Returns:
        exp(x / WAD) * WAD, усечённое к нулю

    Raises:
        FixedPointOverflow: Если результат не помещается в int256

    Examples:
        >>> exp(0) == WAD
        True
        >>> exp(WAD)
        2718281828459045235
    """
    if x <= EXP_MIN_INPUT:
        return 0

    if x >= EXP_MAX_INPUT:
        raise FixedPointOverflow(
            f"exp overflows int256: x={x} >= EXP_MAX_INPUT={EXP_MAX_INPUT}"
        )

    ctx = _context()
    value = ctx.exp(ctx.divide(Decimal(x), _WAD_DECIMAL))
    return int(ctx.multiply(value, _WAD_DECIMAL))


# =============================================================================
# КОНВЕРСИИ
# =============================================================================


def to_fixed(value: int) -> int:
    """
    Конверсия целого в fixed-point (без потерь).

    Examples:
        >>> to_fixed(5) == 5 * WAD
        True
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"to_fixed expects int, got {type(value).__name__}")
    return check_int256(value * WAD, "to_fixed")


def to_fixed_decimal(value: Decimal | str | int) -> int:
    """
    Конверсия десятичного значения в fixed-point.

    Цифры после 18-го знака отбрасываются (усечение к нулю).

    Args:
        value: Decimal, десятичная строка ("0.25", "-1.5") или int

    Returns:
        Значение в WAD

    Raises:
        ValueError: Если value не конечно (NaN, Infinity)
        decimal.InvalidOperation: Если строка не является десятичным числом

    Examples:
        >>> to_fixed_decimal("0.25") == WAD // 4
        True
        >>> to_fixed_decimal("-1.5") == -3 * WAD // 2
        True
    """
    if isinstance(value, float):
        raise TypeError("float is not accepted, use Decimal or str")

    decimal_value = Decimal(value)
    if not decimal_value.is_finite():
        raise ValueError(f"value must be finite, got {value}")

    ctx = _context()
    return check_int256(int(ctx.multiply(decimal_value, _WAD_DECIMAL)), "to_fixed_decimal")


def from_fixed(value: int) -> Decimal:
    """
    Конверсия fixed-point в Decimal (точно, для отображения и логов).

    Examples:
        >>> from_fixed(15 * WAD)
        Decimal('15')
        >>> from_fixed(WAD // 4)
        Decimal('0.25')
    """
    return _context().divide(Decimal(value), _WAD_DECIMAL)
