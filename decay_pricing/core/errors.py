"""
Ошибки ценовых кривых и fixed-point арифметики

Единая таксономия исключений для всего пакета:
- InvalidParameter: нарушение инварианта при конструировании кривой
- InvalidResult / PriceUnderflow: цена вне беззнакового диапазона
- DivideByZero: нулевой шаг дискретизации
- FixedPointOverflow / FixedPointDomainError: ошибки fixed-point примитивов

Все ошибки детерминированы: повтор с теми же входами даёт ту же ошибку,
поэтому нигде нет retry и нигде нет clamp результата.
"""


class PriceCurveError(Exception):
    """Базовый класс всех ошибок пакета."""
    pass


class InvalidParameter(PriceCurveError, ValueError):
    """
    Нарушен инвариант параметров при конструировании кривой.

    Примеры:
    - decay_rate >= 0 для LinearCurve
    - decay_percent вне (0, WAD) для ExponentialCurve

    Экземпляр кривой при этом не создаётся.
    """
    pass


class InvalidResult(PriceCurveError):
    """Вычисленная цена не представима как беззнаковое значение (uint256)."""
    pass


class PriceUnderflow(InvalidResult):
    """Вычисленная цена отрицательна."""
    pass


class DivideByZero(PriceCurveError, ZeroDivisionError):
    """Деление на ноль (например, step_size == 0 у DiscretizedCurve)."""
    pass


class FixedPointOverflow(PriceCurveError, ArithmeticError):
    """Переполнение int256 в fixed-point операции (checked mul, exp)."""
    pass


class FixedPointDomainError(PriceCurveError, ValueError):
    """Аргумент вне области определения (ln(x) при x <= 0)."""
    pass
