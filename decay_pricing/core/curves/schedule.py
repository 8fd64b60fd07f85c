"""
Price Schedule — цены кривой на наборе моментов времени

Утилиты для публикации расписания цен:
- price_schedule: цены для последовательности моментов
- step_boundaries: моменты, в которых ступенчатая цена может измениться
"""

from typing import Final, Iterable

from decay_pricing.core.curves.base import PriceCurve
from decay_pricing.core.curves.discrete import DiscretizedCurve

# Максимум точек в step_boundaries по умолчанию
MAX_SCHEDULE_POINTS_DEFAULT: Final[int] = 10_000


def price_schedule(curve: PriceCurve, times: Iterable[int]) -> list[int]:
    """
    Цены кривой для последовательности моментов времени.

    Первая же ошибка (PriceUnderflow, FixedPointOverflow, DivideByZero)
    пропагируется: частичное расписание не возвращается.

    Args:
        curve: Любая PriceCurve
        times: Моменты времени с начала продажи (WAD)

    Returns:
        [curve.price_at(t) for t in times]

    Examples:
        >>> curve = LinearCurve(initial_price=10 * WAD, decay_rate=-WAD)
        >>> price_schedule(curve, [0, WAD]) == [10 * WAD, 11 * WAD]
        True
    """
    return [curve.price_at(t) for t in times]


def step_boundaries(
    curve: DiscretizedCurve,
    start: int,
    stop: int,
    max_points: int = MAX_SCHEDULE_POINTS_DEFAULT,
) -> list[int]:
    """
    Квантованные моменты времени в [start, stop].

    Каждый момент — начало ступени: на интервале до следующего момента
    цена постоянна. Из-за усечения к нулю ступень вокруг нуля
    (-step, step) одна и та же, поэтому 0 встречается один раз.

    Args:
        curve: Дискретизированная кривая
        start: Начало окна (WAD)
        stop: Конец окна (WAD), stop >= start
        max_points: Ограничение на размер результата

    Returns:
        Отсортированный список различных quantize(t) для t в [start, stop]

    Raises:
        ValueError: Если stop < start или точек больше max_points
        DivideByZero: Если step_size == 0
    """
    if stop < start:
        raise ValueError(f"stop must be >= start, got start={start}, stop={stop}")

    first = curve.quantize(start)
    last = curve.quantize(stop)
    step = abs(curve.step_size)

    num_points = (last - first) // step + 1
    if num_points > max_points:
        raise ValueError(
            f"Schedule has {num_points} points, exceeds max_points={max_points}"
        )

    return list(range(first, last + 1, step))
