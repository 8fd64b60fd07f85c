"""
Curve Config — конфигурация и фабрика ценовых кривых

Immutable Pydantic модели, описывающие кривую как данные (dict / JSON),
и фабрика build_curve, превращающая конфигурацию в экземпляр кривой.

Порядок проверок в build_curve(dict):
1. JSON Schema контракт (price_curve.json) → jsonschema.ValidationError
2. Pydantic парсинг (типы, discriminator по kind) → pydantic.ValidationError
3. Инварианты кривой (decay_rate < 0 и т.д.) → InvalidParameter

Целочисленные поля принимают int или строку цифр: значения в WAD часто
больше 2**53 и не переживают JSON-парсеры с float. Поля strict: float
(даже 5e17) и bool отвергаются, а не округляются молча до int.
"""

import logging
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field, TypeAdapter, field_validator

from decay_pricing.core.contracts import validate_price_curve
from decay_pricing.core.curves.base import PriceCurve
from decay_pricing.core.curves.discrete import DiscretizedCurve
from decay_pricing.core.curves.exponential import ExponentialCurve
from decay_pricing.core.curves.linear import LinearCurve

logger = logging.getLogger(__name__)


def _parse_wad(value: Any) -> Any:
    # Строки цифр → int до стандартной валидации pydantic
    if isinstance(value, str):
        stripped = value.strip()
        if stripped.lstrip("-").isdigit():
            return int(stripped)
    return value


# =============================================================================
# CURVE CONFIG MODELS
# =============================================================================


class LinearCurveConfig(BaseModel):
    """Конфигурация LinearCurve."""

    kind: Literal["linear"] = "linear"
    initial_price: int = Field(..., strict=True, description="Цена при t = 0 (WAD)")
    decay_rate: int = Field(..., strict=True, description="Изменение цены за единицу времени (WAD), < 0")

    model_config = {"frozen": True, "extra": "forbid"}

    @field_validator("initial_price", "decay_rate", mode="before")
    @classmethod
    def parse_wad(cls, v: Any) -> Any:
        return _parse_wad(v)

    def build(self) -> LinearCurve:
        return LinearCurve(initial_price=self.initial_price, decay_rate=self.decay_rate)


class ExponentialCurveConfig(BaseModel):
    """Конфигурация ExponentialCurve."""

    kind: Literal["exponential"] = "exponential"
    initial_price: int = Field(..., strict=True, description="Масштаб цены (WAD)")
    decay_percent: int = Field(..., strict=True, description="Доля падения цены за единицу времени (WAD)")

    model_config = {"frozen": True, "extra": "forbid"}

    @field_validator("initial_price", "decay_percent", mode="before")
    @classmethod
    def parse_wad(cls, v: Any) -> Any:
        return _parse_wad(v)

    def build(self) -> ExponentialCurve:
        return ExponentialCurve(
            initial_price=self.initial_price,
            decay_percent=self.decay_percent,
        )


class DiscretizedCurveConfig(BaseModel):
    """
    Конфигурация DiscretizedCurve.

    step_size == 0 допустим на уровне конфигурации: ошибка DivideByZero
    возникает при запросе цены. inner может быть любой кривой, включая
    другую DiscretizedCurveConfig.
    """

    kind: Literal["discretized"] = "discretized"
    step_size: int = Field(..., strict=True, description="Шаг квантования времени (WAD)")
    inner: "CurveConfig"

    model_config = {"frozen": True, "extra": "forbid"}

    @field_validator("step_size", mode="before")
    @classmethod
    def parse_wad(cls, v: Any) -> Any:
        return _parse_wad(v)

    def build(self) -> DiscretizedCurve:
        return DiscretizedCurve(inner=self.inner.build(), step_size=self.step_size)


CurveConfig = Annotated[
    Union[LinearCurveConfig, ExponentialCurveConfig, DiscretizedCurveConfig],
    Field(discriminator="kind"),
]

# inner ссылается на CurveConfig: вложенные обёртки допустимы
DiscretizedCurveConfig.model_rebuild()

_CURVE_CONFIG_ADAPTER: TypeAdapter = TypeAdapter(CurveConfig)


# =============================================================================
# FACTORY
# =============================================================================


def parse_curve_config(
    data: dict[str, Any],
) -> LinearCurveConfig | ExponentialCurveConfig | DiscretizedCurveConfig:
    """
    Парсинг dict в модель конфигурации.

    Args:
        data: Конфигурация кривой (dict, например из JSON)

    Returns:
        Модель конфигурации, выбранная по полю kind

    Raises:
        jsonschema.ValidationError: Если data нарушает контракт price_curve
        pydantic.ValidationError: Если data не проходит валидацию модели
    """
    validate_price_curve(data)
    return _CURVE_CONFIG_ADAPTER.validate_python(data)


def build_curve(
    config: LinearCurveConfig | ExponentialCurveConfig | DiscretizedCurveConfig | dict[str, Any],
) -> PriceCurve:
    """
    Создание кривой из конфигурации.

    Args:
        config: Модель конфигурации или dict

    Returns:
        Экземпляр LinearCurve, ExponentialCurve или DiscretizedCurve

    Raises:
        jsonschema.ValidationError: Если dict нарушает контракт
        pydantic.ValidationError: Если dict не проходит валидацию модели
        InvalidParameter: Если нарушен инвариант кривой

    Examples:
        >>> curve = build_curve({"kind": "linear", "initial_price": "10000000000000000000",
        ...                      "decay_rate": "-1000000000000000000"})
        >>> curve.price_at(2 * WAD) == 12 * WAD
        True
    """
    if isinstance(config, dict):
        config = parse_curve_config(config)

    curve = config.build()
    logger.debug("Built %s curve from config", config.kind)
    return curve


def curve_to_config(curve: PriceCurve) -> dict[str, Any]:
    """
    Сериализация кривой обратно в dict конфигурации.

    WAD значения сериализуются строками (безопасно для любых JSON-парсеров).

    Raises:
        TypeError: Если curve не LinearCurve / ExponentialCurve / DiscretizedCurve
    """
    if isinstance(curve, LinearCurve):
        return {
            "kind": "linear",
            "initial_price": str(curve.initial_price),
            "decay_rate": str(curve.decay_rate),
        }

    if isinstance(curve, ExponentialCurve):
        return {
            "kind": "exponential",
            "initial_price": str(curve.initial_price),
            "decay_percent": str(curve.decay_percent),
        }

    if isinstance(curve, DiscretizedCurve):
        return {
            "kind": "discretized",
            "step_size": str(curve.step_size),
            "inner": curve_to_config(curve.inner),
        }

    raise TypeError(f"Cannot serialize curve of type {type(curve).__name__}")
