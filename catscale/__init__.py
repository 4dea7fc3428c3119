from catscale.config import CategoricalScaleConfig, load_scale_config, parse_scale_config
from catscale.errors import (
    DegenerateIntervalError,
    DuplicateFactorError,
    InvalidCategoricalValueError,
    InvalidFactorError,
    InvalidRenderValueError,
    ScaleConfigError,
    ScaleError,
    UnknownFactorError,
)
from catscale.interpolate import LinearInterpolator
from catscale.ranges import FactorRange, FactorSnapshot, Range1d
from catscale.scales import CategoricalScale, LinearScale, Scale
from catscale.values import CategoricalValue, FactorLabel, FactorOffset, as_categorical_value

__all__ = [
    "CategoricalScale",
    "CategoricalScaleConfig",
    "CategoricalValue",
    "DegenerateIntervalError",
    "DuplicateFactorError",
    "FactorLabel",
    "FactorOffset",
    "FactorRange",
    "FactorSnapshot",
    "InvalidCategoricalValueError",
    "InvalidFactorError",
    "InvalidRenderValueError",
    "LinearInterpolator",
    "LinearScale",
    "Range1d",
    "Scale",
    "ScaleConfigError",
    "ScaleError",
    "UnknownFactorError",
    "as_categorical_value",
    "load_scale_config",
    "parse_scale_config",
]
