from __future__ import annotations

from dataclasses import dataclass
import logging
import math
from pathlib import Path
import tomllib
from typing import Any, Mapping

from catscale.errors import ScaleConfigError
from catscale.ranges import FactorRange, Range1d
from catscale.scales import CategoricalScale


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class FactorRangeConfig:
    factors: tuple[str, ...]
    range_padding: float = 0.0

    def __post_init__(self) -> None:
        if self.range_padding != 0.0:
            raise ScaleConfigError(f"non-zero range_padding is not supported: {self.range_padding!r}")

    def build(self) -> FactorRange:
        return FactorRange(self.factors, range_padding=self.range_padding)


@dataclass(frozen=True)
class Range1dConfig:
    start: float
    end: float

    def build(self) -> Range1d:
        return Range1d(start=self.start, end=self.end)


@dataclass(frozen=True)
class CategoricalScaleConfig:
    source_range: FactorRangeConfig
    target_range: Range1dConfig

    def build(self) -> CategoricalScale:
        return CategoricalScale(source_range=self.source_range.build(), target_range=self.target_range.build())


def parse_scale_config(raw: Mapping[str, Any]) -> CategoricalScaleConfig:
    source = _expect_table(raw.get("source_range"), "source_range")
    target = _expect_table(raw.get("target_range"), "target_range")
    try:
        factors = source["factors"]
        start = target["start"]
        end = target["end"]
    except KeyError as exc:
        raise ScaleConfigError(f"scale config missing required field: {exc.args[0]}") from exc
    if isinstance(factors, str) or not isinstance(factors, (list, tuple)):
        raise ScaleConfigError("source_range.factors must be a list of strings")
    for i, factor in enumerate(factors):
        if not isinstance(factor, str):
            raise ScaleConfigError(f"source_range.factors[{i}] must be a string")
    return CategoricalScaleConfig(
        source_range=FactorRangeConfig(
            factors=tuple(factors),
            range_padding=_require_number(source.get("range_padding", 0.0), "source_range.range_padding"),
        ),
        target_range=Range1dConfig(
            start=_require_number(start, "target_range.start"),
            end=_require_number(end, "target_range.end"),
        ),
    )


def load_scale_config(path: str | Path) -> CategoricalScaleConfig:
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"scale config not found: {config_path}")
    with config_path.open("rb") as f:
        try:
            raw = tomllib.load(f)
        except tomllib.TOMLDecodeError as exc:
            raise ScaleConfigError(f"invalid scale config {config_path}: {exc}") from exc
    config = parse_scale_config(raw)
    LOGGER.info(
        "loaded categorical scale config from %s (%d factors)",
        config_path,
        len(config.source_range.factors),
    )
    return config


def _expect_table(value: Any, name: str) -> Mapping[str, Any]:
    if value is None:
        raise ScaleConfigError(f"scale config missing required field: {name}")
    if not isinstance(value, Mapping):
        raise ScaleConfigError(f"{name} must be a table")
    return value


def _require_number(value: Any, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ScaleConfigError(f"{name} must be a number")
    out = float(value)
    if not math.isfinite(out):
        raise ScaleConfigError(f"{name} must be finite")
    return out
