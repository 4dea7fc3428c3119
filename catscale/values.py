from __future__ import annotations

from dataclasses import dataclass
import math
from numbers import Real
from typing import Any, TypeAlias

from catscale.errors import InvalidCategoricalValueError


@dataclass(frozen=True)
class FactorLabel:
    factor: str


@dataclass(frozen=True)
class FactorOffset:
    factor: str
    offset: float


CategoricalValue: TypeAlias = FactorLabel | FactorOffset


def as_categorical_value(raw: Any) -> CategoricalValue:
    """Resolve a bare label or a `(label, offset)` pair into a CategoricalValue."""

    if isinstance(raw, (FactorLabel, FactorOffset)):
        return raw
    if isinstance(raw, str):
        return FactorLabel(factor=str(raw))
    if isinstance(raw, (tuple, list)):
        if len(raw) == 2 and isinstance(raw[0], str) and _is_offset(raw[1]):
            offset = float(raw[1])
            if not math.isfinite(offset):
                raise InvalidCategoricalValueError(f"offset must be finite: {raw!r}")
            return FactorOffset(factor=str(raw[0]), offset=offset)
        if len(raw) >= 2 and all(isinstance(part, str) for part in raw):
            raise InvalidCategoricalValueError(f"multi-level factors are not supported: {raw!r}")
    raise InvalidCategoricalValueError(f"expected a factor or (factor, offset) pair, got {raw!r}")


def _is_offset(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)
