from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
import logging
import math
import threading
from types import MappingProxyType
from typing import Any, Iterable, Mapping

import numpy as np

from catscale.errors import (
    DuplicateFactorError,
    InvalidFactorError,
    ScaleConfigError,
    UnknownFactorError,
)
from catscale.values import CategoricalValue, FactorOffset, as_categorical_value


LOGGER = logging.getLogger(__name__)


class Range1d:
    """Mutable two-point numeric range. `start` may exceed `end` (flipped axis)."""

    def __init__(self, start: float = 0.0, end: float = 1.0) -> None:
        self._lock = threading.Lock()
        self._start = _finite(start, "start")
        self._end = _finite(end, "end")
        self._revision = 0

    @property
    def start(self) -> float:
        return self._start

    @start.setter
    def start(self, value: float) -> None:
        self._set(start=_finite(value, "start"))

    @property
    def end(self) -> float:
        return self._end

    @end.setter
    def end(self, value: float) -> None:
        self._set(end=_finite(value, "end"))

    @property
    def revision(self) -> int:
        return self._revision

    def bounds(self) -> tuple[float, float]:
        with self._lock:
            return (self._start, self._end)

    def set_bounds(self, start: float, end: float) -> None:
        self._set(start=_finite(start, "start"), end=_finite(end, "end"))

    def _set(self, *, start: float | None = None, end: float | None = None) -> None:
        # An endpoint passed as None keeps its current value.
        with self._lock:
            if start is not None:
                self._start = start
            if end is not None:
                self._end = end
            self._revision += 1

    def __repr__(self) -> str:
        start, end = self.bounds()
        return f"Range1d(start={start!r}, end={end!r})"


@dataclass(frozen=True)
class FactorSnapshot:
    """Immutable view of one factor sequence. Factor `i` of `n` centers at `i + 0.5` on `[0, n]`."""

    revision: int
    factors: tuple[str, ...]
    index: Mapping[str, int] = field(repr=False)

    @property
    def start(self) -> float:
        return 0.0

    @property
    def end(self) -> float:
        return float(len(self.factors))

    def index_of(self, factor: str) -> int:
        try:
            return self.index[factor]
        except (KeyError, TypeError):
            raise UnknownFactorError(factor) from None

    def synthetic_position(self, factor: str) -> float:
        return self.index_of(factor) + 0.5

    def synthetic(self, value: CategoricalValue) -> float:
        center = self.synthetic_position(value.factor)
        if isinstance(value, FactorOffset):
            return center + value.offset
        return center


class FactorRange:
    """Ordered, duplicate-free set of factors laid out in unit-width slots.

    The factor sequence can be replaced in place with `set_factors` (or by
    assigning `factors`). Every replacement publishes a new `FactorSnapshot`,
    so readers holding the previous snapshot never observe a partial update.
    """

    def __init__(self, factors: Iterable[str] = (), *, range_padding: float = 0.0) -> None:
        self._lock = threading.Lock()
        self._range_padding = _check_padding(range_padding)
        self._snapshot = FactorSnapshot(revision=0, factors=(), index=MappingProxyType({}))
        self._replace(factors, initial=True)

    @property
    def factors(self) -> tuple[str, ...]:
        return self._snapshot.factors

    @factors.setter
    def factors(self, factors: Iterable[str]) -> None:
        self.set_factors(factors)

    @property
    def range_padding(self) -> float:
        return self._range_padding

    @range_padding.setter
    def range_padding(self, value: float) -> None:
        self._range_padding = _check_padding(value)

    @property
    def revision(self) -> int:
        return self._snapshot.revision

    @property
    def start(self) -> float:
        return self._snapshot.start

    @property
    def end(self) -> float:
        return self._snapshot.end

    def snapshot(self) -> FactorSnapshot:
        with self._lock:
            return self._snapshot

    def set_factors(self, factors: Iterable[str]) -> None:
        self._replace(factors, initial=False)

    def index_of(self, factor: str) -> int:
        return self.snapshot().index_of(factor)

    def synthetic_position(self, factor: str) -> float:
        return self.snapshot().synthetic_position(factor)

    def synthetic(self, value: Any) -> float:
        return self.snapshot().synthetic(as_categorical_value(value))

    def v_synthetic(self, values: Iterable[Any]) -> np.ndarray:
        snap = self.snapshot()
        resolved = [as_categorical_value(v) for v in values]
        return np.fromiter((snap.synthetic(v) for v in resolved), dtype=np.float64, count=len(resolved))

    def __len__(self) -> int:
        return len(self._snapshot.factors)

    def __contains__(self, factor: object) -> bool:
        try:
            return factor in self._snapshot.index
        except TypeError:
            return False

    def __repr__(self) -> str:
        return f"FactorRange(factors={list(self.factors)!r}, range_padding={self._range_padding!r})"

    def _replace(self, factors: Iterable[str], *, initial: bool) -> None:
        if isinstance(factors, str):
            raise InvalidFactorError("factors must be a sequence of strings, not a single string")
        labels = tuple(factors)
        for i, label in enumerate(labels):
            if not isinstance(label, str):
                raise InvalidFactorError(f"factors[{i}] must be a string, got {label!r}")
        counts = Counter(labels)
        duplicates = [label for label, count in counts.items() if count > 1]
        if duplicates:
            raise DuplicateFactorError(duplicates)
        index = MappingProxyType({label: i for i, label in enumerate(labels)})
        with self._lock:
            revision = self._snapshot.revision if initial else self._snapshot.revision + 1
            self._snapshot = FactorSnapshot(revision=revision, factors=labels, index=index)
        if not initial:
            LOGGER.debug("factor range replaced: %d factors (revision %d)", len(labels), revision)


def _finite(value: Any, name: str) -> float:
    try:
        out = float(value)
    except (TypeError, ValueError) as exc:
        raise ScaleConfigError(f"{name} must be a number, got {value!r}") from exc
    if not math.isfinite(out):
        raise ScaleConfigError(f"{name} must be finite, got {value!r}")
    return out


def _check_padding(value: Any) -> float:
    padding = _finite(value, "range_padding")
    if padding != 0.0:
        # Padded layouts are not defined for flat factor ranges yet.
        raise ScaleConfigError(f"non-zero range_padding is not supported: {value!r}")
    return padding
