from __future__ import annotations

from typing import Any

import numpy as np

from catscale.adapters.normalize import coerce_categorical_values, coerce_render_values
from catscale.errors import InvalidRenderValueError
from catscale.interpolate import LinearInterpolator
from catscale.ranges import FactorRange, FactorSnapshot, Range1d
from catscale.values import as_categorical_value


class Scale:
    """Maps a source range onto `target_range`; the interpolator is rebuilt from live state on each call."""

    target_range: Range1d

    def interpolator(self) -> LinearInterpolator:
        raise NotImplementedError

    def invert(self, value: float) -> float:
        return self.interpolator().inverse(_render_scalar(value))

    def v_invert(self, values: Any) -> np.ndarray:
        ys = coerce_render_values(values)
        return self.interpolator().v_inverse(ys)


class LinearScale(Scale):
    def __init__(self, source_range: Range1d, target_range: Range1d) -> None:
        self.source_range = source_range
        self.target_range = target_range

    def interpolator(self) -> LinearInterpolator:
        d0, d1 = self.source_range.bounds()
        r0, r1 = self.target_range.bounds()
        return LinearInterpolator.between(d0, d1, r0, r1)

    def compute(self, value: float) -> float:
        return self.interpolator().forward(_render_scalar(value))

    def v_compute(self, values: Any) -> np.ndarray:
        xs = coerce_render_values(values)
        return self.interpolator().v_forward(xs)


class CategoricalScale(Scale):
    """Maps factors, or `(factor, offset)` pairs, onto `target_range`.

    `invert` returns the synthetic coordinate (factor `i` centers at `i + 0.5`),
    not a factor label.
    """

    def __init__(self, source_range: FactorRange, target_range: Range1d) -> None:
        self.source_range = source_range
        self.target_range = target_range

    def interpolator(self) -> LinearInterpolator:
        _, interp = self._state()
        return interp

    def compute(self, value: Any) -> float:
        resolved = as_categorical_value(value)
        factors, interp = self._state()
        return interp.forward(factors.synthetic(resolved))

    def v_compute(self, values: Any) -> np.ndarray:
        resolved = coerce_categorical_values(values)
        factors, interp = self._state()
        synthetic = np.empty(len(resolved), dtype=np.float64)
        for i, value in enumerate(resolved):
            synthetic[i] = factors.synthetic(value)
        return interp.v_forward(synthetic)

    def _state(self) -> tuple[FactorSnapshot, LinearInterpolator]:
        factors = self.source_range.snapshot()
        r0, r1 = self.target_range.bounds()
        return factors, LinearInterpolator.between(factors.start, factors.end, r0, r1)


def _render_scalar(value: Any) -> float:
    if isinstance(value, (bool, str, bytes)):
        raise InvalidRenderValueError(f"expected a number, got {value!r}")
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidRenderValueError(f"expected a number, got {value!r}") from exc
