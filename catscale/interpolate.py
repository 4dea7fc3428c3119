from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from catscale.errors import DegenerateIntervalError


@dataclass(frozen=True)
class LinearInterpolator:
    """Two-point linear map from `domain` onto `target`, with its inverse.

    Both directions share one coefficient pair, ``factor`` and ``offset``:
    forward is ``factor * x + offset`` and inverse is ``(y - offset) / factor``.
    """

    domain: tuple[float, float]
    target: tuple[float, float]

    @classmethod
    def between(cls, d0: float, d1: float, r0: float, r1: float) -> "LinearInterpolator":
        return cls(domain=(float(d0), float(d1)), target=(float(r0), float(r1)))

    def coefficients(self) -> tuple[float, float]:
        d0, d1 = self.domain
        r0, r1 = self.target
        if d1 == d0:
            raise DegenerateIntervalError("domain", self.domain)
        factor = (r1 - r0) / (d1 - d0)
        offset = -(factor * d0) + r0
        return factor, offset

    def _inverse_coefficients(self) -> tuple[float, float]:
        r0, r1 = self.target
        if r1 == r0:
            raise DegenerateIntervalError("range", self.target)
        return self.coefficients()

    def forward(self, x: float) -> float:
        factor, offset = self.coefficients()
        return factor * float(x) + offset

    def inverse(self, y: float) -> float:
        factor, offset = self._inverse_coefficients()
        return (float(y) - offset) / factor

    def v_forward(self, xs: np.ndarray) -> np.ndarray:
        factor, offset = self.coefficients()
        return factor * np.asarray(xs, dtype=np.float64) + offset

    def v_inverse(self, ys: np.ndarray) -> np.ndarray:
        factor, offset = self._inverse_coefficients()
        return (np.asarray(ys, dtype=np.float64) - offset) / factor
