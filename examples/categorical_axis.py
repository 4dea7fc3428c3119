from __future__ import annotations

import logging

from catscale import CategoricalScale, FactorRange, Range1d


def main() -> None:
    logging.basicConfig(level=logging.DEBUG)
    factors = FactorRange(["foo", "bar", "baz"])
    scale = CategoricalScale(source_range=factors, target_range=Range1d(start=20, end=80))

    print("centers:", scale.v_compute(factors.factors).tolist())
    print("bar slot:", scale.v_compute([("bar", -0.5), ("bar", 0.5)]).tolist())
    print("pixel 45 ->", scale.invert(45))

    factors.set_factors(["a", "b", "c", "d"])
    print("after update:", scale.v_compute(factors.factors).tolist())


if __name__ == "__main__":
    main()
