from __future__ import annotations


class ScaleError(ValueError):
    pass


class UnknownFactorError(ScaleError):
    def __init__(self, factor: object) -> None:
        super().__init__(f"unknown factor: {factor!r}")
        self.factor = factor


class DuplicateFactorError(ScaleError):
    def __init__(self, duplicates: list[str]) -> None:
        super().__init__(f"factors must be unique, duplicated: {duplicates!r}")
        self.duplicates = duplicates


class DegenerateIntervalError(ScaleError):
    def __init__(self, name: str, interval: tuple[float, float]) -> None:
        super().__init__(f"{name} interval is degenerate: {interval[0]!r} == {interval[1]!r}")
        self.interval = interval


class InvalidFactorError(ScaleError):
    pass


class InvalidCategoricalValueError(ScaleError):
    pass


class InvalidRenderValueError(ScaleError):
    pass


class ScaleConfigError(ScaleError):
    pass
