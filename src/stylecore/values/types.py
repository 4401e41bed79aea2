"""Value types carried by style rules."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Generic, TypeVar, Union

from stylecore.values.enums import GlobalValue

T = TypeVar("T")


def check_unsigned(name: str, value: int, bits: int) -> None:
    """Reject non-integers and integers that do not fit an unsigned field of ``bits`` width."""
    if not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    limit = (1 << bits) - 1
    if not 0 <= value <= limit:
        raise ValueError(f"{name} must be between 0 and {limit}, got {value}")


# ---------------------------------------------------------------------------
# Value[T]
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Normal(Generic[T]):
    """A concrete value of the property's own type."""

    value: T


@dataclass(frozen=True)
class Global:
    """A CSS-wide keyword used in place of a property's own value."""

    keyword: GlobalValue


# Either a concrete value or a CSS-wide keyword, e.g. Value[TimeValue].
Value = Union[Normal[T], Global]


def normal(value: T) -> Normal[T]:
    return Normal(value)


def initial() -> Global:
    return Global(GlobalValue.INITIAL)


def inherit() -> Global:
    return Global(GlobalValue.INHERIT)


def unset() -> Global:
    return Global(GlobalValue.UNSET)


# ---------------------------------------------------------------------------
# TimeValue
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Milliseconds:
    amount: int

    def __post_init__(self) -> None:
        check_unsigned("Milliseconds", self.amount, 64)


@dataclass(frozen=True)
class Seconds:
    amount: int

    def __post_init__(self) -> None:
        check_unsigned("Seconds", self.amount, 32)


@dataclass(frozen=True)
class Minutes:
    amount: int

    def __post_init__(self) -> None:
        check_unsigned("Minutes", self.amount, 16)


@dataclass(frozen=True)
class Hours:
    amount: int

    def __post_init__(self) -> None:
        check_unsigned("Hours", self.amount, 8)


# Units are never normalized: Milliseconds(1000) != Seconds(1).
TimeValue = Union[Milliseconds, Seconds, Minutes, Hours]


# ---------------------------------------------------------------------------
# AnimationTimingFunction
# ---------------------------------------------------------------------------


class TimingCurve(StrEnum):
    """Named timing functions."""

    LINEAR = "linear"
    EASE = "ease"
    EASE_IN = "ease-in"
    EASE_OUT = "ease-out"
    EASE_IN_OUT = "ease-in-out"
    STEP_START = "step-start"
    STEP_END = "step-end"


@dataclass(frozen=True)
class Steps:
    """``steps(count, start|end)``; ``at_start`` is True for ``start``."""

    count: int
    at_start: bool


@dataclass(frozen=True)
class CubicBezier:
    x1: float
    y1: float
    x2: float
    y2: float


AnimationTimingFunction = Union[TimingCurve, Steps, CubicBezier]


# ---------------------------------------------------------------------------
# Color
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Color:
    """An RGBA color.

    Channels are 0-255. ``alpha`` is not range checked; callers are expected
    to pass 0.0-1.0. Equality is exact, including ``alpha``.
    """

    red: int
    green: int
    blue: int
    alpha: float = 1.0

    def __post_init__(self) -> None:
        for channel in ("red", "green", "blue"):
            check_unsigned(channel, getattr(self, channel), 8)
