"""Value layer -- public type re-exports."""

from stylecore.values.enums import (
    AnimationDirection,
    AnimationFillMode,
    BackgroundAttachment,
    BackgroundBlendMode,
    BackgroundClip,
    FlexItemDirection,
    GlobalValue,
)
from stylecore.values.types import (
    AnimationTimingFunction,
    Color,
    CubicBezier,
    Global,
    Hours,
    Milliseconds,
    Minutes,
    Normal,
    Seconds,
    Steps,
    TimeValue,
    TimingCurve,
    Value,
    inherit,
    initial,
    normal,
    unset,
)

__all__ = [
    # enums
    "FlexItemDirection",
    "GlobalValue",
    "AnimationDirection",
    "AnimationFillMode",
    "BackgroundAttachment",
    "BackgroundBlendMode",
    "BackgroundClip",
    # value slot
    "Value",
    "Normal",
    "Global",
    "normal",
    "initial",
    "inherit",
    "unset",
    # time
    "TimeValue",
    "Milliseconds",
    "Seconds",
    "Minutes",
    "Hours",
    # timing functions
    "AnimationTimingFunction",
    "TimingCurve",
    "Steps",
    "CubicBezier",
    # color
    "Color",
]
