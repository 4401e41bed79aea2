"""Style rules: one Rule subclass per supported CSS property, and Ruleset.

A consumer handles every property by matching on the subclasses::

    match rule:
        case AlignContent(Global(keyword)):
            ...
        case AlignContent(Normal(direction)):
            ...

``RULE_TYPES`` lists every subclass so exhaustiveness can be checked.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, TypeVar

from stylecore import values
from stylecore.selector.model import Selector
from stylecore.values.types import check_unsigned


@dataclass(frozen=True)
class Rule:
    """Base class for a single property declaration.

    Class attributes:
        property_name: The CSS property name, e.g. ``"align-content"``.
        domain: Name of the payload's value type.
        accepts_global: True when the payload is a ``Value[T]`` and so may
            carry a CSS-wide keyword.
    """

    property_name: ClassVar[str] = ""
    domain: ClassVar[str] = ""
    accepts_global: ClassVar[bool] = True


# ---------------------------------------------------------------------------
# Alignment
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class AlignContent(Rule):
    property_name = "align-content"
    domain = "FlexItemDirection"

    value: values.Value[values.FlexItemDirection]


@dataclass(frozen=True)
class AlignItems(Rule):
    property_name = "align-items"
    domain = "FlexItemDirection"

    value: values.Value[values.FlexItemDirection]


@dataclass(frozen=True)
class AlignSelf(Rule):
    property_name = "align-self"
    domain = "FlexItemDirection"

    value: values.Value[values.FlexItemDirection]


@dataclass(frozen=True)
class All(Rule):
    property_name = "all"
    domain = "GlobalValue"
    accepts_global = False

    value: values.GlobalValue


# ---------------------------------------------------------------------------
# Animation
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class AnimationDelay(Rule):
    property_name = "animation-delay"
    domain = "TimeValue"

    value: values.Value[values.TimeValue]


@dataclass(frozen=True)
class AnimationDirection(Rule):
    property_name = "animation-direction"
    domain = "AnimationDirection"

    value: values.Value[values.AnimationDirection]


@dataclass(frozen=True)
class AnimationDuration(Rule):
    property_name = "animation-duration"
    domain = "TimeValue"

    value: values.Value[values.TimeValue]


@dataclass(frozen=True)
class AnimationFillMode(Rule):
    property_name = "animation-fill-mode"
    domain = "AnimationFillMode"

    value: values.Value[values.AnimationFillMode]


@dataclass(frozen=True)
class AnimationIterationCount(Rule):
    property_name = "animation-iteration-count"
    domain = "int"

    value: values.Value[int]

    def __post_init__(self) -> None:
        if isinstance(self.value, values.Normal):
            check_unsigned("AnimationIterationCount", self.value.value, 64)


@dataclass(frozen=True)
class AnimationName(Rule):
    property_name = "animation-name"
    domain = "str"

    value: values.Value[str]


@dataclass(frozen=True)
class AnimationPlayState(Rule):
    """True is ``running``, False is ``paused``."""

    property_name = "animation-play-state"
    domain = "bool"

    value: values.Value[bool]


@dataclass(frozen=True)
class AnimationTimingFunction(Rule):
    property_name = "animation-timing-function"
    domain = "AnimationTimingFunction"

    value: values.Value[values.AnimationTimingFunction]


# ---------------------------------------------------------------------------
# Background
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class BackfaceVisibility(Rule):
    """True is ``visible``, False is ``hidden``."""

    property_name = "backface-visibility"
    domain = "bool"

    value: values.Value[bool]


@dataclass(frozen=True)
class BackgroundAttachment(Rule):
    property_name = "background-attachment"
    domain = "BackgroundAttachment"

    value: values.Value[values.BackgroundAttachment]


@dataclass(frozen=True)
class BackgroundBlendMode(Rule):
    property_name = "background-blend-mode"
    domain = "BackgroundBlendMode"

    value: values.Value[values.BackgroundBlendMode]


@dataclass(frozen=True)
class BackgroundClip(Rule):
    property_name = "background-clip"
    domain = "BackgroundClip"

    value: values.Value[values.BackgroundClip]


@dataclass(frozen=True)
class BackgroundColor(Rule):
    property_name = "background-color"
    domain = "Color"
    accepts_global = False

    value: values.Color


RULE_TYPES: tuple[type[Rule], ...] = (
    AlignContent,
    AlignItems,
    AlignSelf,
    All,
    AnimationDelay,
    AnimationDirection,
    AnimationDuration,
    AnimationFillMode,
    AnimationIterationCount,
    AnimationName,
    AnimationPlayState,
    AnimationTimingFunction,
    BackfaceVisibility,
    BackgroundAttachment,
    BackgroundBlendMode,
    BackgroundClip,
    BackgroundColor,
)

R = TypeVar("R", bound=Rule)


@dataclass(frozen=True)
class Ruleset:
    """A selector paired with its declaration block, in source order.

    A property may appear more than once; resolving which one wins is left
    to the consumer.
    """

    selector: Selector
    rules: list[Rule] = field(default_factory=list)

    def rules_of(self, rule_type: type[R]) -> list[R]:
        return [rule for rule in self.rules if type(rule) is rule_type]
