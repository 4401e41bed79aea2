"""Closed keyword enumerations for CSS properties."""

from __future__ import annotations

from enum import StrEnum


class FlexItemDirection(StrEnum):
    """Alignment keywords shared by ``align-content``, ``align-items`` and ``align-self``."""

    STRETCH = "stretch"
    CENTER = "center"
    BASELINE = "baseline"
    FLEX_START = "flex-start"
    FLEX_END = "flex-end"
    SPACE_BETWEEN = "space-between"
    SPACE_AROUND = "space-around"


class GlobalValue(StrEnum):
    """CSS-wide keywords, legal for any property."""

    INITIAL = "initial"
    INHERIT = "inherit"
    UNSET = "unset"


class AnimationDirection(StrEnum):
    NORMAL = "normal"
    REVERSE = "reverse"
    ALTERNATE = "alternate"
    ALTERNATE_REVERSE = "alternate-reverse"


class AnimationFillMode(StrEnum):
    NONE = "none"
    FORWARDS = "forwards"
    BACKWARDS = "backwards"
    BOTH = "both"


class BackgroundAttachment(StrEnum):
    SCROLL = "scroll"
    FIXED = "fixed"
    LOCAL = "local"


class BackgroundBlendMode(StrEnum):
    NORMAL = "normal"
    MULTIPLY = "multiply"
    SCREEN = "screen"
    OVERLAY = "overlay"
    DARKEN = "darken"
    LIGHTEN = "lighten"
    COLOR_DODGE = "color-dodge"
    SATURATION = "saturation"
    COLOR = "color"
    LUMINOSITY = "luminosity"


class BackgroundClip(StrEnum):
    CONTENT_BOX = "content-box"
    PADDING_BOX = "padding-box"
    BORDER_BOX = "border-box"
