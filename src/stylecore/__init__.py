"""stylecore: typed in-memory model of CSS selectors and style rules."""

from stylecore.errors import SelectorParseError, StylecoreError
from stylecore.rules import RULE_TYPES, Rule, Ruleset
from stylecore.selector import Selector, parse_selector
from stylecore.values import Color, Global, GlobalValue, Normal, Value

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # errors
    "StylecoreError",
    "SelectorParseError",
    # selector
    "Selector",
    "parse_selector",
    # rules
    "Rule",
    "Ruleset",
    "RULE_TYPES",
    # values
    "Value",
    "Normal",
    "Global",
    "GlobalValue",
    "Color",
]
