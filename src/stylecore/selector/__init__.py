from stylecore.selector.model import Selector
from stylecore.selector.parser import parse_selector

__all__ = ["parse_selector", "Selector"]
