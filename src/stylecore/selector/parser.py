"""Lark-based reader for whitespace separated CSS selector strings.

Syntax example:
    #main.page article .title#heading

Only ``#id`` and ``.class`` fragments are kept. Tag names and any
unsupported syntax are dropped without error.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from lark import Lark, Token, Transformer

from stylecore.errors import SelectorParseError
from stylecore.selector.model import Selector

__all__ = ["parse_selector"]

logger = logging.getLogger(__name__)

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"


class _Compound:
    """Fragments of one whitespace-free token, before linking."""

    def __init__(self, ids: list[str], classes: list[str]):
        self.ids = ids
        self.classes = classes


class SelectorTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into a linked Selector chain."""

    def compound(self, items: list[Token]) -> _Compound:
        ids: list[str] = []
        classes: list[str] = []
        for token in items:
            if token.type == "ID":
                ids.append(str(token)[1:])
            elif token.type == "CLASS":
                classes.append(str(token)[1:])
        return _Compound(ids, classes)

    def start(self, items: list[_Compound]) -> Selector:
        return _link(items)


def _link(compounds: list[_Compound]) -> Selector:
    """Build the chain left to right so the rightmost compound ends up as the target."""
    parent: Selector | None = None
    for compound in compounds:
        parent = Selector(ids=compound.ids, classes=compound.classes, parent=parent)
    return parent  # type: ignore[return-value]


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(
        GRAMMAR_PATH.read_text(),
        parser="lalr",
        start="start",
    )


def parse_selector(text: str) -> Selector:
    """Parse a selector string into a Selector chain.

    ``text`` must contain at least one non-whitespace compound selector;
    an empty or whitespace-only string raises SelectorParseError.
    """
    source = text.strip()
    if not source:
        raise SelectorParseError("Selector string contains no compound selector")
    try:
        tree = _parser().parse(source)
        selector = SelectorTransformer().transform(tree)
    except Exception as e:
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        raise SelectorParseError(str(e), line=line, column=column, cause=e) from e
    logger.debug("Parsed selector %r into %d level(s)", text, selector.depth)
    return selector
