"""Selector model: a chain of compound selectors linked by descendant combinators."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Selector:
    """One compound selector plus the ancestor it requires.

    ``#abc.x .y`` becomes ``Selector(classes=["y"], parent=Selector(ids=["abc"], classes=["x"]))``:
    the outermost object is the element being targeted and ``parent`` must
    match one of its ancestors. ``parent`` is ``None`` on the leftmost
    compound of the original string.

    Attributes:
        ids: Id names at this level, in order of appearance. Duplicates kept.
        classes: Class names at this level, in order of appearance.
        parent: Ancestor requirement, or ``None``.
    """

    ids: list[str] = field(default_factory=list)
    classes: list[str] = field(default_factory=list)
    parent: Selector | None = None

    @classmethod
    def parse(cls, text: str) -> Selector:
        from stylecore.selector.parser import parse_selector

        return parse_selector(text)

    def chain(self) -> Iterator[Selector]:
        """Yield this selector, then each ancestor out to the leftmost one."""
        node: Selector | None = self
        while node is not None:
            yield node
            node = node.parent

    @property
    def depth(self) -> int:
        return sum(1 for _ in self.chain())

    def to_css(self) -> str:
        # TODO: render back to selector text once tag selectors are modeled,
        # otherwise ``div.x`` would come back as ``.x``.
        raise NotImplementedError("Selector -> CSS text conversion is not implemented")
