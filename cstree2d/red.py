"""Positioned ("red") views over green trees.

Red nodes are created on demand while walking down from the root and carry
absolute byte offsets, so any node or token can be addressed by range.
"""

from __future__ import annotations

from typing import Hashable, Iterator, Union

from .green import GreenNode, GreenToken
from .reconstruct import extract_text


class SyntaxToken:
    __slots__ = ("green", "parent", "offset")

    def __init__(self, green: GreenToken, parent: "SyntaxNode", offset: int) -> None:
        self.green = green
        self.parent = parent
        self.offset = offset

    @property
    def kind(self) -> Hashable:
        return self.green.kind

    @property
    def text(self) -> str:
        return self.green.text

    @property
    def text_range(self) -> tuple[int, int]:
        return self.offset, self.offset + self.green.text_len

    def debug(self) -> str:
        start, end = self.text_range
        return f"{self.kind}@{start}..{end} {self.text!r}"

    def __repr__(self) -> str:
        return f"SyntaxToken({self.debug()})"


class SyntaxNode:
    __slots__ = ("green", "parent", "offset")

    def __init__(self, green: GreenNode, parent: "SyntaxNode | None" = None, offset: int = 0) -> None:
        self.green = green
        self.parent = parent
        self.offset = offset

    @classmethod
    def new_root(cls, green: GreenNode) -> "SyntaxNode":
        return cls(green)

    @property
    def kind(self) -> Hashable:
        return self.green.kind

    @property
    def text_range(self) -> tuple[int, int]:
        return self.offset, self.offset + self.green.text_len

    def children_with_tokens(self) -> Iterator["SyntaxElement"]:
        offset = self.offset
        for child in self.green.children:
            if isinstance(child, GreenNode):
                yield SyntaxNode(child, self, offset)
            else:
                yield SyntaxToken(child, self, offset)
            offset += child.text_len

    def children(self) -> Iterator["SyntaxNode"]:
        for child in self.children_with_tokens():
            if isinstance(child, SyntaxNode):
                yield child

    def descendants(self) -> Iterator["SyntaxNode"]:
        """Pre-order walk starting with this node."""
        yield self
        for child in self.children():
            yield from child.descendants()

    def tokens(self) -> Iterator[SyntaxToken]:
        for child in self.children_with_tokens():
            if isinstance(child, SyntaxToken):
                yield child
            else:
                yield from child.tokens()

    def text(self) -> str:
        """Verbatim token text, exactly as recorded."""
        return self.green.text()

    def debug(self, recursive: bool = False) -> str:
        lines: list[str] = []
        self._debug_into(lines, 0, recursive)
        return "\n".join(lines) + "\n"

    def _debug_into(self, lines: list[str], level: int, recursive: bool) -> None:
        start, end = self.text_range
        lines.append(f"{'  ' * level}{self.kind}@{start}..{end}")
        if not recursive:
            return
        for child in self.children_with_tokens():
            if isinstance(child, SyntaxNode):
                child._debug_into(lines, level + 1, recursive)
            else:
                lines.append(f"{'  ' * (level + 1)}{child.debug()}")

    def __str__(self) -> str:
        return extract_text(self.green)

    def __repr__(self) -> str:
        start, end = self.text_range
        return f"SyntaxNode({self.kind}@{start}..{end})"


SyntaxElement = Union[SyntaxNode, SyntaxToken]
