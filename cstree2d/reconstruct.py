"""Replays a 2D token stream into correctly indented text.

Indentation is applied lazily: a Newline only marks indentation as pending,
and the next Text token materializes whatever the stack holds at that
moment. Any Indent/Dedent between the Newline and the Text is therefore
reflected in the output.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .green import GreenNode
from .indentation import IndentationStack
from .syntax import Syntax2D, SyntaxTag

LINE_TERMINATOR = "\n"


@dataclass
class TextReconstructor:
    stack: IndentationStack = field(default_factory=IndentationStack)
    _parts: list[str] = field(default_factory=list)
    _pending: bool = False

    @property
    def pending(self) -> bool:
        return self._pending

    @property
    def output(self) -> str:
        return "".join(self._parts)

    def indent(self, fragment: str) -> None:
        self.stack.push(fragment)

    def dedent(self) -> None:
        self.stack.pop()

    def newline(self, with_indent: bool = False) -> None:
        self._parts.append(LINE_TERMINATOR)
        if with_indent:
            self._parts.append(self.stack.current())
            self._pending = False
        else:
            self._pending = True

    def text(self, content: str) -> None:
        if self._pending:
            self._parts.append(self.stack.current())
            self._pending = False
        self._parts.append(content)

    def feed(self, kind: Syntax2D[Any], text: str) -> None:
        """Apply one token; Newline literals are normalized to LINE_TERMINATOR."""
        if kind.tag is SyntaxTag.INDENT:
            self.indent(text)
        elif kind.tag is SyntaxTag.DEDENT:
            self.dedent()
        elif kind.tag is SyntaxTag.NEWLINE:
            self.newline()
        else:
            self.text(text)


def extract_text(node: GreenNode | Any) -> str:
    """
    Render a finished tree with its indentation applied.

    Accepts a green node or anything exposing one as ``.green`` (red nodes).
    Every token is replayed through a fresh reconstructor, so a tree built
    purely from ``token()`` calls renders like the builder's ``text_output()``.
    """
    green = node if isinstance(node, GreenNode) else node.green
    rec = TextReconstructor()
    for tok in green.tokens():
        rec.feed(Syntax2D.coerce(tok.kind), tok.text)
    return rec.output
