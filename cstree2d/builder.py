from __future__ import annotations

import logging
from typing import Generic

from .errors import BuilderFinishedError, LineTerminatorError
from .green import GreenNode, GreenNodeBuilder, NodeCache
from .indentation import IndentationStack
from .reconstruct import LINE_TERMINATOR, TextReconstructor
from .red import SyntaxNode
from .syntax import NEWLINE, S, Syntax2D, has_line_terminator

logger = logging.getLogger(__name__)


class Builder(Generic[S]):
    """
    Green tree builder that also renders the indented text it describes.

    Every token goes to two places: the tree records its literal text, and
    the text reconstructor applies its 2D meaning (Indent pushes a fragment,
    Dedent pops one, Newline breaks the line and defers indentation to the
    next Text token).

    ``indent()`` and ``dedent()`` only touch the indentation stack and leave
    no token in the tree; use ``token(INDENT, ...)`` / ``token(DEDENT, "")``
    when the tree must see the change. Dedenting an empty stack is a no-op.
    Once ``finish()`` has run, everything except ``text_output()`` and
    ``is_finished`` raises ``BuilderFinishedError``.
    """

    def __init__(self, cache: NodeCache | None = None) -> None:
        self._inner = GreenNodeBuilder(cache)
        self._stack = IndentationStack()
        self._reconstructor = TextReconstructor(self._stack)
        self._finished = False

    @property
    def is_finished(self) -> bool:
        return self._finished

    def _check_open(self, operation: str) -> None:
        if self._finished:
            raise BuilderFinishedError(operation)

    # ---------- tree structure ----------

    def start_node(self, kind: S | Syntax2D[S]) -> None:
        self._check_open("start_node")
        self._inner.start_node(Syntax2D.coerce(kind))

    def finish_node(self) -> None:
        self._check_open("finish_node")
        self._inner.finish_node()

    def token(self, kind: S | Syntax2D[S], text: str) -> None:
        """Record a token in the tree and apply it to the reconstructed text."""
        self._check_open("token")
        kind2d = Syntax2D.coerce(kind)
        if kind2d.is_text and has_line_terminator(text):
            raise LineTerminatorError(text)
        self._inner.token(kind2d, text)
        self._reconstructor.feed(kind2d, text)

    # ---------- indentation ----------

    def indent(self, fragment: str) -> None:
        """Push ``fragment`` onto the indentation stack without a tree token."""
        self._check_open("indent")
        self._reconstructor.indent(fragment)

    def dedent(self) -> None:
        """Pop the innermost fragment without a tree token."""
        self._check_open("dedent")
        self._reconstructor.dedent()

    def dedents(self, count: int) -> None:
        self._check_open("dedents")
        for _ in range(count):
            self.dedent()

    def newline(self, with_indent: bool = False) -> None:
        """
        Break the line: a Newline token goes into the tree either way.

        With ``with_indent`` the current indentation is written right away;
        otherwise it is deferred to the next Text token. The tree only records
        the Newline, so like convenience indent()/dedent(), an immediate
        indentation that no Text follows is absent from extract_text(tree).
        """
        self._check_open("newline")
        self._inner.token(NEWLINE, LINE_TERMINATOR)
        self._reconstructor.newline(with_indent)

    def current_indentation(self) -> str:
        self._check_open("current_indentation")
        return self._stack.current()

    def indentation_level(self) -> int:
        self._check_open("indentation_level")
        return self._stack.depth()

    def indentation_stack(self) -> tuple[str, ...]:
        self._check_open("indentation_stack")
        return self._stack.view()

    def clear_indentation(self) -> None:
        """Forget all indentation; text already rendered is left alone."""
        self._check_open("clear_indentation")
        self._stack.clear()

    # ---------- output ----------

    def text_output(self) -> str:
        return self._reconstructor.output

    def finish(self) -> tuple[GreenNode, NodeCache | None, str]:
        self._check_open("finish")
        root, cache = self._inner.finish()
        self._finished = True
        text = self.text_output()
        logger.debug("builder finished: %d bytes in tree, %d chars of text", root.text_len, len(text))
        return root, cache, text

    def red(self) -> tuple[SyntaxNode, str]:
        """Finish and return the positioned root together with the text."""
        root, _cache, text = self.finish()
        return SyntaxNode.new_root(root), text

