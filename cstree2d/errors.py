"""Exception types raised by cstree2d."""

from __future__ import annotations


class Cstree2DError(Exception):
    """Base class for every error raised by this package."""


class UnbalancedNodesError(Cstree2DError, RuntimeError):
    """start_node/finish_node calls do not pair up, or the tree has no single root."""


class BuilderFinishedError(Cstree2DError, RuntimeError):
    """An operation was attempted on a builder after finish()."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"builder already finished; cannot call {operation}()")
        self.operation = operation


class LineTerminatorError(Cstree2DError, ValueError):
    """A text token carried a line break; only Newline tokens may do that."""

    def __init__(self, text: str) -> None:
        super().__init__(f"text token must not contain a line terminator: {text!r}")
        self.text = text


class InvalidRawKindError(Cstree2DError, ValueError):
    """A raw kind value cannot be mapped to a Syntax2D kind."""
