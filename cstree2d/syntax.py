"""Syntax kinds for indentation-aware trees.

A ``Syntax2D`` is either one of four control kinds (Indent, Dedent, Newline,
Text) or a caller-supplied base kind wrapped as a token kind. Base kinds can
be any hashable value; an ``IntEnum`` is the usual choice because it also
supports the raw integer encoding below.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Generic, Hashable, TypeVar

from .errors import InvalidRawKindError

S = TypeVar("S", bound=Hashable)

# Control kinds live at the top of the u32 range so they never collide with
# small base-kind values.
RAW_TEXT: int = 2**32 - 4
RAW_INDENT: int = 2**32 - 3
RAW_DEDENT: int = 2**32 - 2
RAW_NEWLINE: int = 2**32 - 1

# Everything str.splitlines() breaks on; text tokens may contain none of these.
LINE_TERMINATORS: tuple[str, ...] = (
    "\n", "\r", "\x0b", "\x0c", "\x1c", "\x1d", "\x1e", "\x85", "\u2028", "\u2029",
)


class SyntaxTag(enum.Enum):
    INDENT = "Indent"
    DEDENT = "Dedent"
    NEWLINE = "Newline"
    TEXT = "Text"
    TOKEN = "Token"


_RAW_BY_TAG: dict[SyntaxTag, int] = {
    SyntaxTag.TEXT: RAW_TEXT,
    SyntaxTag.INDENT: RAW_INDENT,
    SyntaxTag.DEDENT: RAW_DEDENT,
    SyntaxTag.NEWLINE: RAW_NEWLINE,
}
_TAG_BY_RAW: dict[int, SyntaxTag] = {raw: tag for tag, raw in _RAW_BY_TAG.items()}


@dataclass(frozen=True)
class Syntax2D(Generic[S]):
    tag: SyntaxTag
    kind: S | None = None

    def __post_init__(self) -> None:
        if (self.tag is SyntaxTag.TOKEN) != (self.kind is not None):
            raise ValueError("only Token kinds carry a base kind")

    @classmethod
    def token(cls, kind: S) -> "Syntax2D[S]":
        return cls(SyntaxTag.TOKEN, kind)

    @classmethod
    def coerce(cls, value: Any) -> "Syntax2D[Any]":
        """Lift a bare base kind into a token kind; Syntax2D values pass through."""
        if isinstance(value, Syntax2D):
            return value
        return cls.token(value)

    @property
    def is_indent(self) -> bool:
        return self.tag is SyntaxTag.INDENT

    @property
    def is_dedent(self) -> bool:
        return self.tag is SyntaxTag.DEDENT

    @property
    def is_newline(self) -> bool:
        return self.tag is SyntaxTag.NEWLINE

    @property
    def is_text(self) -> bool:
        """True for anything rendered as content: plain Text and base token kinds."""
        return self.tag in (SyntaxTag.TEXT, SyntaxTag.TOKEN)

    def into_raw(self) -> int:
        if self.tag is SyntaxTag.TOKEN:
            raw = int(self.kind)  # type: ignore[call-overload]
            if not 0 <= raw < RAW_TEXT:
                raise InvalidRawKindError(f"base kind {self.kind!r} maps to reserved raw value {raw}")
            return raw
        return _RAW_BY_TAG[self.tag]

    @classmethod
    def from_raw(cls, raw: int, kind_type: Any = None) -> "Syntax2D[Any]":
        tag = _TAG_BY_RAW.get(raw)
        if tag is not None:
            return CONTROL_KINDS[tag]
        if kind_type is None:
            raise InvalidRawKindError(f"raw value {raw} needs a base kind type to decode")
        try:
            return cls.token(kind_type(raw))
        except ValueError as e:
            raise InvalidRawKindError(f"raw value {raw} is not a valid {kind_type.__name__}") from e

    def __str__(self) -> str:
        if self.tag is SyntaxTag.TOKEN:
            name = getattr(self.kind, "name", None) or str(self.kind)
            return f"Text({name})"
        return self.tag.value


INDENT: Syntax2D[Any] = Syntax2D(SyntaxTag.INDENT)
DEDENT: Syntax2D[Any] = Syntax2D(SyntaxTag.DEDENT)
NEWLINE: Syntax2D[Any] = Syntax2D(SyntaxTag.NEWLINE)
TEXT: Syntax2D[Any] = Syntax2D(SyntaxTag.TEXT)

CONTROL_KINDS: dict[SyntaxTag, Syntax2D[Any]] = {
    SyntaxTag.INDENT: INDENT,
    SyntaxTag.DEDENT: DEDENT,
    SyntaxTag.NEWLINE: NEWLINE,
    SyntaxTag.TEXT: TEXT,
}


def has_line_terminator(text: str) -> bool:
    return any(t in text for t in LINE_TERMINATORS)
