from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator

logger = logging.getLogger(__name__)


@dataclass
class IndentationStack:
    """
    Ordered indentation fragments, outermost first.

    A fragment is an opaque string ("    ", "\\t", "# ", ...). The current
    indentation is the concatenation of all fragments in push order.
    """
    _fragments: list[str] = field(default_factory=list)

    def push(self, fragment: str) -> None:
        self._fragments.append(fragment)

    def pop(self) -> str | None:
        # Underflow is tolerated so truncated or half-edited streams still build.
        if not self._fragments:
            logger.debug("dedent on empty indentation stack ignored")
            return None
        return self._fragments.pop()

    def current(self) -> str:
        return "".join(self._fragments)

    def depth(self) -> int:
        return len(self._fragments)

    def clear(self) -> None:
        self._fragments.clear()

    def view(self) -> tuple[str, ...]:
        return tuple(self._fragments)

    def __len__(self) -> int:
        return len(self._fragments)

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._fragments))
