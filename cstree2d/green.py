"""Immutable, position-independent ("green") CST nodes and their builder.

The builder is kind-agnostic: any hashable value may serve as a node or
token kind. Identical tokens and identical subtrees are deduplicated through
a ``NodeCache`` that can be shared by several builders.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Hashable, Iterator, Union

from .errors import UnbalancedNodesError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class GreenToken:
    kind: Hashable
    text: str

    @property
    def text_len(self) -> int:
        return len(self.text.encode("utf-8"))


@dataclass(frozen=True, slots=True)
class GreenNode:
    kind: Hashable
    children: tuple["GreenElement", ...]
    text_len: int = field(default=0, compare=False)
    _hash: int = field(default=0, compare=False, repr=False)

    def __post_init__(self) -> None:
        if not self.text_len and self.children:
            object.__setattr__(self, "text_len", sum(c.text_len for c in self.children))
        # cached: cache lookups hash whole subtrees
        object.__setattr__(self, "_hash", hash((self.kind, self.children)))

    def __hash__(self) -> int:
        return self._hash

    def tokens(self) -> Iterator[GreenToken]:
        for child in self.children:
            if isinstance(child, GreenToken):
                yield child
            else:
                yield from child.tokens()

    def text(self) -> str:
        return "".join(t.text for t in self.tokens())


GreenElement = Union[GreenNode, GreenToken]


def _kind_key(kind: Hashable) -> tuple[Any, ...]:
    # IntEnum members from different enums compare equal by value; keep them apart
    base = getattr(kind, "kind", kind)
    return (type(kind), type(base), kind)


class NodeCache:
    """Interns token text and deduplicates equal tokens and subtrees."""

    def __init__(self) -> None:
        self._strings: dict[str, str] = {}
        self._tokens: dict[tuple[Any, ...], GreenToken] = {}
        self._nodes: dict[tuple[Any, ...], GreenNode] = {}

    def intern(self, text: str) -> str:
        return self._strings.setdefault(text, text)

    def token(self, kind: Hashable, text: str) -> GreenToken:
        key = (_kind_key(kind), text)
        tok = self._tokens.get(key)
        if tok is None:
            tok = GreenToken(kind, self.intern(text))
            self._tokens[key] = tok
        return tok

    def node(self, kind: Hashable, children: tuple[GreenElement, ...]) -> GreenNode:
        # children come from this cache, so identity tells equal-looking subtrees apart
        key = (_kind_key(kind), tuple(id(c) for c in children))
        node = self._nodes.get(key)
        if node is None:
            node = GreenNode(kind, children)
            self._nodes[key] = node
        return node

    def __len__(self) -> int:
        return len(self._tokens) + len(self._nodes)


class GreenNodeBuilder:
    def __init__(self, cache: NodeCache | None = None) -> None:
        self._owns_cache = cache is None
        self.cache = cache if cache is not None else NodeCache()
        self._parents: list[tuple[Hashable, int]] = []
        self._children: list[GreenElement] = []

    @property
    def depth(self) -> int:
        return len(self._parents)

    def start_node(self, kind: Hashable) -> None:
        self._parents.append((kind, len(self._children)))

    def token(self, kind: Hashable, text: str) -> None:
        self._children.append(self.cache.token(kind, text))

    def finish_node(self) -> None:
        if not self._parents:
            raise UnbalancedNodesError("finish_node() called with no open node")
        kind, first_child = self._parents.pop()
        children = tuple(self._children[first_child:])
        del self._children[first_child:]
        self._children.append(self.cache.node(kind, children))

    def finish(self) -> tuple[GreenNode, NodeCache | None]:
        """Return the root node, plus the cache when this builder created it."""
        if self._parents:
            raise UnbalancedNodesError(f"finish() called with {len(self._parents)} unclosed node(s)")
        if len(self._children) != 1 or not isinstance(self._children[0], GreenNode):
            raise UnbalancedNodesError("a finished tree must consist of exactly one root node")
        root = self._children.pop()
        logger.debug("finished green tree: %d bytes", root.text_len)
        return root, (self.cache if self._owns_cache else None)
