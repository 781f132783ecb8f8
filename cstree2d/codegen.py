from __future__ import annotations

import enum
from dataclasses import dataclass, field

from .builder import Builder
from .errors import LineTerminatorError
from .green import GreenNode
from .syntax import DEDENT, INDENT, has_line_terminator


class CodeKind(enum.IntEnum):
    MODULE = 0
    BLOCK = 1
    LINE = 2


@dataclass
class CodeBuilder:
    """
    Indentation-aware code writer backed by a 2D tree.
    Each block is a BLOCK node bracketed by Indent/Dedent tokens, so the
    tree stays the same if the whole program is shifted right.
    """
    indent: str = "    "
    _builder: Builder[CodeKind] = field(default_factory=Builder)

    def __post_init__(self) -> None:
        self._builder.start_node(CodeKind.MODULE)

    @property
    def level(self) -> int:
        return self._builder.indentation_level()

    def write(self, line: str = "") -> None:
        # blank lines stay blank: no Text token, so no indentation either
        if line:
            if has_line_terminator(line):
                raise LineTerminatorError(line)
            self._builder.start_node(CodeKind.LINE)
            self._builder.token(CodeKind.LINE, line)
            self._builder.finish_node()
        self._builder.newline()

    def writelines(self, raw: str) -> None:
        for ln in raw.splitlines():
            self.write(ln)

    def block(self) -> "_Block":
        return _Block(self)

    def render(self) -> str:
        code = self._builder.text_output()
        if not code.endswith("\n"):
            code += "\n"
        return code

    def finish(self) -> tuple[GreenNode, str]:
        code = self.render()
        self._builder.finish_node()
        root, _cache, _text = self._builder.finish()
        return root, code


class _Block:
    def __init__(self, cb: CodeBuilder) -> None:
        self.cb = cb

    def __enter__(self) -> None:
        b = self.cb._builder
        b.start_node(CodeKind.BLOCK)
        b.token(INDENT, self.cb.indent)

    def __exit__(self, exc_type, exc, tb) -> None:
        b = self.cb._builder
        b.token(DEDENT, "")
        b.finish_node()
