import argparse
import enum
import json
import logging
import sys
from pathlib import Path
from typing import Any

from .builder import Builder
from .errors import Cstree2DError
from .syntax import DEDENT, INDENT, NEWLINE, TEXT, Syntax2D
from .validation import validate_python

ROOT_KIND = "ROOT"


class ExampleKind(enum.IntEnum):
    ROOT = 0
    TEXT = 1


def _load_ops(source: str) -> list[list[Any]]:
    raw: str = sys.stdin.read() if source == "-" else Path(source).read_text(encoding="utf-8")
    ops = json.loads(raw)
    if not isinstance(ops, list) or not all(isinstance(op, list) and op for op in ops):
        raise ValueError("expected a JSON array of non-empty operation arrays")
    return ops


def replay(ops: list[list[Any]]) -> Builder[str]:
    """Feed JSON operations into a builder wrapped in a ROOT node."""
    b: Builder[str] = Builder()
    b.start_node(ROOT_KIND)
    for op in ops:
        name, args = op[0], op[1:]
        if name == "start":
            b.start_node(args[0])
        elif name == "finish":
            b.finish_node()
        elif name == "text":
            b.token(TEXT, args[0])
        elif name == "token":
            b.token(args[0], args[1])
        elif name == "newline":
            b.token(NEWLINE, args[0] if args else "\n")
        elif name == "indent":
            b.token(INDENT, args[0])
        elif name == "dedent":
            b.token(DEDENT, "")
        else:
            raise ValueError(f"unknown operation {name!r}")
    b.finish_node()
    return b


def cmd_kinds(args: argparse.Namespace) -> None:
    kinds: list[Syntax2D[Any]] = [INDENT, DEDENT, NEWLINE, TEXT]
    kinds.extend(Syntax2D.token(k) for k in ExampleKind)
    for kind in kinds:
        print(f"{kind}\t{kind.into_raw()}")


def cmd_replay(args: argparse.Namespace) -> None:
    try:
        builder = replay(_load_ops(args.source))
        root, text = builder.red()
    except (OSError, ValueError, IndexError, TypeError, Cstree2DError) as e:
        print(f"replay failed: {e}", file=sys.stderr)
        raise SystemExit(2)

    if args.tree:
        print(root.debug(recursive=True), end="")
    else:
        print(text)

    if args.check_python:
        res = validate_python(text if text.endswith("\n") else text + "\n")
        if not res.ok:
            for err in res.errors:
                print(err, file=sys.stderr)
            raise SystemExit(1)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser("cstree2d")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(required=True)

    s = sub.add_parser("kinds", help="List the control kinds and sample base kinds with raw values")
    s.set_defaults(func=cmd_kinds)

    s = sub.add_parser("replay", help="Build a tree from a JSON operation list and print the text")
    s.add_argument("source", help="JSON file with operations, or - for stdin")
    s.add_argument("--tree", action="store_true", help="Print the debug tree instead of the text")
    s.add_argument("--check-python", dest="check_python", action="store_true",
                   help="Fail unless the reconstructed text parses as Python (LibCST)")
    s.set_defaults(func=cmd_replay)

    return p


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    args.func(args)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
