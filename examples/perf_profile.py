"""Simple profiling of building and rendering large indented streams."""

from __future__ import annotations

import timeit
import tracemalloc

from cstree2d import DEDENT, INDENT, TEXT, Builder, CodeBuilder, NodeCache, extract_text


def _build_nested(depth: int, cache: NodeCache | None = None) -> Builder[str]:
    b: Builder[str] = Builder(cache)
    b.start_node("ROOT")
    for i in range(depth):
        b.start_node("BLOCK")
        b.token(TEXT, f"level_{i}:")
        b.newline()
        b.token(INDENT, "    ")
    b.token(TEXT, "pass")
    for _ in range(depth):
        b.token(DEDENT, "")
        b.finish_node()
    b.finish_node()
    return b


def _build_flat(lines: int) -> CodeBuilder:
    cb = CodeBuilder()
    for i in range(lines):
        cb.write(f"def f_{i}():")
        with cb.block():
            cb.write("return None")
    return cb


def main() -> None:
    duration: float = timeit.timeit(lambda: _build_nested(50).finish(), number=100)
    print(f"Nested build (depth 50): {duration:.4f}s/100")

    shared = NodeCache()
    cached: float = timeit.timeit(lambda: _build_nested(50, shared).finish(), number=100)
    print(f"Nested build, shared cache: {cached:.4f}s/100 ({len(shared)} cache entries)")

    flat: float = timeit.timeit(lambda: _build_flat(1000).render(), number=10)
    print(f"CodeBuilder 1000 functions: {flat:.4f}s/10")

    root, _cache, _text = _build_nested(200).finish()
    extract: float = timeit.timeit(lambda: extract_text(root), number=100)
    print(f"extract_text (depth 200): {extract:.4f}s/100")

    tracemalloc.start()
    _build_flat(5000).finish()
    current: int
    peak: int
    current, peak = tracemalloc.get_traced_memory()
    tracemalloc.stop()
    print(f"CodeBuilder 5000 functions memory: current={current} bytes peak={peak} bytes")


if __name__ == "__main__":
    main()
