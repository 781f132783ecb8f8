from textwrap import dedent

import pytest

from cstree2d import (
    DEDENT, INDENT, CodeBuilder, CodeKind, LineTerminatorError, Syntax2D, extract_text, validate_python,
)


def _sample(cb: CodeBuilder) -> None:
    cb.write("import os")
    cb.write()
    cb.write("class Basic:")
    with cb.block():
        cb.write("def forward(self, question):")
        with cb.block():
            cb.write("if question:")
            with cb.block():
                cb.write("return question")
            cb.write("return None")
    cb.write()
    cb.write("program = Basic()")


def test_render_and_validate() -> None:
    cb = CodeBuilder()
    _sample(cb)
    code = cb.render()
    assert code == dedent("""\
        import os

        class Basic:
            def forward(self, question):
                if question:
                    return question
                return None

        program = Basic()
        """)
    res = validate_python(code)
    assert res.ok, res.errors
    assert res.default_indent == "    "


def test_custom_indent_unit() -> None:
    cb = CodeBuilder(indent="\t")
    _sample(cb)
    code = cb.render()
    assert "\t\treturn None\n" in code
    res = validate_python(code)
    assert res.ok, res.errors
    assert res.default_indent == "\t"


def test_blank_lines_carry_no_indentation() -> None:
    cb = CodeBuilder()
    cb.write("def f():")
    with cb.block():
        cb.write("a = 1")
        cb.write()
        cb.write("return a")
    assert cb.render() == "def f():\n    a = 1\n\n    return a\n"


def test_writelines_and_level() -> None:
    cb = CodeBuilder()
    cb.write("if x:")
    with cb.block():
        assert cb.level == 1
        cb.writelines("a = 1\nb = 2")
    assert cb.level == 0
    assert cb.render() == "if x:\n    a = 1\n    b = 2\n"


def test_tree_shape_and_shift_invariance() -> None:
    cb = CodeBuilder()
    _sample(cb)
    root, code = cb.finish()
    assert root.kind == Syntax2D.token(CodeKind.MODULE)
    assert extract_text(root) == code
    kinds = [t.kind for t in root.tokens()]
    assert kinds.count(INDENT) == kinds.count(DEDENT) == 3

    wide = CodeBuilder(indent="        ")
    _sample(wide)
    wide_root, wide_code = wide.finish()
    assert wide_code != code
    # only the Indent literals differ between the two trees
    lines = [t.text for t in root.tokens() if t.kind != INDENT]
    wide_lines = [t.text for t in wide_root.tokens() if t.kind != INDENT]
    assert lines == wide_lines


def test_empty_builder_renders_newline() -> None:
    assert CodeBuilder().render() == "\n"


def test_validate_reports_parse_errors() -> None:
    res = validate_python("def f(:\n    pass\n")
    assert not res.ok
    assert res.errors and res.errors[0].startswith("LibCST parse error")
    assert res.default_indent is None


def test_rejected_line_leaves_builder_usable() -> None:
    cb = CodeBuilder()
    with pytest.raises(LineTerminatorError):
        cb.write("a\nb")
    cb.write("ok = 1")
    root, code = cb.finish()
    assert code == "ok = 1\n"
    assert [t.text for t in root.tokens()] == ["ok = 1", "\n"]


def test_writelines_splits_on_every_line_terminator() -> None:
    cb = CodeBuilder()
    cb.writelines("a = 1\x0cb = 2\u2028c = 3")
    assert cb.render() == "a = 1\nb = 2\nc = 3\n"
