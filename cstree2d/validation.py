from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List

import libcst as cst

logger = logging.getLogger(__name__)


@dataclass
class ValidationResult:
    ok: bool
    errors: List[str] = field(default_factory=list)
    default_indent: str | None = None


def validate_python(code: str) -> ValidationResult:
    """
    Check that reconstructed text is well-formed Python using LibCST.

    On success, ``default_indent`` is the indentation unit LibCST inferred,
    which should match the fragments pushed while building.
    """
    try:
        module = cst.parse_module(code)
    except cst.ParserSyntaxError as e:
        logger.info("reconstructed text does not parse: %s", e.message)
        return ValidationResult(False, [f"LibCST parse error: {e}"])

    errors: List[str] = []
    # LibCST round-trips byte for byte; a mismatch means the text is not what was parsed.
    if module.code != code:
        errors.append("LibCST did not round-trip the rendered text.")
    return ValidationResult(len(errors) == 0, errors, module.default_indent)
