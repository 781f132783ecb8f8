from .builder import Builder
from .codegen import CodeBuilder, CodeKind
from .errors import (
    BuilderFinishedError, Cstree2DError, InvalidRawKindError, LineTerminatorError, UnbalancedNodesError,
)
from .green import GreenNode, GreenNodeBuilder, GreenToken, NodeCache
from .indentation import IndentationStack
from .reconstruct import LINE_TERMINATOR, TextReconstructor, extract_text
from .red import SyntaxNode, SyntaxToken
from .syntax import DEDENT, INDENT, NEWLINE, TEXT, Syntax2D, SyntaxTag
from .validation import ValidationResult, validate_python

__all__ = [
    # syntax kinds
    "Syntax2D", "SyntaxTag", "INDENT", "DEDENT", "NEWLINE", "TEXT",
    # builder & reconstruction
    "Builder", "IndentationStack", "TextReconstructor", "extract_text", "LINE_TERMINATOR",
    # tree collaborator
    "GreenNode", "GreenToken", "GreenNodeBuilder", "NodeCache", "SyntaxNode", "SyntaxToken",
    # code writing & validation
    "CodeBuilder", "CodeKind", "validate_python", "ValidationResult",
    # errors
    "Cstree2DError", "UnbalancedNodesError", "BuilderFinishedError", "LineTerminatorError",
    "InvalidRawKindError",
]
