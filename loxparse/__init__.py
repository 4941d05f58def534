"""
loxparse Package

A hand-written recursive descent parser that turns scanner tokens into a
syntax tree for a small expression and statement language, with panic-mode
error recovery so a single pass reports as many syntax errors as possible.

Architecture:
    loxparse/
    ├── lexer/           # Token model and diagnostics contract
    └── parser/          # Cursor, grammar, AST nodes, recovery

Scanning and evaluation are left to the host.

Author: xwest
License: MIT
"""

__version__ = "0.1.0"
__author__ = "xwest"
__license__ = "MIT"

from .lexer import Token, TokenType, SourceLocation, Diagnostic, DiagnosticCollector
from .parser import Parser, ParseError, AstPrinter, parse_program, parse_expression

__all__ = [
    # Core classes
    "Parser",
    "AstPrinter",
    "parse_program",
    "parse_expression",

    # Token model and diagnostics
    "Token",
    "TokenType",
    "SourceLocation",
    "Diagnostic",
    "DiagnosticCollector",
    "ParseError",

    # Version info
    "__version__",
    "__author__",
    "__license__",
]
