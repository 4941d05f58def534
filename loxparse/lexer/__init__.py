"""
loxparse Lexer Package

Defines the contract between an external scanner and the parser: the token
model it must produce and the diagnostics interface both sides report to.
Scanning itself is done by the host.

Key Features:
- Immutable tokens with source locations
- Keyword and operator lookup tables
- Pluggable diagnostics reporting

Author: xwest
"""

from .tokens import Token, TokenType, SourceLocation, KEYWORDS, OPERATORS
from .errors import Diagnostic, DiagnosticCollector, ErrorReporter

__all__ = [
    "Token",
    "TokenType",
    "SourceLocation",
    "KEYWORDS",
    "OPERATORS",
    "Diagnostic",
    "DiagnosticCollector",
    "ErrorReporter",
]
