"""
Token definitions for the loxparse front end.

This module defines the token contract between an external scanner and the
parser:
- Token kinds (punctuation, operators, literals, keywords, EOF)
- Source locations for diagnostics
- The immutable Token record
- Keyword and operator lookup tables for scanners that build tokens

Author: xwest
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Any


class TokenType(Enum):
    """
    Enumeration of all token types in the language.

    Organized by category for clarity and maintainability.
    """

    # ========================================================================
    # Single-character punctuation
    # ========================================================================
    LEFT_PAREN = auto()             # (
    RIGHT_PAREN = auto()            # )
    LEFT_BRACE = auto()             # {
    RIGHT_BRACE = auto()            # }
    COMMA = auto()                  # ,
    DOT = auto()                    # .
    MINUS = auto()                  # -
    PLUS = auto()                   # +
    SEMICOLON = auto()              # ;
    SLASH = auto()                  # /
    STAR = auto()                   # *

    # ========================================================================
    # One or two character operators
    # ========================================================================
    BANG = auto()                   # !
    BANG_EQUAL = auto()             # !=
    EQUAL = auto()                  # =
    EQUAL_EQUAL = auto()            # ==
    GREATER = auto()                # >
    GREATER_EQUAL = auto()          # >=
    LESS = auto()                   # <
    LESS_EQUAL = auto()             # <=

    # ========================================================================
    # Literals
    # ========================================================================
    IDENTIFIER = auto()             # variable_name
    STRING = auto()                 # "hello"
    NUMBER = auto()                 # 42, 3.14

    # ========================================================================
    # Keywords
    # ========================================================================
    AND = auto()
    CLASS = auto()
    ELSE = auto()
    FALSE = auto()
    FUN = auto()
    FOR = auto()
    IF = auto()
    NIL = auto()
    OR = auto()
    PRINT = auto()
    RETURN = auto()
    SUPER = auto()
    THIS = auto()
    TRUE = auto()
    VAR = auto()
    WHILE = auto()

    # ========================================================================
    # Special Tokens
    # ========================================================================
    EOF = auto()                    # End of input


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source code.

    Used for error reporting and debugging information.
    """
    filename: str
    line: int
    column: int
    offset: int  # Character offset from start of input

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token.

    Contains the token type, lexeme (raw text), literal value
    (float, str, bool or None) and source location. Tokens are produced by
    an external scanner and are never modified by the parser.
    """
    type: TokenType
    lexeme: str                     # Raw text from source
    literal: Any                    # Scanned value (e.g. float for NUMBER)
    location: SourceLocation

    def __str__(self) -> str:
        if self.literal is not None and self.literal != self.lexeme:
            return f"{self.type.name}({self.lexeme!r} -> {self.literal!r})"
        return f"{self.type.name}({self.lexeme!r})"

    def __repr__(self) -> str:
        return (f"Token({self.type.name}, {self.lexeme!r}, "
                f"{self.literal!r}, {self.location!r})")

    @property
    def line(self) -> int:
        return self.location.line

    @property
    def is_literal(self) -> bool:
        """Check if this token carries a literal value."""
        return self.type in {
            TokenType.NUMBER, TokenType.STRING,
            TokenType.TRUE, TokenType.FALSE, TokenType.NIL,
        }

    @property
    def is_keyword(self) -> bool:
        """Check if this token is a keyword."""
        return KEYWORDS.get(self.lexeme) == self.type

    @property
    def is_eof(self) -> bool:
        return self.type == TokenType.EOF


# Lookup tables for token recognition, used by scanners that build tokens

KEYWORDS = {
    "and": TokenType.AND,
    "class": TokenType.CLASS,
    "else": TokenType.ELSE,
    "false": TokenType.FALSE,
    "for": TokenType.FOR,
    "fun": TokenType.FUN,
    "if": TokenType.IF,
    "nil": TokenType.NIL,
    "or": TokenType.OR,
    "print": TokenType.PRINT,
    "return": TokenType.RETURN,
    "super": TokenType.SUPER,
    "this": TokenType.THIS,
    "true": TokenType.TRUE,
    "var": TokenType.VAR,
    "while": TokenType.WHILE,
}

OPERATORS = {
    # Punctuation
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    ";": TokenType.SEMICOLON,

    # Arithmetic
    "-": TokenType.MINUS,
    "+": TokenType.PLUS,
    "/": TokenType.SLASH,
    "*": TokenType.STAR,

    # Comparison and assignment
    "!": TokenType.BANG,
    "!=": TokenType.BANG_EQUAL,
    "=": TokenType.EQUAL,
    "==": TokenType.EQUAL_EQUAL,
    ">": TokenType.GREATER,
    ">=": TokenType.GREATER_EQUAL,
    "<": TokenType.LESS,
    "<=": TokenType.LESS_EQUAL,
}
