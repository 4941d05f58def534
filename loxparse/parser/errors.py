"""
Error handling for the loxparse parser.

Grammar productions never raise: a syntax error is a ParseFailure value
returned up the call chain until the declaration-level recovery boundary
checks it and resynchronizes. ParseError is the exception handed to hosts
by the convenience entry points once a pass has failed.

Author: xwest
"""

import logging
from typing import List, Optional, TYPE_CHECKING
from dataclasses import dataclass

from ..lexer.tokens import Token, TokenType, SourceLocation
from ..lexer.errors import Diagnostic

if TYPE_CHECKING:
    from .cursor import TokenCursor


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParseFailure:
    """
    Structured failure produced by a grammar production.

    Carries the offending token and the human-readable message that was
    reported for it.
    """
    token: Token
    message: str

    @property
    def location(self) -> SourceLocation:
        return self.token.location

    def __str__(self) -> str:
        return f"{self.location}: {self.message}"


class ParseError(Exception):
    """
    Exception raised to hosts when a parse pass fails.

    Contains every diagnostic reported during the pass.
    """

    def __init__(self, diagnostics: List[Diagnostic]):
        first = diagnostics[0].message if diagnostics else "Parse failed"
        super().__init__(first)
        self.diagnostics = diagnostics

    @property
    def diagnostic(self) -> Optional[Diagnostic]:
        return self.diagnostics[0] if self.diagnostics else None

    def __str__(self) -> str:
        if not self.diagnostics:
            return "Parse failed"
        return "\n".join(str(d) for d in self.diagnostics)


class SyntaxErrorRecovery:
    """
    Panic-mode recovery for the parser.

    Skips tokens after a syntax error until a likely statement boundary,
    allowing the collection of multiple errors in a single pass.
    """

    # Keywords that begin a statement; synchronization stops in front of them
    STATEMENT_STARTS = frozenset({
        TokenType.CLASS,
        TokenType.FUN,
        TokenType.VAR,
        TokenType.FOR,
        TokenType.IF,
        TokenType.WHILE,
        TokenType.PRINT,
        TokenType.RETURN,
    })

    # Token that ends a statement; synchronization stops just past it
    STATEMENT_TERMINATOR = TokenType.SEMICOLON

    @staticmethod
    def synchronize(cursor: 'TokenCursor') -> int:
        """
        Advance ``cursor`` to the next likely statement boundary.

        Always consumes at least one token (unless already at end).

        Returns the number of tokens skipped.
        """
        start = cursor.position
        cursor.advance()

        while not cursor.is_at_end():
            if cursor.previous().type == SyntaxErrorRecovery.STATEMENT_TERMINATOR:
                break
            if cursor.peek().type in SyntaxErrorRecovery.STATEMENT_STARTS:
                break
            cursor.advance()

        skipped = cursor.position - start
        logger.debug("synchronized after %d token(s), resuming at %s", skipped, cursor.peek())
        return skipped
