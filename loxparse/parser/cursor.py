"""
Token cursor used by the parser.

One token of lookahead, one token of lookbehind, forward-only movement over
an immutable token sequence ending in EOF.

Author: xwest
"""

from typing import Sequence, Union

from ..lexer.tokens import Token, TokenType
from .errors import ParseFailure


class TokenCursor:
    """Read position over a token sequence."""

    def __init__(self, tokens: Sequence[Token]):
        """
        Args:
            tokens: Tokens from the scanner; the last one must be EOF

        Raises:
            ValueError: If the sequence is empty or not terminated by EOF
        """
        if not tokens or tokens[-1].type != TokenType.EOF:
            raise ValueError("token sequence must be terminated by an EOF token")
        self.tokens = tuple(tokens)
        self.position = 0

    def reset(self):
        """Rewind to the first token."""
        self.position = 0

    def peek(self) -> Token:
        """Return current token without consuming."""
        return self.tokens[self.position]

    def previous(self) -> Token:
        """Return the most recently consumed token."""
        if self.position > 0:
            return self.tokens[self.position - 1]
        return self.tokens[0]

    def is_at_end(self) -> bool:
        return self.peek().type == TokenType.EOF

    def advance(self) -> Token:
        """Consume and return current token; a no-op once at EOF."""
        if not self.is_at_end():
            self.position += 1
            return self.previous()
        return self.peek()

    def check(self, token_type: TokenType) -> bool:
        """Check if current token matches type without consuming."""
        if self.is_at_end():
            return False
        return self.peek().type == token_type

    def match(self, *token_types: TokenType) -> bool:
        """Consume the current token if it matches any of ``token_types``."""
        for token_type in token_types:
            if self.check(token_type):
                self.advance()
                return True
        return False

    def consume(self, token_type: TokenType, message: str) -> Union[Token, ParseFailure]:
        """Consume token of expected type, or describe why it could not be."""
        if self.check(token_type):
            return self.advance()
        return ParseFailure(self.peek(), message)

    def __len__(self) -> int:
        return len(self.tokens)
