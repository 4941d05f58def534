"""
Token builders for parser tests.

Scanning is not part of loxparse, so tests describe input as
whitespace-separated lexemes and build tokens from the lookup tables.

Author: xwest
"""

from typing import List

from loxparse.lexer.tokens import Token, TokenType, SourceLocation, KEYWORDS, OPERATORS


def make_token(token_type: TokenType, lexeme: str, literal=None, line: int = 1, column: int = 1) -> Token:
    return Token(token_type, lexeme, literal, SourceLocation("<test>", line, column, 0))


def scan(source: str) -> List[Token]:
    """
    Build tokens from whitespace-separated lexemes, one source line per line.

    ``scan("print 1 + 2 ;")`` yields PRINT NUMBER PLUS NUMBER SEMICOLON EOF.
    """
    tokens = []
    line = 1
    for line, text in enumerate(source.split("\n"), start=1):
        column = 1
        for lexeme in text.split():
            tokens.append(_token_for(lexeme, line, column))
            column += len(lexeme) + 1
    tokens.append(make_token(TokenType.EOF, "", None, line, 1))
    return tokens


def _token_for(lexeme: str, line: int, column: int) -> Token:
    if lexeme in OPERATORS:
        return make_token(OPERATORS[lexeme], lexeme, None, line, column)
    if lexeme in KEYWORDS:
        return make_token(KEYWORDS[lexeme], lexeme, None, line, column)
    if lexeme.startswith('"') and lexeme.endswith('"') and len(lexeme) >= 2:
        return make_token(TokenType.STRING, lexeme, lexeme[1:-1], line, column)
    if lexeme[0].isdigit():
        return make_token(TokenType.NUMBER, lexeme, float(lexeme), line, column)
    return make_token(TokenType.IDENTIFIER, lexeme, None, line, column)
