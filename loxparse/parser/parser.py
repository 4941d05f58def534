"""
loxparse Recursive Descent Parser

Implements a precedence-climbing recursive descent parser over a token
sequence. Productions return either a node or a ParseFailure; failures are
reported once when created and propagate upward until the declaration-level
recovery boundary resynchronizes the cursor.

Grammar:
    program        -> declaration* EOF
    declaration    -> varDecl | statement
    varDecl        -> "var" IDENTIFIER ( "=" expression )? ";"
    statement      -> printStmt | exprStmt
    printStmt      -> "print" expression ";"
    exprStmt       -> expression ";"
    expression     -> assignment
    assignment     -> IDENTIFIER "=" assignment | equality
    equality       -> comparison ( ( "!=" | "==" ) comparison )*
    comparison     -> term ( ( ">" | ">=" | "<" | "<=" ) term )*
    term           -> factor ( ( "-" | "+" ) factor )*
    factor         -> unary ( ( "/" | "*" ) unary )*
    unary          -> ( "!" | "-" ) unary | primary
    primary        -> "true" | "false" | "nil" | NUMBER | STRING
                    | IDENTIFIER | "(" expression ")"

Author: xwest
"""

import logging
from typing import Callable, List, Optional, Sequence, Union

from ..lexer.tokens import Token, TokenType
from ..lexer.errors import DiagnosticCollector, ErrorReporter
from .ast_nodes import (
    Expr, Stmt, Assign, Binary, Grouping, Literal, Unary, Variable,
    ExpressionStatement, PrintStatement, VarDeclaration,
)
from .cursor import TokenCursor
from .errors import ParseError, ParseFailure, SyntaxErrorRecovery


logger = logging.getLogger(__name__)

ExprResult = Union[Expr, ParseFailure]
StmtResult = Union[Stmt, ParseFailure]

# Operator sets per binary precedence level, loosest first
EQUALITY_OPERATORS = (TokenType.BANG_EQUAL, TokenType.EQUAL_EQUAL)
COMPARISON_OPERATORS = (
    TokenType.GREATER, TokenType.GREATER_EQUAL,
    TokenType.LESS, TokenType.LESS_EQUAL,
)
TERM_OPERATORS = (TokenType.MINUS, TokenType.PLUS)
FACTOR_OPERATORS = (TokenType.SLASH, TokenType.STAR)
UNARY_OPERATORS = (TokenType.BANG, TokenType.MINUS)


class Parser:
    """
    Recursive descent parser with panic-mode error recovery.

    Reports every syntax error to ``reporter`` and keeps parsing after a
    malformed declaration, so one pass surfaces as many errors as possible.
    """

    def __init__(self, tokens: Sequence[Token], reporter: Optional[ErrorReporter] = None):
        """
        Initialize parser with a list of tokens.

        Args:
            tokens: Tokens from the scanner, terminated by EOF
            reporter: Diagnostics sink; a private DiagnosticCollector if omitted
        """
        self.cursor = TokenCursor(tokens)
        self.reporter = reporter if reporter is not None else DiagnosticCollector()
        self.failures: List[ParseFailure] = []
        self.statements: List[Stmt] = []

    def parse(self) -> Optional[List[Stmt]]:
        """
        Parse the token stream into a list of statements.

        Returns:
            The statements in source order, or None if any syntax error was
            reported. Statements that parsed despite errors stay available
            in ``self.statements``.
        """
        self._reset()
        logger.debug("parsing %d tokens", len(self.cursor))

        while not self.cursor.is_at_end():
            stmt = self._declaration()
            if stmt is not None:
                self.statements.append(stmt)

        logger.debug("parsed %d statement(s), %d error(s)",
                     len(self.statements), len(self.failures))
        if self.failures:
            return None
        return list(self.statements)

    def parse_expression(self) -> Optional[Expr]:
        """
        Parse a single expression from the start of the token stream.

        Trailing tokens after the expression are left unread. Returns None
        if a syntax error was reported.
        """
        self._reset()
        expr = self._expression()
        if isinstance(expr, ParseFailure):
            return None
        return expr

    @property
    def had_error(self) -> bool:
        return bool(self.failures)

    def _reset(self):
        self.cursor.reset()
        self.failures = []
        self.statements = []

    # Statements

    def _declaration(self) -> Optional[Stmt]:
        """Parse one declaration, recovering from any syntax error in it."""
        if self.cursor.match(TokenType.VAR):
            result = self._var_declaration()
        else:
            result = self._statement()

        if isinstance(result, ParseFailure):
            SyntaxErrorRecovery.synchronize(self.cursor)
            return None
        return result

    def _var_declaration(self) -> StmtResult:
        name = self._consume(TokenType.IDENTIFIER, "Expect variable name.")
        if isinstance(name, ParseFailure):
            return name

        initializer = None
        if self.cursor.match(TokenType.EQUAL):
            initializer = self._expression()
            if isinstance(initializer, ParseFailure):
                return initializer

        end = self._consume(TokenType.SEMICOLON, "Expect ';' after variable declaration.")
        if isinstance(end, ParseFailure):
            return end
        return VarDeclaration(name, initializer)

    def _statement(self) -> StmtResult:
        if self.cursor.match(TokenType.PRINT):
            return self._print_statement()
        return self._expression_statement()

    def _print_statement(self) -> StmtResult:
        value = self._expression()
        if isinstance(value, ParseFailure):
            return value
        end = self._consume(TokenType.SEMICOLON, "Expect ; after value.")
        if isinstance(end, ParseFailure):
            return end
        return PrintStatement(value)

    def _expression_statement(self) -> StmtResult:
        expr = self._expression()
        if isinstance(expr, ParseFailure):
            return expr
        end = self._consume(TokenType.SEMICOLON, "Expect ; after expression.")
        if isinstance(end, ParseFailure):
            return end
        return ExpressionStatement(expr)

    # Expressions

    def _expression(self) -> ExprResult:
        return self._assignment()

    def _assignment(self) -> ExprResult:
        expr = self._equality()
        if isinstance(expr, ParseFailure):
            return expr

        if self.cursor.match(TokenType.EQUAL):
            equals = self.cursor.previous()
            value = self._assignment()
            if isinstance(value, ParseFailure):
                return value

            if isinstance(expr, Variable):
                return Assign(expr.name, value)

            # Reported without failing; the left-hand side is kept
            self.reporter.report(equals, "Invalid assignment target.")

        return expr

    def _equality(self) -> ExprResult:
        return self._binary(self._comparison, EQUALITY_OPERATORS)

    def _comparison(self) -> ExprResult:
        return self._binary(self._term, COMPARISON_OPERATORS)

    def _term(self) -> ExprResult:
        return self._binary(self._factor, TERM_OPERATORS)

    def _factor(self) -> ExprResult:
        return self._binary(self._unary, FACTOR_OPERATORS)

    def _binary(self, operand: Callable[[], ExprResult],
                operators: Sequence[TokenType]) -> ExprResult:
        """Parse a left-associative chain of ``operators`` between operands."""
        expr = operand()
        if isinstance(expr, ParseFailure):
            return expr

        while self.cursor.match(*operators):
            operator = self.cursor.previous()
            right = operand()
            if isinstance(right, ParseFailure):
                return right
            expr = Binary(expr, operator, right)

        return expr

    def _unary(self) -> ExprResult:
        if self.cursor.match(*UNARY_OPERATORS):
            operator = self.cursor.previous()
            operand = self._unary()
            if isinstance(operand, ParseFailure):
                return operand
            return Unary(operator, operand)

        return self._primary()

    def _primary(self) -> ExprResult:
        if self.cursor.match(TokenType.FALSE):
            return Literal(False)
        if self.cursor.match(TokenType.TRUE):
            return Literal(True)
        if self.cursor.match(TokenType.NIL):
            return Literal(None)

        if self.cursor.match(TokenType.NUMBER, TokenType.STRING):
            return Literal(self.cursor.previous().literal)

        if self.cursor.match(TokenType.IDENTIFIER):
            return Variable(self.cursor.previous())

        if self.cursor.match(TokenType.LEFT_PAREN):
            expr = self._expression()
            if isinstance(expr, ParseFailure):
                return expr
            closing = self._consume(TokenType.RIGHT_PAREN, "Expect ')' after expression.")
            if isinstance(closing, ParseFailure):
                return closing
            return Grouping(expr)

        return self._error(self.cursor.peek(), "Expect expression.")

    # Utility methods

    def _consume(self, token_type: TokenType, message: str) -> Union[Token, ParseFailure]:
        """Consume token of expected type or report and return a failure."""
        result = self.cursor.consume(token_type, message)
        if isinstance(result, ParseFailure):
            return self._fail(result)
        return result

    def _error(self, token: Token, message: str) -> ParseFailure:
        return self._fail(ParseFailure(token, message))

    def _fail(self, failure: ParseFailure) -> ParseFailure:
        self.reporter.report(failure.token, failure.message)
        self.failures.append(failure)
        return failure


def parse_program(tokens: Sequence[Token]) -> List[Stmt]:
    """
    Convenience function to parse a token sequence into statements.

    Args:
        tokens: Tokens from the scanner, terminated by EOF

    Returns:
        List of statements

    Raises:
        ParseError: If any syntax error was reported
    """
    collector = DiagnosticCollector()
    statements = Parser(tokens, collector).parse()
    if statements is None:
        raise ParseError(collector.diagnostics)
    return statements


def parse_expression(tokens: Sequence[Token]) -> Expr:
    """
    Convenience function to parse a single expression.

    Raises:
        ParseError: If a syntax error was reported
    """
    collector = DiagnosticCollector()
    expr = Parser(tokens, collector).parse_expression()
    if expr is None:
        raise ParseError(collector.diagnostics)
    return expr
