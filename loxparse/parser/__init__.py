"""
loxparse Parser Package

Implements a precedence-climbing recursive descent parser for a small
expression and statement language.

Key Features:
- Fixed precedence chain: assignment, equality, comparison, term, factor, unary
- Value-comparable, immutable AST nodes with visitor support
- Panic-mode error recovery at declaration granularity
- Errors reported through a pluggable diagnostics sink

Author: xwest
"""

from .ast_nodes import *
from .cursor import TokenCursor
from .parser import Parser, parse_program, parse_expression
from .printer import AstPrinter
from .errors import ParseError, ParseFailure, SyntaxErrorRecovery

__all__ = [
    # Core parser
    "Parser", "TokenCursor", "parse_program", "parse_expression",

    # AST nodes
    "ASTNode", "ASTNodeType", "ASTVisitor", "Expression", "Statement",
    "Expr", "Stmt",
    "Literal", "Grouping", "Unary", "Binary", "Variable", "Assign",
    "ExpressionStatement", "PrintStatement", "VarDeclaration",
    "walk", "AstPrinter",

    # Error handling
    "ParseError", "ParseFailure", "SyntaxErrorRecovery",
]
