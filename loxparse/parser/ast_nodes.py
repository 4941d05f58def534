"""
Abstract Syntax Tree node definitions for loxparse.

Defines the expression and statement node types produced by the parser.
Nodes are immutable and compare by value, so two parses of the same tokens
produce equal trees. Each node supports the visitor pattern and exposes its
children for generic traversal.

Author: xwest
"""

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Iterator, List, Optional, Union
from dataclasses import dataclass
from enum import Enum

from ..lexer.tokens import Token

__all__ = [
    "ASTNode", "ASTNodeType", "ASTVisitor", "Expression", "Statement",
    "Expr", "Stmt",
    "Literal", "Grouping", "Unary", "Binary", "Variable", "Assign",
    "ExpressionStatement", "PrintStatement", "VarDeclaration",
    "walk",
]

class ASTNodeType(Enum):
    """Enumeration of all AST node types."""

    # Statements
    EXPRESSION_STMT = "ExpressionStatement"
    PRINT_STMT = "PrintStatement"
    VAR_DECL = "VarDeclaration"

    # Expressions
    ASSIGN = "Assign"
    BINARY = "Binary"
    GROUPING = "Grouping"
    LITERAL = "Literal"
    UNARY = "Unary"
    VARIABLE = "Variable"


class ASTVisitor(ABC):
    """Abstract visitor interface for traversing AST nodes."""

    @abstractmethod
    def visit(self, node: 'ASTNode') -> Any:
        """Visit a generic AST node."""
        pass


@dataclass(frozen=True)
class ASTNode(ABC):
    """Base class for all AST nodes."""

    node_type: ClassVar[ASTNodeType]

    def accept(self, visitor: ASTVisitor) -> Any:
        """Accept a visitor (visitor pattern)."""
        return visitor.visit(self)

    @abstractmethod
    def children(self) -> List['ASTNode']:
        """Get all child nodes."""
        pass

    def __str__(self) -> str:
        return self.node_type.value


# ============================================================================
# Expressions
# ============================================================================

@dataclass(frozen=True)
class Expression(ASTNode):
    """Base class for expressions."""


@dataclass(frozen=True, eq=False)
class Literal(Expression):
    """
    Constant value: number, string, boolean or nil (None).

    Equality includes the value's type, so ``true`` and ``1`` differ.
    """
    value: Any

    node_type: ClassVar[ASTNodeType] = ASTNodeType.LITERAL

    def children(self) -> List[ASTNode]:
        return []

    def _key(self):
        return (type(self.value), self.value)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Literal):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())


@dataclass(frozen=True)
class Grouping(Expression):
    """Parenthesized expression, kept distinct from its contents."""
    expression: Expression

    node_type: ClassVar[ASTNodeType] = ASTNodeType.GROUPING

    def children(self) -> List[ASTNode]:
        return [self.expression]


@dataclass(frozen=True)
class Unary(Expression):
    """Prefix '!' or '-' applied to an operand."""
    operator: Token
    operand: Expression

    node_type: ClassVar[ASTNodeType] = ASTNodeType.UNARY

    def children(self) -> List[ASTNode]:
        return [self.operand]


@dataclass(frozen=True)
class Binary(Expression):
    """Binary arithmetic, comparison or equality operation."""
    left: Expression
    operator: Token
    right: Expression

    node_type: ClassVar[ASTNodeType] = ASTNodeType.BINARY

    def children(self) -> List[ASTNode]:
        return [self.left, self.right]


@dataclass(frozen=True)
class Variable(Expression):
    """Reference to a named variable."""
    name: Token

    node_type: ClassVar[ASTNodeType] = ASTNodeType.VARIABLE

    def children(self) -> List[ASTNode]:
        return []


@dataclass(frozen=True)
class Assign(Expression):
    """Assignment of a value to a named variable."""
    name: Token
    value: Expression

    node_type: ClassVar[ASTNodeType] = ASTNodeType.ASSIGN

    def children(self) -> List[ASTNode]:
        return [self.value]


# ============================================================================
# Statements
# ============================================================================

@dataclass(frozen=True)
class Statement(ASTNode):
    """Base class for statements."""


@dataclass(frozen=True)
class ExpressionStatement(Statement):
    """Expression evaluated for its side effects."""
    expression: Expression

    node_type: ClassVar[ASTNodeType] = ASTNodeType.EXPRESSION_STMT

    def children(self) -> List[ASTNode]:
        return [self.expression]


@dataclass(frozen=True)
class PrintStatement(Statement):
    expression: Expression

    node_type: ClassVar[ASTNodeType] = ASTNodeType.PRINT_STMT

    def children(self) -> List[ASTNode]:
        return [self.expression]


@dataclass(frozen=True)
class VarDeclaration(Statement):
    """Variable declaration with an optional initializer."""
    name: Token
    initializer: Optional[Expression] = None

    node_type: ClassVar[ASTNodeType] = ASTNodeType.VAR_DECL

    def children(self) -> List[ASTNode]:
        return [self.initializer] if self.initializer is not None else []


Expr = Union[Literal, Grouping, Unary, Binary, Variable, Assign]
Stmt = Union[ExpressionStatement, PrintStatement, VarDeclaration]


def walk(node: ASTNode) -> Iterator[ASTNode]:
    """Yield ``node`` and all of its descendants in pre-order."""
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(current.children()))
