"""
Parenthesized rendering of syntax trees, for debugging and tests.

Author: xwest
"""

from typing import Any, Callable, Dict

from .ast_nodes import (
    ASTNode, ASTNodeType, ASTVisitor, Expression,
    Assign, Binary, Grouping, Literal, Unary, Variable,
    ExpressionStatement, PrintStatement, VarDeclaration,
)


class AstPrinter(ASTVisitor):
    """
    Renders nodes as Lisp-style strings.

    ``1 + 2 * 3`` prints as ``(+ 1.0 (* 2.0 3.0))``.
    """

    def __init__(self):
        self._handlers: Dict[ASTNodeType, Callable[[Any], str]] = {
            ASTNodeType.LITERAL: self._print_literal,
            ASTNodeType.GROUPING: self._print_grouping,
            ASTNodeType.UNARY: self._print_unary,
            ASTNodeType.BINARY: self._print_binary,
            ASTNodeType.VARIABLE: self._print_variable,
            ASTNodeType.ASSIGN: self._print_assign,
            ASTNodeType.EXPRESSION_STMT: self._print_expression_statement,
            ASTNodeType.PRINT_STMT: self._print_print_statement,
            ASTNodeType.VAR_DECL: self._print_var_declaration,
        }

    def print(self, node: ASTNode) -> str:
        return node.accept(self)

    def visit(self, node: ASTNode) -> str:
        return self._handlers[node.node_type](node)

    def _parenthesize(self, name: str, *parts: Expression) -> str:
        inner = " ".join(part.accept(self) for part in parts)
        return f"({name} {inner})"

    def _print_literal(self, node: Literal) -> str:
        if node.value is None:
            return "nil"
        if isinstance(node.value, bool):
            return "true" if node.value else "false"
        return str(node.value)

    def _print_grouping(self, node: Grouping) -> str:
        return self._parenthesize("group", node.expression)

    def _print_unary(self, node: Unary) -> str:
        return self._parenthesize(node.operator.lexeme, node.operand)

    def _print_binary(self, node: Binary) -> str:
        return self._parenthesize(node.operator.lexeme, node.left, node.right)

    def _print_variable(self, node: Variable) -> str:
        return node.name.lexeme

    def _print_assign(self, node: Assign) -> str:
        return f"(= {node.name.lexeme} {node.value.accept(self)})"

    def _print_expression_statement(self, node: ExpressionStatement) -> str:
        return self._parenthesize(";", node.expression)

    def _print_print_statement(self, node: PrintStatement) -> str:
        return self._parenthesize("print", node.expression)

    def _print_var_declaration(self, node: VarDeclaration) -> str:
        if node.initializer is None:
            return f"(var {node.name.lexeme})"
        return f"(var {node.name.lexeme} = {node.initializer.accept(self)})"
