"""Renders syntax trees in a parenthesized prefix form, for debugging."""

from .interpreter import stringify
from .syntax import Expr, Stmt


def print_ast(node):
    match node:
        case list():
            return "\n".join(print_ast(statement) for statement in node)

        case Expr.Literal(value):
            if isinstance(value, str):
                return f"\"{value}\""
            return stringify(value)
        case Expr.Grouping(expression):
            return parenthesize("group", expression)
        case Expr.Unary(operator, right):
            return parenthesize(operator.lexeme, right)
        case Expr.Binary(left, operator, right) | Expr.Logical(left, operator, right):
            return parenthesize(operator.lexeme, left, right)
        case Expr.Variable(name):
            return name.lexeme
        case Expr.Assign(name, value):
            return parenthesize("=", name.lexeme, value)
        case Expr.Call(callee, _, arguments):
            return parenthesize("call", callee, *arguments)

        case Stmt.Expression(expression):
            return parenthesize(";", expression)
        case Stmt.Print(expression):
            return parenthesize("print", expression)
        case Stmt.Var(name, None):
            return parenthesize("var", name.lexeme)
        case Stmt.Var(name, initializer):
            return parenthesize("var", name.lexeme, initializer)
        case Stmt.Block(statements):
            return parenthesize("block", *statements)
        case Stmt.If(condition, then_branch, None):
            return parenthesize("if", condition, then_branch)
        case Stmt.If(condition, then_branch, else_branch):
            return parenthesize("if-else", condition, then_branch, else_branch)
        case Stmt.While(condition, body):
            return parenthesize("while", condition, body)
        case Stmt.Break():
            return "(break)"
        case Stmt.Return(_, None):
            return "(return)"
        case Stmt.Return(_, value):
            return parenthesize("return", value)
        case Stmt.Function(name, params, body):
            signature = "(" + " ".join(param.lexeme for param in params) + ")"
            return parenthesize("fun " + name.lexeme, signature, *body)

    raise TypeError(f"unknown syntax tree node: {node!r}")


def parenthesize(name, *parts):
    rendered = (part if isinstance(part, str) else print_ast(part) for part in parts)
    return "(" + " ".join([name, *rendered]) + ")"
