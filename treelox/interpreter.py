import sys

from .environment import Environment
from .errors import LoxRuntimeError
from .runtime import (BREAK, NORMAL, UNINITIALIZED, Completion, LoxCallable,
                      LoxFunction, ValueKind, kind_of)
from .syntax import Expr, Stmt
from .tokens import TokenType


def stringify(value):
    match kind_of(value):
        case ValueKind.NIL:
            return "nil"
        case ValueKind.BOOL:
            return "true" if value else "false"
        case ValueKind.NUMBER:
            text = repr(value)
            if text[-2:] == ".0":
                text = text[:-2]
            return text
        case ValueKind.STRING:
            return value
        case ValueKind.CALLABLE:
            return str(value)


def is_truthy(value):
    match kind_of(value):
        case ValueKind.NIL:
            return False
        case ValueKind.BOOL:
            return value
        case ValueKind.NUMBER:
            return value != 0
        case ValueKind.STRING:
            return value != ""
        case ValueKind.CALLABLE:
            return True


def is_equal(left, right):
    kind = kind_of(left)
    if kind != kind_of(right):
        return False
    match kind:
        case ValueKind.NIL:
            return True
        case ValueKind.BOOL | ValueKind.NUMBER | ValueKind.STRING:
            return left == right
        case ValueKind.CALLABLE:
            return left is right


class Interpreter:
    def __init__(self, reporter, output=None):
        self.reporter = reporter
        self.output = output if output is not None else sys.stdout
        self.globals = Environment()
        self.environment = self.globals

    def interpret(self, statements):
        try:
            for statement in statements:
                self.execute(statement)
        except LoxRuntimeError as error:
            self.reporter.runtime_error(error)

    def evaluate_expression(self, expr):
        """Evaluates a single expression in the current environment.

        Returns a ``(value, kind)`` pair, or None when a runtime error was
        reported instead.
        """
        try:
            value = self.evaluate(expr)
        except LoxRuntimeError as error:
            self.reporter.runtime_error(error)
            return None
        return value, kind_of(value)

    def execute_block(self, statements, environment):
        previous = self.environment
        try:
            self.environment = environment
            for statement in statements:
                completion = self.execute(statement)
                if completion is not NORMAL:
                    return completion
            return NORMAL
        finally:
            self.environment = previous

    def execute(self, stmt):
        match stmt:
            case Stmt.Expression(expression):
                self.evaluate(expression)
                return NORMAL

            case Stmt.Print(expression):
                value = self.evaluate(expression)
                print(stringify(value), file=self.output)
                return NORMAL

            case Stmt.Var(name, initializer):
                value = UNINITIALIZED
                if initializer is not None:
                    value = self.evaluate(initializer)
                self.environment.define(name.lexeme, value)
                return NORMAL

            case Stmt.Block(statements):
                return self.execute_block(statements, Environment(self.environment))

            case Stmt.If(condition, then_branch, else_branch):
                if is_truthy(self.evaluate(condition)):
                    return self.execute(then_branch)
                if else_branch is not None:
                    return self.execute(else_branch)
                return NORMAL

            case Stmt.While(condition, body):
                while is_truthy(self.evaluate(condition)):
                    completion = self.execute(body)
                    if completion is BREAK:
                        break
                    if completion is not NORMAL:
                        return completion
                return NORMAL

            case Stmt.Break():
                return BREAK

            case Stmt.Return(_, value):
                result = None
                if value is not None:
                    result = self.evaluate(value)
                return Completion.returning(result)

            case Stmt.Function(name):
                function = LoxFunction(stmt, self.environment)
                self.environment.define(name.lexeme, function)
                return NORMAL

        raise TypeError(f"unknown statement: {stmt!r}")

    def evaluate(self, expr):
        match expr:
            case Expr.Literal(value):
                return value

            case Expr.Grouping(expression):
                return self.evaluate(expression)

            case Expr.Variable(name):
                value = self.environment.get(name)
                if value is UNINITIALIZED:
                    raise LoxRuntimeError(
                        name, "Variable used before being initialized.")
                return value

            case Expr.Assign(name, value):
                result = self.evaluate(value)
                self.environment.assign(name, result)
                return result

            case Expr.Logical(left, operator, right):
                result = self.evaluate(left)
                if operator.type == TokenType.OR:
                    if is_truthy(result):
                        return result
                elif not is_truthy(result):
                    return result
                return self.evaluate(right)

            case Expr.Unary(operator, right):
                return self.unary(operator, self.evaluate(right))

            case Expr.Binary(left, operator, right):
                return self.binary(operator, self.evaluate(left), self.evaluate(right))

            case Expr.Call(callee, paren, arguments):
                return self.call(self.evaluate(callee), paren, arguments)

        raise TypeError(f"unknown expression: {expr!r}")

    def unary(self, operator, right):
        match operator.type:
            case TokenType.BANG:
                return not is_truthy(right)
            case TokenType.MINUS:
                self.check_operands(operator, right)
                return -right
        raise LoxRuntimeError(operator, "Unknown unary operator.")

    def binary(self, operator, left, right):
        match operator.type:
            case TokenType.BANG_EQUAL: return not is_equal(left, right)
            case TokenType.EQUAL_EQUAL: return is_equal(left, right)
            case TokenType.GREATER:
                self.check_operands(operator, left, right)
                return left > right
            case TokenType.GREATER_EQUAL:
                self.check_operands(operator, left, right)
                return left >= right
            case TokenType.LESS:
                self.check_operands(operator, left, right)
                return left < right
            case TokenType.LESS_EQUAL:
                self.check_operands(operator, left, right)
                return left <= right
            case TokenType.MINUS:
                self.check_operands(operator, left, right)
                return left - right
            case TokenType.PLUS:
                return self.add(operator, left, right)
            case TokenType.SLASH:
                self.check_operands(operator, left, right)
                if right == 0.0:
                    raise LoxRuntimeError(operator, "Division by zero.")
                return left / right
            case TokenType.STAR:
                self.check_operands(operator, left, right)
                return left * right
        raise LoxRuntimeError(operator, "Unknown binary operator.")

    def add(self, operator, left, right):
        match kind_of(left), kind_of(right):
            case (ValueKind.NUMBER, ValueKind.NUMBER) | (ValueKind.STRING, ValueKind.STRING):
                return left + right
            case (ValueKind.STRING, ValueKind.NUMBER):
                return left + stringify(right)
            case (ValueKind.NUMBER, ValueKind.STRING):
                return stringify(left) + right
        raise LoxRuntimeError(
            operator, "Operands must be two numbers or two strings.")

    def call(self, callee, paren, argument_exprs):
        if not isinstance(callee, LoxCallable):
            raise LoxRuntimeError(
                paren, "Can only call functions and classes.")
        arguments = [self.evaluate(argument) for argument in argument_exprs]
        if len(arguments) != callee.arity():
            raise LoxRuntimeError(
                paren, f"Expected {callee.arity()} arguments but got {len(arguments)}.")
        try:
            return callee.call(self, arguments)
        except RecursionError:
            raise LoxRuntimeError(paren, "Stack overflow.") from None

    def check_operands(self, operator, *operands):
        if any(kind_of(operand) is not ValueKind.NUMBER for operand in operands):
            if len(operands) == 1:
                raise LoxRuntimeError(
                    operator, "Operand must be a number.")
            raise LoxRuntimeError(
                operator, "Operands must be numbers.")
