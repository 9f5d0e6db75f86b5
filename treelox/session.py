import sys
from enum import Enum

from .interpreter import Interpreter, stringify
from .parser import Parser
from .scanner import Scanner
from .tokens import TokenType

# Every Lox call or nested expression costs several Python frames.
RECURSION_LIMIT = 50_000


class RunOutcome(Enum):
    SUCCESS = 0
    STATIC_ERROR = 65
    RUNTIME_ERROR = 70

    @property
    def exit_code(self):
        return self.value


class Lox:
    """One interpreter session: the global environment and the error flags.

    A file run uses a single session for the whole script. The REPL keeps one
    session for its lifetime and calls reset() before each line, so earlier
    definitions stay visible while earlier errors are forgotten.
    """

    def __init__(self, stdout=None, stderr=None):
        if sys.getrecursionlimit() < RECURSION_LIMIT:
            sys.setrecursionlimit(RECURSION_LIMIT)
        self.stdout = stdout if stdout is not None else sys.stdout
        self.stderr = stderr if stderr is not None else sys.stderr
        self.had_error = False
        self.had_runtime_error = False
        self.interpreter = Interpreter(self, self.stdout)

    def reset(self):
        self.had_error = False
        self.had_runtime_error = False

    def scan(self, source):
        return Scanner(source, self).scan_tokens()

    def parse(self, source):
        return Parser(self.scan(source), self).parse()

    def run_source(self, source):
        statements = self.parse(source)
        if self.had_error:
            return self.outcome()

        self.interpreter.interpret(statements)
        return self.outcome()

    def run_expression(self, source):
        """Evaluates a bare expression and prints its value.

        Returns None without reporting anything when the source is not a
        single expression.
        """
        tokens = self.scan(source)
        if self.had_error:
            return self.outcome()

        expr = Parser(tokens, self).parse_expression()
        if expr is None:
            return None

        if (result := self.interpreter.evaluate_expression(expr)) is not None:
            value, _ = result
            print(stringify(value), file=self.stdout)
        return self.outcome()

    def outcome(self):
        if self.had_error:
            return RunOutcome.STATIC_ERROR
        if self.had_runtime_error:
            return RunOutcome.RUNTIME_ERROR
        return RunOutcome.SUCCESS

    def error(self, token, message):
        if token.type == TokenType.EOF:
            self.report(token.line, " at end", message)
        else:
            self.report(token.line, f" at '{token.lexeme}'", message)

    def error_at_line(self, line, message):
        self.report(line, "", message)

    def runtime_error(self, error):
        self.write_diagnostic(error.token.line, f" at '{error.token.lexeme}'", error.message)
        self.had_runtime_error = True

    def report(self, line, where, message):
        self.write_diagnostic(line, where, message)
        self.had_error = True

    def write_diagnostic(self, line, where, message):
        print(f"[line {line}] Error{where}: {message}", file=self.stderr)
