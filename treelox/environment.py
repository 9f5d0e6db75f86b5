from .errors import LoxRuntimeError


class Environment:
    def __init__(self, enclosing=None):
        self.values = {}
        self.enclosing = enclosing

    def define(self, name, value):
        self.values[name] = value

    def assign(self, name, value):
        environment = self
        while environment is not None:
            if name.lexeme in environment.values:
                environment.values[name.lexeme] = value
                return
            environment = environment.enclosing
        raise LoxRuntimeError(
            name, f"Undefined variable '{name.lexeme}'.")

    def get(self, name):
        environment = self
        while environment is not None:
            if name.lexeme in environment.values:
                return environment.values[name.lexeme]
            environment = environment.enclosing
        raise LoxRuntimeError(
            name, f"Undefined variable '{name.lexeme}'.")
