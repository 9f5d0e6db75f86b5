"""Runtime values and the outcome of executing a statement.

Lox values are plain Python objects: ``None`` for nil, ``bool``, ``float``
for numbers, ``str``, and LoxCallable instances. ValueKind names which of
those a value is.
"""

from enum import Enum, auto

from .environment import Environment


class ValueKind(Enum):
    NIL = auto()
    BOOL = auto()
    NUMBER = auto()
    STRING = auto()
    CALLABLE = auto()


class _Uninitialized:
    """Marks a binding declared without an initializer."""

    def __repr__(self):
        return "<uninitialized>"


UNINITIALIZED = _Uninitialized()


def kind_of(value):
    match value:
        case None:
            return ValueKind.NIL
        case bool():
            return ValueKind.BOOL
        case float():
            return ValueKind.NUMBER
        case str():
            return ValueKind.STRING
        case LoxCallable():
            return ValueKind.CALLABLE
    raise TypeError(f"not a Lox value: {value!r}")


class Completion:
    """How a statement finished: normally, by ``break``, or by ``return``."""

    class Kind(Enum):
        NORMAL = auto()
        BREAK = auto()
        RETURN = auto()

    __slots__ = ("kind", "value")

    def __init__(self, kind, value=None):
        self.kind = kind
        self.value = value

    @classmethod
    def returning(cls, value):
        return cls(Completion.Kind.RETURN, value)

    def __repr__(self):
        if self.kind is Completion.Kind.RETURN:
            return f"Completion({self.kind.name}, {self.value!r})"
        return f"Completion({self.kind.name})"


NORMAL = Completion(Completion.Kind.NORMAL)
BREAK = Completion(Completion.Kind.BREAK)


class LoxCallable:
    def arity(self):
        raise NotImplementedError()

    def call(self, interpreter, arguments):
        raise NotImplementedError()


class LoxFunction(LoxCallable):
    def __init__(self, declaration, closure):
        self.declaration = declaration
        self.closure = closure

    def arity(self):
        return len(self.declaration.params)

    def call(self, interpreter, arguments):
        environment = Environment(self.closure)
        for param, argument in zip(self.declaration.params, arguments):
            environment.define(param.lexeme, argument)
        completion = interpreter.execute_block(self.declaration.body, environment)
        if completion.kind is Completion.Kind.RETURN:
            return completion.value
        return None

    def __str__(self):
        return f"<fn {self.declaration.name.lexeme}>"
