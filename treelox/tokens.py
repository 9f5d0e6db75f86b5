from enum import Enum, auto


class TokenType(Enum):
    # Single-character tokens.
    LEFT_PAREN = auto()
    RIGHT_PAREN = auto()
    LEFT_BRACE = auto()
    RIGHT_BRACE = auto()
    COMMA = auto()
    DOT = auto()
    MINUS = auto()
    PLUS = auto()
    SEMICOLON = auto()
    SLASH = auto()
    STAR = auto()

    # One or two character tokens.
    BANG = auto()
    BANG_EQUAL = auto()
    EQUAL = auto()
    EQUAL_EQUAL = auto()
    GREATER = auto()
    GREATER_EQUAL = auto()
    LESS = auto()
    LESS_EQUAL = auto()

    # Literals.
    IDENTIFIER = auto()
    STRING = auto()
    NUMBER = auto()

    # Keywords.
    AND = auto()
    CLASS = auto()
    ELSE = auto()
    FALSE = auto()
    FUN = auto()
    FOR = auto()
    IF = auto()
    NIL = auto()
    OR = auto()
    PRINT = auto()
    RETURN = auto()
    SUPER = auto()
    THIS = auto()
    TRUE = auto()
    VAR = auto()
    WHILE = auto()
    BREAK = auto()

    UNINITIALIZED = auto()
    EOF = auto()


KEYWORDS = {
    type.name.lower(): type
    for type in (
        TokenType.AND,
        TokenType.CLASS,
        TokenType.ELSE,
        TokenType.FALSE,
        TokenType.FUN,
        TokenType.FOR,
        TokenType.IF,
        TokenType.NIL,
        TokenType.OR,
        TokenType.PRINT,
        TokenType.RETURN,
        TokenType.SUPER,
        TokenType.THIS,
        TokenType.TRUE,
        TokenType.VAR,
        TokenType.WHILE,
        TokenType.BREAK,
    )
}


class Token:
    __slots__ = ("type", "lexeme", "literal", "line")

    def __init__(self, type, lexeme, literal, line):
        object.__setattr__(self, "type", type)
        object.__setattr__(self, "lexeme", lexeme)
        object.__setattr__(self, "literal", literal)
        object.__setattr__(self, "line", line)

    def __setattr__(self, name, value):
        raise AttributeError(f"Token is immutable, cannot set '{name}'")

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return (self.type, self.lexeme, self.literal, self.line) == \
            (other.type, other.lexeme, other.literal, other.line)

    def __hash__(self):
        return hash((self.type, self.lexeme, self.literal, self.line))

    def __repr__(self):
        return f"Token({self.type.name}, {self.lexeme!r}, {self.literal!r}, {self.line})"

    def __str__(self):
        return f"{self.type.name} {self.lexeme} {self.literal}"
