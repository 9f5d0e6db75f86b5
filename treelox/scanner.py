from .tokens import KEYWORDS, Token, TokenType


def is_digit(c):
    return "0" <= c <= "9"


def is_alpha(c):
    return "a" <= c <= "z" or "A" <= c <= "Z" or c == "_"


def is_alphanumeric(c):
    return is_alpha(c) or is_digit(c)


class Scanner:
    def __init__(self, source, reporter):
        self.source = source
        self.reporter = reporter
        self.start = 0
        self.current = 0
        self.line = 1
        self.tokens = []

    def scan_tokens(self):
        while not self.at_end():
            self.start = self.current
            self.scan_token()
        self.tokens.append(Token(TokenType.EOF, "", None, self.line))
        return self.tokens

    def scan_token(self):
        match c := self.advance():
            case "(": self.add_token(TokenType.LEFT_PAREN)
            case ")": self.add_token(TokenType.RIGHT_PAREN)
            case "{": self.add_token(TokenType.LEFT_BRACE)
            case "}": self.add_token(TokenType.RIGHT_BRACE)
            case ",": self.add_token(TokenType.COMMA)
            case ".": self.add_token(TokenType.DOT)
            case "-": self.add_token(TokenType.MINUS)
            case "+": self.add_token(TokenType.PLUS)
            case ";": self.add_token(TokenType.SEMICOLON)
            case "*": self.add_token(TokenType.STAR)
            case "!": self.add_token(TokenType.BANG_EQUAL if self.match("=") else TokenType.BANG)
            case "=": self.add_token(TokenType.EQUAL_EQUAL if self.match("=") else TokenType.EQUAL)
            case "<": self.add_token(TokenType.LESS_EQUAL if self.match("=") else TokenType.LESS)
            case ">": self.add_token(TokenType.GREATER_EQUAL if self.match("=") else TokenType.GREATER)
            case "/":
                if self.match("/"):
                    self.line_comment()
                elif self.match("*"):
                    self.block_comment()
                else:
                    self.add_token(TokenType.SLASH)
            case " " | "\r" | "\t": pass
            case "\n": self.line += 1
            case "\"": self.string()
            case _:
                if is_digit(c):
                    self.number()
                elif is_alpha(c):
                    self.identifier()
                else:
                    self.reporter.error_at_line(self.line, "Unexpected character.")

    def line_comment(self):
        while self.peek() != "\n" and not self.at_end():
            self.current += 1

    def block_comment(self):
        # The opening "/*" has already been consumed.
        start_line = self.line
        depth = 1
        while depth > 0:
            if self.at_end():
                self.reporter.error_at_line(start_line, "Unterminated block comment.")
                return
            if self.peek() == "/" and self.peek_next() == "*":
                depth += 1
                self.current += 2
            elif self.peek() == "*" and self.peek_next() == "/":
                depth -= 1
                self.current += 2
            else:
                if self.peek() == "\n":
                    self.line += 1
                self.current += 1

    def string(self):
        start_line = self.line
        while self.peek() != "\"" and not self.at_end():
            if self.peek() == "\n":
                self.line += 1
            self.current += 1

        if self.at_end():
            self.reporter.error_at_line(start_line, "Unterminated string.")
            return

        self.current += 1  # Closing "
        value = self.source[self.start + 1: self.current - 1]
        self.add_token(TokenType.STRING, value)

    def number(self):
        while is_digit(self.peek()):
            self.current += 1

        # A trailing "." without digits is left for the DOT token.
        if self.peek() == "." and is_digit(self.peek_next()):
            self.current += 1
            while is_digit(self.peek()):
                self.current += 1

        value = float(self.source[self.start:self.current])
        self.add_token(TokenType.NUMBER, value)

    def identifier(self):
        while is_alphanumeric(self.peek()):
            self.current += 1

        text = self.source[self.start:self.current]
        self.add_token(KEYWORDS.get(text, TokenType.IDENTIFIER))

    def add_token(self, type, literal=None):
        lexeme = self.source[self.start:self.current]
        self.tokens.append(Token(type, lexeme, literal, self.line))

    def match(self, expected):
        if not self.at_end():
            if self.source[self.current] == expected:
                self.current += 1
                return True
        return False

    def advance(self):
        c = self.source[self.current]
        self.current += 1
        return c

    def peek(self):
        if self.at_end():
            return "\0"
        return self.source[self.current]

    def peek_next(self):
        if self.current + 1 >= len(self.source):
            return "\0"
        return self.source[self.current + 1]

    def at_end(self):
        return not self.current < len(self.source)
