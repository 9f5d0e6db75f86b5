from .syntax import Expr, Stmt
from .tokens import TokenType

MAX_ARGUMENTS = 255

STATEMENT_KEYWORDS = (
    TokenType.CLASS,
    TokenType.FUN,
    TokenType.VAR,
    TokenType.FOR,
    TokenType.IF,
    TokenType.WHILE,
    TokenType.PRINT,
    TokenType.RETURN,
)


class Parser:
    class Error(RuntimeError):
        def __init__(self, token, message):
            super().__init__(message)
            self.token = token
            self.message = message

    def __init__(self, tokens, reporter):
        self.tokens = tokens
        self.reporter = reporter
        self.current = 0
        self.loop_depth = 0
        self.function_depth = 0

    def parse(self):
        statements = []
        while not self.at_end():
            try:
                statement = self.declaration()
            except RecursionError:
                error = self.error(self.peek(), "Expression nested too deeply.")
                self.synchronize(error.token)
                continue
            if statement is not None:
                statements.append(statement)
        return statements

    def parse_expression(self):
        """Parses a lone expression spanning every token, or returns None.

        Nothing is reported on failure; the REPL falls back to parsing the
        line as statements, which reports any errors.
        """
        reporter, self.reporter = self.reporter, _SilentReporter()
        try:
            expr = self.expression()
            if not self.at_end() or self.reporter.had_error:
                return None
            return expr
        except (Parser.Error, RecursionError):
            return None
        finally:
            self.reporter = reporter

    def declaration(self):
        try:
            if self.match(TokenType.FUN):
                return self.function("function")
            if self.match(TokenType.VAR):
                return self.var_declaration()
            return self.statement()
        except Parser.Error as error:
            self.synchronize(error.token)
            return None

    def function(self, kind):
        name = self.consume(TokenType.IDENTIFIER, f"Expect {kind} name.")
        self.consume(TokenType.LEFT_PAREN, f"Expect '(' after {kind} name.")

        params = []
        if self.peek().type != TokenType.RIGHT_PAREN:
            params.append(self.consume(
                TokenType.IDENTIFIER, "Expect parameter name."))
            while self.match(TokenType.COMMA):
                if len(params) >= MAX_ARGUMENTS:
                    self.error(
                        self.peek(), f"Cannot have more than {MAX_ARGUMENTS} parameters.")
                params.append(self.consume(
                    TokenType.IDENTIFIER, "Expect parameter name."))

        self.consume(TokenType.RIGHT_PAREN, "Expect ')' after parameters.")
        self.consume(TokenType.LEFT_BRACE, f"Expect '{'{'}' before {kind} body.")

        # A loop around a declaration does not extend into its body.
        enclosing_loop_depth = self.loop_depth
        self.loop_depth = 0
        self.function_depth += 1
        try:
            body = self.block()
        finally:
            self.function_depth -= 1
            self.loop_depth = enclosing_loop_depth
        return Stmt.Function(name, params, body)

    def statement(self):
        if self.match(TokenType.FOR):
            return self.for_statement()
        if self.match(TokenType.IF):
            return self.if_statement()
        if self.match(TokenType.PRINT):
            return self.print_statement()
        if self.match(TokenType.LEFT_BRACE):
            return Stmt.Block(self.block())
        if keyword := self.match(TokenType.RETURN):
            return self.return_statement(keyword)
        if keyword := self.match(TokenType.BREAK):
            return self.break_statement(keyword)
        if self.match(TokenType.WHILE):
            return self.while_statement()
        return self.expression_statement()

    def block(self):
        statements = []
        while self.peek().type != TokenType.RIGHT_BRACE and not self.at_end():
            if (statement := self.declaration()) is not None:
                statements.append(statement)
        self.consume(TokenType.RIGHT_BRACE, "Expect '}' after block.")
        return statements

    def for_statement(self):
        self.consume(TokenType.LEFT_PAREN, "Expect '(' after 'for'.")

        initializer = None
        if self.match(TokenType.SEMICOLON):
            pass
        elif self.match(TokenType.VAR):
            initializer = self.var_declaration()
        else:
            initializer = self.expression_statement()

        condition = None
        if self.peek().type != TokenType.SEMICOLON:
            condition = self.expression()
        self.consume(TokenType.SEMICOLON, "Expect ';' after loop condition.")

        increment = None
        if self.peek().type != TokenType.RIGHT_PAREN:
            increment = self.expression()
        self.consume(TokenType.RIGHT_PAREN, "Expect ')' after for clauses.")

        body = self.loop_body()

        if increment is not None:
            body = Stmt.Block([body, Stmt.Expression(increment)])
        if condition is None:
            condition = Expr.Literal(True)
        body = Stmt.While(condition, body)
        if initializer is not None:
            body = Stmt.Block([initializer, body])
        return body

    def if_statement(self):
        self.consume(TokenType.LEFT_PAREN, "Expect '(' after 'if'.")
        condition = self.expression()
        self.consume(TokenType.RIGHT_PAREN, "Expect ')' after if condition.")
        then_branch = self.statement()
        else_branch = None
        if self.match(TokenType.ELSE):
            else_branch = self.statement()
        return Stmt.If(condition, then_branch, else_branch)

    def expression_statement(self):
        expression = self.expression()
        self.consume(TokenType.SEMICOLON, "Expect ';' after expression.")
        return Stmt.Expression(expression)

    def print_statement(self):
        expression = self.expression()
        self.consume(TokenType.SEMICOLON, "Expect ';' after value.")
        return Stmt.Print(expression)

    def return_statement(self, keyword):
        if self.function_depth == 0:
            raise self.error(keyword, "Cannot return from top-level code.")
        value = None
        if self.peek().type != TokenType.SEMICOLON:
            value = self.expression()
        self.consume(TokenType.SEMICOLON, "Expect ';' after return value.")
        return Stmt.Return(keyword, value)

    def break_statement(self, keyword):
        if self.loop_depth == 0:
            raise self.error(keyword, "Cannot use 'break' outside of a loop.")
        self.consume(TokenType.SEMICOLON, "Expect ';' after 'break'.")
        return Stmt.Break(keyword)

    def var_declaration(self):
        name = self.consume(TokenType.IDENTIFIER, "Expect variable name.")
        initializer = None
        if self.match(TokenType.EQUAL):
            initializer = self.expression()
        self.consume(TokenType.SEMICOLON, "Expect ';' after variable declaration.")
        return Stmt.Var(name, initializer)

    def while_statement(self):
        self.consume(TokenType.LEFT_PAREN, "Expect '(' after 'while'.")
        condition = self.expression()
        self.consume(TokenType.RIGHT_PAREN, "Expect ')' after condition.")
        body = self.loop_body()
        return Stmt.While(condition, body)

    def loop_body(self):
        self.loop_depth += 1
        try:
            return self.statement()
        finally:
            self.loop_depth -= 1

    def expression(self):
        return self.assignment()

    def assignment(self):
        expr = self.logic_or()
        if equals := self.match(TokenType.EQUAL):
            value = self.assignment()
            if isinstance(expr, Expr.Variable):
                return Expr.Assign(expr.name, value)
            self.error(equals, "Invalid assignment target.")
        return expr

    def logic_or(self):
        expr = self.logic_and()
        while operator := self.match(TokenType.OR):
            expr = Expr.Logical(expr, operator, self.logic_and())
        return expr

    def logic_and(self):
        expr = self.equality()
        while operator := self.match(TokenType.AND):
            expr = Expr.Logical(expr, operator, self.equality())
        return expr

    def equality(self):
        expr = self.comparison()
        while operator := self.match(TokenType.BANG_EQUAL, TokenType.EQUAL_EQUAL):
            expr = Expr.Binary(expr, operator, self.comparison())
        return expr

    def comparison(self):
        expr = self.term()
        while operator := self.match(TokenType.GREATER, TokenType.GREATER_EQUAL,
                                     TokenType.LESS, TokenType.LESS_EQUAL):
            expr = Expr.Binary(expr, operator, self.term())
        return expr

    def term(self):
        expr = self.factor()
        while operator := self.match(TokenType.MINUS, TokenType.PLUS):
            expr = Expr.Binary(expr, operator, self.factor())
        return expr

    def factor(self):
        expr = self.unary()
        while operator := self.match(TokenType.SLASH, TokenType.STAR):
            expr = Expr.Binary(expr, operator, self.unary())
        return expr

    def unary(self):
        if operator := self.match(TokenType.BANG, TokenType.MINUS):
            return Expr.Unary(operator, self.unary())
        return self.call()

    def call(self):
        expr = self.primary()
        while self.match(TokenType.LEFT_PAREN):
            expr = self.finish_call(expr)
        return expr

    def finish_call(self, callee):
        arguments = []
        if self.peek().type != TokenType.RIGHT_PAREN:
            arguments.append(self.expression())
            while self.match(TokenType.COMMA):
                if len(arguments) >= MAX_ARGUMENTS:
                    self.error(
                        self.peek(), f"Cannot have more than {MAX_ARGUMENTS} arguments.")
                arguments.append(self.expression())
        paren = self.consume(TokenType.RIGHT_PAREN, "Expect ')' after arguments.")
        return Expr.Call(callee, paren, arguments)

    def primary(self):
        if self.match(TokenType.FALSE):
            return Expr.Literal(False)
        if self.match(TokenType.TRUE):
            return Expr.Literal(True)
        if self.match(TokenType.NIL):
            return Expr.Literal(None)
        if token := self.match(TokenType.NUMBER, TokenType.STRING):
            return Expr.Literal(token.literal)
        if self.match(TokenType.LEFT_PAREN):
            expr = self.expression()
            self.consume(TokenType.RIGHT_PAREN, "Expect ')' after expression.")
            return Expr.Grouping(expr)
        if token := self.match(TokenType.IDENTIFIER):
            return Expr.Variable(token)
        raise self.error(self.peek(), "Expect expression.")

    def synchronize(self, token):
        # Errors raised after consuming their token must not skip the next one.
        if token is not self.previous():
            self.advance()
        while not self.at_end():
            if self.previous().type == TokenType.SEMICOLON:
                return
            if self.peek().type in STATEMENT_KEYWORDS:
                return
            self.advance()

    def consume(self, token_type, message):
        if token := self.match(token_type):
            return token
        raise self.error(self.peek(), message)

    def match(self, *token_types):
        if self.peek().type in token_types:
            return self.advance()
        return None

    def advance(self):
        token = self.peek()
        if not self.at_end():
            self.current += 1
        return token

    def at_end(self):
        return self.peek().type == TokenType.EOF

    def peek(self):
        return self.tokens[self.current]

    def previous(self):
        return self.tokens[self.current - 1]

    def error(self, token, message):
        self.reporter.error(token, message)
        return Parser.Error(token, message)


class _SilentReporter:
    def __init__(self):
        self.had_error = False

    def error(self, token, message):
        self.had_error = True
