import unittest

from treelox.printer import print_ast
from treelox.syntax import Expr, Stmt
from treelox.tokens import Token, TokenType


def token(type, lexeme):
    return Token(type, lexeme, None, 1)


class PrinterTestCase(unittest.TestCase):

    def test_expressions(self):
        minus = token(TokenType.MINUS, "-")
        star = token(TokenType.STAR, "*")
        cases = [
            (Expr.Binary(
                Expr.Unary(minus, Expr.Literal(123.0)), star, Expr.Grouping(Expr.Literal(45.67))),
             "(* (- 123) (group 45.67))"),
            (Expr.Literal(None), "nil"),
            (Expr.Literal("text"), "\"text\""),
            (Expr.Logical(Expr.Literal(True), token(TokenType.OR, "or"), Expr.Literal(False)),
             "(or true false)"),
            (Expr.Call(Expr.Variable(token(TokenType.IDENTIFIER, "f")),
                       token(TokenType.RIGHT_PAREN, ")"), []),
             "(call f)"),
        ]
        for node, expected in cases:
            self.assertEqual(expected, print_ast(node))

    def test_statements(self):
        name = token(TokenType.IDENTIFIER, "x")
        cases = [
            (Stmt.Var(name, None), "(var x)"),
            (Stmt.Block([]), "(block)"),
            (Stmt.Break(token(TokenType.BREAK, "break")), "(break)"),
            (Stmt.Return(token(TokenType.RETURN, "return"), Expr.Variable(name)), "(return x)"),
            (Stmt.Function(name, [], [Stmt.Print(Expr.Literal(1.0))]), "(fun x () (print 1))"),
        ]
        for node, expected in cases:
            self.assertEqual(expected, print_ast(node))

    def test_node_classes_and_unknown_nodes(self):
        for node_class in (Expr.Assign, Expr.Binary, Expr.Call, Expr.Grouping,
                           Expr.Literal, Expr.Logical, Expr.Unary, Expr.Variable):
            self.assertTrue(issubclass(node_class, Expr), node_class)
        for node_class in (Stmt.Block, Stmt.Break, Stmt.Expression, Stmt.Function, Stmt.If,
                           Stmt.Print, Stmt.Return, Stmt.Var, Stmt.While):
            self.assertTrue(issubclass(node_class, Stmt), node_class)
        self.assertEqual("Stmt.While", Stmt.While.__qualname__)
        self.assertEqual(("keyword", "value"), Stmt.Return.__match_args__)
        with self.assertRaises(TypeError):
            print_ast(object())


if __name__ == '__main__':
    unittest.main()
