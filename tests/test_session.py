import contextlib
import io
import os
import tempfile
import unittest

from treelox import Lox, RunOutcome
from treelox.__main__ import main, run_prompt
from treelox.tokens import Token, TokenType

from .support import make_session, run


class SessionTestCase(unittest.TestCase):

    def test_outcomes(self):
        cases = {
            "print 1;": RunOutcome.SUCCESS,
            "print ;": RunOutcome.STATIC_ERROR,
            "print \"abc;": RunOutcome.STATIC_ERROR,
            "print 1/0;": RunOutcome.RUNTIME_ERROR,
        }
        for case, expected in cases.items():
            self.assertEqual(expected, run(case)[2], case)
        self.assertEqual([0, 65, 70], [outcome.exit_code for outcome in RunOutcome])

    def test_static_errors_prevent_evaluation(self):
        out, err, outcome = run("print 1;\nprint ;\n@")
        self.assertEqual("", out)
        self.assertEqual(
            ["[line 3] Error: Unexpected character.",
             "[line 2] Error at ';': Expect expression."],
            err.splitlines())

    def test_report_format(self):
        lox = make_session()
        lox.report(3, " at 'x'", "Something broke.")
        lox.error(Token(TokenType.EOF, "", None, 4), "Expect thing.")
        lox.error_at_line(5, "Plain.")
        self.assertEqual(
            "[line 3] Error at 'x': Something broke.\n"
            "[line 4] Error at end: Expect thing.\n"
            "[line 5] Error: Plain.\n",
            lox.stderr.getvalue())
        self.assertTrue(lox.had_error)
        self.assertFalse(lox.had_runtime_error)

    def test_reset_clears_flags_but_keeps_globals(self):
        lox = make_session()
        run("var a = 1; print ;", lox)
        self.assertTrue(lox.had_error)
        lox.reset()
        run("var a = 1; print nil + a;", lox)
        self.assertFalse(lox.had_error)
        self.assertTrue(lox.had_runtime_error)
        lox.reset()
        self.assertEqual(RunOutcome.SUCCESS, lox.outcome())
        out, err, outcome = run("print a;", lox)
        self.assertEqual(("1\n", "", RunOutcome.SUCCESS), (out, err, outcome))

    def test_run_expression(self):
        lox = make_session()
        self.assertEqual(RunOutcome.SUCCESS, lox.run_expression("1 + 2"))
        self.assertEqual("3\n", lox.stdout.getvalue())
        self.assertIsNone(lox.run_expression("print 1;"))
        self.assertEqual(RunOutcome.RUNTIME_ERROR, lox.run_expression("missing"))
        self.assertEqual("[line 1] Error at 'missing': Undefined variable 'missing'.\n",
                         lox.stderr.getvalue())

    def test_deep_nesting_is_reported_not_raised(self):
        out, err, outcome = run("print " + "(" * 100 + "1" + ")" * 100 + ";")
        self.assertEqual(("1\n", "", RunOutcome.SUCCESS), (out, err, outcome))

        out, err, outcome = run("print " + "(" * 10_000 + "1" + ")" * 10_000 + ";")
        self.assertEqual(("", RunOutcome.STATIC_ERROR), (out, outcome))
        self.assertEqual("[line 1] Error at '(': Expression nested too deeply.\n", err)

    def test_default_streams(self):
        with contextlib.redirect_stdout(io.StringIO()) as out, \
                contextlib.redirect_stderr(io.StringIO()) as err:
            lox = Lox()
            lox.run_source("print \"hi\"; print x;")
        self.assertEqual("hi\n", out.getvalue())
        self.assertEqual("[line 1] Error at 'x': Undefined variable 'x'.\n", err.getvalue())


class PromptTestCase(unittest.TestCase):

    def test_prompt_echoes_expressions_and_keeps_state(self):
        lox = make_session()
        stdin = io.StringIO("var a = 2;\na * 3\nprint a;\n")
        self.assertEqual(RunOutcome.SUCCESS, run_prompt(lox, stdin))
        self.assertEqual("> > 6\n> 2\n> \n", lox.stdout.getvalue())

    def test_prompt_continues_after_errors(self):
        lox = make_session()
        stdin = io.StringIO("print x;\nprint ;\nprint 1;\n")
        run_prompt(lox, stdin)
        self.assertEqual("> > > 1\n> \n", lox.stdout.getvalue())
        self.assertEqual(
            ["[line 1] Error at 'x': Undefined variable 'x'.",
             "[line 1] Error at ';': Expect expression."],
            lox.stderr.getvalue().splitlines())
        self.assertFalse(lox.had_error)


class MainTestCase(unittest.TestCase):

    def run_script(self, source, *flags):
        with tempfile.NamedTemporaryFile("w", suffix=".lox", delete=False) as file:
            file.write(source)
        self.addCleanup(os.remove, file.name)
        with contextlib.redirect_stdout(io.StringIO()) as out, \
                contextlib.redirect_stderr(io.StringIO()) as err:
            code = main([*flags, file.name])
        return code, out.getvalue(), err.getvalue()

    def test_exit_codes(self):
        self.assertEqual((0, "3\n", ""), self.run_script("print 1 + 2;"))
        self.assertEqual(65, self.run_script("print ;")[0])
        code, out, err = self.run_script("print \"before\";\nprint -nil;")
        self.assertEqual((70, "before\n"), (code, out))
        self.assertEqual("[line 2] Error at '-': Operand must be a number.\n", err)

    def test_ast_flag(self):
        code, out, err = self.run_script("var a = 1 + 2;\nprint a;", "--ast")
        self.assertEqual((0, "(var a (+ 1 2))\n(print a)\n", ""), (code, out, err))

        code, out, err = self.run_script("var = 1;", "--ast")
        self.assertEqual((65, ""), (code, out))


if __name__ == '__main__':
    unittest.main()
