import argparse
import sys

from .printer import print_ast
from .session import Lox, RunOutcome


def run_file(lox, filename, ast=False):
    with open(filename, "r") as file:
        source = file.read()
    if ast:
        statements = lox.parse(source)
        if not lox.had_error:
            print(print_ast(statements), file=lox.stdout)
        return lox.outcome()
    return lox.run_source(source)


def run_prompt(lox, stdin=None):
    stdin = stdin if stdin is not None else sys.stdin
    while True:
        print("> ", end="", file=lox.stdout, flush=True)
        line = stdin.readline()
        if not line:
            print(file=lox.stdout)
            break
        lox.reset()
        if lox.run_expression(line) is None:
            lox.run_source(line)
    return RunOutcome.SUCCESS


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="treelox", description="Run Lox scripts")
    parser.add_argument("filename", nargs="?")
    parser.add_argument("--ast", action="store_true",
                        help="print the syntax tree of the script instead of running it")
    args = parser.parse_args(argv)

    lox = Lox()
    if args.filename is not None:
        outcome = run_file(lox, args.filename, args.ast)
    else:
        outcome = run_prompt(lox)
    return outcome.exit_code


if __name__ == "__main__":
    sys.exit(main())
