import io

from treelox import Lox


def make_session():
    return Lox(stdout=io.StringIO(), stderr=io.StringIO())


def run(source, lox=None):
    """Runs source in a fresh (or given) session and returns (stdout, stderr, outcome)."""
    lox = lox if lox is not None else make_session()
    out_start, err_start = lox.stdout.tell(), lox.stderr.tell()
    outcome = lox.run_source(source)
    return lox.stdout.getvalue()[out_start:], lox.stderr.getvalue()[err_start:], outcome
