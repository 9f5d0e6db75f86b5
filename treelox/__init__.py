"""A tree-walking interpreter for the Lox scripting language."""

from .session import Lox, RunOutcome

__all__ = ["Lox", "RunOutcome"]
