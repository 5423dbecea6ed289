"""Ready-made lexers built on rulelex."""

from rulelex.lexers.calculator import Calculator

__all__ = ["Calculator"]
