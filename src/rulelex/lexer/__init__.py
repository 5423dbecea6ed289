"""Rule-driven lexer for rulelex.

This package provides the Lexer base class and the scanner loop that
drives a lexer definition over an input string.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, Scanner, scan
├── core.py              # Lexer class (rule collection + entry points)
└── scanner.py           # Scanner loop (rule selection + position tracking)

Usage:
    >>> from rulelex.lexers import Calculator
    >>> for token in Calculator.tokenize("1 + 2"):
    ...     print(token)
Token(NUM, 1, 1:0)
Token(PLS, 1:2)
Token(NUM, 2, 1:4)
Token(EOS)

"""

from rulelex.lexer.core import Lexer
from rulelex.lexer.scanner import Scanner, scan

__all__ = ["Lexer", "Scanner", "scan"]
