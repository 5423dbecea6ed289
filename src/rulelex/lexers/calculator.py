"""Lexer for a simple four-function calculator."""

from __future__ import annotations

from rulelex.lexer import Lexer
from rulelex.rules import rule


class Calculator(Lexer):
    """Tokens for integer arithmetic with parentheses.

    Usage:
            >>> Calculator.tokenize("12 + (3*4)")
        [Token(NUM, 12, 1:0), Token(PLS, 1:3), Token(LPAREN, 1:5), ...]

    """

    # Default state

    plus = rule(r"\+", action=lambda env, text: "PLS")
    minus = rule(r"-", action=lambda env, text: "SUB")
    times = rule(r"\*", action=lambda env, text: "MUL")
    divide = rule(r"/", action=lambda env, text: "DIV")

    lparen = rule(r"\(", action=lambda env, text: "LPAREN")
    rparen = rule(r"\)", action=lambda env, text: "RPAREN")

    @rule(r"[0-9]+")
    def number(env, text):
        return "NUM", int(text)

    whitespace = rule(r"\s")
