"""
rulelex — Declarative rule-based lexing for Python

Define a lexer as an ordered set of pattern/action rules grouped by named
states; rulelex turns text into a list of typed tokens. Rule eligibility is
gated by the lexer state stack and by flags, and competing matches are
resolved by longest match (default) or first match.

Quick Start:
    >>> from rulelex import Lexer, rule
    >>>
    >>> class Calc(Lexer):
    ...     plus = rule(r"\\+", action=lambda env, text: "PLS")
    ...
    ...     @rule(r"[0-9]+")
    ...     def number(env, text):
    ...         return "NUM", int(text)
    ...
    ...     whitespace = rule(r"\\s")
    >>>
    >>> [(t.type, t.value) for t in Calc.tokenize("1 + 2")]
    [('NUM', 1), ('PLS', None), ('NUM', 2), ('EOS', None)]

States and flags:
    >>> class Strings(Lexer):
    ...     @rule(r'"')
    ...     def open_quote(env, text):
    ...         env.push_state("string")
    ...
    ...     @rule(r'[^"]+', state="string")
    ...     def body(env, text):
    ...         return "STRING", text
    ...
    ...     @rule(r'"', state="string")
    ...     def close_quote(env, text):
    ...         env.pop_state()
"""

from rulelex.config import (
    LexConfig,
    get_lex_config,
    lex_config_context,
    reset_lex_config,
    set_lex_config,
)
from rulelex.environment import Environment
from rulelex.errors import LexingError, RuleError, RulelexError, StateStackError
from rulelex.lexer import Lexer, Scanner, scan
from rulelex.location import StreamPosition
from rulelex.result import LexResult
from rulelex.rules import (
    ALL_STATES,
    DEFAULT_STATE,
    Emit,
    LexerBuilder,
    LexerDefinition,
    MatchPolicy,
    Rule,
    RuleDeclaration,
    RuleTable,
    discard,
    rule,
)
from rulelex.tokens import EOS, Token

__version__ = "0.1.0"

__all__ = [
    "ALL_STATES",
    "DEFAULT_STATE",
    "EOS",
    "Emit",
    "Environment",
    "LexConfig",
    "LexResult",
    "Lexer",
    "LexerBuilder",
    "LexerDefinition",
    "LexingError",
    "MatchPolicy",
    "Rule",
    "RuleDeclaration",
    "RuleError",
    "RuleTable",
    "RulelexError",
    "Scanner",
    "StateStackError",
    "StreamPosition",
    "Token",
    "__version__",
    "discard",
    "get_lex_config",
    "lex_config_context",
    "reset_lex_config",
    "scan",
    "set_lex_config",
]
