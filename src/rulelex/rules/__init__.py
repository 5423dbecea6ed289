"""Rule system for rulelex.

Rules pair a regular expression with an action, grouped by the lexer state
in which they are active.

Key components:
- Rule: Pattern, owning state, required flags and action
- RuleTable: Ordered rules per state
- LexerBuilder: Mutable construction of a LexerDefinition
- rule: Declarations for Lexer class bodies

Thread Safety:
Rules, rule tables and definitions are immutable once built and may be
shared by any number of lexers. Actions must keep their state in the
Environment they are given.
"""

from __future__ import annotations

from rulelex.rules.decorator import RuleDeclaration, rule
from rulelex.rules.rule import (
    ALL_STATES,
    DEFAULT_STATE,
    Emit,
    MatchPolicy,
    Rule,
    RuleAction,
    discard,
)
from rulelex.rules.table import LexerBuilder, LexerDefinition, RuleTable

__all__ = [
    "ALL_STATES",
    "DEFAULT_STATE",
    "Emit",
    "LexerBuilder",
    "LexerDefinition",
    "MatchPolicy",
    "Rule",
    "RuleAction",
    "RuleDeclaration",
    "RuleTable",
    "discard",
    "rule",
]
