"""rule() declarations for Lexer class bodies.

Provides a concise way to declare rules directly inside a Lexer subclass.
Works both as a plain call (discarding rules, or rules with an inline
action) and as a decorator over an action function.

Example:
    >>> class Numbers(Lexer):
    ...     @rule(r"[0-9]+")
    ...     def number(env, text):
    ...         return "NUM", int(text)
    ...
    ...     whitespace = rule(r"\\s+")

Declarations are collected in class-body order when the Lexer subclass is
created, so their order is the declaration order the scanner sees.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass, replace

from rulelex.rules.rule import DEFAULT_STATE, RuleAction
from rulelex.rules.table import LexerBuilder


@dataclass(frozen=True, slots=True)
class RuleDeclaration:
    """A rule waiting to be added to a lexer's builder.

    Attributes:
        pattern: Regular expression source or compiled pattern
        state: State in which the rule is active
        flags: Flags required for the rule to be active
        action: Token producing action, None to discard matches

    """

    pattern: str | re.Pattern[str]
    state: str = DEFAULT_STATE
    flags: tuple[str, ...] = ()
    action: RuleAction | None = None

    def __call__(self, action: RuleAction) -> RuleDeclaration:
        """Attach an action when used as a decorator."""
        return replace(self, action=action)

    def declare(self, builder: LexerBuilder) -> None:
        """Add this rule to a builder."""
        builder.rule(self.pattern, self.state, self.flags, self.action)


def rule(
    pattern: str | re.Pattern[str],
    state: str = DEFAULT_STATE,
    flags: Iterable[str] = (),
    action: RuleAction | None = None,
) -> RuleDeclaration:
    """Declare a lexing rule inside a Lexer class body.

    Args:
        pattern: Regular expression source or compiled pattern
        state: State in which this rule is active (ALL_STATES for every
            state declared above this rule)
        flags: Flags which must be set for the rule to be active
        action: Token producing action; may also be supplied by decorating
            a function with the returned declaration

    Returns:
        RuleDeclaration collected by the enclosing Lexer subclass
    """
    if isinstance(flags, str):
        flags = (flags,)
    return RuleDeclaration(pattern, state, tuple(flags), action)
