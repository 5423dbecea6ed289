"""Rule records and action result handling.

A Rule pairs a compiled pattern with the action that turns matched text
into a token. Rules are created once, when a lexer is defined, and are
shared read-only by every environment of that lexer.

Thread Safety:
Rule and Emit are frozen dataclasses. Actions must keep their state in the
Environment they are handed, never on the rule.

"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Protocol

from rulelex.errors import RuleError

if TYPE_CHECKING:
    from rulelex.environment import Environment

# State every lexer starts in unless told otherwise
DEFAULT_STATE = "default"

# Declaring a rule in this state copies it into every state known so far
ALL_STATES = "ALL"


class MatchPolicy(Enum):
    """How the scanner picks between rules matching at the same position.

    - LONGEST: maximal munch; ties go to the rule declared first
    - FIRST: the first rule (in declaration order) that matches at all
    """

    LONGEST = "longest"
    FIRST = "first"


class RuleAction(Protocol):
    """Protocol for rule actions.

    An action receives the lexing environment and the matched text. It may
    change the environment (states, flags) and returns one of:

    - None or False: discard the match, no token is produced
    - a type tag: token with that type and no value
    - a ``(type, value)`` pair (tuple or list): token with that type and value
    """

    def __call__(self, env: Environment, text: str) -> Any: ...


def discard(env: Environment, text: str) -> None:
    """Default action: consume the match without producing a token."""
    return None


@dataclass(frozen=True, slots=True)
class Emit:
    """Token request produced by a rule action.

    Attributes:
        type: Token type tag
        value: Token payload (None when the action returned a bare tag)
    """

    type: Any
    value: Any = None

    @classmethod
    def from_result(cls, result: Any) -> Emit | None:
        """Normalize an action's return value.

        Args:
            result: Whatever the action returned

        Returns:
            Emit for a token, or None when the match is discarded

        Raises:
            RuleError: If the action returned a sequence of the wrong size
        """
        if result is None or result is False:
            return None
        if isinstance(result, Emit):
            return result
        if isinstance(result, (tuple, list)):
            if len(result) == 2:
                tag, value = result
            elif len(result) == 1:
                tag, value = result[0], None
            else:
                msg = f"Action must return a type or a (type, value) pair, got {result!r}"
                raise RuleError(msg)
            if tag is None or tag is False:
                return None
            return cls(tag, value)
        return cls(result)


@dataclass(frozen=True, slots=True)
class Rule:
    """A single lexical alternative.

    Attributes:
        pattern: Compiled regular expression matched at the scan position
        action: Callable turning matched text into a token request
        state: State the rule was declared for (informational; placement in
            the rule table is what decides where it is active)
        flags: Flags that must all be set for the rule to be considered

    Patterns are tried with ``pattern.match(source, pos)``, which anchors
    them at the scan position. ``\\A`` and ``^`` (without re.MULTILINE)
    still refer to the start of the whole input, so they never match past
    offset 0; leave such anchors out, or use ``^`` with re.MULTILINE for
    line starts.

    """

    pattern: re.Pattern[str]
    action: RuleAction
    state: str = DEFAULT_STATE
    flags: frozenset[str] = frozenset()

    @classmethod
    def create(
        cls,
        pattern: str | re.Pattern[str],
        state: str = DEFAULT_STATE,
        flags: Iterable[str] = (),
        action: RuleAction | None = None,
    ) -> Rule:
        """Build a rule, compiling a string pattern once.

        Args:
            pattern: Regular expression source or compiled pattern
            state: State the rule belongs to
            flags: Names of flags required for the rule to be active
            action: Token producing action (default: discard)

        Returns:
            New Rule

        Raises:
            RuleError: If the pattern or action has the wrong type
        """
        if isinstance(pattern, str):
            try:
                pattern = re.compile(pattern)
            except re.error as e:
                msg = f"Invalid pattern {pattern!r}: {e}"
                raise RuleError(msg) from e
        elif not isinstance(pattern, re.Pattern):
            msg = f"Rule pattern must be a string or compiled pattern, got {type(pattern).__name__}"
            raise RuleError(msg)

        if action is None:
            action = discard
        elif not callable(action):
            msg = f"Rule action must be callable, got {type(action).__name__}"
            raise RuleError(msg)

        if isinstance(flags, str):
            flags = (flags,)

        return cls(pattern=pattern, action=action, state=state, flags=frozenset(flags))

    def enabled(self, flags: frozenset[str] | set[str]) -> bool:
        """Check whether every flag this rule requires is set."""
        return self.flags <= flags

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        name = getattr(self.action, "__name__", type(self.action).__name__)
        return f"Rule({self.pattern.pattern!r}, {self.state!r}, {name})"
