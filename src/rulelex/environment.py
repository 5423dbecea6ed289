"""Lexing environment handed to rule actions.

Every action runs with an Environment: it reads the match that fired and
may change the state stack and flags that decide which rules are eligible
on the next scan step.

Lexers that need extra helpers or bookkeeping for their actions subclass
Environment and name the subclass in ``Lexer.environment_class``.

Thread Safety:
Environment instances are mutable and not synchronized. Each one must be
used by a single scan at a time.

"""

from __future__ import annotations

import re
from typing import Any

from rulelex.errors import StateStackError
from rulelex.rules.rule import DEFAULT_STATE, RuleAction


class Environment:
    """State stack, flags and current match of one lexer.

    Usage:
            >>> env = Environment("default")
            >>> env.push_state("string")
            >>> env.state
            'string'
            >>> env.pop_state()
            >>> env.state
            'default'

    """

    def __init__(self, start_state: str = DEFAULT_STATE, match: re.Match[str] | None = None) -> None:
        """Initialize environment with a single state on the stack.

        Args:
            start_state: Lexer's start state
            match: Match object for matching text (optional)
        """
        self._states: list[str] = [start_state]
        self._flags: set[str] = set()
        self.match = match

    def rule_exec(self, match: re.Match[str], text: str, action: RuleAction) -> Any:
        """Run a rule's action after recording the match.

        Args:
            match: Match object for the matched text
            text: Text of the matching string
            action: Action of the matched rule

        Returns:
            Whatever the action returned
        """
        self.match = match
        return action(self, text)

    # =========================================================================
    # State stack
    # =========================================================================

    @property
    def state(self) -> str:
        """Current state of the lexing environment."""
        return self._states[-1]

    @property
    def states(self) -> tuple[str, ...]:
        """The whole state stack, bottom first."""
        return tuple(self._states)

    def push_state(self, state: str) -> None:
        """Push a new state onto the state stack."""
        self._states.append(state)

    def pop_state(self) -> None:
        """Pop a state from the state stack.

        Raises:
            StateStackError: If only one state is left on the stack
        """
        if len(self._states) == 1:
            raise StateStackError(self._states[0])
        self._states.pop()

    def set_state(self, state: str) -> None:
        """Replace the state on the top of the stack."""
        self._states[-1] = state

    # =========================================================================
    # Flags
    # =========================================================================

    @property
    def flags(self) -> frozenset[str]:
        """Flags currently set in this environment."""
        return frozenset(self._flags)

    def set_flag(self, flag: str) -> None:
        """Set a flag in the current environment."""
        self._flags.add(flag)

    def unset_flag(self, flag: str) -> None:
        """Unset a flag in the current environment; unknown flags are ignored."""
        self._flags.discard(flag)

    def clear_flags(self) -> None:
        """Unset all flags in the current environment."""
        self._flags.clear()

    def __repr__(self) -> str:
        flags = ", ".join(sorted(self._flags))
        return f"{type(self).__name__}(states={self._states!r}, flags={{{flags}}})"
