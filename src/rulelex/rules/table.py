"""Rule table and lexer definition builder.

The rule table maps state names to the ordered rules active in that state.
A LexerDefinition bundles the table with the match policy and start state;
it is what the scanner consumes.

Thread Safety:
RuleTable and LexerDefinition are immutable after creation. Safe to share.
Use LexerBuilder for mutable construction.

Example:
    >>> builder = LexerBuilder()
    >>> builder.rule(r"[0-9]+", action=lambda env, text: ("NUM", int(text)))
    >>> builder.rule(r"\\s")
    >>> definition = builder.build()
    >>> len(definition.table.get("default"))
    2
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from rulelex.rules.rule import (
    ALL_STATES,
    DEFAULT_STATE,
    MatchPolicy,
    Rule,
    RuleAction,
)


class RuleTable:
    """Immutable mapping from state name to its ordered rules.

    A state that was never declared has no rules; looking it up is not an
    error.

    Thread Safety:
        Immutable after creation. Safe to share across threads.
    """

    __slots__ = ("_rules",)

    def __init__(self, rules: dict[str, tuple[Rule, ...]]) -> None:
        """Initialize table with pre-built rule lists.

        Use LexerBuilder to create instances.
        """
        self._rules = rules

    def get(self, state: str) -> tuple[Rule, ...]:
        """Get the rules active in a state, in declaration order.

        Args:
            state: State name

        Returns:
            Rules for the state, empty if the state has none
        """
        return self._rules.get(state, ())

    @property
    def states(self) -> tuple[str, ...]:
        """States with rules, in the order they were first declared."""
        return tuple(self._rules)

    def __contains__(self, state: str) -> bool:
        """Support 'state in table' syntax."""
        return state in self._rules

    def __iter__(self) -> Iterator[str]:
        return iter(self._rules)

    def __len__(self) -> int:
        """Number of states with rules."""
        return len(self._rules)


@dataclass(frozen=True, slots=True)
class LexerDefinition:
    """Everything the scanner needs to know about a lexer type.

    Attributes:
        table: Rules per state
        match_policy: How competing matches are resolved
        start_state: State a fresh environment begins in

    """

    table: RuleTable
    match_policy: MatchPolicy = MatchPolicy.LONGEST
    start_state: str = DEFAULT_STATE

    @property
    def rule_count(self) -> int:
        """Number of rule slots across all states."""
        return sum(len(self.table.get(state)) for state in self.table)


class LexerBuilder:
    """Mutable builder for LexerDefinition.

    Declare rules, then call build() to create an immutable definition.

    Example:
        >>> builder = LexerBuilder()
        >>> builder.rule(r'"', action=enter_string)
        >>> builder.rule(r'[^"]+', state="string", action=string_body)
        >>> builder.rule(r'"', state="string", action=leave_string)
        >>> definition = builder.build()
    """

    __slots__ = ("_rules", "_match_policy", "_start_state")

    def __init__(self) -> None:
        """Initialize empty builder."""
        self._rules: dict[str, list[Rule]] = {}
        self._match_policy = MatchPolicy.LONGEST
        self._start_state = DEFAULT_STATE

    def rule(
        self,
        pattern: str | re.Pattern[str],
        state: str = DEFAULT_STATE,
        flags: Iterable[str] = (),
        action: RuleAction | None = None,
    ) -> LexerBuilder:
        """Declare a lexing rule.

        Rules declared in ALL_STATES are added to every state declared so
        far. States declared afterwards do not receive them.

        Args:
            pattern: Regular expression source or compiled pattern
            state: State in which this rule is active
            flags: Flags which must be set for the rule to be active
            action: Token producing action; without one the match is discarded

        Returns:
            Self for chaining

        Raises:
            RuleError: If the pattern or action is invalid
        """
        r = Rule.create(pattern, state, flags, action)

        if state == ALL_STATES:
            for rules in self._rules.values():
                rules.append(r)
        else:
            self._rules.setdefault(state, []).append(r)
        return self

    def match_policy(self, policy: MatchPolicy | str) -> LexerBuilder:
        """Set how the scanner chooses between matching rules.

        Args:
            policy: MatchPolicy member or its value ("longest" or "first")

        Returns:
            Self for chaining
        """
        self._match_policy = MatchPolicy(policy)
        return self

    def match_first(self) -> LexerBuilder:
        """Use the first matching rule instead of the longest match."""
        return self.match_policy(MatchPolicy.FIRST)

    def start(self, state: str) -> LexerBuilder:
        """Change the starting state of the lexer.

        Args:
            state: Starting state for fresh environments

        Returns:
            Self for chaining
        """
        self._start_state = state
        return self

    def build(self) -> LexerDefinition:
        """Build immutable definition from the declared rules.

        Returns:
            Immutable LexerDefinition
        """
        table = RuleTable({state: tuple(rules) for state, rules in self._rules.items()})
        return LexerDefinition(
            table=table,
            match_policy=self._match_policy,
            start_state=self._start_state,
        )

    def __len__(self) -> int:
        """Number of states with rules."""
        return len(self._rules)
