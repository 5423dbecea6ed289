"""Exception classes for rulelex.

Provides standardized exceptions for error handling throughout rulelex.
"""

from __future__ import annotations


class RulelexError(Exception):
    """Base exception for all rulelex errors.

    Subclass this for specific error categories.
    """

    pass


class LexingError(RulelexError):
    """Error raised when no rule matches the remaining input.

    Carries the scan position at which lexing stopped and the full
    unconsumed remainder of the input.
    """

    def __init__(
        self,
        stream_offset: int,
        line_number: int,
        line_offset: int,
        remainder: str,
        source_file: str | None = None,
    ) -> None:
        """Initialize lexing error with the failing position.

        Args:
            stream_offset: Offset from the beginning of the input (0-indexed)
            line_number: Number of newlines consumed so far, plus one
            line_offset: Offset from the beginning of the line (0-indexed)
            remainder: Rest of the input that couldn't be lexed
            source_file: Label of the lexed source (optional)
        """
        self.stream_offset = stream_offset
        self.line_number = line_number
        self.line_offset = line_offset
        self.remainder = remainder
        self.source_file = source_file

        location = f"{line_number}:{line_offset}"
        if source_file:
            location = f"{source_file}:{location}"

        super().__init__(
            f"{location} Unable to match string with any of the given rules: {remainder}"
        )


class StateStackError(RulelexError):
    """Error when a rule action pops the only remaining lexer state.

    The state stack of an environment is never allowed to become empty.
    """

    def __init__(self, state: str) -> None:
        self.state = state
        super().__init__(f"Cannot pop state '{state}': it is the only state on the stack")


class RuleError(RulelexError):
    """Error in a rule declaration or in the value an action produced."""

    pass
