"""Result type for lexing calls that should not raise.

Thread Safety:
LexResult is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass

from rulelex.errors import LexingError
from rulelex.tokens import Token


@dataclass(frozen=True, slots=True)
class LexResult:
    """Outcome of one lexing call.

    Exactly one of ``tokens`` (non-empty, ending in EOS) and ``error`` is
    meaningful: a failed call has no tokens.

    Attributes:
        tokens: Tokens of a successful call, empty on failure
        error: The unmatched-input error of a failed call

    """

    tokens: tuple[Token, ...] = ()
    error: LexingError | None = None

    @property
    def ok(self) -> bool:
        """Whether lexing succeeded."""
        return self.error is None

    def unwrap(self) -> tuple[Token, ...]:
        """Return the tokens, raising the stored error on failure.

        Raises:
            LexingError: If lexing failed
        """
        if self.error is not None:
            raise self.error
        return self.tokens
