"""Token definitions for the rulelex scanner.

The scanner produces a list of Token objects terminated by a single
end-of-stream token. Each Token has a type tag, an optional value, and the
position where its text started.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from rulelex.location import StreamPosition

# Type tag of the terminal token appended after the input is exhausted
EOS = "EOS"


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the scanner.

    Attributes:
        type: Type tag returned by the rule action (``EOS`` for end of stream)
        value: Payload returned by the rule action, None when absent
        position: Where the matched text started; None for the EOS token

    """

    type: str
    value: Any = None
    position: StreamPosition | None = None

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        if self.position is None:
            return f"Token({self.type})"
        pos = f"{self.position.line_number}:{self.position.line_offset}"
        if self.value is None:
            return f"Token({self.type}, {pos})"
        return f"Token({self.type}, {self.value!r}, {pos})"

    @property
    def is_eos(self) -> bool:
        """Whether this is the terminal end-of-stream token."""
        return self.type == EOS
