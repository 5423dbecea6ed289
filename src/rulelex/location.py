"""Stream position tracking for tokens and error messages.

Provides the StreamPosition dataclass recorded on every emitted token.

Thread Safety:
StreamPosition is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class StreamPosition:
    """Position of a token in the lexed input.

    Captured at the start of the match that produced the token, before the
    matched text is consumed.

    Attributes:
        stream_offset: Offset from the beginning of the input (0-indexed)
        line_number: Line number (1-indexed)
        line_offset: Offset from the beginning of the line (0-indexed)
        length: Length of the matched text
        source_file: Source label (optional, e.g. the lexed file's path)

    Examples:
            >>> pos = StreamPosition(4, 2, 0, 3, "calc.txt")
            >>> str(pos)
            'calc.txt:2:0'

    """

    stream_offset: int
    line_number: int
    line_offset: int
    length: int
    source_file: str | None = None

    def __str__(self) -> str:
        """Format position for error messages.

        Returns:
            Formatted string like "file.txt:10:5" or "10:5"
        """
        if self.source_file:
            return f"{self.source_file}:{self.line_number}:{self.line_offset}"
        return f"{self.line_number}:{self.line_offset}"

    @property
    def end_offset(self) -> int:
        """Offset one past the last character of the match."""
        return self.stream_offset + self.length
