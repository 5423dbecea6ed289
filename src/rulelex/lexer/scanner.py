"""Rule-driven scanner loop.

At each position the scanner looks up the rules of the environment's
current state, drops those whose flags are not all set, and picks a match:

1. LONGEST policy: the strictly longest match wins; ties go to the rule
   declared first
2. FIRST policy: the first rule that matches wins
3. The winning rule's action runs with the environment before the next step
4. Position is committed (offset, line, line offset)

Zero-length matches are never candidates, so every step consumes input.

Thread Safety:
Scanner instances are single-use. Create one per input string.
The definition is shared read-only; the environment must not be shared
with a concurrent scan.

"""

from __future__ import annotations

import re

from rulelex.config import get_lex_config
from rulelex.environment import Environment
from rulelex.errors import LexingError
from rulelex.location import StreamPosition
from rulelex.rules.rule import Emit, MatchPolicy, Rule
from rulelex.rules.table import LexerDefinition
from rulelex.tokens import EOS, Token
from rulelex.utils.logger import get_logger

logger = get_logger(__name__)


class Scanner:
    """Single pass of a lexer definition over one input string.

    Usage:
            >>> scanner = Scanner(definition, "12 + 3", Environment())
            >>> scanner.scan()
        [Token(NUM, 12, 1:0), Token(PLS, 1:3), Token(NUM, 3, 1:5), Token(EOS)]

    """

    __slots__ = (
        "_definition",
        "_source",
        "_source_len",
        "_source_file",
        "_env",
        "_pos",
        "_lineno",
        "_line_offset",
        "_trace",
    )

    def __init__(
        self,
        definition: LexerDefinition,
        source: str,
        env: Environment,
        source_file: str | None = None,
    ) -> None:
        """Initialize scanner with source text.

        Args:
            definition: Rules, match policy and start state of the lexer
            source: Text to be lexed
            env: Lexing environment the actions run with
            source_file: Label used for token positions and errors
        """
        self._definition = definition
        self._source = source
        self._source_len = len(source)
        self._source_file = source_file
        self._env = env

        self._pos = 0
        self._lineno = 1
        self._line_offset = 0

        self._trace = get_lex_config().trace_matches

    def scan(self) -> list[Token]:
        """Lex the whole source.

        Returns:
            Tokens produced by the rule actions, followed by one EOS token

        Raises:
            LexingError: If no eligible rule matches at some position
        """
        tokens: list[Token] = []
        source_len = self._source_len

        while self._pos < source_len:
            best = self._best_match()
            if best is None:
                raise self._error()

            rule, match = best
            text = match.group()
            if self._trace:
                logger.debug(
                    "%s %d:%d state=%s %r matched %r",
                    self._source_file or "<string>",
                    self._lineno,
                    self._line_offset,
                    self._env.state,
                    rule.pattern.pattern,
                    text,
                )

            emit = Emit.from_result(self._env.rule_exec(match, text, rule.action))
            if emit is not None:
                tokens.append(Token(emit.type, emit.value, self._position(len(text))))

            self._commit(text)

        tokens.append(Token(EOS))
        return tokens

    def _best_match(self) -> tuple[Rule, re.Match[str]] | None:
        """Select the winning rule at the current position.

        Returns:
            (rule, match) of the winner, or None if nothing matched
        """
        env = self._env
        flags = env.flags
        first = self._definition.match_policy is MatchPolicy.FIRST
        source = self._source
        pos = self._pos

        best: tuple[Rule, re.Match[str]] | None = None
        best_len = 0
        for rule in self._definition.table.get(env.state):
            if not rule.enabled(flags):
                continue
            match = rule.pattern.match(source, pos)
            if match is None:
                continue
            length = match.end() - pos
            if length > best_len:
                best = (rule, match)
                best_len = length
                if first:
                    break
        return best

    def _commit(self, text: str) -> None:
        """Advance position past matched text.

        A chunk containing newlines moves the line number by their count
        and resets the line offset to zero.

        Args:
            text: The consumed text
        """
        length = len(text)
        self._pos += length

        newline_count = text.count("\n")
        if newline_count > 0:
            self._lineno += newline_count
            self._line_offset = 0
        else:
            self._line_offset += length

    def _position(self, length: int) -> StreamPosition:
        """Snapshot the current position for a token of the given length."""
        return StreamPosition(
            stream_offset=self._pos,
            line_number=self._lineno,
            line_offset=self._line_offset,
            length=length,
            source_file=self._source_file,
        )

    def _error(self) -> LexingError:
        """Build the error for unmatched input at the current position."""
        remainder = self._source[self._pos :]
        logger.debug(
            "No rule in state %r matched at %d:%d",
            self._env.state,
            self._lineno,
            self._line_offset,
        )
        return LexingError(
            self._pos,
            self._lineno,
            self._line_offset,
            remainder,
            self._source_file,
        )


def scan(
    definition: LexerDefinition,
    source: str,
    env: Environment | None = None,
    source_file: str | None = None,
) -> list[Token]:
    """Lex source with a lexer definition.

    Args:
        definition: Rules, match policy and start state of the lexer
        source: Text to be lexed
        env: Lexing environment; a fresh one at the definition's start
            state when omitted
        source_file: Label used for token positions and errors

    Returns:
        Tokens followed by one EOS token

    Raises:
        LexingError: If no eligible rule matches at some position
    """
    if env is None:
        env = Environment(definition.start_state)
    return Scanner(definition, source, env, source_file).scan()
