"""Lexer base class.

Subclass Lexer to define a new lexer. Rules are declared in the class body
with ``rule()``; the class collects them in order and builds an immutable
LexerDefinition once, when the subclass is created.

Two entry points exist:

- ``Lexer.tokenize(text)`` (class level) lexes with a fresh environment,
  or with one the caller passes in
- ``Lexer().lex(text)`` (instance level) reuses the instance's own
  environment, so states and flags carry over between calls

Thread Safety:
The definition of a Lexer subclass is immutable and shared by all of its
instances. A Lexer instance owns a mutable environment; use one instance
per thread.

"""

from __future__ import annotations

import os
from pathlib import Path
from typing import ClassVar

from rulelex.config import get_lex_config
from rulelex.environment import Environment
from rulelex.errors import LexingError
from rulelex.lexer.scanner import Scanner
from rulelex.result import LexResult
from rulelex.rules.decorator import RuleDeclaration
from rulelex.rules.rule import DEFAULT_STATE, MatchPolicy
from rulelex.rules.table import LexerBuilder, LexerDefinition
from rulelex.tokens import Token
from rulelex.utils.logger import get_logger

logger = get_logger(__name__)

# Class attribute holding every rule declaration of a class body, in order
DECLARATIONS_ATTR = "__rule_declarations__"


class _RuleNamespace(dict):
    """Class body namespace recording each rule declaration as it is assigned.

    Rebinding a name keeps the earlier declaration, so several rules may
    share a throwaway name such as ``_``.
    """

    def __init__(self) -> None:
        super().__init__()
        self.declarations: list[RuleDeclaration] = []

    def __setitem__(self, key: str, value: object) -> None:
        if isinstance(value, RuleDeclaration) and not any(
            value is seen for seen in self.declarations
        ):
            self.declarations.append(value)
        super().__setitem__(key, value)


class LexerMeta(type):
    """Metaclass collecting rule declarations from Lexer class bodies."""

    @classmethod
    def __prepare__(mcs, name: str, bases: tuple[type, ...], **kwargs: object) -> _RuleNamespace:
        return _RuleNamespace()

    def __new__(
        mcs,
        name: str,
        bases: tuple[type, ...],
        namespace: _RuleNamespace,
        **kwargs: object,
    ) -> LexerMeta:
        dct = dict(namespace)
        dct[DECLARATIONS_ATTR] = tuple(namespace.declarations)
        return super().__new__(mcs, name, bases, dct, **kwargs)


class Lexer(metaclass=LexerMeta):
    """Base class for rule-driven lexers.

    Class attributes read when a subclass is created:
        match_type: MatchPolicy (or "longest"/"first") for competing matches
        start_state: State fresh environments begin in
        environment_class: Environment subclass handed to actions
        definition: Prebuilt LexerDefinition; when a subclass sets this,
            rule() declarations in its body are not collected

    Usage:
            >>> class Words(Lexer):
            ...     word = rule(r"[a-z]+", action=lambda env, text: ("WORD", text))
            ...     space = rule(r" +")
            >>> Words.tokenize("hi there")
        [Token(WORD, 'hi', 1:0), Token(WORD, 'there', 1:3), Token(EOS)]

    """

    match_type: ClassVar[MatchPolicy | str] = MatchPolicy.LONGEST
    start_state: ClassVar[str] = DEFAULT_STATE
    environment_class: ClassVar[type[Environment]] = Environment
    definition: ClassVar[LexerDefinition] = LexerBuilder().build()

    def __init_subclass__(cls, **kwargs: object) -> None:
        super().__init_subclass__(**kwargs)
        if "definition" not in vars(cls):
            cls.definition = cls._build_definition()
        logger.debug(
            "Lexer %s: %d rules in %d states",
            cls.__qualname__,
            cls.definition.rule_count,
            len(cls.definition.table),
        )

    @classmethod
    def _build_definition(cls) -> LexerDefinition:
        """Collect the class body's rule declarations into a definition."""
        builder = LexerBuilder()
        for declaration in vars(cls).get(DECLARATIONS_ATTR, ()):
            declaration.declare(builder)
        return builder.match_policy(cls.match_type).start(cls.start_state).build()

    # =========================================================================
    # Class-level entry points
    # =========================================================================

    @classmethod
    def new_environment(cls) -> Environment:
        """Create an environment at the lexer's start state."""
        return cls.environment_class(cls.definition.start_state)

    @classmethod
    def tokenize(
        cls,
        text: str,
        source_file: str | None = None,
        env: Environment | None = None,
    ) -> list[Token]:
        """Lex text, appending an EOS token.

        Args:
            text: String to be lexed
            source_file: Label used for recording token positions
            env: Lexing environment; a fresh one when omitted, otherwise
                used as-is with whatever states and flags it carries

        Returns:
            Tokens ending with EOS

        Raises:
            LexingError: If the text contains input no rule matches
        """
        if env is None:
            env = cls.new_environment()
        return Scanner(cls.definition, text, env, source_file).scan()

    @classmethod
    def tokenize_file(
        cls,
        path: str | os.PathLike[str],
        env: Environment | None = None,
    ) -> list[Token]:
        """Lex the contents of a file.

        The file is read in full, using the configured encoding, before
        scanning starts. Its path is the source label of every token.

        Args:
            path: File to be lexed
            env: Lexing environment (fresh when omitted)

        Returns:
            Tokens ending with EOS
        """
        text = Path(path).read_text(encoding=get_lex_config().encoding)
        return cls.tokenize(text, os.fspath(path), env)

    # =========================================================================
    # Instance-level entry points (shared environment)
    # =========================================================================

    def __init__(self) -> None:
        """Create a lexer owning one environment for all of its calls."""
        self.env = self.new_environment()

    def lex(self, text: str, source_file: str | None = None) -> list[Token]:
        """Lex text using this lexer's environment.

        States and flags left by one call are still in effect for the next.

        Args:
            text: String to be lexed
            source_file: Label used for recording token positions

        Returns:
            Tokens ending with EOS
        """
        return self.tokenize(text, source_file, self.env)

    def lex_file(self, path: str | os.PathLike[str]) -> list[Token]:
        """Lex a file using this lexer's environment."""
        return self.tokenize_file(path, self.env)

    def try_lex(self, text: str, source_file: str | None = None) -> LexResult:
        """Lex text, returning unmatched input as a result instead of raising.

        Errors raised by rule actions still propagate.

        Args:
            text: String to be lexed
            source_file: Label used for recording token positions

        Returns:
            LexResult holding either the tokens or the LexingError
        """
        try:
            tokens = self.lex(text, source_file)
        except LexingError as e:
            return LexResult(error=e)
        return LexResult(tokens=tuple(tokens))
