from __future__ import annotations

import logging
import sys

from enum import Enum
from typing import Any
from typing import Iterable
from typing import Iterator
from typing import Literal
from typing import NamedTuple
from typing import Sequence

from optscan.parser.grammar import Grammar


logger = logging.getLogger(__name__)


class Match(NamedTuple):
    key: str
    value: str | bool


class _Step(Enum):
    DONE = "done"


DONE: Literal[_Step.DONE] = _Step.DONE


def _is_long_option(arg: str) -> bool:
    return arg[:2] == "--"


def _is_option(arg: str) -> bool:
    # Anything with a leading dash, long options included.
    return arg[:1] == "-"


class Scanner:
    """
    getopt_long() style scanner over an argument vector.

    Index 0 of the vector is the program name and is never scanned.
    Options are read from the start index up to the first positional
    argument; everything from there on is returned by
    remaining_arguments().

    Instance attributes:
      _argv : (string)
        private copy of the argument vector, never modified
      _grammar : Grammar
        accepted short and long options
      _index : int
        position of the next token to examine
      _offset : int
        characters of the token at _index already consumed as part
        of a short option group
      _scanned : bool
        whether scan_options() ran since the last reset()
    """

    def __init__(
        self,
        short_options: str = "",
        long_options: Iterable[Any] = (),
        argv: Sequence[str] | None = None,
    ) -> None:
        self._argv: tuple[str, ...] = ()
        self.reset(short_options, long_options, argv)

    @classmethod
    def from_process(
        cls, short_options: str = "", long_options: Iterable[Any] = ()
    ) -> Scanner:
        return cls(short_options, long_options, sys.argv)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} at 0x{id(self):x}: {self._grammar!r}>"

    @property
    def grammar(self) -> Grammar:
        return self._grammar

    @property
    def argv(self) -> tuple[str, ...]:
        return self._argv

    @property
    def index(self) -> int:
        return self._index

    def reset(
        self,
        short_options: str = "",
        long_options: Iterable[Any] = (),
        argv: Sequence[str] | None = None,
    ) -> None:
        """
        Replace the grammar and, when given, the argument vector.

        Any cursor state left by a previous scan is discarded.
        """
        if argv is not None:
            self._argv = tuple(argv)
        self._grammar = Grammar(short_options, long_options)
        self._index = 1
        self._offset = 0
        self._scanned = False

    def program_name(self) -> str | None:
        if not self._argv:
            return None
        return self._argv[0]

    def scan_options(self, start: int = 1) -> dict[str, str | bool]:
        """
        Return the recognized options, keyed by option name.

        Switches map to True, value-taking options to their value, or
        to False when no usable value followed them.  A later occurrence
        of an option overwrites an earlier one.

        'start' allows 'program command [options] [arguments]' layouts;
        the program name at index 0 is never scanned.
        """
        self._index = max(start, 1)
        self._offset = 0

        options: dict[str, str | bool] = {}
        for match in self._matches():
            options[match.key] = match.value

        self._scanned = True
        logger.debug(
            "Options end at index %d of %d", self._index, len(self._argv)
        )

        return options

    def remaining_arguments(self) -> list[str]:
        """
        Return every token from the first positional argument onwards.

        Only meaningful after scan_options(); before that it is empty.
        """
        if not self._scanned:
            return []

        return list(self._argv[self._index :])

    # -- Scanning methods ----------------------------------------------

    def _matches(self) -> Iterator[Match]:
        while True:
            step = self._next_token()
            if step is DONE:
                return
            if step is not None:
                yield step

    def _next_token(self) -> Match | None | Literal[_Step.DONE]:
        """
        Examine the token under the cursor and move past what was used.

        Returns the recognized option, None for a skipped token, or DONE
        once the vector is exhausted or a positional argument is reached.
        In the latter case the cursor is left on the positional argument.
        """
        if self._index >= len(self._argv):
            return DONE

        arg = self._argv[self._index]

        if _is_long_option(arg):
            return self._parse_long_option(arg)
        if _is_option(arg):
            return self._parse_short_option(arg)

        return DONE

    def _advance(self, steps: int = 1) -> None:
        self._index += steps
        self._offset = 0

    def _skip(self, arg: str, reason: str) -> None:
        logger.debug("Skipping %r at index %d: %s", arg, self._index, reason)
        self._advance()

    def _take_value(self, key: str) -> Match:
        # The value must be the next token, and must not look like an
        # option itself.
        value_index = self._index + 1
        if value_index < len(self._argv) and not _is_option(self._argv[value_index]):
            self._advance(2)
            return Match(key, self._argv[value_index])

        logger.debug("Option %r expects a value but none was given", key)
        self._advance()
        return Match(key, False)

    def _parse_long_option(self, arg: str) -> Match | None:
        if not self._grammar.long_options:
            return self._skip(arg, "no long options accepted")

        # --key=value or --key value
        name, equals, value = arg[2:].partition("=")

        spec = self._grammar.find_long(name)
        if spec is None:
            return self._skip(arg, "unknown long option")

        if not spec.takes_value:
            self._advance()
            return Match(spec.key, True)

        if equals:
            self._advance()
            return Match(spec.key, value)

        return self._take_value(spec.key)

    def _parse_short_option(self, arg: str) -> Match | None:
        short_options = self._grammar.short_options

        if not short_options:
            return self._skip(arg, "no short options accepted")

        if "=" in arg:
            return self._skip(arg, "short options do not accept '=' values")

        chars = arg[1 + self._offset :]
        if not chars:
            return self._skip(arg, "no option letter")

        char = chars[0]
        takes_value = short_options.lookup(char)

        if len(chars) == 1:
            if takes_value is None:
                return self._skip(arg, f"unknown option {char!r}")
            if takes_value:
                return self._take_value(char)
            self._advance()
            return Match(char, True)

        return self._parse_short_option_group(arg, char, takes_value)

    def _parse_short_option_group(
        self, arg: str, char: str, takes_value: bool | None
    ) -> Match | None:
        """
        Consume one character of a group such as -cvzf.

        The cursor stays on the token until its last character, which is
        handled like a single option and so may take the next token as
        its value.  A value-taking option anywhere else in the group is
        recorded as False.  An unknown character abandons the rest of the
        group; options already recorded from it are kept.
        """
        if takes_value is None:
            logger.debug(
                "Abandoning option group %r at unknown option %r", arg, char
            )
            self._advance()
            return None

        self._offset += 1

        if takes_value:
            logger.debug(
                "Option %r in group %r is not last and cannot take a value",
                char,
                arg,
            )
            return Match(char, False)

        return Match(char, True)
