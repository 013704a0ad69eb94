from __future__ import annotations

import sys

from dataclasses import dataclass
from dataclasses import field
from typing import Any
from typing import Iterable
from typing import Sequence

from optscan.parser.scanner import Scanner


@dataclass
class Parsed:
    program: str | None
    options: dict[str, str | bool] = field(default_factory=dict)
    arguments: list[str] = field(default_factory=list)

    def option(self, name: str, default: Any = None) -> Any:
        return self.options.get(name, default)

    def has_option(self, name: str) -> bool:
        return name in self.options

    def flag(self, name: str) -> bool:
        """Whether 'name' was given as a switch."""
        return self.options.get(name) is True

    def missing_value(self, name: str) -> bool:
        """
        Whether 'name' was recognized as a value-taking option but no
        usable value followed it.
        """
        return self.options.get(name) is False


def getopt_long(
    short_options: str = "",
    long_options: Iterable[Any] = (),
    argv: Sequence[str] | None = None,
    start: int = 1,
) -> Parsed:
    """
    getopt_long(short_options : string = "",
                long_options : [LongSpec | string | tuple] = (),
                argv : [string] = sys.argv,
                start : int = 1)
    -> Parsed

    Scan 'argv' (default: sys.argv, program name included) and return
    the program name, the recognized options and the positional
    arguments left after them.
    """
    if argv is None:
        argv = sys.argv

    scanner = Scanner(short_options, long_options, argv)
    options = scanner.scan_options(start)

    return Parsed(scanner.program_name(), options, scanner.remaining_arguments())
