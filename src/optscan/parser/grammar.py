from __future__ import annotations

from typing import Any
from typing import Iterable
from typing import NamedTuple

from optscan.parser.errors import LongSpecError


VALUE_MARKER = ":"


class ShortSpec:
    """
    getopt-style short option string, eg. "vho:".

    Every character is an accepted option; a character followed by ':'
    requires a value.  ':' itself is never an option.
    """

    def __init__(self, spec: str = "") -> None:
        self._spec = spec
        self._options: dict[str, bool] = {}

        for i, char in enumerate(spec):
            if char == VALUE_MARKER or char in self._options:
                continue
            self._options[char] = spec[i + 1 : i + 2] == VALUE_MARKER

    def __str__(self) -> str:
        return self._spec

    def __repr__(self) -> str:
        return f"ShortSpec({self._spec!r})"

    def __bool__(self) -> bool:
        return bool(self._options)

    def __contains__(self, char: object) -> bool:
        return char in self._options

    def lookup(self, char: str) -> bool | None:
        """
        Return None for an unknown option, otherwise whether the option
        takes a value.
        """
        return self._options.get(char)


class LongSpec(NamedTuple):
    name: str
    takes_value: bool = False
    short_alias: str | None = None

    @property
    def key(self) -> str:
        # A one character alias replaces the long name in results.
        if self.short_alias is not None and len(self.short_alias) == 1:
            return self.short_alias
        return self.name

    @classmethod
    def coerce(cls, entry: Any) -> LongSpec:
        """
        Accepts a LongSpec, a bare name, or a (name[, takes_value[, alias]])
        sequence.
        """
        if isinstance(entry, LongSpec):
            return entry
        if isinstance(entry, str):
            fields: tuple[Any, ...] = (entry,)
        elif isinstance(entry, (tuple, list)):
            fields = tuple(entry)
        else:
            raise LongSpecError(
                "must be a string, a LongSpec or a (name, takes_value, alias) "
                f"sequence, not {type(entry).__name__}",
                entry,
            )

        if not 1 <= len(fields) <= 3:
            raise LongSpecError(
                f"expected 1 to 3 fields, got {len(fields):d}", entry
            )

        name = fields[0]
        if not isinstance(name, str) or not name:
            raise LongSpecError("name must be a non-empty string", entry)

        takes_value = len(fields) > 1 and fields[1] is True
        alias = fields[2] if len(fields) > 2 else None
        if not isinstance(alias, str):
            alias = None

        return cls(name, takes_value, alias)


class Grammar:
    def __init__(
        self,
        short_options: str | ShortSpec = "",
        long_options: Iterable[Any] = (),
    ) -> None:
        if not isinstance(short_options, ShortSpec):
            short_options = ShortSpec(short_options)
        self.short_options: ShortSpec = short_options
        self.long_options: tuple[LongSpec, ...] = tuple(
            LongSpec.coerce(entry) for entry in long_options
        )

    def __repr__(self) -> str:
        return (
            f"Grammar(short_options={str(self.short_options)!r}, "
            f"long_options={list(self.long_options)!r})"
        )

    def is_empty(self) -> bool:
        return not self.short_options and not self.long_options

    def find_long(self, name: str) -> LongSpec | None:
        # Declared order; the first entry with a matching name wins.
        for spec in self.long_options:
            if spec.name == name:
                return spec
        return None
