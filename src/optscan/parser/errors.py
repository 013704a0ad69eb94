from __future__ import annotations

from typing import Any

from optscan.exceptions import OptScanError


class OptScanParseError(OptScanError):
    def __init__(self, msg: str) -> None:
        super().__init__(msg)
        self.msg = msg

    def __str__(self) -> str:
        return self.msg


class LongSpecError(OptScanParseError):
    """
    Raised if a long option is declared with a shape that cannot be
    turned into a LongSpec.
    """

    def __init__(self, msg: str, entry: Any) -> None:
        super().__init__(msg)
        self.entry = entry

    def __str__(self) -> str:
        return f"long option {self.entry!r}: {self.msg}"
