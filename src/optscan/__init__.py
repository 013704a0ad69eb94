from __future__ import annotations

from optscan.parser.api import Parsed
from optscan.parser.api import getopt_long
from optscan.parser.scanner import Scanner


__all__ = ["Parsed", "Scanner", "getopt_long"]
