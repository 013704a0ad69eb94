from __future__ import annotations


class OptScanError(Exception):
    """
    Base optscan exception.
    """
