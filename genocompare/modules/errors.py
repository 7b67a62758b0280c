#!/usr/bin/env python3
# coding: utf-8
"""
Exceptions raised by the genocompare loaders and decoders.
"""

from typing import Optional


class GenocompareError(Exception):
    """Base class for all genocompare errors."""


class MalformedRecordError(GenocompareError):
    def __init__(self, path: str, line_no: Optional[int], line: str, reason: str):
        """A record that could not be parsed while running in strict mode.

        Args:
            path: File the record was read from
            line_no: 1-based line number, or None for non line-based files
            line: The offending text
            reason: Short explanation of what was wrong
        """
        self.path = path
        self.line_no = line_no
        self.line = line
        self.reason = reason
        where = f"{path}:{line_no}" if line_no is not None else path
        super().__init__(f"{where}: {reason}: {line!r}")
