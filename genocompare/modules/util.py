#!/usr/bin/env python3
# coding: utf-8
"""
Helpers shared by the genocompare loaders and decoders.
"""

import sys
from typing import IO, Iterator, Tuple

# Undecodable bytes become U+FFFD instead of aborting the read
TEXT_ERRORS = "replace"


def debug_echo(debug: bool, message: str) -> None:
    """Print debug information if debug mode is enabled."""
    if debug:
        print(f"DEBUG: {message}", file=sys.stderr)


def open_text(path: str) -> IO[str]:
    """Open a text input file, tolerating bytes that are not valid UTF-8."""
    return open(path, "r", encoding="utf-8", errors=TEXT_ERRORS)


def read_lines(f: IO[str], path: str, strict: bool = False, debug: bool = False) -> Iterator[Tuple[int, str]]:
    """Yield (line number, line without its line ending) from an open file.

    A read error part way through ends the iteration as if the file had
    ended, unless strict is set, in which case the error propagates.
    """
    line_no = 0
    lines = iter(f)
    while True:
        try:
            line = next(lines)
        except StopIteration:
            return
        except OSError as e:
            if strict:
                raise
            debug_echo(debug, f"Read error in {path} after line {line_no}: {e}")
            return
        line_no += 1
        yield line_no, line.rstrip("\r\n")
