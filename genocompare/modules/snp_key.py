#!/usr/bin/env python3
# coding: utf-8
"""
SNP Key Module

Loads the 23andMe API key file (https://api.23andme.com/res/txt/snps.data),
which lists, for every offset in the packed API genome string, the SNP found
at that offset:

    # comments
    index	snp	chromosome	chromosome_position
    0	rs41362547	MT	10044
    1	rs28358280	MT	10550

Like the raw data loader this is tolerant: the first row whose index does not
parse ends the read.
"""

import re
from typing import Dict, Optional

from genocompare.modules.errors import MalformedRecordError
from genocompare.modules.util import debug_echo, open_text, read_lines

HEADER_PREFIX = "index"

# Indexes are signed 32-bit integers in base 10
_INDEX_RE = re.compile(r"^[+-]?[0-9]+$")
_INDEX_MIN = -(2 ** 31)
_INDEX_MAX = 2 ** 31 - 1


def parse_index(value: str) -> Optional[int]:
    """Return value as an int, or None if it is not a valid 32-bit index."""
    if not _INDEX_RE.match(value):
        return None
    index = int(value, 10)
    if index < _INDEX_MIN or index > _INDEX_MAX:
        return None
    return index


def load_snp_key(path: str, strict: bool = False, debug: bool = False) -> Dict[int, str]:
    """Read the key file into an {index: rsid} dictionary.

    Args:
        path: Path to snps.data
        strict: Raise MalformedRecordError instead of stopping at a bad row
        debug: Whether to print debug information

    Returns:
        Dictionary of zero-based position index to SNP identifier
    """
    index_to_snp = {}
    with open_text(path) as f:
        for line_no, line in read_lines(f, path, strict=strict, debug=debug):
            if line.startswith("#") or line.startswith(HEADER_PREFIX):
                continue

            fields = line.split("\t")
            index = parse_index(fields[0])
            if index is None or len(fields) < 2:
                if strict:
                    raise MalformedRecordError(path, line_no, line, "expected an integer index and a SNP identifier")
                debug_echo(debug, f"Stopped reading {path} at line {line_no}: {line!r}")
                break

            index_to_snp[index] = fields[1]

    debug_echo(debug, f"Loaded {len(index_to_snp)} key entries from {path}")
    return index_to_snp
