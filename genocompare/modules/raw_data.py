#!/usr/bin/env python3
# coding: utf-8
"""
Raw Data Module

Loads a 23andMe raw data download (the tab-delimited text file from
https://www.23andme.com/you/download/) into a mapping of rsID to genotype call.

Each data line looks like:

    rs4477212	1	82154	AA

Comment lines start with "#". Parsing is tolerant by default: the first line
with fewer than four fields ends the read and the rows loaded so far are kept.
"""

from typing import Dict

from genocompare.modules.errors import MalformedRecordError
from genocompare.modules.util import debug_echo, open_text, read_lines

RAW_DATA_FIELDS = 4


def load_raw_data(path: str, strict: bool = False, debug: bool = False) -> Dict[str, str]:
    """Read the raw data file into a {rsid: genotype} dictionary.

    Args:
        path: Path to the unzipped raw data file
        strict: Raise MalformedRecordError instead of stopping at a short line
        debug: Whether to print debug information

    Returns:
        Dictionary of SNP identifier to genotype call (e.g. "AG", "A", "--")
    """
    snp_to_call = {}
    with open_text(path) as f:
        for line_no, line in read_lines(f, path, strict=strict, debug=debug):
            if not line or line.startswith("#"):
                continue

            fields = line.split("\t")
            if len(fields) < RAW_DATA_FIELDS:
                if strict:
                    raise MalformedRecordError(path, line_no, line, "expected at least 4 tab-separated fields")
                debug_echo(debug, f"Stopped reading {path} at line {line_no}: {line!r}")
                break

            # Last occurrence wins
            snp_to_call[fields[0]] = fields[3]

    debug_echo(debug, f"Loaded {len(snp_to_call)} SNP calls from {path}")
    return snp_to_call
