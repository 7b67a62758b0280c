#!/usr/bin/env python3
# coding: utf-8
"""
Reporter Module

Turns a ComparisonResult into the mismatch report: one block per mismatching
(API call, raw data call) pair, most frequent first, followed by a summary of
how many positions agreed.
"""

from typing import List, Optional

import pandas as pd

from genocompare.modules.comparator import ComparisonResult

# Only list the rsIDs of a category when it has fewer mismatches than this
DEFAULT_SNP_LIST_THRESHOLD = 1000
SNPS_PER_LINE = 6

TABLE_COLUMNS = ["api_call", "raw_call", "count", "snps"]


def build_mismatch_table(result: ComparisonResult) -> pd.DataFrame:
    """Return the mismatch categories sorted by descending count.

    Categories with the same count keep the order in which they first
    appeared in the API stream.
    """
    rows = [
        {"api_call": pair.api_call, "raw_call": pair.raw_call, "count": len(snps), "snps": list(snps)}
        for pair, snps in result.callpairs.items()
    ]
    table = pd.DataFrame(rows, columns=TABLE_COLUMNS)
    table["count"] = table["count"].astype(int)
    # mergesort is the stable choice
    return table.sort_values("count", ascending=False, kind="mergesort").reset_index(drop=True)


def format_snp_list(snps: List[str], per_line: int = SNPS_PER_LINE) -> str:
    lines = [", ".join(snps[i:i + per_line]) for i in range(0, len(snps), per_line)]
    return "SNPS: " + ",\n".join(lines)


def format_report(result: ComparisonResult,
                  snp_list_threshold: Optional[int] = DEFAULT_SNP_LIST_THRESHOLD) -> str:
    """Render the mismatch report as text.

    Args:
        result: Output of GenotypeComparator.compare
        snp_list_threshold: List rsIDs only for categories with fewer mismatches
            than this. None always lists them.

    Returns:
        The report, ending with a newline
    """
    blocks = []
    for api_call, raw_call, count, snps in build_mismatch_table(result).itertuples(index=False, name=None):
        block = f"APICall: {api_call}\tRawDataCall: {raw_call}\tTotal: {count}\t\n"
        if snp_list_threshold is None or count < snp_list_threshold:
            block += format_snp_list(snps) + "\n"
        blocks.append(block)

    summary = f"Same: {result.matches}, Mismatches: {result.mismatches}, Same: {result.match_rate:f}%\n"
    return "\n".join(blocks + [summary])


def print_report(result: ComparisonResult,
                 snp_list_threshold: Optional[int] = DEFAULT_SNP_LIST_THRESHOLD) -> None:
    print(format_report(result, snp_list_threshold), end="")


def write_mismatch_csv(result: ComparisonResult, path: str) -> None:
    """Write the mismatch table to CSV, joining each rsID list with ';'."""
    table = build_mismatch_table(result)
    table["snps"] = table["snps"].map(";".join)
    table.to_csv(path, index=False)
