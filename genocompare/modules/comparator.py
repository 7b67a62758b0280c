#!/usr/bin/env python3
# coding: utf-8
"""
Comparator Module

Lines up the decoded API calls with the raw data calls and classifies every
position as a match or a mismatch.

Position i of the API stream is resolved to an rsID through the key file and
then to a raw data call through the raw data file. Missing entries resolve to
the empty string and are compared like any other call.

Some differences are only notation. The raw data reports a haploid call (X, Y
and MT in males) as a single letter while the API doubles it, and no-calls are
"--" or "__" in the API but may be absent from the raw data. Those pairs are
listed in FALSE_ALARMS and, when suppression is enabled, count as matches.
"""

import math
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable, List, Mapping, NamedTuple, Sequence

import numpy as np
import pandas as pd

from genocompare.modules.util import debug_echo


class CallPair(NamedTuple):
    """An API call and the raw data call it was compared with."""
    api_call: str
    raw_call: str


# (API call, raw data call) differences that are not real mismatches
FALSE_ALARMS: FrozenSet[CallPair] = frozenset([
    CallPair("AA", "A"),
    CallPair("CC", "C"),
    CallPair("GG", "G"),
    CallPair("TT", "T"),
    CallPair("DD", "D"),
    CallPair("II", "I"),
    CallPair("__", ""),
    CallPair("--", ""),
])


@dataclass
class ComparisonResult:
    matches: int = 0
    mismatches: int = 0
    # rsIDs per mismatching call pair, in API stream order
    callpairs: Dict[CallPair, List[str]] = field(default_factory=dict)

    @property
    def total(self) -> int:
        return self.matches + self.mismatches

    @property
    def match_rate(self) -> float:
        """Percentage of compared positions that matched (nan if none)."""
        if self.total == 0:
            return math.nan
        return self.matches / self.total * 100


class GenotypeComparator:
    def __init__(self, index_to_snp: Mapping[int, str], snp_to_call: Mapping[str, str],
                 false_alarms: Iterable[Sequence[str]] = FALSE_ALARMS,
                 suppress_false_alarms: bool = True, debug: bool = False):
        """Initialize the comparator with the two lookup tables.

        Args:
            index_to_snp: Key file mapping of position index to rsID
            snp_to_call: Raw data mapping of rsID to genotype call
            false_alarms: (API call, raw data call) pairs that are not mismatches
            suppress_false_alarms: Whether to apply false_alarms at all
            debug: Whether to print debug information
        """
        self.index_to_snp = index_to_snp
        self.snp_to_call = snp_to_call
        self.false_alarms = frozenset(CallPair(*pair) for pair in false_alarms)
        self.suppress_false_alarms = suppress_false_alarms
        self.debug = debug

    def _debug_echo(self, message: str) -> None:
        """Print debug information if debug mode is enabled."""
        debug_echo(self.debug, message)

    def resolve(self, api_calls: Sequence[str]) -> pd.DataFrame:
        """Build one row per API position with its rsID and both calls."""
        frame = pd.DataFrame({"api_call": pd.Series(list(api_calls), dtype=object)})
        positions = pd.Series(frame.index, index=frame.index)
        frame["snp"] = positions.map(dict(self.index_to_snp)).fillna("").astype(object)
        frame["raw_call"] = frame["snp"].map(dict(self.snp_to_call)).fillna("").astype(object)
        return frame

    def compare(self, api_calls: Sequence[str]) -> ComparisonResult:
        """Compare every decoded API call with the raw data.

        Args:
            api_calls: Two-character calls in API stream order

        Returns:
            ComparisonResult with match counts and mismatching rsIDs per call pair
        """
        frame = self.resolve(api_calls)
        differs = (frame["api_call"] != frame["raw_call"]).to_numpy(dtype=bool)

        if self.suppress_false_alarms and self.false_alarms and len(frame):
            pairs = pd.MultiIndex.from_arrays([frame["api_call"], frame["raw_call"]])
            benign = np.asarray(pairs.isin(list(self.false_alarms)), dtype=bool)
            self._debug_echo(f"Suppressed {int(np.count_nonzero(differs & benign))} false alarms")
            differs &= ~benign

        mismatches = int(np.count_nonzero(differs))
        result = ComparisonResult(matches=len(frame) - mismatches, mismatches=mismatches)

        # dicts keep insertion order, so call pairs appear in stream order
        for api_call, raw_call, snp in frame.loc[differs, ["api_call", "raw_call", "snp"]].itertuples(index=False):
            result.callpairs.setdefault(CallPair(api_call, raw_call), []).append(snp)

        self._debug_echo(f"Compared {result.total} positions: {result.matches} same, {result.mismatches} mismatches")
        return result
