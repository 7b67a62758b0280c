#!/usr/bin/env python3
# coding: utf-8
"""
API Data Module

Decodes the packed genome string served by the 23andMe API. Every SNP in the
key file occupies two characters of the string, so the call for key index i
lives at characters [2i, 2i + 2).

Two input shapes are supported:

- json: the saved response of api.23andme.com/1/genomes/:profile_id/,
  i.e. {"id": "<profile id>", "genome": "AACTGG..."}
- raw:  a file holding only the packed string

A trailing odd character cannot form a call and is dropped.
"""

import json
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from genocompare.modules.errors import MalformedRecordError
from genocompare.modules.util import debug_echo, open_text

CALL_WIDTH = 2
DEFAULT_API_FORMAT = "json"


@dataclass
class GenomeData:
    profile_id: Optional[str] = None
    calls: List[str] = field(default_factory=list)


def split_calls(packed: str) -> List[str]:
    """Split a packed genome string into two-character calls."""
    usable = len(packed) - len(packed) % CALL_WIDTH
    return [packed[i:i + CALL_WIDTH] for i in range(0, usable, CALL_WIDTH)]


def decode_json_genome(path: str, strict: bool = False, debug: bool = False) -> GenomeData:
    """Decode a saved /1/genomes/ JSON response.

    An unparseable payload, or one without a string "genome" field, yields no
    calls unless strict is set.
    """
    with open_text(path) as f:
        text = f.read()

    try:
        payload = json.loads(text)
    except json.JSONDecodeError as e:
        if strict:
            raise MalformedRecordError(path, e.lineno, text[:40], f"invalid JSON ({e.msg})") from e
        debug_echo(debug, f"Could not parse {path} as JSON: {e}")
        return GenomeData()

    if not isinstance(payload, dict) or not isinstance(payload.get("genome"), str):
        if strict:
            raise MalformedRecordError(path, None, text[:40], "no \"genome\" string in payload")
        debug_echo(debug, f"No genome string found in {path}")
        return GenomeData()

    profile_id = payload.get("id")
    genome = payload["genome"]
    if len(genome) % CALL_WIDTH:
        if strict:
            raise MalformedRecordError(path, None, genome[-1:], "genome string has odd length")
        debug_echo(debug, f"Dropping trailing character of odd-length genome in {path}")

    calls = split_calls(genome)
    debug_echo(debug, f"Decoded {len(calls)} calls for profile {profile_id} from {path}")
    return GenomeData(profile_id=profile_id, calls=calls)


def decode_raw_genome(path: str, strict: bool = False, debug: bool = False) -> GenomeData:
    """Decode a file holding only the packed genome string.

    The file is read two bytes at a time until end of file.
    """
    calls = []
    with open(path, "rb") as f:
        while True:
            chunk = f.read(CALL_WIDTH)
            if len(chunk) < CALL_WIDTH:
                break
            calls.append(chunk.decode("latin-1"))

    if chunk:
        if strict:
            raise MalformedRecordError(path, None, chunk.decode("latin-1"), "genome stream has odd length")
        debug_echo(debug, f"Dropping trailing byte of odd-length stream in {path}")

    debug_echo(debug, f"Decoded {len(calls)} calls from {path}")
    return GenomeData(calls=calls)


API_FORMATS: Dict[str, Callable[..., GenomeData]] = {
    "json": decode_json_genome,
    "raw": decode_raw_genome,
}


def get_decoder(name: str) -> Callable[..., GenomeData]:
    """Look up the decoder for an API data format."""
    try:
        return API_FORMATS[name]
    except KeyError:
        raise ValueError(f"Unknown API data format '{name}'. Available formats: {', '.join(API_FORMATS)}") from None
