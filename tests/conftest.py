"""Shared test fixtures: small raw data, key and API files written to tmp_path."""

import json

import pytest


# ============================================================
# Raw data download
# ============================================================

RAW_DATA_LINES = [
    "# This data file generated by 23andMe at: Mon Jan 01 00:00:00 2024",
    "# rsid\tchromosome\tposition\tgenotype",
    "rs0\t1\t82154\tAA",
    "rs1\t1\t752566\tAG",
    "rs2\tX\t2700157\tG",
    "rs3\t1\t776546\tGA",
    "rs4\t1\t798959\tCT",
    "rs5\tMT\t10044\t--",
]

# ============================================================
# Key file
# ============================================================

KEY_LINES = [
    "# 23andMe SNP key",
    "index\tsnp\tchromosome\tchromosome_position",
    "0\trs0\t1\t82154",
    "1\trs1\t1\t752566",
    "2\trs2\tX\t2700157",
    "3\trs3\t1\t776546",
    "4\trs4\t1\t798959",
    "5\trs5\tMT\t10044",
    "6\trs6\t1\t800007",
]

# Position 2 is a haploid false alarm (GG vs G), position 3 a real
# mismatch (AG vs GA), position 6 has no raw data call at all.
API_GENOME = "AAAGGGAGCT--CC"
PROFILE_ID = "a42e94634e3f7683"


def write_lines(path, lines):
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(path)


@pytest.fixture
def raw_data_file(tmp_path):
    return write_lines(tmp_path / "genome_Full.txt", RAW_DATA_LINES)


@pytest.fixture
def key_file(tmp_path):
    return write_lines(tmp_path / "snps.data", KEY_LINES)


@pytest.fixture
def api_json_file(tmp_path):
    path = tmp_path / "genome.json"
    path.write_text(json.dumps({"id": PROFILE_ID, "genome": API_GENOME}), encoding="utf-8")
    return str(path)


@pytest.fixture
def api_raw_file(tmp_path):
    path = tmp_path / "genome.bin"
    path.write_bytes(API_GENOME.encode("ascii"))
    return str(path)
