#!/usr/bin/env python3
# coding: utf-8

"""
Example script demonstrating the use of the genocompare modules.
"""

import os
import sys
from genocompare.modules.api_data import decode_json_genome
from genocompare.modules.comparator import GenotypeComparator
from genocompare.modules.raw_data import load_raw_data
from genocompare.modules.reporter import print_report
from genocompare.modules.snp_key import load_snp_key

def main():
    # Replace with your actual files
    raw_file = "../data/examples/genome_Full.txt"
    api_file = "../data/examples/genome.json"
    key_file = "../data/reference/snps.data"

    for path in (raw_file, api_file, key_file):
        if not os.path.exists(path):
            print(f"Error: Input file not found: {path}")
            return 1

    comparator = GenotypeComparator(
        index_to_snp=load_snp_key(key_file),
        snp_to_call=load_raw_data(raw_file),
        debug=True  # Set to True for verbose output
    )
    result = comparator.compare(decode_json_genome(api_file).calls)

    # List rsIDs for every category, however large
    print_report(result, snp_list_threshold=None)
    return 0

if __name__ == "__main__":
    sys.exit(main())
