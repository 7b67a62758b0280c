#!/usr/bin/env python3
# coding: utf-8

import sys
import argparse
from typing import List, Optional

from genocompare.modules.api_data import API_FORMATS, DEFAULT_API_FORMAT, get_decoder
from genocompare.modules.comparator import GenotypeComparator
from genocompare.modules.errors import GenocompareError
from genocompare.modules.raw_data import load_raw_data
from genocompare.modules.reporter import DEFAULT_SNP_LIST_THRESHOLD, print_report, write_mismatch_csv
from genocompare.modules.snp_key import load_snp_key

"""
Genotype Comparison CLI Tool

Compares genotype calls from the 23andMe API with a raw data download.
"""


def run_compare(args: argparse.Namespace) -> int:
    snp_to_call = load_raw_data(args.rawdata, strict=args.strict, debug=args.debug)
    index_to_snp = load_snp_key(args.key, strict=args.strict, debug=args.debug)

    decoder = get_decoder(args.api_format)
    genome = decoder(args.apidata, strict=args.strict, debug=args.debug)

    comparator = GenotypeComparator(
        index_to_snp=index_to_snp,
        snp_to_call=snp_to_call,
        suppress_false_alarms=not args.no_false_alarms,
        debug=args.debug
    )
    result = comparator.compare(genome.calls)

    threshold = args.snp_list_threshold if args.snp_list_threshold >= 0 else None
    print_report(result, snp_list_threshold=threshold)

    if args.csv:
        write_mismatch_csv(result, args.csv)
        print(f"Mismatch table written to {args.csv}")

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    # Create main parser
    parser = argparse.ArgumentParser(prog="genocompare",
                                     description="Compare API genotype data with a 23andMe raw data download")

    parser.add_argument('-r', dest="rawdata", type=str, required=True,
                        help='filename of raw data from https://www.23andme.com/you/download/ file (unzipped)')
    parser.add_argument('-a', dest="apidata", type=str, required=True,
                        help='filename of API data from https://api.23andme.com/1/genomes/:profile_id/')
    parser.add_argument('-k', dest="key", type=str, required=True,
                        help='filename of downloaded https://api.23andme.com/res/txt/snps.data')
    parser.add_argument('--api-format', type=str, default=DEFAULT_API_FORMAT,
                        choices=sorted(API_FORMATS),
                        help=f'Shape of the API data file (default: {DEFAULT_API_FORMAT})')
    parser.add_argument('--no-false-alarms', action='store_true',
                        help='Report every difference, including AA vs A style notation differences')
    parser.add_argument('--snp-list-threshold', type=int, default=DEFAULT_SNP_LIST_THRESHOLD,
                        help='List rsIDs only for categories with fewer mismatches than this; '
                        f'negative always lists them (default: {DEFAULT_SNP_LIST_THRESHOLD})')
    parser.add_argument('--csv', type=str,
                        help='Also write the mismatch table to this CSV file')
    parser.add_argument('--strict', action='store_true',
                        help='Fail on malformed input lines instead of stopping at them')
    parser.add_argument('--debug', action='store_true',
                        help='Print debug information')

    args = parser.parse_args(argv)

    try:
        return run_compare(args)
    except (OSError, GenocompareError) as e:
        print(f"Error during comparison: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
