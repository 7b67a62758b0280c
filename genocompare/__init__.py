#!/usr/bin/env python3
# coding: utf-8

"""
genocompare: cross-check 23andMe API genotypes against a raw data download

This package provides tools for:
- Loading 23andMe raw data files and the API SNP key file
- Decoding the packed genome string returned by the API
- Reporting positions where the two sources disagree
"""

__version__ = "0.1.0"
