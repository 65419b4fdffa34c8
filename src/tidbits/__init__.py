"""TIDBITS

A collection of small, dependency-light utilities: locale-agnostic currency
parsing and formatting, string case conversion, email censoring, array
deduplication, JSON cleaning, phone and pathname normalization, and
deep-equality predicates.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
