"""Path and cycle enumeration for prime-path coverage.

This package defines the exhaustive search routines:
- ``PathEnumerator`` lists every simple path between every ordered vertex pair.
- ``CycleEnumerator`` lists every simple cycle, once per start vertex on it.
- ``PrimePathFilter`` keeps the maximal elements of their union.
"""

from primepath.paths.enumerate import CycleEnumerator, PathEnumerator
from primepath.paths.prime import PrimePathFilter, filter_prime_paths, is_sub_path

__all__ = [
    "CycleEnumerator",
    "PathEnumerator",
    "PrimePathFilter",
    "filter_prime_paths",
    "is_sub_path",
]
