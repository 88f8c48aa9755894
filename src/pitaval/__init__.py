"""Pitaval converter core package.

This package contains modules for ingestion, structuring and TEI output.
"""

__version__ = "0.1.0"

__all__ = [
    "ingestion",
    "structuring",
    "tei",
]
