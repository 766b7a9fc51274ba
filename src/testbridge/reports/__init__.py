#
# src/testbridge/reports/__init__.py
#
"""
Parsers for test framework report output.
"""
from .cypress import (
    CypressResults,
    extract_json_from_output,
    parse_results,
    summarize,
)

__all__ = [
    "CypressResults",
    "extract_json_from_output",
    "parse_results",
    "summarize",
]

# 🔼⚙️
