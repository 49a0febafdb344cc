"""
Models package for query results.
"""

from .query import normalize_query
from .result_item import NATIVE_SOURCE, ResultItem

__all__ = ["NATIVE_SOURCE", "ResultItem", "normalize_query"]
