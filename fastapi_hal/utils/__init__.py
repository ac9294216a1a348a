"""Utility helpers for HAL links and configuration values."""

from .booleans import parse_bool
from .urls import build_url, encode_query, flatten_query, merge_href_query, substitute_path

__all__ = [
    "build_url",
    "encode_query",
    "flatten_query",
    "merge_href_query",
    "parse_bool",
    "substitute_path",
]
