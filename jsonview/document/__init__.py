"""Parsed-document values, loading and serialization."""

from __future__ import annotations

from .loader import STDIN_NAME, Document, LoadResult, load_documents, load_path, load_stream, parse_document
from .serialize import colorize_json, format_json
from .values import JsonKind, NonFiniteFloat, canonical_text, kind_of, number_text

__all__ = [
    "STDIN_NAME",
    "Document",
    "LoadResult",
    "load_documents",
    "load_path",
    "load_stream",
    "parse_document",
    "format_json",
    "colorize_json",
    "JsonKind",
    "NonFiniteFloat",
    "canonical_text",
    "kind_of",
    "number_text",
]
