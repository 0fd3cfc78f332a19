"""Ingestion pipeline: parse, deduplicate, build, enrich and persist airports."""

from airports.ingest.builder import build_airport, generate_full_name
from airports.ingest.loader import Loader, LoadResult, LoadState
from airports.ingest.parser import decode_line, is_valid_line, parse_line, split_record
from airports.ingest.resolver import EntityResolver

__all__ = [
    "EntityResolver",
    "LoadResult",
    "LoadState",
    "Loader",
    "build_airport",
    "decode_line",
    "generate_full_name",
    "is_valid_line",
    "parse_line",
    "split_record",
]
