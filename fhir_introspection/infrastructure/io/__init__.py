"""I/O adapters for the mapping index."""

from .index_export import INDEX_COLUMNS, summaries_to_frame, write_index_csv

__all__ = ["INDEX_COLUMNS", "summaries_to_frame", "write_index_csv"]
