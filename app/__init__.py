"""Application layer: batch search runner and file I/O."""

from core.config.paths import normalize_input_path

from .batch import run_batch_search, run_batch_search_async
from .file_io import QueryFile, read_queries_from_file, read_query_file, write_result_excel

__all__ = [
    "QueryFile",
    "normalize_input_path",
    "read_queries_from_file",
    "read_query_file",
    "run_batch_search",
    "run_batch_search_async",
    "write_result_excel",
]
