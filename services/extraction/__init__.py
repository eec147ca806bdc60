"""JSONPath extraction package."""

from services.extraction.jsonpath import compile_path, first_match, query

__all__ = ["compile_path", "first_match", "query"]
