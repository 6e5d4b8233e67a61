"""I/O utilities."""

from seqtag.io.export import read_request, to_json, write_json

__all__ = ["read_request", "to_json", "write_json"]
