"""Decode request/response serializers."""

from __future__ import annotations

from pathlib import Path

from seqtag.models import DecodeRequest, DecodeResponse


def to_json(response: DecodeResponse) -> str:
    """Serialize a decode response to formatted JSON."""
    return response.model_dump_json(indent=2)


def write_json(response: DecodeResponse, output_path: str | Path) -> None:
    """Write decode response JSON to disk."""
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(to_json(response) + "\n", encoding="utf-8")


def read_request(input_path: str | Path) -> DecodeRequest:
    """Load and validate a decode request from a JSON file."""
    return DecodeRequest.model_validate_json(Path(input_path).read_text(encoding="utf-8"))
