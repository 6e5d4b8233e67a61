"""Core decode pipeline."""

from seqtag.core.pipeline import run_decode

__all__ = ["run_decode"]
