"""Error types raised by seqtag."""

from __future__ import annotations


class InvalidArgumentError(ValueError):
    """Raised when decoder inputs are malformed.

    Covers too-short sequences, empty candidate sets, labels outside the
    transition model's domain and inconsistent table shapes. Raised before any
    chain node is mutated.
    """
