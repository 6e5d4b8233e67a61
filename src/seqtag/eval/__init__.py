"""Evaluation utilities."""

from seqtag.eval.metrics import (
    ReferenceSequence,
    count_label_matches,
    summarize_metrics,
)

__all__ = ["ReferenceSequence", "count_label_matches", "summarize_metrics"]
