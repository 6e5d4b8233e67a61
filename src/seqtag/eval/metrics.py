"""Benchmark metric helpers for tagging quality and runtime."""

from __future__ import annotations

from collections.abc import Hashable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class ReferenceSequence:
    """Reference label annotation for one decoded sequence."""

    case_id: str
    labels: list[str]


def count_label_matches(
    predicted_labels: Sequence[Hashable],
    reference_labels: Sequence[Hashable],
) -> tuple[int, int]:
    """Count index-aligned label matches; the total is the reference length."""
    matched_count = min(len(predicted_labels), len(reference_labels))
    correct = sum(
        1 for idx in range(matched_count) if predicted_labels[idx] == reference_labels[idx]
    )
    return correct, len(reference_labels)


def summarize_metrics(
    *,
    correct_labels: int,
    reference_labels: int,
    exact_sequences: int,
    total_sequences: int,
    total_runtime_sec: float,
) -> dict[str, float]:
    """Summarize tagging accuracy and decode throughput."""
    token_accuracy = correct_labels / reference_labels if reference_labels > 0 else 0.0
    sequence_accuracy = exact_sequences / total_sequences if total_sequences > 0 else 0.0
    throughput = reference_labels / total_runtime_sec if total_runtime_sec > 0 else 0.0

    return {
        "token_accuracy": round(token_accuracy, 4),
        "sequence_accuracy": round(sequence_accuracy, 4),
        "correct_labels": float(correct_labels),
        "reference_labels": float(reference_labels),
        "exact_sequences": float(exact_sequences),
        "total_sequences": float(total_sequences),
        "labels_per_sec": round(throughput, 4),
        "total_runtime_sec": round(total_runtime_sec, 4),
    }
