"""Decoder interfaces and shared candidate helpers."""

from __future__ import annotations

import logging
import math
from collections.abc import Hashable, Mapping, Sequence
from typing import Literal, Protocol

from seqtag.decode.transitions import TransitionModel
from seqtag.errors import InvalidArgumentError

DecoderName = Literal["viterbi", "greedy"]

CandidateSet = Mapping[Hashable, int]


class SequenceDecoder(Protocol):
    """Protocol implemented by candidate-sequence decoders."""

    name: DecoderName
    algorithm: str

    def decode(
        self,
        candidate_seq: Sequence[CandidateSet],
        model: TransitionModel,
    ) -> list[Hashable]:
        """Return one label per position; position 0 keeps its first candidate."""


def validate_candidate_sequence(
    candidate_seq: Sequence[CandidateSet],
    model: TransitionModel,
    *,
    min_length: int,
) -> None:
    """Fail fast on malformed candidate sequences.

    Position 0 only needs a first label inside the model's domain; every later
    position needs a non-empty candidate set of emit-able labels.
    """
    if len(candidate_seq) < min_length:
        raise InvalidArgumentError(
            f"candidate sequence needs at least {min_length} positions, got {len(candidate_seq)}"
        )
    if not candidate_seq[0]:
        raise InvalidArgumentError("candidate set at position 0 is empty")
    model.index_of(first_label(candidate_seq[0]))
    for position in range(1, len(candidate_seq)):
        validate_candidates(candidate_seq[position], model, position=position)


def validate_candidates(candidates: CandidateSet, model: TransitionModel, *, position: int) -> None:
    if not candidates:
        raise InvalidArgumentError(f"candidate set at position {position} is empty")
    for label, frequency in candidates.items():
        if frequency < 0:
            raise InvalidArgumentError(
                f"negative frequency {frequency} for {label!r} at position {position}"
            )
        model.check_label(label)


def first_label(candidates: CandidateSet) -> Hashable:
    return next(iter(candidates))


def argmin(costs: Sequence[float]) -> int:
    """Index of the smallest cost; ties and all-infinite rows resolve to the first."""
    best_index = 0
    best_cost = math.inf
    for index, cost in enumerate(costs):
        if cost < best_cost:
            best_cost = cost
            best_index = index
    return best_index


def warn_if_degenerate(logger: logging.Logger, costs: Sequence[float], position: int) -> None:
    if costs and not any(math.isfinite(cost) for cost in costs):
        logger.warning(
            "All %d candidate costs at position %d are non-finite; keeping the first candidate",
            len(costs),
            position,
        )
