"""Path cost helpers for decoded label sequences."""

from __future__ import annotations

from collections.abc import Hashable, Sequence

from seqtag.decode.base import CandidateSet
from seqtag.decode.transitions import TransitionModel
from seqtag.errors import InvalidArgumentError


def sequence_cost(
    labels: Sequence[Hashable],
    candidate_seq: Sequence[CandidateSet],
    model: TransitionModel,
) -> float:
    """Accumulated cost of `labels` under the transition model.

    Position 0 is the anchor and contributes nothing. A label missing from its
    position's candidate set is scored with frequency 0.
    """
    if len(labels) != len(candidate_seq):
        raise InvalidArgumentError(
            f"got {len(labels)} labels for {len(candidate_seq)} positions"
        )
    total = 0.0
    for position in range(1, len(labels)):
        cur = labels[position]
        frequency = candidate_seq[position].get(cur, 0)
        total += model.transition_cost(labels[position - 1], cur)
        total += model.emission_cost(cur, frequency)
    return total


def array_path_cost(
    path: Sequence[int],
    observations: Sequence[int],
    start_cost: Sequence[float],
    transition_cost: Sequence[Sequence[float]],
    emission_cost: Sequence[Sequence[float]],
) -> float:
    """Accumulated cost of a state path over dense HMM tables."""
    if len(path) != len(observations):
        raise InvalidArgumentError(
            f"got {len(path)} states for {len(observations)} observations"
        )
    if not path:
        return 0.0
    total = start_cost[path[0]] + emission_cost[path[0]][observations[0]]
    for frame in range(1, len(path)):
        total += transition_cost[path[frame - 1]][path[frame]]
        total += emission_cost[path[frame]][observations[frame]]
    return total
