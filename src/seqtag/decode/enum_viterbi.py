"""Viterbi-style decoder over per-position candidate sets.

The cost table is the full Viterbi table, `cost[i][k]` being the cheapest way
to reach candidate `k` at position `i`. The emitted path, however, follows a
single running best predecessor per position (the `(k, j)` pair with the
lowest cost seen while filling that position) rather than per-label
backpointers, so the labels it returns need not form the cheapest path.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Hashable, Sequence

from seqtag.decode.base import (
    CandidateSet,
    DecoderName,
    argmin,
    first_label,
    validate_candidate_sequence,
    warn_if_degenerate,
)
from seqtag.decode.transitions import TransitionModel

logger = logging.getLogger(__name__)

_ALGORITHM = "viterbi-single-predecessor"


class EnumViterbiDecoder:
    """Two-stage DP over candidate sets with a single global predecessor per step."""

    name: DecoderName = "viterbi"
    algorithm = _ALGORITHM

    def decode(
        self,
        candidate_seq: Sequence[CandidateSet],
        model: TransitionModel,
    ) -> list[Hashable]:
        validate_candidate_sequence(candidate_seq, model, min_length=2)

        anchor = first_label(candidate_seq[0])
        tags = [anchor]

        second = candidate_seq[1]
        prev_labels = list(second)
        prev_costs = [
            model.transition_cost(anchor, cur) + model.emission_cost(cur, second[cur])
            for cur in prev_labels
        ]
        warn_if_degenerate(logger, prev_costs, 1)

        for position in range(2, len(candidate_seq)):
            candidates = candidate_seq[position]
            labels = list(candidates)
            costs: list[float] = []
            best_j = 0
            best_cost = math.inf
            for cur in labels:
                emission = model.emission_cost(cur, candidates[cur])
                cost = math.inf
                for j, prev in enumerate(prev_labels):
                    now = prev_costs[j] + model.transition_cost(prev, cur) + emission
                    if now < cost:
                        cost = now
                        if now < best_cost:
                            best_cost = now
                            best_j = j
                costs.append(cost)
            warn_if_degenerate(logger, costs, position)
            tags.append(prev_labels[best_j])
            prev_labels = labels
            prev_costs = costs

        last = argmin(prev_costs)
        tags.append(prev_labels[last])
        logger.debug("Viterbi decode of %d positions, cost %.6f", len(tags), prev_costs[last])
        return tags
