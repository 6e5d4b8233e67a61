"""Transition-driven greedy decoder over candidate sets."""

from __future__ import annotations

import logging
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

_ALGORITHM = "forward-greedy"


class EnumGreedyDecoder:
    """Keep one running `(total, pre)` pair and pick the cheapest label per position."""

    name: DecoderName = "greedy"
    algorithm = _ALGORITHM

    def decode(
        self,
        candidate_seq: Sequence[CandidateSet],
        model: TransitionModel,
    ) -> list[Hashable]:
        validate_candidate_sequence(candidate_seq, model, min_length=1)

        pre = first_label(candidate_seq[0])
        tags = [pre]
        total = 0.0
        for position in range(1, len(candidate_seq)):
            candidates = candidate_seq[position]
            labels = list(candidates)
            costs = [
                total
                + model.transition_cost(pre, cur)
                + model.emission_cost(cur, candidates[cur])
                for cur in labels
            ]
            warn_if_degenerate(logger, costs, position)
            best = argmin(costs)
            total = costs[best]
            pre = labels[best]
            tags.append(pre)

        logger.debug("Greedy decode of %d positions, cost %.6f", len(tags), total)
        return tags
