"""Greedy decoding over a chain of mutable sequence nodes."""

from __future__ import annotations

import logging
from collections.abc import Hashable, Mapping, Sequence
from dataclasses import dataclass, field

from seqtag.decode.base import argmin, first_label, validate_candidates, warn_if_degenerate
from seqtag.decode.transitions import TransitionModel
from seqtag.errors import InvalidArgumentError

logger = logging.getLogger(__name__)


@dataclass
class SequenceNode:
    """One position of a chain: candidate frequencies and a confirmed label slot."""

    candidates: Mapping[Hashable, int] = field(default_factory=dict)
    label: Hashable | None = None

    @property
    def confirmed(self) -> bool:
        return self.label is not None

    def guess_label(self) -> Hashable:
        """Confirmed label if any, else the first candidate."""
        if self.label is not None:
            return self.label
        if not self.candidates:
            raise InvalidArgumentError("node has neither a confirmed label nor candidates")
        return first_label(self.candidates)

    def confirm(self, label: Hashable) -> None:
        if self.label is not None:
            raise InvalidArgumentError(f"node is already confirmed as {self.label!r}")
        self.label = label


def decode_chain(nodes: Sequence[SequenceNode], model: TransitionModel) -> None:
    """Confirm one label on every node after the anchor, in place.

    Each node picks the candidate that is cheapest given only the label chosen
    for the node before it, so the result is a forward greedy approximation of
    Viterbi rather than an exhaustive search. `nodes[0]` is the anchor and is
    never modified.
    """
    _validate_chain(nodes, model)

    pre = nodes[0].guess_label()
    total = 0.0
    for position in range(1, len(nodes)):
        node = nodes[position]
        labels = list(node.candidates)
        costs = [
            total
            + model.transition_cost(pre, cur)
            + model.emission_cost(cur, node.candidates[cur])
            for cur in labels
        ]
        warn_if_degenerate(logger, costs, position)
        best = argmin(costs)
        total = costs[best]
        pre = labels[best]
        node.confirm(pre)

    logger.debug("Confirmed %d chain nodes with cost %.6f", len(nodes) - 1, total)


def _validate_chain(nodes: Sequence[SequenceNode], model: TransitionModel) -> None:
    if not nodes:
        raise InvalidArgumentError("chain must contain at least the anchor node")
    model.index_of(nodes[0].guess_label())
    for position in range(1, len(nodes)):
        node = nodes[position]
        if node.confirmed:
            raise InvalidArgumentError(f"node at position {position} is already confirmed")
        validate_candidates(node.candidates, model, position=position)
