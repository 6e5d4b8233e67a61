"""Transition cost model shared by the candidate-sequence decoders."""

from __future__ import annotations

import math
from collections.abc import Hashable, Sequence
from dataclasses import dataclass, field

from seqtag.errors import InvalidArgumentError
from seqtag.labels import ordinal

DEFAULT_EPSILON = 1e-8


@dataclass(frozen=True)
class TransitionModel:
    """Negative-log transition costs plus per-label total frequencies.

    `costs[i][j]` is the cost of moving from the label with ordinal `i` to the
    label with ordinal `j`. `total_frequencies[i]` is the corpus count of label
    `i` and acts as the denominator of the emission cost. When `labels` is
    given it fixes the label domain and its order defines the ordinals;
    otherwise labels must be `Enum` members or integers.
    """

    costs: Sequence[Sequence[float]]
    total_frequencies: Sequence[float]
    epsilon: float = DEFAULT_EPSILON
    labels: Sequence[Hashable] | None = None
    _index: dict[Hashable, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        size = len(self.costs)
        rows = tuple(tuple(float(value) for value in row) for row in self.costs)
        for row_index, row in enumerate(rows):
            if len(row) != size:
                raise InvalidArgumentError(
                    f"transition matrix must be square: row {row_index} has "
                    f"{len(row)} entries, expected {size}"
                )
        totals = tuple(float(value) for value in self.total_frequencies)
        if len(totals) != size:
            raise InvalidArgumentError(
                f"expected {size} total frequencies, got {len(totals)}"
            )
        if any(total < 0 for total in totals):
            raise InvalidArgumentError("total frequencies must be non-negative")
        if self.epsilon < 0:
            raise InvalidArgumentError(f"epsilon must be non-negative, got {self.epsilon}")

        index: dict[Hashable, int] = {}
        labels = None
        if self.labels is not None:
            labels = tuple(self.labels)
            if len(labels) != size:
                raise InvalidArgumentError(
                    f"label domain has {len(labels)} entries but the matrix has {size} rows"
                )
            for position, label in enumerate(labels):
                if label in index:
                    raise InvalidArgumentError(f"duplicate label in domain: {label!r}")
                index[label] = position

        object.__setattr__(self, "costs", rows)
        object.__setattr__(self, "total_frequencies", totals)
        object.__setattr__(self, "labels", labels)
        object.__setattr__(self, "_index", index)

    @property
    def size(self) -> int:
        return len(self.costs)

    def index_of(self, label: Hashable) -> int:
        """Resolve a label to its row/column index in the cost matrix."""
        if self.labels is not None:
            try:
                return self._index[label]
            except KeyError:
                raise InvalidArgumentError(f"label {label!r} is not in the label domain") from None
        position = ordinal(label)
        if position >= self.size:
            raise InvalidArgumentError(
                f"label {label!r} has ordinal {position} but the label domain has "
                f"only {self.size} entries"
            )
        return position

    def check_label(self, label: Hashable) -> None:
        """Validate that `label` can be both a transition target and emitted."""
        if self.total_frequency(label) <= 0:
            raise InvalidArgumentError(f"label {label!r} has no positive total frequency")

    def transition_cost(self, prev: Hashable, cur: Hashable) -> float:
        return self.costs[self.index_of(prev)][self.index_of(cur)]

    def total_frequency(self, label: Hashable) -> float:
        return self.total_frequencies[self.index_of(label)]

    def emission_cost(self, label: Hashable, frequency: float) -> float:
        """Return `-log((frequency + epsilon) / total_frequency(label))`.

        A zero numerator (no frequency, no smoothing) yields `+inf` rather than
        a math domain error.
        """
        probability = (frequency + self.epsilon) / self.total_frequency(label)
        if probability <= 0.0:
            return math.inf
        return -math.log(probability)
