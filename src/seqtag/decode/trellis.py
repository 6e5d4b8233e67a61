"""Array-indexed Viterbi decoding.

States and observations are dense integer indices; every table is already in
the negative-log domain, so the trellis keeps the minimum accumulated cost.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Sequence

from seqtag.decode.base import warn_if_degenerate
from seqtag.errors import InvalidArgumentError

logger = logging.getLogger(__name__)


def viterbi_path(
    observations: Sequence[int],
    states: Iterable[int],
    start_cost: Sequence[float],
    transition_cost: Sequence[Sequence[float]],
    emission_cost: Sequence[Sequence[float]],
) -> list[int]:
    """Return the minimum-cost state sequence for `observations`.

    `transition_cost[y0][y]` is the cost of moving from `y0` to `y` and
    `emission_cost[y][o]` the cost of state `y` emitting observation `o`.
    Ties keep the state that comes first in `states`.
    """
    ordered_states = list(dict.fromkeys(states))
    _validate_tables(observations, ordered_states, start_cost, transition_cost, emission_cost)

    frame_count = len(observations)
    state_count = max(ordered_states) + 1
    first_state = ordered_states[0]

    inf = math.inf
    scores = [[inf] * state_count for _ in range(frame_count)]
    backptr = [[first_state] * state_count for _ in range(frame_count)]

    for state in ordered_states:
        scores[0][state] = start_cost[state] + emission_cost[state][observations[0]]
        backptr[0][state] = state
    warn_if_degenerate(logger, [scores[0][state] for state in ordered_states], 0)

    for frame in range(1, frame_count):
        observation = observations[frame]
        for state in ordered_states:
            best_prev = first_state
            best_score = inf
            emission = emission_cost[state][observation]
            for prev in ordered_states:
                score = scores[frame - 1][prev] + transition_cost[prev][state] + emission
                if score < best_score:
                    best_score = score
                    best_prev = prev
            scores[frame][state] = best_score
            backptr[frame][state] = best_prev
        warn_if_degenerate(logger, [scores[frame][state] for state in ordered_states], frame)

    last_frame = frame_count - 1
    best_end_state = first_state
    best_end_score = inf
    for state in ordered_states:
        if scores[last_frame][state] < best_end_score:
            best_end_score = scores[last_frame][state]
            best_end_state = state

    path = [first_state] * frame_count
    cursor = best_end_state
    for frame in range(last_frame, -1, -1):
        path[frame] = cursor
        if frame > 0:
            cursor = backptr[frame][cursor]

    logger.debug("Decoded %d observations with cost %.6f", frame_count, best_end_score)
    return path


def _validate_tables(
    observations: Sequence[int],
    states: list[int],
    start_cost: Sequence[float],
    transition_cost: Sequence[Sequence[float]],
    emission_cost: Sequence[Sequence[float]],
) -> None:
    if not observations:
        raise InvalidArgumentError("observations must not be empty")
    if not states:
        raise InvalidArgumentError("states must not be empty")
    if min(states) < 0:
        raise InvalidArgumentError(f"state indices must be non-negative, got {min(states)}")

    state_count = max(states) + 1
    if len(start_cost) < state_count:
        raise InvalidArgumentError(
            f"start_cost covers {len(start_cost)} states, state {state_count - 1} is referenced"
        )
    if len(transition_cost) < state_count or any(
        len(transition_cost[state]) < state_count for state in states
    ):
        raise InvalidArgumentError(f"transition_cost must cover {state_count} states")
    if len(emission_cost) < state_count:
        raise InvalidArgumentError(
            f"emission_cost covers {len(emission_cost)} states, state {state_count - 1} is referenced"
        )
    for observation in observations:
        if observation < 0 or any(len(emission_cost[state]) <= observation for state in states):
            raise InvalidArgumentError(f"observation {observation} is outside the emission table")
