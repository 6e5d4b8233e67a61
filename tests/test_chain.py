import math
from enum import Enum, auto

import pytest

from seqtag.decode import SequenceNode, TransitionModel, decode_chain
from seqtag.errors import InvalidArgumentError


class Tag(Enum):
    BOS = auto()
    A = auto()
    B = auto()
    C = auto()
    D = auto()


def _model(costs: dict[tuple[Tag, Tag], float], *, default: float = 50.0) -> TransitionModel:
    matrix = [[costs.get((prev, cur), default) for cur in Tag] for prev in Tag]
    return TransitionModel(costs=matrix, total_frequencies=[10.0] * len(Tag))


def test_decode_chain_prefers_cheaper_transition_and_frequency() -> None:
    model = _model({(Tag.BOS, Tag.A): 1.0, (Tag.BOS, Tag.B): 2.0})
    anchor = SequenceNode(candidates={Tag.BOS: 1}, label=Tag.BOS)
    node = SequenceNode(candidates={Tag.A: 5, Tag.B: 1})

    decode_chain([anchor, node], model)

    assert node.label is Tag.A
    assert anchor.label is Tag.BOS


def test_decode_chain_reproduces_greedy_choice() -> None:
    model = _model(
        {
            (Tag.BOS, Tag.A): 1.0,
            (Tag.BOS, Tag.B): 2.0,
            (Tag.A, Tag.C): 10.0,
            (Tag.B, Tag.C): 1.0,
            (Tag.C, Tag.D): 1.0,
        }
    )
    nodes = [
        SequenceNode(label=Tag.BOS),
        SequenceNode(candidates={Tag.A: 10, Tag.B: 10}),
        SequenceNode(candidates={Tag.C: 10}),
        SequenceNode(candidates={Tag.D: 10}),
    ]

    decode_chain(nodes, model)

    # B -> C is far cheaper overall, but the greedy pass commits to A first.
    assert [node.label for node in nodes] == [Tag.BOS, Tag.A, Tag.C, Tag.D]


def test_decode_chain_confirms_every_node_once() -> None:
    model = _model({})
    nodes = [SequenceNode(label=Tag.BOS)] + [
        SequenceNode(candidates={Tag.A: 3, Tag.B: 4}) for _ in range(4)
    ]

    decode_chain(nodes, model)

    assert all(node.confirmed for node in nodes)
    with pytest.raises(InvalidArgumentError):
        decode_chain(nodes, model)


def test_decode_chain_is_deterministic() -> None:
    model = _model({(Tag.BOS, Tag.B): 1.0, (Tag.B, Tag.C): 2.0, (Tag.A, Tag.D): 0.5})

    def build() -> list[SequenceNode]:
        return [
            SequenceNode(label=Tag.BOS),
            SequenceNode(candidates={Tag.A: 4, Tag.B: 6}),
            SequenceNode(candidates={Tag.C: 3, Tag.D: 3}),
            SequenceNode(candidates={Tag.A: 1, Tag.B: 1}),
        ]

    first = build()
    second = build()
    decode_chain(first, model)
    decode_chain(second, model)

    assert [node.label for node in first] == [node.label for node in second]
    assert all(node.confirmed for node in first)


def test_decode_chain_ties_keep_first_candidate() -> None:
    model = _model({})
    first = SequenceNode(candidates={Tag.B: 2, Tag.A: 2})
    second = SequenceNode(candidates={Tag.A: 2, Tag.B: 2})

    decode_chain([SequenceNode(label=Tag.BOS), first, second], model)

    assert first.label is Tag.B
    assert second.label is Tag.A


def test_decode_chain_anchor_falls_back_to_first_candidate() -> None:
    model = _model({(Tag.A, Tag.C): 1.0, (Tag.A, Tag.D): 5.0})
    anchor = SequenceNode(candidates={Tag.A: 1, Tag.BOS: 1})
    node = SequenceNode(candidates={Tag.D: 10, Tag.C: 10})

    decode_chain([anchor, node], model)

    assert anchor.label is None
    assert node.label is Tag.C


def test_decode_chain_anchor_only_is_a_no_op() -> None:
    anchor = SequenceNode(label=Tag.BOS)
    decode_chain([anchor], _model({}))
    assert anchor.label is Tag.BOS


def test_decode_chain_validates_before_mutating() -> None:
    model = _model({})
    nodes = [
        SequenceNode(label=Tag.BOS),
        SequenceNode(candidates={Tag.A: 1}),
        SequenceNode(candidates={}),
    ]

    with pytest.raises(InvalidArgumentError):
        decode_chain(nodes, model)
    assert nodes[1].label is None


def test_decode_chain_rejects_missing_anchor_and_unknown_labels() -> None:
    model = TransitionModel(costs=[[0.0, 1.0], [1.0, 0.0]], total_frequencies=[5.0, 5.0])

    with pytest.raises(InvalidArgumentError):
        decode_chain([], model)
    with pytest.raises(InvalidArgumentError):
        decode_chain([SequenceNode()], model)
    with pytest.raises(InvalidArgumentError):
        # Tag.C has ordinal 3, outside a two-label domain.
        decode_chain([SequenceNode(label=Tag.BOS), SequenceNode(candidates={Tag.C: 1})], model)


def test_decode_chain_propagates_degenerate_costs(caplog) -> None:
    inf = math.inf
    model = TransitionModel(
        costs=[[inf] * len(Tag) for _ in Tag],
        total_frequencies=[10.0] * len(Tag),
    )
    node = SequenceNode(candidates={Tag.B: 1, Tag.A: 1})

    decode_chain([SequenceNode(label=Tag.BOS), node], model)

    assert node.label is Tag.B
    assert "non-finite" in caplog.text
