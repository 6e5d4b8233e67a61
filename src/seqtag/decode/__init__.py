"""Sequence decoders."""

from seqtag.decode.base import CandidateSet, DecoderName, SequenceDecoder
from seqtag.decode.chain import SequenceNode, decode_chain
from seqtag.decode.enum_viterbi import EnumViterbiDecoder
from seqtag.decode.greedy import EnumGreedyDecoder
from seqtag.decode.registry import resolve_decoder
from seqtag.decode.scoring import array_path_cost, sequence_cost
from seqtag.decode.transitions import DEFAULT_EPSILON, TransitionModel
from seqtag.decode.trellis import viterbi_path

__all__ = [
    "DEFAULT_EPSILON",
    "CandidateSet",
    "DecoderName",
    "EnumGreedyDecoder",
    "EnumViterbiDecoder",
    "SequenceDecoder",
    "SequenceNode",
    "TransitionModel",
    "array_path_cost",
    "decode_chain",
    "resolve_decoder",
    "sequence_cost",
    "viterbi_path",
]
