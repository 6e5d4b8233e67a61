"""Decoder registry."""

from __future__ import annotations

from seqtag.decode.base import DecoderName, SequenceDecoder
from seqtag.decode.enum_viterbi import EnumViterbiDecoder
from seqtag.decode.greedy import EnumGreedyDecoder
from seqtag.errors import InvalidArgumentError

_DECODERS: dict[DecoderName, SequenceDecoder] = {
    "viterbi": EnumViterbiDecoder(),
    "greedy": EnumGreedyDecoder(),
}


def resolve_decoder(name: DecoderName) -> SequenceDecoder:
    """Resolve decoder name to implementation."""
    try:
        return _DECODERS[name]
    except KeyError:
        raise InvalidArgumentError(
            f"unknown decoder {name!r}; expected one of {sorted(_DECODERS)}"
        ) from None
