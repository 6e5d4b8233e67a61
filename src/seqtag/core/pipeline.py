"""Request-level decode pipeline."""

from __future__ import annotations

import logging
from datetime import UTC, datetime

from seqtag.config import AppConfig, load_config
from seqtag.decode import TransitionModel, resolve_decoder, sequence_cost
from seqtag.models import DecodeMetadata, DecodeRequest, DecodeResponse

logger = logging.getLogger(__name__)


def run_decode(request: DecodeRequest, config: AppConfig | None = None) -> DecodeResponse:
    """Decode a validated request into a label sequence with metadata."""
    resolved_config = config or load_config()
    decoder = resolve_decoder(request.decoder or resolved_config.decoder)
    epsilon = request.epsilon if request.epsilon is not None else resolved_config.epsilon

    model = TransitionModel(
        costs=request.transition_costs,
        total_frequencies=request.total_frequencies,
        epsilon=epsilon,
        labels=request.labels,
    )
    labels = decoder.decode(request.candidates, model)
    total_cost = sequence_cost(labels, request.candidates, model)
    logger.info(
        "Decoded %d positions with %s decoder (cost %.6f)",
        len(labels),
        decoder.name,
        total_cost,
    )

    metadata = DecodeMetadata(
        decoder=decoder.name,
        algorithm=decoder.algorithm,
        label_count=model.size,
        position_count=len(request.candidates),
        total_cost=total_cost,
        generated_at=datetime.now(UTC),
    )
    return DecodeResponse(metadata=metadata, labels=[str(label) for label in labels])
