import math

import pytest
from pydantic import ValidationError

from seqtag.config import AppConfig
from seqtag.core import run_decode
from seqtag.errors import InvalidArgumentError
from seqtag.models import DecodeRequest

CONFIG = AppConfig(env="test", log_level="INFO", decoder="viterbi", epsilon=1e-8)


def _request(**overrides) -> DecodeRequest:
    payload = {
        "labels": ["BOS", "NN", "VB"],
        "transition_costs": [[9.0, 0.5, 2.0], [9.0, 1.5, 0.4], [9.0, 0.7, 1.9]],
        "total_frequencies": [100, 400, 300],
        "candidates": [{"BOS": 1}, {"NN": 12, "VB": 3}, {"VB": 7, "NN": 1}],
    }
    payload.update(overrides)
    return DecodeRequest(**payload)


def test_run_decode_with_configured_decoder() -> None:
    response = run_decode(_request(), CONFIG)

    expected_cost = (
        0.5 - math.log((12 + 1e-8) / 400) + 0.4 - math.log((7 + 1e-8) / 300)
    )
    assert response.labels == ["BOS", "NN", "VB"]
    assert response.metadata.decoder == "viterbi"
    assert response.metadata.algorithm == "viterbi-single-predecessor"
    assert response.metadata.label_count == 3
    assert response.metadata.position_count == 3
    assert response.metadata.total_cost == pytest.approx(expected_cost)


def test_run_decode_request_overrides_decoder() -> None:
    response = run_decode(_request(decoder="greedy"), CONFIG)

    assert response.labels == ["BOS", "NN", "VB"]
    assert response.metadata.decoder == "greedy"
    assert response.metadata.algorithm == "forward-greedy"


def test_run_decode_request_overrides_epsilon() -> None:
    request = _request(candidates=[{"BOS": 1}, {"NN": 0, "VB": 0}], epsilon=0.5)

    response = run_decode(request, CONFIG)

    expected_cost = 0.5 - math.log(0.5 / 400)
    assert response.labels == ["BOS", "NN"]
    assert response.metadata.total_cost == pytest.approx(expected_cost)


def test_run_decode_loads_config_when_omitted(monkeypatch) -> None:
    for name in ("SEQTAG_ENV", "SEQTAG_LOG_LEVEL", "SEQTAG_EPSILON"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("SEQTAG_DECODER", "greedy")

    response = run_decode(_request())

    assert response.metadata.decoder == "greedy"


def test_run_decode_rejects_unknown_candidate_label() -> None:
    with pytest.raises(InvalidArgumentError):
        run_decode(_request(candidates=[{"BOS": 1}, {"JJ": 2}]), CONFIG)


def test_run_decode_rejects_short_viterbi_sequence() -> None:
    with pytest.raises(InvalidArgumentError):
        run_decode(_request(candidates=[{"BOS": 1}]), CONFIG)


def test_run_decode_greedy_accepts_anchor_only() -> None:
    response = run_decode(_request(candidates=[{"BOS": 1}], decoder="greedy"), CONFIG)

    assert response.labels == ["BOS"]
    assert response.metadata.total_cost == 0.0


@pytest.mark.parametrize(
    "overrides",
    [
        {"labels": ["BOS", "NN", "NN"]},
        {"labels": []},
        {"transition_costs": [[0.0, 1.0], [1.0, 0.0]]},
        {"total_frequencies": [1, 2]},
        {"candidates": []},
        {"candidates": [{"BOS": 1}, {"NN": -2}]},
        {"decoder": "beam"},
        {"epsilon": -1.0},
    ],
)
def test_decode_request_validation(overrides) -> None:
    with pytest.raises(ValidationError):
        _request(**overrides)
