#!/usr/bin/env python3
"""Run a tagging benchmark and write release-gate artifacts.

Manifest format (JSONL), one decode request per line plus its reference:
{
  "id": "sent-001",
  "labels": ["BOS", "NN", "VB"],
  "transition_costs": [[9.0, 0.5, 2.0], [9.0, 1.5, 0.4], [9.0, 0.7, 1.9]],
  "total_frequencies": [100, 400, 300],
  "candidates": [{"BOS": 1}, {"NN": 12, "VB": 3}, {"VB": 7}],
  "reference_labels": ["BOS", "NN", "VB"]
}
"""

from __future__ import annotations

import argparse
import csv
import json
import subprocess
import sys
import time
from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from seqtag.config import configure_logging, load_config
from seqtag.core import run_decode
from seqtag.eval import ReferenceSequence, count_label_matches, summarize_metrics
from seqtag.models import DecodeRequest


@dataclass(frozen=True)
class BenchmarkCase:
    request: DecodeRequest
    reference: ReferenceSequence


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run seqtag benchmark and save artifacts.")
    parser.add_argument("--manifest", required=True, help="Path to benchmark JSONL manifest")
    parser.add_argument("--output-root", default="eval/runs", help="Artifact root directory")
    parser.add_argument(
        "--decoder",
        default=None,
        choices=["viterbi", "greedy"],
        help="Decoder override (default: configured decoder)",
    )
    return parser.parse_args()


def load_manifest(path: Path, *, decoder: str | None) -> list[BenchmarkCase]:
    cases: list[BenchmarkCase] = []
    for line_num, raw_line in enumerate(path.read_text(encoding="utf-8").splitlines(), start=1):
        line = raw_line.strip()
        if not line:
            continue
        payload = json.loads(line)
        case_id = str(payload.pop("id", None) or f"line-{line_num}")
        reference = ReferenceSequence(
            case_id=case_id,
            labels=[str(label) for label in payload.pop("reference_labels")],
        )
        if decoder is not None:
            payload["decoder"] = decoder
        cases.append(BenchmarkCase(request=DecodeRequest.model_validate(payload), reference=reference))
    return cases


def run_benchmark(cases: list[BenchmarkCase]) -> dict[str, Any]:
    rows: list[dict[str, Any]] = []
    total_runtime_sec = 0.0
    correct_labels = 0
    reference_labels = 0
    exact_sequences = 0

    config = load_config()
    for case in cases:
        started = time.perf_counter()
        response = run_decode(case.request, config)
        elapsed = time.perf_counter() - started

        correct, total = count_label_matches(response.labels, case.reference.labels)
        exact = response.labels == case.reference.labels
        total_runtime_sec += elapsed
        correct_labels += correct
        reference_labels += total
        exact_sequences += int(exact)

        rows.append(
            {
                "case_id": case.reference.case_id,
                "decoder": response.metadata.decoder,
                "runtime_sec": round(elapsed, 6),
                "positions": response.metadata.position_count,
                "correct_labels": correct,
                "reference_labels": total,
                "exact": exact,
                "total_cost": round(response.metadata.total_cost, 6),
            }
        )

    summary = summarize_metrics(
        correct_labels=correct_labels,
        reference_labels=reference_labels,
        exact_sequences=exact_sequences,
        total_sequences=len(cases),
        total_runtime_sec=total_runtime_sec,
    )
    return {"summary": summary, "rows": rows}


def write_artifacts(output_root: Path, *, manifest: Path, result: dict[str, Any]) -> Path:
    timestamp = datetime.now(UTC).strftime("%Y%m%dT%H%M%SZ")
    git_sha = _git_sha()
    out_dir = output_root / f"{timestamp}_{git_sha[:8]}"
    out_dir.mkdir(parents=True, exist_ok=True)

    metrics_payload = {
        "generated_at": datetime.now(UTC).isoformat(),
        "git_sha": git_sha,
        "manifest_path": str(manifest),
        "command": " ".join([sys.executable, *sys.argv]),
        "summary": result["summary"],
    }
    (out_dir / "summary.json").write_text(
        json.dumps(metrics_payload, indent=2, ensure_ascii=False) + "\n",
        encoding="utf-8",
    )

    with (out_dir / "per_case.csv").open("w", encoding="utf-8", newline="") as handle:
        writer = csv.DictWriter(handle, fieldnames=list(result["rows"][0].keys()) if result["rows"] else [])
        if result["rows"]:
            writer.writeheader()
            writer.writerows(result["rows"])
    return out_dir


def _git_sha() -> str:
    try:
        proc = subprocess.run(
            ["git", "rev-parse", "HEAD"],
            check=True,
            text=True,
            capture_output=True,
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
    return proc.stdout.strip()


def main() -> int:
    args = parse_args()
    configure_logging(load_config())
    manifest = Path(args.manifest)
    cases = load_manifest(manifest, decoder=args.decoder)
    result = run_benchmark(cases)
    out_dir = write_artifacts(Path(args.output_root), manifest=manifest, result=result)
    print(json.dumps(result["summary"], indent=2))
    print(f"Artifacts written to: {out_dir}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
