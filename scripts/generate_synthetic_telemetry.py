#!/usr/bin/env python3
"""
Synthetic telemetry generator for the plant moisture dashboard.

- Creates one headerless CSV batch per hour, laid out like the sensor host
  writes them: timestamp, plant 1 moisture, spare channel, plant 2 moisture.
- Moisture drifts upward (drying) and resets after simulated watering.
- Optionally injects malformed rows (short rows, non-numeric values) and
  uploads the batches to the configured bucket.

Usage:
  python scripts/generate_synthetic_telemetry.py \
    --start 2024-01-01T00:00 \
    --batches 12 \
    --rows-per-batch 6 \
    --include-edge-cases \
    --upload

If no args are provided, 12 batches of 6 rows starting 2024-01-01T00:00 are
written to data/telemetry/.
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import List

import boto3
import numpy as np
import pandas as pd
import yaml


def load_bucket(project_root: Path) -> str:
    """Read storage.bucket from config/default.yaml."""
    cfg_path = project_root / "config/default.yaml"
    with open(cfg_path, "r") as f:
        cfg = yaml.safe_load(f)
    return cfg["storage"]["bucket"]


def synth_batch(start: pd.Timestamp, rows: int, seed: int) -> pd.DataFrame:
    """Create one batch of readings spaced ten minutes apart."""
    rng = np.random.default_rng(seed)

    timestamps = [start + pd.Timedelta(minutes=10 * i) for i in range(rows)]

    # Raw capacitive readings: higher means drier
    base_a = rng.uniform(12000, 26000)
    base_b = rng.uniform(12000, 26000)
    drift = np.arange(rows) * rng.uniform(50, 400)

    moisture_a = np.clip(base_a + drift + rng.normal(0, 300, rows), 0, 30000).round()
    moisture_b = np.clip(base_b + drift + rng.normal(0, 300, rows), 0, 30000).round()

    return pd.DataFrame({
        "timestamp": [ts.strftime("%Y-%m-%dT%H:%M") for ts in timestamps],
        "moisture_a": moisture_a.astype(int),
        "spare": rng.integers(0, 1024, rows),
        "moisture_b": moisture_b.astype(int),
    })


def edge_case_lines(start: pd.Timestamp) -> List[str]:
    """Rows that exercise NaN handling downstream."""
    ts = start.strftime("%Y-%m-%dT%H:%M")
    return [
        f"{ts},17000,12",          # moisture_b missing
        f"{ts},n/a,12,21000",      # moisture_a not a number
        f"{ts}",                   # only a timestamp
    ]


def write_batch(df: pd.DataFrame, path: Path, extra_lines: List[str]) -> str:
    path.parent.mkdir(parents=True, exist_ok=True)
    text = df.to_csv(header=False, index=False)
    if extra_lines:
        text += "\n".join(extra_lines) + "\n"
    path.write_text(text, encoding="utf-8")
    print(f"✓ Wrote {len(df) + len(extra_lines)} rows to {path}")
    return text


def main():
    parser = argparse.ArgumentParser(description="Generate synthetic soil-moisture CSV batches")
    parser.add_argument("--start", default="2024-01-01T00:00", help="Timestamp of the first reading")
    parser.add_argument("--batches", type=int, default=12, help="Number of hourly batches")
    parser.add_argument("--rows-per-batch", type=int, default=6, help="Readings per batch")
    parser.add_argument("--output-dir", type=Path, default=None, help="Where batches are written")
    parser.add_argument("--include-edge-cases", action="store_true", help="Append malformed rows to every third batch")
    parser.add_argument("--upload", action="store_true", help="Upload batches to the configured bucket")
    parser.add_argument("--bucket", default=None, help="Override storage.bucket for --upload")
    args = parser.parse_args()

    # Resolve project root as repo root (parent of scripts/)
    project_root = Path(__file__).resolve().parent.parent
    output_dir = args.output_dir or project_root / "data" / "telemetry"

    s3 = None
    bucket = None
    if args.upload:
        bucket = args.bucket or load_bucket(project_root)
        s3 = boto3.client("s3")

    start = pd.Timestamp(args.start)
    for i in range(args.batches):
        batch_start = start + pd.Timedelta(hours=i)
        df = synth_batch(batch_start, rows=args.rows_per_batch, seed=42 + i)
        extra = edge_case_lines(batch_start) if args.include_edge_cases and i % 3 == 2 else []

        key = f"{batch_start.strftime('%Y-%m-%dT%H-%M')}.csv"
        text = write_batch(df, output_dir / key, extra)

        if s3 is not None:
            s3.put_object(Bucket=bucket, Key=key, Body=text.encode("utf-8"))
            print(f"  ↑ Uploaded s3://{bucket}/{key}")

    print("\nAll synthetic batches generated in:", output_dir)


if __name__ == "__main__":
    main()
