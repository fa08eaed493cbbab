# flatten the raw line-delimited review dump (optionally .gz) into the CSV read by ingest
from __future__ import annotations
from pathlib import Path
import pandas as pd
from .ingest import EXPECTED_COLS, LoadError

OPTIONAL_COLS = ["summary", "unixReviewTime"]


def convert_records(src: str | Path, dest: str | Path) -> int:
    src, dest = Path(src), Path(dest)
    if not src.exists():
        raise LoadError(f"Record file not found: {src}")

    try:
        df = pd.read_json(src, lines=True, compression="infer", dtype=False)
    except ValueError as e:
        raise LoadError(f"Could not parse records in {src}: {e}") from e

    missing = EXPECTED_COLS - set(df.columns)
    if missing:
        raise LoadError(f"{src}: records missing keys: {sorted(missing)}")

    cols = ["reviewerID", "asin", "overall", "reviewText"] + [c for c in OPTIONAL_COLS if c in df.columns]
    df = df[cols]

    dest.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(dest, index=False)
    print(f"[convert] wrote {len(df)} rows to {dest}")
    return len(df)
