# export summary tables for the plotting / reporting side
from __future__ import annotations
from pathlib import Path
from typing import Dict
import pandas as pd

SUMMARY_FILES = {
    "words": "word_summary.csv",
    "products": "product_summary.csv",
    "positive": "positive_words.csv",
    "negative": "negative_words.csv",
}


def export_summaries(result, out_dir: str | Path) -> Dict[str, Path]:
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    paths = {}
    for attr, name in SUMMARY_FILES.items():
        p = out_dir / name
        getattr(result, attr).to_csv(p, index=False, float_format="%.10g", lineterminator="\n")
        paths[attr] = p
    print(f"[export] wrote {len(paths)} tables to {out_dir}")
    return paths


def load_summaries(out_dir: str | Path) -> Dict[str, pd.DataFrame]:
    out_dir = Path(out_dir)
    return {
        attr: pd.read_csv(out_dir / name, dtype={"word": str, "product_id": str}, keep_default_na=False, na_values=[""])
        for attr, name in SUMMARY_FILES.items()
    }
