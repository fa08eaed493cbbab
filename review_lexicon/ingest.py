"""
Load the flat review table produced by `convert` into a typed frame.
- Validates required columns, rating type/range and ids up front
- Renames raw Amazon column names to snake_case
- Output columns: reviewer_id, product_id, overall_rating, review_text
"""

from __future__ import annotations
from pathlib import Path
from typing import Iterator
import pandas as pd
from pandas.errors import EmptyDataError, ParserError
from .schemas import Review, REVIEW_COLS

EXPECTED_COLS = {"reviewerID", "asin", "overall", "reviewText"}

RENAMES = {
    "reviewerID": "reviewer_id",
    "asin": "product_id",
    "overall": "overall_rating",
    "reviewText": "review_text",
}


class LoadError(ValueError):
    """Input file missing, unreadable, or not shaped like a review table."""

class EmptyInputError(LoadError):
    """Input parsed fine but holds zero reviews."""


def _read(path: Path) -> pd.DataFrame:
    if not path.exists():
        raise LoadError(f"Input file not found: {path}")
    try:
        # ids like ASINs keep leading zeros; only a blank cell is missing
        return pd.read_csv(path, dtype=str, keep_default_na=False, na_values=[""])
    except EmptyDataError as e:
        raise EmptyInputError(f"Input file is empty: {path}") from e
    except (ParserError, UnicodeDecodeError, OSError) as e:
        raise LoadError(f"Could not parse {path}: {e}") from e


def validate(df: pd.DataFrame, source: str = "<frame>") -> pd.DataFrame:
    """Check and coerce a raw review frame; returns a new frame in REVIEW_COLS order."""
    missing = EXPECTED_COLS - set(df.columns)
    if missing:
        raise LoadError(f"{source}: missing required columns: {sorted(missing)}")
    if df.empty:
        raise EmptyInputError(f"{source}: no reviews")

    df = df.rename(columns=RENAMES)[REVIEW_COLS].copy()

    rating = pd.to_numeric(df["overall_rating"], errors="coerce")
    bad = rating.isna()
    if bad.any():
        raise LoadError(f"{source}: non-numeric overall rating in {int(bad.sum())} row(s)")
    out_of_range = (rating < 1) | (rating > 5)
    if out_of_range.any():
        raise LoadError(f"{source}: overall rating outside [1, 5] in {int(out_of_range.sum())} row(s)")
    df["overall_rating"] = rating.astype(float)

    for col in ("reviewer_id", "product_id"):
        nulls = df[col].isna()
        if nulls.any():
            raise LoadError(f"{source}: null {col} in {int(nulls.sum())} row(s)")
        df[col] = df[col].astype(str)

    df["review_text"] = df["review_text"].fillna("").astype(str)
    return df.reset_index(drop=True)


def load_reviews(path: str | Path) -> pd.DataFrame:
    path = Path(path)
    df = validate(_read(path), source=str(path))
    print(f"[ingest] loaded {len(df)} reviews from {path}")
    return df


def iter_reviews(df: pd.DataFrame) -> Iterator[Review]:
    for row in df[REVIEW_COLS].itertuples(index=False):
        yield Review(
            reviewer_id=row.reviewer_id,
            product_id=row.product_id,
            overall_rating=row.overall_rating,
            review_text=row.review_text,
        )
