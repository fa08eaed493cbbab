"""
Aggregate scored words into word-level and product-level summaries.
- word_summary(word, mean_rating, score, count): score is the MAX score seen for the word
- product_summary(product_id, mean_rating, sentiment, count): sentiment is the MEAN score
NaN ratings/scores are skipped by the means and the max rather than propagated.
"""

from __future__ import annotations
from typing import Optional
import pandas as pd
from .config import CFG
from .schemas import WORD_SUMMARY_COLS, PRODUCT_SUMMARY_COLS


def _empty(cols) -> pd.DataFrame:
    df = pd.DataFrame({c: pd.Series(dtype=float) for c in cols})
    df[cols[0]] = df[cols[0]].astype(object)
    df["count"] = df["count"].astype("int64")
    return df


def summarize_words(scored: pd.DataFrame) -> pd.DataFrame:
    if scored.empty:
        return _empty(WORD_SUMMARY_COLS)
    out = (
        scored.groupby("word", sort=True)
        .agg(mean_rating=("overall_rating", "mean"),
             score=("score", "max"),
             count=("overall_rating", "size"))
        .reset_index()
    )
    # most common first; ties broken by word so reruns are identical
    out = out.sort_values(["count", "word"], ascending=[False, True], kind="mergesort")
    return out[WORD_SUMMARY_COLS].reset_index(drop=True)


def summarize_products(scored: pd.DataFrame) -> pd.DataFrame:
    if scored.empty:
        return _empty(PRODUCT_SUMMARY_COLS)
    out = (
        scored.groupby("product_id", sort=True)
        .agg(mean_rating=("overall_rating", "mean"),
             sentiment=("score", "mean"),
             count=("overall_rating", "size"))
        .reset_index()
    )
    return out[PRODUCT_SUMMARY_COLS].reset_index(drop=True)


# --- word subsets used by the word clouds ---------------------------------

def most_common_words(words: pd.DataFrame, top_n: Optional[int] = None) -> pd.DataFrame:
    top_n = CFG.top_n if top_n is None else top_n
    out = words.sort_values(["count", "word"], ascending=[False, True], kind="mergesort")
    return out.head(top_n).reset_index(drop=True)


def positive_words(words: pd.DataFrame, top_n: Optional[int] = None, min_count: Optional[int] = None) -> pd.DataFrame:
    """Words with a positive lexicon score, highest mean rating first."""
    top_n = CFG.top_n if top_n is None else top_n
    min_count = CFG.positive_min_count if min_count is None else min_count
    out = words[(words["score"] > 0) & (words["count"] > min_count)]
    out = out.sort_values(["mean_rating", "word"], ascending=[False, True], kind="mergesort")
    return out.head(top_n).reset_index(drop=True)


def negative_words(words: pd.DataFrame, top_n: Optional[int] = None, min_count: Optional[int] = None) -> pd.DataFrame:
    """
    Words with a negative lexicon score, lowest mean rating first.
    Rare words are dropped with a much higher default count threshold than
    `positive_words` (NEGATIVE_MIN_COUNT=1000 vs POSITIVE_MIN_COUNT=0).
    """
    top_n = CFG.top_n if top_n is None else top_n
    min_count = CFG.negative_min_count if min_count is None else min_count
    out = words[(words["score"] < 0) & (words["count"] > min_count)]
    out = out.sort_values(["mean_rating", "word"], ascending=[True, True], kind="mergesort")
    return out.head(top_n).reset_index(drop=True)
