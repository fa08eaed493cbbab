"""
Tokenize review text into one row per word.
- Lowercase, split on anything that is not a word character or apostrophe
- Keep tokens made only of a-z and apostrophes that are not stopwords
- Output: WordOccurrence rows in review order, then token order
"""

from __future__ import annotations
import re
from typing import AbstractSet, Iterable, Iterator, List
import pandas as pd
from tqdm import tqdm
from .config import CFG
from .schemas import Review, WordOccurrence, OCCURRENCE_COLS

_SPLIT_RE = re.compile(r"[^\w']+")
_WORD_RE = re.compile(r"^[a-z']+$")


def tokenize(text) -> List[str]:
    if not isinstance(text, str) or not text.strip():
        return []
    # quotes around a word are punctuation; inner apostrophes (don't) stay
    tokens = (t.strip("'") for t in _SPLIT_RE.split(text.lower()))
    return [t for t in tokens if t]


def keep_token(token: str, stopwords: AbstractSet[str]) -> bool:
    return bool(_WORD_RE.match(token)) and token not in stopwords


def iter_word_occurrences(reviews: Iterable[Review], stopwords: AbstractSet[str]) -> Iterator[WordOccurrence]:
    for r in reviews:
        for tok in tokenize(r.review_text):
            if keep_token(tok, stopwords):
                yield WordOccurrence(
                    reviewer_id=r.reviewer_id,
                    product_id=r.product_id,
                    overall_rating=r.overall_rating,
                    word=tok,
                )


def tokenize_reviews(df: pd.DataFrame, stopwords: AbstractSet[str], progress: bool | None = None) -> pd.DataFrame:
    """Frame version of `iter_word_occurrences`; never mutates `df`."""
    if progress is None:
        progress = CFG.show_progress

    rows = []
    it = df[["reviewer_id", "product_id", "overall_rating", "review_text"]].itertuples(index=False)
    for rid, pid, rating, text in tqdm(it, total=len(df), leave=False, disable=not progress):
        for tok in tokenize(text):
            if keep_token(tok, stopwords):
                rows.append((rid, pid, rating, tok))

    out = pd.DataFrame(rows, columns=OCCURRENCE_COLS)
    out["overall_rating"] = out["overall_rating"].astype(float)
    print(f"[tokenize] {len(out)} words kept from {len(df)} reviews")
    return out
