from __future__ import annotations
from typing import Iterable, Iterator, Mapping, Optional
import pandas as pd
from .lexicon import stem
from .schemas import WordOccurrence, ScoredWord, OCCURRENCE_COLS, SCORED_COLS


def score_occurrence(occ: WordOccurrence, lexicon: Mapping[str, float]) -> Optional[ScoredWord]:
    """
    Look up one word occurrence in a stem-keyed lexicon.
    Returns exactly one ScoredWord on a hit and None on a miss; a miss is not an error.
    """
    score = lexicon.get(stem(occ.word))
    if score is None:
        return None
    return ScoredWord(**occ.model_dump(), score=score)


def iter_scored(occurrences: Iterable[WordOccurrence], lexicon: Mapping[str, float]) -> Iterator[ScoredWord]:
    for occ in occurrences:
        hit = score_occurrence(occ, lexicon)
        if hit is not None:
            yield hit


def join_lexicon(occurrences: pd.DataFrame, lexicon: Mapping[str, float]) -> pd.DataFrame:
    """
    Inner join of word occurrences against the normalized lexicon.
    Unmatched words are dropped; output has at most as many rows as the input.
    """
    scores = occurrences["word"].map(lambda w: lexicon.get(stem(w)))
    hit = scores.notna()
    out = occurrences.loc[hit, OCCURRENCE_COLS].copy()
    out["score"] = scores[hit].astype(float)
    out = out[SCORED_COLS].reset_index(drop=True)
    print(f"[score] {len(out)} of {len(occurrences)} words matched the lexicon")
    return out
