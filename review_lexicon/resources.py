"""
Static reference data shared by every stage: the sentiment lexicon and the stopword set.
Both are loaded once per run and handed to the stages read-only.
"""

from __future__ import annotations
import csv
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional
import nltk
import pandas as pd
from afinn import Afinn
from nltk.corpus import stopwords as nltk_stopwords
from .ingest import LoadError

AFINN_EN = "AFINN-en-165.txt"


def _read_afinn_file(path: Path) -> pd.DataFrame:
    if not path.exists():
        raise LoadError(f"Lexicon file not found: {path}")
    try:
        df = pd.read_csv(path, sep="\t", header=None, names=["word", "score"],
                         quoting=csv.QUOTE_NONE, dtype={"word": str}, keep_default_na=False)
    except (pd.errors.EmptyDataError, pd.errors.ParserError) as e:
        raise LoadError(f"Could not parse lexicon {path}: {e}") from e
    score = pd.to_numeric(df["score"], errors="coerce")
    if df.empty or score.isna().any():
        raise LoadError(f"Lexicon {path} must be non-empty 'word<TAB>score' lines")
    return df.assign(score=score)


def load_lexicon(path: Optional[str | Path] = None) -> Mapping[str, float]:
    """
    Raw lexicon word -> score.
    - path given: AFINN-format TSV (word<TAB>integer score)
    - no path: the English AFINN list bundled with the `afinn` package
    Words are lowercased; a repeated word keeps its last score.
    """
    if path:
        df = _read_afinn_file(Path(path))
        lex = {str(w).strip().lower(): float(s) for w, s in zip(df["word"], df["score"])}
    else:
        afinn = Afinn(language="en")
        lex = {w.lower(): float(s) for w, s in afinn.read_word_file(afinn.full_filename(AFINN_EN)).items()}
    print(f"[lexicon] {len(lex)} entries from {path or 'afinn:' + AFINN_EN}")
    return MappingProxyType(lex)


def load_stopwords(path: Optional[str | Path] = None) -> frozenset[str]:
    if path:
        path = Path(path)
        if not path.exists():
            raise LoadError(f"Stopword file not found: {path}")
        words = path.read_text(encoding="utf-8").split()
    else:
        try:
            words = nltk_stopwords.words("english")
        except LookupError:
            nltk.download("stopwords", quiet=True)
            words = nltk_stopwords.words("english")
    return frozenset(w.strip().lower() for w in words if w.strip())
