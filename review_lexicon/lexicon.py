from __future__ import annotations
from functools import lru_cache
from types import MappingProxyType
from typing import List, Mapping
from nltk.stem import PorterStemmer
from .schemas import LexiconEntry

_STEMMER = PorterStemmer()


@lru_cache(maxsize=65536)
def stem(word: str) -> str:
    """Porter stem of a lowercase word. Shared by the lexicon normalizer and the joiner."""
    return _STEMMER.stem(word)


def normalize_lexicon(lexicon: Mapping[str, float]) -> Mapping[str, float]:
    """
    Re-key a raw lexicon by word stem.
    When several words share a stem (e.g. 'amaze' / 'amazed' / 'amazing') the
    highest score wins, so the result does not depend on input order.
    """
    out: dict[str, float] = {}
    for word, score in lexicon.items():
        key = stem(word.lower())
        if key not in out or score > out[key]:
            out[key] = score
    return MappingProxyType(out)


def lexicon_entries(normalized: Mapping[str, float]) -> List[LexiconEntry]:
    return [LexiconEntry(word_stem=k, score=v) for k, v in sorted(normalized.items())]
