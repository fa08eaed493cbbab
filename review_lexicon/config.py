from __future__ import annotations
import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    input_path: str = os.getenv("INPUT_PATH", "data/raw/reviews.csv")
    lexicon_path: str | None = os.getenv("LEXICON_PATH")      # AFINN-style TSV; None -> afinn package
    stopwords_path: str | None = os.getenv("STOPWORDS_PATH")  # one word per line; None -> nltk corpus

    output_dir: str = os.getenv("OUTPUT_DIR", "data/enriched")
    charts_dir: str = os.getenv("CHARTS_DIR", "reports/charts")

    rating_midpoint: float = float(os.getenv("RATING_MIDPOINT", 3.5))
    sentiment_midpoint: float = float(os.getenv("SENTIMENT_MIDPOINT", 0.0))
    positive_min_count: int = int(os.getenv("POSITIVE_MIN_COUNT", 0))
    negative_min_count: int = int(os.getenv("NEGATIVE_MIN_COUNT", 1000))
    top_n: int = int(os.getenv("TOP_N", 50))

    show_progress: bool = _flag("SHOW_PROGRESS", "true")

CFG = Settings()
