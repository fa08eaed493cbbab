"""
End-to-end run: load -> tokenize -> join lexicon -> aggregate -> classify -> export (-> plots).

    python -m review_lexicon.orchestration --input data/raw/reviews.csv
"""

from __future__ import annotations
import argparse
from dataclasses import dataclass
from typing import AbstractSet, Mapping, Optional
import pandas as pd
from .config import CFG
from .ingest import load_reviews
from .resources import load_lexicon, load_stopwords
from .preprocess import tokenize_reviews
from .lexicon import normalize_lexicon
from .scoring import join_lexicon
from .aggregate import summarize_words, summarize_products, positive_words, negative_words
from .quadrants import classify_products, quadrant_counts
from .persist import export_summaries


@dataclass(frozen=True)
class PipelineResult:
    reviews: pd.DataFrame
    occurrences: pd.DataFrame
    scored: pd.DataFrame
    words: pd.DataFrame
    products: pd.DataFrame
    positive: pd.DataFrame
    negative: pd.DataFrame


def run_pipeline(
    reviews: pd.DataFrame,
    lexicon: Mapping[str, float],
    stopwords: AbstractSet[str],
    *,
    x_mid: Optional[float] = None,
    y_mid: Optional[float] = None,
    top_n: Optional[int] = None,
    positive_min_count: Optional[int] = None,
    negative_min_count: Optional[int] = None,
    progress: Optional[bool] = None,
) -> PipelineResult:
    """Pure in-memory pipeline; `lexicon` is the raw word -> score mapping."""
    stems = normalize_lexicon(lexicon)
    occurrences = tokenize_reviews(reviews, stopwords, progress=progress)
    scored = join_lexicon(occurrences, stems)
    words = summarize_words(scored)
    products = classify_products(summarize_products(scored), x_mid=x_mid, y_mid=y_mid)
    return PipelineResult(
        reviews=reviews,
        occurrences=occurrences,
        scored=scored,
        words=words,
        products=products,
        positive=positive_words(words, top_n=top_n, min_count=positive_min_count),
        negative=negative_words(words, top_n=top_n, min_count=negative_min_count),
    )


def run(
    input_path: Optional[str] = None,
    lexicon_path: Optional[str] = None,
    stopwords_path: Optional[str] = None,
    out_dir: Optional[str] = None,
    charts_dir: Optional[str] = None,
    plots: bool = True,
) -> PipelineResult:
    reviews = load_reviews(input_path or CFG.input_path)
    lexicon = load_lexicon(lexicon_path or CFG.lexicon_path)
    stopwords = load_stopwords(stopwords_path or CFG.stopwords_path)

    result = run_pipeline(reviews, lexicon, stopwords)
    export_summaries(result, out_dir or CFG.output_dir)

    for label, n in quadrant_counts(result.products).items():
        print(f"[quadrant] {label}: {n}")

    if plots:
        from .visualization import render_all
        render_all(result, charts_dir or CFG.charts_dir)
    return result


def main(argv=None):
    ap = argparse.ArgumentParser(description="Lexicon sentiment vs. star rating for product reviews")
    ap.add_argument("--input", default=None, help="Review CSV (reviewerID, asin, overall, reviewText)")
    ap.add_argument("--lexicon", default=None, help="AFINN-format TSV; default: bundled AFINN-165")
    ap.add_argument("--stopwords", default=None, help="Stopword file, one per line; default: NLTK English")
    ap.add_argument("--out", default=None, help="Directory for summary CSVs")
    ap.add_argument("--charts", default=None, help="Directory for charts")
    ap.add_argument("--no-plots", action="store_true", help="Skip chart rendering")
    args = ap.parse_args(argv)

    run(args.input, args.lexicon, args.stopwords, args.out, args.charts, plots=not args.no_plots)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
