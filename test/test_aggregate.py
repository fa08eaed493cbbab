import math
import pandas as pd
import pytest
from review_lexicon.aggregate import (
    most_common_words, negative_words, positive_words, summarize_products, summarize_words,
)


def _scored(rows):
    return pd.DataFrame(rows, columns=["reviewer_id", "product_id", "overall_rating", "word", "score"])


@pytest.fixture
def scored():
    return _scored([
        ("U1", "A1", 5.0, "good", 3.0),
        ("U1", "A1", 5.0, "good", 3.0),
        ("U2", "A1", 2.0, "bad", -3.0),
        ("U3", "B2", 1.0, "awful", -3.0),
        ("U4", "B2", 3.0, "bad", -2.0),
    ])


def test_word_summary_uses_max_score(scored):
    words = summarize_words(scored).set_index("word")
    assert words.loc["good"].tolist() == [5.0, 3.0, 2]
    assert words.loc["bad", "mean_rating"] == pytest.approx(2.5)
    assert words.loc["bad", "score"] == -2.0
    assert words.loc["bad", "count"] == 2


def test_word_summary_sorted_by_count_then_word(scored):
    assert summarize_words(scored)["word"].tolist() == ["bad", "good", "awful"]


def test_product_summary_uses_mean_score(scored):
    products = summarize_products(scored).set_index("product_id")
    assert products.loc["A1", "mean_rating"] == pytest.approx(4.0)
    assert products.loc["A1", "sentiment"] == pytest.approx(1.0)
    assert products.loc["B2", "sentiment"] == pytest.approx(-2.5)
    assert products.loc["A1", "count"] == 3


def test_order_independent(scored):
    shuffled = scored.sample(frac=1, random_state=7).reset_index(drop=True)
    pd.testing.assert_frame_equal(summarize_words(scored), summarize_words(shuffled))
    pd.testing.assert_frame_equal(summarize_products(scored), summarize_products(shuffled))


def test_nan_scores_are_skipped():
    scored = _scored([
        ("U1", "A1", 4.0, "good", 3.0),
        ("U2", "A1", 2.0, "good", float("nan")),
    ])
    products = summarize_products(scored)
    assert products.loc[0, "sentiment"] == pytest.approx(3.0)
    assert products.loc[0, "mean_rating"] == pytest.approx(3.0)
    assert summarize_words(scored).loc[0, "score"] == 3.0


def test_empty_input_gives_empty_summaries():
    empty = _scored([])
    words, products = summarize_words(empty), summarize_products(empty)
    assert words.empty and list(words.columns) == ["word", "mean_rating", "score", "count"]
    assert products.empty and list(products.columns) == ["product_id", "mean_rating", "sentiment", "count"]
    assert positive_words(words, top_n=10, min_count=0).empty
    assert negative_words(words, top_n=10, min_count=0).empty


def test_positive_and_negative_subsets(scored):
    words = summarize_words(scored)
    assert positive_words(words, top_n=10, min_count=0)["word"].tolist() == ["good"]
    assert negative_words(words, top_n=10, min_count=0)["word"].tolist() == ["awful", "bad"]


def test_negative_count_threshold_is_separate(scored):
    words = summarize_words(scored)
    assert negative_words(words, top_n=10, min_count=1)["word"].tolist() == ["bad"]
    assert negative_words(words, top_n=10)["word"].tolist() == []  # default threshold 1000
    assert positive_words(words, top_n=10)["word"].tolist() == ["good"]


def test_most_common_words(scored):
    assert most_common_words(summarize_words(scored), top_n=2)["word"].tolist() == ["bad", "good"]
