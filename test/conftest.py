import pandas as pd
import pytest

STOPWORDS = frozenset({"this", "is", "the", "a", "and", "it", "i", "it's", "was", "of"})
LEXICON = {"good": 3, "bad": -3}


@pytest.fixture
def stopwords():
    return STOPWORDS


@pytest.fixture
def lexicon():
    return dict(LEXICON)


@pytest.fixture
def example_reviews():
    return pd.DataFrame({
        "reviewer_id": ["U1", "U2"],
        "product_id": ["A1", "A1"],
        "overall_rating": [5.0, 2.0],
        "review_text": ["this game is good good", "bad game"],
    })


@pytest.fixture
def raw_csv(tmp_path):
    def _write(rows, name="reviews.csv"):
        p = tmp_path / name
        pd.DataFrame(rows).to_csv(p, index=False)
        return p
    return _write
