from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True)


class Review(_Record):
    reviewer_id: str                              # from reviewerID
    product_id: str                               # from asin
    overall_rating: float = Field(ge=1, le=5)     # from overall
    review_text: str = ""                         # from reviewText (may be empty)

class WordOccurrence(_Record):
    reviewer_id: str
    product_id: str
    overall_rating: float
    word: str

class LexiconEntry(_Record):
    word_stem: str
    score: float

class ScoredWord(_Record):
    reviewer_id: str
    product_id: str
    overall_rating: float
    word: str
    score: float

class WordSummary(_Record):
    word: str
    mean_rating: float
    score: float  # max over the group
    count: int

class ProductSummary(_Record):
    product_id: str
    mean_rating: float
    sentiment: float  # mean over the group
    count: int
    quadrant: Optional[str] = None


# column orders for the tabular form of each record
REVIEW_COLS = list(Review.model_fields)
OCCURRENCE_COLS = list(WordOccurrence.model_fields)
SCORED_COLS = list(ScoredWord.model_fields)
WORD_SUMMARY_COLS = ["word", "mean_rating", "score", "count"]
PRODUCT_SUMMARY_COLS = ["product_id", "mean_rating", "sentiment", "count"]
