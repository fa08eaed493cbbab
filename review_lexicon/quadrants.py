from __future__ import annotations
from typing import Optional
import numpy as np
import pandas as pd
from .config import CFG

POS_POS = "Positive Review/Positive Sentiment"
NEG_POS = "Negative Review/Positive Sentiment"
NEG_NEG = "Negative Review/Negative Sentiment"
POS_NEG = "Positive Review/Negative Sentiment"

QUADRANTS = (POS_POS, NEG_POS, NEG_NEG, POS_NEG)


def classify_quadrant(mean_rating: float, sentiment: float,
                      x_mid: Optional[float] = None, y_mid: Optional[float] = None) -> str:
    """
    Label a (mean_rating, sentiment) point; first matching rule wins.
    A point exactly on both midpoints is Negative Review/Negative Sentiment.
    """
    x_mid = CFG.rating_midpoint if x_mid is None else x_mid
    y_mid = CFG.sentiment_midpoint if y_mid is None else y_mid
    if mean_rating > x_mid and sentiment > y_mid:
        return POS_POS
    if mean_rating <= x_mid and sentiment > y_mid:
        return NEG_POS
    if mean_rating <= x_mid and sentiment <= y_mid:
        return NEG_NEG
    return POS_NEG


def classify_products(products: pd.DataFrame,
                      x_mid: Optional[float] = None, y_mid: Optional[float] = None) -> pd.DataFrame:
    """Return a copy of `products` with a `quadrant` column (same rules as classify_quadrant)."""
    x_mid = CFG.rating_midpoint if x_mid is None else x_mid
    y_mid = CFG.sentiment_midpoint if y_mid is None else y_mid
    r, s = products["mean_rating"], products["sentiment"]
    conds = [
        (r > x_mid) & (s > y_mid),
        (r <= x_mid) & (s > y_mid),
        (r <= x_mid) & (s <= y_mid),
    ]
    out = products.copy()
    out["quadrant"] = np.select(conds, [POS_POS, NEG_POS, NEG_NEG], default=POS_NEG) if len(out) else pd.Series(dtype=object)
    return out


def quadrant_counts(products: pd.DataFrame) -> pd.Series:
    return products["quadrant"].value_counts().reindex(list(QUADRANTS), fill_value=0)
