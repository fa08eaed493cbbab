from __future__ import annotations
import os
from types import SimpleNamespace
from typing import Optional
import pandas as pd
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from wordcloud import WordCloud
from .aggregate import most_common_words
from .config import CFG
from .persist import load_summaries
from .quadrants import QUADRANTS

_QUADRANT_COLORS = dict(zip(QUADRANTS, ["tab:green", "tab:orange", "tab:red", "tab:blue"]))

# --- utils ------------------------------------------------------------

def _ensure_dir(path: str):
    os.makedirs(path, exist_ok=True)

def _save(out_dir: str, name: str) -> Optional[str]:
    out_path = os.path.join(out_dir, name)
    plt.tight_layout()
    plt.savefig(out_path, dpi=160)
    plt.close()
    print(f"[viz] saved {out_path}")
    return out_path

# --- 1) Products: star rating vs lexicon sentiment, by quadrant -------
def plot_product_quadrants(
    products: pd.DataFrame,
    out_dir: str = "reports/charts",
    x_mid: Optional[float] = None,
    y_mid: Optional[float] = None,
) -> Optional[str]:
    """
    Scatter: x = mean star rating, y = mean lexicon sentiment, one dot per product.
    Dashed guides mark the quadrant midpoints.
    """
    x_mid = CFG.rating_midpoint if x_mid is None else x_mid
    y_mid = CFG.sentiment_midpoint if y_mid is None else y_mid
    if products.empty:
        print("[viz] No product rows to plot.")
        return None
    _ensure_dir(out_dir)

    plt.figure(figsize=(10, 6))
    if "quadrant" in products:
        for label, grp in products.groupby("quadrant"):
            plt.scatter(grp["mean_rating"], grp["sentiment"], s=12, alpha=0.6,
                        color=_QUADRANT_COLORS.get(label), label=f"{label} (n={len(grp)})")
        plt.legend(loc="lower right", fontsize="small")
    else:
        plt.scatter(products["mean_rating"], products["sentiment"], s=12, alpha=0.6)

    plt.axvline(x_mid, linestyle="--", linewidth=1, color="grey")
    plt.axhline(y_mid, linestyle="--", linewidth=1, color="grey")
    plt.xlim(1, 5)
    plt.xlabel("Mean Star Rating")
    plt.ylabel("Mean Lexicon Sentiment")
    plt.title("Product Rating vs. Review Sentiment")
    return _save(out_dir, "1_product_quadrants.png")

# --- 2) Words: rating vs score, bubble size ~ frequency ---------------
def plot_word_sentiment(
    words: pd.DataFrame,
    out_dir: str = "reports/charts",
    label_top_k: int = 15,
) -> Optional[str]:
    if words.empty:
        print("[viz] No word rows to plot.")
        return None
    _ensure_dir(out_dir)

    sizes = (words["count"] / words["count"].max() * 800) + 10

    plt.figure(figsize=(10, 6))
    plt.scatter(words["mean_rating"], words["score"], s=sizes, alpha=0.5)
    for _, row in words.sort_values("count", ascending=False).head(label_top_k).iterrows():
        plt.annotate(str(row["word"]), (row["mean_rating"], row["score"]),
                     xytext=(5, 5), textcoords="offset points")
    plt.xlabel("Mean Star Rating of Reviews Using the Word")
    plt.ylabel("Lexicon Score")
    plt.title("Word Sentiment vs. Rating (bubble size = occurrences)")
    return _save(out_dir, "2_word_sentiment.png")

# --- 3) Word clouds ---------------------------------------------------
def plot_word_cloud(
    words: pd.DataFrame,
    name: str,
    out_dir: str = "reports/charts",
    colormap: str = "viridis",
) -> Optional[str]:
    if words.empty:
        print(f"[viz] No words for {name} cloud.")
        return None
    _ensure_dir(out_dir)

    freqs = dict(zip(words["word"], words["count"].astype(float)))
    wc = WordCloud(width=800, height=400, background_color="white",
                   colormap=colormap, min_font_size=10).generate_from_frequencies(freqs)

    plt.figure(figsize=(10, 5))
    plt.imshow(wc, interpolation="bilinear")
    plt.axis("off")
    plt.title(name.replace("_", " ").title())
    return _save(out_dir, f"wordcloud_{name}.png")

# --- entry ------------------------------------------------------------
def render_all(result, out_dir: str = "reports/charts"):
    plot_product_quadrants(result.products, out_dir)
    plot_word_sentiment(result.words, out_dir)
    plot_word_cloud(most_common_words(result.words), "most_common", out_dir)
    plot_word_cloud(result.positive, "positive", out_dir, colormap="Greens")
    plot_word_cloud(result.negative, "negative", out_dir, colormap="Reds")


def render_exported(summary_dir: Optional[str] = None, out_dir: Optional[str] = None):
    """Render from the CSVs written by persist.export_summaries."""
    tables = load_summaries(summary_dir or CFG.output_dir)
    render_all(SimpleNamespace(**tables), out_dir or CFG.charts_dir)


if __name__ == "__main__":
    render_exported()
