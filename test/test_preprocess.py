import types
from review_lexicon.preprocess import iter_word_occurrences, keep_token, tokenize, tokenize_reviews
from review_lexicon.schemas import Review, WordOccurrence


def _review(text, pid="A1", rating=4.0):
    return Review(reviewer_id="U1", product_id=pid, overall_rating=rating, review_text=text)


def test_tokenize_lowercases_and_splits_on_punctuation():
    assert tokenize("It's GREAT!!! 10/10, would-buy") == ["it's", "great", "10", "10", "would", "buy"]


def test_tokenize_empty_and_null():
    assert tokenize("") == []
    assert tokenize("   ") == []
    assert tokenize(None) == []
    assert tokenize(float("nan")) == []


def test_keep_token_pattern(stopwords):
    assert keep_token("don't", stopwords)
    assert not keep_token("ps4", stopwords)
    assert not keep_token("snake_case", stopwords)
    assert not keep_token("the", stopwords)


def test_only_stopwords_and_punctuation_yield_nothing(stopwords):
    reviews = [_review("This is... the, AND it!"), _review("?!?! --- ..."), _review("")]
    assert list(iter_word_occurrences(reviews, stopwords)) == []


def test_iter_is_lazy_and_ordered(stopwords):
    reviews = [_review("good bad", pid="A1"), _review("ugly", pid="A2", rating=1.0)]
    it = iter_word_occurrences(reviews, stopwords)
    assert isinstance(it, types.GeneratorType)
    occs = list(it)
    assert [o.word for o in occs] == ["good", "bad", "ugly"]
    assert occs[2] == WordOccurrence(reviewer_id="U1", product_id="A2", overall_rating=1.0, word="ugly")


def test_tokenize_reviews_frame(example_reviews, stopwords):
    before = example_reviews.copy()
    occ = tokenize_reviews(example_reviews, stopwords, progress=False)
    assert occ["word"].tolist() == ["game", "good", "good", "bad", "game"]
    assert occ["overall_rating"].tolist() == [5.0, 5.0, 5.0, 2.0, 2.0]
    assert occ["word"].str.fullmatch(r"[a-z']+").all()
    assert example_reviews.equals(before)


def test_tokenize_reviews_empty(example_reviews, stopwords):
    occ = tokenize_reviews(example_reviews.iloc[0:0], stopwords, progress=False)
    assert occ.empty
    assert list(occ.columns) == ["reviewer_id", "product_id", "overall_rating", "word"]


def test_quotes_around_words_are_stripped(stopwords):
    assert tokenize("It was 'good' and the ' mark") == ["it", "was", "good", "and", "the", "mark"]
    assert tokenize("''don't''") == ["don't"]
    occs = list(iter_word_occurrences([_review("It was 'good' and the ' mark")], stopwords))
    assert [o.word for o in occs] == ["good", "mark"]
