"""Tests for the whole-text sentiment scorer."""

import pytest
from reviewhub.core.models import Review
from reviewhub.core.scoring import analyze_reviews, analyze_sentiment


def test_analyze_sentiment_weighted_word():
    """Test that a strong positive word carries its weight."""
    result = analyze_sentiment("最高の商品です")
    assert result.score == 3
    assert result.label == "positive"
    assert result.positive_words[0].word == "最高"


def test_analyze_sentiment_counts_occurrences():
    result = analyze_sentiment("最高最高")
    assert result.score == 6
    assert result.positive_words[0].count == 2


def test_analyze_sentiment_negation_after_word():
    """Test that a following negation flips a positive word."""
    result = analyze_sentiment("満足しない")
    assert result.score == -2
    assert result.label == "negative"
    assert result.negative_words[0].word == "満足(negated)"


def test_analyze_sentiment_negation_prefix():
    """不満足 is negated by its prefix and also matches 不満."""
    result = analyze_sentiment("不満足")
    assert result.score == -4
    words = [hit.word for hit in result.negative_words]
    assert "満足(negated)" in words
    assert "不満" in words


@pytest.mark.parametrize("text", ["", "   ", None, 42])
def test_analyze_sentiment_empty(text):
    """Test empty and non-string input."""
    result = analyze_sentiment(text)
    assert result.score == 0
    assert result.label == "neutral"


def test_analyze_sentiment_small_scores_are_neutral():
    # コスパ weighs 1, below the positive threshold
    result = analyze_sentiment("コスパについて")
    assert result.score == 1
    assert result.label == "neutral"


def test_analyze_reviews_summary():
    """Test batch breakdown, ratio and keyword ranking."""
    reviews = [
        Review(text="最高です", rating=5),
        Review(text="最悪です", rating=1),
        Review(text="普通です", rating=3),
    ]
    summary = analyze_reviews(reviews)

    assert summary.total_count == 3
    assert summary.sentiment_breakdown == {"positive": 1, "negative": 1, "neutral": 1}
    assert summary.sentiment_ratio == {"positive": 33, "negative": 33, "neutral": 33}
    assert summary.average_score == 0.0
    assert summary.rating_distribution == {1: 1, 2: 0, 3: 1, 4: 0, 5: 1}
    assert summary.top_positive_keywords == [{"word": "最高", "count": 1}]
    assert summary.top_negative_keywords == [{"word": "最悪", "count": 1}]


def test_analyze_reviews_average_rounding():
    reviews = [Review(text="最高です"), Review(text="良い"), Review(text="普通")]
    # (3 + 2 + 0) / 3 = 1.666...
    assert analyze_reviews(reviews).average_score == 1.67


def test_analyze_reviews_non_finite_ratings():
    """Test that NaN and infinite ratings are left out of the distribution."""
    reviews = [Review(text="最高です", rating=float("nan")), Review(text="最高です", rating=float("inf"))]
    summary = analyze_reviews(reviews)
    assert summary.total_count == 2
    assert summary.rating_distribution == {1: 0, 2: 0, 3: 0, 4: 0, 5: 0}


def test_analyze_reviews_empty():
    summary = analyze_reviews([])
    assert summary.total_count == 0
    assert summary.average_score == 0.0
    assert summary.top_positive_keywords == []


def test_summary_to_dict_excludes_reviews_by_default():
    summary = analyze_reviews([Review(text="最高です", rating=5)])
    data = summary.to_dict()
    assert "reviews" not in data
    assert data["rating_distribution"]["5"] == 1
    assert "reviews" in summary.to_dict(include_reviews=True)
