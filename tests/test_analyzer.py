"""Tests for per-product review analysis."""

from reviewhub.core.analyzer import (
    ReviewAnalyzer,
    analyze_all_reviews,
    average_rating,
    rating_distribution,
)
from reviewhub.core.lexicon import Lexicon
from reviewhub.core.models import Review


def _sample_reviews():
    return [
        Review(text="音質がとても良いです。バッテリーが持たないのが残念です。", rating=4, title="音は良い"),
        Review(text="バッテリーが持たない。", rating=2),
        Review(text="普通。", rating=0),
    ]


class TestReviewAnalyzer:
    """Test the full per-product analysis."""

    def test_zero_reviews(self):
        analysis = analyze_all_reviews([])
        assert analysis.total_reviews == 0
        assert analysis.total_sentences == 0
        assert analysis.average_rating == 0.0
        assert analysis.aspect_matrix == []
        assert analysis.sentiment_breakdown == {"positive": 0, "neutral": 0, "negative": 0}
        assert analysis.rating_distribution == {5: 0, 4: 0, 3: 0, 2: 0, 1: 0}

    def test_counts_and_breakdown(self):
        analysis = analyze_all_reviews(_sample_reviews())
        assert analysis.total_reviews == 3
        # 普通。 is too short to be a sentence
        assert analysis.total_sentences == 3
        assert analysis.sentiment_breakdown == {"positive": 1, "neutral": 0, "negative": 2}
        assert analysis.average_rating == 2.0
        assert analysis.rating_distribution == {5: 0, 4: 1, 3: 0, 2: 1, 1: 0}

    def test_negative_ranking_groups_similar_complaints(self):
        analysis = analyze_all_reviews(_sample_reviews())
        top = analysis.top_negative_sentences[0]
        assert top.count == 2
        assert top.aspect == "耐久性"
        assert top.sentence == "バッテリーが持たない。"
        assert analysis.top_positive_sentences[0].sentence == "音質がとても良いです。"

    def test_aspect_matrix_ordered_by_volume(self):
        analysis = analyze_all_reviews(_sample_reviews())
        aspects = [entry.aspect for entry in analysis.aspect_matrix]
        assert aspects == ["耐久性", "音質"]

        durability = analysis.aspect_matrix[0]
        assert durability.negative_count == 2
        assert durability.positive_count == 0
        assert durability.negative_sentences[0].count == 2

    def test_sentence_records_keep_source(self):
        analysis = analyze_all_reviews(_sample_reviews())
        first = analysis.all_analyzed_sentences[0]
        assert first.subject == "音質"
        assert first.source_review.review_index == 0
        assert first.source_review.title == "音は良い"
        assert analysis.all_analyzed_sentences[2].source_review.review_index == 1

    def test_improvement_requests_collected(self):
        reviews = [
            Review(text="物理ボタンにしてほしいです。", rating=2),
            Review(text="物理ボタンにしてほしい。", rating=3),
        ]
        analysis = analyze_all_reviews(reviews)
        assert len(analysis.improvement_requests) == 1
        assert analysis.improvement_requests[0].count == 2

    def test_other_aspect_without_subject_skipped_in_matrix(self):
        analysis = analyze_all_reviews([Review(text="最高最高最高！", rating=5)])
        assert analysis.sentiment_breakdown["positive"] == 1
        assert analysis.aspect_matrix == []

    def test_non_string_review_text(self):
        analysis = analyze_all_reviews([Review(text=None, rating=3)])
        assert analysis.total_reviews == 1
        assert analysis.total_sentences == 0
        assert analysis.average_rating == 3.0

    def test_custom_lexicon(self):
        lexicon = Lexicon(aspects={"電池": ["バッテリー"]})
        analysis = ReviewAnalyzer(lexicon).analyze([Review(text="バッテリーが持たない。", rating=2)])
        assert analysis.aspect_matrix[0].aspect == "電池"

    def test_analysis_is_deterministic(self):
        first = analyze_all_reviews(_sample_reviews()).to_dict()
        second = analyze_all_reviews(_sample_reviews()).to_dict()
        assert first == second


def test_rating_distribution_rounds_half_up():
    """Test that ratings are rounded and out-of-range values skipped."""
    reviews = [Review("a", 4.5), Review("b", 0.4), Review("c", 5.6), Review("d", 2.5), Review("e", 1)]
    assert rating_distribution(reviews) == {5: 1, 4: 0, 3: 1, 2: 0, 1: 1}


def test_average_rating():
    assert average_rating([Review("a", 4), Review("b", 5), Review("c", 5)]) == 4.7
    assert average_rating([]) == 0.0


def test_average_rating_rounds_half_up():
    """Test that a mean of 4.25 is shown as 4.3, not banker's-rounded to 4.2."""
    reviews = [Review("a", 4), Review("b", 4), Review("c", 5), Review("d", 4)]
    assert average_rating(reviews) == 4.3


def test_non_finite_ratings_count_as_unrated():
    """Test that NaN and infinite ratings neither crash nor skew the numbers."""
    reviews = [
        Review(text="バッテリーが持たない。", rating=float("nan")),
        Review(text="バッテリーが持たない。", rating=float("inf")),
        Review(text="音質がとても良いです。", rating=4),
    ]
    assert rating_distribution(reviews) == {5: 0, 4: 1, 3: 0, 2: 0, 1: 0}

    analysis = analyze_all_reviews(reviews)
    assert analysis.total_reviews == 3
    # (0 + 0 + 4) / 3
    assert analysis.average_rating == 1.3


def test_to_dict_string_keys():
    data = analyze_all_reviews(_sample_reviews()).to_dict(include_sentences=False)
    assert "all_analyzed_sentences" not in data
    assert set(data["rating_distribution"]) == {"1", "2", "3", "4", "5"}
