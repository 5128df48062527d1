"""Per-product sentence-level review analysis."""

import logging
import math
from typing import Dict, List, Optional, Sequence

from .aspect import classify_aspect, extract_subject
from .constants import AspectConstants, RankingConstants, SentimentConstants
from .grouping import SimilarityGrouper
from .lexicon import Lexicon, get_lexicon
from .models import (
    AspectMatrixEntry,
    Factor,
    GroupItem,
    ProductAnalysis,
    Review,
    SentenceRecord,
    SourceRef,
)
from .request_detector import is_improvement_request
from .segmenter import split_into_sentences
from .sentiment import judge_sentiment

logger = logging.getLogger(__name__)


def _as_group_item(record: SentenceRecord) -> GroupItem:
    return GroupItem(sentence=record.original_sentence, aspect=record.aspect, subject=record.subject)


def build_sentence_ranking(
    sentences: Sequence[SentenceRecord],
    sentiment: str,
    grouper: SimilarityGrouper,
    limit: int = RankingConstants.TOP_SENTENCES,
) -> List[Factor]:
    """Group every sentence of one polarity and keep the most frequent factors."""
    items = [_as_group_item(s) for s in sentences if s.sentiment == sentiment]
    return grouper.group(items)[:limit]


def build_aspect_matrix(
    sentences: Sequence[SentenceRecord],
    grouper: SimilarityGrouper,
    limit: int = RankingConstants.ASPECT_SENTENCES,
) -> List[AspectMatrixEntry]:
    """
    Bucket sentences by aspect and sentiment.

    Sentences in the ``other`` aspect without any subject are skipped.
    Aspects without a single positive or negative sentence are dropped and
    the rest are ordered by positive + negative volume.
    """
    buckets: Dict[str, Dict[str, List[str]]] = {}
    for s in sentences:
        if s.aspect == AspectConstants.OTHER_ASPECT and not s.subject:
            continue
        bucket = buckets.setdefault(s.aspect, {
            SentimentConstants.POSITIVE: [],
            SentimentConstants.NEGATIVE: [],
            SentimentConstants.NEUTRAL: [],
        })
        bucket[s.sentiment].append(s.original_sentence)

    matrix = []
    for aspect, data in buckets.items():
        positive = data[SentimentConstants.POSITIVE]
        negative = data[SentimentConstants.NEGATIVE]
        if not positive and not negative:
            continue
        matrix.append(AspectMatrixEntry(
            aspect=aspect,
            positive_count=len(positive),
            negative_count=len(negative),
            neutral_count=len(data[SentimentConstants.NEUTRAL]),
            positive_sentences=grouper.group(GroupItem(sentence=t, aspect=aspect) for t in positive)[:limit],
            negative_sentences=grouper.group(GroupItem(sentence=t, aspect=aspect) for t in negative)[:limit],
        ))

    matrix.sort(key=lambda entry: -entry.volume)
    return matrix


def _rating_of(review: Review) -> float:
    """Numeric rating; unusable or non-finite values count as unrated (0)."""
    try:
        rating = float(review.rating or 0)
    except (TypeError, ValueError):
        return 0.0
    return rating if math.isfinite(rating) else 0.0


def rating_distribution(reviews: Sequence[Review]) -> Dict[int, int]:
    """Count reviews per rounded star value; unrated or out-of-range ratings are skipped."""
    distribution = {r: 0 for r in range(RankingConstants.RATING_MAX, RankingConstants.RATING_MIN - 1, -1)}
    for review in reviews:
        # half-up, matching how star ratings are usually displayed
        stars = int(_rating_of(review) + 0.5)
        if RankingConstants.RATING_MIN <= stars <= RankingConstants.RATING_MAX:
            distribution[stars] += 1
    return distribution


def average_rating(reviews: Sequence[Review]) -> float:
    if not reviews:
        return 0.0
    mean = sum(_rating_of(r) for r in reviews) / len(reviews)
    # half-up to one decimal (4.25 -> 4.3)
    return math.floor(mean * 10 + 0.5) / 10


class ReviewAnalyzer:
    """Runs segmentation, classification, judgement and grouping for one product."""

    def __init__(self, lexicon: Optional[Lexicon] = None):
        self.lexicon = lexicon or get_lexicon()
        self.grouper = SimilarityGrouper(self.lexicon)

    def analyze_review(self, review: Review, review_index: int) -> List[SentenceRecord]:
        """Break one review into analyzed sentence records."""
        source = SourceRef(
            review_index=review_index,
            rating=review.rating,
            full_text=review.text,
            title=review.title or "",
        )
        records = []
        for sentence in split_into_sentences(review.text):
            judgement = judge_sentiment(sentence, self.lexicon)
            records.append(SentenceRecord(
                original_sentence=sentence,
                subject=extract_subject(sentence, self.lexicon),
                aspect=classify_aspect(sentence, self.lexicon),
                sentiment=judgement.sentiment,
                positive_score=judgement.positive_score,
                negative_score=judgement.negative_score,
                matched_positive=judgement.matched_positive,
                matched_negative=judgement.matched_negative,
                is_request=is_improvement_request(sentence, self.lexicon),
                source_review=source,
            ))
        return records

    def analyze(self, reviews: Sequence[Review]) -> ProductAnalysis:
        """Analyze all reviews of one product."""
        sentences: List[SentenceRecord] = []
        for index, review in enumerate(reviews):
            sentences.extend(self.analyze_review(review, index))

        requests = [_as_group_item(s) for s in sentences if s.is_request]
        breakdown = {
            label: sum(1 for s in sentences if s.sentiment == label)
            for label in (SentimentConstants.POSITIVE, SentimentConstants.NEUTRAL, SentimentConstants.NEGATIVE)
        }

        analysis = ProductAnalysis(
            total_reviews=len(reviews),
            total_sentences=len(sentences),
            average_rating=average_rating(reviews),
            sentiment_breakdown=breakdown,
            rating_distribution=rating_distribution(reviews),
            aspect_matrix=build_aspect_matrix(sentences, self.grouper),
            top_negative_sentences=build_sentence_ranking(sentences, SentimentConstants.NEGATIVE, self.grouper),
            top_positive_sentences=build_sentence_ranking(sentences, SentimentConstants.POSITIVE, self.grouper),
            improvement_requests=self.grouper.group(requests),
            all_analyzed_sentences=sentences,
        )
        logger.debug(
            f"Analyzed {analysis.total_reviews} reviews into {analysis.total_sentences} sentences "
            f"({len(analysis.aspect_matrix)} aspects, {len(analysis.improvement_requests)} requests)"
        )
        return analysis


def analyze_all_reviews(reviews: Sequence[Review], lexicon: Optional[Lexicon] = None) -> ProductAnalysis:
    """Convenience wrapper around ``ReviewAnalyzer.analyze``."""
    return ReviewAnalyzer(lexicon).analyze(reviews)
