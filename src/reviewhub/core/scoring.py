"""Whole-text word-frequency sentiment scoring.

A second, independent policy next to the sentence-level judge in
``sentiment.py``: weighted words, occurrence counting and a wider negation
window. It scores whole reviews and is used for bulk review-level scoring,
not by the sentence pipeline.
"""

import logging
import math
from collections import defaultdict
from typing import Dict, List, Optional, Sequence

from .constants import ScoringConstants, SentimentConstants
from .lexicon import Lexicon, get_lexicon
from .models import BatchSentimentSummary, KeywordHit, Review, ScoredReview, TextSentiment

logger = logging.getLogger(__name__)


def _round_half_up(value: float, digits: int = 0) -> float:
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def _is_negated(text: str, word: str, lexicon: Lexicon) -> bool:
    """Negation after the first occurrence, or a 不/非 prefix shortly before it."""
    idx = text.find(word)
    if idx < 0:
        return False

    end = idx + len(word)
    after = text[end:end + ScoringConstants.NEGATION_WINDOW_AFTER]
    if any(neg in after for neg in lexicon.text_negation_words):
        return True

    before = text[max(0, idx - ScoringConstants.NEGATION_WINDOW_BEFORE):idx]
    return any(prefix in before for prefix in lexicon.text_negation_prefixes)


def analyze_sentiment(text, lexicon: Optional[Lexicon] = None) -> TextSentiment:
    """Score a whole text: weight x occurrences per word, a negated positive subtracts its weight once."""
    if not text or not isinstance(text, str) or not text.strip():
        return TextSentiment()

    lexicon = lexicon or get_lexicon()
    score = 0
    found_positive: List[KeywordHit] = []
    found_negative: List[KeywordHit] = []

    for word, weight in lexicon.weighted_positive.items():
        occurrences = text.count(word)
        if not occurrences:
            continue
        if _is_negated(text, word, lexicon):
            score -= weight
            found_negative.append(KeywordHit(word=word + SentimentConstants.NEGATED_SUFFIX, score=-weight))
        else:
            score += weight * occurrences
            found_positive.append(KeywordHit(word=word, score=weight, count=occurrences))

    for word, weight in lexicon.weighted_negative.items():
        occurrences = text.count(word)
        if occurrences:
            score += weight * occurrences
            found_negative.append(KeywordHit(word=word, score=weight, count=occurrences))

    if score >= ScoringConstants.POSITIVE_THRESHOLD:
        label = SentimentConstants.POSITIVE
    elif score <= ScoringConstants.NEGATIVE_THRESHOLD:
        label = SentimentConstants.NEGATIVE
    else:
        label = SentimentConstants.NEUTRAL

    return TextSentiment(score=score, label=label, positive_words=found_positive, negative_words=found_negative)


def _top_keywords(counts: Dict[str, int]) -> List[Dict[str, object]]:
    ranked = sorted(counts.items(), key=lambda kv: -kv[1])
    return [{"word": word, "count": count} for word, count in ranked[:ScoringConstants.TOP_KEYWORDS]]


def analyze_reviews(reviews: Sequence[Review], lexicon: Optional[Lexicon] = None) -> BatchSentimentSummary:
    """Score each review as a whole and summarize the batch."""
    if not reviews:
        return BatchSentimentSummary()

    lexicon = lexicon or get_lexicon()
    scored = [ScoredReview(review=r, sentiment=analyze_sentiment(r.text, lexicon)) for r in reviews]
    total = len(scored)

    breakdown = {SentimentConstants.POSITIVE: 0, SentimentConstants.NEGATIVE: 0, SentimentConstants.NEUTRAL: 0}
    for item in scored:
        breakdown[item.sentiment.label] += 1
    ratio = {label: int(_round_half_up(count / total * 100)) for label, count in breakdown.items()}

    distribution = {1: 0, 2: 0, 3: 0, 4: 0, 5: 0}
    for item in scored:
        try:
            stars = int(math.floor(float(item.review.rating or 0) + 0.5))
        except (TypeError, ValueError, OverflowError):
            continue
        if stars in distribution:
            distribution[stars] += 1

    positive_counts: Dict[str, int] = defaultdict(int)
    negative_counts: Dict[str, int] = defaultdict(int)
    for item in scored:
        for hit in item.sentiment.positive_words:
            positive_counts[hit.word] += hit.count
        for hit in item.sentiment.negative_words:
            negative_counts[hit.word] += hit.count

    average = sum(item.sentiment.score for item in scored) / total
    logger.debug(f"Scored {total} reviews: {breakdown}")

    return BatchSentimentSummary(
        total_count=total,
        sentiment_breakdown=breakdown,
        sentiment_ratio=ratio,
        average_score=_round_half_up(average, 2),
        rating_distribution=distribution,
        top_positive_keywords=_top_keywords(positive_counts),
        top_negative_keywords=_top_keywords(negative_counts),
        reviews=scored,
    )
