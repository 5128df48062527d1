"""Sentence-level sentiment judgement with local negation handling."""

from typing import Optional

from .constants import SentimentConstants
from .lexicon import Lexicon, get_lexicon
from .models import SentimentJudgement


def _is_negated(sentence: str, expression: str, lexicon: Lexicon) -> bool:
    """True if a negation marker sits just before or after the first occurrence."""
    idx = sentence.find(expression)
    end = idx + len(expression)
    before = sentence[max(0, idx - SentimentConstants.NEGATION_WINDOW_BEFORE):idx]
    after = sentence[end:end + SentimentConstants.NEGATION_WINDOW_AFTER]
    return any(neg in after or neg in before for neg in lexicon.negation_words)


def label_from_scores(positive_score: int, negative_score: int) -> str:
    if positive_score > negative_score:
        return SentimentConstants.POSITIVE
    if negative_score > positive_score:
        return SentimentConstants.NEGATIVE
    return SentimentConstants.NEUTRAL


def judge_sentiment(sentence: str, lexicon: Optional[Lexicon] = None) -> SentimentJudgement:
    """
    Score a sentence against the positive and negative expression lists.

    Every matched expression is worth ``SentimentConstants.EXPRESSION_WEIGHT``
    once, however often it occurs. A positive expression with a negation
    marker in its window (3 chars before, 5 after) counts as negative and is
    recorded as ``"<expr>(negated)"``. Negative expressions are never
    negation-checked.
    """
    lexicon = lexicon or get_lexicon()
    weight = SentimentConstants.EXPRESSION_WEIGHT
    positive_score = 0
    negative_score = 0
    matched_positive = []
    matched_negative = []

    for expr in lexicon.positive_expressions:
        if expr not in sentence:
            continue
        if _is_negated(sentence, expr, lexicon):
            negative_score += weight
            matched_negative.append(expr + SentimentConstants.NEGATED_SUFFIX)
        else:
            positive_score += weight
            matched_positive.append(expr)

    for expr in lexicon.negative_expressions:
        if expr in sentence:
            negative_score += weight
            matched_negative.append(expr)

    return SentimentJudgement(
        sentiment=label_from_scores(positive_score, negative_score),
        positive_score=positive_score,
        negative_score=negative_score,
        matched_positive=matched_positive,
        matched_negative=matched_negative,
    )
