"""Cross-product aggregation: shared factors, requests, hints and comparison table."""

import logging
import re
from collections import Counter
from typing import Dict, List, Sequence, Tuple

from .constants import AggregationConstants as AC, SentimentConstants
from .models import (
    ComparisonRow,
    CrossFactor,
    CrossSummary,
    DifferentiationHint,
    Factor,
    PriceRange,
    ProductAnalysisResult,
    ProductInfo,
)

logger = logging.getLogger(__name__)

_TOKEN_PATTERNS = [re.compile(p) for p in AC.TOKEN_PATTERNS]
_MERGE_STRIP = re.compile(AC.MERGE_STRIP_PATTERN)
_MERGE_ENDINGS = re.compile(AC.MERGE_ENDINGS_PATTERN)


def normalize_for_grouping(sentence: str) -> str:
    """Merge key shared across products: no punctuation, no polite endings, 20 chars max."""
    text = _MERGE_STRIP.sub("", sentence)
    text = _MERGE_ENDINGS.sub("", text)
    return text[:AC.MERGE_KEY_LENGTH]


def _product_name(info: ProductInfo, index: int) -> str:
    return info.name or AC.PRODUCT_NAME_TEMPLATE.format(index=index + 1)


def _tokenize_name(name: str) -> List[str]:
    tokens = []
    for pattern in _TOKEN_PATTERNS:
        tokens.extend(t for t in pattern.findall(name) if len(t) >= AC.MIN_TOKEN_LENGTH)
    return tokens


def find_common_keywords(names: Sequence[str]) -> List[str]:
    """
    Tokens that appear in at least ``max(2, floor(N * 0.5))`` product names.

    Tokens are runs of katakana, ASCII alphanumerics or kanji (2+ chars).
    They are ranked by how many names contain them, then by how often they
    occur overall; the top three are returned.
    """
    product_counts: Counter = Counter()
    frequency: Counter = Counter()
    for name in names:
        tokens = _tokenize_name(name or "")
        frequency.update(tokens)
        product_counts.update(dict.fromkeys(tokens, 1))

    threshold = max(AC.MIN_SHARED_PRODUCTS, int(len(names) * AC.SHARED_PRODUCT_RATIO))
    shared = [token for token, count in product_counts.items() if count >= threshold]
    shared.sort(key=lambda t: (-product_counts[t], -frequency[t]))
    return shared[:AC.MAX_CATEGORY_TOKENS]


def estimate_category_and_price_range(products: Sequence[ProductInfo]) -> Tuple[str, PriceRange]:
    """Category label from shared name tokens and min/max of the known prices."""
    prices = [p.price for p in products if p.price and p.price > 0]
    price_range = PriceRange(min=min(prices), max=max(prices)) if prices else PriceRange()

    common = find_common_keywords([p.name or "" for p in products])
    category = " ".join(common) if common else AC.UNKNOWN_CATEGORY
    return category, price_range


def _merge_factors(per_product: Sequence[Tuple[str, Sequence[Factor]]]) -> List[CrossFactor]:
    merged: Dict[str, CrossFactor] = {}
    for product_name, factors in per_product:
        for factor in factors:
            key = normalize_for_grouping(factor.sentence)
            if key not in merged:
                merged[key] = CrossFactor(sentence=factor.sentence, aspect=factor.aspect)
            merged[key].add(product_name, factor.count)
    return list(merged.values())


def _factor_score(factor: CrossFactor) -> int:
    return factor.product_count * AC.FACTOR_PRODUCT_WEIGHT + factor.total_count


def aggregate_factors(results: Sequence[ProductAnalysisResult], sentiment: str) -> List[CrossFactor]:
    """Merge every product's top positive or negative factors, widest-spread first."""
    per_product = []
    for idx, result in enumerate(results):
        analysis = result.analysis
        factors = (
            analysis.top_positive_sentences
            if sentiment == SentimentConstants.POSITIVE
            else analysis.top_negative_sentences
        )
        per_product.append((_product_name(result.product_info, idx), factors))

    merged = _merge_factors(per_product)
    merged.sort(key=lambda f: -_factor_score(f))
    return merged


def aggregate_requests(results: Sequence[ProductAnalysisResult]) -> List[CrossFactor]:
    """Merge every product's improvement requests, most frequent first."""
    per_product = [
        (_product_name(result.product_info, idx), result.analysis.improvement_requests)
        for idx, result in enumerate(results)
    ]
    merged = _merge_factors(per_product)
    merged.sort(key=lambda r: -r.total_count)
    return merged


def generate_hints(negative_factors: Sequence[CrossFactor], requests: Sequence[CrossFactor]) -> List[DifferentiationHint]:
    """
    Suggest differentiation points from problems and wishes shared by several products.

    Shared negative factors come first (with the first request on the same
    aspect attached); shared requests on aspects not yet covered follow with
    a lower product weight. The result is ordered by impact score.
    """
    hints: List[DifferentiationHint] = []

    for neg in negative_factors:
        if neg.product_count < AC.MIN_HINT_PRODUCTS:
            continue
        related = next((r for r in requests if r.aspect == neg.aspect), None)
        hints.append(DifferentiationHint(
            hint=AC.NEGATIVE_HINT_TEMPLATE.format(aspect=neg.aspect),
            reason=AC.NEGATIVE_REASON_TEMPLATE.format(products=neg.product_count),
            related_negative=neg.sentence,
            related_request=related.sentence if related else "",
            aspect=neg.aspect,
            impact_score=_factor_score(neg),
        ))

    for req in requests:
        if req.product_count < AC.MIN_HINT_PRODUCTS:
            continue
        if any(h.aspect == req.aspect for h in hints):
            continue
        hints.append(DifferentiationHint(
            hint=AC.REQUEST_HINT_TEMPLATE.format(sentence=req.sentence),
            reason=AC.REQUEST_REASON_TEMPLATE.format(products=req.product_count, total=req.total_count),
            related_negative="",
            related_request=req.sentence,
            aspect=req.aspect,
            impact_score=req.product_count * AC.REQUEST_HINT_PRODUCT_WEIGHT + req.total_count,
        ))

    hints.sort(key=lambda h: -h.impact_score)
    return hints


def aspect_label(positive_count: int, negative_count: int) -> str:
    """positive / negative only when one side exceeds the other by more than 1.5x."""
    if positive_count > negative_count * AC.DOMINANCE_RATIO:
        return SentimentConstants.POSITIVE
    if negative_count > positive_count * AC.DOMINANCE_RATIO:
        return SentimentConstants.NEGATIVE
    return SentimentConstants.NEUTRAL


def build_comparison_table(results: Sequence[ProductAnalysisResult]) -> List[ComparisonRow]:
    rows = []
    for idx, result in enumerate(results):
        analysis = result.analysis
        rows.append(ComparisonRow(
            product_name=_product_name(result.product_info, idx),
            price=result.product_info.price or 0,
            rating=analysis.average_rating,
            review_count=analysis.total_reviews,
            aspects={
                entry.aspect: aspect_label(entry.positive_count, entry.negative_count)
                for entry in analysis.aspect_matrix
            },
        ))
    return rows


def generate_cross_summary(results: Sequence[ProductAnalysisResult]) -> CrossSummary:
    """Merge several products' analyses into one category-wide summary."""
    category, price_range = estimate_category_and_price_range([r.product_info for r in results])

    negative_factors = aggregate_factors(results, SentimentConstants.NEGATIVE)
    requests = aggregate_requests(results)
    hints = generate_hints(negative_factors, requests)

    summary = CrossSummary(
        category=category,
        price_range=price_range,
        product_count=len(results),
        total_reviews=sum(r.analysis.total_reviews for r in results),
        positive_factors=aggregate_factors(results, SentimentConstants.POSITIVE)[:AC.MAX_FACTORS],
        negative_factors=negative_factors[:AC.MAX_FACTORS],
        differentiation_hints=hints[:AC.MAX_HINTS],
        improvement_requests=requests[:AC.MAX_REQUESTS],
        comparison_table=build_comparison_table(results),
    )
    logger.debug(
        f"Cross summary for {summary.product_count} products: category='{summary.category}', "
        f"{len(summary.differentiation_hints)} hints"
    )
    return summary
