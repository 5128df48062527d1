"""Data models for ReviewHub."""

from dataclasses import dataclass, field, asdict
from typing import Optional, List, Dict, Any


@dataclass(frozen=True)
class Review:
    """A single review as supplied by the scraping side."""
    text: Any
    rating: float = 0.0
    title: str = ""


@dataclass(frozen=True)
class SourceRef:
    """Back-reference from a sentence to the review it came from."""
    review_index: int
    rating: float
    full_text: Any
    title: str = ""


@dataclass
class SentimentJudgement:
    """Result of judging one sentence."""
    sentiment: str
    positive_score: int = 0
    negative_score: int = 0
    matched_positive: List[str] = field(default_factory=list)
    matched_negative: List[str] = field(default_factory=list)


@dataclass
class SentenceRecord:
    """One segmented sentence with its aspect, sentiment and request flag."""
    original_sentence: str
    subject: str
    aspect: str
    sentiment: str
    positive_score: int
    negative_score: int
    matched_positive: List[str]
    matched_negative: List[str]
    is_request: bool
    source_review: SourceRef

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def to_detail_dict(self) -> Dict[str, Any]:
        """Reduced view used by product detail lookups."""
        return {
            "original_sentence": self.original_sentence,
            "subject": self.subject,
            "aspect": self.aspect,
            "sentiment": self.sentiment,
            "is_request": self.is_request,
            "matched_positive": list(self.matched_positive),
            "matched_negative": list(self.matched_negative),
            "source_review": {"rating": self.source_review.rating},
        }


@dataclass(frozen=True)
class GroupItem:
    """Input unit for similarity grouping."""
    sentence: str
    aspect: str
    subject: str = ""


@dataclass
class Factor:
    """A cluster of near-identical sentences reduced to one representative."""
    sentence: str
    aspect: str
    subject: str = ""
    count: int = 1

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class AspectMatrixEntry:
    """Sentiment counts and representative sentences for one aspect."""
    aspect: str
    positive_count: int
    negative_count: int
    neutral_count: int
    positive_sentences: List[Factor] = field(default_factory=list)
    negative_sentences: List[Factor] = field(default_factory=list)

    @property
    def volume(self) -> int:
        return self.positive_count + self.negative_count

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class ProductAnalysis:
    """Sentence-level analysis of one product's reviews."""
    total_reviews: int = 0
    total_sentences: int = 0
    average_rating: float = 0.0
    sentiment_breakdown: Dict[str, int] = field(
        default_factory=lambda: {"positive": 0, "neutral": 0, "negative": 0}
    )
    rating_distribution: Dict[int, int] = field(
        default_factory=lambda: {5: 0, 4: 0, 3: 0, 2: 0, 1: 0}
    )
    aspect_matrix: List[AspectMatrixEntry] = field(default_factory=list)
    top_negative_sentences: List[Factor] = field(default_factory=list)
    top_positive_sentences: List[Factor] = field(default_factory=list)
    improvement_requests: List[Factor] = field(default_factory=list)
    all_analyzed_sentences: List[SentenceRecord] = field(default_factory=list)

    def to_dict(self, include_sentences: bool = True) -> Dict[str, Any]:
        data = asdict(self)
        # JSON object keys must be strings
        data["rating_distribution"] = {str(k): v for k, v in self.rating_distribution.items()}
        if not include_sentences:
            data.pop("all_analyzed_sentences")
        return data

    def overview(self) -> Dict[str, Any]:
        """Headline numbers shown next to each product."""
        return {
            "total_reviews": self.total_reviews,
            "total_sentences": self.total_sentences,
            "average_rating": self.average_rating,
            "sentiment_breakdown": dict(self.sentiment_breakdown),
        }


@dataclass
class ProductInfo:
    """Product metadata supplied by the scraping side."""
    name: str = ""
    price: float = 0
    url: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class ProductInput:
    """A product together with its reviews, ready to be analyzed."""
    info: ProductInfo
    reviews: List[Review] = field(default_factory=list)


@dataclass
class ProductAnalysisResult:
    """A product's metadata paired with its analysis."""
    product_info: ProductInfo
    analysis: ProductAnalysis


@dataclass
class CrossFactor:
    """A factor merged across products."""
    sentence: str
    aspect: str
    total_count: int = 0
    products: List[str] = field(default_factory=list)

    @property
    def product_count(self) -> int:
        return len(self.products)

    def add(self, product_name: str, count: int) -> None:
        self.total_count += count
        if product_name not in self.products:
            self.products.append(product_name)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class DifferentiationHint:
    """A suggestion derived from problems or wishes shared across products."""
    hint: str
    reason: str
    related_negative: str
    related_request: str
    aspect: str
    impact_score: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class ComparisonRow:
    """One product's row in the cross-product comparison table."""
    product_name: str
    price: float
    rating: float
    review_count: int
    aspects: Dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class PriceRange:
    min: float = 0
    max: float = 0


@dataclass
class CrossSummary:
    """Category-wide view merged from several products."""
    category: str
    price_range: PriceRange
    product_count: int = 0
    total_reviews: int = 0
    positive_factors: List[CrossFactor] = field(default_factory=list)
    negative_factors: List[CrossFactor] = field(default_factory=list)
    differentiation_hints: List[DifferentiationHint] = field(default_factory=list)
    improvement_requests: List[CrossFactor] = field(default_factory=list)
    comparison_table: List[ComparisonRow] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class KeywordHit:
    """A word matched by the whole-text scorer."""
    word: str
    score: int
    count: int = 1


@dataclass
class TextSentiment:
    """Whole-text sentiment score of one review."""
    score: int = 0
    label: str = "neutral"
    positive_words: List[KeywordHit] = field(default_factory=list)
    negative_words: List[KeywordHit] = field(default_factory=list)


@dataclass
class ScoredReview:
    review: Review
    sentiment: TextSentiment


@dataclass
class BatchSentimentSummary:
    """Whole-text sentiment summary over a batch of reviews."""
    total_count: int = 0
    sentiment_breakdown: Dict[str, int] = field(
        default_factory=lambda: {"positive": 0, "negative": 0, "neutral": 0}
    )
    sentiment_ratio: Dict[str, int] = field(
        default_factory=lambda: {"positive": 0, "negative": 0, "neutral": 0}
    )
    average_score: float = 0.0
    rating_distribution: Dict[int, int] = field(
        default_factory=lambda: {1: 0, 2: 0, 3: 0, 4: 0, 5: 0}
    )
    top_positive_keywords: List[Dict[str, Any]] = field(default_factory=list)
    top_negative_keywords: List[Dict[str, Any]] = field(default_factory=list)
    reviews: List[ScoredReview] = field(default_factory=list)

    def to_dict(self, include_reviews: bool = False) -> Dict[str, Any]:
        data = asdict(self)
        data["rating_distribution"] = {str(k): v for k, v in self.rating_distribution.items()}
        if not include_reviews:
            data.pop("reviews")
        return data
