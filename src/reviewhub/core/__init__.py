"""Core analysis engine for ReviewHub."""

from .models import *
from .config import settings
from .lexicon import Lexicon, DEFAULT_LEXICON, get_lexicon, load_lexicon, dump_lexicon
from .segmenter import split_into_sentences
from .aspect import classify_aspect, extract_subject
from .sentiment import judge_sentiment
from .request_detector import is_improvement_request
from .grouping import SimilarityGrouper, group_similar_sentences
from .analyzer import ReviewAnalyzer, analyze_all_reviews
from .cross import generate_cross_summary
from .scoring import analyze_sentiment, analyze_reviews

__all__ = [
    "settings",
    "Lexicon",
    "DEFAULT_LEXICON",
    "get_lexicon",
    "load_lexicon",
    "dump_lexicon",
    "split_into_sentences",
    "classify_aspect",
    "extract_subject",
    "judge_sentiment",
    "is_improvement_request",
    "SimilarityGrouper",
    "group_similar_sentences",
    "ReviewAnalyzer",
    "analyze_all_reviews",
    "generate_cross_summary",
    "analyze_sentiment",
    "analyze_reviews",
    "Review",
    "SentenceRecord",
    "Factor",
    "ProductAnalysis",
    "ProductInfo",
    "CrossSummary",
]
