"""Constants and tuning values for ReviewHub."""

# Sentence Segmentation Constants
class SegmentConstants:
    """Constants for splitting review text into sentences."""

    MIN_SENTENCE_LENGTH = 6  # fragments of 5 chars or fewer are dropped
    LONG_SENTENCE_LENGTH = 30  # sentences longer than this get a conjunction pass
    TERMINAL_PUNCTUATION = "。！？!?"
    CONJUNCTION_MARKERS = (
        "ですが、", "ますが、", "だが、", "だけど、",
        "けど、", "けれど、", "ものの、", "のに、",
    )

# Aspect Constants
class AspectConstants:
    """Constants for aspect classification."""

    OTHER_ASPECT = "other"
    MIN_SUBJECT_KEYWORD_LENGTH = 2
    SUBJECT_FALLBACK_PATTERN = r"^(.{2,8}?)[がはもをの]"

# Sentiment Constants
class SentimentConstants:
    """Constants for the sentence-level sentiment judge."""

    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"

    EXPRESSION_WEIGHT = 2  # every matched expression is worth the same
    NEGATION_WINDOW_BEFORE = 3  # chars inspected before a positive match
    NEGATION_WINDOW_AFTER = 5  # chars inspected after a positive match
    NEGATED_SUFFIX = "(negated)"

# Grouping Constants
class GroupingConstants:
    """Thresholds and weights for near-duplicate sentence grouping."""

    MIN_KEYWORD_LENGTH = 2

    # Stage 1: containment
    CONTAINMENT_MIN_LENGTH = 5
    CONTAINMENT_SCORE = 0.9

    # Stage 2: keyword overlap gated bigram similarity
    KEYWORD_OVERLAP_THRESHOLD = 0.5
    KEYWORD_BIGRAM_THRESHOLD = 0.35
    KEYWORD_WEIGHT = 0.4
    KEYWORD_BIGRAM_WEIGHT = 0.4

    # Stage 3: bigram-only fallback
    BIGRAM_SAME_ASPECT_THRESHOLD = 0.5
    BIGRAM_CROSS_ASPECT_THRESHOLD = 0.6
    BIGRAM_WEIGHT = 0.7

    ASPECT_BONUS = 0.15
    MIN_ACCEPT_SCORE = 0.4
    MIN_REPRESENTATIVE_LENGTH = 10  # representative must be strictly longer

    STRIP_CHARS_PATTERN = r"[。！？!?\s、,・「」『』（）()【】\[\]]"
    VERB_ENDINGS_PATTERN = r"です|ます|ました|でした|だった|ている|ていた|ております|しています|されています"
    CONJUNCTION_ENDINGS_PATTERN = r"ですが|ますが|けど|けれど|ものの"
    LEADING_CONNECTIVES_PATTERN = r"^(また|そして|しかし|ただ|でも|ですので|なので|それに|さらに)"

# Ranking Constants
class RankingConstants:
    """Caps for per-product rankings."""

    TOP_SENTENCES = 10  # top positive / negative factors per product
    ASPECT_SENTENCES = 5  # representative sentences per aspect and polarity
    RATING_MIN = 1
    RATING_MAX = 5

# Cross-Product Aggregation Constants
class AggregationConstants:
    """Constants for merging several products' analyses."""

    UNKNOWN_CATEGORY = "unknown"
    MAX_CATEGORY_TOKENS = 3
    MIN_TOKEN_LENGTH = 2
    MIN_SHARED_PRODUCTS = 2
    SHARED_PRODUCT_RATIO = 0.5
    TOKEN_PATTERNS = (
        r"[ァ-ヶー]+",  # katakana loanwords
        r"[a-zA-Z0-9]+",
        r"[一-龥]+",  # kanji
    )

    MERGE_KEY_LENGTH = 20
    MERGE_STRIP_PATTERN = r"[。！？!?\s、,]"
    MERGE_ENDINGS_PATTERN = r"です|ます|ました|でした|だった"

    MAX_FACTORS = 8
    MAX_REQUESTS = 8
    MAX_HINTS = 5
    FACTOR_PRODUCT_WEIGHT = 10
    REQUEST_HINT_PRODUCT_WEIGHT = 5
    MIN_HINT_PRODUCTS = 2
    DOMINANCE_RATIO = 1.5  # comparison table: one side must exceed the other by this

    PRODUCT_NAME_TEMPLATE = "商品{index}"
    NEGATIVE_HINT_TEMPLATE = "{aspect}の改善が差別化ポイント"
    NEGATIVE_REASON_TEMPLATE = "{products}商品中{products}商品で共通の不満。ここを解決すれば優位に立てる"
    REQUEST_HINT_TEMPLATE = "「{sentence}」の声に応える"
    REQUEST_REASON_TEMPLATE = "{products}商品で共通の要望（計{total}件）"

# Whole-Text Scoring Constants
class ScoringConstants:
    """Constants for the whole-text word-frequency scorer."""

    POSITIVE_THRESHOLD = 2
    NEGATIVE_THRESHOLD = -2
    NEGATION_WINDOW_AFTER = 10
    NEGATION_WINDOW_BEFORE = 5
    TOP_KEYWORDS = 15

# File and Path Constants
class FileConstants:
    """Constants for file operations."""

    DEFAULT_LEXICON_FILE = "config/lexicon.yaml"
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
