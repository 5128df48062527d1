"""Near-duplicate sentence grouping.

Sentences are reduced to a normalized key and a set of dictionary keywords,
then matched against the clusters built so far in three stages:

1. containment: one normalized text is a substring of the other
2. keyword overlap gated bigram similarity
3. bigram-only similarity with a stricter bar

The best-scoring cluster across all stages wins if it reaches
``GroupingConstants.MIN_ACCEPT_SCORE``; otherwise the sentence starts a new
cluster.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Set

from .constants import GroupingConstants as GC
from .lexicon import Lexicon, get_lexicon
from .models import Factor, GroupItem

logger = logging.getLogger(__name__)

_STRIP_CHARS = re.compile(GC.STRIP_CHARS_PATTERN)
_VERB_ENDINGS = re.compile(GC.VERB_ENDINGS_PATTERN)
_CONJUNCTION_ENDINGS = re.compile(GC.CONJUNCTION_ENDINGS_PATTERN)
_LEADING_CONNECTIVES = re.compile(GC.LEADING_CONNECTIVES_PATTERN)


def normalize_sentence(sentence: str) -> str:
    """Strip punctuation, brackets, polite/past endings and a leading connective."""
    text = _STRIP_CHARS.sub("", sentence)
    text = _VERB_ENDINGS.sub("", text)
    text = _CONJUNCTION_ENDINGS.sub("", text)
    return _LEADING_CONNECTIVES.sub("", text)


def extract_keywords(sentence: str, lexicon: Optional[Lexicon] = None) -> List[str]:
    """Dictionary words (aspect keywords, then expressions) found in the sentence, deduplicated."""
    lexicon = lexicon or get_lexicon()
    candidates = [kw for keywords in lexicon.aspects.values() for kw in keywords]
    candidates += lexicon.positive_expressions
    candidates += lexicon.negative_expressions

    found = [kw for kw in candidates if len(kw) >= GC.MIN_KEYWORD_LENGTH and kw in sentence]
    return list(dict.fromkeys(found))


def keyword_overlap(keywords_a: Sequence[str], keywords_b: Sequence[str]) -> float:
    """Dice coefficient of two keyword lists; 0 if either is empty."""
    if not keywords_a or not keywords_b:
        return 0.0
    set_a = set(keywords_a)
    shared = sum(1 for kw in keywords_b if kw in set_a)
    return (2 * shared) / (len(keywords_a) + len(keywords_b))


def _bigrams(text: str) -> Set[str]:
    return {text[i:i + 2] for i in range(len(text) - 1)}


def bigram_similarity(a: str, b: str) -> float:
    """Dice coefficient over the sets of adjacent character pairs."""
    if not a or not b or len(a) < 2 or len(b) < 2:
        return 0.0
    bigrams_a = _bigrams(a)
    bigrams_b = _bigrams(b)
    shared = len(bigrams_a & bigrams_b)
    return (2 * shared) / (len(bigrams_a) + len(bigrams_b))


@dataclass
class _Cluster:
    sentence: str
    aspect: str
    subject: str
    normalized_key: str
    keywords: List[str] = field(default_factory=list)
    count: int = 1

    def to_factor(self) -> Factor:
        return Factor(sentence=self.sentence, aspect=self.aspect, subject=self.subject, count=self.count)


class SimilarityGrouper:
    """Clusters near-identical sentences into counted factors."""

    def __init__(self, lexicon: Optional[Lexicon] = None):
        self.lexicon = lexicon or get_lexicon()

    def _match_score(self, normalized: str, keywords: List[str], aspect: str, cluster: _Cluster) -> float:
        """Score of one candidate cluster; 0 when no stage accepts it."""
        key = cluster.normalized_key
        shorter, longer = (normalized, key) if len(normalized) < len(key) else (key, normalized)
        same_aspect = aspect == cluster.aspect
        bonus = GC.ASPECT_BONUS if aspect and same_aspect else 0.0

        if len(shorter) >= GC.CONTAINMENT_MIN_LENGTH and shorter in longer:
            return GC.CONTAINMENT_SCORE + bonus

        overlap = keyword_overlap(keywords, cluster.keywords)
        if overlap >= GC.KEYWORD_OVERLAP_THRESHOLD:
            similarity = bigram_similarity(normalized, key)
            if similarity >= GC.KEYWORD_BIGRAM_THRESHOLD:
                return overlap * GC.KEYWORD_WEIGHT + similarity * GC.KEYWORD_BIGRAM_WEIGHT + bonus

        similarity = bigram_similarity(normalized, key)
        threshold = GC.BIGRAM_SAME_ASPECT_THRESHOLD if same_aspect else GC.BIGRAM_CROSS_ASPECT_THRESHOLD
        if similarity >= threshold:
            return similarity * GC.BIGRAM_WEIGHT + bonus
        return 0.0

    def group(self, items: Iterable[GroupItem]) -> List[Factor]:
        """
        Group items into factors sorted by count (descending, stable).

        Each item joins the highest-scoring existing cluster (first one wins
        ties) or seeds a new one. A joining sentence that is shorter than the
        cluster's representative and longer than 10 characters becomes the
        new representative.
        """
        clusters: List[_Cluster] = []
        total = 0

        for item in items:
            total += 1
            normalized = normalize_sentence(item.sentence)
            keywords = extract_keywords(item.sentence, self.lexicon)

            best_cluster = None
            best_score = 0.0
            for cluster in clusters:
                score = self._match_score(normalized, keywords, item.aspect, cluster)
                if score > best_score:
                    best_score = score
                    best_cluster = cluster

            if best_cluster is not None and best_score >= GC.MIN_ACCEPT_SCORE:
                best_cluster.count += 1
                if GC.MIN_REPRESENTATIVE_LENGTH < len(item.sentence) < len(best_cluster.sentence):
                    best_cluster.sentence = item.sentence
            else:
                clusters.append(_Cluster(
                    sentence=item.sentence,
                    aspect=item.aspect,
                    subject=item.subject or "",
                    normalized_key=normalized,
                    keywords=keywords,
                ))

        logger.debug(f"Grouped {total} sentences into {len(clusters)} factors")
        factors = [c.to_factor() for c in clusters]
        factors.sort(key=lambda f: -f.count)
        return factors


def group_similar_sentences(items: Iterable[GroupItem], lexicon: Optional[Lexicon] = None) -> List[Factor]:
    """Convenience wrapper around ``SimilarityGrouper.group``."""
    return SimilarityGrouper(lexicon).group(items)
