"""Aspect classification and subject extraction."""

import re
from typing import Optional

from .constants import AspectConstants
from .lexicon import Lexicon, get_lexicon

_SUBJECT_FALLBACK = re.compile(AspectConstants.SUBJECT_FALLBACK_PATTERN)


def classify_aspect(sentence: str, lexicon: Optional[Lexicon] = None) -> str:
    """
    Assign a sentence to the aspect whose keywords cover the most characters.

    Each keyword found in the sentence (case-insensitive) adds its length to
    the aspect's score, so long specific keywords outweigh short incidental
    ones. Ties keep the aspect listed first; no hit at all gives ``other``.
    """
    lexicon = lexicon or get_lexicon()
    lowered = sentence.lower()
    best_aspect = AspectConstants.OTHER_ASPECT
    best_score = 0

    for aspect, keywords in lexicon.aspects.items():
        score = sum(len(kw) for kw in keywords if kw.lower() in lowered)
        if score > best_score:
            best_score = score
            best_aspect = aspect

    return best_aspect


def extract_subject(sentence: str, lexicon: Optional[Lexicon] = None) -> str:
    """Best-effort "what is being talked about": first aspect keyword, else the phrase before a particle."""
    lexicon = lexicon or get_lexicon()
    for keywords in lexicon.aspects.values():
        for kw in keywords:
            if len(kw) >= AspectConstants.MIN_SUBJECT_KEYWORD_LENGTH and kw in sentence:
                return kw

    match = _SUBJECT_FALLBACK.match(sentence)
    return match.group(1) if match else ""
