"""Improvement-request ("I wish it had...") detection."""

from typing import Optional

from .lexicon import Lexicon, get_lexicon


def is_improvement_request(sentence: str, lexicon: Optional[Lexicon] = None) -> bool:
    """True if any request pattern matches anywhere in the sentence."""
    lexicon = lexicon or get_lexicon()
    return any(pattern.search(sentence) for pattern in lexicon.compiled_request_patterns)
