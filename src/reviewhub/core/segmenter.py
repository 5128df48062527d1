"""Sentence segmentation for informal review text."""

import re
from typing import List

from .constants import SegmentConstants

_LINE_BREAKS = re.compile(r"\n+")
_TERMINATORS = re.compile(f"([{SegmentConstants.TERMINAL_PUNCTUATION}]+)")
_TERMINATOR_ONLY = re.compile(f"^[{SegmentConstants.TERMINAL_PUNCTUATION}]+$")
_CONJUNCTIONS = re.compile("(" + "|".join(SegmentConstants.CONJUNCTION_MARKERS) + ")")


def _long_enough(fragment: str) -> bool:
    return len(fragment.strip()) >= SegmentConstants.MIN_SENTENCE_LENGTH


def _split_line(line: str) -> List[str]:
    """Split one line on terminal punctuation, keeping the punctuation attached."""
    sentences = []
    current = ""
    for raw in _TERMINATORS.split(line):
        part = raw.strip()
        if not part:
            continue
        if _TERMINATOR_ONLY.match(part):
            current += part
            if _long_enough(current):
                sentences.append(current.strip())
            current = ""
        else:
            # A pending fragment without punctuation ends here
            if _long_enough(current):
                sentences.append(current.strip())
            current = part
    if _long_enough(current):
        sentences.append(current.strip())
    return sentences


def _split_on_conjunctions(sentence: str) -> List[str]:
    """Break a long sentence after contrastive conjunctions such as ですが、"""
    pieces = []
    buf = ""
    for part in _CONJUNCTIONS.split(sentence):
        buf += part
        if part in SegmentConstants.CONJUNCTION_MARKERS:
            if _long_enough(buf):
                pieces.append(buf.strip())
            buf = ""
    if _long_enough(buf):
        pieces.append(buf.strip())
    return pieces


def split_into_sentences(text) -> List[str]:
    """
    Split review text into trimmed sentences of at least six characters.

    Lines are split on terminal punctuation first. Sentences longer than
    ``SegmentConstants.LONG_SENTENCE_LENGTH`` are split again after
    contrastive conjunctions so that a positive and a negative clause end
    up in separate sentences. Non-string input yields an empty list.
    """
    if not text or not isinstance(text, str):
        return []

    sentences = []
    for line in _LINE_BREAKS.split(text):
        sentences.extend(_split_line(line))

    refined = []
    for sentence in sentences:
        if len(sentence) > SegmentConstants.LONG_SENTENCE_LENGTH:
            refined.extend(_split_on_conjunctions(sentence))
        else:
            refined.append(sentence)
    return refined
