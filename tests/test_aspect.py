"""Tests for aspect classification and subject extraction."""

from reviewhub.core.aspect import classify_aspect, extract_subject
from reviewhub.core.lexicon import Lexicon


def test_classify_battery_sentence():
    """Battery complaints belong to durability."""
    assert classify_aspect("バッテリーがすぐ切れる") == "耐久性"


def test_classify_no_keyword_is_other():
    assert classify_aspect("今日は晴れです") == "other"


def test_classify_is_case_insensitive():
    assert classify_aspect("bluetoothの設定が難しい") == "操作性"
    assert classify_aspect("BLUETOOTHが途切れがち") == "操作性"


def test_longer_keywords_outweigh_short_ones():
    """Scores are summed keyword lengths, not hit counts."""
    lexicon = Lexicon(aspects={"short": ["ab", "cd", "ef"], "long": ["abcdefg"]})
    assert classify_aspect("abcdefg", lexicon) == "long"


def test_tie_keeps_first_aspect():
    lexicon = Lexicon(aspects={"first": ["xx"], "second": ["yy"]})
    assert classify_aspect("xxyy", lexicon) == "first"


def test_sound_sentence_beats_incidental_quality_hit():
    """音質 also contains 質 (quality), but the sound keywords cover more characters."""
    assert classify_aspect("音質がとても良いです。") == "音質"


def test_subject_is_first_dictionary_keyword():
    assert extract_subject("バッテリーが持たない") == "バッテリー"


def test_subject_falls_back_to_phrase_before_particle():
    assert extract_subject("今日は晴れです") == "今日"


def test_subject_empty_without_keyword_or_particle():
    assert extract_subject("あいうえおかきく") == ""


def test_subject_ignores_single_character_keywords():
    lexicon = Lexicon(aspects={"音質": ["音"]})
    # no 2+ char keyword, so the particle fallback is used
    assert extract_subject("音楽が好きです", lexicon) == "音楽"
