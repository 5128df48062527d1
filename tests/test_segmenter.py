"""Tests for sentence segmentation."""

import pytest
from reviewhub.core.segmenter import split_into_sentences


class TestSplitIntoSentences:
    """Test punctuation, newline and conjunction splitting."""

    def test_splits_on_terminal_punctuation(self):
        """Punctuation stays attached to the sentence before it."""
        result = split_into_sentences("音質は最高です。バッテリーも長持ちします！")
        assert result == ["音質は最高です。", "バッテリーも長持ちします！"]

    def test_splits_on_newlines(self):
        result = split_into_sentences("一行目のテキスト\n\n二行目のテキスト")
        assert result == ["一行目のテキスト", "二行目のテキスト"]

    def test_drops_short_fragments(self):
        """Fragments of five characters or fewer are discarded."""
        assert split_into_sentences("良い。最高の音質でした。") == ["最高の音質でした。"]
        assert split_into_sentences("あいうえお") == []
        assert split_into_sentences("あいうえおか") == ["あいうえおか"]

    def test_trims_whitespace(self):
        assert split_into_sentences("  音質がとても良い  。") == ["音質がとても良い。"]

    def test_long_sentence_split_on_conjunction(self):
        """A long sentence mixing praise and complaint is split after ですが、"""
        text = "音質はとても良くて満足しているのですが、バッテリーがすぐに切れてしまうのが残念。"
        assert split_into_sentences(text) == [
            "音質はとても良くて満足しているのですが、",
            "バッテリーがすぐに切れてしまうのが残念。",
        ]

    def test_short_sentence_not_split_on_conjunction(self):
        assert split_into_sentences("安いですが、音が良い。") == ["安いですが、音が良い。"]

    def test_every_fragment_meets_length_floor(self):
        text = "最高！良い。\nとても満足しています。でも、ケースが少し大きいのが気になりますけど、音は素晴らしいです。"
        result = split_into_sentences(text)
        assert result
        assert all(len(s.strip()) >= 6 for s in result)

    @pytest.mark.parametrize("value", [None, "", 123, ["text"], {"text": "x"}])
    def test_non_string_input_returns_empty(self, value):
        assert split_into_sentences(value) == []

    def test_restartable(self):
        text = "音質は最高です。バッテリーも長持ちします！"
        assert split_into_sentences(text) == split_into_sentences(text)
