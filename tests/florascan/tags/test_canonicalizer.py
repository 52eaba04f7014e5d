"""Tests for tag canonicalization."""

import pytest

from florascan.tags.canonicalizer import (
    TagCanonicalizer,
    extract_property_mentions,
    sanitize_tag,
)


class TestSanitizeTag:
    """Test reduction of free text to a hyphenated token."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("Some Weird_Tag!!", "some-weird-tag"),
            ("  leading and trailing  ", "leading-and-trailing"),
            ("multi---hyphen", "multi-hyphen"),
            ("Vitamin C 500mg", "vitamin-c-500mg"),
            ("!!!", ""),
        ],
    )
    def test_sanitize(self, text, expected):
        """Should keep only [a-z0-9-] without leading, trailing or double hyphens."""
        assert sanitize_tag(text) == expected


class TestExtractPropertyMentions:
    """Test scanning descriptions for anti-<property> mentions."""

    def test_hyphen_and_space_forms(self):
        """Should find both "anti-x" and "anti x" mentions in order."""
        text = "Known for anti-inflammatory effects and anti viral activity."
        assert extract_property_mentions(text) == ["anti-inflammatory", "anti viral"]

    def test_ignores_words_that_merely_start_with_anti(self):
        """Should not treat words like "antique" or "antioxidant" as mentions."""
        assert extract_property_mentions("An antique antioxidant remedy") == []

    def test_case_insensitive(self):
        """Should match regardless of case and keep the original text."""
        assert extract_property_mentions("Strongly Anti-Fungal") == ["Anti-Fungal"]

    def test_empty_text(self):
        """Should return nothing for missing descriptions."""
        assert extract_property_mentions(None) == []
        assert extract_property_mentions("") == []


class TestTagCanonicalizer:
    """Test the three-tier resolution with sanitized fallback."""

    def test_normalization_rule(self, canonicalizer):
        """Should map a known phrase through the normalization table."""
        assert canonicalizer.canonicalize(["Anti Inflammatory"]) == {"anti-inflammatory"}

    def test_membership(self, canonicalizer):
        """Should keep a tag that is already canonical."""
        assert canonicalizer.canonicalize(["expectorant"]) == {"expectorant"}

    def test_keyword_heuristic(self, canonicalizer):
        """Should fall back to the first matching keyword."""
        assert canonicalizer.canonicalize(["supports healthy digestion daily"]) == {
            "digestive-aid"
        }

    def test_keyword_order_is_tie_break(self, canonicalizer):
        """Should use the earliest keyword when several match."""
        # "immune" is listed before "stress"
        assert canonicalizer.canonicalize_one("stress and immune tonic") == "immune-support"

    def test_rule_wins_over_heuristic(self, canonicalizer):
        """Should prefer an exact rule even when a keyword would match another tag."""
        # "stress" keyword would give stress-relief
        assert canonicalizer.canonicalize(["Oxidative Stress"]) == {"antioxidant"}

    def test_fallback_sanitization(self, canonicalizer):
        """Should produce a single clean token for unmatched input."""
        assert canonicalizer.canonicalize(["Some Weird_Tag!!"]) == {"some-weird-tag"}

    @pytest.mark.parametrize("raw", ["ab", " x ", "", "!!"])
    def test_short_inputs_dropped(self, canonicalizer, raw):
        """Should drop inputs of two characters or fewer after cleaning."""
        assert canonicalizer.canonicalize([raw]) == set()

    def test_punctuation_only_dropped(self, canonicalizer):
        """Should drop input that sanitizes to nothing."""
        assert canonicalizer.canonicalize_one("!?!?") is None

    def test_idempotent_on_canonical_tags(self, canonicalizer):
        """Should return every canonical tag unchanged."""
        vocabulary = canonicalizer.vocabulary
        for tag in vocabulary.canonical_tags:
            assert canonicalizer.canonicalize_one(tag) == tag

    def test_repeated_runs_agree(self, canonicalizer):
        """Should produce the same set for the same input every time."""
        raw = ["Anti Inflammatory", "calming", "Some Weird_Tag!!", "immunity"]
        first = canonicalizer.canonicalize(raw)
        assert canonicalizer.canonicalize(raw) == first
        assert canonicalizer.canonicalize(first) == first

    def test_duplicates_collapse(self, canonicalizer):
        """Should collapse inputs that map to the same tag."""
        result = canonicalizer.canonicalize(["immunity", "Immune Booster", "immune-support"])
        assert result == {"immune-support"}

    def test_is_canonical(self, canonicalizer):
        """Should report vocabulary membership."""
        assert canonicalizer.is_canonical("antiviral")
        assert not canonicalizer.is_canonical("some-weird-tag")


class TestCustomVocabulary:
    """Test canonicalizing against an injected vocabulary."""

    def test_uses_injected_rules(self, minimal_vocabulary):
        """Should resolve through the substituted tables only."""
        canonicalizer = TagCanonicalizer(minimal_vocabulary)

        assert canonicalizer.canonicalize(["Relaxing"]) == {"calming"}
        assert canonicalizer.canonicalize(["immune tonic"]) == {"immune-support"}
        # Built-in rule for "analgesic" is absent here
        assert canonicalizer.canonicalize(["analgesic"]) == {"analgesic"}

    def test_rule_precedence_with_injected_vocabulary(self, minimal_vocabulary):
        """Should apply the rule before the "stomach" keyword."""
        canonicalizer = TagCanonicalizer(minimal_vocabulary)
        assert canonicalizer.canonicalize(["Stomach Soother"]) == {"digestive"}
