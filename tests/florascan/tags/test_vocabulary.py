"""Tests for the tag vocabulary."""

import pytest
import yaml

from florascan.tags import defaults
from florascan.tags.vocabulary import TagVocabulary, load_vocabulary


class TestDefaultVocabulary:
    """Test the built-in vocabulary."""

    def test_contains_every_category_tag(self):
        """Should expose the union of all category lists as canonical tags."""
        vocabulary = TagVocabulary.default()
        expected = {tag for tags in defaults.CANONICAL_TAGS_BY_CATEGORY.values() for tag in tags}

        assert vocabulary.canonical_tags == expected
        assert len(vocabulary) == len(expected)
        assert vocabulary.version == defaults.VOCABULARY_VERSION

    def test_rules_and_keywords_target_canonical_tags(self):
        """Should only map onto tags that exist."""
        vocabulary = TagVocabulary.default()

        assert all(tag in vocabulary for tag in vocabulary.normalization_rules.values())
        assert all(tag in vocabulary for _, tag in vocabulary.keyword_heuristics)

    def test_keyword_order_preserved(self):
        """Should keep heuristics in declaration order."""
        vocabulary = TagVocabulary.default()
        assert list(vocabulary.keyword_heuristics) == list(defaults.KEYWORD_HEURISTICS)

    def test_category_of(self):
        """Should report the category a tag belongs to."""
        vocabulary = TagVocabulary.default()

        assert vocabulary.category_of("antiviral") == "immune"
        assert vocabulary.category_of("not-a-tag") is None

    def test_is_immutable(self):
        """Should reject attribute assignment and table mutation."""
        vocabulary = TagVocabulary.default()

        with pytest.raises(AttributeError):
            vocabulary.version = "changed"  # type: ignore[misc]
        with pytest.raises(TypeError):
            vocabulary.normalization_rules["new"] = "antiviral"  # type: ignore[index]


class TestFromMapping:
    """Test building vocabularies from plain data."""

    def test_rule_phrases_are_normalized(self):
        """Should lowercase and trim rule phrases."""
        vocabulary = TagVocabulary.from_mapping(
            {
                "categories": {"misc": ["calming"]},
                "normalization_rules": {"  Relaxing ": "calming"},
            }
        )
        assert dict(vocabulary.normalization_rules) == {"relaxing": "calming"}
        assert vocabulary.version == "custom"

    def test_heuristics_accept_mappings(self):
        """Should accept {keyword, tag} entries as well as pairs."""
        vocabulary = TagVocabulary.from_mapping(
            {
                "categories": {"misc": ["calming", "digestive"]},
                "keyword_heuristics": [
                    {"keyword": "Relax", "tag": "calming"},
                    ["digest", "digestive"],
                ],
            }
        )
        assert vocabulary.keyword_heuristics == (("relax", "calming"), ("digest", "digestive"))

    def test_requires_categories(self):
        """Should refuse a vocabulary with no tags."""
        with pytest.raises(ValueError, match="at least one category"):
            TagVocabulary.from_mapping({"normalization_rules": {}})

    def test_rejects_rule_with_unknown_target(self):
        """Should refuse rules that point outside the vocabulary."""
        with pytest.raises(ValueError, match="unknown tag"):
            TagVocabulary.from_mapping(
                {"categories": {"misc": ["calming"]}, "normalization_rules": {"x": "missing"}}
            )

    def test_rejects_keyword_with_unknown_target(self):
        """Should refuse heuristics that point outside the vocabulary."""
        with pytest.raises(ValueError, match="unknown tag"):
            TagVocabulary.from_mapping(
                {"categories": {"misc": ["calming"]}, "keyword_heuristics": [["x", "missing"]]}
            )


class TestLoadVocabulary:
    """Test loading the vocabulary from disk."""

    def test_defaults_without_path(self):
        """Should return the built-in vocabulary when no file is configured."""
        assert load_vocabulary(None).version == defaults.VOCABULARY_VERSION

    def test_from_yaml(self, tmp_path):
        """Should load a YAML override file."""
        path = tmp_path / "vocabulary.yaml"
        path.write_text(
            yaml.dump(
                {
                    "version": "2030.1",
                    "categories": {"misc": ["calming"]},
                    "normalization_rules": {"relaxing": "calming"},
                    "keyword_heuristics": [["relax", "calming"]],
                }
            )
        )

        vocabulary = load_vocabulary(path)

        assert vocabulary.version == "2030.1"
        assert vocabulary.canonical_tags == frozenset({"calming"})
        assert vocabulary.keyword_heuristics == (("relax", "calming"),)


class TestRuleConsistency:
    """Test that rules cannot break canonical idempotence."""

    def test_rejects_rule_remapping_a_canonical_tag(self):
        """Should refuse a rule whose phrase is itself a different canonical tag."""
        with pytest.raises(ValueError, match="remaps canonical tag"):
            TagVocabulary.from_mapping(
                {
                    "categories": {"nervous": ["sedative", "sleep-aid"]},
                    "normalization_rules": {"sedative": "sleep-aid"},
                }
            )

    def test_allows_identity_rule(self):
        """Should accept a rule mapping a canonical tag to itself."""
        vocabulary = TagVocabulary.from_mapping(
            {
                "categories": {"immune": ["antiviral"]},
                "normalization_rules": {"antiviral": "antiviral", "anti-viral": "antiviral"},
            }
        )
        assert vocabulary.normalization_rules["anti-viral"] == "antiviral"
