"""Controlled vocabulary of medicinal property tags.

The vocabulary is plain data: the canonical tag set, the phrase normalization
table and the ordered keyword heuristics. It is built once at process start,
either from the built-in tables or from a YAML file, and never mutated.
"""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any

import yaml

from florascan.tags import defaults

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TagVocabulary:
    """Immutable tag vocabulary consumed by the canonicalizer."""

    version: str
    categories: Mapping[str, tuple[str, ...]]
    normalization_rules: Mapping[str, str]
    keyword_heuristics: tuple[tuple[str, str], ...]
    preparation_methods: frozenset[str] = field(default_factory=frozenset)
    plant_parts: frozenset[str] = field(default_factory=frozenset)
    canonical_tags: frozenset[str] = field(init=False)

    def __post_init__(self) -> None:
        canonical = frozenset(tag for tags in self.categories.values() for tag in tags)
        object.__setattr__(self, "canonical_tags", canonical)

        for phrase, tag in self.normalization_rules.items():
            if tag not in canonical:
                raise ValueError(f"Normalization rule '{phrase}' targets unknown tag '{tag}'")
            # Canonical tags must map to themselves
            if phrase in canonical and phrase != tag:
                raise ValueError(f"Normalization rule remaps canonical tag '{phrase}' to '{tag}'")
        for keyword, tag in self.keyword_heuristics:
            if tag not in canonical:
                raise ValueError(f"Keyword '{keyword}' targets unknown tag '{tag}'")

    def __contains__(self, tag: object) -> bool:
        return tag in self.canonical_tags

    def __len__(self) -> int:
        return len(self.canonical_tags)

    def category_of(self, tag: str) -> str | None:
        """Return the first category listing the tag, or None for non-canonical tags."""
        for category, tags in self.categories.items():
            if tag in tags:
                return category
        return None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "TagVocabulary":
        """Build a vocabulary from plain data (as parsed from YAML).

        Rule phrases are lowercased and trimmed so lookups can use exact matching.
        Keyword heuristics accept either ``[keyword, tag]`` pairs or
        ``{keyword: ..., tag: ...}`` mappings and keep their order.
        """
        categories = {
            str(name): tuple(str(tag) for tag in tags)
            for name, tags in (data.get("categories") or {}).items()
        }
        if not categories:
            raise ValueError("Tag vocabulary must define at least one category")

        rules = {
            str(phrase).strip().lower(): str(tag)
            for phrase, tag in (data.get("normalization_rules") or {}).items()
        }

        return cls(
            version=str(data.get("version", "custom")),
            categories=MappingProxyType(categories),
            normalization_rules=MappingProxyType(rules),
            keyword_heuristics=_parse_heuristics(data.get("keyword_heuristics") or []),
            preparation_methods=frozenset(data.get("preparation_methods") or []),
            plant_parts=frozenset(data.get("plant_parts") or []),
        )

    @classmethod
    def from_yaml(cls, path: Path) -> "TagVocabulary":
        """Load a vocabulary from a YAML file."""
        data = yaml.safe_load(path.read_text()) or {}
        vocabulary = cls.from_mapping(data)
        logger.info(
            "Loaded tag vocabulary %s from %s (%d tags, %d rules)",
            vocabulary.version,
            path,
            len(vocabulary),
            len(vocabulary.normalization_rules),
        )
        return vocabulary

    @classmethod
    def default(cls) -> "TagVocabulary":
        """Build the built-in medicinal property vocabulary."""
        return cls.from_mapping(
            {
                "version": defaults.VOCABULARY_VERSION,
                "categories": defaults.CANONICAL_TAGS_BY_CATEGORY,
                "normalization_rules": defaults.NORMALIZATION_RULES,
                "keyword_heuristics": defaults.KEYWORD_HEURISTICS,
                "preparation_methods": defaults.PREPARATION_METHODS,
                "plant_parts": defaults.PLANT_PARTS,
            }
        )


def _parse_heuristics(entries: Iterable[Any]) -> tuple[tuple[str, str], ...]:
    pairs = []
    for entry in entries:
        if isinstance(entry, Mapping):
            keyword, tag = entry["keyword"], entry["tag"]
        else:
            keyword, tag = entry
        pairs.append((str(keyword).lower(), str(tag)))
    return tuple(pairs)


def load_vocabulary(path: Path | None = None) -> TagVocabulary:
    """Return the vocabulary from ``path`` if given, else the built-in one."""
    if path is None:
        return TagVocabulary.default()
    return TagVocabulary.from_yaml(path)
