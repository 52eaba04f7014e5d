"""Resolve free-text property labels to the controlled tag vocabulary.

Resolution order for each raw tag, first match wins:

1. exact normalization rule on the lowercased, trimmed phrase
2. membership in the canonical vocabulary
3. first keyword heuristic whose keyword is a substring of the phrase
4. sanitized literal (``[a-z0-9-]`` only) for phrases longer than two characters

Anything else is dropped.
"""

import logging
import re
from collections.abc import Iterable

from florascan.tags.vocabulary import TagVocabulary

logger = logging.getLogger(__name__)

_DISALLOWED_CHARS = re.compile(r"[^a-z0-9-]")
_HYPHEN_RUNS = re.compile(r"-+")
_PROPERTY_MENTION = re.compile(r"\banti(?:-|[ \t]+)[a-z]+(?:-[a-z]+)*", re.IGNORECASE)

MIN_FALLBACK_LENGTH = 3


def sanitize_tag(text: str) -> str:
    """Reduce text to a lowercase hyphenated token, or "" if nothing survives."""
    token = _DISALLOWED_CHARS.sub("-", text.lower())
    return _HYPHEN_RUNS.sub("-", token).strip("-")


def extract_property_mentions(text: str | None) -> list[str]:
    """Find "anti-<word>" / "anti <word>" mentions in free text, in order of appearance."""
    if not text:
        return []
    return [match.group(0) for match in _PROPERTY_MENTION.finditer(text)]


class TagCanonicalizer:
    """Maps raw tag strings onto a TagVocabulary."""

    def __init__(self, vocabulary: TagVocabulary | None = None):
        self.vocabulary = vocabulary or TagVocabulary.default()

    def canonicalize_one(self, raw_tag: str) -> str | None:
        """Resolve a single raw tag; None when the tag is dropped."""
        clean = raw_tag.strip().lower()

        mapped = self.vocabulary.normalization_rules.get(clean)
        if mapped is not None:
            return mapped

        if clean in self.vocabulary:
            return clean

        for keyword, tag in self.vocabulary.keyword_heuristics:
            if keyword in clean:
                return tag

        if len(clean) >= MIN_FALLBACK_LENGTH:
            return sanitize_tag(clean) or None

        return None

    def canonicalize(self, raw_tags: Iterable[str]) -> set[str]:
        """Resolve every raw tag and collapse duplicates."""
        tags: set[str] = set()
        for raw_tag in raw_tags:
            tag = self.canonicalize_one(raw_tag)
            if tag is None:
                continue
            if tag not in self.vocabulary:
                logger.debug("Keeping non-canonical tag %r for input %r", tag, raw_tag)
            tags.add(tag)
        return tags

    def is_canonical(self, tag: str) -> bool:
        """Check whether a tag belongs to the controlled vocabulary."""
        return tag in self.vocabulary
