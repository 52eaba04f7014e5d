"""Medicinal property tags: the controlled vocabulary and its canonicalizer."""

from florascan.tags.canonicalizer import TagCanonicalizer, extract_property_mentions
from florascan.tags.vocabulary import TagVocabulary, load_vocabulary

__all__ = [
    "TagCanonicalizer",
    "TagVocabulary",
    "extract_property_mentions",
    "load_vocabulary",
]
