"""FloraScan: plant species identification, tag canonicalization and image enrichment."""

__version__ = "0.1.0"
