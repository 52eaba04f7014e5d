"""Species identification provider integration."""

from florascan.identification.client import PlantIdClient
from florascan.identification.models import (
    CapturedMetadata,
    IdentificationCandidate,
    IdentificationResult,
    ResolvedIdentity,
)

__all__ = [
    "CapturedMetadata",
    "IdentificationCandidate",
    "IdentificationResult",
    "PlantIdClient",
    "ResolvedIdentity",
]
