"""FloraScan configuration package.

This package provides centralized configuration management with:
- Pydantic models with validation
- YAML parsing and serialization
- Defaults written on first load
"""

from .manager import ConfigManager
from .models import FloraScanConfig

__all__ = [
    "ConfigManager",
    "FloraScanConfig",
]
