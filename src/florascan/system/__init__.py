"""System domain package.

This package contains process-level components:
- PathResolver: Path resolution and management
- StructlogConfigurator: Structured logging configuration
"""

from florascan.system import structlog_configurator
from florascan.system.path_resolver import PathResolver

__all__ = [
    "PathResolver",
    "structlog_configurator",
]
