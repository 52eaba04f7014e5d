"""Configuration loading for the web application."""

from florascan.config import ConfigManager, FloraScanConfig
from florascan.system.path_resolver import PathResolver


def get_config(path_resolver: PathResolver | None = None) -> FloraScanConfig:
    """Load FloraScan configuration.

    Args:
        path_resolver: Optional PathResolver instance to use. If not provided,
                      creates a new PathResolver instance.

    Returns:
        FloraScanConfig: The loaded and validated configuration.
    """
    if path_resolver is None:
        path_resolver = PathResolver()
    parser = ConfigManager(path_resolver)
    return parser.load()
