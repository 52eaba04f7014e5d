import os
from pathlib import Path


class PathResolver:
    """Central authority for all file path resolution in FloraScan.

    Uses environment variables for configuration with sensible defaults.
    """

    def __init__(self) -> None:
        """Initialize PathResolver with environment-based configuration."""
        self.app_dir = Path(os.getenv("FLORASCAN_APP", "/opt/florascan"))
        self.data_dir = Path(os.getenv("FLORASCAN_DATA", "/var/lib/florascan"))

    def get_florascan_config_path(self) -> Path:
        """Get the path to the main configuration file.

        Checks FLORASCAN_CONFIG environment variable first, then falls back to default.
        """
        config_path = os.getenv("FLORASCAN_CONFIG")
        if config_path:
            return Path(config_path)

        return self.data_dir / "config" / "florascan.yaml"

    def get_data_dir(self) -> Path:
        """Get the data directory where all runtime data is stored."""
        return self.data_dir

    def get_database_dir(self) -> Path:
        """Get the directory for database files."""
        return self.data_dir / "database"

    def get_database_path(self) -> Path:
        """Get the path to the main SQLite database."""
        return self.data_dir / "database" / "florascan.db"

    def get_vocabulary_path(self, configured: str | None = None) -> Path | None:
        """Get the tag vocabulary override file, if one is in use.

        Relative paths are resolved against the config directory.
        """
        if not configured:
            return None
        path = Path(configured)
        if not path.is_absolute():
            path = self.get_florascan_config_path().parent / path
        return path
