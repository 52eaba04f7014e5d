"""FloraScan web application entry point."""

import logging

from florascan.config import ConfigManager
from florascan.system.structlog_configurator import configure_structlog
from florascan.web.core.factory import create_app

# Configure logging before anything else imports and creates loggers
config_manager = ConfigManager()
config = config_manager.load()
configure_structlog(config)

# Our middleware logs requests, so uvicorn's access log would duplicate them
uvicorn_access_logger = logging.getLogger("uvicorn.access")
uvicorn_access_logger.disabled = True

app = create_app()
