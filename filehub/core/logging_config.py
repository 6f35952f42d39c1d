# filehub/core/logging_config.py

import logging
import sys


def setup_logging(level: str = "INFO"):
    """
    Configures the root logger for the application.
    Called once from the app lifespan in main.py.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - [%(levelname)s] - %(message)s",
        stream=sys.stdout,
    )
    # Silence noisy libraries
    logging.getLogger("multipart").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
