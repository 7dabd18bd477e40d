"""Start the School Finder service with uvicorn.

Host and port come from the HOST and PORT environment variables (defaults
0.0.0.0 and 3000). Database settings are checked before the server starts so
a missing configuration exits with status 1.

Usage:
    python run.py
"""
import logging
import sys

import uvicorn

from school_finder.core.config import get_settings
from school_finder.core.errors import ConfigurationError
from school_finder.core.logging_config import setup_logging


def main() -> int:
    settings = get_settings()
    setup_logging(settings.log_level)
    try:
        settings.resolve_database_url()
    except ConfigurationError as exc:
        logging.getLogger("school_finder").error("%s", exc)
        return 1

    uvicorn.run(
        "school_finder.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
