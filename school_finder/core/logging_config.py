import logging


"""Logging setup for the service.

setup_logging attaches a single console handler to the root logger. It is a
no-op when handlers already exist (tests, repeated create_app calls).
- logging
"""


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger once. - setup_logging"""
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root.addHandler(handler)
