"""
Logging configuration for the reporting service.

``setup_logging`` attaches a console handler to the root logger and
sets its level. It is called once from ``create_app``; repeated calls
(e.g. one app per test) leave existing handlers in place.
"""

import logging


def setup_logging(level: str = "INFO") -> None:
    logger = logging.getLogger()
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logger.setLevel(numeric_level)

    if logger.handlers:
        return

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)
