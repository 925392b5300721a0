"""Logging setup for CLI"""

import logging


def setup_logging(debug: bool, log_level: str = "info"):
    """
    Configure the root logger for CLI runs

    Args:
        debug: Whether debug mode is enabled
        log_level: Level name used when debug is off
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if debug else getattr(logging, log_level.upper(), logging.INFO))

    # Clear existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if debug:
        # httpcore traces every connection step at DEBUG
        logging.getLogger("httpcore").setLevel(logging.INFO)
        logging.getLogger(__name__).debug("Debug logging enabled")
