import logging
import os

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
ENV_LOG_LEVEL = "HUE_LOG_LEVEL"


def setup_logging(verbose: bool = False) -> None:
    """Route log output to stderr; stdout is reserved for the tools' own output."""
    if verbose:
        level = logging.DEBUG
    else:
        level = logging.getLevelName(os.getenv(ENV_LOG_LEVEL, "WARNING").upper())
        if not isinstance(level, int):
            level = logging.WARNING

    logging.basicConfig(level=level, format=LOG_FORMAT)
