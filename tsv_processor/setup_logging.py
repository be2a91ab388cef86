import logging, sys

PACKAGE_LOGGER = "tsv_processor"

def setup_logging(level: str = "INFO"):
    """Configure the package logger. Safe to call again; only the level changes."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    if logger.handlers:
        return
    h = logging.StreamHandler(sys.stderr)
    fmt = logging.Formatter(
        "%(asctime)s %(levelname)s %(name)s :: %(message)s"
    )
    h.setFormatter(fmt)
    logger.addHandler(h)
