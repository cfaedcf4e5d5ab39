import logging
import os


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    formatter = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    # WARNING for library modules, INFO for the CLI entry point.
    # GROUPCALC_LOG_LEVEL overrides both.
    default_level = logging.WARNING
    if name.endswith('.cli'):
        default_level = logging.INFO

    level_name = os.getenv('GROUPCALC_LOG_LEVEL', logging.getLevelName(default_level))
    level = getattr(logging, level_name.upper(), None)
    if not isinstance(level, int):
        level = default_level

    logger.setLevel(level)
    return logger


def set_level(level: int) -> None:
    """Apply ``level`` to every groupcalc logger created so far."""
    for name, logger in logging.root.manager.loggerDict.items():
        if name.startswith("groupcalc") and isinstance(logger, logging.Logger):
            logger.setLevel(level)
