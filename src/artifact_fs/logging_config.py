# Licensed under the Apache License, Version 2.0
"""
Logging setup for the artifact-fs command line tool.

Library modules only create loggers; handlers are installed here, once, by
the CLI. Cleanup failures that are swallowed elsewhere show up at DEBUG or
WARNING level.
"""
import logging
import os

LOG_LEVEL_ENV = "AFS_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

logger = logging.getLogger(__name__)


def _level_from_env() -> int:
    level_name = os.getenv(LOG_LEVEL_ENV, "INFO").upper()
    level = getattr(logging, level_name, None)
    # Guard against names like BASIC_FORMAT that are not levels.
    return level if isinstance(level, int) else logging.INFO


def setup_logging() -> None:
    logging.basicConfig(level=_level_from_env(), format=LOG_FORMAT)


def enable_verbose() -> None:
    """Switch the root logger to DEBUG (the CLI's --verbose flag)."""
    logging.getLogger().setLevel(logging.DEBUG)
    logger.debug("Verbose logging enabled")
