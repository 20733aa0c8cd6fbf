import logging
import os
import shlex

logger = logging.getLogger(__name__)

DEFAULT_GOFMT_COMMAND = "gofmt"
DEFAULT_WORKERS = 1
DEFAULT_LOG_LEVEL = "WARNING"


def get_gofmt_command() -> list[str]:
    command = shlex.split(os.getenv("ARGNEWLINE_GOFMT", DEFAULT_GOFMT_COMMAND))
    return command or [DEFAULT_GOFMT_COMMAND]


def get_worker_count() -> int:
    raw = os.getenv("ARGNEWLINE_WORKERS")
    if not raw:
        return DEFAULT_WORKERS
    try:
        workers = int(raw)
    except ValueError:
        logger.warning("Ignoring non-integer ARGNEWLINE_WORKERS=%r", raw)
        return DEFAULT_WORKERS
    if workers < 1:
        logger.warning("Ignoring ARGNEWLINE_WORKERS=%d, must be at least 1", workers)
        return DEFAULT_WORKERS
    return workers


def get_log_level() -> int:
    name = os.getenv("ARGNEWLINE_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        logger.warning("Unknown ARGNEWLINE_LOG_LEVEL=%r, using %s", name, DEFAULT_LOG_LEVEL)
        return logging.WARNING
    return level
