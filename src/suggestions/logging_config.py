import sys
import os
from loguru import logger

# Flag to track if logging has been configured
_logging_configured = False

DEFAULT_LEVEL = "WARNING"


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").lower() in ("1", "true", "yes")


def setup_logging(level=None, suppress_console=None, log_file=None, force=False):
    """
    Configures the global logger.

    stdout is reserved for suggestions, so every sink writes to stderr or a file.
    Console logging defaults to WARNING; file logging is opt-in via
    SUGGESTIONS_LOG_FILE or log_file.

    Args:
        level: Logging level. If None, check SUGGESTIONS_LOG_LEVEL (default: WARNING).
        suppress_console: If True, suppress console logging. If None, check SUGGESTIONS_QUIET env var.
        log_file: Path of a rotating log file. If None, check SUGGESTIONS_LOG_FILE env var.
        force: Reconfigure even if logging was already set up (e.g. for --verbose).
    """
    global _logging_configured

    # Only configure once unless asked to, to avoid duplicate handlers
    if _logging_configured and not force:
        return
    _logging_configured = True

    logger.remove()

    if level is None:
        level = os.getenv("SUGGESTIONS_LOG_LEVEL", DEFAULT_LEVEL).upper()

    if suppress_console is None:
        suppress_console = _env_flag("SUGGESTIONS_QUIET")

    if not suppress_console:
        logger.add(
            sys.stderr,
            level=level,
            format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
            colorize=None
        )

    if log_file is None:
        log_file = os.getenv("SUGGESTIONS_LOG_FILE") or None

    if log_file:
        logger.add(
            log_file,
            level=level,
            rotation="10 MB",
            retention="1 day",
            compression="gz",
            catch=True,
            serialize=False
        )


# Configure the logger on import (will check env vars)
setup_logging()
