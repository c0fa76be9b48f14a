"""
Loguru based logging setup

Provides one logging configuration for the SDK and the CLI.
Log level is controlled by the LOG_LEVEL environment variable or flags.
"""

import re
import sys
from typing import Optional

from loguru import logger

from zosmf_sdk.config.settings import reload_settings


def sanitize_sensitive_info(message: str) -> str:
    """
    Remove credentials and local paths from a log message

    Args:
        message: original log message

    Returns:
        sanitized log message
    """
    # HTTP Basic credentials
    message = re.sub(r"(Basic)\s+[A-Za-z0-9+/=]+", r"\1 ***", message)

    # user home directories
    message = re.sub(r"/Users/[^/]+/[^/]+/", ".../", message)
    message = re.sub(r"C:\\Users\\[^\\]+\\[^\\]+\\", r"...\\", message)
    message = re.sub(r"/home/[^/\s]+/", "~/", message)

    # password or key like pairs
    message = re.sub(
        r"(password|passwd|pwd|key|token|secret)([=:\s]+)[^\s,}]+",
        r"\1=***",
        message,
        flags=re.IGNORECASE,
    )

    return message


def setup_logger(
    verbose: bool = False, quiet: bool = False, level_override: Optional[str] = None
) -> str:
    """
    Configure the global loguru logger

    Args:
        verbose: enable DEBUG output
        quiet: only show errors
        level_override: explicit level (INFO/DEBUG/WARNING/ERROR)

    Returns:
        the level that was applied
    """
    logger.remove()

    if level_override:
        level = level_override.upper()
    elif quiet:
        level = "ERROR"
    elif verbose:
        level = "DEBUG"
    else:
        level = reload_settings().log_level.upper()

    def secure_message_filter(record):
        """Sanitize the record message in place"""
        if "message" in record:
            record["message"] = sanitize_sensitive_info(str(record["message"]))
        return True

    format_string = (
        "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
        "<level>{message}</level>"
    )

    logger.add(
        sys.stderr,
        level=level,
        format=format_string,
        colorize=True,
        backtrace=True,
        diagnose=False,
        filter=secure_message_filter,
    )

    logger.debug(f"Logger initialized - Level: {level}")
    return level


def get_logger(name: str = "zosmf_sdk"):
    """
    Return a logger bound to the given name

    Args:
        name: logger name (module name etc.)
    """
    return logger.bind(name=name)
