"""
Centralized application-specific logging using Loguru.

This module provides a function-based logging mechanism (`LOG`) that dynamically
respects the `beQuiet` flag from application settings.

Features:
- A custom `LOG` function for application-specific debug logging.
- Dynamic checking of the `beQuiet` flag to suppress logs when necessary.
- Consistent and customizable logging format.

Usage:
- Use `LOG` for application-specific debug logging.
- The `beQuiet` flag controls whether logs are displayed.

Example:
    from optkit.lib.log import LOG
    LOG("Compiled 3 option definitions.")

Environment:
- Set `OPTKIT_BEQUIET=False` to see detailed logging output.
"""

from loguru import logger
from typing import Any
import sys

# Create a distinct logger instance for the app
app_logger = logger.bind(app="OPTKIT")

logger_format = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> │ "
    "<level>{level: <5}</level> │ "
    "<yellow>{name: >28}</yellow>::"
    "<cyan>{function: <30}</cyan> @ "
    "<cyan>{line: <4}</cyan> ║ "
    "<level>{message}</level>"
)

app_logger.remove()  # Remove any default handlers
app_logger.add(sys.stderr, format=logger_format)


def LOG(message: str, *args: Any, level: str | None = None, **kwargs: Any) -> None:
    """
    Application-specific logging function.

    This function checks the `beQuiet` flag in `appsettings` and logs the message
    only if logging is enabled. Records are attributed to the caller.

    :param message: The log message, formatted with args/kwargs by loguru.
    :param level: Level name; defaults to `appsettings.logLevel`.
    :param args: Positional arguments for the log message.
    :param kwargs: Keyword arguments for additional log metadata.
    """
    try:
        from optkit.config.settings import appsettings  # Ensure up-to-date settings

        if not appsettings.beQuiet:
            app_logger.opt(depth=1).log(
                level or appsettings.logLevel, message, *args, **kwargs
            )
    except Exception as e:
        print(f"Logging error: {e}")  # Fallback to standard output on failure
