from __future__ import annotations

from logging import Logger, getLogger
from typing import Optional

from logger.utils import (
    configure_console_profile,
    configure_default_profile,
    get_logger_profile,
)

_logger_configured = False


def configure_logger() -> None:
    """
    Apply the logging profile once per process.

    ``default`` routes records through a queue to a file under ``log/``;
    ``console`` writes to stdout only. Unknown profiles fall back to ``default``.
    """
    global _logger_configured
    if _logger_configured:
        return

    profile = get_logger_profile()
    if profile == "console":
        configure_console_profile()
    else:
        configure_default_profile()

    _logger_configured = True


def get_logger(name: Optional[str] = "") -> Logger:
    """Return a named logger; config is applied on first use.

    Pass __name__ to get a module-specific logger.
    """
    if not _logger_configured:
        configure_logger()
    return getLogger(name) if name else getLogger()
