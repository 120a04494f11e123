from __future__ import annotations

import atexit
import copy
import logging
import logging.config
import os
import sys
from datetime import datetime
from logging.handlers import QueueHandler, QueueListener
from pathlib import Path
from queue import Queue
from typing import Any

LOGGER_PROFILE_ENV = "WELLGEO_LOGGER_PROFILE"
LOG_FILE_NAME = "wellgeo_log.log"
PYTEST_LOG_FILE_NAME = "pytest_log.log"

_queue: Queue | None = None
_listener: QueueListener | None = None
_shutdown_registered: bool = False

_DEFAULT_LOG_CONFIG: dict[str, Any] = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "detailed": {
            "format": "%(asctime)s.%(msecs)03d %(module)s:%(lineno)d %(levelname)s - %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
        "simple": {
            "format": "%(asctime)s.%(msecs)03d - %(module)-30s %(lineno)-4d - %(levelname)-8s - %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "level": "INFO",
            "formatter": "simple",
            "stream": "ext://sys.stdout",
        },
    },
    "loggers": {},
    "root": {"level": "INFO", "handlers": ["console"]},
}


def find_pyproject_toml(start: Path | None = None) -> Path | None:
    """
    Locate pyproject.toml in the current working directory first, then walking
    up from ``start`` (or this file) to the filesystem root.

    Returns
    -------
    Path | None
        The resolved path if found, else None.
    """
    cwd_candidate = Path.cwd() / "pyproject.toml"
    if cwd_candidate.exists():
        return cwd_candidate.resolve()

    base = start or Path(__file__).resolve()
    for candidate in [base] + list(base.parents):
        pp = candidate / "pyproject.toml"
        if pp.exists():
            return pp.resolve()

    return None


def _load_logging_table() -> dict[str, Any]:
    pyproject_path = find_pyproject_toml()
    if pyproject_path is None:
        return {}

    import tomli

    try:
        with open(pyproject_path, "rb") as f:
            pyproject_toml = tomli.load(f)
    except (OSError, tomli.TOMLDecodeError) as e:
        sys.stderr.write(
            f"Warning: Failed to read [logging] from {pyproject_path}: {e}\n"
        )
        return {}
    return dict(pyproject_toml.get("logging", {}))


def get_logger_profile() -> str:
    """
    Logger profile selected through the ``WELLGEO_LOGGER_PROFILE`` environment
    variable, ``"default"`` when unset.
    """
    return os.environ.get(LOGGER_PROFILE_ENV, "default").strip().lower()


def get_logging_output() -> dict[str, Any]:
    """
    The ``[logging.output]`` table of pyproject.toml, with safe defaults when
    the file or the table is missing.
    """
    output = {"log_to_console": False, "datetime_log_file": False}
    output.update(_load_logging_table().get("output", {}))
    return output


def get_log_to_console_value() -> bool:
    return bool(get_logging_output().get("log_to_console", False))


def log_to_datetime_log_file() -> bool:
    return bool(get_logging_output().get("datetime_log_file", False))


def get_log_config() -> dict[str, Any]:
    """
    Load the ``[logging.config]`` dictionary from pyproject.toml.

    Returns
    -------
    dict[str, Any]
        A configuration accepted by ``logging.config.dictConfig``; a console-only
        configuration when pyproject.toml carries none.
    """
    config = _load_logging_table().get("config")
    if isinstance(config, dict):
        return config
    return copy.deepcopy(_DEFAULT_LOG_CONFIG)


def _build_console_handler(
    level: int = logging.INFO, format: str = "simple"
) -> logging.Handler:
    console = logging.StreamHandler(stream=sys.stdout)
    console.setLevel(level)
    fmt = get_log_config().get("formatters", {}).get(format, {})
    console.setFormatter(
        logging.Formatter(fmt=fmt.get("format"), datefmt=fmt.get("datefmt"))
    )
    return console


def _build_file_handler(file_path: str, logging_config: dict[str, Any]) -> logging.Handler:
    file_cfg = logging_config.get("handlers", {}).get("file", {})
    formatter_cfg = logging_config.get("formatters", {}).get(
        file_cfg.get("formatter"), {}
    )
    fh = logging.FileHandler(file_path, mode="a", encoding="utf-8")
    fh.setLevel(file_cfg.get("level", logging.INFO))
    fh.setFormatter(
        logging.Formatter(
            fmt=formatter_cfg.get("format")
            or "%(asctime)s.%(msecs)03d %(module)s:%(lineno)d %(levelname)s - %(message)s",
            datefmt=formatter_cfg.get("datefmt") or "%Y-%m-%d %H:%M:%S",
        )
    )
    return fh


def configure_default_profile() -> None:
    """Configure logging for library and test use (default profile).

    - All loggers propagate to root.
    - Root has a QueueHandler; a QueueListener owns the file/console handlers.
    - No module writes to files directly.
    """
    cfg = copy.deepcopy(get_log_config())
    cfg.setdefault("root", {}).update({"handlers": []})
    cfg.get("handlers", {}).pop("file", None)
    cfg.get("handlers", {}).pop("console", None)
    logging.config.dictConfig(cfg)
    _start_queue_listener()


def configure_console_profile() -> None:
    """Configure logging to stdout only: no files, no queue."""
    cfg = copy.deepcopy(get_log_config())
    cfg.get("handlers", {}).pop("file", None)
    cfg.setdefault("root", {})["handlers"] = []
    logging.config.dictConfig(cfg)

    level_name = cfg.get("handlers", {}).get("console", {}).get("level") or cfg.get(
        "root", {}
    ).get("level", "INFO")
    level = getattr(logging, str(level_name).upper(), logging.INFO)

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(cfg.get("root", {}).get("level", level))
    root.addHandler(_build_console_handler(level))


def _start_queue_listener() -> None:
    global _listener, _queue, _shutdown_registered
    if _listener is not None:
        return

    _queue = Queue(-1)
    logging_config = get_log_config()

    handlers: list[logging.Handler] = []
    if get_log_to_console_value() and "pytest" not in sys.modules:
        handlers.append(_build_console_handler(logging.INFO))
    file_path = _ensure_logfile_path()
    if file_path is not None:
        handlers.append(_build_file_handler(file_path, logging_config))

    _listener = QueueListener(_queue, *handlers, respect_handler_level=True)
    _listener.start()

    if not _shutdown_registered:
        atexit.register(_stop_listener)
        _shutdown_registered = True

    # Root only enqueues records
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(QueueHandler(_queue))
    root.setLevel(logging_config.get("root", {}).get("level", "INFO"))


def _ensure_logfile_path() -> str | None:
    base_dir = os.path.dirname(os.path.abspath(__file__))
    log_dir = os.path.join(base_dir, "../../log")
    file_name = PYTEST_LOG_FILE_NAME if "pytest" in sys.modules else LOG_FILE_NAME
    if "pytest" not in sys.modules and log_to_datetime_log_file():
        file_name = datetime.now().strftime("%Y-%m-%d_%H-%M-%S") + "_" + LOG_FILE_NAME
    try:
        os.makedirs(log_dir, exist_ok=True)
        full_path = os.path.join(log_dir, file_name)
        with open(full_path, "a", encoding="utf-8"):
            pass
        return full_path
    except OSError as e:
        sys.stderr.write(
            f"Warning: Could not create/access log directory/file in {log_dir}: {e}\n"
        )
        return None


def _stop_listener() -> None:
    global _listener, _queue
    try:
        if _listener is not None:
            _listener.stop()
    finally:
        _listener = None
        _queue = None
