"""Runtime logging helpers."""

from __future__ import annotations

import inspect
import logging
import os
import sys
from logging import Handler
from typing import Literal

from loguru import logger
from rich import get_console
from rich.logging import RichHandler

LogProfile = Literal["default", "rich"]

_DEFAULT_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<6} | {name}:{function}:{line} | {message}"
_CONFIGURED_PROFILE: LogProfile | None = None


class InterceptHandler(logging.Handler):
    """Handler that forwards stdlib logging messages to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = inspect.currentframe(), 0
        while frame:
            filename = frame.f_code.co_filename
            is_logging = filename == logging.__file__
            is_frozen = "importlib" in filename and "_bootstrap" in filename
            if depth > 0 and not (is_logging or is_frozen):
                break
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def _build_rich_handler() -> Handler:
    return RichHandler(
        console=get_console(),
        show_level=True,
        show_time=False,
        show_path=False,
        markup=False,
        rich_tracebacks=False,
    )


def _check_level(name: str) -> str:
    level = name.strip().upper()
    try:
        logger.level(level)
    except ValueError as e:
        raise ValueError(f"Unknown log level {name.strip()!r} in TYPEUNIFY_LOG_FILTER") from e
    return level


def parse_log_filter(value: str | None = None) -> tuple[str, dict[str | None, str | bool]]:
    """Parse a TYPEUNIFY_LOG_FILTER value.

    Format: "level" or "level,module1=level,module2=false"
    Examples:
        - "info" - global INFO level
        - "debug,typeunify.core=debug" - global DEBUG, typeunify.core at DEBUG
        - "info,typeunify.solver=false" - global INFO, typeunify.solver disabled

    Level names must be known to loguru; they are returned upper-cased.

    Returns:
        (global_level, module_filter_dict)

    Raises:
        ValueError: On an unknown level name
    """
    raw = value if value is not None else os.getenv("TYPEUNIFY_LOG_FILTER", "info")

    global_level = "INFO"
    module_filter: dict[str | None, str | bool] = {}
    for part in filter(None, (p.strip() for p in raw.split(","))):
        module, sep, level = part.partition("=")
        if not sep:
            global_level = _check_level(part)
        elif level.strip().lower() == "false":
            module_filter[module.strip()] = False
        else:
            module_filter[module.strip()] = _check_level(level)

    return global_level, module_filter


def _setup_stdlib_intercept() -> None:
    """Forward stdlib logging to loguru."""
    root_logger = logging.getLogger()
    if not any(isinstance(h, InterceptHandler) for h in root_logger.handlers):
        root_logger.addHandler(InterceptHandler())


def configure_logging(*, profile: LogProfile = "default") -> None:
    """Configure process-level logging once per profile.

    Log levels are controlled by TYPEUNIFY_LOG_FILTER, see `parse_log_filter`.
    """
    global _CONFIGURED_PROFILE
    if profile == _CONFIGURED_PROFILE:
        return

    global_level, module_filter = parse_log_filter()

    logger.remove()
    logger.enable("typeunify")

    sink, fmt = (_build_rich_handler(), "{message}") if profile == "rich" else (sys.stderr, _DEFAULT_FORMAT)
    logger.add(sink, level=global_level, format=fmt, backtrace=False, diagnose=False, filter=module_filter)

    _setup_stdlib_intercept()

    _CONFIGURED_PROFILE = profile
