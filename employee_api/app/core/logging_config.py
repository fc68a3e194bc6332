"""
Logging setup for the Employee Management API.

Application modules log through loggers below ``employee_api``
(``logging.getLogger(__name__)``).  ``setup_logging`` gives that
package logger its own console handler and, when ``Settings.log_file``
is set, a file handler.  Records still propagate to the root logger,
so anything the hosting process attaches there keeps working.

Uvicorn's loggers are tuned from the same settings: server messages
follow ``log_level`` and the per‑request access log is only shown
in debug mode.
"""

import logging
import sys

from .config import Settings

APP_LOGGER_NAME = "employee_api"
CONSOLE_HANDLER_NAME = "employee_api.console"
FILE_HANDLER_NAME = "employee_api.file"

formatter = logging.Formatter(
    fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)


def _handler_names(logger: logging.Logger) -> set:
    return {handler.get_name() for handler in logger.handlers}


def setup_logging(settings: Settings) -> logging.Logger:
    """Configure the application and uvicorn loggers from ``settings``.

    Handlers are attached at most once per process; calling this again
    (e.g. from a second ``create_app``) only updates levels.  Unknown
    level names fall back to ``INFO``.  Returns the package logger.
    """
    level = getattr(logging, settings.log_level.upper(), None)
    if not isinstance(level, int):
        level = logging.INFO

    app_logger = logging.getLogger(APP_LOGGER_NAME)
    app_logger.setLevel(level)
    existing = _handler_names(app_logger)

    if CONSOLE_HANDLER_NAME not in existing:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.set_name(CONSOLE_HANDLER_NAME)
        console_handler.setFormatter(formatter)
        app_logger.addHandler(console_handler)

    if settings.log_file and FILE_HANDLER_NAME not in existing:
        file_handler = logging.FileHandler(settings.log_file, encoding="utf-8")
        file_handler.set_name(FILE_HANDLER_NAME)
        file_handler.setFormatter(formatter)
        app_logger.addHandler(file_handler)

    logging.getLogger("uvicorn.error").setLevel(level)
    logging.getLogger("uvicorn.access").setLevel(logging.INFO if settings.debug else logging.WARNING)

    return app_logger
