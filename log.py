# gacore: Dense Clifford Algebra Kernel (C) 2026 Eunkyum Kim
# Licensed under the Apache License, Version 2.0

"""Loggers for the ``gacore`` hierarchy.

Table generation and task reports go through :func:`get_logger`. Handlers
are attached to the ``gacore`` logger once, on first use.

Environment variables:
    GACORE_LOG_LEVEL  DEBUG / INFO (default) / WARNING / ERROR
    GACORE_LOG_FILE   optional path, lines are appended with timestamps
"""

import logging
import os
import sys

ROOT_LOGGER = "gacore"

CONSOLE_FORMAT = "%(levelname)s %(name)s: %(message)s"
FILE_FORMAT = "%(asctime)s " + CONSOLE_FORMAT


def _level_from_env() -> int:
    name = os.environ.get("GACORE_LOG_LEVEL", "INFO").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def _attach_handlers(root: logging.Logger) -> None:
    root.setLevel(_level_from_env())

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    root.addHandler(console)

    path = os.environ.get("GACORE_LOG_FILE")
    if path:
        file_handler = logging.FileHandler(path, mode="a")
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        root.addHandler(file_handler)


def get_logger(name: str) -> logging.Logger:
    """Logger for ``name`` under the ``gacore`` hierarchy.

    Names already inside the hierarchy (``gacore.algebra``) are kept; any
    other name (``tasks.cayley``) is nested as ``gacore.<name>``.
    """
    root = logging.getLogger(ROOT_LOGGER)
    if not root.handlers:
        _attach_handlers(root)
    if name == ROOT_LOGGER or name.startswith(ROOT_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
