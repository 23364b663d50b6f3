"""
Shared logger for the engine, solvers and harness.

Library code only logs; handlers are set up once here, on first use, so a
CLI run shows INFO lines on stderr without any extra configuration.
"""

from __future__ import annotations

import logging

LOGGER_NAME = "wordle_engine"


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Return the package logger, or a child of it (e.g. get_logger("harness")).

    The stream handler is attached to the package logger only once.
    """
    root = logging.getLogger(LOGGER_NAME)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(
            "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"
        ))
        root.addHandler(handler)
        root.setLevel(logging.INFO)

    return root.getChild(name) if name else root


def set_level(level: int | str) -> None:
    get_logger().setLevel(level)
