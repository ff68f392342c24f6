"""
Logging utilities for the Sirene UI.

A single stream handler lives on the package logger ("sirene_ui"); module
loggers are its children, named after their dotted module path, and
propagate to it. The level comes from the LOG_LEVEL environment variable,
read when the handler is first installed.
"""

import logging
import os
from pathlib import Path

ROOT_NAME = "sirene_ui"
_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def module_name(path: str) -> str:
    """
    Turn a source path into a dotted logger name under ROOT_NAME.

    ".../sirene_ui/api/sirene.py" gives "sirene_ui.api.sirene"; a path
    outside the package gives "sirene_ui.<stem>". Package __init__ files
    are named after their package.
    """
    parts = list(Path(path).with_suffix("").parts)
    if ROOT_NAME in parts:
        parts = parts[len(parts) - 1 - parts[::-1].index(ROOT_NAME):]
    else:
        parts = [ROOT_NAME, parts[-1]]
    if parts[-1] == "__init__":
        parts.pop()
    return ".".join(parts)


def _root() -> logging.Logger:
    root = logging.getLogger(ROOT_NAME)
    if not root.handlers:
        level = os.getenv("LOG_LEVEL", "INFO").upper()
        root.setLevel(getattr(logging, level, logging.INFO))
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT))
        root.addHandler(handler)
        # Reflex configures the root logger too; avoid printing twice.
        root.propagate = False
    return root


def logger(name: str) -> logging.Logger:
    """
    Return the logger for a module.

    Args:
        name: A __file__ path, or an explicit logger name. Names outside
            the package namespace are placed under it.

    Returns:
        A child of the package logger.
    """
    root = _root()
    if "/" in name or "\\" in name:
        name = module_name(name)
    elif name != ROOT_NAME and not name.startswith(f"{ROOT_NAME}."):
        name = f"{ROOT_NAME}.{name}"
    return root if name == ROOT_NAME else logging.getLogger(name)
