"""Logging setup for the docassert command line."""

import logging
from contextlib import suppress
from pathlib import Path

LOGGER_NAME = "docassert"


def setup_logging(level: int = logging.WARNING, log_file: str | Path | None = None) -> None:
    """Configure the `docassert` logger.

    Console output carries the bare message; the optional log file gets
    timestamps. Calling again with the same settings is a no-op.
    """
    root = logging.getLogger(LOGGER_NAME)
    settings = (level, str(log_file) if log_file is not None else None)
    if getattr(root, "_docassert_settings", None) == settings:
        return

    _close_handlers(root)
    root.setLevel(level)
    root.propagate = False

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root.addHandler(console_handler)

    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s")
        )
        root.addHandler(file_handler)

    root._docassert_settings = settings  # type: ignore[attr-defined]


def _close_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        with suppress(Exception):
            handler.close()
