import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

from ticklist.util.dirs import ensure_dirs, get_home

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def resolve_level(level: int | str, *, name: str = "ticklist") -> int:
    """Map a level name or number to a logging level, WARNING when unknown."""
    if isinstance(level, int):
        return level
    # getLevelName returns an int only for registered names
    resolved = logging.getLevelName(str(level).strip().upper())
    if isinstance(resolved, int):
        return resolved
    logging.getLogger(name).warning("Unknown log level %r; using WARNING", level)
    return logging.WARNING


def setup_mode(*, is_debug: bool, level: int | str = logging.WARNING, name: str = "ticklist") -> None:
    """Set the level of the stream handlers; the file handler always records DEBUG."""
    _level = logging.DEBUG if is_debug else resolve_level(level, name=name)
    for handler in logging.getLogger(name).handlers:
        if not isinstance(handler, logging.FileHandler):
            handler.setLevel(_level)


def setup_logger(
    name: str,
    *,
    is_stream: bool = True,
    is_file: bool = False,
    home: str | None = None,
) -> logging.Logger:
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)
    formatter = logging.Formatter(LOG_FORMAT)

    has_file = any(isinstance(h, logging.FileHandler) for h in logger.handlers)
    has_stream = any(not isinstance(h, logging.FileHandler) for h in logger.handlers)

    if is_stream and not has_stream:
        stream_handler = logging.StreamHandler()
        stream_handler.setLevel(logging.WARNING)
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)

    if is_file and not has_file:
        home = home or get_home()
        ensure_dirs(home)
        time_rotate_file_handler = TimedRotatingFileHandler(
            (Path(home) / f"{name.lower()}.log").as_posix(),
            when="MIDNIGHT",
            interval=1,
            backupCount=7,
            encoding="utf-8",
        )
        time_rotate_file_handler.setLevel(logging.DEBUG)
        time_rotate_file_handler.setFormatter(formatter)
        logger.addHandler(time_rotate_file_handler)

    return logger
