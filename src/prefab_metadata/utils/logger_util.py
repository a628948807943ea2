import logging
from pathlib import Path
from typing import Optional


_FORMATTER = logging.Formatter(
    '%(asctime)s     || %(name)s \n%(levelname)s   || %(message)s \n',
    datefmt="%Y-%m-%d %H:%M:%S",
)


def get_logger(name: str, level=logging.INFO) -> logging.Logger:
    """Get a named logger with standard formatting.

    Example:
        logger = get_logger(__name__)
        logger.debug("decoded %s", path)

    Only a stream handler is attached here; call ``add_file_handler`` to also
    write to a log directory.

    Returns:
        logging.Logger: Configured logger instance.
    """
    logger = logging.getLogger(name)

    # avoid adding duplicate handlers if called repeatedly (common in tests)
    if logger.handlers:
        logger.setLevel(level)
        return logger

    handler = logging.StreamHandler()
    handler.setFormatter(_FORMATTER)
    logger.addHandler(handler)

    logger.setLevel(level)
    # stop passing records to the root logger (avoid duplicated messages)
    logger.propagate = False
    return logger


def add_file_handler(logger: logging.Logger, log_dir: Optional[str]) -> Optional[Path]:
    """Attach a UTF-8 file handler writing to ``<log_dir>/<logger name>.log``.

    Returns the log file path, or None when no directory was given.
    """
    if not log_dir:
        return None
    logs_dir = Path(log_dir)
    logs_dir.mkdir(parents=True, exist_ok=True)
    log_path = logs_dir / f"{logger.name}.log"
    for h in logger.handlers:
        if isinstance(h, logging.FileHandler) and Path(h.baseFilename) == log_path.resolve():
            return log_path
    filehandler = logging.FileHandler(str(log_path), encoding="utf-8")
    filehandler.setFormatter(_FORMATTER)
    logger.addHandler(filehandler)
    return log_path


def configure(level=logging.INFO, log_dir: Optional[str] = None) -> logging.Logger:
    """Apply level and optional file logging to every package logger.

    Loggers from ``get_logger`` do not propagate, so each one gets its own
    file (one log file per module, named after the logger).
    """
    root = get_logger("prefab_metadata", level)
    add_file_handler(root, log_dir)
    for name, candidate in list(logging.Logger.manager.loggerDict.items()):
        if name.startswith("prefab_metadata.") and isinstance(candidate, logging.Logger):
            candidate.setLevel(level)
            add_file_handler(candidate, log_dir)
    root.info("'prefab_metadata' logging initialized with level %s", logging.getLevelName(level))
    return root
