from __future__ import annotations
import logging, os, sys
from logging.handlers import RotatingFileHandler
from typing import NamedTuple, Optional

FORMAT = "%(asctime)s %(levelname)s [%(shortname)s] %(message)s"
DATEFMT = "%Y-%m-%d %H:%M:%S"
OFF_WORDS = ("0", "false", "no", "off")

class LogSettings(NamedTuple):
    enabled: bool = True
    level: str = "INFO"
    file: Optional[str] = None

class ShortFormatter(logging.Formatter):
    """Adds %(shortname)s, the last dotted part of the logger name (FanService, cli...)."""
    def format(self, record: logging.LogRecord) -> str:
        record.shortname = record.name.rpartition('.')[2]
        return super().format(record)

def _rotating(path: str) -> logging.Handler:
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    return RotatingFileHandler(path, maxBytes=256_000, backupCount=2)

def setup_logging(enabled: bool = True, level: str | int = "INFO", log_file: str | None = None) -> None:
    """Configure the root logger on first call; later calls change nothing."""
    if getattr(setup_logging, "_configured", False):
        return
    setup_logging._configured = True
    if not enabled:
        logging.disable(logging.CRITICAL)
        return
    logging.disable(logging.NOTSET)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    file_error = None
    if log_file:
        try:
            handlers.append(_rotating(log_file))
        except OSError as e:
            file_error = e
    formatter = ShortFormatter(FORMAT, DATEFMT)
    for h in handlers:
        h.setFormatter(formatter)

    lvl = logging.getLevelName(level.upper()) if isinstance(level, str) else level
    logging.basicConfig(level=lvl if isinstance(lvl, int) else logging.INFO, handlers=handlers, force=True)
    if file_error is not None:
        logging.getLogger(__name__).warning("Log file %s unavailable: %s", log_file, file_error)

def resolve_log_settings(cfg, debug: bool = False) -> LogSettings:
    """
    PIFAN_LOGGING / PIFAN_LOG_LEVEL / PIFAN_LOG_FILE win over the ``logging``
    section of the config. Debug mode means DEBUG unless a level is forced
    through the environment.
    """
    section = getattr(cfg, "logging", None) or LogSettings()
    switch = os.getenv("PIFAN_LOGGING")
    enabled = section.enabled if switch is None else switch.lower() not in OFF_WORDS
    level = os.getenv("PIFAN_LOG_LEVEL") or ("DEBUG" if debug else str(section.level))
    return LogSettings(enabled, level, os.getenv("PIFAN_LOG_FILE") or section.file)
