import logging
import logging.handlers
import os
from typing import Any, Dict, Optional

import colorlog

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
LOG_COLORS = {
    'DEBUG': 'cyan',
    'INFO': 'green',
    'WARNING': 'yellow',
    'ERROR': 'red',
    'CRITICAL': 'red,bg_white',
}
# chatty third-party loggers, one line per request or frame
QUIET_LOGGERS = ("httpx", "httpcore", "elevenlabs")


def parse_level(name: Optional[str], default: int) -> int:
    if not name:
        return default
    level = logging.getLevelName(str(name).upper())
    return level if isinstance(level, int) else default


def setup_logging(log_cfg: Optional[Dict[str, Any]] = None) -> logging.Logger:
    """Console output via colorlog plus a midnight-rotated file under ``directory``.

    An empty ``directory`` keeps logging on the console only.
    """
    log_cfg = log_cfg or {}
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.handlers.clear()

    console_handler = colorlog.StreamHandler()
    console_handler.setFormatter(colorlog.ColoredFormatter(
        "%(log_color)s" + LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        log_colors=LOG_COLORS,
        reset=True,
    ))
    console_handler.setLevel(parse_level(log_cfg.get("console_level"), logging.INFO))
    root_logger.addHandler(console_handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    log_directory = log_cfg.get("directory", "logs")
    if not log_directory:
        root_logger.info("Console logging ready, file logging disabled")
        return root_logger

    log_directory = os.path.abspath(log_directory)
    log_path = os.path.join(log_directory, log_cfg.get("file", "radio_dj.log"))
    try:
        os.makedirs(log_directory, exist_ok=True)
    except OSError as e:
        root_logger.error(f"Cannot create log directory {log_directory}: {e}")
        return root_logger

    file_handler = logging.handlers.TimedRotatingFileHandler(
        log_path,
        when=log_cfg.get("rotate_when", "midnight"),
        backupCount=int(log_cfg.get("backup_count", 7)),
        encoding='utf-8'
    )
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    file_handler.setLevel(parse_level(log_cfg.get("file_level"), logging.DEBUG))
    root_logger.addHandler(file_handler)

    root_logger.info(f"Logging to console and {log_path}")
    return root_logger
