import logging
import logging.config
import os
from copy import deepcopy
from typing import Any

LOGGERS_CONFIG: dict[str, Any] = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {"default": {"format": "[%(asctime)s][%(levelname)s][%(name)s]: %(message)s"}},
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "default",
            "level": logging.DEBUG,
            "stream": "ext://sys.stdout",
        },
        "file": {
            "class": "logging.FileHandler",
            "formatter": "default",
            "filename": "",
            "level": logging.INFO,
        },
    },
    "loggers": {},
}


def init_logger(
    filename: str,
    logger_name: str = "TBR",
    logging_dir: str = "./logs/",
    level: int = logging.INFO
) -> logging.Logger:
    """Logs to stdout and to a file in logging_dir

    Library modules log to children of the "TBR" logger,
    so the default logger_name captures all of them.
    """
    os.makedirs(logging_dir, exist_ok=True)

    config = deepcopy(LOGGERS_CONFIG)
    config["handlers"]["file"]["filename"] = os.path.join(logging_dir, filename)
    config["loggers"][logger_name] = {
        "handlers": ["console", "file"],
        "level": level,
    }

    logging.config.dictConfig(config)
    return logging.getLogger(logger_name)


def init_stdout_logger(logger_name: str = "TBR", level: int = logging.INFO) -> logging.Logger:
    config = deepcopy(LOGGERS_CONFIG)
    config["handlers"].pop("file")
    config["loggers"][logger_name] = {
        "handlers": ["console"],
        "level": level,
    }

    logging.config.dictConfig(config)
    return logging.getLogger(logger_name)
