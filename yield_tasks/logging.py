"""Package logging that honours `RuntimeConfig.log_level`."""

import logging
from typing import Optional

from . import config


def get_logger(name: Optional[str] = None) -> logging.Logger:
    logger_name = "yield_tasks" if name is None else f"yield_tasks.{name}"
    logger = logging.getLogger(logger_name)
    logger.setLevel(config.runtime_config().log_level)
    return logger
