import logging
import os
from datetime import datetime

from category_tree.coreutils.env import env_get

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def setup_logging(level=None, log_dir: str | None = None):
    """Setup basic logging configuration

    Level falls back to CATEGORY_TREE_LOG_LEVEL, then INFO. A dated log file is
    written only when a log directory is given or CATEGORY_TREE_LOG_DIR is set.
    """
    if level is None:
        level = env_get("CATEGORY_TREE_LOG_LEVEL", "INFO").upper()

    handlers: list[logging.Handler] = [logging.StreamHandler()]

    log_dir = log_dir or env_get("CATEGORY_TREE_LOG_DIR")
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        handlers.append(
            logging.FileHandler(
                os.path.join(
                    log_dir, f"category_tree_{datetime.now().strftime('%Y-%m-%d')}.log"
                )
            )
        )

    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers)
    return logging.getLogger(__name__)


def log_function_call(func_name: str, **kwargs):
    """Log function calls with parameters"""
    logger = logging.getLogger(__name__)
    logger.debug(f"Calling {func_name} with params: {kwargs}")
