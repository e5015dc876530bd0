# utils/logger.py
import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logger = logging.getLogger("raytracer")

def init_logger(level: int = logging.INFO) -> logging.Logger:
    """Install the console format and level. Meant for application entry points only."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logger.setLevel(level)
    return logger
