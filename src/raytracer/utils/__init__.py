"""
Utility package.

Exports:
    * logger      - the package-wide logging.Logger
    * init_logger - configures console logging for applications
"""

from .logger import logger, init_logger

__all__ = ["logger", "init_logger"]
