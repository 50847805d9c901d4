"""Package logging."""

from maybe_baby.logger.logger import logger, setup_logger

__all__ = ["logger", "setup_logger"]
