"""Logging configuration for the gateway and the server it runs under."""

import logging
import os

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# uvicorn loggers that should follow the gateway's level
SERVER_LOGGERS = ("uvicorn", "uvicorn.error")


class _GatewayHandlerMixin:
    """Marks handlers installed by setup_logging so re-runs only replace those."""

    gateway_owned = True


class GatewayStreamHandler(_GatewayHandlerMixin, logging.StreamHandler):
    pass


class GatewayFileHandler(_GatewayHandlerMixin, logging.FileHandler):
    pass


def setup_logging(
    level: str | None = None, log_file: str | None = None
) -> logging.Logger:
    """Set up logging for the ``hotel_gateway`` logger tree.

    Safe to call once per created app: handlers added by a previous call are
    replaced, handlers installed by anyone else (test capture, uvicorn) are
    left alone.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path for log output

    Returns:
        Configured gateway logger
    """
    log_level = level or os.getenv("LOG_LEVEL") or "INFO"
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    logger = logging.getLogger("hotel_gateway")
    logger.setLevel(numeric_level)

    for handler in logger.handlers[:]:
        if getattr(handler, "gateway_owned", False):
            logger.removeHandler(handler)
            handler.close()

    console_handler = GatewayStreamHandler()
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir)

        file_handler = GatewayFileHandler(log_file)
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    for name in SERVER_LOGGERS:
        logging.getLogger(name).setLevel(numeric_level)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger inside the ``hotel_gateway`` tree.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Logger instance
    """
    if name.startswith("hotel_gateway"):
        return logging.getLogger(name)
    return logging.getLogger(f"hotel_gateway.{name}")
