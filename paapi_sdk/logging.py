import logging
import os


def get_logger(name: str):
    """
    Logger shared by the SDK, the node and the host runtime.
    Level comes from PAAPI_LOG_LEVEL (default INFO); set DEBUG to see raw responses.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(os.getenv("PAAPI_LOG_LEVEL", "INFO").upper())
    return logger
