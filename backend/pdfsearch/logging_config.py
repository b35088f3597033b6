# logging_config.py
import logging
import time
from functools import wraps
from typing import Union

LOG_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"


def setup_logging(level: Union[int, str] = logging.INFO):
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")


def log_latency(operation_name: str):
    """Log how long each pipeline step took and whether it raised."""

    def decorator(func):
        logger = logging.getLogger(func.__module__)

        @wraps(func)
        def wrapper(*args, **kwargs):
            start = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                logger.error(f"{operation_name} failed after {(time.perf_counter() - start) * 1000:.0f}ms: {e}")
                raise
            logger.info(f"{operation_name} took {(time.perf_counter() - start) * 1000:.0f}ms")
            return result

        return wrapper

    return decorator
