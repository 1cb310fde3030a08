import logging
from typing import Union


def setup_logger(name: str = "banking", level: Union[int, str] = logging.INFO) -> logging.Logger:
    logger = logging.getLogger(name)
    logger.setLevel(level)
    # avoid duplicate console output on repeated setup
    if logger.handlers:
        return logger
    ch = logging.StreamHandler()
    fmt = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s - %(message)s"
    )
    ch.setFormatter(fmt)
    logger.addHandler(ch)
    return logger
