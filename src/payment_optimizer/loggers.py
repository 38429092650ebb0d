# src/payment_optimizer/loggers.py
import logging

ROOT_LOGGER = "payment_optimizer"


def get_logger(name=ROOT_LOGGER, level=None):
    logger = logging.getLogger(name)
    if name == ROOT_LOGGER and not logger.handlers:
        ch = logging.StreamHandler()
        ch.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))
        logger.addHandler(ch)
    if level is not None:
        logger.setLevel(level)
    return logger
