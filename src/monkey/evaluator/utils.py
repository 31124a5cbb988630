# src/monkey/evaluator/utils.py
import logging

from ..config import config
from ..object import NULL, TRUE, FALSE, EvaluationError, is_error

logger = logging.getLogger("monkey.evaluator")


def debug_log(label, message="", *args, enabled=False):
    """Log at DEBUG when ``enabled`` or the global debug flag is set.

    ``args`` are %-formatted lazily into ``message``.
    """
    if not (enabled or config.enable_debug_logs):
        return
    if args:
        logger.debug("%s: " + message, label, *args)
    elif message != "":
        logger.debug("%s: %s", label, message)
    else:
        logger.debug("%s", label)


def is_truthy(obj):
    # Only false and null are falsy; 0, "" and [] are truthy.
    if obj is NULL or obj is FALSE:
        return False
    return True


def new_error(message):
    return EvaluationError(message)


def wrong_arg_count(got, take):
    return EvaluationError(f"wrong number of arguments. Got: {got}, take: {take}")


__all__ = [
    "NULL", "TRUE", "FALSE", "debug_log", "is_error", "is_truthy",
    "new_error", "wrong_arg_count", "logger",
]
