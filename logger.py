import logging

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"

_HANDLER_NAME = "context-log"


def configure_logging(level="INFO"):
    """Attach a single context-tagged stream handler to the root logger."""
    root = logging.getLogger()
    root.setLevel(level)

    for handler in root.handlers:
        if handler.get_name() == _HANDLER_NAME:
            return handler

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    root.addHandler(handler)
    return handler


def get_logger(context):
    return logging.getLogger(context)


def log_error(logger, message, error=None):
    if error is not None:
        message = f"{message} - {error}"
    logger.error(message)
