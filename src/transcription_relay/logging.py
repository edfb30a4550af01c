import logging
import sys

from pythonjsonlogger.json import JsonFormatter

_configured = False


def setup_logging():
    """
    Configures and sets up structured JSON logging for the application.

    A JSON formatter with timestamp, level, logger name, message, trace_id and
    span_id replaces the default handlers of the root logger and the Uvicorn
    loggers, so request logs and application logs share one format. The
    handlers are installed once per process; later calls only return the
    logger.

    Returns:
        logging.Logger: The configured root logger instance.
    """
    global _configured

    root_logger = logging.getLogger()
    if _configured:
        return root_logger

    formatter = JsonFormatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s %(trace_id)s %(span_id)s"
    )
    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(formatter)

    root_logger.setLevel(logging.INFO)
    root_logger.handlers = []
    root_logger.addHandler(stream_handler)

    for logger_name in ["uvicorn", "uvicorn.access", "uvicorn.error"]:
        u_logger = logging.getLogger(logger_name)
        u_logger.setLevel(logging.INFO)

        u_logger.handlers = []

        u_logger.addHandler(stream_handler)

        u_logger.propagate = False

    _configured = True
    return root_logger
