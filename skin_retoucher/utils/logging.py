# skin_retoucher/utils/logging.py
import logging
import sys

import structlog

from skin_retoucher.dto.base import orjson_dumps
from skin_retoucher.data.settings import settings


def setup_logger(level: int | None = None) -> structlog.typing.FilteringBoundLogger:
    """
    Set up logging using structlog to process logs from both the application
    and third-party libraries.

    Args:
        level: Root log level; `settings.logging_level` when omitted.

    Returns:
        A configured structlog bound logger instance.
    """
    shared_processors: list[structlog.typing.Processor] = [
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.dict_tracebacks,
    ]

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    renderer = (
        structlog.dev.ConsoleRenderer()
        if sys.stderr.isatty()
        else structlog.processors.JSONRenderer(serializer=orjson_dumps)
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processor=renderer,
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)
    root_logger.setLevel(level if level is not None else settings.logging_level)

    # Reduce noise from the Gemini SDK transport
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("google_genai").setLevel(logging.WARNING)

    log: structlog.typing.FilteringBoundLogger = structlog.get_logger(
        "skin_retoucher.main"
    )
    return log
