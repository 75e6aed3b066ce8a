# pro_mode_prompting/utils/logging.py
import logging
import sys

import structlog

from pro_mode_prompting.data.settings import settings
from pro_mode_prompting.utils.serialization import orjson_dumps


def setup_logger() -> structlog.typing.FilteringBoundLogger:
    """
    Set up logging using structlog so that events from the prompt engine and
    from the standard library share one renderer.

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

    # The CLI prints its result on stdout, so log records go to stderr.
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)
    root_logger.setLevel(settings.logging_level)

    log: structlog.typing.FilteringBoundLogger = structlog.get_logger(
        "pro_mode_prompting.main"
    )
    return log
