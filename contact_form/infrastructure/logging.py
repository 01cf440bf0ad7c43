from __future__ import annotations

import logging
import os
import sys

import structlog

# Third-party loggers that are chatty at INFO
_NOISY_LOGGERS = ("google", "grpc", "urllib3")


def setup_logging(
    log_level: str | None = None,
    log_format: str | None = None,
) -> None:
    level = (log_level or os.environ.get("LOG_LEVEL", "INFO")).upper()
    # Console for local dev (TTY), JSON for containers
    default_fmt = "console" if sys.stderr.isatty() else "json"
    fmt = (log_format or os.environ.get("LOG_FORMAT", default_fmt)).lower()

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if fmt == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer(ensure_ascii=False)

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
        foreign_pre_chain=shared_processors,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

    # The request middleware already logs every request
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    # Google client libraries log auth refreshes and channel setup at INFO
    if level != "DEBUG":
        for name in _NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)
