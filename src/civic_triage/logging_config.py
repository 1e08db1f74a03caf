"""Structured logging configuration using structlog.

Classification decisions decide which department gets notified, so the
engine logs every provider call, raw model answer and fallback as a
structured event. Production renders JSON lines for the log shipper;
development renders a readable console view.
"""

import logging
import sys

import structlog
from structlog.types import EventDict, Processor, WrappedLogger


APP_CONTEXT = "civic-triage"
RAW_RESPONSE_LOG_LIMIT = 2000

# Loggers that are chatty at INFO and carry nothing the audit trail needs
NOISY_LOGGERS = ("httpx", "httpcore", "asyncio")


def add_app_context(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Tag every event with the application name."""
    event_dict["app"] = APP_CONTEXT
    return event_dict


def cap_raw_response(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Truncate logged model output to RAW_RESPONSE_LOG_LIMIT characters."""
    raw = event_dict.get("raw_response")
    if isinstance(raw, str) and len(raw) > RAW_RESPONSE_LOG_LIMIT:
        event_dict["raw_response"] = raw[:RAW_RESPONSE_LOG_LIMIT]
        event_dict["raw_response_truncated"] = len(raw)
    return event_dict


def shared_processors(is_production: bool) -> list[Processor]:
    """Processors applied to both structlog and stdlib records."""
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        add_app_context,
        cap_raw_response,
    ]
    if is_production:
        processors.append(structlog.processors.format_exc_info)
    else:
        processors.append(structlog.processors.ExceptionPrettyPrinter())
    return processors


def configure_logging(log_level: str = "INFO", environment: str = "development") -> None:
    """Route structlog and stdlib logging through one stdout handler.

    Args:
        log_level: DEBUG, INFO, WARNING, ERROR or CRITICAL
        environment: "production" selects the JSON renderer, anything else the console renderer
    """
    level = getattr(logging, log_level.upper(), logging.INFO)
    is_production = environment.lower() == "production"
    processors = shared_processors(is_production)

    renderer: Processor
    if is_production:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())

    structlog.configure(
        processors=processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(processor=renderer, foreign_pre_chain=processors)
    )
    handler.setLevel(level)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    structlog.get_logger(__name__).info(
        "Logging configured",
        log_level=log_level,
        environment=environment,
        renderer="json" if is_production else "console",
    )
