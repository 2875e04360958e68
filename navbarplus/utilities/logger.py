import logging
import sys

import structlog


def configure_logging(debug: bool = False):
    # Configure the standard logging
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=logging.DEBUG if debug else logging.INFO,
    )
    processors = [
        # 1. Context first
        structlog.contextvars.merge_contextvars,   # request path, language etc. bound by the views

        # 2. Core metadata
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.add_log_level,

        structlog.processors.CallsiteParameterAdder(
            parameters={
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
                structlog.processors.CallsiteParameter.FUNC_NAME,
            }
        ),

        # 3. Exception / stack handling
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info
    ]

    # 4. Output renderer (last step)
    if debug:
        processors.append(structlog.dev.ConsoleRenderer())       # human-friendly
    else:
        processors.append(structlog.processors.JSONRenderer())   # machine-readable

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(logging.DEBUG if debug else logging.INFO),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    return structlog.get_logger()


def env_flag(value) -> bool:
    """Interpret an environment style flag ("1", "true", "yes", "on")."""
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return str(value).strip().lower() in {"1", "true", "yes", "on"}
