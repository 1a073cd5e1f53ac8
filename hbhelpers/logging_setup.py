import logging
import sys
import structlog

from hbhelpers.exceptions import ConfigError

LOGGER_NAME = "hbhelpers"
_LEVELS = ("debug", "info", "warning", "error", "critical")

# silent until the application configures logging
logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())

def get_logger(name: str):
    # structlog front end on the stdlib logger of that module, below the 'hbhelpers' logger.
    return structlog.wrap_logger(logging.getLogger(name), wrapper_class=structlog.stdlib.BoundLogger)

def configure_logging(log_level_str: str = "warning", json_output: bool = False) -> logging.Logger:
    # wires structlog into the stdlib 'hbhelpers' logger; helpers log through it while rendering.
    if log_level_str.lower() not in _LEVELS:
        raise ConfigError(f"Unknown log level '{log_level_str}'. Expected one of: {', '.join(_LEVELS)}.")
    log_level = getattr(logging, log_level_str.upper())

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    if json_output:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    formatter = structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=[structlog.stdlib.add_log_level],
    )

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.handlers.clear()
    package_logger.addHandler(handler)
    package_logger.setLevel(log_level)

    get_logger(__name__).info("logging_configured", level=log_level_str, json=json_output)
    return package_logger
