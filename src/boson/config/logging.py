"""structlog configuration.

Two output modes:
- Human (default): colored console output to stderr
- JSON: structured JSON lines to stderr

Library modules never configure logging on import; applications call
configure_logging() once at startup.
"""

import logging
import os
import sys
from dataclasses import dataclass
from typing import Final, List, Optional

import structlog

LOGGER_NAME: Final[str] = "src.boson"

ENV_LOG_LEVEL: Final[str] = "BOSON_LOG_LEVEL"
ENV_LOG_JSON: Final[str] = "BOSON_LOG_JSON"


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class LoggingConfig:
    """Конфигурация логирования."""

    level: str = "WARNING"
    json: bool = False

    @classmethod
    def from_env(cls) -> "LoggingConfig":
        """
        Конфигурация из переменных окружения.

        BOSON_LOG_LEVEL: имя уровня (DEBUG, INFO, ...), по умолчанию WARNING
        BOSON_LOG_JSON: "1"/"true"/"yes" включает JSON вывод
        """
        level = os.environ.get(ENV_LOG_LEVEL, cls.level).upper()
        json_flag = os.environ.get(ENV_LOG_JSON, "").strip().lower() in {"1", "true", "yes"}
        return cls(level=level, json=json_flag)


# =============================================================================
# CONFIGURE
# =============================================================================


def configure_logging(config: Optional[LoggingConfig] = None) -> None:
    """Configure structlog processors and output routing.

    Args:
        config: Logging config. Defaults to LoggingConfig.from_env().

    Raises:
        ValueError: If config.level is not a known logging level name.
    """
    config = config or LoggingConfig.from_env()

    level = logging.getLevelName(config.level)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {config.level}")

    shared_processors: List[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if config.json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger(LOGGER_NAME).setLevel(level)
    logging.getLogger("jsonschema").setLevel(logging.WARNING)
