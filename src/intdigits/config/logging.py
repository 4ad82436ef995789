"""structlog configuration for intdigits.

Library modules log through stdlib ``logging.getLogger(__name__)``; this
module routes those records through structlog so the ``extra`` fields the
service layer attaches (``op``, ``width``, ``code``) become structured keys.

Two output modes, chosen by the ``[logging]`` section:
- Human (default): console key=value output to stderr
- JSON (``json = true``): one JSON object per line on stderr
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from intdigits.config.models import LoggingConfig
    from intdigits.config.settings import DigitsSettings

PACKAGE_LOGGER = "intdigits"


def _pre_chain() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.ExtraAdder(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.UnicodeDecoder(),
    ]


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer(sort_keys=True)
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Install a single stderr handler and set the ``intdigits`` level.

    Args:
        verbose: Let the service layer's DEBUG records through. When False,
            only WARNING+ (conversion failures) are emitted.
        log_json: Render JSON lines instead of console output.
    """
    pre_chain = _pre_chain()
    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)


def configure_from_config(config: LoggingConfig) -> None:
    configure_logging(verbose=config.verbose, log_json=config.json_output)


def configure_from_settings(settings: DigitsSettings) -> None:
    """Apply the ``[logging]`` section of *settings*."""
    configure_from_config(settings.logging)
