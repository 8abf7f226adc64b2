"""Log routing for the campuscoffee CLI.

Everything goes to stderr so stdout carries nothing but the JSON result
envelope. Application modules, SQLAlchemy and any structlog callers all
share one handler, rendered as console lines or JSON lines (``--log-json``).

Verbosity maps onto the ``campuscoffee`` logger:

====== ========= ===============================================
``-v`` level     shows
====== ========= ===============================================
0      WARNING   clears, duplication errors
1      INFO      creates, updates, deletes
2+     DEBUG     reads, transaction begin/join
====== ========= ===============================================

SQL statements are logged only when ``[database] echo`` is on. They are
routed through the ``sqlalchemy.engine`` logger instead of the engine's
``echo`` flag, which would attach its own stdout handler.
"""

from __future__ import annotations

import logging
import sys

import structlog

_APP_LOGGER = "campuscoffee"
_SQL_LOGGER = "sqlalchemy.engine"

_VERBOSITY_LEVELS = (logging.WARNING, logging.INFO, logging.DEBUG)


def level_for(verbose: int) -> int:
    """Level of the ``campuscoffee`` logger for a ``-v`` count."""
    return _VERBOSITY_LEVELS[min(max(verbose, 0), len(_VERBOSITY_LEVELS) - 1)]


def configure_logging(
    *,
    verbose: int = 0,
    log_json: bool = False,
    sql_echo: bool = False,
) -> None:
    """(Re)install the stderr handler and set logger levels.

    Safe to call repeatedly; the root handler is replaced, never stacked.

    Args:
        verbose: Number of ``-v`` flags, see the module table.
        log_json: Render JSON lines instead of console output.
        sql_echo: Log every SQL statement at INFO.
    """
    pre_chain: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.UnicodeDecoder(),
    ]
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

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(logging.WARNING)

    logging.getLogger(_APP_LOGGER).setLevel(level_for(verbose))
    logging.getLogger("sqlalchemy").setLevel(logging.WARNING)
    logging.getLogger(_SQL_LOGGER).setLevel(logging.INFO if sql_echo else logging.NOTSET)


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
