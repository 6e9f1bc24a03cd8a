"""structlog setup for the ubicity CLI.

stdlib loggers (``logging.getLogger(__name__)`` in the services) and
structlog loggers share one stderr handler.  Human mode renders with
structlog's console renderer; ``--log-json`` emits one JSON object per
line, with tracebacks as structured dicts.  The invoking command is
bound as ``command`` through contextvars by the root CLI group.
"""

from __future__ import annotations

import logging
import sys

import structlog


def resolve_level(*, verbose: bool = False, quiet: bool = False) -> int:
    """Level for the ``ubicity`` logger; *verbose* wins over *quiet*."""
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.ERROR
    return logging.WARNING


def configure_logging(
    *,
    verbose: bool = False,
    quiet: bool = False,
    log_json: bool = False,
) -> None:
    """Route ubicity and structlog output to stderr.

    Args:
        verbose: DEBUG for ubicity loggers.
        quiet: ERROR and above only.
        log_json: JSON lines instead of the console renderer.
    """
    shared: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    final: list[structlog.types.Processor] = [
        structlog.stdlib.ProcessorFormatter.remove_processors_meta,
    ]
    if log_json:
        final += [structlog.processors.dict_tracebacks, structlog.processors.JSONRenderer()]
    else:
        final.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))

    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(foreign_pre_chain=shared, processors=final)
    )

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(logging.WARNING)
    logging.getLogger("ubicity").setLevel(resolve_level(verbose=verbose, quiet=quiet))
