"""Logging setup for the hoppath CLI.

All records go to stderr; stdout is reserved for results.  hoppath logs two
kinds of pipeline events, and each record from those modules is tagged with
a ``stage`` key so they can be filtered in ``--log-json`` output:

- ``load`` (``hoppath.infrastructure.edges_file``): file loaded, row skipped
- ``query`` (``hoppath.services.path``): query answered or failed

hoppath loggers are silent below WARNING unless ``--verbose`` is given.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import MutableMapping
from typing import Any

import structlog
from structlog.types import Processor

PACKAGE_LOGGER = "hoppath"

_STAGES = {
    "hoppath.infrastructure.edges_file": "load",
    "hoppath.services.path": "query",
}


def _add_stage(
    logger: Any, method_name: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    stage = _STAGES.get(event_dict.get("logger", ""))
    if stage is not None:
        event_dict.setdefault("stage", stage)
    return event_dict


def _renderer(log_json: bool) -> Processor:
    if log_json:
        return structlog.processors.JSONRenderer(sort_keys=True)
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Send hoppath's structlog and stdlib records through one stderr handler.

    Calling it again replaces the handler instead of adding a second one.
    """
    pre_chain: list[Processor] = [
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        _add_stage,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
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
    root.handlers = [handler]
    root.setLevel(logging.WARNING)
    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
