"""Log routing for the envshape CLI.

Library modules log through stdlib ``logging`` under the ``envshape``
namespace and never install handlers.  :func:`configure_logging` attaches
one stderr handler to that namespace and renders its records with
structlog, as console lines or as JSON lines.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import MutableMapping
from typing import Any

import structlog

NAMESPACE = "envshape"
HANDLER_NAME = "envshape-cli"
REDACTED = "[redacted]"

# Event keys that would carry an environment value.
VALUE_KEYS = frozenset({"raw", "value", "env_value"})


def redact_values(
    logger: Any, method_name: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    """Mask environment values before any renderer sees them."""
    for key in VALUE_KEYS.intersection(event_dict):
        event_dict[key] = REDACTED
    return event_dict


def _pre_chain() -> list[structlog.types.Processor]:
    return [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.ExtraAdder(),
        redact_values,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer(sort_keys=True)
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def _install_handler(formatter: logging.Formatter) -> logging.Logger:
    target = logging.getLogger(NAMESPACE)
    for existing in [h for h in target.handlers if h.name == HANDLER_NAME]:
        target.removeHandler(existing)

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(formatter)
    target.addHandler(handler)
    target.propagate = False
    return target


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route ``envshape`` log records to stderr.

    Field sourcing events are DEBUG and only shown with *verbose*; mapping
    warnings always are.  Calling this again replaces the handler, and the
    root logger is left alone.
    """
    pre_chain = _pre_chain()

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=pre_chain,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _renderer(log_json),
        ],
    )
    target = _install_handler(formatter)
    target.setLevel(logging.DEBUG if verbose else logging.WARNING)
