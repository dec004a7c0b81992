import logging
import sys
from typing import Any, Dict

import structlog

EventDict = Dict[str, Any]


def get_logging_level(name: str) -> int:
    return logging._nameToLevel[name.upper()]


def add_location_prefix(_: Any, __: Any, event_dict: EventDict) -> EventDict:
    """
    Structlog processor that renders `location` and `line` as a single
    `source` key in the `path:line` form editors understand.
    """
    location = event_dict.get("location")
    line = event_dict.get("line")
    if location is not None and line is not None:
        event_dict["source"] = f"{location}:{line}"
        del event_dict["location"]
        del event_dict["line"]
    return event_dict


def configure_logging(level: int) -> None:
    # stdout carries command output, so log records go to stderr.
    logging.basicConfig(
        stream=sys.stderr,
        level=level,
        format="%(levelname)s %(name)s %(message)s",
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            add_location_prefix,
            structlog.processors.KeyValueRenderer(key_order=["event"], sort_keys=True),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
