"""Logging setup for the registry command line entry points.

Two output modes are supported: JSON lines, one object per record, for log
shippers, and a plain single-line format for a terminal.

Security Impact:
    - Registry code passes identifiers to the logger, never names, DNA or
      contact details, so neither mode can leak them
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict

PLAIN_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
PLAIN_DATEFMT = "%H:%M:%S"


class StructuredFormatter(logging.Formatter):
    """Render each record as one JSON object.

    Keys from an ``extra_fields`` mapping on the record are merged into the
    top level, e.g. ``logger.info("...", extra={"extra_fields": {"record_id": "P001"}})``.
    """

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        payload.update(getattr(record, "extra_fields", {}))
        return json.dumps(payload, default=str)


def setup_logging(use_json: bool = False, log_level: str = "INFO") -> None:
    """Replace the root logger's handlers with a single stderr handler.

    Parameters:
        use_json: Emit JSON lines instead of the plain format
        log_level: Level name; unknown names fall back to INFO
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(
        StructuredFormatter() if use_json else logging.Formatter(PLAIN_FORMAT, datefmt=PLAIN_DATEFMT)
    )

    # Demo output goes to stdout; keep log lines off it
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level)
    root.addHandler(handler)
