"""
Logging configuration with optional JSON output.
"""
import logging
import sys
import json
import os
from datetime import datetime, timezone
from typing import Any, Dict, Union


class JSONFormatter(logging.Formatter):
    """JSON log formatter."""

    def format(self, record: logging.LogRecord) -> str:
        log_obj: Dict[str, Any] = {
            "ts": datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f") + "Z",
            "level": record.levelname,
            "msg": record.getMessage(),
            "logger": record.name,
            "service": "suid",
        }

        # Add extra fields if present
        for field in ("suid", "alphabet", "code"):
            if hasattr(record, field):
                log_obj[field] = getattr(record, field)

        if record.exc_info:
            log_obj["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(log_obj)


def configure_logging(level: Union[int, str] = logging.INFO) -> None:
    """
    Configure logging on stderr, stdout is left for command output.
    Set LOG_JSON=true in env to enable JSON logging.
    """
    use_json = os.getenv("LOG_JSON", "").lower() in ("true", "1", "yes")

    handler = logging.StreamHandler(sys.stderr)

    if use_json:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )

    logging.basicConfig(
        level=level,
        handlers=[handler],
    )
