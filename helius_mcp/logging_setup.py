"""Root logging setup shared by the HTTP and stdio entry points."""

from __future__ import annotations

import json
import logging
import sys

from helius_mcp.config import HeliusConfig, default_config


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "message": record.getMessage(),
            "name": record.name,
        }
        for key in ("tool", "request_id", "error"):
            if hasattr(record, key):
                payload[key] = getattr(record, key)
        return json.dumps(payload)


def configure_logging(config: HeliusConfig = default_config) -> None:
    """Log to stderr, as JSON lines unless ``log_format`` is ``plain``."""
    level = getattr(logging, config.log_level.upper(), logging.INFO)
    handler = logging.StreamHandler(sys.stderr)
    if config.log_format.lower() == "json":
        handler.setFormatter(JsonFormatter())
    logging.basicConfig(level=level, handlers=[handler])
