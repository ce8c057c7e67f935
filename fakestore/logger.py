import logging
import sys
import json
from datetime import datetime, timezone

from fakestore import config


class JsonFormatter(logging.Formatter):
    """One JSON object per line, for log shippers."""

    def format(self, record):
        log_record = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).replace(tzinfo=None).isoformat() + "Z",
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
            "module": record.module,
        }
        if record.exc_info:
            log_record["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(log_record)


def get_logger(name: str, env: str = None, level: str = None):
    env = env or config.LOG_ENV
    logger = logging.getLogger(name)
    logger.setLevel(level or config.LOG_LEVEL)

    # Avoid duplicate handlers
    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stdout)

    if env == "prod":
        handler.setFormatter(JsonFormatter())
    else:
        # Dev logs: Time - Logger - Level - Message
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
        handler.setFormatter(formatter)

    logger.addHandler(handler)
    return logger
