"""Logging setup for the calculator and its command-line front end."""

import json
import logging
import sys
from typing import IO, Optional


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        data = {
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
        }
        # Structured fields attached through ``extra=`` by the calculator
        for attr in [
            "dimension",
            "raw_dimension",
            "grade",
            "status",
            "error_code",
            "tolerance",
        ]:
            if hasattr(record, attr):
                data[attr] = getattr(record, attr)
        if record.exc_info:
            data["exception"] = self.formatException(record.exc_info)
        return json.dumps(data, ensure_ascii=False, default=str)


def setup_logging(
    level: Optional[str] = None,
    json_format: Optional[bool] = None,
    stream: Optional[IO[str]] = None,
) -> None:
    from tolcalc.core.config import get_settings

    settings = get_settings()
    level = (level or settings.LOG_LEVEL).upper()
    if json_format is None:
        json_format = settings.LOG_JSON

    root = logging.getLogger()
    root.setLevel(getattr(logging, level, logging.INFO))
    handler = logging.StreamHandler(stream or sys.stdout)
    if json_format:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
    root.handlers = [handler]
