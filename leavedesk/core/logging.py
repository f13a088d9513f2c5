import logging
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger import jsonlogger
from contextvars import ContextVar

# Correlation id of the request being served, set by CorrelationIdMiddleware
request_id_var: ContextVar[str] = ContextVar("request_id", default="")

SERVICE_NAME = "leavedesk"

class LeaveDeskJsonFormatter(jsonlogger.JsonFormatter):
    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)

        req_id = request_id_var.get()
        if req_id:
            log_record["request_id"] = req_id

        if not log_record.get("timestamp"):
            log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = (log_record.get("level") or record.levelname).upper()
        log_record["service"] = SERVICE_NAME

def setup_logging(level: str = "INFO"):
    """Route every logger through one JSON handler on the root logger."""
    root = logging.getLogger()
    # Import of main and uvicorn's reloader may both call this
    if not any(isinstance(h.formatter, LeaveDeskJsonFormatter) for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(LeaveDeskJsonFormatter("%(timestamp) %(level) %(name) %(message)"))
        root.addHandler(handler)
    root.setLevel(level)

    # LoggingMiddleware writes the access lines
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
