"""
Structured logging configuration with trace IDs
"""
import logging
import uuid
import contextvars
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

from pythonjsonlogger.json import JsonFormatter

from hallbooking.core.config import settings

# Context variable to store trace ID across async calls
trace_id_var = contextvars.ContextVar('trace_id', default=None)

# Marks handlers installed by setup_logging so a second call replaces them
_HANDLER_TAG = "_hallbooking_handler"


class CustomJsonFormatter(JsonFormatter):
    """JSON formatter that stamps every record with time, service and trace ID"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)

        log_record['timestamp'] = datetime.now(timezone.utc).isoformat()
        log_record['level'] = record.levelname

        trace_id = trace_id_var.get()
        if trace_id and 'trace_id' not in log_record:
            log_record['trace_id'] = trace_id

        log_record['service'] = 'hallbooking'


class TraceIdFilter(logging.Filter):
    """Expose the current trace ID to plain-text formats"""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, 'trace_id'):
            record.trace_id = trace_id_var.get() or '-'
        return True


def _build_formatter(json_output: bool) -> logging.Formatter:
    if json_output:
        return CustomJsonFormatter('%(timestamp)s %(level)s %(name)s %(message)s')
    return logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - [%(trace_id)s] %(message)s')


def setup_logging(level: Optional[str] = None, json_output: Optional[bool] = None,
                  log_file: Optional[str] = None) -> logging.Logger:
    """Configure the root logger; safe to call more than once"""
    level = level or settings.LOG_LEVEL
    json_output = settings.LOG_JSON if json_output is None else json_output
    log_file = log_file or settings.LOG_FILE

    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if getattr(handler, _HANDLER_TAG, False):
            root_logger.removeHandler(handler)
            handler.close()

    handlers = [(logging.StreamHandler(), json_output)]
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        # File logs are always JSON
        handlers.append((logging.FileHandler(log_file), True))

    for handler, as_json in handlers:
        setattr(handler, _HANDLER_TAG, True)
        handler.setFormatter(_build_formatter(as_json))
        if not as_json:
            handler.addFilter(TraceIdFilter())
        root_logger.addHandler(handler)

    root_logger.setLevel(level.upper())

    # Reduce noise from libraries
    logging.getLogger('uvicorn.access').setLevel(logging.WARNING)
    logging.getLogger('passlib').setLevel(logging.ERROR)

    return root_logger


def set_trace_id(trace_id: Optional[str]):
    """Set trace ID for current context"""
    return trace_id_var.set(trace_id)


def generate_trace_id() -> str:
    """Generate a new trace ID"""
    return str(uuid.uuid4())
