"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger import jsonlogger

from lease_payments.config import settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    # JSON handler for stdout
    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_schedule_generated(
    request_id: str,
    lease_id: str | None,
    frequency: str,
    payments_generated: int,
    existing_payments: int,
    duration_ms: float,
) -> None:
    """Log structured schedule generation outcome"""
    logging.info(
        "Schedule generated",
        extra={
            "request_id": request_id,
            "lease_id": lease_id,
            "step": "schedule_generated",
            "frequency": frequency,
            "payments_generated": payments_generated,
            "existing_payments": existing_payments,
            "duration_ms": duration_ms,
        },
    )
