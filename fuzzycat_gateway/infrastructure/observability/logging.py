"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger import jsonlogger


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def __init__(self, *args: Any, service_name: str = "fuzzycat-gateway", **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.service_name = service_name

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = self.service_name


def setup_logging(level: str = "INFO", service_name: str = "fuzzycat-gateway") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    # JSON handler for stdout
    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s",
        service_name=service_name,
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_schedule_quote(
    request_id: str,
    bill_amount_cents: int,
    total_with_fee_cents: int,
    num_payments: int,
    duration_ms: float,
) -> None:
    """Log structured schedule quote outcome for analysis"""
    logging.getLogger(__name__).info(
        "Schedule quoted",
        extra={
            "request_id": request_id,
            "step": "schedule_quote_complete",
            "bill_amount_cents": bill_amount_cents,
            "total_with_fee_cents": total_with_fee_cents,
            "num_payments": num_payments,
            "duration_ms": duration_ms,
        },
    )
