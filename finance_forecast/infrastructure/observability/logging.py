"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from pythonjsonlogger import jsonlogger

from finance_forecast.config import settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: Optional[str] = None) -> None:
    """Configure structured JSON logging at `level`, or `settings.log_level` when omitted"""
    logger = logging.getLogger()
    logger.setLevel(level or settings.log_level)

    # Remove existing handlers
    logger.handlers.clear()

    # JSON handler for stdout
    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_outlook(
    today: str,
    month_reason: str,
    year_end_reason: str,
    insight_count: int,
    transaction_count: int,
    duration_ms: float,
) -> None:
    """Log structured outlook outcome for analysis"""
    logging.getLogger("finance_forecast.outlook").info(
        "Outlook computed",
        extra={
            "step": "outlook_complete",
            "today": today,
            "month_reason": month_reason,
            "year_end_reason": year_end_reason,
            "insight_count": insight_count,
            "transaction_count": transaction_count,
            "duration_ms": duration_ms,
        },
    )
