"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from pythonjsonlogger import jsonlogger

from seismic_intel.domain.models import FilterParams


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = "seismic-intel"


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


def log_dashboard_view(
    request_id: str,
    source: str,
    params: FilterParams,
    adoption_rate: Optional[int],
    showing: int,
    total: int,
    duration_ms: float,
) -> None:
    """Log structured dashboard view for usage analysis"""
    logging.info(
        "Dashboard rendered",
        extra={
            "request_id": request_id,
            "step": "dashboard_view",
            "record_source": source,
            "search": params.search,
            "category": params.category,
            "status": params.status,
            "adoption_rate": adoption_rate,
            "showing": showing,
            "total": total,
            "duration_ms": duration_ms,
        },
    )
