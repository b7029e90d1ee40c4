"""Structured JSON logging."""

import logging
import sys
import uuid
from datetime import datetime, timezone
from typing import Any, Dict

from pythonjsonlogger import jsonlogger


# Run ID for correlation across log entries of one process
RUN_ID = str(uuid.uuid4())


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter that adds run_id and standardized fields."""

    def add_fields(
        self,
        log_record: Dict[str, Any],
        record: logging.LogRecord,
        message_dict: Dict[str, Any],
    ) -> None:
        """Add custom fields to log record.

        Args:
            log_record: The log record to modify.
            record: The original logging.LogRecord.
            message_dict: Additional fields from the logging call.
        """
        super().add_fields(log_record, record, message_dict)

        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["run_id"] = RUN_ID
        log_record["level"] = record.levelname
        log_record["logger"] = record.name


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Configure structured JSON logging on stderr.

    Stdout is left to the run report.

    Args:
        verbose: Log at DEBUG instead of INFO.

    Returns:
        logging.Logger: Configured root logger.
    """
    logger = logging.getLogger()
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    # Remove existing handlers to avoid duplicates
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    json_handler = logging.StreamHandler(sys.stderr)
    json_handler.setFormatter(CustomJsonFormatter("%(message)s"))
    logger.addHandler(json_handler)

    return logger


def log_check_result(
    candidate: str,
    zone: str,
    blocked: bool,
    message: str | None,
    duration_ms: int,
) -> None:
    """Log structured per-check result.

    Args:
        candidate: IP address or domain checked.
        zone: Blocklist zone queried.
        blocked: Whether the candidate is listed.
        message: Listing reason, if any.
        duration_ms: Check time in milliseconds.
    """
    logger = logging.getLogger(__name__)
    logger.info(
        "DNSBL check completed",
        extra={
            "candidate": candidate,
            "zone": zone,
            "decision": "BLOCKED" if blocked else "NOT_BLOCKED",
            "reason": message,
            "duration_ms": duration_ms,
        },
    )


def log_run_summary(
    candidates: int,
    total_checks: int,
    blocked: int,
    duration_sec: float,
) -> None:
    """Log run completion summary.

    Args:
        candidates: Number of candidates given.
        total_checks: Number of candidate/zone checks performed.
        blocked: Number of checks that found a listing.
        duration_sec: Total run time in seconds.
    """
    logger = logging.getLogger(__name__)
    logger.info(
        "Run completed",
        extra={
            "candidates": candidates,
            "total_checks": total_checks,
            "blocked": blocked,
            "not_blocked": total_checks - blocked,
            "duration_sec": duration_sec,
        },
    )
