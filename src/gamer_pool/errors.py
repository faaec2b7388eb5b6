# Area: Shared
"""
gamer_pool.errors — Custom exception classes
============================================

Defines the exception hierarchy for pool, input and persistence errors.
Each exception stores enough context for structured logging.
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional
import json


class GamerPoolError(Exception):
    """Base exception for all gamer_pool errors."""
    pass


class GamerNotFoundError(GamerPoolError):
    """Raised when a gamer name is absent from the pool."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"No gamer named '{name}'")

    def format_error_log(self) -> str:
        return _format_error_block(
            error_type="GAMER_NOT_FOUND",
            subject=self.name,
            payload=None,
            details=None,
        )


class MalformedGamerError(GamerPoolError):
    """Raised when boundary input cannot be turned into a GamerRecord."""

    def __init__(self, payload: Any, validation_errors: List[str]):
        self.payload = payload
        self.validation_errors = validation_errors
        super().__init__(f"Malformed gamer data: {validation_errors}")

    def format_error_log(self) -> str:
        payload = self.payload if isinstance(self.payload, dict) else {"raw": repr(self.payload)}
        return _format_error_block(
            error_type="MALFORMED_GAMER",
            subject=None,
            payload=payload,
            details=self.validation_errors,
        )


class PersistenceError(GamerPoolError):
    """Raised (or reported on the error channel) when the store fails."""

    def __init__(self, operation: str, message: str, gamer_name: Optional[str] = None):
        self.operation = operation
        self.gamer_name = gamer_name
        super().__init__(f"{operation} failed: {message}")

    def format_error_log(self) -> str:
        return _format_error_block(
            error_type="PERSISTENCE_FAILURE",
            subject=self.gamer_name,
            payload=None,
            details=[str(self)],
        )


def _format_error_block(
    error_type: str,
    subject: Optional[str],
    payload: Optional[Dict[str, Any]],
    details: Optional[List[str]],
) -> str:
    """Format a structured error block for logs."""
    from datetime import datetime, timezone

    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"

    lines = [
        "",
        "=" * 64,
        f" GAMER POOL ERROR — {error_type}",
        "=" * 64,
        f" Timestamp:    {timestamp}",
    ]

    if subject is not None:
        lines.append(f" Gamer:        {subject}")

    if payload is not None:
        lines.append("")
        lines.append(" ── PAYLOAD " + "─" * 52)
        lines.append(_indent_json(payload))

    if details:
        lines.append("")
        lines.append(" ── DETAILS " + "─" * 52)
        for detail in details:
            lines.append(f" • {detail}")

    lines.append("")
    lines.append("=" * 64)
    lines.append("")

    return "\n".join(lines)


def _indent_json(data: Dict[str, Any], indent: int = 2) -> str:
    """Format JSON with indentation for error logs."""
    try:
        formatted = json.dumps(data, indent=indent, default=str)
        return "\n".join(" " + line for line in formatted.split("\n"))
    except (TypeError, ValueError):
        return f" {repr(data)}"
