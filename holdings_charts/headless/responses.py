"""Command Response Helpers.

Every handler answers with one of two shapes:

    Success: {"id": cmd_id, "status": "success", "data": {...}}
    Error:   {"id": cmd_id, "status": "error", "error": {"code": "...", "message": "...", ...}}
"""

from typing import Any, Optional


def success_response(cmd_id: int, data: Any) -> dict[str, Any]:
    """Wrap handler output in a success envelope.

    Example:
        >>> success_response(1, {"backtestUrl": "https://..."})
        {"id": 1, "status": "success", "data": {"backtestUrl": "https://..."}}
    """
    return {
        "id": cmd_id,
        "status": "success",
        "data": data,
    }


def error_response(
    cmd_id: int, code: str, message: str, details: Optional[dict[str, Any]] = None
) -> dict[str, Any]:
    """Wrap a failure in an error envelope.

    Args:
        cmd_id: Command identifier for response correlation.
        code: Error code (e.g., "INVALID_PORTFOLIO", "UNKNOWN_COMMAND").
        message: Human-readable error message.
        details: Optional structured context, e.g. the rejected record.

    Returns:
        Error response dict; "details" is only present when given.
    """
    error: dict[str, Any] = {"code": code, "message": message}
    if details is not None:
        error["details"] = details
    return {
        "id": cmd_id,
        "status": "error",
        "error": error,
    }
