"""Command Dispatcher.

Routes incoming commands to the registered handler functions.
"""

from typing import Any

from holdings_charts.headless.handlers import HANDLER_REGISTRY
from holdings_charts.headless.responses import error_response
from holdings_charts.utils.logging_config import get_logger

logger = get_logger(__name__)


def dispatch(cmd: dict[str, Any]) -> dict[str, Any]:
    """Dispatch a command to its handler.

    Args:
        cmd: Command dict with 'command', 'id', and 'payload' keys.

    Returns:
        The handler's response, UNKNOWN_COMMAND for unregistered commands,
        or HANDLER_ERROR if the handler raised.

    Example:
        >>> dispatch({"command": "get_health", "id": 1, "payload": {}})
        {"id": 1, "status": "success", "data": {"version": "0.1.0", ...}}
    """
    command = cmd.get("command", "")
    cmd_id = cmd.get("id", 0)
    payload = cmd.get("payload") or {}

    handler = HANDLER_REGISTRY.get(command)

    if handler is None:
        logger.warning(f"Unknown command received: {command}")
        return error_response(
            cmd_id,
            "UNKNOWN_COMMAND",
            f"Unknown command: {command}",
        )

    try:
        return handler(cmd_id, payload)
    except Exception as e:
        logger.error(f"Handler error for '{command}': {e}", exc_info=True)
        return error_response(cmd_id, "HANDLER_ERROR", str(e))


def get_available_commands() -> list[str]:
    """Sorted list of all registered command names."""
    return sorted(HANDLER_REGISTRY.keys())


def is_command_registered(command: str) -> bool:
    return command in HANDLER_REGISTRY
