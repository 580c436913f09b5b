"""Headless command engine.

- dispatcher: Command routing
- handlers: Chart data handlers
- transports: Stdin/stdout loop
- responses: Standard response envelopes
"""

from holdings_charts.headless.responses import error_response, success_response
from holdings_charts.headless.dispatcher import (
    dispatch,
    get_available_commands,
    is_command_registered,
)

__all__ = [
    "success_response",
    "error_response",
    "dispatch",
    "get_available_commands",
    "is_command_registered",
]
