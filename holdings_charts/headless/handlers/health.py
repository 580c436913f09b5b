"""Health Check Handler."""

from typing import Any

from holdings_charts import __version__
from holdings_charts.headless.responses import success_response


def handle_get_health(cmd_id: int, payload: dict[str, Any]) -> dict[str, Any]:
    """Report engine version and the commands it understands."""
    from holdings_charts.headless.handlers import HANDLER_REGISTRY

    return success_response(
        cmd_id,
        {
            "version": __version__,
            "commands": sorted(HANDLER_REGISTRY.keys()),
        },
    )
