"""Stdin/Stdout Transport.

Line-delimited JSON commands in, JSON responses out.
"""

import json
import os
import sys
from typing import Any, Optional, TextIO

from holdings_charts import __version__
from holdings_charts.headless.dispatcher import dispatch
from holdings_charts.utils.logging_config import get_logger

logger = get_logger(__name__)


def _emit(stdout: TextIO, message: dict[str, Any]) -> None:
    stdout.write(json.dumps(message) + "\n")
    stdout.flush()


def run_stdin_loop(
    stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None
) -> int:
    """Run the command loop until stdin closes.

    Protocol:
        1. On startup, emits a ready signal: {"status": "ready", "version": "...", "pid": ...}
        2. Reads one JSON command per line
        3. Dispatches it and writes the JSON response on one line
        4. Repeats until EOF or KeyboardInterrupt

    Args:
        stdin: Command stream, defaults to sys.stdin.
        stdout: Response stream, defaults to sys.stdout.

    Returns:
        Number of commands dispatched.
    """
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    _emit(stdout, {"status": "ready", "version": __version__, "pid": os.getpid()})
    logger.info("Stdin loop started")

    handled = 0
    while True:
        try:
            line = stdin.readline()

            if not line:
                logger.info("Stdin closed, shutting down")
                break

            line = line.strip()
            if not line:
                continue

            try:
                cmd = json.loads(line)
            except json.JSONDecodeError as e:
                logger.warning(f"Invalid JSON received: {e}")
                _emit(
                    stdout,
                    {
                        "id": 0,
                        "status": "error",
                        "error": {
                            "code": "INVALID_JSON",
                            "message": f"Failed to parse JSON: {e}",
                        },
                    },
                )
                continue

            if not isinstance(cmd, dict):
                _emit(
                    stdout,
                    {
                        "id": 0,
                        "status": "error",
                        "error": {
                            "code": "INVALID_COMMAND",
                            "message": "Command must be a JSON object",
                        },
                    },
                )
                continue

            _emit(stdout, dispatch(cmd))
            handled += 1

        except KeyboardInterrupt:
            logger.info("Keyboard interrupt, shutting down")
            break
        except Exception as e:
            logger.error(f"Stdin loop error: {e}", exc_info=True)
            _emit(
                stdout,
                {
                    "id": 0,
                    "status": "error",
                    "error": {"code": "INTERNAL_ERROR", "message": str(e)},
                },
            )

    logger.info(f"Stdin loop terminated after {handled} commands")
    return handled
