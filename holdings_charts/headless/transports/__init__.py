"""Command transport: line-delimited JSON over stdin/stdout."""

from holdings_charts.headless.transports.stdin_loop import run_stdin_loop

__all__ = ["run_stdin_loop"]
