"""Holdings Charts Engine - Entry Point.

Usage:
    python -m holdings_charts                          # Stdin/stdout command loop
    python -m holdings_charts --input portfolio.json   # Render one portfolio
    python -m holdings_charts --input portfolio.json --link
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Optional, Sequence

from holdings_charts import config
from holdings_charts.core.aggregation import (
    aggregate_holdings,
    build_backtest_url,
    build_holdings_charts,
)
from holdings_charts.core.converters import load_portfolio
from holdings_charts.core.errors import PortfolioLoadError
from holdings_charts.utils.logging_config import configure_root_logger, get_logger

logger = get_logger("holdings_charts")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Holdings Charts Engine")
    parser.add_argument(
        "--input",
        type=Path,
        help="Portfolio JSON file ({positions, accounts, isPrivateMode})",
    )
    parser.add_argument(
        "--link",
        action="store_true",
        help="Print only the Portfolio Visualizer backtest URL (needs --input)",
    )
    parser.add_argument(
        "--log-level", default=config.LOG_LEVEL, help="Logging level (default: %(default)s)"
    )
    parser.add_argument(
        "--rich", action="store_true", help="Use rich log output on stderr"
    )
    return parser


def render_file(path: Path, link_only: bool = False) -> str:
    """Render the portfolio in `path` to chart JSON, or to the backtest URL."""
    with open(path, "r", encoding="utf-8") as f:
        payload = json.load(f)

    snapshot = load_portfolio(payload)
    if link_only:
        return build_backtest_url(aggregate_holdings(snapshot.positions, snapshot.accounts))

    charts = build_holdings_charts(
        snapshot.positions, snapshot.accounts, snapshot.is_private_mode
    )
    return json.dumps(charts.to_dict(), indent=2)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.link and args.input is None:
        parser.error("--link requires --input")

    configure_root_logger(
        args.log_level, private_mode=config.PRIVATE_MODE, rich_output=args.rich
    )

    if args.input is None:
        from holdings_charts.headless.transports import run_stdin_loop

        run_stdin_loop()
        return 0

    try:
        output = render_file(args.input, link_only=args.link)
    except FileNotFoundError:
        logger.error(f"Input file not found: {args.input}")
        return 1
    except json.JSONDecodeError as e:
        logger.error(f"Input file is not valid JSON: {e}")
        return 1
    except PortfolioLoadError as e:
        logger.error(f"Invalid portfolio: {e}")
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
