"""Main entry point with CLI."""
import argparse
import logging
import sys
from pathlib import Path

import orjson

from receipt_points.config import config, Config
from receipt_points.errors import InvalidPayload
from receipt_points.logging_conf import setup_logging
from receipt_points.scoring.rules import calculate_points, score_breakdown
from receipt_points.service import decode_receipt

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Receipt Points service")

    # Server arguments
    parser.add_argument(
        "--host",
        default=None,
        help=f"Bind address (default: {config.HOST})",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help=f"Listen port (default: {config.PORT})",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help=f"Log level (default: {config.LOG_LEVEL})",
    )

    # Scoring arguments
    parser.add_argument(
        "--strict-total",
        action="store_true",
        help="Do not award the quarter-multiple bonus when the total cannot be parsed",
    )
    parser.add_argument(
        "--score",
        type=Path,
        default=None,
        metavar="FILE",
        help="Score a receipt JSON file and exit instead of serving",
    )
    parser.add_argument(
        "--explain",
        action="store_true",
        help="With --score, print the points of each rule as JSON",
    )

    return parser.parse_args(argv)


def score_file(path: Path, strict_total: bool = False, explain: bool = False) -> int:
    """Print the points for a receipt file. Returns the process exit code."""
    try:
        receipt = decode_receipt(path.read_bytes())
    except OSError as e:
        logger.error(f"Cannot read {path}: {e}")
        return 1
    except InvalidPayload as e:
        logger.error(f"Invalid receipt in {path}: {e}")
        return 1

    if explain:
        breakdown = score_breakdown(receipt, strict_total=strict_total)
        breakdown["points"] = sum(breakdown.values())
        print(orjson.dumps(breakdown, option=orjson.OPT_INDENT_2).decode())
    else:
        print(calculate_points(receipt, strict_total=strict_total))
    return 0


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    args = parse_args(argv)

    # Override config from args
    if args.host:
        Config.HOST = args.host
    if args.port:
        Config.PORT = args.port
    if args.log_level:
        Config.LOG_LEVEL = args.log_level
    if args.strict_total:
        Config.STRICT_TOTAL = True

    setup_logging()

    try:
        Config.validate()
    except ValueError as e:
        logger.error(f"Configuration error: {e}")
        sys.exit(1)

    if args.score is not None:
        sys.exit(score_file(args.score, strict_total=config.STRICT_TOTAL, explain=args.explain))

    import uvicorn
    from receipt_points.api.main import app

    logger.info(f"Server running on {config.HOST}:{config.PORT} (strict total: {config.STRICT_TOTAL})")
    try:
        uvicorn.run(app, host=config.HOST, port=config.PORT, log_config=None)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        sys.exit(1)


if __name__ == "__main__":
    main()
