from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

import uvicorn

from coviddash.utils.env import get_log_level, get_port


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="COVID-19 country dashboard server.")
    parser.add_argument(
        "--port",
        type=int,
        default=get_port(),
        help="Port number the server should run on (default: 4040).",
    )
    parser.add_argument(
        "--host",
        default="0.0.0.0",
        help="Interface to bind (default: 0.0.0.0).",
    )
    parser.add_argument(
        "--log-level",
        default=get_log_level(),
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: INFO).",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(
        "coviddash.main:app",
        host=args.host,
        port=args.port,
        log_level=args.log_level.lower(),
        timeout_keep_alive=15,
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
