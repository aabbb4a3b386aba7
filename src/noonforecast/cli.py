# host bootstrap: explicit startup fetch, then a plain text rendering of the board

from __future__ import annotations
import argparse
import asyncio
import logging
import sys
from typing import List, Optional
from .client import ForecastAPIError
from .service import ForecastParseError
from .state import ForecastBoard

logger = logging.getLogger(__name__)

DEFAULT_CITY = "London"

def setup_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    # requests/urllib3 connection chatter is not useful at INFO
    logging.getLogger("urllib3").setLevel(logging.WARNING)

def render(board: ForecastBoard) -> List[str]:
    lines = [board.city_title]
    for s in board.forecast:
        lines.append(f"{s.day_label}  {s.temperature}°C  {s.description}  {s.icon}")
    return lines

def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="noonforecast", description="5 day noon forecast for one city")
    parser.add_argument("city", nargs="?", default=DEFAULT_CITY)
    parser.add_argument("--log-level", default="INFO")
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    board = ForecastBoard(city=args.city, city_title=args.city)
    try:
        asyncio.run(board.refresh())
    except (ForecastAPIError, ForecastParseError) as exc:
        logger.error("forecast refresh failed: %s", exc)
        return 1

    for line in render(board):
        print(line)
    return 0

if __name__ == "__main__":
    sys.exit(main())
