from __future__ import annotations

import argparse
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from scrobblewatch.app import build_lastfm_source, watch_now_playing
from scrobblewatch.config import (
    ConfigurationError,
    configure_logging,
    get_lastfm_config,
    require_env_var,
)

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from scrobblewatch.domain.model import CurrentTrack

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Show the track a Last.fm user is playing")
    parser.add_argument(
        "--user",
        type=str,
        help="Last.fm user name (defaults to LASTFM_USER_NAME)",
    )
    parser.add_argument(
        "--api-key",
        type=str,
        help="Personal Last.fm API key (defaults to LASTFM_API_KEY)",
    )
    parser.add_argument(
        "--interval",
        type=float,
        default=1.0,
        help="Seconds between refreshes (default: %(default)s)",
    )
    parser.add_argument(
        "--once",
        action="store_true",
        help="Refresh a single time and exit",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args(list(argv))


def _report(track: CurrentTrack) -> None:
    if track.is_empty:
        log.info("Nothing playing")
        return
    state = "Now playing" if track.playing else "Last played"
    log.info(f"{state}: {track.describe()}")


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    parsed_args = _parse_args(sys.argv[1:] if argv is None else argv)
    configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)

    try:
        if parsed_args.interval <= 0:
            raise ValueError("Interval must be positive")
        user_name = parsed_args.user or require_env_var("LASTFM_USER_NAME")
        config = get_lastfm_config(user_name=user_name, api_key=parsed_args.api_key)
    except (ConfigurationError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)  # noqa: T201
        sys.exit(2)

    source = build_lastfm_source(config)
    try:
        watch_now_playing(
            source,
            interval_seconds=parsed_args.interval,
            iterations=1 if parsed_args.once else None,
            on_update=_report,
        )
    finally:
        source.client.close()


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
