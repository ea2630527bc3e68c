"""Command-line entry point for the RSS feed widget."""

import argparse
import json
import sys
from datetime import UTC, datetime
from pathlib import Path

from .config import Config
from .feed import RSSFeedManager
from .http import NetworkClient
from .logging_config import create_execution_logger, setup_structured_logging
from .selfcheck import run_rss_feed_tests


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Render the DistroWatch news feed as HTML")
    p.add_argument("--json", action="store_true", help="Print normalized items as JSON")
    p.add_argument("--output", type=Path, default=None, help="Write output to this file")
    p.add_argument("--self-test", action="store_true", help="Run the self-check suite")
    p.add_argument("--log-level", default=None, help="Override LOG_LEVEL")
    return p.parse_args(argv)


def render_feed(config: Config, as_json: bool = False) -> str:
    """
    Fetch the configured feed and render it.

    Args:
        config: Loaded configuration
        as_json: Render normalized items as JSON instead of HTML

    Returns:
        Rendered HTML fragment or JSON document

    Raises:
        Exception: Whatever the fetch raised, after it has been logged
    """
    execution_id = f"cli_{datetime.now(UTC).strftime('%Y%m%d_%H%M%S_%f')}"
    main_logger = create_execution_logger("main", execution_id)
    main_logger.log_execution_start(feed_url=config.rss_url)

    manager = RSSFeedManager(config.get_feed_config(), execution_id=execution_id)
    client = NetworkClient(timeout=config.request_timeout, execution_id=execution_id)

    try:
        items = manager.fetch_rss(client)
    except Exception as e:
        main_logger.log_execution_end(success=False, error=str(e))
        raise

    if as_json:
        output = json.dumps([item.as_dict() for item in items], indent=2, ensure_ascii=False)
    else:
        output = manager.generate_html(items)

    main_logger.log_execution_end(success=True, items_count=len(items))
    return output


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    config = Config()
    setup_structured_logging(args.log_level or config.log_level)

    if args.self_test:
        return 0 if run_rss_feed_tests() else 1

    try:
        output = render_feed(config, as_json=args.json)
    except Exception:
        return 1

    if args.output:
        args.output.write_text(output, encoding="utf-8")
    else:
        sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
