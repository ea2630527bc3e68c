"""DistroWatch RSS feed widget: fetch, normalize and render feed items."""

from .config import Config, FeedConfig
from .feed import RSSFeedManager, format_pub_date, truncate_description
from .harness import TestRunner
from .mocks import MockDOM, MockFetch, MockItem
from .models import FeedItem
from .selfcheck import run_rss_feed_tests

__all__ = [
    "Config",
    "FeedConfig",
    "FeedItem",
    "MockDOM",
    "MockFetch",
    "MockItem",
    "RSSFeedManager",
    "TestRunner",
    "format_pub_date",
    "run_rss_feed_tests",
    "truncate_description",
]
