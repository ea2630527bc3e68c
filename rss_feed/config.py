"""Configuration management for the RSS feed widget."""

import os
from dataclasses import dataclass

DEFAULT_RSS_URL = "https://distrowatch.com/news/dw.xml"
DEFAULT_PROXY_URL = "https://api.allorigins.win/get?url="


@dataclass(frozen=True)
class FeedConfig:
    """Configuration for a single feed manager."""

    rss_url: str = DEFAULT_RSS_URL
    proxy_url: str = DEFAULT_PROXY_URL
    max_items: int = 5
    description_limit: int = 200
    ellipsis: str = "..."


class Config:
    """Main configuration manager."""

    def __init__(self):
        """Initialize configuration from environment variables."""
        self.rss_url = os.getenv("RSS_FEED_URL", DEFAULT_RSS_URL)
        self.proxy_url = os.getenv("RSS_PROXY_URL", DEFAULT_PROXY_URL)
        self.log_level = os.getenv("LOG_LEVEL", "INFO")

        timeout = os.getenv("REQUEST_TIMEOUT", "30")
        try:
            self.request_timeout = int(timeout)
        except ValueError:
            raise ValueError(f"REQUEST_TIMEOUT must be an integer: {timeout!r}")

    def get_feed_config(self) -> FeedConfig:
        """Get feed manager configuration."""
        return FeedConfig(rss_url=self.rss_url, proxy_url=self.proxy_url)
