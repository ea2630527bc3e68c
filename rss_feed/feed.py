"""RSS feed fetching, normalization and HTML rendering."""

import copy
from collections.abc import Callable, Iterable, Mapping
from itertools import islice
from typing import Any
from urllib.parse import quote

from dateutil import parser as date_parser

from .config import FeedConfig
from .dom import parse_document
from .http import default_network_client
from .logging_config import create_execution_logger
from .models import FeedItem

INVALID_DATE = "Invalid Date"
EMPTY_FEED_HTML = '<div class="error">No RSS items found</div>'

# Child element name -> default used when the element is missing or empty
FIELD_DEFAULTS = {
    "title": "No title",
    "link": "#",
    "description": "",
    "pubDate": "",
}

STYLES = {
    "rssSection": {"background": "white", "color": "#333"},
    "rssItem": {"background": "#f8f9fa", "borderLeft": "4px solid #7cc9d1"},
    "rssLink": {"color": "#0066cc"},
}

ITEM_TEMPLATE = """
    <div class="rss-item">
        <h3><a href="{link}" target="_blank">{title}</a></h3>
        <p class="rss-date">{pub_date}</p>
        <p class="rss-description">{description}</p>
    </div>
"""


def truncate_description(text: str, limit: int = 200, ellipsis: str = "...") -> str:
    """Cut ``text`` to ``limit`` characters and append ``ellipsis``.

    The ellipsis is appended even when nothing was cut.
    """
    return text[:limit] + ellipsis


def format_pub_date(text: str) -> str:
    """Render a feed date as a short ``M/D/YYYY`` date.

    The calendar date is taken as written in the feed, without converting
    to the local timezone. Unparseable input yields ``Invalid Date``.
    """
    if not text or not text.strip():
        return INVALID_DATE

    try:
        published = date_parser.parse(text)
    except (ValueError, OverflowError):
        return INVALID_DATE

    return f"{published.month}/{published.day}/{published.year}"


def _read_field(node: Any, name: str) -> str:
    element = node.select_one(name)
    text = getattr(element, "text", None) if element is not None else None
    return text or FIELD_DEFAULTS[name]


class RSSFeedManager:
    """Fetches the feed through the proxy and turns its items into HTML."""

    def __init__(
        self, config: FeedConfig | None = None, execution_id: str | None = None
    ):
        """Initialize the manager.

        Args:
            config: Feed configuration; defaults to the DistroWatch feed
            execution_id: Execution ID for logging context
        """
        self.config = config or FeedConfig()
        self.logger = create_execution_logger("feed_manager", execution_id)

    @property
    def rss_url(self) -> str:
        return self.config.rss_url

    @property
    def proxy_url(self) -> str:
        return self.config.proxy_url

    @property
    def request_url(self) -> str:
        """Proxy URL with the percent-encoded feed URL appended."""
        return self.proxy_url + quote(self.rss_url, safe="")

    def fetch_rss(
        self,
        network_client: Callable[[str], Any] | None = None,
        dom_parser: Callable[[str, str], Any] | None = None,
    ) -> list[FeedItem]:
        """Fetch the feed and return its normalized items.

        Args:
            network_client: Fetch capability taking a URL and returning a
                response with a ``json()`` accessor
            dom_parser: Parser taking ``(text, mime_type)`` and returning a
                document exposing ``select``

        Returns:
            At most ``max_items`` normalized items

        Raises:
            Exception: Whatever the network client or parser raised, unchanged
        """
        network_client = network_client or default_network_client
        dom_parser = dom_parser or parse_document
        url = self.request_url

        try:
            self.logger.info("Fetching feed", feed_url=self.rss_url, request_url=url)
            response = network_client(url)
            data = response.json()
            document = dom_parser(data.get("contents"), "text/xml")
            items = self.parse_items(document.select("item"))
        except Exception as e:
            self.logger.error(
                f"Error fetching RSS: {e}", feed_url=self.rss_url, error=str(e)
            )
            raise

        self.logger.log_feed_processing(self.rss_url, len(items))
        return items

    def parse_items(self, nodes: Iterable[Any]) -> list[FeedItem]:
        """Normalize the first ``max_items`` raw item nodes.

        Missing or empty fields fall back to defaults; malformed nodes never
        raise.

        Args:
            nodes: Item nodes exposing ``select_one(name)``

        Returns:
            Normalized items in input order
        """
        items = []
        for node in islice(nodes, self.config.max_items):
            description = truncate_description(
                _read_field(node, "description"),
                self.config.description_limit,
                self.config.ellipsis,
            )
            items.append(
                FeedItem(
                    title=_read_field(node, "title"),
                    link=_read_field(node, "link"),
                    description=description,
                    pub_date=format_pub_date(_read_field(node, "pubDate")),
                )
            )
        return items

    def generate_html(self, items: Iterable[FeedItem | Mapping[str, str]]) -> str:
        """Render items as concatenated ``rss-item`` blocks.

        Values are interpolated as given; feed descriptions may carry markup.

        Args:
            items: Normalized items, or mappings in the wire shape

        Returns:
            HTML fragment, or the error fragment when there are no items
        """
        blocks = []
        for item in items:
            if isinstance(item, Mapping):
                item = FeedItem(
                    title=item["title"],
                    link=item["link"],
                    description=item["description"],
                    pub_date=item["pubDate"],
                )
            blocks.append(
                ITEM_TEMPLATE.format(
                    link=item.link,
                    title=item.title,
                    pub_date=item.pub_date,
                    description=item.description,
                )
            )

        if not blocks:
            return EMPTY_FEED_HTML

        return "".join(blocks)

    def verify_styling(self) -> dict[str, dict[str, str]]:
        """Return the expected style values of the feed section."""
        return copy.deepcopy(STYLES)
