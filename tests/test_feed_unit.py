"""Unit tests for the RSS feed manager."""

import pytest
import requests

from rss_feed.config import FeedConfig
from rss_feed.feed import RSSFeedManager, format_pub_date, truncate_description
from rss_feed.mocks import MockFetch, MockItem
from rss_feed.models import FeedItem

FEED_XML = """<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0">
    <channel>
        <title>DistroWatch.com: News</title>
        <item>
            <title>Test News</title>
            <link>https://example.com/news</link>
            <description>Test news description</description>
            <pubDate>Mon, 13 Jan 2025 12:00:00 GMT</pubDate>
        </item>
        <item>
            <title>Second</title>
        </item>
    </channel>
</rss>"""


class TestRSSFeedManagerUnit:
    """Unit tests for RSSFeedManager."""

    def setup_method(self):
        self.manager = RSSFeedManager()

    def test_initializes_with_fixed_urls(self):
        assert self.manager.rss_url == "https://distrowatch.com/news/dw.xml"
        assert self.manager.proxy_url == "https://api.allorigins.win/get?url="

    def test_request_url_percent_encodes_feed_url(self):
        assert self.manager.request_url == (
            "https://api.allorigins.win/get?url="
            "https%3A%2F%2Fdistrowatch.com%2Fnews%2Fdw.xml"
        )

    def test_parse_items_reads_all_fields(self):
        items = self.manager.parse_items(
            [
                MockItem(
                    {
                        "title": "Test Title 1",
                        "link": "https://example.com/1",
                        "description": "Test description 1 with some content",
                        "pubDate": "Mon, 13 Jan 2025 12:00:00 GMT",
                    }
                )
            ]
        )

        assert items == [
            FeedItem(
                title="Test Title 1",
                link="https://example.com/1",
                description="Test description 1 with some content...",
                pub_date="1/13/2025",
            )
        ]

    def test_parse_items_missing_fields_use_defaults(self):
        """Absent elements and empty text both fall back to defaults."""
        absent = MockItem(default=None)
        empty = MockItem(default="")

        for node in (absent, empty):
            (item,) = self.manager.parse_items([node])
            assert item == FeedItem(
                title="No title", link="#", description="...", pub_date="Invalid Date"
            )

    def test_parse_items_keeps_input_order(self):
        nodes = [MockItem({"title": f"Item {i}"}) for i in range(3)]

        titles = [item.title for item in self.manager.parse_items(nodes)]

        assert titles == ["Item 0", "Item 1", "Item 2"]

    def test_parse_items_caps_at_five(self):
        nodes = [MockItem(default=f"Item {i + 1}") for i in range(10)]

        items = self.manager.parse_items(nodes)

        assert len(items) == 5
        assert items[-1].title == "Item 5"

    def test_parse_items_accepts_generator(self):
        consumed = []

        def nodes():
            for i in range(8):
                consumed.append(i)
                yield MockItem({"title": str(i)})

        assert len(self.manager.parse_items(nodes())) == 5
        assert consumed == [0, 1, 2, 3, 4]

    def test_parse_items_respects_configured_limits(self):
        manager = RSSFeedManager(FeedConfig(max_items=2, description_limit=4))
        nodes = [MockItem({"description": "abcdefgh"}) for _ in range(3)]

        items = manager.parse_items(nodes)

        assert len(items) == 2
        assert items[0].description == "abcd..."

    def test_generate_html_empty(self):
        assert (
            self.manager.generate_html([])
            == '<div class="error">No RSS items found</div>'
        )

    def test_generate_html_single_item(self):
        item = FeedItem(
            title="T", link="https://x", description="D", pub_date="P"
        )

        html = self.manager.generate_html([item])

        assert 'class="rss-item"' in html
        assert '<h3><a href="https://x" target="_blank">T</a></h3>' in html
        assert '<p class="rss-date">P</p>' in html
        assert '<p class="rss-description">D</p>' in html

    def test_generate_html_preserves_order(self):
        items = [
            FeedItem(title=f"Title {i}", link="#", description="", pub_date="")
            for i in range(3)
        ]

        html = self.manager.generate_html(items)

        assert html.count('class="rss-item"') == 3
        assert html.index("Title 0") < html.index("Title 1") < html.index("Title 2")

    def test_generate_html_accepts_wire_mappings(self):
        html = self.manager.generate_html(
            [
                {
                    "title": "Test Title",
                    "link": "https://example.com",
                    "description": "Test description...",
                    "pubDate": "1/13/2025",
                }
            ]
        )

        assert "Test Title" in html
        assert "1/13/2025" in html

    def test_verify_styling(self):
        styles = self.manager.verify_styling()

        assert styles["rssSection"] == {"background": "white", "color": "#333"}
        assert styles["rssItem"]["background"] == "#f8f9fa"
        assert "#7cc9d1" in styles["rssItem"]["borderLeft"]
        assert styles["rssLink"]["color"] == "#0066cc"

    def test_verify_styling_returns_fresh_copy(self):
        self.manager.verify_styling()["rssLink"]["color"] = "red"

        assert self.manager.verify_styling()["rssLink"]["color"] == "#0066cc"


class TestFetchRSSUnit:
    """Unit tests for RSSFeedManager.fetch_rss."""

    def test_fetch_success_with_real_parser(self):
        fetch = MockFetch({"contents": FEED_XML})

        items = RSSFeedManager().fetch_rss(fetch.fetch)

        assert len(items) == 2
        assert items[0].title == "Test News"
        assert items[0].link == "https://example.com/news"
        assert items[0].description == "Test news description..."
        assert items[0].pub_date == "1/13/2025"
        assert items[1] == FeedItem(
            title="Second", link="#", description="...", pub_date="Invalid Date"
        )

    def test_fetch_requests_proxy_url(self):
        fetch = MockFetch({"contents": FEED_XML})
        manager = RSSFeedManager()

        manager.fetch_rss(fetch)

        assert fetch.calls == [manager.request_url]

    def test_fetch_uses_injected_parser(self):
        calls = []

        class Document:
            def select(self, tag):
                calls.append(tag)
                return [MockItem({"title": "From parser"})]

        def parser(text, mime_type):
            calls.append((text, mime_type))
            return Document()

        items = RSSFeedManager().fetch_rss(
            MockFetch({"contents": "<rss/>"}), dom_parser=parser
        )

        assert calls == [("<rss/>", "text/xml"), "item"]
        assert items[0].title == "From parser"

    def test_fetch_failure_propagates_unchanged(self, caplog):
        fetch = MockFetch({}, should_fail=True)

        with pytest.raises(requests.ConnectionError, match="Network error"):
            RSSFeedManager().fetch_rss(fetch.fetch)

        errors = [r for r in caplog.records if r.levelname == "ERROR"]
        assert len(errors) == 1
        assert "Network error" in errors[0].getMessage()

    def test_fetch_missing_contents_returns_no_items(self):
        """An envelope without contents parses as an empty document."""
        assert RSSFeedManager().fetch_rss(MockFetch({})) == []
        assert RSSFeedManager().fetch_rss(MockFetch({"contents": None})) == []

    def test_fetch_empty_feed_returns_no_items(self):
        fetch = MockFetch({"contents": "<rss><channel></channel></rss>"})

        assert RSSFeedManager().fetch_rss(fetch) == []


class TestFieldHelpersUnit:
    """Unit tests for description truncation and date formatting."""

    def test_truncate_always_appends_ellipsis(self):
        assert truncate_description("short") == "short..."
        assert truncate_description("") == "..."

    def test_truncate_long_description(self):
        result = truncate_description("a" * 300)

        assert len(result) == 203
        assert result.endswith("...")

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("Mon, 13 Jan 2025 12:00:00 GMT", "1/13/2025"),
            ("Tue, 14 Jan 2025 23:30:00 +0200", "1/14/2025"),
            ("2024-12-01T08:00:00Z", "12/1/2024"),
        ],
    )
    def test_format_pub_date(self, raw, expected):
        assert format_pub_date(raw) == expected

    @pytest.mark.parametrize("raw", ["", "   ", "Test", "garbage"])
    def test_format_pub_date_invalid(self, raw):
        assert format_pub_date(raw) == "Invalid Date"
