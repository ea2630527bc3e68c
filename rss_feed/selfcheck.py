"""Self-check suite exercising the feed manager through its test doubles."""

from typing import TextIO

from .feed import RSSFeedManager
from .harness import TestRunner
from .mocks import MockFetch, MockItem
from .models import FeedItem

SAMPLE_FEED_XML = """<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0">
    <channel>
        <item>
            <title>Test News</title>
            <link>https://example.com/news</link>
            <description>Test news description</description>
            <pubDate>Mon, 13 Jan 2025 12:00:00 GMT</pubDate>
        </item>
    </channel>
</rss>"""

SAMPLE_ITEM = FeedItem(
    title="Test Title",
    link="https://example.com",
    description="Test description...",
    pub_date="1/13/2025",
)


def register_feed_tests(runner: TestRunner) -> None:
    """Register the feed manager cases on ``runner``."""

    def initialization():
        manager = RSSFeedManager()
        runner.assert_equal(manager.rss_url, "https://distrowatch.com/news/dw.xml")
        runner.assert_("api.allorigins.win" in manager.proxy_url)

    def parse_valid_items():
        items = RSSFeedManager().parse_items(
            [
                MockItem(
                    {
                        "title": "Test Title 1",
                        "link": "https://example.com/1",
                        "description": "Test description 1 with some content",
                        "pubDate": "Mon, 13 Jan 2025 12:00:00 GMT",
                    }
                ),
                MockItem(
                    {
                        "title": "Test Title 2",
                        "link": "https://example.com/2",
                        "description": "Test description 2 with different content",
                        "pubDate": "Tue, 14 Jan 2025 12:00:00 GMT",
                    }
                ),
            ]
        )
        runner.assert_equal(len(items), 2)
        runner.assert_equal(items[0].title, "Test Title 1")
        runner.assert_equal(items[0].link, "https://example.com/1")
        runner.assert_("Test description 1" in items[0].description)
        runner.assert_("2025" in items[0].pub_date)

    def parse_missing_fields():
        items = RSSFeedManager().parse_items([MockItem({"title": "Only Title"})])
        runner.assert_equal(len(items), 1)
        runner.assert_equal(items[0].title, "Only Title")
        runner.assert_equal(items[0].link, "#")
        runner.assert_equal(items[0].description, "...")
        runner.assert_equal(items[0].pub_date, "Invalid Date")

    def generate_html():
        html = RSSFeedManager().generate_html([SAMPLE_ITEM])
        runner.assert_contains(html, "Test Title")
        runner.assert_contains(html, "https://example.com")
        runner.assert_contains(html, "Test description...")
        runner.assert_contains(html, "1/13/2025")
        runner.assert_contains(html, "rss-item")

    def generate_empty_html():
        html = RSSFeedManager().generate_html([])
        runner.assert_contains(html, "error")
        runner.assert_contains(html, "No RSS items found")

    def limit_items():
        nodes = [MockItem(default=f"Item {index + 1}") for index in range(10)]
        runner.assert_equal(len(RSSFeedManager().parse_items(nodes)), 5)

    def truncate_descriptions():
        node = MockItem({"description": "a" * 300}, default="Test")
        items = RSSFeedManager().parse_items([node])
        runner.assert_(len(items[0].description) <= 203)
        runner.assert_(items[0].description.endswith("..."))

    def fetch_success():
        fetch = MockFetch({"contents": SAMPLE_FEED_XML})
        items = RSSFeedManager().fetch_rss(fetch.fetch)
        runner.assert_(len(items) > 0)
        runner.assert_equal(items[0].title, "Test News")

    def fetch_failure():
        fetch = MockFetch({}, should_fail=True)
        try:
            RSSFeedManager().fetch_rss(fetch.fetch)
        except Exception as e:
            runner.assert_("Network error" in str(e))
        else:
            runner.assert_(False, "Should have thrown an error")

    def format_dates():
        node = MockItem(default="Mon, 13 Jan 2025 12:00:00 GMT")
        pub_date = RSSFeedManager().parse_items([node])[0].pub_date
        runner.assert_("2025" in pub_date)
        runner.assert_("1" in pub_date)
        runner.assert_("13" in pub_date)

    def verify_styling():
        styles = RSSFeedManager().verify_styling()
        runner.assert_equal(styles["rssSection"]["background"], "white")
        runner.assert_equal(styles["rssSection"]["color"], "#333")
        runner.assert_equal(styles["rssItem"]["background"], "#f8f9fa")
        runner.assert_contains(styles["rssItem"]["borderLeft"], "#7cc9d1")
        runner.assert_equal(styles["rssLink"]["color"], "#0066cc")

    def css_classes():
        html = RSSFeedManager().generate_html([SAMPLE_ITEM])
        runner.assert_contains(html, 'class="rss-item"')
        runner.assert_contains(html, 'class="rss-date"')
        runner.assert_contains(html, 'class="rss-description"')
        runner.assert_contains(html, "<h3><a href=")
        runner.assert_contains(html, 'target="_blank"')

    runner.test("RSSFeedManager should initialize with correct URL", initialization)
    runner.test("Should parse RSS items correctly", parse_valid_items)
    runner.test("Should handle missing RSS item data gracefully", parse_missing_fields)
    runner.test("Should generate correct HTML from RSS items", generate_html)
    runner.test("Should generate error message for empty RSS items", generate_empty_html)
    runner.test("Should limit RSS items to 5 maximum", limit_items)
    runner.test("Should truncate descriptions to 200 characters", truncate_descriptions)
    runner.test("Should fetch RSS data successfully", fetch_success)
    runner.test("Should handle RSS fetch failure gracefully", fetch_failure)
    runner.test("Should format dates correctly", format_dates)
    runner.test("Should verify correct CSS styling for RSS feed", verify_styling)
    runner.test(
        "Should generate HTML with correct CSS classes for white background",
        css_classes,
    )


def run_rss_feed_tests(stream: TextIO | None = None) -> bool:
    """Run the self-check suite and return True if every case passed."""
    runner = TestRunner(stream=stream)
    register_feed_tests(runner)
    return runner.run()
