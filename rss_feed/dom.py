"""Default DOM-parsing collaborator built on BeautifulSoup."""

from bs4 import BeautifulSoup

XML_MIME_TYPES = ("text/xml", "application/xml", "application/rss+xml")


def parse_document(text: str, mime_type: str = "text/xml") -> BeautifulSoup:
    """Parse ``text`` into a queryable document.

    XML media types use the lxml XML parser, which keeps tag names such as
    ``pubDate`` case-sensitive and treats ``<link>`` as a normal element.
    Anything else is parsed as HTML.

    Args:
        text: Raw document text
        mime_type: Media type of the document

    Returns:
        Document exposing ``select`` and ``select_one``
    """
    features = "xml" if mime_type in XML_MIME_TYPES else "html.parser"
    return BeautifulSoup(text or "", features)
