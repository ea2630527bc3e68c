"""Data models for the RSS feed widget."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FeedItem:
    """Represents a single normalized RSS item, ready for rendering."""

    title: str
    link: str
    description: str
    pub_date: str

    def as_dict(self) -> dict[str, str]:
        """Return the item in its wire shape (camelCase ``pubDate``)."""
        return {
            "title": self.title,
            "link": self.link,
            "description": self.description,
            "pubDate": self.pub_date,
        }
