"""RSS item builder for RSS Generator."""

import xml.etree.ElementTree as ET
from datetime import datetime, tzinfo
from typing import TYPE_CHECKING

from .models import Category, Enclosure, Guid, Source
from .xml_utils import add_text_element, format_rfc822, set_attributes

if TYPE_CHECKING:
    from .channel import Channel


class Item:
    """A single feed entry, serialized as an ``<item>`` element."""

    def __init__(self):
        self._title: str | None = None
        self._link: str | None = None
        self._description: str | None = None
        self._author: str | None = None
        self._categories: list[Category] = []
        self._comments: str | None = None
        self._enclosure: Enclosure | None = None
        self._guid: Guid | None = None
        self._pub_date: int | float | datetime | None = None
        self._source: Source | None = None

    def title(self, title: str) -> "Item":
        """Set item title."""
        self._title = title
        return self

    def link(self, link: str) -> "Item":
        """Set item URL."""
        self._link = link
        return self

    def description(self, description: str) -> "Item":
        """Set item synopsis."""
        self._description = description
        return self

    def author(self, author: str) -> "Item":
        """Set email address of the item author."""
        self._author = author
        return self

    def category(self, name: str, domain: str | None = None) -> "Item":
        """Add a category; may be called repeatedly.

        Args:
            name: Category name
            domain: Optional URL identifying the categorization taxonomy
        """
        self._categories.append(Category(name, domain))
        return self

    def comments(self, url: str) -> "Item":
        """Set URL of the item comments page."""
        self._comments = url
        return self

    def enclosure(
        self, url: str, length: int = 0, type: str = "audio/mpeg"
    ) -> "Item":
        """Attach a media object, replacing any previous one.

        Args:
            url: URL of the media file
            length: Size of the media file in bytes
            type: MIME type of the media file
        """
        self._enclosure = Enclosure(url, length, type)
        return self

    def guid(self, guid: str, is_permalink: bool | None = None) -> "Item":
        """Set the item identifier.

        Args:
            guid: Unique identifier string
            is_permalink: When given, emitted as the ``isPermaLink`` attribute
        """
        self._guid = Guid(guid, is_permalink)
        return self

    def pub_date(self, pub_date: int | float | datetime) -> "Item":
        """Set publication date as a Unix timestamp or datetime."""
        self._pub_date = pub_date
        return self

    def source(self, name: str, url: str) -> "Item":
        """Set the channel the item came from, replacing any previous one."""
        self._source = Source(name, url)
        return self

    def append_to(self, channel: "Channel") -> "Item":
        """Append item to the channel."""
        channel.add_item(self)
        return self

    def as_xml(self, zone: tzinfo | None = None) -> ET.Element:
        """Build the ``<item>`` element.

        Args:
            zone: Zone used to format pubDate (local time when None)

        Returns:
            A freshly built element tree
        """
        xml = ET.Element("item")
        add_text_element(xml, "title", self._title)
        add_text_element(xml, "link", self._link)
        add_text_element(xml, "description", self._description)

        if self._author is not None:
            add_text_element(xml, "author", self._author)

        for category in self._categories:
            add_text_element(xml, "category", category.name, domain=category.domain)

        if self._comments:
            add_text_element(xml, "comments", self._comments)

        enclosure = self._enclosure
        if enclosure and enclosure.url is not None and enclosure.type is not None:
            set_attributes(
                ET.SubElement(xml, "enclosure"),
                url=enclosure.url,
                type=enclosure.type,
                length=enclosure.length or None,
            )

        if self._guid and self._guid.value:
            is_permalink = self._guid.is_permalink
            if is_permalink is not None:
                is_permalink = "true" if is_permalink else "false"
            add_text_element(xml, "guid", self._guid.value, isPermaLink=is_permalink)

        if self._pub_date is not None:
            add_text_element(xml, "pubDate", format_rfc822(self._pub_date, zone))

        if self._source and self._source.name and self._source.url:
            add_text_element(xml, "source", self._source.name, url=self._source.url)

        return xml
