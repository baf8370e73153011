"""RSS channel builder for RSS Generator."""

import xml.etree.ElementTree as ET
from datetime import datetime, tzinfo
from typing import TYPE_CHECKING

from .item import Item
from .logging_config import create_execution_logger
from .models import Category, Cloud, Image, TextInput, ValidationError
from .xml_utils import add_text_element, format_rfc822, set_attributes

if TYPE_CHECKING:
    from .feed import Feed

GENERATOR = "https://pypi.org/project/rss-generator/"
DOCS = "https://www.rssboard.org/rss-specification"

IMAGE_MAX_WIDTH = 144
IMAGE_MAX_HEIGHT = 400

WEEKDAYS = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)


class Channel:
    """Feed metadata plus its items, serialized as a ``<channel>`` element."""

    def __init__(self, execution_id: str | None = None):
        """Initialize an empty channel.

        Args:
            execution_id: Execution ID for logging context
        """
        self.logger = create_execution_logger("channel", execution_id)

        self._title: str | None = None
        self._link: str | None = None
        self._description: str | None = None
        self._language: str | None = None
        self._copyright: str | None = None
        self._managing_editor: str | None = None
        self._web_master: str | None = None
        self._pub_date: int | float | datetime | None = None
        self._last_build_date: int | float | datetime | None = None
        self._category: Category | None = None
        self._cloud: Cloud | None = None
        self._ttl: int | None = None
        self._image: Image | None = None
        self._rating: str | None = None
        self._text_input: TextInput | None = None
        self._skip_hours: list[int] = []
        self._skip_days: list[str] = []
        self._items: list[Item] = []

    def title(self, title: str) -> "Channel":
        """Set channel title."""
        self._title = title
        return self

    def link(self, link: str) -> "Channel":
        """Set URL of the website corresponding to the channel."""
        self._link = link
        return self

    def description(self, description: str) -> "Channel":
        """Set channel description."""
        self._description = description
        return self

    def language(self, language: str) -> "Channel":
        """Set the language the channel is written in (e.g. ``en-us``)."""
        self._language = language
        return self

    def copyright(self, copyright: str) -> "Channel":
        """Set copyright notice for content in the channel."""
        self._copyright = copyright
        return self

    def managing_editor(self, managing_editor: str) -> "Channel":
        """Set email address of the person responsible for editorial content."""
        self._managing_editor = managing_editor
        return self

    def web_master(self, web_master: str) -> "Channel":
        """Set email address of the person responsible for technical issues."""
        self._web_master = web_master
        return self

    def pub_date(self, pub_date: int | float | datetime) -> "Channel":
        """Set publication date as a Unix timestamp or datetime."""
        self._pub_date = pub_date
        return self

    def last_build_date(self, last_build_date: int | float | datetime) -> "Channel":
        """Set the last time the channel content changed."""
        self._last_build_date = last_build_date
        return self

    def category(self, name: str, domain: str | None = None) -> "Channel":
        """Set the category the channel belongs to."""
        self._category = Category(name, domain)
        return self

    def cloud(
        self,
        domain: str,
        port: int,
        path: str,
        register_procedure: str,
        protocol: str,
    ) -> "Channel":
        """Register an rssCloud endpoint, replacing any previous one."""
        self._cloud = Cloud(domain, port, path, register_procedure, protocol)
        return self

    def ttl(self, ttl: int) -> "Channel":
        """Set time to live in minutes."""
        self._ttl = ttl
        return self

    def image(
        self,
        url: str,
        title: str,
        link: str,
        width: int = 88,
        height: int = 31,
        description: str | None = None,
    ) -> "Channel":
        """Set the channel image.

        The title is used as the alt attribute when the image is shown in
        HTML; the link should be the URL of the site.

        Args:
            url: URL of a GIF, JPEG or PNG image
            title: Describes the image
            link: URL the image links to
            width: Width in pixels, 1 to 144
            height: Height in pixels, 1 to 400
            description: Optional title attribute of the link

        Raises:
            ValidationError: If width or height is out of range
        """
        if width < 1 or width > IMAGE_MAX_WIDTH:
            self._reject(
                "width",
                width,
                "Width is out of range. "
                f"Width should be from 1 to {IMAGE_MAX_WIDTH}",
            )
        if height < 1 or height > IMAGE_MAX_HEIGHT:
            self._reject(
                "height",
                height,
                "Height is out of range. "
                f"Height should be from 1 to {IMAGE_MAX_HEIGHT}",
            )

        self._image = Image(url, title, link, width, height, description)
        return self

    def rating(self, rating: str) -> "Channel":
        """Set the PICS rating for the channel."""
        self._rating = rating
        return self

    def text_input(
        self, title: str, link: str, name: str, description: str
    ) -> "Channel":
        """Set the text input box, replacing any previous one.

        Args:
            title: Label of the Submit button
            link: URL of the CGI script that processes text input requests
            name: Name of the text object
            description: Explains the text input area
        """
        self._text_input = TextInput(title, link, name, description)
        return self

    def skip_hours(self, hours: list[int]) -> "Channel":
        """Set hours (0-23, GMT) during which aggregators may skip reading.

        Duplicates are dropped, keeping the first occurrence.

        Raises:
            ValidationError: If any value is not an integer between 0 and 23
        """
        hours = list(hours)
        for hour in hours:
            is_int = isinstance(hour, int) and not isinstance(hour, bool)
            if not is_int or not 0 <= hour <= 23:
                self._reject(
                    "skipHours",
                    hour,
                    "The list must contain integer numbers between 0 and 23",
                )

        self._skip_hours = list(dict.fromkeys(hours))
        return self

    def skip_days(self, days: list[str]) -> "Channel":
        """Set weekdays (``Sunday`` .. ``Saturday``) aggregators may skip.

        Raises:
            ValidationError: If any value is not an English weekday name
        """
        days = list(days)
        for day in days:
            if day not in WEEKDAYS:
                self._reject("skipDays", day, "The list must contain days of week")

        self._skip_days = list(dict.fromkeys(days))
        return self

    def add_item(self, item: Item) -> "Channel":
        """Add an item; items render in the order they were added."""
        self._items.append(item)
        return self

    def append_to(self, feed: "Feed") -> "Channel":
        """Append channel to the feed."""
        feed.add_channel(self)
        return self

    @property
    def item_count(self) -> int:
        """Number of items added to the channel."""
        return len(self._items)

    def _reject(self, field: str, value, message: str) -> None:
        self.logger.log_validation_failure(field, value, message)
        raise ValidationError(message)

    def as_xml(self, zone: tzinfo | None = None) -> ET.Element:
        """Build the ``<channel>`` element with all of its items.

        Args:
            zone: Zone used to format dates (local time when None)

        Returns:
            A freshly built element tree
        """
        xml = ET.Element("channel")
        add_text_element(xml, "title", self._title)
        add_text_element(xml, "link", self._link)
        add_text_element(xml, "description", self._description)

        optional_text = (
            ("language", self._language),
            ("copyright", self._copyright),
            ("managingEditor", self._managing_editor),
            ("webMaster", self._web_master),
        )
        for tag, value in optional_text:
            if value is not None:
                add_text_element(xml, tag, value)

        if self._pub_date is not None:
            add_text_element(xml, "pubDate", format_rfc822(self._pub_date, zone))

        if self._last_build_date is not None:
            add_text_element(
                xml, "lastBuildDate", format_rfc822(self._last_build_date, zone)
            )

        if self._category is not None:
            add_text_element(
                xml, "category", self._category.name, domain=self._category.domain
            )

        add_text_element(xml, "generator", GENERATOR)
        add_text_element(xml, "docs", DOCS)

        if self._cloud is not None:
            set_attributes(
                ET.SubElement(xml, "cloud"),
                domain=self._cloud.domain,
                port=self._cloud.port,
                path=self._cloud.path,
                registerProcedure=self._cloud.register_procedure,
                protocol=self._cloud.protocol,
            )

        if self._ttl is not None:
            add_text_element(xml, "ttl", self._ttl)

        if self._image is not None:
            image = ET.SubElement(xml, "image")
            add_text_element(image, "url", self._image.url)
            add_text_element(image, "title", self._image.title)
            add_text_element(image, "link", self._image.link)
            if self._image.width:
                add_text_element(image, "width", self._image.width)
            if self._image.height:
                add_text_element(image, "height", self._image.height)
            if self._image.description:
                add_text_element(image, "description", self._image.description)

        if self._rating is not None:
            add_text_element(xml, "rating", self._rating)

        if self._text_input is not None:
            text_input = ET.SubElement(xml, "textInput")
            add_text_element(text_input, "title", self._text_input.title)
            add_text_element(text_input, "description", self._text_input.description)
            add_text_element(text_input, "name", self._text_input.name)
            add_text_element(text_input, "link", self._text_input.link)

        if self._skip_hours:
            skip_hours = ET.SubElement(xml, "skipHours")
            for hour in self._skip_hours:
                add_text_element(skip_hours, "hour", hour)

        if self._skip_days:
            skip_days = ET.SubElement(xml, "skipDays")
            for day in self._skip_days:
                add_text_element(skip_days, "day", day)

        for item in self._items:
            xml.append(item.as_xml(zone))

        return xml
