"""XML construction and formatting helpers shared by feed components."""

import re
import xml.etree.ElementTree as ET
from datetime import datetime, tzinfo
from email.utils import format_datetime

from dateutil import tz

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'

# Characters outside the XML 1.0 Char production
INVALID_XML_CHARS = re.compile(
    r"[^\x09\x0a\x0d\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]"
)


def format_rfc822(value: int | float | datetime, zone: tzinfo | None = None) -> str:
    """Format a timestamp as an RFC-822 date string.

    Args:
        value: Unix timestamp in seconds, or a datetime
        zone: Zone to render the date in (local time when None)

    Returns:
        Date string like ``Tue, 21 Aug 2012 19:50:37 +0900``
    """
    if zone is None:
        zone = tz.tzlocal()

    if isinstance(value, datetime):
        dt = value if value.tzinfo else value.replace(tzinfo=zone)
        return format_datetime(dt.astimezone(zone))

    return format_datetime(datetime.fromtimestamp(value, tz=zone))


def xml_safe(value) -> str:
    """Stringify a value, dropping characters XML 1.0 cannot carry."""
    return INVALID_XML_CHARS.sub("", str(value))


def set_attributes(element: ET.Element, **attributes) -> ET.Element:
    """Set attributes on an element, skipping those whose value is None."""
    for name, value in attributes.items():
        if value is not None:
            element.set(name, xml_safe(value))
    return element


def add_text_element(
    parent: ET.Element, tag: str, value=None, **attributes
) -> ET.Element:
    """Append a child element holding ``value`` as text.

    ``None`` produces an empty element. Attributes whose value is None are
    skipped.
    """
    element = set_attributes(ET.SubElement(parent, tag), **attributes)
    if value is not None:
        element.text = xml_safe(value)
    return element


def render_document(root: ET.Element, indent: str = "  ") -> str:
    """Serialize an element tree as an indented UTF-8 XML document."""
    ET.indent(root, space=indent)
    body = ET.tostring(root, encoding="unicode")
    return f"{XML_DECLARATION}\n{body}\n"
