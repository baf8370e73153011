"""Data models for RSS Generator."""

from dataclasses import dataclass


class ValidationError(ValueError):
    """Raised when a channel or render setting is given an invalid value."""


@dataclass(frozen=True)
class Category:
    """Item or channel category with an optional taxonomy domain."""

    name: str
    domain: str | None = None


@dataclass(frozen=True)
class Enclosure:
    """Media object attached to an item."""

    url: str
    length: int = 0  # Bytes; omitted from output when falsy
    type: str = "audio/mpeg"


@dataclass(frozen=True)
class Source:
    """The RSS channel an item came from."""

    name: str
    url: str


@dataclass(frozen=True)
class Guid:
    """Item identifier, optionally flagged as a permanent link."""

    value: str
    is_permalink: bool | None = None


@dataclass(frozen=True)
class Cloud:
    """rssCloud registration endpoint for change notifications."""

    domain: str
    port: int
    path: str
    register_procedure: str
    protocol: str


@dataclass(frozen=True)
class Image:
    """Channel image (GIF, JPEG or PNG)."""

    url: str
    title: str
    link: str
    width: int = 88  # Max 144
    height: int = 31  # Max 400
    description: str | None = None


@dataclass(frozen=True)
class TextInput:
    """Text input box displayed with the channel."""

    title: str
    link: str
    name: str
    description: str
