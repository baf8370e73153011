"""Fluent builder for RSS 2.0 feed documents."""

import logging

from .channel import Channel
from .config import Config, RenderConfig
from .feed import Feed
from .item import Item
from .logging_config import setup_structured_logging
from .models import ValidationError

# Silent unless the host application configures logging
logging.getLogger("rss_generator").addHandler(logging.NullHandler())

__all__ = [
    "Channel",
    "Config",
    "Feed",
    "Item",
    "RenderConfig",
    "ValidationError",
    "setup_structured_logging",
]
