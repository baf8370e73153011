"""Configuration management for RSS Generator."""

import os
from dataclasses import dataclass
from datetime import tzinfo

from dateutil import tz

from .models import ValidationError


@dataclass
class RenderConfig:
    """Configuration for rendering a feed document."""

    timezone: str | None = None  # IANA name; local time when unset
    indent: str = "  "

    def __post_init__(self):
        """Fail early on a timezone name dateutil cannot resolve."""
        if self.timezone and tz.gettz(self.timezone) is None:
            raise ValidationError(f"Unknown timezone: {self.timezone}")

    @property
    def tzinfo(self) -> tzinfo:
        """Zone used to render pubDate and lastBuildDate values."""
        if not self.timezone:
            return tz.tzlocal()
        return tz.gettz(self.timezone)


class Config:
    """Main configuration manager."""

    def __init__(self):
        """Initialize configuration from environment variables."""
        self.timezone = os.getenv("RSS_GENERATOR_TIMEZONE") or None
        self.indent = os.getenv("RSS_GENERATOR_INDENT", "  ")
        self.log_level = os.getenv("LOG_LEVEL", "INFO")

    def get_render_config(self) -> RenderConfig:
        """Get render configuration."""
        return RenderConfig(timezone=self.timezone, indent=self.indent)
