"""RSS 2.0 document assembly for RSS Generator."""

import xml.etree.ElementTree as ET

from .channel import Channel
from .config import Config, RenderConfig
from .logging_config import create_execution_logger
from .xml_utils import render_document


class Feed:
    """Top-level container that renders its channels as one ``<rss>`` document."""

    def __init__(
        self, config: RenderConfig | None = None, execution_id: str | None = None
    ):
        """Initialize an empty feed.

        Args:
            config: Render settings (read from the environment when None)
            execution_id: Execution ID for logging context
        """
        self.config = config or Config().get_render_config()
        self.logger = create_execution_logger("feed", execution_id)
        self._channels: list[Channel] = []

    def add_channel(self, channel: Channel) -> "Feed":
        """Add a channel; channels render in the order they were added."""
        self._channels.append(channel)
        return self

    def render(self) -> str:
        """Render the feed as an indented UTF-8 XML document.

        The tree is rebuilt on every call, so repeated renders of an
        unchanged feed return identical output.

        Returns:
            The XML document, including the XML declaration
        """
        self.logger.log_execution_start(channel_count=len(self._channels))

        zone = self.config.tzinfo
        rss = ET.Element("rss", version="2.0")
        for channel in self._channels:
            rss.append(channel.as_xml(zone))

        document = render_document(rss, self.config.indent)

        item_count = sum(channel.item_count for channel in self._channels)
        self.logger.log_metrics(
            {
                "channel_count": len(self._channels),
                "item_count": item_count,
                "output_length": len(document),
            }
        )
        self.logger.log_execution_end(success=True, item_count=item_count)
        return document

    def __str__(self) -> str:
        return self.render()
