"""Property-based tests for Feed rendering."""

import xml.etree.ElementTree as ET

from hypothesis import given
from hypothesis import strategies as st

from rss_generator import Channel, Feed, Item, RenderConfig
from rss_generator.xml_utils import INVALID_XML_CHARS

# Characters XML 1.0 can carry verbatim through a parse
xml_text = st.text(
    alphabet=st.characters(blacklist_categories=("Cs", "Cc", "Cn")),
    min_size=1,
    max_size=100,
).filter(lambda text: text.strip() == text)

# Any text, including characters XML 1.0 cannot carry
raw_text = st.lists(
    st.one_of(
        st.characters(),
        st.sampled_from(["\x00", "\x07", "\x0b", "\x1f", "\ud800", "\ufffe"]),
    ),
    max_size=50,
).map("".join)

ITEM_ORDER = [
    "title",
    "link",
    "description",
    "author",
    "category",
    "comments",
    "enclosure",
    "guid",
    "pubDate",
    "source",
]


class TestFeedProperties:
    """Property-based tests for document structure."""

    @given(xml_text, xml_text, xml_text)
    def test_text_survives_rendering(self, title, link, description):
        """
        For any text, the parsed document returns exactly the configured
        channel and item values.
        """
        feed = Feed(RenderConfig(timezone="UTC"))
        channel = (
            Channel().title(title).link(link).description(description).append_to(feed)
        )
        Item().title(title).link(link).description(description).append_to(channel)

        root = ET.fromstring(feed.render().encode("utf-8"))

        for element in (root.find("channel"), root.find("channel/item")):
            assert element.find("title").text == title
            assert element.find("link").text == link
            assert element.find("description").text == description

    @given(raw_text)
    def test_any_text_renders_well_formed(self, title):
        """
        For any title, the document parses and the title keeps every
        character XML 1.0 allows.
        """
        feed = Feed(RenderConfig(timezone="UTC"))
        Channel().title(title).append_to(feed)

        root = ET.fromstring(feed.render().encode("utf-8"))

        expected = INVALID_XML_CHARS.sub("", title)
        expected = expected.replace("\r\n", "\n").replace("\r", "\n")
        assert (root.find("channel/title").text or "") == expected

    @given(
        st.lists(
            st.lists(xml_text, max_size=4),
            min_size=1,
            max_size=4,
        )
    )
    def test_nesting_matches_configuration(self, channel_items):
        """
        For any layout of channels and items, the rss/channel/item nesting
        mirrors the configuration in append order.
        """
        feed = Feed(RenderConfig(timezone="UTC"))
        for index, item_titles in enumerate(channel_items):
            channel = Channel().title(f"channel-{index}").append_to(feed)
            for title in item_titles:
                Item().title(title).append_to(channel)

        root = ET.fromstring(feed.render().encode("utf-8"))

        channels = root.findall("channel")
        assert [channel.find("title").text for channel in channels] == [
            f"channel-{index}" for index in range(len(channel_items))
        ]
        for channel, item_titles in zip(channels, channel_items):
            rendered = [item.find("title").text for item in channel.findall("item")]
            assert rendered == item_titles

    @given(
        st.fixed_dictionaries(
            {},
            optional={
                "author": st.just("editor@example.com"),
                "category": st.just("News"),
                "comments": st.just("http://x/c"),
                "enclosure": st.just("http://x/a.mp3"),
                "guid": st.just("http://x/i"),
                "pubDate": st.integers(min_value=0, max_value=2**31 - 1),
                "source": st.just("Example"),
            },
        )
    )
    def test_optional_item_fields_appear_once_in_order(self, fields):
        """
        For any subset of optional item fields, exactly the set fields appear,
        once each, in fixed order.
        """
        item = Item().title("I").link("http://x/i").description("body")
        if "author" in fields:
            item.author(fields["author"])
        if "category" in fields:
            item.category(fields["category"])
        if "comments" in fields:
            item.comments(fields["comments"])
        if "enclosure" in fields:
            item.enclosure(fields["enclosure"], 10)
        if "guid" in fields:
            item.guid(fields["guid"])
        if "pubDate" in fields:
            item.pub_date(fields["pubDate"])
        if "source" in fields:
            item.source(fields["source"], "http://x/rss")

        feed = Feed(RenderConfig(timezone="UTC"))
        Channel().title("T").add_item(item).append_to(feed)
        root = ET.fromstring(feed.render().encode("utf-8"))

        tags = [child.tag for child in root.find("channel/item")]
        expected = [tag for tag in ITEM_ORDER if tag in fields or tag in ITEM_ORDER[:3]]
        assert tags == expected
