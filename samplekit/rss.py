"""RSS documents, an RSS matcher for feed searches, and the search command."""

from __future__ import annotations

import argparse
import logging
import re
import sys
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from urllib.error import HTTPError
from urllib.request import urlopen

from samplekit import feedsearch
from samplekit.feedsearch import Feed, Matcher, Result

_logger = logging.getLogger(__name__)


@dataclass
class RssItem:
    """One item of an RSS channel."""

    pub_date: str = ""
    title: str = ""
    description: str = ""
    link: str = ""
    guid: str = ""
    geo_rss_point: str = ""


@dataclass
class RssImage:
    """The image of an RSS channel."""

    url: str = ""
    title: str = ""
    link: str = ""


@dataclass
class RssChannel:
    """The channel of an RSS document."""

    title: str = ""
    description: str = ""
    link: str = ""
    pub_date: str = ""
    last_build_date: str = ""
    ttl: str = ""
    language: str = ""
    managing_editor: str = ""
    web_master: str = ""
    image: RssImage = field(default_factory=RssImage)
    items: list[RssItem] = field(default_factory=list)


@dataclass
class RssDocument:
    """An RSS document."""

    channel: RssChannel = field(default_factory=RssChannel)


def _local(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _children(element: ET.Element, name: str) -> list[ET.Element]:
    return [child for child in element if _local(child.tag) == name]


def _text(element: ET.Element) -> str:
    parts = [element.text or ""]
    parts.extend(child.tail or "" for child in element)
    return "".join(parts)


def _field(element: ET.Element, name: str) -> str:
    matches = _children(element, name)
    return _text(matches[-1]) if matches else ""


def _parse_item(element: ET.Element) -> RssItem:
    return RssItem(
        pub_date=_field(element, "pubDate"),
        title=_field(element, "title"),
        description=_field(element, "description"),
        link=_field(element, "link"),
        guid=_field(element, "guid"),
        geo_rss_point=_field(element, "point"),
    )


def _parse_image(element: ET.Element | None) -> RssImage:
    if element is None:
        return RssImage()
    return RssImage(
        url=_field(element, "url"),
        title=_field(element, "title"),
        link=_field(element, "link"),
    )


def _parse_channel(element: ET.Element | None) -> RssChannel:
    if element is None:
        return RssChannel()
    images = _children(element, "image")
    return RssChannel(
        title=_field(element, "title"),
        description=_field(element, "description"),
        link=_field(element, "link"),
        pub_date=_field(element, "pubDate"),
        last_build_date=_field(element, "lastBuildDate"),
        ttl=_field(element, "ttl"),
        language=_field(element, "language"),
        managing_editor=_field(element, "managingEditor"),
        web_master=_field(element, "webMaster"),
        image=_parse_image(images[-1] if images else None),
        items=[_parse_item(item) for item in _children(element, "item")],
    )


def parse_rss(data: bytes | str) -> RssDocument:
    """Decode an RSS document; raise ValueError if it is not one."""
    try:
        root = ET.fromstring(data)
    except ET.ParseError as exc:
        raise ValueError(f"invalid RSS document: {exc}") from exc
    name = _local(root.tag)
    if name != "rss":
        raise ValueError(f"expected element type <rss> but have <{name}>")
    channels = _children(root, "channel")
    return RssDocument(channel=_parse_channel(channels[-1] if channels else None))


class RssMatcher(Matcher):
    """Matcher that searches the titles and descriptions of an RSS feed."""

    def search(self, feed: Feed, search_term: str) -> list[Result]:
        _logger.info("Search Feed Type[%s] Site[%s] URI[%s]", feed.type, feed.name, feed.uri)
        document = self.retrieve(feed)
        pattern = re.compile(search_term)
        results: list[Result] = []
        for item in document.channel.items:
            if pattern.search(item.title):
                results.append(Result(field="Title", content=item.title))
            if pattern.search(item.description):
                results.append(Result(field="Description", content=item.description))
        return results

    def retrieve(self, feed: Feed) -> RssDocument:
        """Download and decode the feed's RSS document."""
        if not feed.uri:
            raise ValueError("no RSS feed URI provided")
        try:
            with urlopen(feed.uri) as response:
                status = response.status
                body = response.read()
        except HTTPError as exc:
            raise OSError(f"HTTP response error {exc.code}") from exc
        if status != 200:
            raise OSError(f"HTTP response error {status}")
        return parse_rss(body)


feedsearch.register("rss", RssMatcher())


def main(argv: list[str] | None = None) -> int:
    """Search the configured feeds for a term and log what matches."""
    parser = argparse.ArgumentParser(description="Search RSS feeds for a term.")
    parser.add_argument("term", nargs="?", default="中国", help="regular expression to search for")
    parser.add_argument("--data", default=feedsearch.DATA_FILE, help="JSON file listing the feeds")
    args = parser.parse_args(argv)

    logging.basicConfig(stream=sys.stdout, level=logging.INFO, format="%(asctime)s %(message)s")
    feedsearch.run(args.term, args.data)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())