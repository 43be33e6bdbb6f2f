import json
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

from samplekit import feedsearch
from samplekit.feedsearch import Feed, Result
from samplekit.rss import RssMatcher, parse_rss

FEED = """<?xml version="1.0" encoding="UTF-8"?>
<rss>
<channel>
    <title>Going Go Programming</title>
    <description>Programming articles : https://www.example.com/articles</description>
    <link>http://www.example.com/</link>
    <item>
        <pubDate>Sun, 15 Mar 2015 15:04:00 +0000</pubDate>
        <title>Object Oriented Programming Mechanics</title>
        <description>Go is an object oriented language.</description>
        <link>http://www.example.com/2015/03/object-oriented</link>
    </item>
</channel>
</rss>"""


class _Handler(BaseHTTPRequestHandler):
    def do_GET(self):
        if self.path == "/":
            body = (FEED + "\n").encode("utf-8")
            self.send_response(200)
            self.send_header("Content-Type", "application/xml")
            self.send_header("Content-Length", str(len(body)))
            self.end_headers()
            self.wfile.write(body)
        else:
            self.send_error(404)

    def log_message(self, format, *args):
        pass


@pytest.fixture(autouse=True)
def no_proxy(monkeypatch):
    monkeypatch.setenv("no_proxy", "*")


@pytest.fixture
def server_url():
    server = ThreadingHTTPServer(("127.0.0.1", 0), _Handler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        yield f"http://127.0.0.1:{server.server_address[1]}"
    finally:
        server.shutdown()
        server.server_close()


def test_parse_feed_document():
    document = parse_rss(FEED)
    channel = document.channel
    assert channel.title == "Going Go Programming"
    assert channel.link == "http://www.example.com/"
    assert len(channel.items) == 1
    item = channel.items[0]
    assert item.title == "Object Oriented Programming Mechanics"
    assert item.description == "Go is an object oriented language."
    assert item.pub_date == "Sun, 15 Mar 2015 15:04:00 +0000"
    assert item.link == "http://www.example.com/2015/03/object-oriented"


def test_parse_rejects_other_root():
    with pytest.raises(ValueError, match="<rss>"):
        parse_rss("<feed><title>x</title></feed>")


def test_parse_rejects_malformed_xml():
    with pytest.raises(ValueError):
        parse_rss("<rss><channel>")


def test_download_and_decode(server_url):
    document = RssMatcher().retrieve(Feed(name="articles", uri=server_url, type="rss"))
    assert len(document.channel.items) == 1


def test_download_not_found(server_url):
    with pytest.raises(OSError, match="404"):
        RssMatcher().retrieve(Feed(uri=server_url + "/missing"))


def test_retrieve_requires_uri():
    with pytest.raises(ValueError):
        RssMatcher().retrieve(Feed(name="empty", type="rss"))


def test_search_matches_title(server_url):
    results = RssMatcher().search(Feed(uri=server_url, type="rss"), "Object")
    assert results == [Result("Title", "Object Oriented Programming Mechanics")]


def test_search_matches_description(server_url):
    results = RssMatcher().search(Feed(uri=server_url, type="rss"), "Go")
    assert results == [Result("Description", "Go is an object oriented language.")]


def test_rss_matcher_is_registered(server_url):
    matcher = feedsearch.get_matcher("rss")
    results = matcher.search(Feed(uri=server_url, type="rss"), "Object")
    assert results == [Result("Title", "Object Oriented Programming Mechanics")]
    with pytest.raises(ValueError):
        feedsearch.register("rss", RssMatcher())
    assert feedsearch.get_matcher("rss") is matcher


def test_run_searches_rss_feeds(tmp_path, server_url):
    data = tmp_path / "data.json"
    data.write_text(
        json.dumps([{"site": "articles", "link": server_url, "type": "rss"}]),
        encoding="utf-8",
    )
    results = feedsearch.run("Programming", data)
    assert results == [Result("Title", "Object Oriented Programming Mechanics")]