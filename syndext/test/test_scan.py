import io
import unittest

from syndext.scan import find_items, scan
from syndext.namespaces import create_navigator

WFW_NS = 'http://wellformedweb.org/CommentAPI/'

RSS = f"""<?xml version="1.0" encoding="utf-8"?>
<rss version="2.0" xmlns:wfw="{WFW_NS}">
<channel>
  <title>Example</title>
  <link>http://example.com/</link>
  <item>
    <title>Post 1</title>
    <link>http://example.com/post/1</link>
    <wfw:comments>http://example.com/post/1#comments</wfw:comments>
    <wfw:commentsFeed>http://example.com/post/1/feed</wfw:commentsFeed>
  </item>
  <item>
    <title>Post 2</title>
    <link> http://example.com/post/2 </link>
  </item>
</channel>
</rss>"""

ATOM = f"""<feed xmlns="http://www.w3.org/2005/Atom" xmlns:wfw="{WFW_NS}">
  <title>Example</title>
  <entry>
    <title>Entry 1</title>
    <link href="http://example.com/entry/1"/>
    <wfw:commentsFeed>http://example.com/entry/1/feed</wfw:commentsFeed>
  </entry>
</feed>"""

RDF = f"""<rdf:RDF xmlns:rdf="http://www.w3.org/1999/02/22-rdf-syntax-ns#"
    xmlns="http://purl.org/rss/1.0/" xmlns:wfw="{WFW_NS}">
  <item rdf:about="http://example.com/rdf/1">
    <title>RDF 1</title>
    <link>http://example.com/rdf/1</link>
    <wfw:comments>http://example.com/rdf/1/comments</wfw:comments>
  </item>
</rdf:RDF>"""


class TestFindItems(unittest.TestCase):

    def test_rss(self):
        assert len(find_items(create_navigator(RSS))) == 2

    def test_none(self):
        assert find_items(create_navigator('<rss><channel/></rss>')) == []


class TestScan(unittest.TestCase):

    def test_rss(self):
        items = list(scan(io.BytesIO(RSS.encode('utf-8'))))
        assert len(items) == 2

        first, second = items
        assert first.title == 'Post 1'
        assert first.link == 'http://example.com/post/1'
        assert first.loaded is True
        assert first.extension.context.comments == 'http://example.com/post/1#comments'
        assert first.extension.context.comments_feed == 'http://example.com/post/1/feed'

        assert second.title == 'Post 2'
        assert second.link == 'http://example.com/post/2'
        assert second.loaded is False
        assert second.extension.context.comments is None

    def test_atom(self):
        items = list(scan(ATOM))
        assert len(items) == 1
        assert items[0].title == 'Entry 1'
        assert items[0].link == 'http://example.com/entry/1'
        assert items[0].loaded is True
        assert items[0].extension.context.comments is None
        assert items[0].extension.context.comments_feed == 'http://example.com/entry/1/feed'

    def test_rdf(self):
        items = list(scan(RDF))
        assert len(items) == 1
        assert items[0].title == 'RDF 1'
        assert items[0].link == 'http://example.com/rdf/1'
        assert items[0].extension.context.comments == 'http://example.com/rdf/1/comments'


if __name__ == "__main__":
    unittest.main()
