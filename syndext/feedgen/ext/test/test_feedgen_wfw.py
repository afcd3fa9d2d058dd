import unittest

from feedgen.feed import FeedGenerator

from syndext.feedgen.ext.wfw import WfwEntryExtension, WfwExtension
from syndext.scan import scan
from syndext.wfw import WFW_NS, equals

COMMENTS = "http://example.com/post/1#comments"
COMMENTS_FEED = "http://example.com/post/1/feed"


class TestWfwFeedgen(unittest.TestCase):

    def setUp(self) -> None:
        fg = FeedGenerator()
        fg.register_extension('wfw', WfwExtension, WfwEntryExtension)
        fg.id('http://example.com/')
        fg.title('Example')
        fg.link(href='http://example.com/', rel='alternate')
        fg.description('example feed')

        fe = fg.add_entry()
        fe.id('http://example.com/post/1')
        fe.title('Post 1')
        fe.link(href='http://example.com/post/1')
        fe.wfw.comments(COMMENTS)
        fe.wfw.comments_feed(COMMENTS_FEED)

        fe2 = fg.add_entry()
        fe2.id('http://example.com/post/2')
        fe2.title('Post 2')
        fe2.link(href='http://example.com/post/2')

        self.fg = fg
        self.fe = fe
        self.fe2 = fe2

    def _check(self, xml: bytes) -> None:
        items = {item.link: item for item in scan(xml)}
        assert len(items) == 2

        item = items['http://example.com/post/1']
        assert item.loaded is True
        assert item.extension.context.comments == COMMENTS
        assert item.extension.context.comments_feed == COMMENTS_FEED
        assert equals(item.extension, self.fe.wfw.extension())

        assert items['http://example.com/post/2'].loaded is False

    def test_rss(self):
        xml = self.fg.rss_str(pretty=True)
        assert WFW_NS.encode('utf-8') in xml
        self._check(xml)

    def test_atom(self):
        self._check(self.fg.atom_str(pretty=True))

    def test_accessors(self):
        assert self.fe.wfw.comments() == COMMENTS
        assert self.fe.wfw.comments_feed() == COMMENTS_FEED
        assert self.fe2.wfw.comments() is None
        assert self.fe2.wfw.comments_feed() is None

    def test_invalid_uri(self):
        with self.assertRaises(ValueError):
            self.fe2.wfw.comments('http://')
        with self.assertRaises(ValueError):
            self.fe2.wfw.comments_feed('not a uri')
        assert self.fe2.wfw.comments() is None

    def test_extend_ns(self):
        assert WfwExtension().extend_ns() == {'wfw': WFW_NS}
        assert WfwEntryExtension().extend_ns() == {'wfw': WFW_NS}


if __name__ == "__main__":
    unittest.main()
