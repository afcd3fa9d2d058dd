"""
feedgen extension for Well-Formed Web CommentAPI elements.

    fg.register_extension('wfw', WfwExtension, WfwEntryExtension)
    fe = fg.add_entry()
    fe.wfw.comments('http://example.com/post/1#comments')
"""

from typing import Dict, Optional

from feedgen.ext.base import BaseExtension, BaseEntryExtension
from lxml import etree

from syndext.util import parse_uri
from syndext.wfw import WFW_METADATA, WellFormedWebCommentsExtension


def _uri(value: str) -> str:
    uri = parse_uri(value)
    if uri is None:
        raise ValueError(f"invalid URI {value!r}")
    return uri


class WfwExtension(BaseExtension):

    def extend_ns(self) -> Dict[str, str]:
        return {WFW_METADATA.prefix: WFW_METADATA.namespace}


class WfwEntryExtension(BaseEntryExtension):

    def __init__(self) -> None:
        self.__extension = WellFormedWebCommentsExtension()

    def extend_ns(self) -> Dict[str, str]:
        return {WFW_METADATA.prefix: WFW_METADATA.namespace}

    def extension(self) -> WellFormedWebCommentsExtension:
        return self.__extension

    def comments(self, comments: Optional[str] = None) -> Optional[str]:
        """
        get or set URI of the human readable comments page
        """
        if comments is not None:
            self.__extension.context.comments = _uri(comments)
        return self.__extension.context.comments

    def comments_feed(self, comments_feed: Optional[str] = None) -> Optional[str]:
        """
        get or set URI of the machine readable comment feed
        """
        if comments_feed is not None:
            self.__extension.context.comments_feed = _uri(comments_feed)
        return self.__extension.context.comments_feed

    def extend_rss(self, entry: etree._Element) -> etree._Element:
        self.__extension.write_to(entry)
        return entry

    def extend_atom(self, entry: etree._Element) -> etree._Element:
        return self.extend_rss(entry)
