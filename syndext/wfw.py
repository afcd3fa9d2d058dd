"""
Well-Formed Web CommentAPI syndication extension.

Adds the human and machine readable comment endpoints of an item:

    <wfw:comments>http://example.com/post/1#comments</wfw:comments>
    <wfw:commentsFeed>http://example.com/post/1/feed</wfw:commentsFeed>

http://wellformedweb.org/news/wfw_namespace_elements/
"""

import logging
from typing import Any, Optional

# PyPI
from feedgen.util import xml_elem
from lxml import etree

from syndext.errors import InvalidType
from syndext.extension import (ExtensionLoadedEvent, ExtensionMetadata,
                               LoadedCallback, Ordering, compare_uris,
                               fragment_string)
from syndext.namespaces import (NamespaceManager, create_namespace_manager,
                                create_navigator)
from syndext.util import parse_uri, require, uri_compare_key

WFW_NS = 'http://wellformedweb.org/CommentAPI/'

WFW_METADATA = ExtensionMetadata(
    prefix='wfw',
    namespace=WFW_NS,
    version='1.0',
    documentation='http://wellformedweb.org/news/wfw_namespace_elements/',
    name='Well-Formed Web Comments',
    description=('Extends syndication feeds to provide a means exposing '
                 'comments made against feed content.'))

COMMENTS = 'comments'
COMMENTS_FEED = 'commentsFeed'

logger = logging.getLogger(__name__)


def _compare_key(uri: Optional[str]) -> Optional[str]:
    return None if uri is None else uri_compare_key(uri)


class WellFormedWebCommentsContext:
    """
    comment endpoints for a feed item.
    either may be None (not present in source).
    """

    def __init__(self, comments: Optional[str] = None,
                 comments_feed: Optional[str] = None):
        self.comments = comments
        self.comments_feed = comments_feed

    def load(self, node: etree._Element, resolver: NamespaceManager) -> bool:
        """
        set fields from wfw children of node.
        returns True if either field was set.
        """
        require(node, 'node')
        require(resolver, 'resolver')

        prefix = resolver.lookup_prefix(WFW_NS)
        if prefix is None:
            return False

        was_loaded = False

        comments = self._select_uri(node, prefix, COMMENTS, resolver)
        if comments is not None:
            self.comments = comments
            was_loaded = True

        comments_feed = self._select_uri(node, prefix, COMMENTS_FEED, resolver)
        if comments_feed is not None:
            self.comments_feed = comments_feed
            was_loaded = True

        return was_loaded

    @staticmethod
    def _select_uri(node: etree._Element, prefix: str, name: str,
                    resolver: NamespaceManager) -> Optional[str]:
        elt = node.find(f"{prefix}:{name}", namespaces=resolver)
        if elt is None:
            return None
        uri = parse_uri(elt.text)
        if uri is None:
            logger.debug(f"ignoring {name} value {elt.text!r}")
        return uri

    def write_to(self, sink: etree._Element, namespace: str,
                 prefix: Optional[str] = None) -> None:
        """
        append an element to sink for each field that is set.
        prefix is declared on the new elements if namespace
        is not already in scope at sink.
        """
        require(sink, 'sink')
        require(namespace, 'namespace')

        nsmap = None
        if prefix and namespace not in sink.nsmap.values():
            nsmap = {prefix: namespace}

        if self.comments is not None:
            elt = xml_elem('{%s}%s' % (namespace, COMMENTS), sink, nsmap=nsmap)
            elt.text = self.comments
        if self.comments_feed is not None:
            elt = xml_elem('{%s}%s' % (namespace, COMMENTS_FEED), sink, nsmap=nsmap)
            elt.text = self.comments_feed

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(comments={self.comments!r}, "
                f"comments_feed={self.comments_feed!r})")


class WellFormedWebCommentsExtension:
    """
    Well-Formed Web CommentAPI 1.0 extension for a feed item.

    Instances compare by value: comments first, then comments feed,
    using compare_uris ordering (see compare() below).
    """

    metadata = WFW_METADATA

    def __init__(self) -> None:
        self._context = WellFormedWebCommentsContext()

    @property
    def context(self) -> WellFormedWebCommentsContext:
        return self._context

    @context.setter
    def context(self, value: WellFormedWebCommentsContext) -> None:
        self._context = require(value, 'context')

    @staticmethod
    def match_by_type(candidate: Any) -> bool:
        """
        True if candidate is a WellFormedWebCommentsExtension
        (for use as a predicate over a list of extensions)
        """
        require(candidate, 'candidate')
        return type(candidate) is WellFormedWebCommentsExtension

    def load(self, source: Any,
             on_loaded: Optional[LoadedCallback] = None) -> bool:
        """
        load from source (element, element tree, XML text or file).
        calls on_loaded (if given) after the load, loaded or not.
        """
        require(source, 'source')
        navigator = create_navigator(source)
        resolver = create_namespace_manager(
            navigator, self.metadata.prefix, self.metadata.namespace)
        was_loaded = self.context.load(navigator, resolver)
        if on_loaded is not None:
            on_loaded(ExtensionLoadedEvent(source, self))
        return was_loaded

    def write_to(self, sink: etree._Element) -> None:
        require(sink, 'sink')
        self.context.write_to(sink, self.metadata.namespace,
                              self.metadata.prefix)

    def to_string(self) -> str:
        return fragment_string(self)

    def compare_to(self, other: Any) -> Ordering:
        if other is None:
            return Ordering.GREATER
        if not isinstance(other, WellFormedWebCommentsExtension):
            raise InvalidType(
                f"other is not of type {type(self).__name__}, "
                f"type was found to be '{type(other).__name__}'.")
        result = compare_uris(self.context.comments, other.context.comments)
        if result is Ordering.EQUAL:
            result = compare_uris(self.context.comments_feed,
                                  other.context.comments_feed)
        return result

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.context!r}>"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WellFormedWebCommentsExtension):
            return NotImplemented
        return equals(self, other)

    def __hash__(self) -> int:
        # hash the string form of the compare keys, so equal instances
        # (case, escapes, default port) hash alike
        normalized = WellFormedWebCommentsExtension()
        normalized.context = WellFormedWebCommentsContext(
            _compare_key(self.context.comments),
            _compare_key(self.context.comments_feed))
        return hash(fragment_string(normalized))


MaybeExtension = Optional[WellFormedWebCommentsExtension]


def compare(first: MaybeExtension, second: MaybeExtension) -> Ordering:
    """
    three way comparison; None sorts first.
    sort with key=functools.cmp_to_key(lambda a, b: compare(a, b).value)
    """
    if first is None:
        return Ordering.EQUAL if second is None else Ordering.LESS
    return first.compare_to(second)


def equals(first: Any, second: Any) -> bool:
    if first is None or second is None:
        return first is None and second is None
    if not isinstance(first, WellFormedWebCommentsExtension) or \
       not isinstance(second, WellFormedWebCommentsExtension):
        return False
    return first.compare_to(second) is Ordering.EQUAL


def less_than(first: MaybeExtension, second: MaybeExtension) -> bool:
    return compare(first, second) is Ordering.LESS


def greater_than(first: MaybeExtension, second: MaybeExtension) -> bool:
    if first is None:
        return False
    return first.compare_to(second) is Ordering.GREATER
