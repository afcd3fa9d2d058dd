"""
namespace resolution for extension elements
"""

from typing import IO, Any, Optional, Union

# PyPI
from lxml import etree

from syndext.errors import InvalidType
from syndext.util import require

# Anything load() can turn into an element
Source = Union[etree._Element, etree._ElementTree, str, bytes, IO[Any]]

# don't fetch DTDs or expand entities from feed documents
_PARSER = etree.XMLParser(resolve_entities=False, no_network=True)


class NamespaceManager(dict):
    """
    prefix -> namespace URI mapping for a subtree.
    passed directly as the "namespaces" argument to lxml find/xpath.
    """

    def add_namespace(self, prefix: str, uri: str) -> None:
        require(prefix, 'prefix')
        require(uri, 'uri')
        self[prefix] = uri

    def lookup_namespace(self, prefix: str) -> Optional[str]:
        return self.get(prefix)

    def lookup_prefix(self, uri: str) -> Optional[str]:
        for prefix, ns in self.items():
            if ns == uri:
                return prefix
        return None


def create_navigator(source: Source) -> etree._Element:
    """
    return element for source: an element, element tree,
    XML text, or a readable file object.
    lxml.etree.XMLSyntaxError is raised for unparsable text.
    """
    require(source, 'source')
    if isinstance(source, etree._Element):
        return source
    if isinstance(source, etree._ElementTree):
        return source.getroot()
    if isinstance(source, str):
        source = source.encode('utf-8')
    if isinstance(source, bytes):
        return etree.fromstring(source, parser=_PARSER)
    if hasattr(source, 'read'):
        return etree.parse(source, parser=_PARSER).getroot()
    raise InvalidType(f"cannot navigate {type(source).__name__}")


def create_namespace_manager(node: etree._Element,
                             prefix: str, uri: str) -> NamespaceManager:
    """
    return manager with the namespaces in scope at node,
    plus prefix bound to uri (replacing any document binding)
    """
    require(node, 'node')
    manager = NamespaceManager()
    for p, ns in node.nsmap.items():
        if p:                   # lxml can't use a default (None) prefix
            manager.add_namespace(p, ns)
    manager.add_namespace(prefix, uri)
    return manager
