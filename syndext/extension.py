"""
Common pieces for syndication extensions.

An extension adds the elements of one XML namespace to a generic
feed or entry element.  Concrete extensions keep their payload in a
"context" object, describe themselves with an ExtensionMetadata, and
provide load/write_to/to_string (see SyndicationExtension).
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, NamedTuple, Optional, Protocol, runtime_checkable

# PyPI
from lxml import etree

from syndext.config import conf
from syndext.util import require, uri_compare_key


@dataclass(frozen=True)
class ExtensionMetadata:
    """fixed description of an extension"""
    prefix: str                 # preferred namespace prefix
    namespace: str              # namespace URI
    version: str                # supported version of the namespace spec
    documentation: str          # URI of namespace documentation
    name: str
    description: str


class Ordering(Enum):
    """result of a three way comparison"""
    LESS = -1
    EQUAL = 0
    GREATER = 1


class ExtensionLoadedEvent(NamedTuple):
    """passed to on_loaded callback after an extension is loaded"""
    source: Any                 # what was passed to load()
    extension: 'SyndicationExtension'


LoadedCallback = Callable[[ExtensionLoadedEvent], None]


@runtime_checkable
class SyndicationExtension(Protocol):
    metadata: ExtensionMetadata

    def load(self, source: Any,
             on_loaded: Optional[LoadedCallback] = None) -> bool: ...

    def write_to(self, sink: etree._Element) -> None: ...

    def to_string(self) -> str: ...


def compare_uris(first: Optional[str], second: Optional[str]) -> Ordering:
    """
    compare URIs ignoring case and unreserved character escapes.
    None sorts before any URI.
    """
    if first is None:
        return Ordering.EQUAL if second is None else Ordering.LESS
    if second is None:
        return Ordering.GREATER
    a = uri_compare_key(first)
    b = uri_compare_key(second)
    if a < b:
        return Ordering.LESS
    if a > b:
        return Ordering.GREATER
    return Ordering.EQUAL


def fragment_string(extension: SyndicationExtension) -> str:
    """
    return the elements written by extension.write_to
    as an XML fragment (no declaration).
    """
    meta = require(extension, 'extension').metadata
    scratch = etree.Element('fragment', nsmap={meta.prefix: meta.namespace})
    extension.write_to(scratch)
    return ''.join(etree.tostring(child, encoding='unicode',
                                  pretty_print=conf.XML_PRETTY_PRINT)
                   for child in scratch)
