"""
find Well-Formed Web comment endpoints in RSS/Atom documents
"""

import logging
from typing import Iterator, List, NamedTuple, Optional

# PyPI
from lxml import etree

from syndext.extension import ExtensionLoadedEvent
from syndext.namespaces import Source, create_navigator
from syndext.util import clean_str
from syndext.wfw import WellFormedWebCommentsExtension

ATOM_NS = 'http://www.w3.org/2005/Atom'
RSS1_NS = 'http://purl.org/rss/1.0/'

# RSS 0.9x/2.0 item, RSS 1.0 item, Atom entry
ITEM_TAGS = ['item', f'{{{RSS1_NS}}}item', f'{{{ATOM_NS}}}entry']

logger = logging.getLogger(__name__)


class ScannedItem(NamedTuple):
    title: str
    link: Optional[str]
    extension: WellFormedWebCommentsExtension
    loaded: bool                # True if any wfw element found


def find_items(root: etree._Element) -> List[etree._Element]:
    return list(root.iter(*ITEM_TAGS))


def _link(item: etree._Element) -> Optional[str]:
    link = item.findtext('link')
    if link is None:
        link = item.findtext(f'{{{RSS1_NS}}}link')
    if link is None:
        atom_link = item.find(f'{{{ATOM_NS}}}link')
        if atom_link is not None:
            link = atom_link.get('href')
    if link is not None:
        link = link.strip()
    return link


def _title(item: etree._Element) -> str:
    for tag in ('title', f'{{{RSS1_NS}}}title', f'{{{ATOM_NS}}}title'):
        title = item.findtext(tag)
        if title is not None:
            return clean_str(title).strip()
    return ''


def scan(source: Source) -> Iterator[ScannedItem]:
    """
    load a WellFormedWebCommentsExtension for each item/entry in source
    """
    root = create_navigator(source)

    def loaded(event: ExtensionLoadedEvent) -> None:
        logger.debug(f"loaded {event.extension!r}")

    for item in find_items(root):
        ext = WellFormedWebCommentsExtension()
        was_loaded = ext.load(item, on_loaded=loaded)
        yield ScannedItem(_title(item), _link(item), ext, was_loaded)
