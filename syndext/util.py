import re
import string
from typing import Any, Optional
from urllib.parse import urlsplit, urlunsplit

from syndext.config import conf
from syndext.errors import InvalidArgument

# characters that never need escaping in a URI (RFC 3986 "unreserved")
_UNRESERVED = frozenset(string.ascii_letters + string.digits + '-._~')

_PERCENT_ESCAPE = re.compile('%([0-9A-Fa-f]{2})')

_DEFAULT_PORTS = {'http': '80', 'https': '443', 'ftp': '21'}


def require(value: Any, name: str) -> Any:
    """
    raise InvalidArgument if value is None, else return it.
    NOTE! lxml elements with no children are "false", so test with "is"
    """
    if value is None:
        raise InvalidArgument(f"{name} is None")
    return value


def is_absolute_url(url: str) -> bool:
    # https://stackoverflow.com/questions/8357098/how-can-i-check-if-a-url-is-absolute-using-python
    try:
        return bool(urlsplit(url).netloc)
    except ValueError:
        # could be an invalid IPv6 URL
        return False


def clean_str(s: Optional[str]) -> str:
    # null characters can't be saved to XML
    if s is None:
        return ''
    return s.replace("\x00", "")


def parse_uri(text: Optional[str]) -> Optional[str]:
    """
    return stripped URI (absolute or relative) from element text,
    or None if text is empty or can't be a URI.
    """
    if text is None:
        return None
    uri = text.strip()
    if not uri or len(uri) > conf.MAX_URL:
        return None
    for c in uri:
        if c.isspace() or ord(c) < 0x20 or ord(c) == 0x7f:
            return None
    try:
        parts = urlsplit(uri)
        parts.port              # raises ValueError for garbage port
    except ValueError:
        return None
    if parts.scheme in _DEFAULT_PORTS and not parts.hostname:
        return None             # "http://" or "http:foo"
    return uri


def _safe_unescape(uri: str) -> str:
    """
    decode %XX escapes of unreserved characters only;
    other escapes are kept (with upper case hex digits).
    """
    def unescape(m: 're.Match[str]') -> str:
        c = chr(int(m.group(1), 16))
        if c in _UNRESERVED:
            return c
        return m.group(0).upper()
    return _PERCENT_ESCAPE.sub(unescape, uri)


def uri_compare_key(uri: str) -> str:
    """
    return string used to compare URIs: safe-unescaped,
    default port and empty path normalized, case folded.
    """
    uri = _safe_unescape(uri)
    try:
        parts = urlsplit(uri)
    except ValueError:
        return uri.lower()
    scheme = parts.scheme.lower()
    netloc = parts.netloc.lower()
    port = _DEFAULT_PORTS.get(scheme)
    if port and netloc.endswith(':' + port):
        netloc = netloc[:-len(port) - 1]
    path = parts.path
    if netloc and not path:
        path = '/'
    return urlunsplit((scheme, netloc, path, parts.query, parts.fragment)).lower()
