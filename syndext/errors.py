"""
exceptions raised by syndication extensions
"""


class ExtensionError(Exception):
    """base class for syndext errors"""


class InvalidArgument(ExtensionError, ValueError):
    """a required argument was None"""


class InvalidType(ExtensionError, TypeError):
    """value is not of the type an operation expects"""
