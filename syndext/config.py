"""
syndext Configuration

Fetch configuration values with defaulting,
optionally log only the ones that are used.
"""

# Goals:
# 0. Log program specific (optional) banner before config values
# 1. Maintains centralized defaulting of config values
# 2. Logs each variable once, and ONLY if requested
# 3. conf.TYPO causes error rather than silent failure

import logging
import os
from typing import Any, Dict, List, Optional

# PyPI
from dotenv import load_dotenv

# local
from syndext import VERSION

load_dotenv()  # load config from .env file (local) or env vars (production)

logger = logging.getLogger(__name__)

# Conf variables implemented as property functions.

# conf_thing functions return properties for _Config class members
# used in class definition as MEMBER = conf_....('NAME', ....)

# The "confobj" argument passed to the getter functions
# is the (one) _Config class instance, since they're being
# called to access properties of that object.


def conf_bool(name: str, defval: bool) -> property:
    """
    return property function for
    config variable with boolean value
    tries to be liberal in what it accepts:
    True values: non-zero integer, true, t, on (case insensitive)
    """

    def getter(confobj: '_Config') -> bool:
        if name in confobj.values:
            value = bool(confobj.values[name])  # cached value
        else:
            v = os.environ.get(name)
            if v is None:
                value = defval
            else:
                v = v.strip().lower()
                if v.isdigit():
                    value = bool(int(v))
                else:
                    value = v in ['true', 't', 'on']  # be liberal
            confobj._log(name, value)
        return value
    return property(getter)


def conf_int(name: str, defval: int) -> property:
    """
    return property function for
    Integer valued configuration variable, with default value
    """

    def getter(confobj: '_Config') -> int:
        if name in confobj.values:
            value = int(confobj.values[name])  # cached value
        else:
            try:
                value = int(os.environ.get(name, defval))
            except ValueError:
                value = defval
            confobj._log(name, value)  # log first time only
        return value
    return property(getter)


def conf_optional(name: str, hidden: bool = False) -> property:
    """
    return property function for
    optional configuration variable (returns None if not set, does not log)
    """

    def getter(confobj: '_Config') -> Any:
        if name in confobj.values:
            value = confobj.values[name]  # cached value
        else:
            value = os.environ.get(name)
            if value is None:   # optional: log only if set
                confobj._set(name, value)
            else:
                confobj._log(name, value, hidden)  # log first time only
        return value
    return property(getter)


class _Config:                  # only instantiated in this file
    """
    Configuration with logging on first access.

    All "members" are property functions
    (only work on an instance of this class)
    and there should only ever be ONE instance of this class!
    """

    def __init__(self) -> None:
        self.values: Dict[str, Any] = {}  # cache
        self.msgs: List[str] = []  # saved initial log messages
        self.logging = False

    def _set(self, name: str, value: Any) -> None:
        self.values[name] = value

    def _log(self, name: str, value: Any, hidden: bool = False) -> None:
        """
        set and log name & value
        """
        self._set(name, value)
        if hidden:
            value = '(hidden)'
        msg = f"{name}: {value}"
        if self.logging:
            logger.info(msg)
        else:
            self.msgs.append(msg)

    def start(self, prog: Optional[str], descr: Optional[str]) -> None:
        """
        Optionally log start message with any saved messages.
        Called from LogArgumentParser.my_parse_args after logger setup.
        """
        if prog:
            logger.info(
                "------------------------------------------------------------------------")

            logger.info(f"Starting {prog} version {VERSION}")
            if descr:
                logger.info(descr)
            for msg in self.msgs:
                logger.info(msg)
            self.msgs = []
            self.logging = True

    # config variable properties in alphabetical order

    # number of old log files to keep
    LOG_BACKUP_COUNT = conf_int('LOG_BACKUP_COUNT', 7)

    # maximum length URI to accept from extension elements
    # (longer values are treated as absent)
    MAX_URL = conf_int('MAX_URL', 2048)

    SENTRY_DSN = conf_optional('SENTRY_DSN')
    SENTRY_ENV = conf_optional('SENTRY_ENV')

    # indent elements in extension string form
    XML_PRETTY_PRINT = conf_bool('XML_PRETTY_PRINT', True)


conf = _Config()

