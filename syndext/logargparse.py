"""
argparser class with logging arguments for syndext scripts
"""

import argparse
import json
import logging
import logging.config
import logging.handlers
import os
from typing import Any, Dict, Optional, Sequence

# PyPI:
import yaml

# local:
from syndext import VERSION
from syndext.config import conf
import syndext.path as path
import syndext.sentry

LEVELS = [level.lower() for level in logging._nameToLevel.keys()]

LOGGER_LEVEL_SEP = ':'

FORMAT = '%(asctime)s | %(levelname)s | %(name)s | %(message)s'

logger = logging.getLogger(__name__)


def _read_log_config(fname: str) -> Dict[str, Any]:
    """
    read logging.config.dictConfig dict from .json or .yml file
    """
    with open(fname) as f:
        if fname.endswith('.json'):
            return json.load(f)
        return yaml.safe_load(f)


def _log_to_file(fname: str) -> None:
    """
    add handler for a daily rotated (UTC midnight) file in LOG_DIR
    """
    path.check_dir(path.LOG_DIR)
    if not fname.endswith('.log'):
        fname += '.log'
    fname = os.path.join(path.LOG_DIR, fname)
    handler = logging.handlers.TimedRotatingFileHandler(
        fname, when='midnight', utc=True,
        backupCount=conf.LOG_BACKUP_COUNT)
    handler.setFormatter(logging.Formatter(FORMAT))
    logging.getLogger(None).addHandler(handler)
    logger.info(f"process {os.getpid()} logging to {fname}")


class LogArgumentParser(argparse.ArgumentParser):
    def __init__(self, prog: str, descr: str):
        super().__init__(prog=prog, description=descr)

        self.add_argument('--verbose', '-v', action='store_const',
                          const='DEBUG', dest='log_level',
                          help="set default logging level to 'DEBUG'")
        self.add_argument('--quiet', '-q', action='store_const',
                          const='WARNING', dest='log_level',
                          help="set default logging level to 'WARNING'")
        self.add_argument('--log-level', '-l', choices=LEVELS,
                          dest='log_level',
                          default=os.getenv('LOG_LEVEL', 'INFO'),
                          help="set default logging level to LEVEL")
        self.add_argument('--logger-level', '-L', action='append',
                          dest='logger_level',
                          help="set LOGGER verbosity to LEVEL",
                          metavar=f"LOGGER{LOGGER_LEVEL_SEP}LEVEL")
        self.add_argument('--log-config', metavar='LOG_CONFIG_FILE',
                          help="configure logging with .json or .yml file")
        self.add_argument('--log-file', dest='log_file',
                          help=f"also log to LOG_FILE in {path.LOG_DIR}")

        self.add_argument('--version', '-V', action='version',
                          version=f"syndext {prog} {VERSION}")

    # wanted to override parse_args, but couldn't get typing right for mypy
    def my_parse_args(self,
                      argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
        args = self.parse_args(argv)

        logging.basicConfig(format=FORMAT, level=(args.log_level or 'INFO').upper())

        if args.log_config:
            logging.config.dictConfig(_read_log_config(args.log_config))

        for ll in args.logger_level or []:
            logger_name, level = ll.split(LOGGER_LEVEL_SEP, 1)
            logging.getLogger(logger_name).setLevel(level.upper())

        if args.log_file:
            _log_to_file(args.log_file)

        # log startup banner and deferred config msgs
        conf.start(self.prog, self.description)

        syndext.sentry.init()

        return args
