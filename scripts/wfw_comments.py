"""
display Well-Formed Web comment endpoints for items in RSS/Atom files
"""

import logging
import sys

from syndext.logargparse import LogArgumentParser
from syndext.scan import scan
from syndext.util import is_absolute_url

SCRIPT = 'wfw_comments'

logger = logging.getLogger(SCRIPT)


if __name__ == '__main__':
    p = LogArgumentParser(SCRIPT, 'Well-Formed Web comments dumper')
    p.add_argument('--xml', action='store_true',
                   help="output wfw elements as XML")
    p.add_argument('--all', action='store_true',
                   help="include items without comment endpoints")
    p.add_argument('files', nargs='+', metavar='FILE',
                   help="RSS or Atom document")

    # info logging before this call unlikely to be seen:
    args = p.my_parse_args()       # parse logging args, output start message

    for fname in args.files:
        with_comments = without = 0
        with open(fname, 'rb') as f:
            for item in scan(f):
                if item.loaded:
                    with_comments += 1
                else:
                    without += 1
                    if not args.all:
                        continue

                print(item.link or item.title)
                if args.xml:
                    sys.stdout.write(item.extension.to_string())
                    continue

                ctx = item.extension.context
                for label, uri in (('comments', ctx.comments),
                                   ('comments feed', ctx.comments_feed)):
                    if uri is None:
                        continue
                    if not is_absolute_url(uri):
                        logger.warning(f"{fname}: relative {label} URI {uri}")
                    print(f"  {label}: {uri}")

        logger.info(f"{fname}: {with_comments} with comments, {without} without")
