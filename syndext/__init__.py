# To avoid cluttering startup messages with config values that
# aren't actually used in every script, try to:

# 1. keep just invariant ("constant") values here (no object creation)
# 2. not import other files/modules
# 3. not take any actions that log (ALSO! try not to log before
# LogArgParse.my_parse_args called)

VERSION = "0.3.0"

# all config in syndext/config.py
# access via: "from syndext.config import conf; conf.XYZ"
