import logging

from rackmap._version import version as __version__  # noqa: F401

log = logging.getLogger("rackmap")
log.setLevel(logging.INFO)

handler = logging.StreamHandler()
handler.setFormatter(logging.Formatter("[%(levelname)-.1s %(asctime)s %(name)s] %(message)s"))
logging.root.addHandler(handler)

from rackmap.store import PrefixMap, Target  # noqa: E402,F401
from rackmap.trie import PathTrie  # noqa: E402,F401
