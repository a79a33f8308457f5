import logging
import typing

from rackmap.trie import PathTrie, trim_prefix

log = logging.getLogger(__name__)


class Target(typing.NamedTuple):
    key: str
    value: typing.Any
    exact: bool


class PrefixMap:
    """Map of hierarchical keys that falls back to the closest stored key.

    Keys are ``/``-delimited paths such as ``/dc1/rack3/host7``. An exact
    lookup hits a plain dict; a miss walks the trie and answers with the value
    of a stored key under the deepest shared ancestor of the requested one:

        racks = PrefixMap()
        racks.put("/dc1/rack3/host7", "h7")
        racks.put("/dc1/rack4/host1", "h1")
        racks.get("/dc1/rack3/host9")
        => "h7"

    Keys are stored in canonical form (see ``clean_key``), so ``dc1//rack3/``
    and ``/dc1/rack3`` are the same entry.

    Not thread safe, callers must serialize access.
    """

    def __init__(self):
        self._routes: typing.Dict[str, typing.Any] = {}
        self._trie = PathTrie()

    @property
    def trie(self) -> PathTrie:
        # read only, mutate through put/remove/clear so the dict stays in sync
        return self._trie

    def clean_key(self, key: str) -> str:
        return trim_prefix(key)

    def put(self, key: str, value):
        # store value for the exact key, returning what was there before
        key = self.clean_key(key)
        self._trie.insert(key)
        previous = self._routes.get(key)
        self._routes[key] = value
        return previous

    def remove(self, key: str):
        key = self.clean_key(key)
        if key not in self._routes:
            return None
        if not self._trie.remove(key):
            raise AssertionError(f"{key} is stored but missing from the trie")
        return self._routes.pop(key)

    def get(self, key: str, default=None):
        target = self.get_target(key)
        return default if target is None else target.value

    def get_exact(self, key: str, default=None):
        return self._routes.get(self.clean_key(key), default)

    def get_target(self, key: str) -> typing.Optional[Target]:
        # return the stored key answering for `key`, and its value
        if not self._routes:
            return None
        key = self.clean_key(key)
        if key in self._routes:
            return Target(key, self._routes[key], True)

        nearest = self._trie.find_nearest(key)
        if nearest not in self._routes:
            raise AssertionError(f"Trie resolved {key} to {nearest}, which is not stored")
        log.debug(f"No entry for {key}, falling back to {nearest}")
        return Target(nearest, self._routes[nearest], False)

    def get_all(self) -> typing.Dict[str, typing.Any]:
        return dict(self._routes)

    def clear(self):
        self._trie.clear()
        self._routes.clear()

    def size(self) -> int:
        return len(self._routes)

    def keys(self):
        return self._routes.keys()

    def items(self):
        return self._routes.items()

    def __len__(self):
        return self.size()

    def __contains__(self, key):
        if not isinstance(key, str):
            return False
        return self.clean_key(key) in self._routes

    def __iter__(self):
        return iter(self._routes)

    def __repr__(self):
        return f"<PrefixMap size={self.size()}>"
