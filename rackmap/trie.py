import logging
import typing
import weakref

log = logging.getLogger(__name__)

DELIMITER = "/"


def string_to_path(val: str) -> typing.List[str]:
    # turn a //rack//host/ into ['rack', 'host'], runs of / count as one
    return [part for part in val.split(DELIMITER) if part]


def trim_prefix(prefix: str) -> str:
    # canonical form of a key: single leading /, no trailing / (unless it's exactly /)
    return DELIMITER + DELIMITER.join(string_to_path(prefix))


class TrieNode:
    __slots__ = ("segment", "terminal_key", "children", "_parent", "__weakref__")

    def __init__(self, segment: str = "", parent: typing.Optional["TrieNode"] = None):
        self.segment = segment
        self.terminal_key: typing.Optional[str] = None
        self.children: typing.Dict[str, TrieNode] = {}
        # parents own their children, never the other way around
        self._parent = weakref.ref(parent) if parent is not None else None

    @property
    def parent(self) -> typing.Optional["TrieNode"]:
        return self._parent() if self._parent is not None else None

    @property
    def is_terminal(self) -> bool:
        return self.terminal_key is not None

    def first_child(self) -> "TrieNode":
        # lexicographically smallest segment wins ties
        return self.children[min(self.children)]

    def __repr__(self):
        return f"<TrieNode {self.segment or '<root>'!r} key={self.terminal_key!r} children={len(self.children)}>"


class PathTrie:
    """Tree of path segments for every key currently stored.

    Only nodes that end a stored key carry a ``terminal_key``. Intermediate
    nodes exist only to route to a terminal descendant, and are pruned as soon
    as they stop doing so.
    """

    def __init__(self):
        self.root = TrieNode()

    def is_empty(self) -> bool:
        return not self.root.children and not self.root.is_terminal

    def clear(self):
        self.root = TrieNode()

    def _find(self, path) -> typing.Optional[TrieNode]:
        node = self.root
        for part in path:
            node = node.children.get(part)
            if node is None:
                return None
        return node

    def insert(self, key: str):
        # add `key` to the trie, creating intermediate nodes as needed
        node = self.root
        for part in string_to_path(key):
            if part not in node.children:
                node.children[part] = TrieNode(part, parent=node)
            node = node.children[part]
        if node.terminal_key is None:
            node.terminal_key = key

    def remove(self, key: str) -> bool:
        # unmark `key` and prune the branch that only existed for it
        node = self._find(string_to_path(key))
        if node is None or not node.is_terminal:
            # Requested node doesn't exist, consider it already removed.
            return False
        node.terminal_key = None

        parent = node.parent
        while parent is not None and not node.children and not node.is_terminal:
            # routes nowhere and holds no key
            del parent.children[node.segment]
            log.debug(f"Pruned {node.segment!r} while removing {key}")
            node, parent = parent, parent.parent
        return True

    def find_nearest(self, key: str) -> str:
        """Return the stored key closest to `key`.

        Walks down the segments of `key` as far as the trie allows, then picks
        a leaf under the deepest visited node that still has children. Siblings
        are tried in lexicographic order so the result is stable for a given
        trie.
        """
        if self.is_empty():
            raise AssertionError(f"find_nearest({key!r}) called on an empty trie")

        node = ancestor = self.root
        for part in string_to_path(key):
            node = node.children.get(part)
            if node is None or not node.children:
                break
            ancestor = node

        node = ancestor
        while node.children:
            node = node.first_child()

        if not node.is_terminal:
            raise AssertionError(f"Reached non-terminal leaf {node!r} while resolving {key!r}")
        return node.terminal_key

    def walk(self) -> typing.Iterator[typing.Tuple[int, TrieNode]]:
        # depth first, (depth, node) pairs in the same order find_nearest picks children
        stack = [(0, self.root)]
        while stack:
            depth, node = stack.pop()
            yield depth, node
            for segment in sorted(node.children, reverse=True):
                stack.append((depth + 1, node.children[segment]))

    def format_tree(self) -> str:
        lines = []
        for depth, node in self.walk():
            label = node.segment or DELIMITER
            if node.is_terminal:
                label += f" ({node.terminal_key})"
            lines.append("  " * depth + label)
        return "\n".join(lines)
