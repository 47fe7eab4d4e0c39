"""Thread-safe reference node implementation."""

import threading


class BaseNode:
    """Traversal counter plus starter flag.

    Subclass it or compose it into caller-side node types. Counts are
    incremented under a per-node lock, so several graphs may walk over the
    same BaseNode objects concurrently without losing increments. Equality
    and hashing are by identity.
    """

    __slots__ = ("_traversals", "_lock", "nonstarter")

    def __init__(self, nonstarter: bool = False) -> None:
        self._traversals = 0
        self._lock = threading.Lock()
        self.nonstarter = nonstarter

    def is_starter(self) -> bool:
        return not self.nonstarter

    def traverse(self) -> None:
        with self._lock:
            self._traversals += 1

    def traversals(self) -> int:
        with self._lock:
            return self._traversals

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(traversals={self.traversals()}, "
            f"starter={self.is_starter()})"
        )


class NamedNode(BaseNode):
    """BaseNode carrying a caller-facing name and numeric id."""

    __slots__ = ("name", "id")

    def __init__(self, name: str, id: int = 0, nonstarter: bool = False) -> None:
        super().__init__(nonstarter=nonstarter)
        self.name = name
        self.id = id

    def __repr__(self) -> str:
        return f"NamedNode({self.name!r}, id={self.id}, traversals={self.traversals()})"
