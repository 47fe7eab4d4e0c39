"""Node capability contract consumed by the walk engine."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Node(Protocol):
    """Anything the walk engine can start from, step onto, and score.

    Nodes are used as lookup keys by the caller's edge resolver, so they
    must be hashable. traverse() must be safe to call from several threads
    when independent graphs share node objects.
    """

    def is_starter(self) -> bool:
        """Whether walks may originate at this node."""
        ...

    def traverse(self) -> None:
        """Increment the traversal counter by exactly one."""
        ...

    def traversals(self) -> int:
        """Cumulative traversal count."""
        ...
