"""Tests for the node contract and the thread-safe reference node."""

import threading

from walkrank.node import BaseNode, NamedNode, Node


class _PlainNode:
    """Duck-typed node without any walkrank base class."""

    def __init__(self) -> None:
        self.count = 0

    def is_starter(self) -> bool:
        return True

    def traverse(self) -> None:
        self.count += 1

    def traversals(self) -> int:
        return self.count


class TestNodeProtocol:
    """Any object with the three methods satisfies Node."""

    def test_base_node_is_node(self) -> None:
        assert isinstance(BaseNode(), Node)

    def test_duck_typed_node_is_node(self) -> None:
        assert isinstance(_PlainNode(), Node)

    def test_object_is_not_node(self) -> None:
        assert not isinstance(object(), Node)


class TestBaseNode:
    """Counter and starter flag behaviour."""

    def test_starts_at_zero(self) -> None:
        assert BaseNode().traversals() == 0

    def test_starter_by_default(self) -> None:
        assert BaseNode().is_starter() is True
        assert BaseNode(nonstarter=True).is_starter() is False

    def test_traverse_increments_by_one(self) -> None:
        node = BaseNode()
        node.traverse()
        node.traverse()
        assert node.traversals() == 2

    def test_identity_hashing(self) -> None:
        a, b = NamedNode("x"), NamedNode("x")
        assert a != b
        assert len({a, b}) == 2

    def test_concurrent_traverse_exact(self) -> None:
        node = BaseNode()
        n_threads, per_thread = 8, 5000

        def work() -> None:
            for _ in range(per_thread):
                node.traverse()

        threads = [threading.Thread(target=work) for _ in range(n_threads)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert node.traversals() == n_threads * per_thread

    def test_named_node_fields(self) -> None:
        node = NamedNode("page", id=3, nonstarter=True)
        assert node.name == "page"
        assert node.id == 3
        assert not node.is_starter()
        assert "page" in repr(node)
