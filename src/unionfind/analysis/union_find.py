"""UnionFind (disjoint-set forest) with union by rank and path compression.

Elements are arbitrary hashable values. ``None`` is reserved as the
"not found" answer of :meth:`UnionFind.find` and is never registered.

Basic usage:

    uf = UnionFind()
    uf.make_set(1, 2, 3, 4)
    uf.union(1, 2)
    uf.union(3, 4)
    uf.union(2, 3)
    uf.connected(1, 4)  # True
"""

from collections.abc import Hashable, Iterable
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T", bound=Hashable)


def _same(a: object, b: object) -> bool:
    # Identity first: values such as NaN are registered but never equal to themselves
    return a is b or a == b


@dataclass
class Node(Generic[T]):
    """Forest node owned by a single registered element."""

    parent: T
    rank: int = 0


class UnionFind(Generic[T]):
    """Disjoint-set forest.

    Union by rank keeps trees O(log N) high, and path compression during
    ``find`` flattens them further, so a sequence of M operations on N
    elements runs in O(M * alpha(N)) amortized time.

    Lookups of unregistered elements never raise: ``find`` returns ``None``
    and ``connected`` returns ``False``.

    Not thread-safe. Callers sharing a forest must serialize access.

    Attributes:
        nodes: Mapping from each registered element to its node.
    """

    def __init__(self, elements: Iterable[T] | None = None) -> None:
        """Initialize the forest, optionally registering ``elements`` as singletons."""
        self.nodes: dict[T, Node[T]] = {}
        self._count = 0
        if elements is not None:
            self.make_set(*elements)

    def make_set(self, *elements: T | None) -> None:
        """Register each element as a singleton group.

        ``None`` and already registered elements are skipped.

        Args:
            *elements: Elements to register.
        """
        for element in elements:
            if element is None or element in self.nodes:
                continue
            self.nodes[element] = Node(parent=element)
            self._count += 1

    def find(self, x: T) -> T | None:
        """Find the root of the group containing x, compressing the path.

        Every node visited on the way up is relinked directly to the root.

        Args:
            x: Element to look up.

        Returns:
            The root element, or None if x was never registered.
        """
        if x is None or x not in self.nodes:
            return None

        path = []
        root = x
        while not _same(self.nodes[root].parent, root):
            path.append(root)
            root = self.nodes[root].parent

        for element in path:
            self.nodes[element].parent = root

        return root

    def union(self, x: T | None, y: T | None) -> T | None:
        """Merge the groups containing x and y.

        Unregistered elements are registered first. When the roots differ the
        root of lower rank is attached under the higher one; on equal ranks
        y's root goes under x's root, whose rank grows by one.

        Args:
            x: Element from the first group.
            y: Element from the second group.

        Returns:
            The root of the merged group, or None if either argument is None.
        """
        self.make_set(x, y)
        if x is None or y is None:
            return None

        root_x = self.find(x)
        root_y = self.find(y)
        if _same(root_x, root_y):
            return root_x

        node_x = self.nodes[root_x]
        node_y = self.nodes[root_y]
        if node_x.rank < node_y.rank:
            node_x.parent = root_y
            survivor = root_y
        elif node_x.rank > node_y.rank:
            node_y.parent = root_x
            survivor = root_x
        else:
            node_y.parent = root_x
            node_x.rank += 1
            survivor = root_x

        self._count -= 1
        return survivor

    def connected(self, x: T, y: T) -> bool:
        """Check whether x and y belong to the same group.

        Unregistered elements are not connected to anything, themselves included.
        """
        root_x = self.find(x)
        if root_x is None:
            return False
        return _same(root_x, self.find(y))

    def exists(self, x: T) -> bool:
        """Check whether x has been registered."""
        return x is not None and x in self.nodes

    def count(self) -> int:
        """Number of disjoint groups."""
        return self._count

    def size(self) -> int:
        """Number of registered elements."""
        return len(self.nodes)

    def rank(self, x: T) -> int | None:
        """Rank of x's node, or None if x was never registered."""
        node = self.nodes.get(x) if x is not None else None
        return node.rank if node is not None else None

    def get_groups(self) -> dict[T, list[T]]:
        """Get all groups as {root: [members]}, members in registration order."""
        groups: dict[T, list[T]] = {}
        for element in self.nodes:
            groups.setdefault(self.find(element), []).append(element)
        return groups

    def __contains__(self, x: object) -> bool:
        return self.exists(x)  # type: ignore[arg-type]

    def __len__(self) -> int:
        return self.size()

    def __str__(self) -> str:
        return " ".join(str(members) for members in self.get_groups().values())

    def __repr__(self) -> str:
        return f"UnionFind(elements={self.size()}, groups={self.count()})"
