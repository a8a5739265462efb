"""
Weighted quick-union with path compression.

Used by UFPercolation to keep track of which open sites are connected to
the virtual source and sink as sites are opened.
"""


class WeightedQuickUnionUF:
    """
    Disjoint-set forest over the elements 0 .. n-1.

    Smaller trees are linked under larger ones and find() compresses the
    path it walks, so any sequence of operations runs in near-constant
    amortized time per operation.
    """

    def __init__(self, n: int):
        """
        Initialize n singleton components.

        Args:
            n: Number of elements
        """
        if n <= 0:
            raise ValueError(f"n must be > 0, got {n}")

        self._parent = list(range(n))
        self._size = [1] * n
        self._count = n

    def __len__(self) -> int:
        return len(self._parent)

    @property
    def count(self) -> int:
        """Number of components."""
        return self._count

    def _validate(self, p: int) -> None:
        n = len(self._parent)
        if p < 0 or p >= n:
            raise IndexError(f"index {p} is not between 0 and {n - 1}")

    def find(self, p: int) -> int:
        """Return the root of the component containing p."""
        self._validate(p)
        parent = self._parent

        root = p
        while root != parent[root]:
            root = parent[root]

        while p != root:
            parent[p], p = root, parent[p]

        return root

    def connected(self, p: int, q: int) -> bool:
        """Return True if p and q are in the same component."""
        return self.find(p) == self.find(q)

    def union(self, p: int, q: int) -> None:
        """Merge the components containing p and q."""
        root_p = self.find(p)
        root_q = self.find(q)
        if root_p == root_q:
            return

        if self._size[root_p] < self._size[root_q]:
            root_p, root_q = root_q, root_p
        self._parent[root_q] = root_p
        self._size[root_p] += self._size[root_q]
        self._count -= 1
