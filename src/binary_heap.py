"""
Binary heap with a pluggable ordering predicate.

The heap is a complete binary tree stored in a flat list: the root sits at
index 0 and the children of index i sit at 2i + 1 and 2i + 2. A single
predicate order(a, b) decides whether a belongs nearer the root than b, so
the same class serves as a min-heap, a max-heap or any custom priority queue.

The predicate must behave like a total order (transitive, consistent between
calls), either non-strict like <= or strict like the max ordering's y < x.
Either way the invariant is that no child outranks its parent:
order(child, parent) only holds when the two are equal. A predicate that does
not behave is a caller error; the heap invariant is undefined afterwards.
"""

from typing import Callable, Generic, Iterable, Iterator, List, Optional, TypeVar

T = TypeVar('T')

Order = Callable[[T, T], bool]


def less_or_equal(x, y) -> bool:
    """Min-heap ordering."""
    return x <= y


def greater_than(x, y) -> bool:
    """Max-heap ordering."""
    return y < x


class BinaryHeap(Generic[T]):
    def __init__(
        self,
        items: Optional[Iterable[T]] = None,
        order: Optional[Order[T]] = None,
    ) -> None:
        if order is None:
            order = less_or_equal
        if not callable(order):
            raise TypeError("order must be callable")
        self._order: Order[T] = order
        self._data: List[T] = list(items) if items is not None else []
        if self._data:
            self._build()

    @staticmethod
    def from_sequence(
        items: Iterable[T], order: Optional[Order[T]] = None
    ) -> 'BinaryHeap[T]':
        """Build a heap from a sequence in O(n).

        Note: Creates a shallow copy of the input.
        """
        return BinaryHeap(items, order)

    @property
    def order(self) -> Order[T]:
        return self._order

    # Queries

    def count(self) -> int:
        return len(self._data)

    def size(self) -> int:
        return len(self._data)

    def is_empty(self) -> bool:
        return self.count() == 0

    def peek(self) -> Optional[T]:
        return self._data[0] if self._data else None

    # Mutation

    def insert(self, value: T) -> None:
        """Add value in O(log n). If the order raises, the heap is unchanged."""
        self._data.append(value)
        try:
            self._sift_up(self._last_index())
        except Exception:
            self._data.pop()
            raise

    push = insert

    def remove(self) -> None:
        """Discard the root. Does nothing on an empty heap."""
        if self.count() < 2:
            self._data.clear()
            return
        self._swap(0, self._last_index())
        self._data.pop()
        self._sift_down(0)

    def extract(self) -> Optional[T]:
        """Remove and return the root, or None if the heap is empty.

        extract_min, extract_max and pop are aliases. They follow the
        configured order, not their names: extract_min on a max-heap returns
        the maximum.
        """
        top = self.peek()
        self.remove()
        return top

    extract_min = extract
    extract_max = extract
    pop = extract

    def copy(self) -> 'BinaryHeap[T]':
        clone: BinaryHeap[T] = BinaryHeap(order=self._order)
        clone._data = self._data.copy()
        return clone

    def to_list(self) -> List[T]:
        """Snapshot of the backing list in heap order, not sorted order."""
        return list(self._data)

    # Index arithmetic

    def _last_index(self) -> int:
        return len(self._data) - 1

    def _parent(self, index: int) -> Optional[int]:
        if index <= 0:
            return None
        return (index - 1) // 2

    def _left_child(self, index: int) -> Optional[int]:
        child = 2 * index + 1
        return child if child < len(self._data) else None

    def _right_child(self, index: int) -> Optional[int]:
        child = 2 * index + 2
        return child if child < len(self._data) else None

    def _is_ordered(self, a: int, b: int) -> bool:
        return self._order(self._data[a], self._data[b])

    def _swap(self, a: int, b: int) -> None:
        self._data[a], self._data[b] = self._data[b], self._data[a]

    # Structural operations

    def _build(self) -> None:
        # Leaves are already heaps; start from the last node with a child.
        for i in range(len(self._data) // 2 - 1, -1, -1):
            self._sift_down(i)

    def _sift_up(self, index: int) -> None:
        # All comparisons run before any swap, so a raising order leaves the
        # list as it was.
        target = index
        parent = self._parent(target)
        while parent is not None and not self._is_ordered(parent, index):
            target = parent
            parent = self._parent(target)
        while index != target:
            parent = self._parent(index)
            self._swap(parent, index)
            index = parent

    def _sift_down(self, index: int) -> None:
        while True:
            left = self._left_child(index)
            right = self._right_child(index)
            target: Optional[int] = None
            # A node with a right child always has a left child.
            if right is not None and not self._is_ordered(index, right):
                target = left if self._is_ordered(left, right) else right
            elif left is not None and not self._is_ordered(index, left):
                target = left
            if target is None:
                break
            self._swap(index, target)
            index = target

    def __len__(self) -> int:
        return len(self._data)

    def __bool__(self) -> bool:
        return len(self._data) > 0

    def __repr__(self) -> str:
        return f"BinaryHeap({self._data!r})"

    def __str__(self) -> str:
        return str(self._data)

    def __iter__(self) -> Iterator[T]:
        heap_copy = self.copy()
        while not heap_copy.is_empty():
            yield heap_copy.extract()


def MinHeap(items: Optional[Iterable[T]] = None) -> BinaryHeap[T]:
    return BinaryHeap(items, less_or_equal)


def MaxHeap(items: Optional[Iterable[T]] = None) -> BinaryHeap[T]:
    return BinaryHeap(items, greater_than)
