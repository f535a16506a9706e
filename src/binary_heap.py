"""
Binary heap stored as a linked binary tree.

The tree is kept complete, so every node still has an implicit array index
(left child 2i+1, right child 2i+2). Instead of indexing into a list, the heap
translates an index into a root-to-parent path of left/right moves and walks
the links. Rebalancing relinks nodes rather than swapping their values, so a
node object keeps its identity as it moves through the tree.
"""

import weakref
from enum import Enum
from typing import TypeVar, Generic, List, Iterator, Iterable, Optional, Tuple

T = TypeVar('T')

_LEFT = 0
_RIGHT = 1

EMPTY_HEAP_TEXT = "Heap has no nodes."


class HeapType(Enum):
    MIN = "min"
    MAX = "max"


def _get_directions(index: int) -> List[int]:
    """Moves from the root to the parent of the slot at ``index``.

    The path has ``floor(log2(index + 1)) - 1`` steps, so the root slot and
    its two children yield an empty path.
    """
    steps = (index + 1).bit_length() - 2
    directions = [_LEFT] * max(steps, 0)
    for i in range(steps - 1, -1, -1):
        index = (index - 1) // 2
        directions[i] = _RIGHT if index > 0 and index % 2 == 0 else _LEFT
    return directions


class BinaryHeap(Generic[T]):
    class Node:
        def __init__(self, value: T) -> None:
            self.value: T = value
            self.lesser: Optional['BinaryHeap.Node'] = None
            self.greater: Optional['BinaryHeap.Node'] = None
            self._parent: Optional[weakref.ref] = None

        @property
        def parent(self) -> Optional['BinaryHeap.Node']:
            if self._parent is None:
                return None
            return self._parent()

        @parent.setter
        def parent(self, node: Optional['BinaryHeap.Node']) -> None:
            self._parent = weakref.ref(node) if node is not None else None

        def __repr__(self) -> str:
            parent = self.parent
            return (
                f"Node(value={self.value!r}, "
                f"parent={parent.value if parent is not None else None!r}, "
                f"lesser={self.lesser.value if self.lesser is not None else None!r}, "
                f"greater={self.greater.value if self.greater is not None else None!r})"
            )

    def __init__(self, values: Optional[Iterable[T]] = None,
                 heap_type: HeapType = HeapType.MIN) -> None:
        if not isinstance(heap_type, HeapType):
            raise TypeError("heap_type must be a HeapType")
        self._root: Optional[BinaryHeap.Node] = None
        self._size: int = 0
        self._heap_type: HeapType = heap_type
        if values is not None:
            for value in values:
                self.add(value)

    @property
    def heap_type(self) -> HeapType:
        return self._heap_type

    def add(self, value: T) -> None:
        node = BinaryHeap.Node(value)
        if self._root is None:
            self._root = node
            self._size = 1
            return

        parent = self._walk(_get_directions(self._size))
        if parent.lesser is None:
            parent.lesser = node
        else:
            parent.greater = node
        node.parent = parent
        self._size += 1
        self._heap_up(node)

    def remove_root(self) -> Optional[T]:
        if self._root is None:
            return None
        value = self._root.value
        self._remove(value)
        return value

    def get_root_value(self) -> Optional[T]:
        if self._root is None:
            return None
        return self._root.value

    def get_heap(self) -> List[T]:
        """Values laid out exactly as an array-backed heap would hold them."""
        result: List[T] = [None] * self._size  # type: ignore[list-item]
        if self._root is None:
            return result
        stack: List[Tuple[BinaryHeap.Node, int]] = [(self._root, 0)]
        while stack:
            node, index = stack.pop()
            result[index] = node.value
            if node.greater is not None:
                stack.append((node.greater, 2 * index + 2))
            if node.lesser is not None:
                stack.append((node.lesser, 2 * index + 1))
        return result

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def clear(self) -> None:
        self._root = None
        self._size = 0

    def copy(self) -> 'BinaryHeap[T]':
        # Re-adding a valid snapshot in index order never triggers a swap,
        # so the clone ends up with the same layout.
        return BinaryHeap(self.get_heap(), heap_type=self._heap_type)

    @staticmethod
    def from_array(arr: Iterable[T], heap_type: HeapType = HeapType.MIN) -> 'BinaryHeap[T]':
        return BinaryHeap(arr, heap_type=heap_type)

    def validate(self) -> bool:
        """Check links, shape and ordering of the whole tree.

        Returns False as soon as any of these fails:
            - the root has a parent, or the root/size pair disagrees
            - a child's parent link does not point back at its parent
            - a node's implicit index falls outside [0, size)
            - the number of reachable nodes differs from size
            - a child beats its parent under the heap type
        """
        if self._root is None:
            return self._size == 0
        if self._root.parent is not None:
            return False

        count = 0
        stack: List[Tuple[BinaryHeap.Node, int]] = [(self._root, 0)]
        while stack:
            node, index = stack.pop()
            if index >= self._size:
                return False
            count += 1
            for child, child_index in ((node.lesser, 2 * index + 1),
                                       (node.greater, 2 * index + 2)):
                if child is None:
                    continue
                if child.parent is not node:
                    return False
                if self._beats(child.value, node.value):
                    return False
                stack.append((child, child_index))
        return count == self._size

    def _beats(self, a: T, b: T) -> bool:
        if self._heap_type is HeapType.MIN:
            return a < b
        return a > b

    def _walk(self, directions: List[int]) -> 'BinaryHeap.Node':
        node = self._root
        assert node is not None
        for direction in directions:
            node = node.lesser if direction == _LEFT else node.greater
            assert node is not None
        return node

    def _last_node(self) -> Optional['BinaryHeap.Node']:
        if self._root is None:
            return None
        node = self._walk(_get_directions(self._size - 1))
        if node.greater is not None:
            node = node.greater
        elif node.lesser is not None:
            node = node.lesser
        return node

    def _find_node(self, value: T) -> Optional['BinaryHeap.Node']:
        if self._root is None:
            return None
        stack: List[BinaryHeap.Node] = [self._root]
        while stack:
            node = stack.pop()
            if node.value is value or node.value == value:
                return node
            if node.greater is not None:
                stack.append(node.greater)
            if node.lesser is not None:
                stack.append(node.lesser)
        return None

    def _remove(self, value: T) -> bool:
        """Remove the first node holding ``value``; False leaves the heap as is."""
        last = self._last_node()
        if last is None:
            return False
        target = self._find_node(value)
        if target is None:
            return False

        last_parent = last.parent
        if last_parent is not None:
            if last_parent.lesser is last:
                last_parent.lesser = None
            else:
                last_parent.greater = None
        self._size -= 1

        if last is target:
            if last is self._root:
                self._root = None
            last.parent = None
            return True

        target_parent = target.parent
        if target_parent is None:
            self._root = last
        elif target_parent.lesser is target:
            target_parent.lesser = last
        else:
            target_parent.greater = last
        last.parent = target_parent
        last.lesser = target.lesser
        if last.lesser is not None:
            last.lesser.parent = last
        last.greater = target.greater
        if last.greater is not None:
            last.greater.parent = last

        target.parent = None
        target.lesser = None
        target.greater = None

        self._heap_up(last)
        self._heap_down(last)
        return True

    def _swap_with_parent(self, node: 'BinaryHeap.Node') -> None:
        parent = node.parent
        assert parent is not None
        grand_parent = parent.parent
        parent_lesser = parent.lesser
        parent_greater = parent.greater

        parent.lesser = node.lesser
        if parent.lesser is not None:
            parent.lesser.parent = parent
        parent.greater = node.greater
        if parent.greater is not None:
            parent.greater.parent = parent

        if parent_lesser is node:
            node.lesser = parent
            node.greater = parent_greater
            if parent_greater is not None:
                parent_greater.parent = node
        else:
            node.greater = parent
            node.lesser = parent_lesser
            if parent_lesser is not None:
                parent_lesser.parent = node
        parent.parent = node

        if grand_parent is None:
            node.parent = None
            self._root = node
        else:
            if grand_parent.lesser is parent:
                grand_parent.lesser = node
            else:
                grand_parent.greater = node
            node.parent = grand_parent

    def _heap_up(self, node: 'BinaryHeap.Node') -> None:
        while True:
            parent = node.parent
            if parent is None or not self._beats(node.value, parent.value):
                break
            self._swap_with_parent(node)

    def _heap_down(self, node: 'BinaryHeap.Node') -> None:
        while True:
            best = node
            if node.lesser is not None and self._beats(node.lesser.value, best.value):
                best = node.lesser
            if node.greater is not None and self._beats(node.greater.value, best.value):
                best = node.greater
            if best is node:
                break
            self._swap_with_parent(best)

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __iter__(self) -> Iterator[T]:
        heap_copy = self.copy()
        while not heap_copy.is_empty():
            yield heap_copy.remove_root()  # type: ignore[misc]

    def __repr__(self) -> str:
        return f"BinaryHeap({self.get_heap()}, heap_type=HeapType.{self._heap_type.name})"

    def __str__(self) -> str:
        if self._root is None:
            return EMPTY_HEAP_TEXT
        return ", ".join(str(value) for value in self.get_heap())
