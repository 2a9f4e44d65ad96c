"""
Binary min-heap over vertices with decrease-key.

Each vertex may be held at most once. The heap slot of every held vertex is
written back to ``vertices[v].queue_slot`` on every swap, so ``decrease`` can
find the element in O(1) and re-heapify in O(log n).
"""

from dataclasses import dataclass
from typing import List

from kshortest.exceptions import QueueInvariantError


@dataclass
class HeapElement:
    vertex: int
    priority: float
    path_cost: float


class IndexedPriorityQueue:

    def __init__(self, vertices):
        # vertices: any sequence of records with a mutable queue_slot attribute
        self._vertices = vertices
        self._heap: List[HeapElement] = []
        for vertex in vertices:
            vertex.queue_slot = None

    def __len__(self):
        return len(self._heap)

    def is_empty(self):
        return not self._heap

    def contains(self, vertex):
        return self._vertices[vertex].queue_slot is not None

    def slot_of(self, vertex):
        return self._vertices[vertex].queue_slot

    def peek(self):
        if not self._heap:
            raise QueueInvariantError("peek on empty queue")
        return self._heap[0]

    def push(self, vertex, priority, path_cost):
        if self.contains(vertex):
            raise QueueInvariantError(f"vertex {vertex} is already queued, use decrease()")
        self._heap.append(HeapElement(vertex, priority, path_cost))
        index = len(self._heap) - 1
        self._vertices[vertex].queue_slot = index
        self._sift_up(index)

    def pop_min(self):
        if not self._heap:
            raise QueueInvariantError("pop_min on empty queue")
        last = len(self._heap) - 1
        self._swap(0, last)
        result = self._heap.pop()
        self._vertices[result.vertex].queue_slot = None
        if self._heap:
            self._sift_down(0)
        return result

    def decrease(self, vertex, priority, path_cost):
        index = self._vertices[vertex].queue_slot
        if index is None:
            raise QueueInvariantError(f"vertex {vertex} is not queued")
        element = self._heap[index]
        if priority > element.priority:
            raise QueueInvariantError(
                f"cannot raise priority of vertex {vertex} from {element.priority} to {priority}")
        element.priority = priority
        element.path_cost = path_cost
        self._sift_up(index)

    def check_invariants(self):
        """Raise QueueInvariantError if heap order or recorded slots are broken."""
        for index, element in enumerate(self._heap):
            if self._vertices[element.vertex].queue_slot != index:
                raise QueueInvariantError(f"vertex {element.vertex} recorded at wrong slot")
            if index > 0 and element.priority < self._heap[(index - 1) // 2].priority:
                raise QueueInvariantError(f"heap order violated at slot {index}")

    def _sift_up(self, index):
        heap = self._heap
        while index > 0:
            parent = (index - 1) // 2
            if heap[index].priority < heap[parent].priority:
                self._swap(index, parent)
                index = parent
            else:
                return

    def _sift_down(self, index):
        heap = self._heap
        size = len(heap)
        while True:
            left = 2 * index + 1
            if left >= size:
                return
            right = left + 1
            child = left
            if right < size and heap[right].priority < heap[left].priority:
                child = right
            if heap[child].priority < heap[index].priority:
                self._swap(child, index)
                index = child
            else:
                return

    def _swap(self, i, j):
        heap = self._heap
        heap[i], heap[j] = heap[j], heap[i]
        self._vertices[heap[i].vertex].queue_slot = i
        self._vertices[heap[j].vertex].queue_slot = j
