# File: src/storeypark/domain/slot_chain.py
"""
Slot Chain for the Storey Parking System

An ordered, doubly linked chain of occupied slots stored in an arena:
1. Records live in a flat list and link to each other by integer index
2. NIL marks "no neighbour"; freed records go on a free list for reuse
3. Positions strictly increase along the next links and never repeat
4. All traversals are iterative and linear; no index is maintained

Allocation policy: the lowest vacant position is always filled first,
so positions freed by a release are reused before the chain grows.
"""

from dataclasses import dataclass
from typing import Iterator, List, Optional

from .models import NIL, ChainCorruptedError, SlotView, StoreyError, Vehicle


@dataclass
class SlotRecord:
    """Arena record for one slot; position 0 marks a freed record"""
    position: int = 0
    occupant: Optional[Vehicle] = None
    prev: int = NIL
    next: int = NIL

    @property
    def is_live(self) -> bool:
        return self.position > 0 and self.occupant is not None


class SlotChain:
    """
    Ordered chain of occupied slots

    The chain owns the head index. Callers address nodes by the integer
    index returned from insertion and search methods and read them through
    SlotView snapshots.
    """

    def __init__(self):
        self._records: List[SlotRecord] = []
        self._free: List[int] = []
        self._head: int = NIL

    # ------------------------------------------------------------------
    # Arena bookkeeping
    # ------------------------------------------------------------------

    @property
    def head(self) -> int:
        """Index of the first node, NIL when the chain is empty"""
        return self._head

    @property
    def is_empty(self) -> bool:
        return self._head == NIL

    def _allocate_record(self, vehicle: Vehicle, position: int) -> int:
        """Take a record from the free list or grow the arena"""
        if self._free:
            index = self._free.pop()
            record = self._records[index]
            record.position = position
            record.occupant = vehicle
            record.prev = NIL
            record.next = NIL
            return index

        self._records.append(SlotRecord(position=position, occupant=vehicle))
        return len(self._records) - 1

    def _live(self, index: int) -> SlotRecord:
        if not 0 <= index < len(self._records) or not self._records[index].is_live:
            raise StoreyError(f"No live slot at index {index}")
        return self._records[index]

    def view(self, index: int) -> SlotView:
        """Snapshot of the node at the given index"""
        record = self._live(index)
        return SlotView.of(record.position, record.occupant)

    def position_of(self, index: int) -> int:
        return self._live(index).position

    def next_of(self, index: int) -> int:
        return self._live(index).next

    def prev_of(self, index: int) -> int:
        return self._live(index).prev

    # ------------------------------------------------------------------
    # Insertion
    # ------------------------------------------------------------------

    def insert_ordered(self, vehicle: Vehicle) -> int:
        """
        Insert a vehicle at the lowest vacant position

        Returns: arena index of the new node
        """
        if self._head == NIL:
            index = self._allocate_record(vehicle, 1)
            self._head = index
            return index

        head = self._records[self._head]
        if head.position > 1:
            # Position 1 is vacant: the new node becomes the head
            index = self._allocate_record(vehicle, 1)
            self._records[index].next = self._head
            head.prev = index
            self._head = index
            return index

        current = self._head
        while True:
            record = self._records[current]
            if record.next == NIL:
                return self._link_after(current, vehicle, record.position + 1)

            if self._records[record.next].position > record.position + 1:
                return self._link_after(current, vehicle, record.position + 1)

            current = record.next

    def insert_at(self, vehicle: Vehicle, position: int) -> int:
        """
        Insert a vehicle at an explicit vacant position

        Raises: StoreyError if the position is not positive or is occupied
        """
        if position < 1:
            raise StoreyError(f"Slot position must be positive, got: {position}")

        prev = NIL
        current = self._head
        while current != NIL and self._records[current].position < position:
            prev = current
            current = self._records[current].next

        if current != NIL and self._records[current].position == position:
            raise StoreyError(f"Slot {position} is already occupied")

        if prev == NIL:
            index = self._allocate_record(vehicle, position)
            self._records[index].next = current
            if current != NIL:
                self._records[current].prev = index
            self._head = index
            return index

        return self._link_after(prev, vehicle, position)

    def _link_after(self, prev: int, vehicle: Vehicle, position: int) -> int:
        """Splice a new node between prev and its current successor"""
        index = self._allocate_record(vehicle, position)
        record = self._records[index]
        successor = self._records[prev].next

        record.prev = prev
        record.next = successor
        if successor != NIL:
            self._records[successor].prev = index
        self._records[prev].next = index
        return index

    # ------------------------------------------------------------------
    # Removal
    # ------------------------------------------------------------------

    def remove(self, index: int) -> SlotView:
        """
        Unlink the node from both neighbours and recycle its record

        Returns: snapshot of the removed node (position and vehicle)
        """
        record = self._live(index)
        removed = SlotView.of(record.position, record.occupant)

        if record.prev == NIL:
            self._head = record.next
        else:
            self._records[record.prev].next = record.next

        if record.next != NIL:
            self._records[record.next].prev = record.prev

        record.position = 0
        record.occupant = None
        record.prev = NIL
        record.next = NIL
        self._free.append(index)
        return removed

    # ------------------------------------------------------------------
    # Traversal and search
    # ------------------------------------------------------------------

    def iter_nodes(self) -> Iterator[int]:
        """Yield live node indices in ascending position order"""
        current = self._head
        while current != NIL:
            yield current
            current = self._records[current].next

    def find_by_plate(self, plate: str) -> int:
        """Index of the first node holding the plate, or NIL"""
        for index in self.iter_nodes():
            if self._records[index].occupant.plate == plate:
                return index
        return NIL

    def find_by_position(self, position: int) -> int:
        """Index of the node at the position, or NIL"""
        for index in self.iter_nodes():
            current = self._records[index].position
            if current == position:
                return index
            if current > position:
                break
        return NIL

    def find_all_by_color(self, color: str) -> List[int]:
        """Indices of every node whose occupant has the color, in order"""
        return [
            index for index in self.iter_nodes()
            if self._records[index].occupant.color == color
        ]

    def list_all(self) -> List[SlotView]:
        """Snapshot of all nodes in position order"""
        return [self.view(index) for index in self.iter_nodes()]

    def positions(self) -> List[int]:
        return [self._records[index].position for index in self.iter_nodes()]

    def count(self) -> int:
        """Number of live nodes, counted on every call"""
        total = 0
        for _ in self.iter_nodes():
            total += 1
        return total

    def __len__(self) -> int:
        return self.count()

    def __iter__(self) -> Iterator[SlotView]:
        for index in self.iter_nodes():
            yield self.view(index)

    # ------------------------------------------------------------------
    # Invariants
    # ------------------------------------------------------------------

    def check_invariants(self) -> None:
        """
        Verify ordering and link symmetry of the whole chain

        Raises: ChainCorruptedError on the first violation found
        """
        if self._head != NIL and self._records[self._head].prev != NIL:
            raise ChainCorruptedError("Head node has a predecessor")

        seen = 0
        prev = NIL
        last_position = 0
        current = self._head
        while current != NIL:
            record = self._records[current]
            if not record.is_live:
                raise ChainCorruptedError(f"Freed record {current} is reachable")
            if record.prev != prev:
                raise ChainCorruptedError(
                    f"Slot {record.position} links back to {record.prev}, expected {prev}"
                )
            if record.position <= last_position:
                raise ChainCorruptedError(
                    f"Slot {record.position} follows slot {last_position}"
                )

            seen += 1
            if seen > len(self._records):
                raise ChainCorruptedError("Cycle detected in slot chain")

            last_position = record.position
            prev = current
            current = record.next

        if seen + len(self._free) != len(self._records):
            raise ChainCorruptedError(
                f"{len(self._records) - seen - len(self._free)} records are unreachable"
            )

    def __repr__(self) -> str:
        return f"SlotChain(positions={self.positions()})"
