# File: src/storeypark/domain/level.py
"""
Level Aggregate for the Storey Parking System

A Level is one parking floor: a SlotChain bounded by a fixed capacity.
It is the only entry point for chain mutation and translates empty-chain
and no-match conditions into the Failure taxonomy.

Business Rules:
- Occupancy never exceeds capacity
- New vehicles always get the lowest vacant slot number
- A plate may be parked at most once per level (unless disabled)
"""

from typing import List, Optional

from .models import NIL, Failure, Outcome, SlotView, StoreyError, Vehicle
from .slot_chain import SlotChain
from .strategies import GapScanStrategy, PositionStrategy


def _key(value):
    """Lookup keys are compared the way Vehicle stores them: stripped"""
    return value.strip() if isinstance(value, str) else value


class Level:
    """
    Aggregate Root: a capacity-bounded parking level

    The level is not thread-safe; guard the whole level with one lock per
    request when sharing it.
    """

    def __init__(
        self,
        capacity: int,
        strategy: Optional[PositionStrategy] = None,
        unique_plates: bool = True
    ):
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 1:
            raise StoreyError(f"Level capacity must be a positive integer, got: {capacity}")

        self._capacity = capacity
        self._chain = SlotChain()
        self._strategy = strategy or GapScanStrategy()
        self._unique_plates = unique_plates

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def strategy(self) -> PositionStrategy:
        return self._strategy

    @property
    def unique_plates(self) -> bool:
        return self._unique_plates

    @property
    def head_position(self) -> Optional[int]:
        """Position of the first occupied slot, None when empty"""
        if self._chain.is_empty:
            return None
        return self._chain.position_of(self._chain.head)

    def occupancy_count(self) -> int:
        """Number of occupied slots; zero on an empty level"""
        return self._chain.count()

    def available_count(self) -> int:
        return self._capacity - self._chain.count()

    def is_full(self) -> bool:
        return self._chain.count() >= self._capacity

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def allocate(self, plate: str, color: str) -> Outcome[int]:
        """
        Park a vehicle in the lowest vacant slot

        Returns: Outcome with the assigned position, or CAPACITY_EXCEEDED /
        DUPLICATE_PLATE
        """
        if self.is_full():
            return Outcome.fail(Failure.CAPACITY_EXCEEDED)

        vehicle = Vehicle(plate, color)
        if self._unique_plates and self._chain.find_by_plate(vehicle.plate) != NIL:
            return Outcome.fail(Failure.DUPLICATE_PLATE)

        index = self._strategy.place(self._chain, vehicle)
        return Outcome.success(self._chain.position_of(index))

    def release_by_plate(self, plate: str) -> Outcome[SlotView]:
        """
        Free the slot holding the plate

        Returns: Outcome with the freed slot, or NO_VEHICLES_PARKED / NOT_FOUND
        """
        if self._chain.is_empty:
            return Outcome.fail(Failure.NO_VEHICLES_PARKED)

        return self._release(self._chain.find_by_plate(_key(plate)))

    def release_by_position(self, position: int) -> Outcome[SlotView]:
        """
        Free the slot at the position

        Returns: Outcome with the freed slot, or NO_VEHICLES_PARKED / NOT_FOUND
        """
        if self._chain.is_empty:
            return Outcome.fail(Failure.NO_VEHICLES_PARKED)

        return self._release(self._chain.find_by_position(position))

    def _release(self, index: int) -> Outcome[SlotView]:
        if index == NIL:
            return Outcome.fail(Failure.NOT_FOUND)

        freed = self._chain.remove(index)
        self._strategy.released(self._chain, freed.position)
        return Outcome.success(freed)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def find_by_plate(self, plate: str) -> Outcome[int]:
        """Position of the vehicle with the plate"""
        if self._chain.is_empty:
            return Outcome.fail(Failure.NO_VEHICLES_PARKED)

        index = self._chain.find_by_plate(_key(plate))
        if index == NIL:
            return Outcome.fail(Failure.NOT_FOUND)
        return Outcome.success(self._chain.position_of(index))

    def find_by_position(self, position: int) -> Outcome[SlotView]:
        if self._chain.is_empty:
            return Outcome.fail(Failure.NO_VEHICLES_PARKED)

        index = self._chain.find_by_position(position)
        if index == NIL:
            return Outcome.fail(Failure.NOT_FOUND)
        return Outcome.success(self._chain.view(index))

    def find_all_by_color(self, color: str) -> Outcome[List[SlotView]]:
        """All slots whose vehicle has the color, in position order"""
        if self._chain.is_empty:
            return Outcome.fail(Failure.NO_VEHICLES_PARKED)

        matches = [
            self._chain.view(index) for index in self._chain.find_all_by_color(_key(color))
        ]
        if not matches:
            return Outcome.fail(Failure.ATTRIBUTE_NOT_FOUND)
        return Outcome.success(matches)

    def list_all(self) -> Outcome[List[SlotView]]:
        """Every occupied slot in position order"""
        if self._chain.is_empty:
            return Outcome.fail(Failure.NO_VEHICLES_PARKED)
        return Outcome.success(self._chain.list_all())

    def slots(self) -> List[SlotView]:
        """Every occupied slot in position order; empty list when empty"""
        return self._chain.list_all()

    def check_invariants(self) -> None:
        """Verify chain structure and the capacity bound"""
        self._chain.check_invariants()
        occupied = self._chain.count()
        if occupied > self._capacity:
            raise StoreyError(f"Occupancy {occupied} exceeds capacity {self._capacity}")

    def __len__(self) -> int:
        return self.occupancy_count()

    def __str__(self) -> str:
        return f"Level: {self.occupancy_count()}/{self._capacity} occupied"

    def __repr__(self) -> str:
        return f"Level(capacity={self._capacity}, positions={self._chain.positions()})"
