# File: src/storeypark/domain/strategies.py
"""
Strategy Pattern Implementation for slot position assignment

Each strategy decides where a new vehicle goes in a SlotChain. All of them
honour first-fit-by-position: the lowest vacant position is always chosen.

Key Strategies:
1. GapScanStrategy - walks the chain and fills the first gap (O(n))
2. FreePositionHeapStrategy - keeps vacated positions in a min-heap so the
   position is chosen in O(log n); the splice itself still walks the chain
"""

from abc import ABC, abstractmethod
import heapq
from typing import Dict, List, Optional, Type

from .models import StoreyError, Vehicle
from .slot_chain import SlotChain


# ============================================================================
# STRATEGY INTERFACE
# ============================================================================

class PositionStrategy(ABC):
    """
    Abstract base class for position assignment strategies
    """

    @abstractmethod
    def place(self, chain: SlotChain, vehicle: Vehicle) -> int:
        """
        Insert the vehicle into the chain at the lowest vacant position
        Returns: arena index of the new node
        """
        pass

    def released(self, chain: SlotChain, position: int) -> None:
        """Notify the strategy that a position of the chain was vacated"""
        pass

    def get_strategy_name(self) -> str:
        """Get human-readable strategy name"""
        return self.__class__.__name__.replace("Strategy", "")

    def __str__(self) -> str:
        return f"{self.get_strategy_name()} Strategy"


# ============================================================================
# CONCRETE STRATEGIES
# ============================================================================

class GapScanStrategy(PositionStrategy):
    """Fill the first gap found by walking the chain from its head"""

    def place(self, chain: SlotChain, vehicle: Vehicle) -> int:
        return chain.insert_ordered(vehicle)


class FreePositionHeapStrategy(PositionStrategy):
    """
    Track vacated positions in a min-heap

    Every position in 1..high_water that is not occupied is on the heap, so
    the heap minimum is the lowest vacancy. With an empty heap the chain is
    dense and grows at high_water + 1.

    The heap describes one chain at a time. When handed a different chain
    (an instance shared between levels) it is rebuilt from that chain's
    positions before use.
    """

    def __init__(self):
        self._vacated: List[int] = []
        self._high_water = 0
        self._chain: Optional[SlotChain] = None

    def _sync(self, chain: SlotChain) -> None:
        if chain is self._chain:
            return
        positions = chain.positions()
        occupied = set(positions)
        self._high_water = positions[-1] if positions else 0
        # ascending list is already a valid heap
        self._vacated = [p for p in range(1, self._high_water + 1) if p not in occupied]
        self._chain = chain

    @property
    def vacated(self) -> List[int]:
        return sorted(self._vacated)

    def next_position(self) -> int:
        if self._vacated:
            return self._vacated[0]
        return self._high_water + 1

    def place(self, chain: SlotChain, vehicle: Vehicle) -> int:
        self._sync(chain)
        if self._vacated:
            position = heapq.heappop(self._vacated)
        else:
            self._high_water += 1
            position = self._high_water
        return chain.insert_at(vehicle, position)

    def released(self, chain: SlotChain, position: int) -> None:
        if chain is self._chain:
            heapq.heappush(self._vacated, position)
        else:
            # position is already gone from the chain
            self._sync(chain)


# ============================================================================
# STRATEGY FACTORY
# ============================================================================

STRATEGIES: Dict[str, Type[PositionStrategy]] = {
    "gap_scan": GapScanStrategy,
    "free_heap": FreePositionHeapStrategy,
}


def create_strategy(name: str) -> PositionStrategy:
    """Create a position strategy by its configuration name"""
    strategy_class = STRATEGIES.get(name)
    if strategy_class is None:
        raise StoreyError(
            f"Unknown position strategy '{name}', expected one of: {', '.join(sorted(STRATEGIES))}"
        )
    return strategy_class()
