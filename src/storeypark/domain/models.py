# File: src/storeypark/domain/models.py
"""
Domain Models for the Storey Parking System

This module contains:
1. Value Objects: Vehicle and SlotView, immutable and validated
2. Enums: the Failure taxonomy returned by level queries
3. Results: Outcome, the explicit success/failure carrier
4. Exceptions: raised only for invalid input or broken structure

Query failures (full level, unknown plate, ...) are normal outcomes and are
returned as Outcome values, never raised.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Generic, Optional, TypeVar

T = TypeVar('T')

# Link value meaning "no record" in the slot arena
NIL = -1


# ============================================================================
# EXCEPTIONS
# ============================================================================

class StoreyError(ValueError):
    """Base error for invalid input to the storey domain"""
    pass


class ChainCorruptedError(StoreyError):
    """The slot chain no longer satisfies its ordering or link invariants"""
    pass


# ============================================================================
# VALUE OBJECTS
# ============================================================================

@dataclass(frozen=True)  # Value objects are immutable
class Vehicle:
    """
    Value Object: a parked vehicle identified by plate, tagged with a color
    """
    plate: str
    color: str

    def __post_init__(self):
        """Validate and normalize vehicle attributes"""
        if not isinstance(self.plate, str) or not self.plate.strip():
            raise StoreyError("Vehicle plate cannot be empty")

        if not isinstance(self.color, str) or not self.color.strip():
            raise StoreyError("Vehicle color cannot be empty")

        object.__setattr__(self, 'plate', self.plate.strip())
        object.__setattr__(self, 'color', self.color.strip())

    def __str__(self) -> str:
        return f"{self.plate} ({self.color})"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {"plate": self.plate, "color": self.color}


@dataclass(frozen=True)
class SlotView:
    """
    Value Object: read-only snapshot of an occupied slot

    Handed out by the level instead of references into the chain.
    """
    position: int
    plate: str
    color: str

    @classmethod
    def of(cls, position: int, vehicle: Vehicle) -> 'SlotView':
        return cls(position=position, plate=vehicle.plate, color=vehicle.color)

    @property
    def vehicle(self) -> Vehicle:
        return Vehicle(self.plate, self.color)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            "position": self.position,
            "plate": self.plate,
            "color": self.color,
        }


# ============================================================================
# FAILURE TAXONOMY
# ============================================================================

class Failure(Enum):
    """
    Enumeration of query failures a level can report
    Each member carries the user-facing message
    """
    CAPACITY_EXCEEDED = "capacity_exceeded"      # Level is full
    NO_VEHICLES_PARKED = "no_vehicles_parked"    # Query on an empty level
    NOT_FOUND = "not_found"                      # Plate or position absent
    ATTRIBUTE_NOT_FOUND = "attribute_not_found"  # No occupant has the color
    DUPLICATE_PLATE = "duplicate_plate"          # Plate already parked here

    @property
    def message(self) -> str:
        """Human-readable message for this failure"""
        messages = {
            Failure.CAPACITY_EXCEEDED: "Sorry, parking lot is full",
            Failure.NO_VEHICLES_PARKED: "No cars parked",
            Failure.NOT_FOUND: "Not found",
            Failure.ATTRIBUTE_NOT_FOUND: "Car with specified color not found",
            Failure.DUPLICATE_PLATE: "Car with this registration number is already parked",
        }
        return messages[self]

    @property
    def retryable(self) -> bool:
        """Whether the same request may succeed later without input changes"""
        return self != Failure.DUPLICATE_PLATE

    def __str__(self) -> str:
        return self.message


# ============================================================================
# RESULTS
# ============================================================================

@dataclass(frozen=True)
class Outcome(Generic[T]):
    """
    Result of a level operation: either a value or a Failure
    """
    value: Optional[T] = None
    failure: Optional[Failure] = None

    @classmethod
    def success(cls, value: T) -> 'Outcome[T]':
        return cls(value=value)

    @classmethod
    def fail(cls, failure: Failure) -> 'Outcome[T]':
        return cls(failure=failure)

    @property
    def ok(self) -> bool:
        return self.failure is None

    def unwrap(self) -> T:
        """Return the value, raising StoreyError if the outcome failed"""
        if self.failure is not None:
            raise StoreyError(self.failure.message)
        return self.value

    def __bool__(self) -> bool:
        return self.ok
