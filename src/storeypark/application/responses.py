# File: src/storeypark/application/responses.py
"""
Storey responses: command results and their text rendering

A StoreyResponse pairs the command that ran with the slots it produced
(or the failure it hit) and renders itself as the line(s) an operator sees.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from ..domain.models import Failure, SlotView
from .dtos import SlotDTO, StoreyResponseDTO


class StoreyCommand(str, Enum):
    """Commands understood by the storey service"""
    CREATE_PARKING_LOT = "create_parking_lot"
    PARK = "park"
    LEAVE = "leave"
    STATUS = "status"
    REGISTRATION_NUMBERS_FOR_COLOUR = "registration_numbers_for_cars_with_colour"
    SLOT_NUMBERS_FOR_COLOUR = "slot_numbers_for_cars_with_colour"
    SLOT_NUMBER_FOR_REGISTRATION = "slot_number_for_registration_number"


STATUS_HEADER = "Slot No.    Registration No    Colour"


@dataclass(frozen=True)
class StoreyResponse:
    """Result of one command against a storey"""
    command: StoreyCommand
    slots: List[SlotView] = field(default_factory=list)
    failure: Optional[Failure] = None

    @property
    def success(self) -> bool:
        return self.failure is None

    def render(self) -> str:
        """Text shown to the operator for this response"""
        if self.failure is not None:
            return self.failure.message

        if self.command == StoreyCommand.PARK:
            return f"Allocated slot number: {self.slots[0].position}"

        if self.command == StoreyCommand.LEAVE:
            return f"Slot number {self.slots[0].position} is free"

        if self.command == StoreyCommand.REGISTRATION_NUMBERS_FOR_COLOUR:
            return ", ".join(slot.plate for slot in self.slots)

        if self.command == StoreyCommand.SLOT_NUMBERS_FOR_COLOUR:
            return ", ".join(str(slot.position) for slot in self.slots)

        if self.command == StoreyCommand.SLOT_NUMBER_FOR_REGISTRATION:
            return str(self.slots[0].position)

        if self.command == StoreyCommand.STATUS:
            rows = [STATUS_HEADER]
            for slot in self.slots:
                rows.append(f"{slot.position:<12}{slot.plate:<19}{slot.color}")
            return "\n".join(rows)

        return ""

    def to_dto(self) -> StoreyResponseDTO:
        return StoreyResponseDTO(
            command=self.command.value,
            success=self.success,
            slots=[SlotDTO.from_view(slot) for slot in self.slots],
            error=self.failure.value if self.failure else None,
            message=self.render()
        )

    def __str__(self) -> str:
        return self.render()
