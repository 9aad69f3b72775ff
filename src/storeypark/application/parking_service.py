# File: src/storeypark/application/parking_service.py
"""
Storey Parking Application Service

This module implements the application service layer for one parking storey.
It owns a Level, serializes requests against it, and handles the use cases
of the system.

Responsibilities:
1. Validate incoming requests through DTOs
2. Run each request against the Level under a single lock
3. Log every request and its outcome
4. Turn domain outcomes into StoreyResponse objects for the caller
"""

import logging
import threading
from typing import Optional

from pydantic import ValidationError

from ..config import StoreyConfig
from ..domain.level import Level
from ..domain.models import Outcome
from ..domain.strategies import create_strategy
from .dtos import LeaveRequestDTO, ParkRequestDTO
from .responses import StoreyCommand, StoreyResponse


class StoreyService:
    """
    Main application service for a single parking storey

    Use cases:
    1. Create (or recreate) the parking lot with a capacity
    2. Park and leave vehicles
    3. Look up slots by registration number or colour
    4. Report status and occupancy

    The Level is not thread-safe, so every request holds one lock for its
    whole duration.
    """

    def __init__(self, config: Optional[StoreyConfig] = None, level: Optional[Level] = None):
        self.logger = logging.getLogger(self.__class__.__name__)
        self.config = config or StoreyConfig()
        self._lock = threading.RLock()
        self._level = level if level is not None else self._build_level(self.config.capacity)
        self.logger.info(
            f"StoreyService initialized with {self._level.capacity} slots "
            f"({self._level.strategy})"
        )

    def _build_level(self, capacity: int) -> Level:
        return Level(
            capacity=capacity,
            strategy=create_strategy(self.config.strategy),
            unique_plates=self.config.unique_plates
        )

    @property
    def level(self) -> Level:
        return self._level

    def _respond(self, command: StoreyCommand, outcome: Outcome, slots) -> StoreyResponse:
        if outcome.ok:
            response = StoreyResponse(command=command, slots=slots)
            self.logger.info(f"{command.value}: {response.render()}")
        else:
            response = StoreyResponse(command=command, failure=outcome.failure)
            self.logger.warning(f"{command.value} failed: {outcome.failure.message}")
        return response

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create_parking_lot(self, capacity: int) -> StoreyResponse:
        """
        Replace the current level with an empty one of the given capacity

        Raises: ValueError if the capacity is not a positive integer
        """
        with self._lock:
            try:
                self._level = self._build_level(capacity)
            except ValueError as e:
                self.logger.error(f"Error creating parking lot: {e}")
                raise

            self.logger.info(f"Created parking lot with {capacity} slots")
            return StoreyResponse(command=StoreyCommand.CREATE_PARKING_LOT)

    def park(self, plate: str, color: str) -> StoreyResponse:
        """Park a vehicle in the lowest free slot"""
        try:
            request = ParkRequestDTO(plate=plate, color=color)
        except ValidationError as e:
            self.logger.error(f"Invalid park request: {e.error_count()} validation error(s)")
            raise
        return self.park_vehicle(request)

    def park_vehicle(self, request: ParkRequestDTO) -> StoreyResponse:
        self.logger.debug(f"Processing park request for {request.plate}")

        with self._lock:
            outcome = self._level.allocate(request.plate, request.color)
            slots = []
            if outcome.ok:
                slots = [self._level.find_by_position(outcome.value).unwrap()]
            return self._respond(StoreyCommand.PARK, outcome, slots)

    def leave(self, plate: str) -> StoreyResponse:
        """Free the slot holding the plate"""
        return self.leave_vehicle(self._leave_request(plate=plate))

    def leave_by_position(self, position: int) -> StoreyResponse:
        """Free the slot with the given number"""
        return self.leave_vehicle(self._leave_request(position=position))

    def _leave_request(self, **fields) -> LeaveRequestDTO:
        try:
            return LeaveRequestDTO(**fields)
        except ValidationError as e:
            self.logger.error(f"Invalid leave request: {e.error_count()} validation error(s)")
            raise

    def leave_vehicle(self, request: LeaveRequestDTO) -> StoreyResponse:
        self.logger.debug(f"Processing leave request: {request.to_dict(exclude_none=True)}")

        with self._lock:
            if request.position is not None:
                outcome = self._level.release_by_position(request.position)
            else:
                outcome = self._level.release_by_plate(request.plate)
            slots = [outcome.value] if outcome.ok else []
            return self._respond(StoreyCommand.LEAVE, outcome, slots)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def slot_number_for_plate(self, plate: str) -> StoreyResponse:
        with self._lock:
            outcome = self._level.find_by_plate(plate)
            slots = []
            if outcome.ok:
                slots = [self._level.find_by_position(outcome.value).unwrap()]
            return self._respond(StoreyCommand.SLOT_NUMBER_FOR_REGISTRATION, outcome, slots)

    def plates_for_color(self, color: str) -> StoreyResponse:
        with self._lock:
            outcome = self._level.find_all_by_color(color)
            return self._respond(
                StoreyCommand.REGISTRATION_NUMBERS_FOR_COLOUR, outcome, outcome.value or []
            )

    def slot_numbers_for_color(self, color: str) -> StoreyResponse:
        with self._lock:
            outcome = self._level.find_all_by_color(color)
            return self._respond(StoreyCommand.SLOT_NUMBERS_FOR_COLOUR, outcome, outcome.value or [])

    def status(self) -> StoreyResponse:
        """All occupied slots in order"""
        with self._lock:
            outcome = self._level.list_all()
            return self._respond(StoreyCommand.STATUS, outcome, outcome.value or [])

    def occupancy(self) -> int:
        with self._lock:
            return self._level.occupancy_count()
