# File: src/storeypark/application/dtos.py
"""
Data Transfer Objects (DTOs) for the Storey Parking System

This module defines DTOs for data transfer between the service and its
callers:
1. Input DTOs - park and leave requests, validated at creation
2. Output DTOs - slot snapshots and command responses

DTO Principles:
- Validation at creation
- No business logic, only data
- Serialization support through to_dict / to_json
"""

import json
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..domain.models import SlotView


# ============================================================================
# BASE DTO CLASSES
# ============================================================================

class BaseDTO(BaseModel):
    """Base DTO with common functionality"""

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        use_enum_values=True,
        frozen=True
    )

    def to_dict(self, exclude_none: bool = False, **kwargs) -> Dict[str, Any]:
        """Convert DTO to dictionary"""
        data = self.model_dump(**kwargs)
        if exclude_none:
            data = {k: v for k, v in data.items() if v is not None}
        return data

    def to_json(self, **kwargs) -> str:
        """Convert DTO to JSON string"""
        return self.model_dump_json(**kwargs)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'BaseDTO':
        """Create DTO from dictionary"""
        return cls(**data)

    @classmethod
    def from_json(cls, json_str: str) -> 'BaseDTO':
        """Create DTO from JSON string"""
        return cls(**json.loads(json_str))


# ============================================================================
# INPUT DTOs
# ============================================================================

class ParkRequestDTO(BaseDTO):
    """DTO for parking a vehicle"""
    plate: str = Field(..., min_length=1, description="Registration number")
    color: str = Field(..., min_length=1, description="Vehicle colour")

    @field_validator('plate', 'color')
    @classmethod
    def strip_and_require(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v


class LeaveRequestDTO(BaseDTO):
    """DTO for freeing a slot, addressed by position or by plate"""
    position: Optional[int] = Field(default=None, ge=1, description="Slot number")
    plate: Optional[str] = Field(default=None, min_length=1, description="Registration number")

    @model_validator(mode='after')
    def exactly_one_key(self) -> 'LeaveRequestDTO':
        if (self.position is None) == (self.plate is None):
            raise ValueError("Provide exactly one of position or plate")
        return self


# ============================================================================
# OUTPUT DTOs
# ============================================================================

class SlotDTO(BaseDTO):
    """DTO for an occupied slot"""
    position: int = Field(..., ge=1)
    plate: str
    color: str

    @classmethod
    def from_view(cls, view: SlotView) -> 'SlotDTO':
        return cls(position=view.position, plate=view.plate, color=view.color)


class StoreyResponseDTO(BaseDTO):
    """DTO for the result of one storey command"""
    command: str
    success: bool
    slots: List[SlotDTO] = Field(default_factory=list)
    error: Optional[str] = None
    message: str = ""
