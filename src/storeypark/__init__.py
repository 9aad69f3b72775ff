# File: src/storeypark/__init__.py
"""
StoreyPark - single storey parking level management

Public entry points:
- Level: the capacity-bounded ordered slot chain with allocate/release/find
- StoreyService: thread-safe application service with logging and responses
- StoreyConfig: runtime configuration
"""

__version__ = "1.0.0"

from .config import StoreyConfig
from .domain.level import Level
from .domain.models import Failure, Outcome, SlotView, Vehicle
from .application.parking_service import StoreyService

__all__ = [
    "__version__",
    "StoreyConfig",
    "Level",
    "Failure",
    "Outcome",
    "SlotView",
    "Vehicle",
    "StoreyService",
]
