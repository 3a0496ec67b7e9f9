"""
Wire Modules Configuration

Modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.webinar.app.query import list_participations_use_case
from src.service.webinar.driving_adapter.http_controller import participation_controller


WIRE_MODULES: list[ModuleType] = [
    list_participations_use_case,
    participation_controller,
]
