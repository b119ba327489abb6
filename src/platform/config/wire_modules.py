"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.automation.app.command import (
    change_luminaire_state_use_case,
    create_environment_use_case,
    create_luminaire_use_case,
    delete_environment_use_case,
    delete_luminaire_use_case,
    seed_default_users_use_case,
    update_environment_use_case,
    update_luminaire_use_case,
)
from src.service.automation.app.query import (
    get_environment_use_case,
    get_luminaire_state_use_case,
    get_luminaire_use_case,
    list_environments_use_case,
    list_luminaires_use_case,
    stream_luminaire_state_use_case,
)
from src.service.automation.driving_adapter.http_controller import (
    auth_controller,
    environment_controller,
    health_controller,
    luminaire_controller,
)


WIRE_MODULES: list[ModuleType] = [
    # Luminaire automation
    change_luminaire_state_use_case,
    get_luminaire_state_use_case,
    stream_luminaire_state_use_case,
    # Environment and luminaire catalogue
    create_environment_use_case,
    update_environment_use_case,
    delete_environment_use_case,
    get_environment_use_case,
    list_environments_use_case,
    create_luminaire_use_case,
    update_luminaire_use_case,
    delete_luminaire_use_case,
    get_luminaire_use_case,
    list_luminaires_use_case,
    # Auth
    seed_default_users_use_case,
    auth_controller,
    health_controller,
    environment_controller,
    luminaire_controller,
]
