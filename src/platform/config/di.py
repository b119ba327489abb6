"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.service.automation.driven_adapter.repo.environment_repo_impl import EnvironmentRepoImpl
from src.service.automation.driven_adapter.repo.luminaire_repo_impl import LuminaireRepoImpl
from src.service.automation.driven_adapter.repo.user_repo_impl import UserRepoImpl
from src.service.automation.driven_adapter.security.bcrypt_password_hasher import (
    BcryptPasswordHasher,
)
from src.service.automation.driven_adapter.sse.luminaire_broadcast_hub_impl import (
    LuminaireBroadcastHubImpl,
)
from src.service.automation.driven_adapter.state.luminaire_state_store_impl import (
    LuminaireStateStoreImpl,
)
from src.service.automation.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Luminaire state (process-wide, in-memory)
    luminaire_state_store = providers.Singleton(LuminaireStateStoreImpl)

    # SSE fan-out; heartbeat is started by main.py lifespan
    luminaire_broadcast_hub = providers.Singleton(
        LuminaireBroadcastHubImpl,
        state_store=luminaire_state_store,
        heartbeat_interval=config_service.provided.SSE_HEARTBEAT_INTERVAL_SECONDS,
        buffer_size=config_service.provided.SSE_SUBSCRIBER_BUFFER_SIZE,
    )

    # Environment and luminaire catalogue (in-memory)
    environment_repo = providers.Singleton(EnvironmentRepoImpl)
    luminaire_repo = providers.Singleton(LuminaireRepoImpl)

    # Security
    password_hasher = providers.Singleton(BcryptPasswordHasher)

    # One in-memory repo serves both the user command and query interfaces
    user_repo = providers.Singleton(UserRepoImpl, password_hasher=password_hasher)

    # Auth service
    jwt_auth = providers.Singleton(JwtAuth)


container = Container()


def setup() -> None:
    container.config_service()


def cleanup() -> None:
    container.reset_singletons()
