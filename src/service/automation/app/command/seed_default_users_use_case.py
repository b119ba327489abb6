"""
Seed Default Users Use Case

Creates the built-in accounts on startup. Users only live in memory, so
this runs on every boot; existing usernames are left untouched.
"""

from typing import List, Self, Tuple

from dependency_injector.wiring import Provide, inject
from pydantic import SecretStr

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.automation.app.interface.i_password_hasher import IPasswordHasher
from src.service.automation.app.interface.i_user_command_repo import IUserCommandRepo
from src.service.automation.domain.entity.user_entity import UserEntity, UserRole


# (username, password, email, role)
DEFAULT_USERS: List[Tuple[str, str, str, UserRole]] = [
    ('admin', 'admin123', 'admin@scenario.com', UserRole.ADMIN),
    ('user', 'user123', 'user@scenario.com', UserRole.USER),
    ('demo', 'demo123', 'demo@scenario.com', UserRole.USER),
]


class SeedDefaultUsersUseCase:
    def __init__(
        self, *, user_command_repo: IUserCommandRepo, password_hasher: IPasswordHasher
    ) -> None:
        self.user_command_repo = user_command_repo
        self.password_hasher = password_hasher

    @classmethod
    @inject
    def build(
        cls,
        user_command_repo: IUserCommandRepo = Provide[Container.user_repo],
        password_hasher: IPasswordHasher = Provide[Container.password_hasher],
    ) -> Self:
        return cls(user_command_repo=user_command_repo, password_hasher=password_hasher)

    async def execute(self) -> int:
        created = 0
        for username, password, email, role in DEFAULT_USERS:
            if await self.user_command_repo.exists_by_username(username):
                continue

            user_entity = UserEntity(
                username=username,
                email=email,
                hashed_password=self.password_hasher.hash_password(
                    plain_password=SecretStr(password)
                ),
                role=role,
            )
            await self.user_command_repo.create(user_entity)
            created += 1
            Logger.base.info(f'👤 [AUTH] Default user created: {username} ({role.value})')

        return created
