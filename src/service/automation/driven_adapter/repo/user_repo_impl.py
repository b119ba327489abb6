"""
In-memory User Repository - Combines Command and Query operations

Users live for the lifetime of the process; the default accounts are
seeded at startup by SeedDefaultUsersUseCase.
"""

import itertools
from typing import Dict, List, Optional

from pydantic import SecretStr

from src.platform.logging.loguru_io import Logger
from src.service.automation.app.interface.i_password_hasher import IPasswordHasher
from src.service.automation.app.interface.i_user_command_repo import IUserCommandRepo
from src.service.automation.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.automation.domain.entity.user_entity import UserEntity


class UserRepoImpl(IUserCommandRepo, IUserQueryRepo):
    def __init__(self, *, password_hasher: IPasswordHasher) -> None:
        self.password_hasher = password_hasher
        self._users: Dict[str, UserEntity] = {}
        self._ids = itertools.count(1)

    @Logger.io
    async def get_by_username(self, username: str) -> Optional[UserEntity]:
        return self._users.get(username)

    async def list_usernames(self) -> List[str]:
        return list(self._users)

    @Logger.io
    async def exists_by_username(self, username: str) -> bool:
        return username in self._users

    @Logger.io
    async def create(self, user_entity: UserEntity) -> UserEntity:
        if user_entity.username in self._users:
            raise ValueError(f'User {user_entity.username} already exists')

        user_entity.id = next(self._ids)
        self._users[user_entity.username] = user_entity
        return user_entity

    @Logger.io
    async def verify_password(self, username: str, plain_password: str) -> Optional[UserEntity]:
        user_entity = self._users.get(username)
        if not user_entity:
            return None

        # Use SecretStr to protect sensitive password data
        if self.password_hasher.verify_password(
            plain_password=SecretStr(plain_password),
            hashed_password=user_entity.hashed_password,
        ):
            return user_entity
        return None
