from enum import Enum
from typing import Optional

import attrs

from src.platform.exception.exceptions import LoginError


class UserRole(str, Enum):
    ADMIN = 'ADMIN'
    USER = 'USER'


@attrs.define
class UserEntity:
    username: str = ''
    email: str = ''
    hashed_password: str = attrs.field(default='', repr=False)  # Hide from repr for security
    id: Optional[int] = None
    role: UserRole = UserRole.USER
    enabled: bool = True

    @staticmethod
    def validate_user_exists(user_entity: Optional['UserEntity']) -> 'UserEntity':
        if not user_entity or not user_entity.enabled:
            raise LoginError('Invalid credentials: user not found or inactive')

        return user_entity
