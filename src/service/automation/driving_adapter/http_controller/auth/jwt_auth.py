"""
JWT Authentication Service

Issues and validates the bearer tokens handed out by /api/auth/login.
Tokens are stateless HS256 JWTs carrying only the username (`sub`).
"""

from datetime import datetime, timedelta, timezone
from typing import Dict, Optional

import jwt

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import AuthenticationError, LoginError
from src.service.automation.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.automation.domain.entity.user_entity import UserEntity


class JwtAuth:
    def __init__(self) -> None:
        self.secret = settings.SECRET_KEY.get_secret_value()
        self.algorithm = settings.ALGORITHM
        self.token_expire_hours = settings.JWT_EXPIRATION_HOURS

    @property
    def expiration_ms(self) -> int:
        return self.token_expire_hours * 60 * 60 * 1000

    def create_jwt_token(self, user_entity: UserEntity) -> str:
        issued_at = datetime.now(timezone.utc)
        payload = {
            'sub': user_entity.username,
            'iat': issued_at,
            'exp': issued_at + timedelta(hours=self.token_expire_hours),
        }

        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def decode_jwt_token(self, token: str) -> Dict:
        try:
            return jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except jwt.PyJWTError:
            raise AuthenticationError('Invalid or expired token')

    async def authenticate_user(
        self, user_query_repo: IUserQueryRepo, username: str, password: str
    ) -> UserEntity:
        user_entity = await user_query_repo.get_by_username(username)
        validated_user = UserEntity.validate_user_exists(user_entity)

        if not await user_query_repo.verify_password(username, password):
            raise LoginError('Invalid credentials: incorrect password')

        return validated_user

    def extract_bearer_token(self, authorization: Optional[str]) -> str:
        if not authorization or not authorization.startswith('Bearer '):
            raise AuthenticationError('Missing bearer token')
        return authorization[len('Bearer ') :]

    def validate_token(self, token: str) -> tuple[str, datetime]:
        """
        Returns:
            (username, expires_at) for a valid token

        Raises:
            AuthenticationError: token is malformed, tampered with, expired or has no subject
        """
        payload = self.decode_jwt_token(token)

        username = payload.get('sub')
        expires_at = payload.get('exp')
        if not username or expires_at is None:
            raise AuthenticationError('Invalid or expired token')

        return username, datetime.fromtimestamp(expires_at, tz=timezone.utc)
