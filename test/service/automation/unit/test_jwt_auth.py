from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock

import jwt
import pytest

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import AuthenticationError, LoginError
from src.service.automation.domain.entity.user_entity import UserEntity
from src.service.automation.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


@pytest.mark.unit
class TestJwtAuth:
    @pytest.fixture
    def jwt_auth(self):
        return JwtAuth()

    @pytest.fixture
    def admin(self):
        return UserEntity(id=1, username='admin', email='admin@scenario.com')

    def test_token_round_trip(self, jwt_auth, admin):
        token = jwt_auth.create_jwt_token(admin)

        username, expires_at = jwt_auth.validate_token(token)

        assert username == 'admin'
        expected = datetime.now(timezone.utc) + timedelta(hours=settings.JWT_EXPIRATION_HOURS)
        assert abs((expires_at - expected).total_seconds()) < 5

    def test_expiration_ms_matches_hours(self, jwt_auth):
        assert jwt_auth.expiration_ms == settings.JWT_EXPIRATION_HOURS * 3_600_000

    def test_expired_token_is_rejected(self, jwt_auth):
        token = jwt.encode(
            {
                'sub': 'admin',
                'iat': datetime.now(timezone.utc) - timedelta(hours=2),
                'exp': datetime.now(timezone.utc) - timedelta(hours=1),
            },
            jwt_auth.secret,
            algorithm=jwt_auth.algorithm,
        )

        with pytest.raises(AuthenticationError):
            jwt_auth.validate_token(token)

    def test_token_signed_with_other_key_is_rejected(self, jwt_auth):
        token = jwt.encode(
            {'sub': 'admin', 'exp': datetime.now(timezone.utc) + timedelta(hours=1)},
            'some-other-secret-that-is-long-enough-for-hs256',
            algorithm='HS256',
        )

        with pytest.raises(AuthenticationError):
            jwt_auth.validate_token(token)

    def test_garbage_token_is_rejected(self, jwt_auth):
        with pytest.raises(AuthenticationError):
            jwt_auth.validate_token('not-a-jwt')

    @pytest.mark.parametrize('header', [None, '', 'Basic abc', 'bearer abc'])
    def test_extract_bearer_token_requires_bearer_scheme(self, jwt_auth, header):
        with pytest.raises(AuthenticationError):
            jwt_auth.extract_bearer_token(header)

    def test_extract_bearer_token(self, jwt_auth):
        assert jwt_auth.extract_bearer_token('Bearer abc.def.ghi') == 'abc.def.ghi'

    @pytest.mark.asyncio
    async def test_authenticate_unknown_user(self, jwt_auth):
        repo = AsyncMock()
        repo.get_by_username.return_value = None

        with pytest.raises(LoginError, match='not found'):
            await jwt_auth.authenticate_user(repo, username='ghost', password='x')

    @pytest.mark.asyncio
    async def test_authenticate_inactive_user(self, jwt_auth, admin):
        admin.enabled = False
        repo = AsyncMock()
        repo.get_by_username.return_value = admin

        with pytest.raises(LoginError):
            await jwt_auth.authenticate_user(repo, username='admin', password='admin123')

    @pytest.mark.asyncio
    async def test_authenticate_wrong_password(self, jwt_auth, admin):
        repo = AsyncMock()
        repo.get_by_username.return_value = admin
        repo.verify_password.return_value = None

        with pytest.raises(LoginError, match='incorrect password'):
            await jwt_auth.authenticate_user(repo, username='admin', password='bad')

    @pytest.mark.asyncio
    async def test_authenticate_success(self, jwt_auth, admin):
        repo = AsyncMock()
        repo.get_by_username.return_value = admin
        repo.verify_password.return_value = admin

        assert await jwt_auth.authenticate_user(repo, username='admin', password='ok') is admin
