from datetime import datetime, timedelta, timezone

from fastapi.testclient import TestClient
import jwt
import pytest

from src.platform.config.core_setting import settings
from src.platform.constant.route_constant import AUTH_INFO, AUTH_LOGIN, AUTH_VALIDATE


def _login(client: TestClient, username: str, password: str):
    return client.post(AUTH_LOGIN, json={'username': username, 'password': password})


@pytest.mark.integration
class TestAuthAPI:
    @pytest.mark.parametrize(
        'username,password',
        [('admin', 'admin123'), ('user', 'user123'), ('demo', 'demo123')],
    )
    def test_login_with_default_users(self, client: TestClient, username, password):
        response = _login(client, username, password)

        assert response.status_code == 200
        data = response.json()
        assert data['type'] == 'Bearer'
        assert data['username'] == username
        assert data['expiresIn'] == settings.JWT_EXPIRATION_HOURS * 60 * 60 * 1000
        assert data['token'].count('.') == 2

    def test_login_wrong_password(self, client: TestClient):
        response = _login(client, 'admin', 'wrong')

        assert response.status_code == 400
        assert 'incorrect password' in response.json()['detail']

    def test_login_unknown_user(self, client: TestClient):
        response = _login(client, 'ghost', 'admin123')

        assert response.status_code == 400
        assert 'not found' in response.json()['detail']

    def test_login_missing_fields(self, client: TestClient):
        response = client.post(AUTH_LOGIN, json={'username': 'admin'})

        assert response.status_code == 400

    def test_validate_fresh_token(self, client: TestClient):
        token = _login(client, 'admin', 'admin123').json()['token']

        response = client.get(AUTH_VALIDATE, headers={'Authorization': f'Bearer {token}'})

        assert response.status_code == 200
        data = response.json()
        assert data['valid'] is True
        assert data['username'] == 'admin'
        assert 'expiresAt' in data

    @pytest.mark.parametrize(
        'headers',
        [{}, {'Authorization': 'Bearer not-a-token'}, {'Authorization': 'Token abc'}],
    )
    def test_validate_rejects_bad_tokens(self, client: TestClient, headers):
        response = client.get(AUTH_VALIDATE, headers=headers)

        assert response.status_code == 400
        assert response.json() == {'valid': False, 'message': 'Invalid or expired token'}

    def test_validate_rejects_expired_token(self, client: TestClient):
        expired = jwt.encode(
            {'sub': 'admin', 'exp': datetime.now(timezone.utc) - timedelta(minutes=1)},
            settings.SECRET_KEY.get_secret_value(),
            algorithm=settings.ALGORITHM,
        )

        response = client.get(AUTH_VALIDATE, headers={'Authorization': f'Bearer {expired}'})

        assert response.status_code == 400
        assert response.json()['valid'] is False

    def test_info_lists_users_without_passwords(self, client: TestClient):
        response = client.get(AUTH_INFO)

        assert response.status_code == 200
        data = response.json()
        assert data['availableUsers'] == ['admin', 'user', 'demo']
        assert data['tokenExpirationHours'] == settings.JWT_EXPIRATION_HOURS
        assert 'passwords' not in data
