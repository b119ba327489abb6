import json
from unittest.mock import MagicMock

import pytest

from src.platform.exception.exception_handlers import (
    EXCEPTION_HANDLERS,
    custom_error_handler,
    token_validation_error_handler,
    value_error_handler,
)
from src.platform.exception.exceptions import (
    CustomBaseError,
    DomainError,
    NotFoundError,
    TokenValidationError,
)


@pytest.fixture
def request_():
    request = MagicMock()
    request.url.path = '/api/test'
    return request


def _body(response) -> dict:
    return json.loads(response.body)


@pytest.mark.unit
class TestExceptionHandlers:
    @pytest.mark.asyncio
    async def test_token_validation_error_is_a_verdict(self, request_):
        response = await token_validation_error_handler(request_, TokenValidationError())

        assert response.status_code == 400
        assert _body(response) == {'valid': False, 'message': 'Invalid or expired token'}

    def test_token_validation_error_has_its_own_handler(self):
        assert EXCEPTION_HANDLERS[TokenValidationError] is token_validation_error_handler
        assert EXCEPTION_HANDLERS[CustomBaseError] is custom_error_handler

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        'error,status_code',
        [
            (DomainError('An environment named Office already exists'), 400),
            (NotFoundError('Environment not found with ID: 3'), 404),
        ],
    )
    async def test_custom_errors_keep_their_status(self, request_, error, status_code):
        response = await custom_error_handler(request_, error)

        assert response.status_code == status_code
        assert _body(response) == {'detail': error.message}

    @pytest.mark.asyncio
    async def test_entity_invariant_is_bad_request(self, request_):
        response = await value_error_handler(
            request_, ValueError('Brightness must be between 0 and 100')
        )

        assert response.status_code == 400
        assert _body(response) == {'detail': 'Brightness must be between 0 and 100'}
