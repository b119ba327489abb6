from typing import Optional

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, Header, status

from src.platform.config.di import Container
from src.platform.exception.exceptions import AuthenticationError, TokenValidationError
from src.platform.logging.loguru_io import Logger
from src.service.automation.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.automation.driving_adapter.http_controller.auth.jwt_auth import JwtAuth
from src.service.automation.driving_adapter.schema.auth_schema import (
    AuthInfoResponse,
    JwtResponse,
    LoginRequest,
    TokenValidationResponse,
)


# === API Router ===

router = APIRouter()


@router.post('/login', response_model=JwtResponse)
@Logger.io
@inject
async def login(
    request: LoginRequest,
    user_query_repo: IUserQueryRepo = Depends(Provide[Container.user_repo]),
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
) -> JwtResponse:
    user_entity = await jwt_auth.authenticate_user(
        user_query_repo=user_query_repo,
        username=request.username,
        password=request.password.get_secret_value(),
    )

    return JwtResponse(
        token=jwt_auth.create_jwt_token(user_entity),
        username=user_entity.username,
        expires_in=jwt_auth.expiration_ms,
    )


@router.get(
    '/validate',
    response_model=TokenValidationResponse,
    responses={status.HTTP_400_BAD_REQUEST: {'description': 'Invalid or expired token'}},
)
@inject
async def validate_token(
    authorization: Optional[str] = Header(None),
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
) -> TokenValidationResponse:
    try:
        token = jwt_auth.extract_bearer_token(authorization)
        username, expires_at = jwt_auth.validate_token(token)
    except AuthenticationError as e:
        Logger.base.info(f'🔒 [AUTH] Token rejected: {e.message}')
        raise TokenValidationError() from e

    return TokenValidationResponse(valid=True, username=username, expires_at=expires_at)


@router.get('/info', response_model=AuthInfoResponse)
@inject
async def get_auth_info(
    user_query_repo: IUserQueryRepo = Depends(Provide[Container.user_repo]),
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
) -> AuthInfoResponse:
    return AuthInfoResponse(
        available_users=await user_query_repo.list_usernames(),
        token_expiration_hours=jwt_auth.token_expire_hours,
    )
