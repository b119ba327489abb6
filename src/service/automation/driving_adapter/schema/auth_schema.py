from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict, Field, SecretStr


class LoginRequest(BaseModel):
    username: str = Field(min_length=1)
    password: SecretStr

    model_config = ConfigDict(
        json_schema_extra={'example': {'username': 'admin', 'password': 'admin123'}}
    )


class JwtResponse(BaseModel):
    token: str
    type: str = 'Bearer'
    username: str
    expires_in: int = Field(alias='expiresIn')

    model_config = ConfigDict(populate_by_name=True)


class TokenValidationResponse(BaseModel):
    valid: bool
    username: str
    expires_at: datetime = Field(alias='expiresAt')

    model_config = ConfigDict(populate_by_name=True)


class AuthInfoResponse(BaseModel):
    available_users: List[str] = Field(alias='availableUsers')
    description: str = 'Users available for login'
    token_expiration_hours: int = Field(alias='tokenExpirationHours')

    model_config = ConfigDict(populate_by_name=True)
