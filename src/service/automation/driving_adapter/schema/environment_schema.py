from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from src.service.automation.driving_adapter.schema.luminaire_catalog_schema import (
    LuminaireResponse,
)


class EnvironmentRequest(BaseModel):
    name: str = Field(min_length=2, max_length=100)
    description: Optional[str] = Field(default=None, max_length=500)

    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'name': 'Living Room',
                'description': 'Main living area with ceiling and floor lamps',
            }
        }
    )


class EnvironmentResponse(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    created_at: datetime = Field(alias='createdAt')
    updated_at: datetime = Field(alias='updatedAt')

    model_config = ConfigDict(populate_by_name=True)


class EnvironmentWithLuminairesResponse(EnvironmentResponse):
    luminaires: List[LuminaireResponse]


class EnvironmentExistsResponse(BaseModel):
    exists: bool
    id: int


class MessageResponse(BaseModel):
    message: str
