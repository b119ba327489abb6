from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


HEX_COLOR_PATTERN = r'^#([A-Fa-f0-9]{6}|[A-Fa-f0-9]{3})$'


# ============================ Requests ============================


class LuminaireUpdateRequest(BaseModel):
    name: str = Field(min_length=2, max_length=100)
    type: str = Field(min_length=1, max_length=50)
    status: bool = False
    brightness: int = Field(default=0, ge=0, le=100)
    color: str = Field(default='#FFFFFF', pattern=HEX_COLOR_PATTERN)
    position_x: float = Field(default=0.0, ge=0, alias='positionX')
    position_y: float = Field(default=0.0, ge=0, alias='positionY')

    model_config = ConfigDict(populate_by_name=True)


class LuminaireCreateRequest(LuminaireUpdateRequest):
    environment_id: int = Field(alias='environmentId')

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            'example': {
                'name': 'Ceiling Light',
                'type': 'LED',
                'status': False,
                'brightness': 80,
                'color': '#FFFFFF',
                'positionX': 1.5,
                'positionY': 2.0,
                'environmentId': 1,
            }
        },
    )


class BrightnessRequest(BaseModel):
    brightness: int = Field(ge=0, le=100)


class ColorRequest(BaseModel):
    color: str = Field(pattern=HEX_COLOR_PATTERN)


# ============================ Responses ============================


class LuminaireResponse(BaseModel):
    id: int
    name: str
    type: str
    status: bool
    brightness: int
    color: str
    position_x: float = Field(alias='positionX')
    position_y: float = Field(alias='positionY')
    environment_id: int = Field(alias='environmentId')
    created_at: datetime = Field(alias='createdAt')
    updated_at: datetime = Field(alias='updatedAt')

    model_config = ConfigDict(populate_by_name=True)


class LuminaireStatsResponse(BaseModel):
    environment_id: int = Field(alias='environmentId')
    total: int
    active: int
    inactive: int

    model_config = ConfigDict(populate_by_name=True)
