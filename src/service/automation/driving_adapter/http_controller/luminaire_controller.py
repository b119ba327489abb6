from typing import List, Optional

import attrs
from fastapi import APIRouter, Depends, Query, status

from src.platform.logging.loguru_io import Logger
from src.service.automation.app.command.create_luminaire_use_case import CreateLuminaireUseCase
from src.service.automation.app.command.delete_luminaire_use_case import DeleteLuminaireUseCase
from src.service.automation.app.command.update_luminaire_use_case import UpdateLuminaireUseCase
from src.service.automation.app.query.get_luminaire_use_case import GetLuminaireUseCase
from src.service.automation.app.query.list_luminaires_use_case import ListLuminairesUseCase
from src.service.automation.domain.entity.luminaire_entity import LuminaireEntity
from src.service.automation.driving_adapter.schema.environment_schema import MessageResponse
from src.service.automation.driving_adapter.schema.luminaire_catalog_schema import (
    BrightnessRequest,
    ColorRequest,
    LuminaireCreateRequest,
    LuminaireResponse,
    LuminaireStatsResponse,
    LuminaireUpdateRequest,
)
from src.service.automation.driving_adapter.schema.page_schema import PageResponse


router = APIRouter()


def to_luminaire_response(luminaire: LuminaireEntity) -> LuminaireResponse:
    return LuminaireResponse.model_validate(attrs.asdict(luminaire))


@router.post('', status_code=status.HTTP_201_CREATED, response_model=LuminaireResponse)
@Logger.io
async def create_luminaire(
    request: LuminaireCreateRequest,
    use_case: CreateLuminaireUseCase = Depends(CreateLuminaireUseCase.depends),
) -> LuminaireResponse:
    luminaire = await use_case.create(
        environment_id=request.environment_id,
        name=request.name,
        type=request.type,
        status=request.status,
        brightness=request.brightness,
        color=request.color,
        position_x=request.position_x,
        position_y=request.position_y,
    )
    return to_luminaire_response(luminaire)


@router.get('', status_code=status.HTTP_200_OK, response_model=PageResponse[LuminaireResponse])
@Logger.io
async def list_luminaires(
    page: int = Query(default=0, ge=0),
    size: int = Query(default=20, ge=1, le=100),
    search: Optional[str] = Query(default=None),
    environment_id: Optional[int] = Query(default=None, alias='environmentId'),
    type: Optional[str] = Query(default=None),
    status_filter: Optional[bool] = Query(default=None, alias='status'),
    use_case: ListLuminairesUseCase = Depends(ListLuminairesUseCase.depends),
) -> PageResponse[LuminaireResponse]:
    result = await use_case.list_page(
        page=page,
        size=size,
        environment_id=environment_id,
        search=search,
        type=type,
        status=status_filter,
    )
    return PageResponse[LuminaireResponse](
        content=[to_luminaire_response(lum) for lum in result.items],
        page=result.page,
        size=result.size,
        total_elements=result.total,
        total_pages=result.total_pages,
    )


@router.get(
    '/environment/{environment_id}',
    status_code=status.HTTP_200_OK,
    response_model=List[LuminaireResponse],
)
@Logger.io
async def list_luminaires_by_environment(
    environment_id: int,
    use_case: ListLuminairesUseCase = Depends(ListLuminairesUseCase.depends),
) -> List[LuminaireResponse]:
    luminaires = await use_case.list_by_environment(environment_id=environment_id)
    return [to_luminaire_response(lum) for lum in luminaires]


@router.get(
    '/environment/{environment_id}/stats',
    status_code=status.HTTP_200_OK,
    response_model=LuminaireStatsResponse,
)
@Logger.io
async def get_environment_luminaire_stats(
    environment_id: int,
    use_case: ListLuminairesUseCase = Depends(ListLuminairesUseCase.depends),
) -> LuminaireStatsResponse:
    stats = await use_case.get_stats(environment_id=environment_id)
    return LuminaireStatsResponse(
        environment_id=stats.environment_id,
        total=stats.total,
        active=stats.active,
        inactive=stats.inactive,
    )


@router.get('/{luminaire_id}', status_code=status.HTTP_200_OK, response_model=LuminaireResponse)
@Logger.io
async def get_luminaire(
    luminaire_id: int,
    use_case: GetLuminaireUseCase = Depends(GetLuminaireUseCase.depends),
) -> LuminaireResponse:
    luminaire = await use_case.get_by_id(luminaire_id=luminaire_id)
    return to_luminaire_response(luminaire)


@router.put('/{luminaire_id}', status_code=status.HTTP_200_OK, response_model=LuminaireResponse)
@Logger.io
async def update_luminaire(
    luminaire_id: int,
    request: LuminaireUpdateRequest,
    use_case: UpdateLuminaireUseCase = Depends(UpdateLuminaireUseCase.depends),
) -> LuminaireResponse:
    """Replaces every editable field; the environment of a luminaire never changes here."""
    luminaire = await use_case.update(
        luminaire_id=luminaire_id,
        name=request.name,
        type=request.type,
        status=request.status,
        brightness=request.brightness,
        color=request.color,
        position_x=request.position_x,
        position_y=request.position_y,
    )
    return to_luminaire_response(luminaire)


@router.patch(
    '/{luminaire_id}/brightness', status_code=status.HTTP_200_OK, response_model=LuminaireResponse
)
@Logger.io
async def change_luminaire_brightness(
    luminaire_id: int,
    request: BrightnessRequest,
    use_case: UpdateLuminaireUseCase = Depends(UpdateLuminaireUseCase.depends),
) -> LuminaireResponse:
    luminaire = await use_case.change_brightness(
        luminaire_id=luminaire_id, brightness=request.brightness
    )
    return to_luminaire_response(luminaire)


@router.patch(
    '/{luminaire_id}/color', status_code=status.HTTP_200_OK, response_model=LuminaireResponse
)
@Logger.io
async def change_luminaire_color(
    luminaire_id: int,
    request: ColorRequest,
    use_case: UpdateLuminaireUseCase = Depends(UpdateLuminaireUseCase.depends),
) -> LuminaireResponse:
    luminaire = await use_case.change_color(luminaire_id=luminaire_id, color=request.color)
    return to_luminaire_response(luminaire)


@router.delete('/{luminaire_id}', status_code=status.HTTP_200_OK, response_model=MessageResponse)
@Logger.io
async def delete_luminaire(
    luminaire_id: int,
    use_case: DeleteLuminaireUseCase = Depends(DeleteLuminaireUseCase.depends),
) -> MessageResponse:
    await use_case.delete(luminaire_id=luminaire_id)
    return MessageResponse(message='Luminaire deleted successfully')
