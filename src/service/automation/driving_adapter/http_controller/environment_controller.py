from typing import List, Optional

import attrs
from fastapi import APIRouter, Depends, Query, status

from src.platform.logging.loguru_io import Logger
from src.service.automation.app.command.create_environment_use_case import (
    CreateEnvironmentUseCase,
)
from src.service.automation.app.command.delete_environment_use_case import (
    DeleteEnvironmentUseCase,
)
from src.service.automation.app.command.update_environment_use_case import (
    UpdateEnvironmentUseCase,
)
from src.service.automation.app.query.get_environment_use_case import GetEnvironmentUseCase
from src.service.automation.app.query.list_environments_use_case import ListEnvironmentsUseCase
from src.service.automation.domain.entity.environment_entity import EnvironmentEntity
from src.service.automation.driving_adapter.schema.environment_schema import (
    EnvironmentExistsResponse,
    EnvironmentRequest,
    EnvironmentResponse,
    EnvironmentWithLuminairesResponse,
    MessageResponse,
)
from src.service.automation.driving_adapter.schema.luminaire_catalog_schema import (
    LuminaireResponse,
)
from src.service.automation.driving_adapter.schema.page_schema import PageResponse


router = APIRouter()


def to_environment_response(environment: EnvironmentEntity) -> EnvironmentResponse:
    return EnvironmentResponse.model_validate(attrs.asdict(environment))


@router.post('', status_code=status.HTTP_201_CREATED, response_model=EnvironmentResponse)
@Logger.io
async def create_environment(
    request: EnvironmentRequest,
    use_case: CreateEnvironmentUseCase = Depends(CreateEnvironmentUseCase.depends),
) -> EnvironmentResponse:
    environment = await use_case.create(name=request.name, description=request.description)
    return to_environment_response(environment)


@router.get(
    '', status_code=status.HTTP_200_OK, response_model=PageResponse[EnvironmentResponse]
)
@Logger.io
async def list_environments(
    page: int = Query(default=0, ge=0),
    size: int = Query(default=20, ge=1, le=100),
    search: Optional[str] = Query(default=None),
    use_case: ListEnvironmentsUseCase = Depends(ListEnvironmentsUseCase.depends),
) -> PageResponse[EnvironmentResponse]:
    result = await use_case.list_page(page=page, size=size, search=search)
    return PageResponse[EnvironmentResponse](
        content=[to_environment_response(env) for env in result.items],
        page=result.page,
        size=result.size,
        total_elements=result.total,
        total_pages=result.total_pages,
    )


@router.get(
    '/with-luminaires',
    status_code=status.HTTP_200_OK,
    response_model=List[EnvironmentWithLuminairesResponse],
)
@Logger.io
async def list_environments_with_luminaires(
    use_case: ListEnvironmentsUseCase = Depends(ListEnvironmentsUseCase.depends),
) -> List[EnvironmentWithLuminairesResponse]:
    return [
        EnvironmentWithLuminairesResponse(
            **to_environment_response(environment).model_dump(),
            luminaires=[
                LuminaireResponse.model_validate(attrs.asdict(luminaire))
                for luminaire in luminaires
            ],
        )
        for environment, luminaires in await use_case.list_with_luminaires()
    ]


@router.get(
    '/{environment_id}', status_code=status.HTTP_200_OK, response_model=EnvironmentResponse
)
@Logger.io
async def get_environment(
    environment_id: int,
    use_case: GetEnvironmentUseCase = Depends(GetEnvironmentUseCase.depends),
) -> EnvironmentResponse:
    environment = await use_case.get_by_id(environment_id=environment_id)
    return to_environment_response(environment)


@router.put(
    '/{environment_id}', status_code=status.HTTP_200_OK, response_model=EnvironmentResponse
)
@Logger.io
async def update_environment(
    environment_id: int,
    request: EnvironmentRequest,
    use_case: UpdateEnvironmentUseCase = Depends(UpdateEnvironmentUseCase.depends),
) -> EnvironmentResponse:
    environment = await use_case.update(
        environment_id=environment_id, name=request.name, description=request.description
    )
    return to_environment_response(environment)


@router.delete(
    '/{environment_id}', status_code=status.HTTP_200_OK, response_model=MessageResponse
)
@Logger.io
async def delete_environment(
    environment_id: int,
    use_case: DeleteEnvironmentUseCase = Depends(DeleteEnvironmentUseCase.depends),
) -> MessageResponse:
    await use_case.delete(environment_id=environment_id)
    return MessageResponse(message='Environment deleted successfully')


@router.get(
    '/{environment_id}/exists',
    status_code=status.HTTP_200_OK,
    response_model=EnvironmentExistsResponse,
)
async def environment_exists(
    environment_id: int,
    use_case: GetEnvironmentUseCase = Depends(GetEnvironmentUseCase.depends),
) -> EnvironmentExistsResponse:
    return EnvironmentExistsResponse(
        exists=await use_case.exists(environment_id=environment_id), id=environment_id
    )
