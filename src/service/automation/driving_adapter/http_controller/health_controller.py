from datetime import datetime, timezone

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends

from src.platform.config.core_setting import settings
from src.platform.config.di import Container
from src.platform.constant import route_constant
from src.service.automation.app.interface.i_luminaire_broadcaster import ILuminaireBroadcaster
from src.service.automation.driving_adapter.schema.health_schema import (
    HealthResponse,
    ServiceInfoResponse,
)


router = APIRouter()


@router.get('/health', response_model=HealthResponse)
@inject
async def health_check(
    broadcaster: ILuminaireBroadcaster = Depends(Provide[Container.luminaire_broadcast_hub]),
) -> HealthResponse:
    """Health check endpoint for container orchestration."""
    return HealthResponse(
        timestamp=datetime.now(timezone.utc),
        service=settings.PROJECT_NAME,
        version=settings.VERSION,
        active_subscribers=broadcaster.active_count(),
    )


@router.get('/info', response_model=ServiceInfoResponse)
async def service_info() -> ServiceInfoResponse:
    return ServiceInfoResponse(
        name=settings.PROJECT_NAME,
        description='API for automating and managing lighting scenarios',
        version=settings.VERSION,
        endpoints={
            'auth': route_constant.AUTH_BASE,
            'environments': route_constant.ENVIRONMENT_BASE,
            'luminaires': route_constant.LUMINAIRE_BASE,
            'luminaireAutomation': route_constant.LUMINAIRE_AUTOMATION_BASE,
            'health': route_constant.HEALTH,
            'metrics': route_constant.METRICS,
        },
    )
