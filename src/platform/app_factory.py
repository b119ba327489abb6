"""
Shared FastAPI App Factory

Provides common app setup for production and test environments.
"""

from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from src.platform.config.core_setting import settings
from src.platform.constant import route_constant
from src.platform.exception.exception_handlers import register_exception_handlers
from src.platform.observability.tracing import TracingConfig
from src.service.automation.driving_adapter.http_controller.auth_controller import (
    router as auth_router,
)
from src.service.automation.driving_adapter.http_controller.environment_controller import (
    router as environment_router,
)
from src.service.automation.driving_adapter.http_controller.health_controller import (
    router as health_router,
)
from src.service.automation.driving_adapter.http_controller.luminaire_automation_controller import (
    router as luminaire_automation_router,
)
from src.service.automation.driving_adapter.http_controller.luminaire_controller import (
    router as luminaire_router,
)


def create_app(
    *,
    lifespan: Callable[[FastAPI], AbstractAsyncContextManager[Any]],
    title_suffix: str = '',
    description: str = 'Scenario Automation API',
    service_name: str = 'scenario-automation',
) -> FastAPI:
    """
    Create a configured FastAPI application.

    Args:
        lifespan: Async context manager for app lifespan (startup/shutdown)
        title_suffix: Optional suffix for app title (e.g., " (Test)")
        description: App description
        service_name: Service name for tracing

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title=f'{settings.PROJECT_NAME}{title_suffix}',
        description=description,
        version=settings.VERSION,
        lifespan=lifespan,
    )

    # Auto-instrument FastAPI (must be done before mounting routes)
    tracing_config = TracingConfig(service_name=service_name)
    tracing_config.instrument_fastapi(app=app)

    app.add_middleware(
        CORSMiddleware,  # type: ignore
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=['*'],
        allow_headers=['*'],
    )

    register_exception_handlers(app)

    app.include_router(auth_router, prefix=route_constant.AUTH_BASE, tags=['auth'])
    app.include_router(
        luminaire_automation_router,
        prefix=route_constant.LUMINAIRE_AUTOMATION_BASE,
        tags=['luminaire-automation'],
    )
    # After the automation router so /automation/... never matches /{luminaire_id}
    app.include_router(
        luminaire_router, prefix=route_constant.LUMINAIRE_BASE, tags=['luminaires']
    )
    app.include_router(
        environment_router, prefix=route_constant.ENVIRONMENT_BASE, tags=['environments']
    )
    app.include_router(health_router, prefix='/api', tags=['health'])

    _register_common_endpoints(app)

    return app


def _register_common_endpoints(app: FastAPI) -> None:
    @app.get(route_constant.METRICS, include_in_schema=False)
    async def get_metrics() -> PlainTextResponse:
        """Prometheus metrics endpoint."""
        return PlainTextResponse(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
