"""
Production FastAPI Application

Luminaire automation API with the SSE heartbeat running as a background task.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import anyio
from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from src.platform.app_factory import create_app
from src.platform.config.di import cleanup, container, setup
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.logging.loguru_io import Logger
from src.platform.observability.tracing import TracingConfig
from src.service.automation.app.command.seed_default_users_use_case import (
    SeedDefaultUsersUseCase,
)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('🚀 [Automation Service] Starting up...')

    # Setup OpenTelemetry tracing (OTLP when OTEL_EXPORTER_OTLP_ENDPOINT is set)
    tracing = TracingConfig(service_name='scenario-automation')
    tracing.setup()
    Logger.base.info('📊 [Automation Service] OpenTelemetry tracing configured')

    # Wire dependency injection for all modules
    container.wire(modules=WIRE_MODULES)
    setup()
    Logger.base.info('🔌 [Automation Service] Dependency injection wired')

    # Users are in-memory only, so seed them on every boot
    created = await SeedDefaultUsersUseCase.build().execute()
    Logger.base.info(f'👤 [Automation Service] {created} default users seeded')

    # Create task group for background tasks (SSE heartbeat)
    async with anyio.create_task_group() as tg:
        await container.luminaire_broadcast_hub().start(task_group=tg)
        Logger.base.info('✅ [Automation Service] Ready to serve requests')

        yield

        Logger.base.info('🛑 [Automation Service] Shutting down...')
        tg.cancel_scope.cancel()

    # Shutdown tracing (flush remaining spans)
    tracing.shutdown()
    Logger.base.info('📊 [Automation Service] Tracing shutdown complete')

    # Drop in-memory singletons and unwire DI
    cleanup()
    container.unwire()

    Logger.base.info('👋 [Automation Service] Shutdown complete')


# Create FastAPI app using shared factory
app = create_app(
    lifespan=lifespan,
    description='Scenario Automation API - authentication and real-time luminaire on/off control',
)


@app.get('/', include_in_schema=False)
async def root() -> RedirectResponse:
    """Root endpoint - redirect to docs."""
    return RedirectResponse(url='/docs')
