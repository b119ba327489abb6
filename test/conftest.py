"""
Test Configuration and Fixtures

Architecture:
- Unit tests (test/**/unit/): build the components directly, no app
- Integration tests (test/**/integration/): go through the FastAPI app via
  TestClient, with fresh DI singletons (state store, hub, users) per test
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings and the loguru sinks read the environment at import time
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)
    os.environ.setdefault('DEPLOY_ENV', 'test')


_early_setup_test_environment()

from collections.abc import Generator  # noqa: E402

from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402

from src.platform.config.di import container  # noqa: E402


@pytest.fixture(autouse=True)
def reset_sse_app_status() -> Generator[None, None, None]:
    """sse-starlette keeps a process-wide exit event bound to the first event loop"""
    from sse_starlette.sse import AppStatus

    if hasattr(AppStatus, 'should_exit_event'):
        AppStatus.should_exit_event = None
    AppStatus.should_exit = False
    yield


@pytest.fixture
def clean_automation_state() -> Generator[None, None, None]:
    """Fresh state store, broadcast hub and user repo for each test"""
    container.reset_singletons()
    yield
    container.reset_singletons()


@pytest.fixture
def client(clean_automation_state: None) -> Generator[TestClient, None, None]:
    from test.test_main import app

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
