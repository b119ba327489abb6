from fastapi.testclient import TestClient
import pytest

from src.platform.config.core_setting import settings
from src.platform.constant.route_constant import HEALTH, METRICS, SERVICE_INFO


@pytest.mark.integration
class TestHealthAPI:
    def test_health(self, client: TestClient):
        response = client.get(HEALTH)

        assert response.status_code == 200
        data = response.json()
        assert data['status'] == 'UP'
        assert data['service'] == settings.PROJECT_NAME
        assert data['version'] == settings.VERSION
        assert data['activeSubscribers'] == 0

    def test_service_info(self, client: TestClient):
        response = client.get(SERVICE_INFO)

        assert response.status_code == 200
        data = response.json()
        assert data['name'] == settings.PROJECT_NAME
        assert data['endpoints']['luminaireAutomation'] == '/api/luminaires/automation'
        assert data['endpoints']['environments'] == '/api/environments'
        assert data['endpoints']['luminaires'] == '/api/luminaires'

    def test_metrics_exposes_automation_counters(self, client: TestClient):
        client.post('/api/luminaires/automation/1/toggle')

        response = client.get(METRICS)

        assert response.status_code == 200
        assert 'luminaire_state_changes_total' in response.text
        assert 'sse_active_subscribers' in response.text
