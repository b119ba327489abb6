from fastapi.testclient import TestClient
import pytest

from src.platform.constant.route_constant import (
    ENVIRONMENT_BASE,
    ENVIRONMENT_BY_ID,
    ENVIRONMENT_EXISTS,
    ENVIRONMENTS_WITH_LUMINAIRES,
    LUMINAIRE_BASE,
    LUMINAIRE_BY_ID,
)


def _create_environment(client: TestClient, name: str, description: str | None = None) -> dict:
    response = client.post(ENVIRONMENT_BASE, json={'name': name, 'description': description})
    assert response.status_code == 201, response.text
    return response.json()


@pytest.mark.integration
class TestEnvironmentAPI:
    def test_create(self, client: TestClient):
        data = _create_environment(client, 'Living Room', 'Ceiling and floor lamps')

        assert data['id'] == 1
        assert data['name'] == 'Living Room'
        assert data['description'] == 'Ceiling and floor lamps'
        assert 'createdAt' in data
        assert 'updatedAt' in data

    def test_create_duplicate_name(self, client: TestClient):
        _create_environment(client, 'Office')

        response = client.post(ENVIRONMENT_BASE, json={'name': 'office'})

        assert response.status_code == 400
        assert 'already exists' in response.json()['detail']

    @pytest.mark.parametrize(
        'body',
        [{}, {'name': 'A'}, {'name': 'x' * 101}, {'name': 'Office', 'description': 'd' * 501}],
    )
    def test_create_invalid_body(self, client: TestClient, body):
        response = client.post(ENVIRONMENT_BASE, json=body)

        assert response.status_code == 400

    def test_get(self, client: TestClient):
        created = _create_environment(client, 'Office')

        response = client.get(ENVIRONMENT_BY_ID.format(environment_id=created['id']))

        assert response.status_code == 200
        assert response.json()['name'] == 'Office'

    def test_get_unknown(self, client: TestClient):
        response = client.get(ENVIRONMENT_BY_ID.format(environment_id=404))

        assert response.status_code == 404
        assert response.json()['detail'] == 'Environment not found with ID: 404'

    def test_list_is_paged_and_ordered_by_name(self, client: TestClient):
        for name in ['Office', 'Attic', 'Kitchen']:
            _create_environment(client, name)

        response = client.get(ENVIRONMENT_BASE, params={'page': 0, 'size': 2})

        assert response.status_code == 200
        data = response.json()
        assert [env['name'] for env in data['content']] == ['Attic', 'Kitchen']
        assert data['page'] == 0
        assert data['size'] == 2
        assert data['totalElements'] == 3
        assert data['totalPages'] == 2

    def test_list_search(self, client: TestClient):
        _create_environment(client, 'Office')
        _create_environment(client, 'Den', 'Home office corner')
        _create_environment(client, 'Kitchen')

        data = client.get(ENVIRONMENT_BASE, params={'search': 'OFFICE'}).json()

        assert [env['name'] for env in data['content']] == ['Den', 'Office']

    @pytest.mark.parametrize('params', [{'page': -1}, {'size': 0}, {'size': 101}])
    def test_list_invalid_paging(self, client: TestClient, params):
        assert client.get(ENVIRONMENT_BASE, params=params).status_code == 400

    def test_update(self, client: TestClient):
        created = _create_environment(client, 'Office')

        response = client.put(
            ENVIRONMENT_BY_ID.format(environment_id=created['id']),
            json={'name': 'Studio', 'description': 'Renamed'},
        )

        assert response.status_code == 200
        data = response.json()
        assert (data['name'], data['description']) == ('Studio', 'Renamed')
        assert data['createdAt'] == created['createdAt']

    def test_update_to_taken_name(self, client: TestClient):
        _create_environment(client, 'Office')
        kitchen = _create_environment(client, 'Kitchen')

        response = client.put(
            ENVIRONMENT_BY_ID.format(environment_id=kitchen['id']), json={'name': 'Office'}
        )

        assert response.status_code == 400

    def test_update_unknown(self, client: TestClient):
        response = client.put(ENVIRONMENT_BY_ID.format(environment_id=9), json={'name': 'Office'})

        assert response.status_code == 404

    def test_delete_removes_its_luminaires(self, client: TestClient):
        created = _create_environment(client, 'Office')
        luminaire = client.post(
            LUMINAIRE_BASE,
            json={'name': 'Desk Lamp', 'type': 'LED', 'environmentId': created['id']},
        ).json()

        response = client.delete(ENVIRONMENT_BY_ID.format(environment_id=created['id']))

        assert response.status_code == 200
        assert response.json() == {'message': 'Environment deleted successfully'}
        assert client.get(ENVIRONMENT_BY_ID.format(environment_id=created['id'])).status_code == 404
        assert client.get(LUMINAIRE_BY_ID.format(luminaire_id=luminaire['id'])).status_code == 404

    def test_delete_unknown(self, client: TestClient):
        assert client.delete(ENVIRONMENT_BY_ID.format(environment_id=9)).status_code == 404

    def test_exists(self, client: TestClient):
        created = _create_environment(client, 'Office')

        assert client.get(ENVIRONMENT_EXISTS.format(environment_id=created['id'])).json() == {
            'exists': True,
            'id': created['id'],
        }
        assert client.get(ENVIRONMENT_EXISTS.format(environment_id=77)).json() == {
            'exists': False,
            'id': 77,
        }

    def test_with_luminaires(self, client: TestClient):
        office = _create_environment(client, 'Office')
        _create_environment(client, 'Attic')
        client.post(
            LUMINAIRE_BASE,
            json={'name': 'Desk Lamp', 'type': 'LED', 'environmentId': office['id']},
        )

        response = client.get(ENVIRONMENTS_WITH_LUMINAIRES)

        assert response.status_code == 200
        data = response.json()
        assert [env['name'] for env in data] == ['Attic', 'Office']
        assert data[0]['luminaires'] == []
        assert [lum['name'] for lum in data[1]['luminaires']] == ['Desk Lamp']
        assert data[1]['luminaires'][0]['environmentId'] == office['id']
