import pytest

from src.service.automation.domain.entity.environment_entity import EnvironmentEntity
from src.service.automation.domain.entity.luminaire_entity import LuminaireEntity
from src.service.automation.domain.value_object.luminaire_stats import LuminaireStats
from src.service.automation.domain.value_object.page import Page


@pytest.mark.unit
class TestEnvironmentEntity:
    def test_defaults(self):
        environment = EnvironmentEntity(name='Office')

        assert environment.description is None
        assert environment.id is None

    @pytest.mark.parametrize('name', ['', '   ', 'A', 'x' * 101])
    def test_invalid_names_rejected(self, name):
        with pytest.raises(ValueError, match='Environment name'):
            EnvironmentEntity(name=name)

    def test_description_too_long(self):
        with pytest.raises(ValueError, match='at most 500'):
            EnvironmentEntity(name='Office', description='d' * 501)

    def test_has_same_name_ignores_case(self):
        environment = EnvironmentEntity(name='Living Room')

        assert environment.has_same_name('living room')
        assert not environment.has_same_name('Kitchen')


@pytest.mark.unit
class TestLuminaireEntity:
    @pytest.fixture
    def luminaire(self):
        return LuminaireEntity(name='Ceiling Light', type='LED', environment_id=1)

    def test_defaults(self, luminaire):
        assert luminaire.status is False
        assert luminaire.brightness == 0
        assert luminaire.color == '#FFFFFF'
        assert (luminaire.position_x, luminaire.position_y) == (0.0, 0.0)

    @pytest.mark.parametrize('brightness', [-1, 101])
    def test_brightness_out_of_range(self, brightness):
        with pytest.raises(ValueError, match='Brightness must be between 0 and 100'):
            LuminaireEntity(name='Lamp', type='LED', environment_id=1, brightness=brightness)

    @pytest.mark.parametrize('color', ['FFFFFF', '#GGGGGG', '#12345', 'red'])
    def test_bad_color_rejected(self, color):
        with pytest.raises(ValueError, match='hexadecimal'):
            LuminaireEntity(name='Lamp', type='LED', environment_id=1, color=color)

    def test_short_hex_color_accepted(self):
        luminaire = LuminaireEntity(name='Lamp', type='LED', environment_id=1, color='#abc')

        assert luminaire.color == '#abc'

    def test_negative_position_rejected(self):
        with pytest.raises(ValueError, match='position_y'):
            LuminaireEntity(name='Lamp', type='LED', environment_id=1, position_y=-0.5)

    def test_type_required(self):
        with pytest.raises(ValueError, match='type is required'):
            LuminaireEntity(name='Lamp', type=' ', environment_id=1)

    def test_change_brightness(self, luminaire):
        luminaire.change_brightness(75)

        assert luminaire.brightness == 75

    def test_rejected_change_leaves_entity_untouched(self, luminaire):
        with pytest.raises(ValueError):
            luminaire.change_brightness(150)
        with pytest.raises(ValueError):
            luminaire.change_color('blue')

        assert luminaire.brightness == 0
        assert luminaire.color == '#FFFFFF'


@pytest.mark.unit
class TestCatalogValueObjects:
    def test_stats_inactive(self):
        stats = LuminaireStats(environment_id=1, total=5, active=2)

        assert stats.inactive == 3

    def test_page_slices_ordered_items(self):
        page = Page.slice(list(range(25)), page=1, size=10)

        assert page.items == list(range(10, 20))
        assert page.total == 25
        assert page.total_pages == 3

    def test_page_past_the_end_is_empty(self):
        page = Page.slice(['a', 'b'], page=3, size=10)

        assert page.items == []
        assert page.total == 2
        assert page.total_pages == 1

    def test_empty_result_has_no_pages(self):
        assert Page.slice([], page=0, size=20).total_pages == 0
