"""
Luminaire Entity

Catalogue record for one light fixture: name, type, brightness, color and
position on the environment's floor plan. The live on/off flag pushed over
SSE lives in the luminaire state store; `status` here is the stored one.
"""

from datetime import datetime
import re
from typing import Optional

import attrs


NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 100
TYPE_MAX_LENGTH = 50
DEFAULT_COLOR = '#FFFFFF'

_HEX_COLOR = re.compile(r'^#([A-Fa-f0-9]{6}|[A-Fa-f0-9]{3})$')


def _validate_name(instance: object, attribute: attrs.Attribute, value: str) -> None:
    if not value or not value.strip():
        raise ValueError('Luminaire name is required')
    if not NAME_MIN_LENGTH <= len(value.strip()) <= NAME_MAX_LENGTH:
        raise ValueError(
            f'Luminaire name must be between {NAME_MIN_LENGTH} and {NAME_MAX_LENGTH} characters'
        )


def _validate_type(instance: object, attribute: attrs.Attribute, value: str) -> None:
    if not value or not value.strip():
        raise ValueError('Luminaire type is required')
    if len(value) > TYPE_MAX_LENGTH:
        raise ValueError(f'Luminaire type must be at most {TYPE_MAX_LENGTH} characters')


def _validate_brightness(instance: object, attribute: attrs.Attribute, value: int) -> None:
    if not 0 <= value <= 100:
        raise ValueError('Brightness must be between 0 and 100')


def _validate_color(instance: object, attribute: attrs.Attribute, value: str) -> None:
    if not _HEX_COLOR.match(value):
        raise ValueError('Color must be in hexadecimal format (#FFFFFF)')


def _validate_position(instance: object, attribute: attrs.Attribute, value: float) -> None:
    if value < 0:
        raise ValueError(f'{attribute.name} must be greater than or equal to 0')


@attrs.define
class LuminaireEntity:
    # Validators also run on assignment, so a rejected change leaves the entity untouched
    name: str = attrs.field(validator=_validate_name)
    type: str = attrs.field(validator=_validate_type)
    environment_id: int
    status: bool = False
    brightness: int = attrs.field(default=0, validator=_validate_brightness)
    color: str = attrs.field(default=DEFAULT_COLOR, validator=_validate_color)
    position_x: float = attrs.field(default=0.0, validator=_validate_position)
    position_y: float = attrs.field(default=0.0, validator=_validate_position)
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def has_same_name(self, name: str) -> bool:
        return self.name.casefold() == name.casefold()

    def change_brightness(self, brightness: int) -> None:
        self.brightness = brightness

    def change_color(self, color: str) -> None:
        self.color = color
