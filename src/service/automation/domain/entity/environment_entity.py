from datetime import datetime
from typing import Optional

import attrs


NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 500


def _validate_name(instance: object, attribute: attrs.Attribute, value: str) -> None:
    if not value or not value.strip():
        raise ValueError('Environment name is required')
    if not NAME_MIN_LENGTH <= len(value.strip()) <= NAME_MAX_LENGTH:
        raise ValueError(
            f'Environment name must be between {NAME_MIN_LENGTH} and {NAME_MAX_LENGTH} characters'
        )


def _validate_description(
    instance: object, attribute: attrs.Attribute, value: Optional[str]
) -> None:
    if value is not None and len(value) > DESCRIPTION_MAX_LENGTH:
        raise ValueError(
            f'Environment description must be at most {DESCRIPTION_MAX_LENGTH} characters'
        )


@attrs.define
class EnvironmentEntity:
    """A room or area that groups luminaires (e.g. living room, office)."""

    name: str = attrs.field(validator=_validate_name)
    description: Optional[str] = attrs.field(default=None, validator=_validate_description)
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def has_same_name(self, name: str) -> bool:
        return self.name.casefold() == name.casefold()
