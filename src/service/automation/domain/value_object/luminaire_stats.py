import attrs


@attrs.frozen
class LuminaireStats:
    """Stored on/off tally of the luminaires in one environment"""

    environment_id: int
    total: int
    active: int

    @property
    def inactive(self) -> int:
        return self.total - self.active
