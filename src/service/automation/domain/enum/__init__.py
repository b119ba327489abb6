"""Automation Domain Enums"""

from src.service.automation.domain.enum.luminaire_event_type import LuminaireEventType
from src.service.automation.domain.enum.subscriber_status import (
    SubscriberRemovalReason,
    SubscriberStatus,
)

__all__ = ['LuminaireEventType', 'SubscriberRemovalReason', 'SubscriberStatus']
