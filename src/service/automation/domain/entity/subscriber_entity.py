from datetime import datetime, timezone

import attrs

from src.service.automation.domain.enum.subscriber_status import SubscriberStatus


@attrs.define
class SubscriberEntity:
    """One connected real-time client and where it is in its lifecycle"""

    id: int
    status: SubscriberStatus = SubscriberStatus.PENDING
    connected_at: datetime = attrs.field(factory=lambda: datetime.now(timezone.utc))

    @property
    def is_active(self) -> bool:
        return self.status == SubscriberStatus.ACTIVE

    @property
    def is_removed(self) -> bool:
        return self.status == SubscriberStatus.REMOVED

    def activate(self) -> bool:
        """PENDING -> ACTIVE. Returns False if the subscriber was already removed."""
        if self.status != SubscriberStatus.PENDING:
            return self.status == SubscriberStatus.ACTIVE
        self.status = SubscriberStatus.ACTIVE
        return True

    def remove(self) -> bool:
        """Move to REMOVED. Returns False when it already was (removal is idempotent)."""
        if self.status == SubscriberStatus.REMOVED:
            return False
        self.status = SubscriberStatus.REMOVED
        return True
