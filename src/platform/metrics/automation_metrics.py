from prometheus_client import Counter, Gauge


class AutomationMetrics:
    """
    Luminaire Automation Metrics Collector

    Tracks luminaire state writes and the health of the real-time SSE feed
    (how many clients are attached, what they receive, why they get dropped).
    """

    def __init__(self):
        # ========== Luminaire State Metrics ==========
        self.luminaire_state_changes = Counter(
            'luminaire_state_changes_total',
            'Total luminaire on/off writes',
            ['action'],  # action: turn_on/turn_off/toggle
        )

        # ========== SSE Broadcast Metrics ==========
        self.sse_active_subscribers = Gauge(
            'sse_active_subscribers', 'Currently attached SSE subscribers'
        )

        self.sse_events_delivered = Counter(
            'sse_events_delivered_total',
            'Events successfully pushed to a subscriber buffer',
            ['event_type'],
        )

        self.sse_subscribers_removed = Counter(
            'sse_subscribers_removed_total',
            'Subscribers removed from the active set',
            ['reason'],  # reason: completion/timeout/error/delivery_failed
        )

    # ========== Helper Methods ==========

    def record_state_change(self, *, action: str):
        self.luminaire_state_changes.labels(action=action).inc()

    def record_delivery(self, *, event_type: str, delivered: int):
        if delivered:
            self.sse_events_delivered.labels(event_type=event_type).inc(delivered)

    def record_subscriber_removed(self, *, reason: str, active: int):
        self.sse_subscribers_removed.labels(reason=reason).inc()
        self.sse_active_subscribers.set(active)

    def set_active_subscribers(self, *, active: int):
        self.sse_active_subscribers.set(active)


# Global metrics instance
metrics = AutomationMetrics()
