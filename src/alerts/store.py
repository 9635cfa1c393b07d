"""Per-session read/deleted state for synthesized alerts."""

import logging

from src.alerts.base import Alert

logger = logging.getLogger(__name__)


class AlertStore:
    """
    Tracks which alerts the user has read or deleted, keyed by alert id.

    Alerts are recomputed on every refresh; `sync` takes the fresh list,
    re-applies remembered flags for ids that reappear and forgets the
    state of ids that did not.
    """

    def __init__(self):
        self._alerts: list[Alert] = []
        self._read: set[str] = set()
        self._deleted: set[str] = set()

    def sync(self, alerts: list[Alert]) -> list[Alert]:
        """Replace the current alerts with a fresh synthesis result."""
        current_ids = {a.id for a in alerts}
        stale = (self._read | self._deleted) - current_ids
        if stale:
            logger.info(f"Dropping state for {len(stale)} alert(s) no longer present")
        self._read &= current_ids
        self._deleted &= current_ids

        self._alerts = [a.with_read(a.id in self._read) for a in alerts]
        return self.alerts

    @property
    def alerts(self) -> list[Alert]:
        """Visible alerts, in synthesis order."""
        return [a for a in self._alerts if a.id not in self._deleted]

    def _visible_ids(self) -> set[str]:
        return {a.id for a in self.alerts}

    def mark_read(self, alert_id: str) -> bool:
        """Mark one alert read. Returns False if it is not visible."""
        if alert_id not in self._visible_ids():
            return False
        self._read.add(alert_id)
        self._alerts = [a.with_read(True) if a.id == alert_id else a for a in self._alerts]
        return True

    def mark_all_read(self) -> int:
        """Mark every visible alert read and return how many changed."""
        changed = [a.id for a in self.alerts if not a.read]
        self._read.update(changed)
        self._alerts = [a.with_read(a.id in self._read) for a in self._alerts]
        return len(changed)

    def delete(self, alert_id: str) -> bool:
        """Hide an alert until it stops being produced. Returns False if not visible."""
        if alert_id not in self._visible_ids():
            return False
        self._deleted.add(alert_id)
        return True

    def unread_count(self) -> int:
        return sum(1 for a in self.alerts if not a.read)

    def tracked_ids(self) -> set[str]:
        """Ids with remembered read or deleted state."""
        return self._read | self._deleted
