"""Change Audit Logger.

This module provides an append-only, in-memory audit trail of registry
writes. Each admission or enrollment produces one entry saying which
registry changed, for which identifier, whether it was a new entry or an
overwrite, and who authorized it.

Architecture:
    - Infrastructure layer component
    - Called from the domain facades after a successful registry write
    - Entries are plain dictionaries so they can be exported as-is
"""

import logging
from threading import Lock
from typing import List, Optional

from src.domain.cdc_models import ChangeEvent
from src.domain.enums import ChangeType

logger = logging.getLogger(__name__)


class ChangeAuditLogger:
    """Logger for registry change events.

    Example Usage:
        ```python
        audit = ChangeAuditLogger()
        hospital = HospitalSystem(audit_logger=audit)
        hospital.admit_patient(patient, doctor)
        audit.get_logs()[0]["change_type"]  # "INSERT"
        ```
    """

    def __init__(self):
        """Initialize an empty audit trail."""
        self._logs: List[dict] = []
        self._lock = Lock()

    def log_change(
        self,
        registry_name: str,
        record_id: str,
        change_type: ChangeType = ChangeType.INSERT,
        changed_by: Optional[str] = None,
        **details
    ) -> dict:
        """Log a single registry write.

        Parameters:
            registry_name: Registry that was written to
            record_id: Identifier of the entry
            change_type: INSERT or UPDATE
            changed_by: Authorizing actor identifier
            **details: Extra context stored with the entry

        Returns:
            The audit entry that was appended
        """
        event = ChangeEvent(
            registry_name=registry_name,
            record_id=str(record_id),
            change_type=change_type,
            changed_by=changed_by,
            details=details,
        )
        return self.log_change_event(event)

    def log_change_event(self, change_event: ChangeEvent) -> dict:
        """Log a ChangeEvent object."""
        audit_dict = change_event.to_audit_dict()
        with self._lock:
            self._logs.append(audit_dict)
        logger.debug(
            f"Logged change: {change_event.registry_name}.{change_event.record_id} "
            f"({change_event.change_type.value})"
        )
        return audit_dict

    def get_logs(self) -> List[dict]:
        """Get a copy of all logged change events."""
        with self._lock:
            return [dict(entry) for entry in self._logs]

    def events_for(self, record_id: str) -> List[dict]:
        """Get the logged events for one identifier, oldest first."""
        with self._lock:
            return [dict(entry) for entry in self._logs if entry['record_id'] == record_id]

    def clear_logs(self) -> None:
        """Clear all logged events."""
        with self._lock:
            self._logs.clear()
        logger.debug("Cleared change audit logs")

    def get_log_count(self) -> int:
        return len(self._logs)

    def has_logs(self) -> bool:
        return len(self._logs) > 0
