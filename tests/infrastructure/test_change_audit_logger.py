"""Unit tests for ChangeAuditLogger."""

from datetime import datetime

import pytest
from pydantic import ValidationError

from src.domain.cdc_models import ChangeEvent
from src.domain.enums import ChangeType
from src.infrastructure.audit.change_audit_logger import ChangeAuditLogger


class TestChangeEvent:
    """Test suite for ChangeEvent model."""

    def test_to_audit_dict(self):
        event = ChangeEvent(
            registry_name="patients",
            record_id="P001",
            change_type=ChangeType.INSERT,
            changed_by="DOC001",
        )
        audit_dict = event.to_audit_dict()

        assert audit_dict["registry_name"] == "patients"
        assert audit_dict["record_id"] == "P001"
        assert audit_dict["change_type"] == "INSERT"
        assert audit_dict["changed_by"] == "DOC001"
        assert isinstance(audit_dict["changed_at"], datetime)
        assert audit_dict["details"] == {}
        assert "change_id" in audit_dict

    def test_change_ids_are_unique(self):
        event = ChangeEvent(registry_name="students", record_id="S001", change_type="UPDATE")
        assert event.to_audit_dict()["change_id"] != event.to_audit_dict()["change_id"]

    def test_default_actor_is_system(self):
        event = ChangeEvent(registry_name="students", record_id="S001", change_type="UPDATE")
        assert event.change_type is ChangeType.UPDATE
        assert event.to_audit_dict()["changed_by"] == "system"

    def test_unknown_change_type_rejected(self):
        with pytest.raises(ValidationError):
            ChangeEvent(registry_name="patients", record_id="P001", change_type="DELETE")

    def test_event_is_immutable(self):
        event = ChangeEvent(registry_name="patients", record_id="P001", change_type="INSERT")
        with pytest.raises(ValidationError):
            event.record_id = "P002"


class TestChangeAuditLogger:
    """Test suite for ChangeAuditLogger."""

    def test_init(self):
        logger = ChangeAuditLogger()
        assert logger.get_log_count() == 0
        assert not logger.has_logs()
        assert logger.get_logs() == []

    def test_log_change(self):
        logger = ChangeAuditLogger()
        entry = logger.log_change(
            registry_name="students",
            record_id="S001",
            change_type=ChangeType.INSERT,
            changed_by="CS201",
            course_code="CS201",
        )

        assert logger.get_log_count() == 1
        assert logger.has_logs()
        assert entry["details"] == {"course_code": "CS201"}
        assert logger.get_logs()[0]["record_id"] == "S001"

    def test_log_change_event(self):
        logger = ChangeAuditLogger()
        logger.log_change_event(
            ChangeEvent(registry_name="patients", record_id="P001", change_type="UPDATE")
        )
        assert logger.get_logs()[0]["change_type"] == "UPDATE"

    def test_get_logs_returns_copy(self):
        logger = ChangeAuditLogger()
        logger.log_change("patients", "P001")

        logs = logger.get_logs()
        logs[0]["record_id"] = "tampered"
        logs.clear()

        assert logger.get_log_count() == 1
        assert logger.get_logs()[0]["record_id"] == "P001"

    def test_events_for(self):
        logger = ChangeAuditLogger()
        logger.log_change("patients", "P001", ChangeType.INSERT)
        logger.log_change("patients", "P002", ChangeType.INSERT)
        logger.log_change("patients", "P001", ChangeType.UPDATE)

        events = logger.events_for("P001")
        assert [e["change_type"] for e in events] == ["INSERT", "UPDATE"]
        assert logger.events_for("P404") == []

    def test_clear_logs(self):
        logger = ChangeAuditLogger()
        logger.log_change("patients", "P001")
        logger.clear_logs()
        assert not logger.has_logs()
