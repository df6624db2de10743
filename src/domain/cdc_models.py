"""Registry Change Models.

This module defines the event recorded whenever a facade writes to its
registry. Events identify people by id only; names, DNA and contact data
never enter the audit trail.

Architecture:
    - Pure domain models with zero infrastructure dependencies
    - Events are immutable once created (append-only audit trail)
"""

import uuid
from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from src.domain.enums import ChangeType


class ChangeEvent(BaseModel):
    """A single registry write.

    Parameters:
        registry_name: Registry written to ("patients", "students")
        record_id: Identifier the entry is keyed by
        change_type: INSERT for a new identifier, UPDATE when an existing
            entry was overwritten
        changed_at: Timestamp of the write
        changed_by: Identifier of the staff member or course that
            authorized the write
        details: Extra context (e.g. the course code of an enrollment)
    """

    registry_name: str = Field(..., description="Name of the registry")
    record_id: str = Field(..., description="Identifier of the entry")
    change_type: ChangeType = Field(..., description="INSERT or UPDATE")
    changed_at: datetime = Field(default_factory=datetime.now, description="When the write happened")
    changed_by: Optional[str] = Field(None, description="Authorizing actor identifier")
    details: dict[str, Any] = Field(default_factory=dict, description="Additional context")

    def to_audit_dict(self) -> dict:
        """Convert to a flat dictionary for the audit log.

        Returns:
            Dictionary with a fresh ``change_id``
        """
        return {
            'change_id': str(uuid.uuid4()),
            'registry_name': self.registry_name,
            'record_id': self.record_id,
            'change_type': self.change_type.value,
            'changed_at': self.changed_at,
            'changed_by': self.changed_by or "system",
            'details': dict(self.details),
        }

    model_config = ConfigDict(frozen=True)
