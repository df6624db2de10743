"""Audit infrastructure components.

This package provides the append-only audit trail of registry writes.
"""

from src.infrastructure.audit.change_audit_logger import ChangeAuditLogger

__all__ = ['ChangeAuditLogger']
