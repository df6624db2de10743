"""Hospital admission facade.

HospitalSystem is the single entry point of the hospital subsystem. It owns
the patient registry, admits patients on behalf of staff and answers
patient-info queries.

Security Impact:
    - Only members of the staff role set may admit or view patients
    - Log lines and audit entries carry identifiers, never names or DNA
"""

import logging
from threading import Lock
from typing import TYPE_CHECKING, Optional

from src.adapters.storage.memory_registry import InMemoryRegistry
from src.domain.enums import ChangeType, FailureKind
from src.domain.guardrails import MAX_CAPACITY, AdmissionCapacityRule, StaffAccessRule
from src.domain.hospital import Patient
from src.domain.ports import (
    ACCESS_DENIED,
    PATIENT_NOT_FOUND,
    RecordValidationError,
    RegistryPort,
    Result,
)

if TYPE_CHECKING:
    from src.infrastructure.audit.change_audit_logger import ChangeAuditLogger

logger = logging.getLogger(__name__)


class HospitalSystem:
    """Admits patients and serves patient information to staff.

    Parameters:
        registry: Patient registry to own. A fresh in-memory registry is
            created when omitted.
        max_capacity: Maximum number of distinct admitted patients
        audit_logger: Optional audit trail receiving one entry per admission

    Example Usage:
        ```python
        hospital = HospitalSystem()
        if hospital.admit_patient(patient, doctor):
            print(hospital.get_patient_info(patient.patient_id, nurse).value)
        ```
    """

    PRIVACY_POLICY = "HIPAA_COMPLIANT"
    REGISTRY_NAME = "patients"

    def __init__(
        self,
        registry: Optional[RegistryPort[Patient]] = None,
        max_capacity: int = MAX_CAPACITY,
        audit_logger: Optional["ChangeAuditLogger"] = None
    ):
        self._registry: RegistryPort[Patient] = (
            registry if registry is not None else InMemoryRegistry(self.REGISTRY_NAME)
        )
        self._access_rule = StaffAccessRule()
        self._capacity_rule = AdmissionCapacityRule(max_capacity)
        self._audit_logger = audit_logger
        self._lock = Lock()

    @property
    def patient_count(self) -> int:
        return len(self._registry)

    def admit_patient(self, patient: object, staff: object) -> Result[Patient]:
        """Admit a patient on behalf of a staff member.

        The patient is stored under its identifier; admitting the same
        identifier again replaces the earlier entry.

        Parameters:
            patient: Patient to admit
            staff: Doctor, Nurse or Administrator authorizing the admission

        Returns:
            Result[Patient]: Success with the stored patient, or a failure
            with TYPE_MISMATCH (wrong patient or staff object),
            CAPACITY_EXCEEDED or INVALID_IDENTIFIER (blank patient id)
        """
        if not isinstance(patient, Patient):
            logger.warning(f"Admission rejected: expected Patient, got {type(patient).__name__}")
            return Result.failure_result(
                f"Expected a Patient, got {type(patient).__name__}",
                error_type=FailureKind.TYPE_MISMATCH
            )

        if not self._access_rule.permits(staff):
            logger.warning(
                f"Admission of {patient.patient_id} rejected: "
                f"{type(staff).__name__} is not a staff member"
            )
            return Result.failure_result(
                f"Expected a staff member, got {type(staff).__name__}",
                error_type=FailureKind.TYPE_MISMATCH,
                error_details={"patient_id": patient.patient_id}
            )

        with self._lock:
            failure = self._capacity_rule.evaluate(patient.patient_id, self._registry)
            if failure is not None:
                logger.warning(f"Admission of {patient.patient_id} rejected: {failure.error}")
                return failure

            try:
                previous = self._registry.put(patient.patient_id, patient)
            except RecordValidationError as e:
                logger.warning(f"Admission rejected: {e}")
                return Result.failure_result(
                    str(e),
                    error_type=FailureKind.INVALID_IDENTIFIER,
                    error_details={"patient_id": e.record_id}
                )

        change_type = ChangeType.UPDATE if previous is not None else ChangeType.INSERT
        if previous is not None:
            logger.info(f"Re-admitted patient {patient.patient_id}; previous entry replaced")
        else:
            logger.info(f"Admitted patient {patient.patient_id} (authorized by {staff.staff_id})")

        if self._audit_logger is not None:
            self._audit_logger.log_change(
                registry_name=self.REGISTRY_NAME,
                record_id=patient.patient_id,
                change_type=change_type,
                changed_by=staff.staff_id,
            )
        return Result.success_result(patient)

    def get_patient_info(self, patient_id: str, staff: object) -> Result[str]:
        """Look up an admitted patient's summary for a staff member.

        Returns:
            Result[str]: Success with the summary line; NOT_FOUND with
            "Patient not found"; ACCESS_DENIED with "Access denied"
        """
        patient = self._registry.get(patient_id)
        if patient is None:
            logger.info(f"Patient info requested for unknown id {patient_id}")
            return Result.failure_result(
                PATIENT_NOT_FOUND,
                error_type=FailureKind.NOT_FOUND,
                error_details={"patient_id": patient_id}
            )

        if not self._access_rule.permits(staff):
            logger.warning(f"Access to patient {patient_id} denied for {type(staff).__name__}")
            return Result.failure_result(
                ACCESS_DENIED,
                error_type=FailureKind.ACCESS_DENIED,
                error_details={"patient_id": patient_id}
            )

        return Result.success_result(patient.basic_info())
