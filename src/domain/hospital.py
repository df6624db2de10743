"""Hospital Domain Models.

This module defines the records, patients and staff roles of the hospital
registry. Records are immutable snapshots; patients are mutable identity and
contact wrappers around exactly one record they own.

Security Impact:
    - Required medical data (record id, DNA, birth date, blood type) must be
      present at construction; a record missing any of them never exists
    - Collections are stored as immutable tuples and handed out as copies,
      so callers cannot alter a record through a returned list

Architecture:
    - Pure domain models with no infrastructure dependencies beyond Pydantic
    - Staff roles form a closed set (StaffMember) used for access checks
"""

import time
from datetime import date
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.domain.utils import as_tuple


class MedicalRecord(BaseModel):
    """Immutable medical facts about one patient.

    Parameters:
        record_id: Medical record number (required)
        patient_dna: DNA identifier string (required)
        allergies: Known allergies, empty when omitted
        medical_history: Past procedures and conditions, empty when omitted
        birth_date: Date of birth (required)
        blood_type: Blood type label, e.g. "O+" (required)

    Raises:
        pydantic.ValidationError: If any required field is missing or None
    """

    record_id: str = Field(..., description="Medical record number")
    patient_dna: str = Field(..., description="Patient DNA identifier")
    allergies: tuple[str, ...] = Field(default=(), description="Known allergies")
    medical_history: tuple[str, ...] = Field(default=(), description="Medical history entries")
    birth_date: date = Field(..., description="Date of birth")
    blood_type: str = Field(..., description="Blood type")

    @field_validator("allergies", "medical_history", mode="before")
    @classmethod
    def normalize_collection(cls, v) -> tuple:
        """Treat a missing collection as empty and copy the caller's list."""
        return as_tuple(v)

    def get_allergies(self) -> list[str]:
        """Return an independent copy of the allergy list."""
        return list(self.allergies)

    def get_medical_history(self) -> list[str]:
        """Return an independent copy of the medical history."""
        return list(self.medical_history)

    def is_allergic_to(self, substance: Optional[str]) -> bool:
        """Check whether the patient is allergic to a substance.

        Comparison is case-insensitive, so "penicillin" matches a recorded
        "Penicillin".

        Parameters:
            substance: Substance name to look up

        Returns:
            bool: True if the substance is a recorded allergy
        """
        if substance is None:
            return False
        wanted = substance.casefold()
        return any(allergy.casefold() == wanted for allergy in self.allergies)

    model_config = ConfigDict(frozen=True)


class Patient(BaseModel):
    """A patient: fixed identity and record, mutable contact and placement.

    The patient exclusively owns its MedicalRecord. ``patient_id`` and
    ``medical_record`` cannot be reassigned; the remaining fields are
    validated on assignment.
    """

    patient_id: str = Field(..., frozen=True, description="Patient identifier")
    medical_record: MedicalRecord = Field(..., frozen=True, description="Owned medical record")
    name: Optional[str] = Field(None, description="Current name")
    emergency_contact: Optional[str] = Field(None, description="Emergency contact")
    insurance_info: Optional[str] = Field(None, description="Insurance reference")
    room_number: int = Field(0, description="Assigned room, 0 when unassigned")
    attending_physician: Optional[str] = Field(None, description="Attending physician")

    @classmethod
    def temporary(cls, name: str) -> "Patient":
        """Register a walk-in patient before their records are available.

        The patient gets a ``TEMP-<epoch millis>`` identifier and a
        placeholder record with unknown DNA and blood type.
        """
        placeholder = MedicalRecord(
            record_id="TEMP-MR",
            patient_dna="UNKNOWN",
            birth_date=date.today(),
            blood_type="UNKNOWN",
        )
        return cls(
            patient_id=f"TEMP-{int(time.time() * 1000)}",
            name=name,
            medical_record=placeholder,
        )

    def basic_info(self) -> str:
        """Summary shown to authorized staff."""
        return (
            f"Patient ID: {self.patient_id}, Name: {self.name}, "
            f"Room: {self.room_number}, Doctor: {self.attending_physician}"
        )

    def public_info(self) -> str:
        """Summary safe to show without staff access."""
        return f"Name: {self.name}, Room: {self.room_number}"

    model_config = ConfigDict(validate_assignment=True)


class Doctor(BaseModel):
    """Physician staff member."""

    license_number: str = Field(...)
    specialty: str
    certifications: frozenset[str] = Field(default_factory=frozenset)

    @field_validator("certifications", mode="before")
    @classmethod
    def normalize_certifications(cls, v) -> frozenset:
        return frozenset(as_tuple(v))

    @property
    def staff_id(self) -> str:
        return self.license_number

    def get_certifications(self) -> set[str]:
        return set(self.certifications)

    model_config = ConfigDict(frozen=True)


class Nurse(BaseModel):
    """Nursing staff member."""

    nurse_id: str = Field(...)
    shift: str
    qualifications: tuple[str, ...] = ()

    @field_validator("qualifications", mode="before")
    @classmethod
    def normalize_qualifications(cls, v) -> tuple:
        return as_tuple(v)

    @property
    def staff_id(self) -> str:
        return self.nurse_id

    def get_qualifications(self) -> list[str]:
        return list(self.qualifications)

    model_config = ConfigDict(frozen=True)


class Administrator(BaseModel):
    """Administrative staff member.

    ``access_permissions`` is carried for record keeping only. Access checks
    grant entry by role membership and never consult it.
    """

    admin_id: str = Field(...)
    access_permissions: tuple[str, ...] = ()

    @field_validator("access_permissions", mode="before")
    @classmethod
    def normalize_permissions(cls, v) -> tuple:
        return as_tuple(v)

    @property
    def staff_id(self) -> str:
        return self.admin_id

    def get_access_permissions(self) -> list[str]:
        return list(self.access_permissions)

    model_config = ConfigDict(frozen=True)


# Closed set of roles allowed to admit and view patients
StaffMember = Union[Doctor, Nurse, Administrator]
STAFF_ROLES: tuple[type, ...] = (Doctor, Nurse, Administrator)


def is_staff_member(candidate: object) -> bool:
    """Return True if ``candidate`` belongs to the StaffMember role set."""
    return isinstance(candidate, STAFF_ROLES)
