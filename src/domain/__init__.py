"""Domain layer for Care-Campus-Registry.

This module contains the hospital and university models and the rules
governing admission and enrollment. All domain models are pure Python with
no external dependencies beyond Pydantic.
"""

from .hospital import (
    MedicalRecord,
    Patient,
    Doctor,
    Nurse,
    Administrator,
    StaffMember,
)
from .university import (
    AcademicRecord,
    Student,
    Course,
    Professor,
    Classroom,
    PREREQUISITE_TABLE,
)

__all__ = [
    "MedicalRecord",
    "Patient",
    "Doctor",
    "Nurse",
    "Administrator",
    "StaffMember",
    "AcademicRecord",
    "Student",
    "Course",
    "Professor",
    "Classroom",
    "PREREQUISITE_TABLE",
]
