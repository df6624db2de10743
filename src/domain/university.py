"""University Domain Models.

This module defines academic records, students and the course resources
(courses, professors, classrooms) used by the registration system, together
with the static prerequisite table.

Architecture:
    - Pure domain models with no infrastructure dependencies beyond Pydantic
    - AcademicRecord is immutable; Student wraps exactly one record it owns
    - Collections are stored as tuples and returned as independent copies
"""

import logging
from datetime import date
from types import MappingProxyType
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.domain.enums import AcademicStanding
from src.domain.utils import as_tuple

logger = logging.getLogger(__name__)

# Course code -> codes that must be completed first. Codes absent from the
# table have no prerequisites.
PREREQUISITE_TABLE: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "CS201": ("CS101",),
    "MATH301": ("MATH201", "MATH202"),
})

DEANS_LIST_GPA = 3.5
GOOD_STANDING_GPA = 2.0


def prerequisites_for(course_code: str) -> list[str]:
    """Return the prerequisite codes for a course (empty if none are registered)."""
    return list(PREREQUISITE_TABLE.get(course_code, ()))


class AcademicRecord(BaseModel):
    """Immutable academic history of one student.

    Parameters:
        student_id: Owning student's identifier
        major: Declared major
        enrollment_date: Date the student enrolled
        completed_courses: Course code -> grade. Accepts a mapping; stored as
            an immutable tuple of (code, grade) pairs
        cumulative_gpa: Cumulative grade point average
        academic_honors: Honors awarded
    """

    student_id: str = Field(..., description="Student identifier")
    major: Optional[str] = Field(None, description="Declared major")
    enrollment_date: Optional[date] = Field(None, description="Enrollment date")
    completed_courses: tuple[tuple[str, str], ...] = Field(
        default=(),
        description="Completed course codes paired with grades"
    )
    cumulative_gpa: float = Field(0.0, description="Cumulative GPA")
    academic_honors: tuple[str, ...] = Field(default=(), description="Academic honors")

    @field_validator("completed_courses", mode="before")
    @classmethod
    def normalize_completed_courses(cls, v) -> tuple:
        """Copy a code -> grade mapping into immutable pairs."""
        if v is None:
            return ()
        if isinstance(v, Mapping):
            return tuple((str(code), str(grade)) for code, grade in v.items())
        return tuple(tuple(pair) for pair in v)

    @field_validator("academic_honors", mode="before")
    @classmethod
    def normalize_honors(cls, v) -> tuple:
        return as_tuple(v)

    def get_completed_courses(self) -> dict[str, str]:
        """Return an independent code -> grade dictionary."""
        return dict(self.completed_courses)

    def get_academic_honors(self) -> list[str]:
        """Return an independent copy of the honors list."""
        return list(self.academic_honors)

    def has_completed(self, course_code: str) -> bool:
        return any(code == course_code for code, _ in self.completed_courses)

    def meets_prerequisites(self, course_code: str) -> bool:
        """Check whether every prerequisite of a course has been completed.

        Codes are matched exactly. A course without registered prerequisites
        is always satisfied.

        Parameters:
            course_code: Code of the course to check

        Returns:
            bool: True if all prerequisites appear among completed courses
        """
        if course_code not in PREREQUISITE_TABLE:
            logger.debug(f"No prerequisites registered for {course_code}; permitting")
            return True
        return all(self.has_completed(code) for code in PREREQUISITE_TABLE[course_code])

    model_config = ConfigDict(frozen=True)


class Student(BaseModel):
    """A student: fixed identity and academic record, mutable contact details."""

    student_id: str = Field(..., frozen=True)
    academic_record: AcademicRecord = Field(..., frozen=True)
    name: Optional[str] = None
    email: Optional[str] = None
    phone_number: Optional[str] = None
    current_address: Optional[str] = None
    emergency_contact: Optional[str] = None

    @classmethod
    def new_admit(cls, student_id: str, name: str, major: str) -> "Student":
        """First-year student with an empty record and a 0.0 GPA."""
        record = AcademicRecord(
            student_id=student_id,
            major=major,
            enrollment_date=date.today(),
        )
        return cls(student_id=student_id, name=name, academic_record=record)

    @classmethod
    def transfer(
        cls,
        student_id: str,
        name: str,
        transfer_credits: Optional[Mapping[str, str]],
        gpa: float
    ) -> "Student":
        """Transfer student with credited courses and an undeclared major."""
        record = AcademicRecord(
            student_id=student_id,
            major="Undeclared",
            enrollment_date=date.today(),
            completed_courses=transfer_credits,
            cumulative_gpa=gpa,
        )
        return cls(student_id=student_id, name=name, academic_record=record)

    @classmethod
    def graduate(
        cls,
        student_id: str,
        name: str,
        major: str,
        undergraduate_record: AcademicRecord
    ) -> "Student":
        """Graduate student carrying over undergraduate courses and GPA.

        Honors are not carried over.
        """
        record = AcademicRecord(
            student_id=student_id,
            major=major,
            enrollment_date=date.today(),
            completed_courses=undergraduate_record.get_completed_courses(),
            cumulative_gpa=undergraduate_record.cumulative_gpa,
        )
        return cls(student_id=student_id, name=name, academic_record=record)

    @property
    def academic_standing(self) -> AcademicStanding:
        gpa = self.academic_record.cumulative_gpa
        if gpa >= DEANS_LIST_GPA:
            return AcademicStanding.DEANS_LIST
        if gpa >= GOOD_STANDING_GPA:
            return AcademicStanding.GOOD_STANDING
        return AcademicStanding.ACADEMIC_PROBATION

    def contact_info(self) -> str:
        return f"Name: {self.name}, Email: {self.email}, Phone: {self.phone_number}"

    model_config = ConfigDict(
        validate_assignment=True,
        str_strip_whitespace=True,
    )


class Course(BaseModel):
    """Catalog entry for a course.

    ``prerequisites`` documents the catalog listing; enrollment checks use
    the prerequisite table.
    """

    course_code: str = Field(...)
    title: str
    credit_hours: int = Field(..., ge=0)
    prerequisites: tuple[str, ...] = ()

    @field_validator("prerequisites", mode="before")
    @classmethod
    def normalize_prerequisites(cls, v) -> tuple:
        return as_tuple(v)

    def get_prerequisites(self) -> list[str]:
        return list(self.prerequisites)

    model_config = ConfigDict(frozen=True)


class Professor(BaseModel):
    faculty_id: str = Field(...)
    department: str
    qualifications: tuple[str, ...] = ()

    @field_validator("qualifications", mode="before")
    @classmethod
    def normalize_qualifications(cls, v) -> tuple:
        return as_tuple(v)

    def get_qualifications(self) -> list[str]:
        return list(self.qualifications)

    model_config = ConfigDict(frozen=True)


class Classroom(BaseModel):
    """Room a course meets in; ``capacity`` bounds the course roster."""

    room_number: str = Field(...)
    capacity: int = Field(..., ge=0)
    equipment: tuple[str, ...] = ()

    @field_validator("equipment", mode="before")
    @classmethod
    def normalize_equipment(cls, v) -> tuple:
        return as_tuple(v)

    def get_equipment(self) -> list[str]:
        return list(self.equipment)

    model_config = ConfigDict(frozen=True)
