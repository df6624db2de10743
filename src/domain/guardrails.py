"""Domain Guardrails - Admission and Enrollment Rules.

This module provides the business rules the facades evaluate before writing
to a registry. Each rule either passes (returns None) or returns a failure
Result explaining the denial.

Architecture:
    - Pure domain logic with no infrastructure dependencies
    - Rules are small objects so facades can be built with custom thresholds
    - Enrollment rules run in order; the first failure wins
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional

from src.domain.enums import FailureKind
from src.domain.hospital import is_staff_member
from src.domain.ports import RegistryPort, Result
from src.domain.university import Classroom, Course, Student, prerequisites_for

logger = logging.getLogger(__name__)

MAX_CAPACITY = 500
MIN_GPA_FOR_ENROLLMENT = 2.0
MAX_CREDITS_PER_SEMESTER = 18


class StaffAccessRule:
    """Grants access to any member of the staff role set.

    Membership alone is sufficient: an Administrator's permission list is
    not consulted.
    """

    def permits(self, staff: object) -> bool:
        return is_staff_member(staff)


class AdmissionCapacityRule:
    """Caps the number of distinct admitted patients.

    Re-admitting an identifier that is already registered replaces the
    existing entry and never counts against capacity.

    Parameters:
        max_capacity: Maximum number of distinct patient identifiers
    """

    def __init__(self, max_capacity: int = MAX_CAPACITY):
        self.max_capacity = max_capacity

    def evaluate(self, patient_id: str, registry: RegistryPort) -> Optional[Result]:
        if patient_id in registry or len(registry) < self.max_capacity:
            return None
        return Result.failure_result(
            f"Hospital at capacity ({self.max_capacity} patients)",
            error_type=FailureKind.CAPACITY_EXCEEDED,
            error_details={"patient_id": patient_id, "max_capacity": self.max_capacity}
        )


@dataclass
class EnrollmentContext:
    """What the registration system knows about a student at enrollment time.

    Attributes:
        enrolled_courses: Courses the student is already enrolled in, by code
        roster_size: Number of students currently enrolled in the course
        classroom: Room the course meets in, if one was given
    """
    enrolled_courses: dict[str, Course] = field(default_factory=dict)
    roster_size: int = 0
    classroom: Optional[Classroom] = None

    def is_enrolled_in(self, course_code: str) -> bool:
        return course_code in self.enrolled_courses


class EnrollmentRule(ABC):
    """A single condition a student must satisfy to enroll in a course."""

    @abstractmethod
    def evaluate(
        self,
        student: Student,
        course: Course,
        context: EnrollmentContext
    ) -> Optional[Result]:
        """Return None if the rule passes, otherwise a failure Result."""
        pass


class PrerequisiteRule(EnrollmentRule):
    """Every prerequisite of the course must be a completed course."""

    def evaluate(self, student, course, context):
        if student.academic_record.meets_prerequisites(course.course_code):
            return None
        completed = student.academic_record.get_completed_courses()
        missing = [code for code in prerequisites_for(course.course_code) if code not in completed]
        return Result.failure_result(
            f"Prerequisites not met for {course.course_code}: missing {', '.join(missing)}",
            error_type=FailureKind.PREREQUISITES_NOT_MET,
            error_details={"course_code": course.course_code, "missing": missing}
        )


class MinimumGpaRule(EnrollmentRule):
    """Cumulative GPA must be at least ``min_gpa``."""

    def __init__(self, min_gpa: float = MIN_GPA_FOR_ENROLLMENT):
        self.min_gpa = min_gpa

    def evaluate(self, student, course, context):
        gpa = student.academic_record.cumulative_gpa
        if gpa >= self.min_gpa:
            return None
        return Result.failure_result(
            f"GPA {gpa:.2f} is below the enrollment minimum of {self.min_gpa:.2f}",
            error_type=FailureKind.GPA_BELOW_MINIMUM,
            error_details={"gpa": gpa, "min_gpa": self.min_gpa}
        )


class CreditLoadRule(EnrollmentRule):
    """Total credit hours across distinct enrolled courses may not exceed ``max_credits``.

    Enrolling again in a course the student already holds adds no credits.
    """

    def __init__(self, max_credits: int = MAX_CREDITS_PER_SEMESTER):
        self.max_credits = max_credits

    def evaluate(self, student, course, context):
        current = sum(
            enrolled.credit_hours
            for code, enrolled in context.enrolled_courses.items()
            if code != course.course_code
        )
        requested = current + course.credit_hours
        if requested <= self.max_credits:
            return None
        return Result.failure_result(
            f"Enrolling in {course.course_code} would bring the load to "
            f"{requested} credits (max {self.max_credits})",
            error_type=FailureKind.CREDIT_LIMIT_EXCEEDED,
            error_details={"current_credits": current, "requested_credits": requested,
                           "max_credits": self.max_credits}
        )


class ClassroomCapacityRule(EnrollmentRule):
    """A course cannot enroll more students than its classroom seats.

    Only applies when a classroom is given. Students already on the roster
    keep their seat.
    """

    def evaluate(self, student, course, context):
        room = context.classroom
        if room is None or context.is_enrolled_in(course.course_code):
            return None
        if context.roster_size < room.capacity:
            return None
        return Result.failure_result(
            f"Classroom {room.room_number} is full ({room.capacity} seats)",
            error_type=FailureKind.CLASSROOM_FULL,
            error_details={"room_number": room.room_number, "capacity": room.capacity}
        )


def default_enrollment_rules(
    min_gpa: float = MIN_GPA_FOR_ENROLLMENT,
    max_credits: int = MAX_CREDITS_PER_SEMESTER
) -> list[EnrollmentRule]:
    """Rules in evaluation order: prerequisites, GPA, credit load, seats."""
    return [
        PrerequisiteRule(),
        MinimumGpaRule(min_gpa),
        CreditLoadRule(max_credits),
        ClassroomCapacityRule(),
    ]
