"""Course registration facade.

RegistrationSystem owns the student registry and the per-student course
ledger, enrolls students after checking the enrollment rules and produces
enrollment reports.
"""

import logging
from threading import Lock
from typing import TYPE_CHECKING, Optional, Sequence

from src.adapters.storage.memory_registry import InMemoryRegistry
from src.domain.enums import ChangeType, FailureKind
from src.domain.guardrails import (
    MAX_CREDITS_PER_SEMESTER,
    MIN_GPA_FOR_ENROLLMENT,
    EnrollmentContext,
    EnrollmentRule,
    default_enrollment_rules,
)
from src.domain.ports import (
    ACCESS_DENIED,
    STUDENT_NOT_FOUND,
    RecordValidationError,
    RegistryPort,
    Result,
)
from src.domain.university import Classroom, Course, Professor, Student

if TYPE_CHECKING:
    from src.infrastructure.audit.change_audit_logger import ChangeAuditLogger

logger = logging.getLogger(__name__)


class RegistrationSystem:
    """Enrolls students in courses and reports on enrolled students.

    Parameters:
        registry: Student registry to own. A fresh in-memory registry is
            created when omitted.
        min_gpa: Minimum cumulative GPA to enroll
        max_credits: Maximum credit hours a student may carry
        rules: Explicit enrollment rules, replacing the defaults built from
            ``min_gpa`` and ``max_credits``
        audit_logger: Optional audit trail receiving one entry per enrollment
    """

    REGISTRY_NAME = "students"

    def __init__(
        self,
        registry: Optional[RegistryPort[Student]] = None,
        min_gpa: float = MIN_GPA_FOR_ENROLLMENT,
        max_credits: int = MAX_CREDITS_PER_SEMESTER,
        rules: Optional[Sequence[EnrollmentRule]] = None,
        audit_logger: Optional["ChangeAuditLogger"] = None
    ):
        self._registry: RegistryPort[Student] = (
            registry if registry is not None else InMemoryRegistry(self.REGISTRY_NAME)
        )
        self._rules = list(rules) if rules is not None else default_enrollment_rules(min_gpa, max_credits)
        self._audit_logger = audit_logger
        # student_id -> {course_code: Course}
        self._ledger: dict[str, dict[str, Course]] = {}
        # course_code -> student ids in enrollment order
        self._rosters: dict[str, list[str]] = {}
        self._lock = Lock()

    @property
    def student_count(self) -> int:
        return len(self._registry)

    def enroll_student(
        self,
        student: object,
        course: object,
        classroom: Optional[object] = None
    ) -> Result[Student]:
        """Enroll a student in a course.

        The student must have completed the course's prerequisites, meet the
        GPA floor, stay within the credit limit and, when a classroom is
        given, find a free seat. On success the student is stored under its
        identifier, replacing any earlier entry.

        Parameters:
            student: Student to enroll
            course: Course to enroll in
            classroom: Optional room bounding the course roster

        Returns:
            Result[Student]: Success with the stored student, or a failure
            whose error_type names the rule that denied it
        """
        for value, expected in ((student, Student), (course, Course)):
            if not isinstance(value, expected):
                logger.warning(
                    f"Enrollment rejected: expected {expected.__name__}, got {type(value).__name__}"
                )
                return Result.failure_result(
                    f"Expected a {expected.__name__}, got {type(value).__name__}",
                    error_type=FailureKind.TYPE_MISMATCH
                )
        if classroom is not None and not isinstance(classroom, Classroom):
            return Result.failure_result(
                f"Expected a Classroom, got {type(classroom).__name__}",
                error_type=FailureKind.TYPE_MISMATCH
            )

        with self._lock:
            context = EnrollmentContext(
                enrolled_courses=dict(self._ledger.get(student.student_id, {})),
                roster_size=len(self._rosters.get(course.course_code, [])),
                classroom=classroom,
            )
            for rule in self._rules:
                failure = rule.evaluate(student, course, context)
                if failure is not None:
                    logger.warning(
                        f"Enrollment of {student.student_id} in {course.course_code} "
                        f"denied: {failure.error_type.value}"
                    )
                    return failure

            try:
                previous = self._registry.put(student.student_id, student)
            except RecordValidationError as e:
                logger.warning(f"Enrollment in {course.course_code} rejected: {e}")
                return Result.failure_result(
                    str(e),
                    error_type=FailureKind.INVALID_IDENTIFIER,
                    error_details={"student_id": e.record_id}
                )
            self._ledger.setdefault(student.student_id, {})[course.course_code] = course
            roster = self._rosters.setdefault(course.course_code, [])
            if student.student_id not in roster:
                roster.append(student.student_id)

        change_type = ChangeType.UPDATE if previous is not None else ChangeType.INSERT
        logger.info(
            f"Enrolled student {student.student_id} in {course.course_code}"
            + ("; previous entry replaced" if previous is not None else "")
        )
        if self._audit_logger is not None:
            self._audit_logger.log_change(
                registry_name=self.REGISTRY_NAME,
                record_id=student.student_id,
                change_type=change_type,
                changed_by=course.course_code,
                course_code=course.course_code,
            )
        return Result.success_result(student)

    def get_enrollment_report(
        self,
        student_id: str,
        requester: Optional[object] = None
    ) -> Result[str]:
        """Report contact details and academic standing of an enrolled student.

        Parameters:
            student_id: Identifier to look up
            requester: Who is asking. None skips the access check; otherwise
                it must be a Professor or the student themself.

        Returns:
            Result[str]: Success with the report line; NOT_FOUND with
            "Student not found"; ACCESS_DENIED with "Access denied"
        """
        student = self._registry.get(student_id)
        if student is None:
            return Result.failure_result(
                STUDENT_NOT_FOUND,
                error_type=FailureKind.NOT_FOUND,
                error_details={"student_id": student_id}
            )

        if requester is not None and not self._may_view(requester, student_id):
            logger.warning(f"Enrollment report for {student_id} denied for {type(requester).__name__}")
            return Result.failure_result(
                ACCESS_DENIED,
                error_type=FailureKind.ACCESS_DENIED,
                error_details={"student_id": student_id}
            )

        return Result.success_result(
            f"Student: {student.contact_info()}, Standing: {student.academic_standing}"
        )

    def enrolled_courses(self, student_id: str) -> list[str]:
        """Course codes the student is enrolled in, in enrollment order."""
        with self._lock:
            return list(self._ledger.get(student_id, {}))

    def course_roster(self, course_code: str) -> list[str]:
        """Student ids enrolled in a course, in enrollment order."""
        with self._lock:
            return list(self._rosters.get(course_code, []))

    @staticmethod
    def _may_view(requester: object, student_id: str) -> bool:
        if isinstance(requester, Professor):
            return True
        return isinstance(requester, Student) and requester.student_id == student_id
