"""Domain Enumerations.

Closed value sets shared by the hospital and university domains.
"""

from enum import Enum


class FailureKind(str, Enum):
    """Why an admission, enrollment or query did not succeed."""
    TYPE_MISMATCH = "type_mismatch"
    ACCESS_DENIED = "access_denied"
    PREREQUISITES_NOT_MET = "prerequisites_not_met"
    GPA_BELOW_MINIMUM = "gpa_below_minimum"
    CREDIT_LIMIT_EXCEEDED = "credit_limit_exceeded"
    CLASSROOM_FULL = "classroom_full"
    CAPACITY_EXCEEDED = "capacity_exceeded"
    NOT_FOUND = "not_found"
    INVALID_IDENTIFIER = "invalid_identifier"


class AcademicStanding(str, Enum):
    """Standing derived from cumulative GPA."""
    DEANS_LIST = "Dean's List"
    GOOD_STANDING = "Good Standing"
    ACADEMIC_PROBATION = "Academic Probation"

    def __str__(self) -> str:
        return self.value


class ChangeType(str, Enum):
    """Kinds of registry mutation recorded in the audit trail."""
    INSERT = "INSERT"
    UPDATE = "UPDATE"
