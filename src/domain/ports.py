"""Domain Ports - Outcome Type and Registry Contract.

This module defines the Result type the facades use to report success or
failure, the exception hierarchy, and the RegistryPort interface that
registry adapters implement.

Architecture:
    - Pure abstract interfaces with zero infrastructure dependencies
    - Facades own a RegistryPort; the in-memory adapter implements it
    - Failures are values (Result), not exceptions, except for fatal
      construction errors
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, Iterator, Optional, TypeVar

from src.domain.enums import FailureKind

# Type variable for Result and registry generics
T = TypeVar('T')

# Sentinel messages returned by queries
ACCESS_DENIED = "Access denied"
PATIENT_NOT_FOUND = "Patient not found"
STUDENT_NOT_FOUND = "Student not found"


# ============================================================================
# Result Type for Success/Failure Communication
# ============================================================================

@dataclass(frozen=True)
class Result(Generic[T]):
    """Result type for communicating success or failure without exceptions.

    A Result is truthy exactly when it is a success, so callers that only
    need the yes/no answer can write ``if system.admit_patient(p, doc):``.
    Callers that need to tell denial from absence inspect ``error_type``.

    Attributes:
        success: True if the operation succeeded, False otherwise
        value: The successful result value (only present if success=True)
        error: Human-readable failure message or sentinel string
        error_type: FailureKind classifying the failure
        error_details: Additional failure context (ids, thresholds, etc.)

    Example:
        ```python
        result = hospital.get_patient_info("P001", nurse)
        if result:
            print(result.value)
        elif result.error_type is FailureKind.NOT_FOUND:
            print(result.error)  # "Patient not found"
        ```
    """

    success: bool
    value: Optional[T] = None
    error: Optional[str] = None
    error_type: Optional[FailureKind] = None
    error_details: Optional[dict] = None

    @classmethod
    def success_result(cls, value: T) -> 'Result[T]':
        """Create a successful result.

        Parameters:
            value: The successful result value

        Returns:
            Result: Success result with the value
        """
        return cls(success=True, value=value)

    @classmethod
    def failure_result(
        cls,
        error: str,
        error_type: FailureKind,
        error_details: Optional[dict] = None
    ) -> 'Result[T]':
        """Create a failure result.

        Parameters:
            error: Failure message or sentinel string
            error_type: Kind of failure
            error_details: Additional context

        Returns:
            Result: Failure result with error information
        """
        return cls(
            success=False,
            value=None,
            error=error,
            error_type=error_type,
            error_details=error_details or {}
        )

    def is_success(self) -> bool:
        """Check if result is successful."""
        return self.success

    def is_failure(self) -> bool:
        """Check if result is a failure."""
        return not self.success

    @property
    def message(self) -> str:
        """The value on success, the error string on failure."""
        if self.success:
            return str(self.value)
        return self.error or ""

    def __bool__(self) -> bool:
        return self.success


# ============================================================================
# Custom Exception Hierarchy
# ============================================================================

class RegistryError(Exception):
    """Base exception for registry-related errors."""
    pass


class RecordValidationError(RegistryError):
    """Raised when an entry cannot be stored under the identifier given.

    Attributes:
        record_id: The identifier involved
        details: Additional error details
    """

    def __init__(self, message: str, record_id: Optional[str] = None, details: Optional[dict] = None):
        super().__init__(message)
        self.record_id = record_id
        self.details = details or {}


# ============================================================================
# Registry Port
# ============================================================================

class RegistryPort(ABC, Generic[T]):
    """Identifier-keyed store of registered people.

    Implementations must make insert and lookup of a single identifier
    atomic: no reader may observe a partially inserted entry. Entries are
    never removed.
    """

    @abstractmethod
    def put(self, record_id: str, entry: T) -> Optional[T]:
        """Store ``entry`` under ``record_id``, replacing any previous entry.

        Returns:
            The replaced entry, or None if the identifier was new
        """
        pass

    @abstractmethod
    def get(self, record_id: str) -> Optional[T]:
        """Return the entry stored under ``record_id``, or None."""
        pass

    @abstractmethod
    def contains(self, record_id: str) -> bool:
        pass

    @abstractmethod
    def ids(self) -> list[str]:
        """Return a snapshot of registered identifiers in insertion order."""
        pass

    @abstractmethod
    def __len__(self) -> int:
        pass

    def __contains__(self, record_id: object) -> bool:
        return isinstance(record_id, str) and self.contains(record_id)

    def __iter__(self) -> Iterator[str]:
        return iter(self.ids())
