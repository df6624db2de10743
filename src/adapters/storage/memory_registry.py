"""In-Memory Registry Adapter.

This adapter implements the RegistryPort contract over a dictionary owned by
a single facade instance. It is the only mutable state of each subsystem and
lives exactly as long as the facade that created it.

Architecture:
    - Implements RegistryPort (Hexagonal Architecture)
    - Last write wins: storing an existing identifier replaces the entry
    - Grows only; there is no removal operation
    - A lock makes insert and lookup of one identifier atomic
"""

import logging
from threading import Lock
from typing import Optional, TypeVar

from src.domain.ports import RegistryPort, RecordValidationError

logger = logging.getLogger(__name__)

T = TypeVar('T')


class InMemoryRegistry(RegistryPort[T]):
    """Dictionary-backed registry keyed by person identifier.

    Parameters:
        name: Registry name used in log messages and audit events
            (e.g. "patients", "students")

    Example Usage:
        ```python
        registry = InMemoryRegistry[Patient]("patients")
        previous = registry.put(patient.patient_id, patient)
        if previous is not None:
            ...  # an earlier admission was overwritten
        ```
    """

    def __init__(self, name: str = "registry"):
        self.name = name
        self._entries: dict[str, T] = {}
        self._lock = Lock()

    def put(self, record_id: str, entry: T) -> Optional[T]:
        """Store an entry, returning the one it replaced (if any).

        Raises:
            RecordValidationError: If ``record_id`` is empty
        """
        if not record_id:
            raise RecordValidationError(
                f"Cannot store entry in '{self.name}' without an identifier",
                record_id=record_id
            )
        with self._lock:
            previous = self._entries.get(record_id)
            self._entries[record_id] = entry
        if previous is not None:
            logger.debug(f"{self.name}: replaced entry for {record_id}")
        return previous

    def get(self, record_id: str) -> Optional[T]:
        with self._lock:
            return self._entries.get(record_id)

    def contains(self, record_id: str) -> bool:
        with self._lock:
            return record_id in self._entries

    def ids(self) -> list[str]:
        with self._lock:
            return list(self._entries)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __repr__(self) -> str:
        return f"InMemoryRegistry(name={self.name!r}, size={len(self)})"
