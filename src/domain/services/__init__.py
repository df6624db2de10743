"""Domain Services.

This package contains the facades that implement admission and enrollment
business logic: HospitalSystem and RegistrationSystem.
"""

from src.domain.services.hospital_system import HospitalSystem
from src.domain.services.registration_system import RegistrationSystem

__all__ = ['HospitalSystem', 'RegistrationSystem']
