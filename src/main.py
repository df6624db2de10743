"""Main entry point for the Care-Campus-Registry demo scenarios.

This module wires the facades to the configured policy thresholds and runs
the two demonstration scenarios: admitting a patient to the hospital and
enrolling a student in a course. Scenario functions return the lines they
would print so the CLI and tests can share them.

Architecture:
    - Thresholds come from Settings (environment / .env)
    - Each scenario builds its own facade, so registries never outlive a run
"""

import argparse
import logging
from datetime import date
from typing import Optional

from src.domain.hospital import Doctor, MedicalRecord, Nurse, Patient
from src.domain.services import HospitalSystem, RegistrationSystem
from src.domain.university import Course, Professor, Student
from src.infrastructure.audit import ChangeAuditLogger
from src.infrastructure.logging_config import setup_logging
from src.infrastructure.settings import Settings, settings

logger = logging.getLogger(__name__)


def create_hospital_system(
    app_settings: Optional[Settings] = None,
    audit_logger: Optional[ChangeAuditLogger] = None
) -> HospitalSystem:
    """Create a HospitalSystem using the configured admission capacity."""
    app_settings = app_settings or settings
    logger.debug(f"Creating hospital system (capacity {app_settings.hospital_capacity})")
    return HospitalSystem(
        max_capacity=app_settings.hospital_capacity,
        audit_logger=audit_logger,
    )


def create_registration_system(
    app_settings: Optional[Settings] = None,
    audit_logger: Optional[ChangeAuditLogger] = None
) -> RegistrationSystem:
    """Create a RegistrationSystem using the configured GPA floor and credit limit."""
    app_settings = app_settings or settings
    logger.debug(
        f"Creating registration system (min GPA {app_settings.min_gpa}, "
        f"max credits {app_settings.max_credits})"
    )
    return RegistrationSystem(
        min_gpa=app_settings.min_gpa,
        max_credits=app_settings.max_credits,
        audit_logger=audit_logger,
    )


def run_hospital_demo(hospital: Optional[HospitalSystem] = None) -> list[str]:
    """Admit a patient with a penicillin allergy and report on them.

    Returns:
        list[str]: Lines describing the outcome
    """
    hospital = hospital or create_hospital_system()

    record = MedicalRecord(
        record_id="MR001",
        patient_dna="DNA123",
        allergies=["Penicillin"],
        medical_history=["Surgery 2020"],
        birth_date=date(1990, 5, 15),
        blood_type="O+",
    )
    patient = Patient(
        patient_id="P001",
        name="John Doe",
        emergency_contact="Jane Doe",
        insurance_info="INS123",
        medical_record=record,
    )
    patient.room_number = 101

    doctor = Doctor(license_number="DOC001", specialty="Cardiology", certifications={"Board Certified"})
    nurse = Nurse(nurse_id="N001", shift="Day", qualifications=["RN", "CPR"])

    lines = []
    admission = hospital.admit_patient(patient, doctor)
    if admission:
        lines.append(f"Patient admitted: {patient.public_info()}")
    else:
        lines.append(f"Patient admission failed: {admission.error}")
    lines.append(f"Allergy check: {record.is_allergic_to('Penicillin')}")
    lines.append(f"Staff view: {hospital.get_patient_info(patient.patient_id, nurse).message}")
    return lines


def run_university_demo(registration: Optional[RegistrationSystem] = None) -> list[str]:
    """Enroll a transfer student who completed CS101 in CS201.

    Returns:
        list[str]: Lines describing the outcome
    """
    registration = registration or create_registration_system()

    cs201 = Course(course_code="CS201", title="Data Structures", credit_hours=3, prerequisites=["CS101"])

    student = Student.transfer("S001", "Aarav", {"CS101": "A"}, 3.8)
    student.email = "student@university.edu"

    professor = Professor(
        faculty_id="P001",
        department="Computer Science",
        qualifications=["PhD", "Industry Experience"],
    )

    enrollment = registration.enroll_student(student, cs201)
    lines = [
        f"Enrollment successful: {bool(enrollment)}",
        f"Prerequisites met: {student.academic_record.meets_prerequisites('CS201')}",
        f"Academic standing: {student.academic_standing}",
    ]
    if not enrollment:
        lines.append(f"Reason: {enrollment.error}")
    lines.append(
        f"Report: {registration.get_enrollment_report(student.student_id, professor).message}"
    )
    return lines


def main() -> None:
    """Run both demo scenarios and print their output."""
    parser = argparse.ArgumentParser(description="Run the hospital and university registry demos")
    parser.add_argument("--json-logs", action="store_true", help="Emit logs as JSON lines")
    args = parser.parse_args()

    setup_logging(use_json=args.json_logs or settings.log_json, log_level=settings.log_level)

    for line in run_hospital_demo():
        print(line)
    print()
    for line in run_university_demo():
        print(line)


if __name__ == "__main__":
    main()
