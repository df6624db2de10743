"""Tests for hospital domain models.

These tests verify required-field enforcement, copy-on-read accessors and
the allergy predicate of the hospital records, patients and staff roles.
"""

from datetime import date, timedelta

import pytest
from pydantic import ValidationError

from src.domain.hospital import (
    Administrator,
    Doctor,
    MedicalRecord,
    Nurse,
    Patient,
    is_staff_member,
)


def make_record(**overrides) -> MedicalRecord:
    data = dict(
        record_id="MR001",
        patient_dna="DNA123",
        allergies=["Penicillin"],
        medical_history=["Surgery 2020"],
        birth_date=date(1990, 5, 15),
        blood_type="O+",
    )
    data.update(overrides)
    return MedicalRecord(**data)


class TestMedicalRecord:
    """Test suite for MedicalRecord model."""

    def test_valid_record(self):
        """Test creating a record with all required fields."""
        record = make_record()
        assert record.record_id == "MR001"
        assert record.patient_dna == "DNA123"
        assert record.birth_date == date(1990, 5, 15)
        assert record.blood_type == "O+"
        assert record.get_allergies() == ["Penicillin"]
        assert record.get_medical_history() == ["Surgery 2020"]

    @pytest.mark.parametrize("field", ["record_id", "patient_dna", "birth_date", "blood_type"])
    def test_required_field_none_rejected(self, field):
        """Test that a None required field aborts construction."""
        with pytest.raises(ValidationError):
            make_record(**{field: None})

    @pytest.mark.parametrize("field", ["record_id", "patient_dna", "birth_date", "blood_type"])
    def test_required_field_missing_rejected(self, field):
        """Test that an omitted required field aborts construction."""
        data = dict(
            record_id="MR001",
            patient_dna="DNA123",
            birth_date=date(1990, 5, 15),
            blood_type="O+",
        )
        del data[field]
        with pytest.raises(ValidationError):
            MedicalRecord(**data)

    def test_validation_error_is_value_error(self):
        """Construction failures surface as ValueError subclasses."""
        with pytest.raises(ValueError):
            make_record(blood_type=None)

    @pytest.mark.parametrize("field", ["record_id", "patient_dna", "blood_type"])
    def test_empty_strings_accepted(self, field):
        """Only a missing value fails construction; empty strings are stored as given."""
        assert getattr(make_record(**{field: ""}), field) == ""

    def test_whitespace_values_kept_verbatim(self):
        record = make_record(record_id="  ", blood_type=" O+ ")
        assert record.record_id == "  "
        assert record.blood_type == " O+ "

    def test_future_birth_date_accepted(self):
        tomorrow = date.today() + timedelta(days=1)
        assert make_record(birth_date=tomorrow).birth_date == tomorrow

    def test_optional_collections_default_empty(self):
        """Test that omitted or None collections become empty."""
        record = make_record(allergies=None, medical_history=None)
        assert record.get_allergies() == []
        assert record.get_medical_history() == []

    def test_accessors_return_independent_copies(self):
        """Mutating a returned list must not change the record."""
        record = make_record()
        allergies = record.get_allergies()
        allergies.append("Latex")
        history = record.get_medical_history()
        history.clear()

        assert record.get_allergies() == ["Penicillin"]
        assert record.get_medical_history() == ["Surgery 2020"]

    def test_constructor_copies_input_lists(self):
        """Mutating the caller's list after construction must not change the record."""
        allergies = ["Penicillin"]
        record = make_record(allergies=allergies)
        allergies.append("Latex")
        assert record.get_allergies() == ["Penicillin"]

    def test_immutable_record(self):
        """Test that records cannot be reassigned."""
        record = make_record()
        with pytest.raises(ValidationError):
            record.blood_type = "A-"

    @pytest.mark.parametrize("substance", ["Penicillin", "penicillin", "PENICILLIN", "pEnIcIlLiN"])
    def test_is_allergic_to_case_insensitive(self, substance):
        assert make_record().is_allergic_to(substance) is True

    def test_is_allergic_to_unknown_substance(self):
        record = make_record()
        assert record.is_allergic_to("Latex") is False
        assert record.is_allergic_to("Penicil") is False
        assert record.is_allergic_to(None) is False

    def test_no_allergies(self):
        assert make_record(allergies=None).is_allergic_to("Penicillin") is False


class TestPatient:
    """Test suite for Patient model."""

    def test_patient_construction(self):
        record = make_record()
        patient = Patient(
            patient_id="P001",
            name="John Doe",
            emergency_contact="Jane Doe",
            insurance_info="INS123",
            medical_record=record,
        )
        assert patient.patient_id == "P001"
        assert patient.medical_record is record
        assert patient.room_number == 0
        assert patient.attending_physician is None

    def test_mutable_fields(self):
        """Room and physician are set after construction."""
        patient = Patient(patient_id="P001", name="John Doe", medical_record=make_record())
        patient.room_number = 101
        patient.attending_physician = "Dr. House"
        patient.name = "John Q. Doe"

        assert patient.room_number == 101
        assert patient.attending_physician == "Dr. House"
        assert patient.name == "John Q. Doe"

    def test_identity_is_fixed(self):
        """Patient id and record cannot be reassigned."""
        patient = Patient(patient_id="P001", name="John Doe", medical_record=make_record())
        with pytest.raises(ValidationError):
            patient.patient_id = "P002"
        with pytest.raises(ValidationError):
            patient.medical_record = make_record(record_id="MR002")

    def test_any_room_number_accepted(self):
        patient = Patient(patient_id="P001", medical_record=make_record())
        patient.room_number = -1
        assert patient.room_number == -1

    def test_room_number_must_be_an_int(self):
        patient = Patient(patient_id="P001", medical_record=make_record())
        with pytest.raises(ValidationError):
            patient.room_number = "upstairs"

    def test_empty_patient_id_accepted(self):
        assert Patient(patient_id="", medical_record=make_record()).patient_id == ""

    def test_basic_and_public_info(self):
        patient = Patient(patient_id="P001", name="John Doe", medical_record=make_record())
        patient.room_number = 101

        assert patient.basic_info() == "Patient ID: P001, Name: John Doe, Room: 101, Doctor: None"
        assert patient.public_info() == "Name: John Doe, Room: 101"

        patient.attending_physician = "DOC001"
        assert patient.basic_info().endswith("Doctor: DOC001")

    def test_temporary_patient(self):
        """Walk-in patients get a TEMP id and a placeholder record."""
        patient = Patient.temporary("Unknown Walk-in")

        assert patient.patient_id.startswith("TEMP-")
        assert patient.patient_id[len("TEMP-"):].isdigit()
        assert patient.name == "Unknown Walk-in"
        assert patient.medical_record.record_id == "TEMP-MR"
        assert patient.medical_record.patient_dna == "UNKNOWN"
        assert patient.medical_record.blood_type == "UNKNOWN"
        assert patient.medical_record.birth_date <= date.today()
        assert patient.medical_record.get_allergies() == []


class TestStaffRoles:
    """Test suite for Doctor, Nurse and Administrator."""

    def test_doctor(self):
        certifications = {"Board Certified"}
        doctor = Doctor(license_number="DOC001", specialty="Cardiology", certifications=certifications)
        certifications.add("ACLS")

        assert doctor.staff_id == "DOC001"
        assert doctor.get_certifications() == {"Board Certified"}

        copy = doctor.get_certifications()
        copy.add("PALS")
        assert doctor.get_certifications() == {"Board Certified"}

    def test_nurse(self):
        nurse = Nurse(nurse_id="N001", shift="Day", qualifications=["RN", "CPR"])
        assert nurse.staff_id == "N001"
        assert nurse.shift == "Day"

        qualifications = nurse.get_qualifications()
        qualifications.append("BLS")
        assert nurse.get_qualifications() == ["RN", "CPR"]

    def test_administrator_permissions_copy_on_read(self):
        admin = Administrator(admin_id="A001", access_permissions=["billing", "records"])
        assert admin.staff_id == "A001"

        permissions = admin.get_access_permissions()
        permissions.append("everything")
        assert admin.get_access_permissions() == ["billing", "records"]

    def test_roles_are_immutable(self):
        nurse = Nurse(nurse_id="N001", shift="Day")
        with pytest.raises(ValidationError):
            nurse.shift = "Night"

    def test_is_staff_member(self):
        assert is_staff_member(Doctor(license_number="D1", specialty="ER"))
        assert is_staff_member(Nurse(nurse_id="N1", shift="Night"))
        assert is_staff_member(Administrator(admin_id="A1"))
        assert not is_staff_member("not-a-staff-object")
        assert not is_staff_member(None)
        assert not is_staff_member(Patient(patient_id="P001", medical_record=make_record()))
