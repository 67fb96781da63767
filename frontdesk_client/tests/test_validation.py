from datetime import date

import pytest

from frontdesk_client.errors import ValidationFailure
from frontdesk_client.models import InsuranceForm, MedicalReport

from .fakes import make_patient


def make_form(**overrides):
    values = dict(
        form_id="I1001",
        current_date=date(2024, 3, 1),
        patient_id="P1001",
        patient_name="John Smith",
        date_of_birth=date(1980, 5, 15),
        gender="Male",
        contact_number="5551234567",
        insurance_company="Medicare",
        policy_number="MCR123456789",
        total_charges=1250.0,
        amount_paid_by_patient=250.0,
    )
    values.update(overrides)
    return InsuranceForm(**values)


@pytest.mark.parametrize("reg_id, ok", [
    ("REG1234", True),
    ("REG12", False),
    ("REG12345", False),
    ("reg1234", False),
    ("XREG1234", False),
])
def test_registration_id_format(reg_id, ok):
    patient = make_patient(reg_id=reg_id)
    if ok:
        patient.validate()
    else:
        with pytest.raises(ValidationFailure):
            patient.validate()


@pytest.mark.parametrize("patient_id, ok", [
    ("P1234", True),
    ("P12345", False),
    ("P123", False),
    ("p1234", False),
])
def test_patient_id_format(patient_id, ok):
    patient = make_patient(patient_id=patient_id)
    if ok:
        patient.validate()
    else:
        with pytest.raises(ValidationFailure):
            patient.validate()


@pytest.mark.parametrize("policy_number, ok", [
    ("MCR123456789", True),
    ("abcdEFGH1234", True),
    ("MCR12345678", False),
    ("MCR1234567890", False),
    ("MCR-23456789", False),
])
def test_policy_number_is_twelve_alphanumerics(policy_number, ok):
    form = make_form(policy_number=policy_number)
    if ok:
        form.validate()
    else:
        with pytest.raises(ValidationFailure):
            form.validate()


@pytest.mark.parametrize("contact_number, ok", [
    ("5551234567", True),
    ("05551234567", True),
    ("555123456", False),
    ("555-123-4567", False),
])
def test_contact_number_digits(contact_number, ok):
    form = make_form(contact_number=contact_number)
    if ok:
        form.validate()
    else:
        with pytest.raises(ValidationFailure):
            form.validate()


def test_all_messages_are_collected():
    with pytest.raises(ValidationFailure) as exc:
        make_patient(name="", email=None, reg_id="REG1").validate()
    assert exc.value.messages == [
        "Please enter patient name",
        "Please enter email address",
        "Registration ID must follow the format 'REG' followed by 4 numbers (e.g., REG1234)",
    ]


def test_missing_id_is_reported_once():
    with pytest.raises(ValidationFailure) as exc:
        make_patient(patient_id=None).validate()
    assert exc.value.messages == ["Please enter Patient ID"]


def test_optional_fields_may_be_left_out():
    make_patient(allergy=None, medical_history=None, insurance=None).validate()
    make_form(additional_notes=None).validate()


def test_medical_report_ids():
    report = MedicalReport(
        report_id="M1001",
        patient_id="P1001",
        doctor_name="Dr. Emily Carter",
        report_date=date(2024, 3, 1),
        diagnosis="Flu",
        treatment="Rest",
    )
    report.validate()
    with pytest.raises(ValidationFailure) as exc:
        MedicalReport(**{**vars(report), "report_id": "R-2024-0301-1234"}).validate()
    assert exc.value.messages == ["Report ID must follow the format 'M' followed by 4 numbers (e.g., M1234)"]


def test_negative_amounts_rejected():
    with pytest.raises(ValidationFailure) as exc:
        make_form(total_charges=-1.0).validate()
    assert exc.value.messages == ["Total charges must not be negative"]


@pytest.mark.parametrize("age, ok", [(0, True), (150, True), (151, False), (-1, False)])
def test_patient_age_range(age, ok):
    patient = make_patient(age=age)
    if ok:
        patient.validate()
    else:
        with pytest.raises(ValidationFailure) as exc:
            patient.validate()
        assert exc.value.messages == ["Patient age must be between 0 and 150"]
