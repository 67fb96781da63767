import random
import re
from dataclasses import dataclass
from datetime import date

import pytest

from frontdesk_client.config import ClientConfig
from frontdesk_client.models import InsuranceForm, MedicalReport, Patient, Record, camelize, generate_report_id

from .fakes import make_patient


def test_camelize():
    assert camelize("amount_paid_by_patient") == "amountPaidByPatient"
    assert camelize("name") == "name"


def test_from_document_maps_internal_id_and_dates():
    doc = {
        "_id": "65f1c2a9e4b0a1b2c3d4e5f6",
        "reportId": "M1001",
        "patientId": "P1001",
        "doctorName": "Dr. Emily Carter",
        "reportDate": "2024-03-01T00:00:00.000Z",
        "diagnosis": "Flu",
        "treatment": "Rest",
    }
    report = MedicalReport.from_document(doc)
    assert report.id == "65f1c2a9e4b0a1b2c3d4e5f6"
    assert report.report_date == date(2024, 3, 1)
    assert report.doctor_name == "Dr. Emily Carter"


def test_from_document_leaves_missing_fields_unset():
    patient = Patient.from_document({"name": "John Smith"})
    assert patient.id is None
    assert patient.date_of_birth is None
    assert patient.allergy is None


def test_to_payload_is_camel_case_without_id():
    patient = make_patient(id="65f1c2a9e4b0a1b2c3d4e5f6", allergy=None)
    payload = patient.to_payload()
    assert "_id" not in payload and "id" not in payload
    assert "allergy" not in payload
    assert payload["regId"] == "REG1001"
    assert payload["bloodGroup"] == "O+"
    assert payload["dateOfBirth"] == "1980-05-15"


def test_payload_round_trips_through_a_document():
    form = InsuranceForm(
        form_id="I1001", current_date=date(2024, 3, 1), patient_id="P1001", patient_name="John Smith",
        date_of_birth=date(1980, 5, 15), gender="Male", contact_number="5551234567",
        insurance_company="Medicare", policy_number="MCR123456789", total_charges=10.5,
        amount_paid_by_patient=2.0, additional_notes="",
    )
    doc = {**form.to_payload(), "_id": "abc"}
    assert InsuranceForm.from_document(doc) == form.with_id("abc")


def test_search_fields():
    report = MedicalReport(doctor_name="Dr. Raj Patel", patient_id="P1002")
    assert report.matches("raj")
    assert report.matches("p1002")
    assert not report.matches("carter")


def test_record_subclass_must_define_validate():
    @dataclass
    class Draft(Record):
        note: str = ""

    with pytest.raises(TypeError):
        Draft(note="unchecked")


def test_generate_report_id():
    value = generate_report_id(date(2024, 3, 1), random.Random(7))
    assert re.fullmatch(r"R-2024-0301-[0-9]{4}", value)
    assert re.fullmatch(r"R-[0-9]{4}-[0-9]{4}-[0-9]{4}", generate_report_id())


def test_client_config_from_env(monkeypatch, tmp_path):
    monkeypatch.setenv("FRONTDESK_API_URL", "http://frontdesk.local:8000/")
    monkeypatch.setenv("FRONTDESK_TIMEOUT", "none")
    monkeypatch.setenv("FRONTDESK_PLACEHOLDER_PREFIX", "tmp-")
    config = ClientConfig.from_env(tmp_path / ".env")
    assert config == ClientConfig(base_url="http://frontdesk.local:8000", timeout=None, placeholder_prefix="tmp-")


def test_client_config_reads_dotenv(monkeypatch, tmp_path):
    monkeypatch.delenv("FRONTDESK_API_URL", raising=False)
    monkeypatch.delenv("FRONTDESK_TIMEOUT", raising=False)
    env = tmp_path / ".env"
    env.write_text("FRONTDESK_API_URL=http://desk.example\nFRONTDESK_TIMEOUT=2.5\n")
    try:
        config = ClientConfig.from_env(env)
    finally:
        # load_dotenv writes into os.environ
        monkeypatch.delenv("FRONTDESK_API_URL", raising=False)
        monkeypatch.delenv("FRONTDESK_TIMEOUT", raising=False)
    assert config.base_url == "http://desk.example"
    assert config.timeout == 2.5
