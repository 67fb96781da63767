import pytest
import requests

from frontdesk_client.errors import NotFound, TransportFailure
from frontdesk_client.resources import MEDICAL_REPORTS, ResourceClient
from frontdesk_client.transport import Transport


class FakeResponse:
    def __init__(self, status_code, body=None):
        self.status_code = status_code
        self.body = body

    def json(self):
        if self.body is None:
            raise ValueError("no JSON")
        return self.body


class FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.requests = []

    def request(self, method, url, json=None, timeout=None):
        self.requests.append((method, url, json, timeout))
        if self.error:
            raise self.error
        return self.response

    def close(self):
        pass


def transport(session):
    return Transport("http://desk.example/", timeout=3.0, session=session)


def test_request_sends_json_with_timeout():
    session = FakeSession(FakeResponse(201, {"message": "ok", "reportId": "abc"}))
    body = transport(session).post("/api/medical-reports", {"reportId": "M1001"})
    assert body["reportId"] == "abc"
    assert session.requests == [("POST", "http://desk.example/api/medical-reports", {"reportId": "M1001"}, 3.0)]


def test_404_raises_not_found_with_server_message():
    session = FakeSession(FakeResponse(404, {"message": "Medical report not found!"}))
    with pytest.raises(NotFound) as exc:
        transport(session).get("api/medical-reports/x")
    assert str(exc.value) == "Medical report not found!"
    assert exc.value.status_code == 404


def test_error_status_raises_transport_failure():
    session = FakeSession(FakeResponse(500, {"message": "Creating medical report failed!"}))
    with pytest.raises(TransportFailure) as exc:
        transport(session).post("api/medical-reports", {})
    assert exc.value.status_code == 500
    assert str(exc.value) == "Creating medical report failed!"


def test_connection_error_raises_transport_failure():
    session = FakeSession(error=requests.ConnectionError("refused"))
    with pytest.raises(TransportFailure) as exc:
        transport(session).get("api/medical-reports")
    assert not isinstance(exc.value, NotFound)
    assert exc.value.status_code is None


def test_non_json_body_raises_transport_failure():
    session = FakeSession(FakeResponse(200))
    with pytest.raises(TransportFailure):
        transport(session).get("api/medical-reports")


def test_resource_client_parses_list_and_echo():
    doc = {
        "_id": "abc", "reportId": "M1001", "patientId": "P1001", "doctorName": "Dr. Raj Patel",
        "reportDate": "2024-03-01", "diagnosis": "Flu", "treatment": "Rest",
    }
    session = FakeSession(FakeResponse(200, {"message": "Medical reports fetched successfully!", "medicalReports": [doc]}))
    client = ResourceClient(transport(session), MEDICAL_REPORTS)
    result = client.list_all()
    assert result.message == "Medical reports fetched successfully!"
    assert [r.id for r in result.records] == ["abc"]

    session.response = FakeResponse(200, {"message": "Update successful!", "medicalReport": doc})
    updated = client.replace("abc", result.records[0])
    assert updated.record.doctor_name == "Dr. Raj Patel"
    method, url, payload, _ = session.requests[-1]
    assert (method, url) == ("PUT", "http://desk.example/api/medical-reports/abc")
    assert "_id" not in payload


def test_resource_client_rejects_malformed_list():
    session = FakeSession(FakeResponse(200, {"message": "ok"}))
    with pytest.raises(TransportFailure):
        ResourceClient(transport(session), MEDICAL_REPORTS).list_all()


def test_create_without_id_in_response_fails():
    session = FakeSession(FakeResponse(201, {"message": "Medical report added successfully"}))
    client = ResourceClient(transport(session), MEDICAL_REPORTS)
    with pytest.raises(TransportFailure):
        client.create(client.resource.record_type(report_id="M1001"))


def test_business_id_lookup_is_patients_only():
    client = ResourceClient(transport(FakeSession()), MEDICAL_REPORTS)
    with pytest.raises(TypeError):
        client.find_by_patient_id("P1001")
