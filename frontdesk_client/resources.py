"""
Typed access to the three record endpoints.

A :class:`Resource` describes where an entity lives on the server and
which keys its responses use; :class:`ResourceClient` turns each store
operation into one request and parses the answer into a result
dataclass instead of handing raw JSON to callers.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, List, Optional, Type, TypeVar
from urllib.parse import quote

from .errors import TransportFailure
from .models import InsuranceForm, MedicalReport, Patient, Record
from .transport import Transport

R = TypeVar("R", bound=Record)


@dataclass(frozen=True)
class Resource(Generic[R]):
    path: str
    record_type: Type[R]
    list_key: str
    id_key: str
    label: str
    echo_key: Optional[str] = None
    # business-id lookup route, patients only
    lookup_path: Optional[str] = None


PATIENTS = Resource(
    path="api/patients",
    record_type=Patient,
    list_key="patients",
    id_key="patientId",
    label="Patient",
    lookup_path="api/patients/id",
)
MEDICAL_REPORTS = Resource(
    path="api/medical-reports",
    record_type=MedicalReport,
    list_key="medicalReports",
    id_key="reportId",
    label="Medical report",
    echo_key="medicalReport",
)
INSURANCE_FORMS = Resource(
    path="api/insurance-forms",
    record_type=InsuranceForm,
    list_key="insuranceForms",
    id_key="formId",
    label="Insurance form",
    echo_key="insuranceForm",
)


@dataclass(frozen=True)
class ListResult(Generic[R]):
    message: str
    records: List[R]


@dataclass(frozen=True)
class CreateResult:
    message: str
    id: str


@dataclass(frozen=True)
class UpdateResult(Generic[R]):
    message: str
    # forms and reports echo what was stored
    record: Optional[R] = None


@dataclass(frozen=True)
class DeleteResult:
    message: str


def _quoted(value: str) -> str:
    return quote(str(value), safe="")


class ResourceClient(Generic[R]):
    def __init__(self, transport: Transport, resource: Resource[R]):
        self.transport = transport
        self.resource = resource

    def _detail_path(self, record_id: str) -> str:
        return f"{self.resource.path}/{_quoted(record_id)}"

    def _parse(self, doc: Any) -> R:
        if not isinstance(doc, dict):
            raise TransportFailure(f"Malformed {self.resource.label.lower()} document")
        return self.resource.record_type.from_document(doc)

    def _parse_list(self, body: dict) -> ListResult[R]:
        docs = body.get(self.resource.list_key)
        if not isinstance(docs, list):
            raise TransportFailure(f"Response is missing '{self.resource.list_key}'")
        return ListResult(message=body.get("message", ""), records=[self._parse(doc) for doc in docs])

    def list_all(self) -> ListResult[R]:
        return self._parse_list(self.transport.get(self.resource.path))

    def list_by_patient(self, patient_id: str) -> ListResult[R]:
        return self._parse_list(self.transport.get(f"{self.resource.path}/patient/{_quoted(patient_id)}"))

    def fetch(self, record_id: str) -> R:
        return self._parse(self.transport.get(self._detail_path(record_id)))

    def find_by_patient_id(self, patient_id: str) -> R:
        if not self.resource.lookup_path:
            raise TypeError(f"{self.resource.label} records have no business-id lookup")
        return self._parse(self.transport.get(f"{self.resource.lookup_path}/{_quoted(patient_id)}"))

    def create(self, record: R) -> CreateResult:
        body = self.transport.post(self.resource.path, record.to_payload())
        new_id = body.get(self.resource.id_key) if isinstance(body, dict) else None
        if not new_id:
            raise TransportFailure(f"Response is missing '{self.resource.id_key}'")
        return CreateResult(message=body.get("message", ""), id=str(new_id))

    def replace(self, record_id: str, record: R) -> UpdateResult[R]:
        body = self.transport.put(self._detail_path(record_id), record.to_payload())
        echoed = body.get(self.resource.echo_key) if self.resource.echo_key else None
        return UpdateResult(
            message=body.get("message", ""),
            record=self._parse(echoed) if echoed else None,
        )

    def delete(self, record_id: str) -> DeleteResult:
        body = self.transport.delete(self._detail_path(record_id))
        return DeleteResult(message=body.get("message", ""))
