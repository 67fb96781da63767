"""
Client-side record types.

Each entity is a dataclass with snake_case attributes.  On the wire the
same fields travel in camelCase, dates as ISO-8601 strings and the
internal id as ``_id``; :meth:`Record.from_document` and
:meth:`Record.to_payload` translate between the two.  Every field is
optional on the dataclass so that half-filled entries can exist;
:meth:`Record.validate` enforces what must be present before a record
is sent.
"""
from __future__ import annotations

import random
from abc import ABC, abstractmethod
from dataclasses import dataclass, fields, replace
from datetime import date, datetime
from typing import Any, ClassVar, Mapping, Optional, TypeVar

from . import validation

R = TypeVar("R", bound="Record")


def camelize(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def to_date(value: Any) -> Optional[date]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    # "1980-05-15" or "1980-05-15T00:00:00.000Z"
    return date.fromisoformat(str(value)[:10])


@dataclass
class Record(ABC):
    id: Optional[str] = None

    DATE_FIELDS: ClassVar[tuple[str, ...]] = ()
    SEARCH_FIELDS: ClassVar[tuple[str, ...]] = ()

    @classmethod
    def from_document(cls: type[R], doc: Mapping[str, Any]) -> R:
        values: dict[str, Any] = {}
        for f in fields(cls):
            if f.name == "id":
                values["id"] = doc.get("_id", doc.get("id"))
                continue
            raw = doc.get(camelize(f.name))
            values[f.name] = to_date(raw) if f.name in cls.DATE_FIELDS else raw
        return cls(**values)

    def to_payload(self) -> dict[str, Any]:
        """Wire body for create/update: camelCase, no internal id, no unset fields."""
        payload: dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if f.name == "id" or value is None:
                continue
            if isinstance(value, date):
                value = value.isoformat()
            payload[camelize(f.name)] = value
        return payload

    def with_id(self: R, record_id: Optional[str]) -> R:
        return replace(self, id=record_id)

    def matches(self, term: str) -> bool:
        needle = term.lower()
        return any(needle in str(getattr(self, name) or "").lower() for name in self.SEARCH_FIELDS)

    @abstractmethod
    def validate(self) -> None:
        """Raise ValidationFailure listing every problem with the record."""


@dataclass
class Patient(Record):
    reg_id: Optional[str] = None
    patient_id: Optional[str] = None
    name: Optional[str] = None
    age: Optional[int] = None
    gender: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    blood_group: Optional[str] = None
    date_of_birth: Optional[date] = None
    allergy: Optional[str] = None
    medical_history: Optional[str] = None
    insurance: Optional[str] = None

    DATE_FIELDS: ClassVar[tuple[str, ...]] = ("date_of_birth",)
    SEARCH_FIELDS: ClassVar[tuple[str, ...]] = ("name",)

    def validate(self) -> None:
        validation.check_patient(self)


@dataclass
class MedicalReport(Record):
    report_id: Optional[str] = None
    patient_id: Optional[str] = None
    doctor_name: Optional[str] = None
    report_date: Optional[date] = None
    diagnosis: Optional[str] = None
    treatment: Optional[str] = None

    DATE_FIELDS: ClassVar[tuple[str, ...]] = ("report_date",)
    SEARCH_FIELDS: ClassVar[tuple[str, ...]] = ("doctor_name", "patient_id")

    def validate(self) -> None:
        validation.check_medical_report(self)


@dataclass
class InsuranceForm(Record):
    form_id: Optional[str] = None
    current_date: Optional[date] = None
    patient_id: Optional[str] = None
    patient_name: Optional[str] = None
    date_of_birth: Optional[date] = None
    gender: Optional[str] = None
    contact_number: Optional[str] = None
    insurance_company: Optional[str] = None
    policy_number: Optional[str] = None
    total_charges: Optional[float] = None
    amount_paid_by_patient: Optional[float] = None
    additional_notes: Optional[str] = None

    DATE_FIELDS: ClassVar[tuple[str, ...]] = ("current_date", "date_of_birth")
    SEARCH_FIELDS: ClassVar[tuple[str, ...]] = ("patient_name", "policy_number", "insurance_company")

    def validate(self) -> None:
        validation.check_insurance_form(self)


def generate_report_id(today: Optional[date] = None, rng: Optional[random.Random] = None) -> str:
    """Free-text report reference, ``R-YYYY-MMDD-XXXX``.

    Not used when saving a report; entry uses the ``M1234`` format.
    """
    today = today or date.today()
    rng = rng or random.Random()
    return f"R-{today:%Y}-{today:%m%d}-{rng.randint(1000, 9999)}"
