"""
Client-side checks run before a record is sent to the server.

Business ids follow fixed formats (``REG1234``, ``P1234``, ``M1234``,
``I1234``).  The server does not check them; a record that fails here
never reaches the network.  Every problem with a record is collected
and raised together as one :class:`ValidationFailure`.
"""
from __future__ import annotations

import re
from typing import Any, Callable, Iterable, List

from .errors import ValidationFailure

REG_ID = re.compile(r"REG[0-9]{4}")
PATIENT_ID = re.compile(r"P[0-9]{4}")
REPORT_ID = re.compile(r"M[0-9]{4}")
FORM_ID = re.compile(r"I[0-9]{4}")
POLICY_NUMBER = re.compile(r"[A-Za-z0-9]{12}")
CONTACT_NUMBER = re.compile(r"[0-9]{10,11}")

MAX_AGE = 150


def is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def matches(pattern: re.Pattern, value: Any) -> bool:
    return isinstance(value, str) and pattern.fullmatch(value) is not None


class Checker:
    """Collects messages for one record."""

    def __init__(self, record: Any):
        self.record = record
        self.messages: List[str] = []

    def required(self, fields: Iterable[tuple[str, str]]) -> None:
        for attr, message in fields:
            if is_blank(getattr(self.record, attr, None)):
                self.messages.append(message)

    def pattern(self, attr: str, pattern: re.Pattern, message: str) -> None:
        value = getattr(self.record, attr, None)
        # a missing value is reported by required()
        if not is_blank(value) and not matches(pattern, value):
            self.messages.append(message)

    def check(self, test: Callable[[Any], bool], message: str) -> None:
        if not test(self.record):
            self.messages.append(message)

    def raise_if_failed(self) -> None:
        if self.messages:
            raise ValidationFailure(self.messages)


def _non_negative(value: Any) -> bool:
    return value is None or (isinstance(value, (int, float)) and not isinstance(value, bool) and value >= 0)


def _valid_age(value: Any) -> bool:
    return _non_negative(value) and (value is None or value <= MAX_AGE)


def check_patient(patient) -> None:
    checker = Checker(patient)
    checker.required([
        ("reg_id", "Please enter Registration ID"),
        ("patient_id", "Please enter Patient ID"),
        ("name", "Please enter patient name"),
        ("age", "Please enter patient age"),
        ("gender", "Please select patient gender"),
        ("phone", "Please enter phone number"),
        ("email", "Please enter email address"),
        ("address", "Please enter patient address"),
        ("blood_group", "Please select blood group"),
        ("date_of_birth", "Please enter date of birth"),
    ])
    checker.pattern(
        "reg_id", REG_ID,
        "Registration ID must follow the format 'REG' followed by 4 numbers (e.g., REG1234)",
    )
    checker.pattern(
        "patient_id", PATIENT_ID,
        "Patient ID must follow the format 'P' followed by 4 numbers (e.g., P1234)",
    )
    checker.check(lambda p: _valid_age(p.age), f"Patient age must be between 0 and {MAX_AGE}")
    checker.raise_if_failed()


def check_medical_report(report) -> None:
    checker = Checker(report)
    checker.required([
        ("report_id", "Please enter Report ID"),
        ("patient_id", "Please enter Patient ID"),
        ("doctor_name", "Please enter doctor name"),
        ("report_date", "Please enter report date"),
        ("diagnosis", "Please enter diagnosis"),
        ("treatment", "Please enter treatment"),
    ])
    checker.pattern("report_id", REPORT_ID, "Report ID must follow the format 'M' followed by 4 numbers (e.g., M1234)")
    checker.pattern("patient_id", PATIENT_ID, "Patient ID must follow the format 'P' followed by 4 numbers (e.g., P1234)")
    checker.raise_if_failed()


def check_insurance_form(form) -> None:
    checker = Checker(form)
    checker.required([
        ("form_id", "Please enter Form ID"),
        ("current_date", "Please enter the current date"),
        ("patient_id", "Please enter Patient ID"),
        ("patient_name", "Please enter patient name"),
        ("date_of_birth", "Please enter date of birth"),
        ("gender", "Please select patient gender"),
        ("contact_number", "Please enter contact number"),
        ("insurance_company", "Please enter insurance company"),
        ("policy_number", "Please enter policy number"),
        ("total_charges", "Please enter total charges"),
        ("amount_paid_by_patient", "Please enter amount paid by patient"),
    ])
    checker.pattern("form_id", FORM_ID, "Form ID must follow the format 'I' followed by 4 numbers (e.g., I1234)")
    checker.pattern("patient_id", PATIENT_ID, "Patient ID must follow the format 'P' followed by 4 numbers (e.g., P1234)")
    checker.pattern("contact_number", CONTACT_NUMBER, "Contact number must be 10 or 11 digits")
    checker.pattern("policy_number", POLICY_NUMBER, "Policy number must be 12 letters or digits")
    checker.check(lambda f: _non_negative(f.total_charges), "Total charges must not be negative")
    checker.check(lambda f: _non_negative(f.amount_paid_by_patient), "Amount paid by patient must not be negative")
    checker.raise_if_failed()
