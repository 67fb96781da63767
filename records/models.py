"""
Database models for the front-desk records backend.

Each model stores one document type: patients, medical reports and
insurance forms.  Documents are independent of each other; the
``patient_id`` fields carry the patient's business id as plain text and
are not foreign keys.  Primary keys are opaque 24 character hex strings
assigned on first insert, in the style of a document database object id.
"""
from __future__ import annotations

import itertools
import secrets
import time

from django.db import models

# per-process random part and counter, as in a document database object id
_PROCESS_UNIQUE = secrets.token_bytes(5)
_counter = itertools.count(secrets.randbelow(0x7FFFFF))


def new_object_id() -> str:
    """Return a fresh internal id for a document.

    Seconds since the epoch, a per-process random part and a counter, so
    ids issued by one process sort in issue order.
    """
    count = next(_counter) & 0xFFFFFF
    raw = int(time.time()).to_bytes(4, 'big') + _PROCESS_UNIQUE + count.to_bytes(3, 'big')
    return raw.hex()


class Document(models.Model):
    """Common base for stored documents.

    ``created_at`` keeps insertion order, which is the order every
    listing endpoint returns.
    """
    id = models.CharField(max_length=24, primary_key=True, default=new_object_id, editable=False)
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)

    class Meta:
        abstract = True
        ordering = ('created_at', 'id')


class Patient(Document):
    """A registered patient.

    ``reg_id`` (``REG1234``) and ``patient_id`` (``P1234``) are entered at
    the front desk; neither is unique at the store level.
    """
    reg_id = models.CharField(max_length=16)
    patient_id = models.CharField(max_length=16, db_index=True)
    name = models.CharField(max_length=255)
    age = models.PositiveIntegerField()
    gender = models.CharField(max_length=20)
    phone = models.CharField(max_length=32)
    email = models.CharField(max_length=255)
    address = models.CharField(max_length=500)
    blood_group = models.CharField(max_length=5)
    date_of_birth = models.DateField()
    allergy = models.TextField(blank=True, default='')
    medical_history = models.TextField(blank=True, default='')
    insurance = models.CharField(max_length=255, blank=True, default='')

    class Meta(Document.Meta):
        db_table = 'records_patient'

    def __str__(self) -> str:
        return f"{self.name} ({self.patient_id})"


class MedicalReport(Document):
    report_id = models.CharField(max_length=32)
    # Patient business id (P1234), not a foreign key
    patient_id = models.CharField(max_length=16, db_index=True)
    doctor_name = models.CharField(max_length=255)
    report_date = models.DateField()
    diagnosis = models.TextField()
    treatment = models.TextField()

    class Meta(Document.Meta):
        db_table = 'records_medical_report'

    def __str__(self) -> str:
        return f"{self.report_id} for {self.patient_id}"


class InsuranceForm(Document):
    """An insurance claim form filled at the front desk."""
    form_id = models.CharField(max_length=16)
    current_date = models.DateField()
    # Patient information
    patient_id = models.CharField(max_length=16, db_index=True)
    patient_name = models.CharField(max_length=255)
    date_of_birth = models.DateField()
    gender = models.CharField(max_length=20)
    contact_number = models.CharField(max_length=32)
    # Insurance information
    insurance_company = models.CharField(max_length=255)
    policy_number = models.CharField(max_length=32)
    # Billing information
    total_charges = models.FloatField()
    amount_paid_by_patient = models.FloatField()
    additional_notes = models.TextField(blank=True, default='')

    class Meta(Document.Meta):
        db_table = 'records_insurance_form'

    def __str__(self) -> str:
        return f"{self.form_id} ({self.policy_number})"
