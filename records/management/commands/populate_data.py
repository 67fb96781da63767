"""
Management command to populate the database with example records.
"""
from datetime import date

from django.core.management.base import BaseCommand
from django.db import transaction

from records.views.insurance_forms import INSURANCE_FORMS
from records.views.medical_reports import MEDICAL_REPORTS
from records.views.patients import PATIENTS

EXAMPLE_PATIENTS = [
    {
        'regId': 'REG1001', 'patientId': 'P1001', 'name': 'John Smith', 'age': 45, 'gender': 'Male',
        'phone': '555-123-4567', 'email': 'john.smith@example.com', 'address': '123 Main St, Anytown',
        'bloodGroup': 'O+', 'dateOfBirth': '1980-05-15', 'allergy': 'Penicillin',
        'medicalHistory': 'Hypertension', 'insurance': 'Medicare',
    },
    {
        'regId': 'REG1002', 'patientId': 'P1002', 'name': 'Sarah Johnson', 'age': 32, 'gender': 'Female',
        'phone': '555-987-6543', 'email': 'sarah.j@example.com', 'address': '456 Oak Ave, Sometown',
        'bloodGroup': 'A+', 'dateOfBirth': '1993-08-22', 'allergy': 'None',
        'medicalHistory': 'Asthma', 'insurance': 'Blue Cross',
    },
    {
        'regId': 'REG1003', 'patientId': 'P1003', 'name': 'Michael Brown', 'age': 58, 'gender': 'Male',
        'phone': '555-456-7890', 'email': 'michael.b@example.com', 'address': '789 Pine St, Othertown',
        'bloodGroup': 'AB-', 'dateOfBirth': '1967-11-03', 'allergy': 'Sulfa drugs',
        'medicalHistory': 'Diabetes Type 2', 'insurance': 'Aetna',
    },
]

EXAMPLE_REPORTS = [
    {
        'reportId': 'M1001', 'patientId': 'P1001', 'doctorName': 'Dr. Emily Carter',
        'diagnosis': 'Stage 1 hypertension', 'treatment': 'Lisinopril 10mg daily, low sodium diet',
    },
    {
        'reportId': 'M1002', 'patientId': 'P1002', 'doctorName': 'Dr. Raj Patel',
        'diagnosis': 'Mild persistent asthma', 'treatment': 'Inhaled corticosteroid twice daily',
    },
]

EXAMPLE_FORMS = [
    {
        'formId': 'I1001', 'patientId': 'P1001', 'patientName': 'John Smith', 'dateOfBirth': '1980-05-15',
        'gender': 'Male', 'contactNumber': '5551234567', 'insuranceCompany': 'Medicare',
        'policyNumber': 'MCR123456789', 'totalCharges': 1250.0, 'amountPaidByPatient': 250.0,
        'additionalNotes': 'Follow-up visit in three months',
    },
]


class Command(BaseCommand):
    help = 'Populate database with example patients, medical reports and insurance forms'

    def add_arguments(self, parser):
        parser.add_argument('--flush', action='store_true', help='Delete existing records first')

    def handle(self, *args, **options):
        today = date.today().isoformat()
        batches = [
            (PATIENTS, 'patient_id', 'patientId', EXAMPLE_PATIENTS),
            (MEDICAL_REPORTS, 'report_id', 'reportId', [{**p, 'reportDate': today} for p in EXAMPLE_REPORTS]),
            (INSURANCE_FORMS, 'form_id', 'formId', [{**p, 'currentDate': today} for p in EXAMPLE_FORMS]),
        ]
        created = 0
        with transaction.atomic():
            for resource, field, key, payloads in batches:
                if options['flush']:
                    resource.store.model.objects.all().delete()
                for payload in payloads:
                    # Business ids are not unique in the store; skip ones already seeded
                    if resource.store.filter_by_external_id(field, payload[key]):
                        continue
                    resource.store.insert(payload)
                    created += 1
        self.stdout.write(self.style.SUCCESS(f'Created {created} example records'))
