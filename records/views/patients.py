"""
Patient registration views.

Patients are addressed by their internal id for read, update and
delete, and by their ``patientId`` business id for the front desk's
lookup (``/api/patients/id/<patientId>``).
"""
from __future__ import annotations

import logging

from django.db import DatabaseError
from rest_framework.decorators import api_view
from rest_framework.response import Response

from records.exceptions import RecordNotFound
from records.models import Patient
from records.serializers.patient import PatientSerializer
from records.services.store import DocumentStore
from .documents import (
    DocumentResource,
    create_document,
    delete_document,
    list_documents,
    list_documents_for_patient,
    not_found,
    replace_document,
    retrieve_document,
)

logger = logging.getLogger(__name__)

PATIENTS = DocumentResource(
    store=DocumentStore(Patient, PatientSerializer, 'Patient'),
    list_key='patients',
    id_key='patientId',
    noun='patient',
    plural='patients',
    create_noun='a patient',
)


@api_view(['GET', 'POST'])
def patients(request):
    if request.method == 'GET':
        return list_documents(PATIENTS)
    return create_document(PATIENTS, request.data)


@api_view(['GET', 'PUT', 'DELETE'])
def patient_detail(request, pk: str):
    if request.method == 'GET':
        return retrieve_document(PATIENTS, pk)
    if request.method == 'PUT':
        return replace_document(PATIENTS, pk, request.data)
    return delete_document(PATIENTS, pk)


@api_view(['GET'])
def patient_by_patient_id(request, patient_id: str):
    """Look a patient up by business id rather than internal id."""
    try:
        obj = PATIENTS.store.find_by_external_id('patient_id', patient_id)
    except RecordNotFound as exc:
        return not_found(exc)
    except DatabaseError:
        logger.exception('Fetching patient %s failed', patient_id)
        return PATIENTS.failed('Fetching')
    return Response(PATIENTS.store.to_document(obj))


@api_view(['GET'])
def patients_for_patient(request, patient_id: str):
    return list_documents_for_patient(PATIENTS, patient_id)
