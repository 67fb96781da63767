"""Medical report views."""
from __future__ import annotations

from rest_framework.decorators import api_view

from records.models import MedicalReport
from records.serializers.medical_report import MedicalReportSerializer
from records.services.store import DocumentStore
from .documents import (
    DocumentResource,
    create_document,
    delete_document,
    list_documents,
    list_documents_for_patient,
    replace_document,
    retrieve_document,
)

MEDICAL_REPORTS = DocumentResource(
    store=DocumentStore(MedicalReport, MedicalReportSerializer, 'Medical report'),
    list_key='medicalReports',
    id_key='reportId',
    noun='medical report',
    plural='medical reports',
    echo_key='medicalReport',
)


@api_view(['GET', 'POST'])
def medical_reports(request):
    if request.method == 'GET':
        return list_documents(MEDICAL_REPORTS)
    return create_document(MEDICAL_REPORTS, request.data)


@api_view(['GET'])
def medical_reports_for_patient(request, patient_id: str):
    return list_documents_for_patient(MEDICAL_REPORTS, patient_id)


@api_view(['GET', 'PUT', 'DELETE'])
def medical_report_detail(request, pk: str):
    if request.method == 'GET':
        return retrieve_document(MEDICAL_REPORTS, pk)
    if request.method == 'PUT':
        return replace_document(MEDICAL_REPORTS, pk, request.data)
    return delete_document(MEDICAL_REPORTS, pk)
