"""
Insurance form views.

Updates echo the stored form back under ``insuranceForm`` so the
client can show what was saved.
"""
from __future__ import annotations

from rest_framework.decorators import api_view

from records.models import InsuranceForm
from records.serializers.insurance_form import InsuranceFormSerializer
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

INSURANCE_FORMS = DocumentResource(
    store=DocumentStore(InsuranceForm, InsuranceFormSerializer, 'Insurance form'),
    list_key='insuranceForms',
    id_key='formId',
    noun='insurance form',
    plural='insurance forms',
    echo_key='insuranceForm',
)


@api_view(['GET', 'POST'])
def insurance_forms(request):
    if request.method == 'GET':
        return list_documents(INSURANCE_FORMS)
    return create_document(INSURANCE_FORMS, request.data)


@api_view(['GET'])
def insurance_forms_for_patient(request, patient_id: str):
    return list_documents_for_patient(INSURANCE_FORMS, patient_id)


@api_view(['GET', 'PUT', 'DELETE'])
def insurance_form_detail(request, pk: str):
    if request.method == 'GET':
        return retrieve_document(INSURANCE_FORMS, pk)
    if request.method == 'PUT':
        return replace_document(INSURANCE_FORMS, pk, request.data)
    return delete_document(INSURANCE_FORMS, pk)
