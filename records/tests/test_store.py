import logging

import pytest

from records.exceptions import PersistenceFailure, RecordNotFound
from records.logging import RedactPHIFilter, redact
from records.models import MedicalReport, new_object_id
from records.serializers.medical_report import MedicalReportSerializer
from records.services.store import DocumentStore

pytestmark = pytest.mark.django_db


@pytest.fixture
def store():
    return DocumentStore(MedicalReport, MedicalReportSerializer, 'Medical report')


def report(**overrides):
    data = {
        'reportId': 'M1001',
        'patientId': 'P1001',
        'doctorName': 'Dr. Emily Carter',
        'reportDate': '2024-03-01',
        'diagnosis': 'Flu',
        'treatment': 'Rest',
    }
    data.update(overrides)
    return data


def test_insert_assigns_object_id(store):
    obj = store.insert(report())
    assert len(obj.pk) == 24
    int(obj.pk, 16)
    assert store.to_document(obj)['_id'] == obj.pk


def test_object_ids_sort_in_issue_order():
    ids = [new_object_id() for _ in range(50)]
    assert ids == sorted(ids)
    assert len(set(ids)) == 50


def test_find_all_keeps_insertion_order(store):
    inserted = [store.insert(report(reportId=f'M10{i:02d}')).pk for i in range(5)]
    assert [o.pk for o in store.find_all()] == inserted


def test_find_by_internal_id_missing(store):
    with pytest.raises(RecordNotFound) as exc:
        store.find_by_internal_id('nope')
    assert exc.value.message == 'Medical report not found!'


def test_find_by_external_id_returns_first_match(store):
    first = store.insert(report())
    store.insert(report(doctorName='Dr. Raj Patel'))
    assert store.find_by_external_id('report_id', 'M1001').pk == first.pk
    assert len(store.filter_by_external_id('patient_id', 'P1001')) == 2
    assert store.filter_by_external_id('patient_id', 'P2000') == []
    with pytest.raises(RecordNotFound):
        store.find_by_external_id('report_id', 'M9999')


def test_insert_rejects_missing_fields(store):
    with pytest.raises(PersistenceFailure) as exc:
        store.insert(report(doctorName=None))
    assert 'doctorName' in exc.value.errors
    assert MedicalReport.objects.count() == 0


def test_replace_checks_existence_before_validation(store):
    with pytest.raises(RecordNotFound):
        store.replace('missing', {})


def test_replace_overwrites_all_fields(store):
    obj = store.insert(report())
    updated = store.replace(obj.pk, report(treatment='Antivirals', reportDate='2024-04-02'))
    assert updated.pk == obj.pk
    stored = MedicalReport.objects.get(pk=obj.pk)
    assert stored.treatment == 'Antivirals'
    assert stored.report_date.isoformat() == '2024-04-02'
    assert MedicalReport.objects.count() == 1


def test_delete_by_internal_id(store):
    obj = store.insert(report())
    store.delete_by_internal_id(obj.pk)
    assert not MedicalReport.objects.exists()
    with pytest.raises(RecordNotFound):
        store.delete_by_internal_id(obj.pk)


def test_redact_masks_contact_fields():
    payload = {'name': 'John', 'phone': '555', 'nested': [{'email': 'a@b.c'}], 'address': ''}
    assert redact(payload) == {'name': 'John', 'phone': '***', 'nested': [{'email': '***'}], 'address': ''}


def test_redact_filter_rewrites_log_args():
    record = logging.LogRecord('records', logging.INFO, __file__, 1, 'payload %s', ({'phone': '555'},), None)
    assert RedactPHIFilter().filter(record) is True
    assert record.getMessage() == "payload {'phone': '***'}"
