"""
Shared request handling for the document endpoints.

Every entity exposes the same six routes.  The helpers below perform
the single store operation behind each route and translate its outcome
into the ``{message, ...}`` response shape the front desk expects.
Missing documents answer 404; store failures answer 500 with a generic
per-operation message and the cause goes to the log only.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from django.db import DatabaseError
from rest_framework import status
from rest_framework.response import Response

from records.exceptions import PersistenceFailure, RecordNotFound
from records.services.events import notify_changed
from records.services.store import DocumentStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DocumentResource:
    store: DocumentStore
    # 'patients', used for the list key and change events
    list_key: str
    # key carrying the new internal id in the create response
    id_key: str
    # singular and plural nouns for messages: 'patient', 'patients'
    noun: str
    plural: str
    # key echoing the stored document after an update, if any
    echo_key: Optional[str] = None
    # noun in the create failure message when it differs: 'a patient'
    create_noun: Optional[str] = None

    @property
    def label(self) -> str:
        return self.store.label

    def failed(self, verb: str, plural: bool = False, noun: Optional[str] = None) -> Response:
        noun = noun or (self.plural if plural else self.noun)
        return Response({'message': f'{verb} {noun} failed!'}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)


def not_found(exc: RecordNotFound) -> Response:
    return Response({'message': exc.message}, status=status.HTTP_404_NOT_FOUND)


def list_documents(resource: DocumentResource) -> Response:
    try:
        docs = resource.store.to_documents(resource.store.find_all())
    except DatabaseError:
        logger.exception('Fetching %s failed', resource.plural)
        return resource.failed('Fetching', plural=True)
    return Response({
        'message': f'{resource.plural.capitalize()} fetched successfully!',
        resource.list_key: docs,
    })


def list_documents_for_patient(resource: DocumentResource, patient_id: str) -> Response:
    try:
        objs = resource.store.filter_by_external_id('patient_id', patient_id)
        docs = resource.store.to_documents(objs)
    except DatabaseError:
        logger.exception('Fetching %s for patient %s failed', resource.plural, patient_id)
        return resource.failed('Fetching', plural=True)
    return Response({
        'message': f'{resource.plural.capitalize()} for patient fetched successfully!',
        resource.list_key: docs,
    })


def retrieve_document(resource: DocumentResource, pk: str) -> Response:
    try:
        obj = resource.store.find_by_internal_id(pk)
    except RecordNotFound as exc:
        return not_found(exc)
    except DatabaseError:
        logger.exception('Fetching %s %s failed', resource.noun, pk)
        return resource.failed('Fetching')
    return Response(resource.store.to_document(obj))


def create_document(resource: DocumentResource, data) -> Response:
    try:
        obj = resource.store.insert(data)
    except PersistenceFailure:
        return resource.failed('Creating', noun=resource.create_noun)
    except DatabaseError:
        logger.exception('Creating %s failed', resource.noun)
        return resource.failed('Creating', noun=resource.create_noun)
    notify_changed(resource.list_key, 'created', obj.pk)
    return Response({
        'message': f'{resource.label} added successfully',
        resource.id_key: obj.pk,
    }, status=status.HTTP_201_CREATED)


def replace_document(resource: DocumentResource, pk: str, data) -> Response:
    try:
        obj = resource.store.replace(pk, data)
    except RecordNotFound as exc:
        return not_found(exc)
    except PersistenceFailure:
        return resource.failed('Updating')
    except DatabaseError:
        logger.exception('Updating %s %s failed', resource.noun, pk)
        return resource.failed('Updating')
    notify_changed(resource.list_key, 'updated', obj.pk)
    body = {'message': 'Update successful!'}
    if resource.echo_key:
        body[resource.echo_key] = resource.store.to_document(obj)
    return Response(body)


def delete_document(resource: DocumentResource, pk: str) -> Response:
    try:
        resource.store.delete_by_internal_id(pk)
    except RecordNotFound as exc:
        return not_found(exc)
    except DatabaseError:
        logger.exception('Deleting %s %s failed', resource.noun, pk)
        return resource.failed('Deleting')
    notify_changed(resource.list_key, 'deleted', pk)
    return Response({'message': f'{resource.label} deleted!'})
