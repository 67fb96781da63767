"""
Store adapter for one document collection.

A :class:`DocumentStore` wraps a model and the serializer describing its
wire shape and exposes the handful of operations the API needs: find
all, find by internal id, find by a business id field, insert, replace
and delete.  Every mutating call writes exactly once inside a
transaction.  Missing documents raise :class:`RecordNotFound`; rejected
writes raise :class:`PersistenceFailure`.
"""
from __future__ import annotations

import logging
from typing import Any, Mapping

from django.db import models, transaction

from records.exceptions import PersistenceFailure, RecordNotFound
from records.logging import redact

logger = logging.getLogger(__name__)


class DocumentStore:
    def __init__(self, model: type[models.Model], serializer_class, label: str):
        self.model = model
        self.serializer_class = serializer_class
        self.label = label

    def find_all(self) -> list:
        return list(self.model.objects.all())

    def find_by_internal_id(self, pk: str):
        obj = self.model.objects.filter(pk=pk).first()
        if obj is None:
            raise RecordNotFound(self.label, pk)
        return obj

    def find_by_external_id(self, field: str, value: str):
        obj = self.model.objects.filter(**{field: value}).first()
        if obj is None:
            raise RecordNotFound(self.label, value)
        return obj

    def filter_by_external_id(self, field: str, value: str) -> list:
        return list(self.model.objects.filter(**{field: value}))

    def insert(self, data: Mapping[str, Any]):
        serializer = self._validated(self.serializer_class(data=data))
        with transaction.atomic():
            obj = serializer.save()
        logger.info('%s created with id %s', self.label, obj.pk)
        return obj

    def replace(self, pk: str, data: Mapping[str, Any]):
        obj = self.find_by_internal_id(pk)
        serializer = self._validated(self.serializer_class(obj, data=data))
        with transaction.atomic():
            obj = serializer.save()
        logger.info('%s %s replaced', self.label, pk)
        return obj

    def delete_by_internal_id(self, pk: str) -> None:
        with transaction.atomic():
            deleted, _ = self.model.objects.filter(pk=pk).delete()
        if not deleted:
            raise RecordNotFound(self.label, pk)
        logger.info('%s %s deleted', self.label, pk)

    def to_document(self, obj) -> dict:
        return self.serializer_class(obj).data

    def to_documents(self, objs) -> list[dict]:
        return self.serializer_class(objs, many=True).data

    def _validated(self, serializer):
        if not serializer.is_valid():
            logger.warning('%s rejected: %s (payload %s)', self.label, dict(serializer.errors), redact(serializer.initial_data))
            raise PersistenceFailure(self.label, serializer.errors)
        return serializer
