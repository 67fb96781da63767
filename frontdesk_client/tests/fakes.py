"""Test doubles for the client package."""
import itertools
import json as jsonlib
from dataclasses import replace
from datetime import date

import requests

from frontdesk_client.errors import NotFound, TransportFailure
from frontdesk_client.models import Patient
from frontdesk_client.resources import PATIENTS, CreateResult, DeleteResult, ListResult, UpdateResult


def make_patient(**overrides) -> Patient:
    values = dict(
        reg_id="REG1001",
        patient_id="P1001",
        name="John Smith",
        age=45,
        gender="Male",
        phone="555-123-4567",
        email="john.smith@example.com",
        address="123 Main St",
        blood_group="O+",
        date_of_birth=date(1980, 5, 15),
    )
    values.update(overrides)
    return Patient(**values)


class FakeResourceClient:
    """In-memory stand-in for ``ResourceClient`` with an on/off switch."""

    def __init__(self, resource=PATIENTS):
        self.resource = resource
        self.online = True
        self.docs = {}
        self.calls = []
        self._ids = itertools.count(1)

    def _call(self, name, *args):
        self.calls.append((name,) + args)
        if not self.online:
            raise TransportFailure("connection refused")

    def _missing(self):
        return NotFound(f"{self.resource.label} not found!")

    def list_all(self):
        self._call("list_all")
        return ListResult("fetched", [replace(r) for r in self.docs.values()])

    def list_by_patient(self, patient_id):
        self._call("list_by_patient", patient_id)
        return ListResult("fetched", [replace(r) for r in self.docs.values() if r.patient_id == patient_id])

    def fetch(self, record_id):
        self._call("fetch", record_id)
        if record_id not in self.docs:
            raise self._missing()
        return replace(self.docs[record_id])

    def create(self, record):
        self._call("create", record.name)
        new_id = f"{next(self._ids):024x}"
        self.docs[new_id] = record.with_id(new_id)
        return CreateResult("added", new_id)

    def replace(self, record_id, record):
        self._call("replace", record_id)
        if record_id not in self.docs:
            raise self._missing()
        self.docs[record_id] = record.with_id(record_id)
        return UpdateResult("Update successful!")

    def delete(self, record_id):
        self._call("delete", record_id)
        if record_id not in self.docs:
            raise self._missing()
        del self.docs[record_id]
        return DeleteResult("deleted")

    def called(self, name):
        return [c for c in self.calls if c[0] == name]


class APIClientSession:
    """``requests.Session`` look-alike that answers through Django's test client."""

    def __init__(self, client, base_url="http://testserver"):
        self.client = client
        self.base_url = base_url
        self.online = True

    def request(self, method, url, json=None, timeout=None):
        if not self.online:
            raise requests.ConnectionError("server unreachable")
        path = url[len(self.base_url):]
        data = jsonlib.dumps(json) if json is not None else ""
        return self.client.generic(method, path, data=data, content_type="application/json")

    def close(self):
        pass
