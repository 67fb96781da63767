"""
Composition root for the front-desk client.

:class:`FrontDesk` owns the one :class:`Transport` and one
:class:`RecordCache` per entity, and is passed to whatever needs them.
Nothing in the client package is a module-level singleton.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .cache import ReconcileReport, RecordCache
from .config import ClientConfig
from .models import InsuranceForm, MedicalReport, Patient
from .resources import INSURANCE_FORMS, MEDICAL_REPORTS, PATIENTS, ResourceClient
from .transport import Transport

logger = logging.getLogger(__name__)


@dataclass
class PatientFile:
    """A patient together with their reports and insurance forms."""

    patient: Patient
    medical_reports: List[MedicalReport] = field(default_factory=list)
    insurance_forms: List[InsuranceForm] = field(default_factory=list)


class FrontDesk:
    def __init__(self, config: Optional[ClientConfig] = None, transport: Optional[Transport] = None):
        self.config = config or ClientConfig.from_env()
        self.transport = transport or Transport(self.config.base_url, timeout=self.config.timeout)
        prefix = self.config.placeholder_prefix
        self.patients: RecordCache[Patient] = RecordCache(ResourceClient(self.transport, PATIENTS), prefix)
        self.medical_reports: RecordCache[MedicalReport] = RecordCache(
            ResourceClient(self.transport, MEDICAL_REPORTS), prefix,
        )
        self.insurance_forms: RecordCache[InsuranceForm] = RecordCache(
            ResourceClient(self.transport, INSURANCE_FORMS), prefix,
        )

    @property
    def caches(self) -> Dict[str, RecordCache]:
        return {
            "patients": self.patients,
            "medical_reports": self.medical_reports,
            "insurance_forms": self.insurance_forms,
        }

    def refresh_all(self) -> None:
        for cache in self.caches.values():
            cache.read_all()

    def find_patient(self, patient_id: str) -> Patient:
        """Look a patient up by ``patientId``; raises NotFound."""
        return self.patients.client.find_by_patient_id(patient_id)

    def patient_file(self, patient_id: str) -> PatientFile:
        return PatientFile(
            patient=self.find_patient(patient_id),
            medical_reports=self.medical_reports.list_by_patient(patient_id),
            insurance_forms=self.insurance_forms.list_by_patient(patient_id),
        )

    def reconcile_all(self) -> Dict[str, ReconcileReport]:
        reports = {name: cache.reconcile() for name, cache in self.caches.items()}
        unsettled = [name for name, report in reports.items() if not report.settled]
        if unsettled:
            logger.warning("Writes still pending for %s", ", ".join(unsettled))
        return reports

    def close(self) -> None:
        self.transport.close()

    def __enter__(self) -> "FrontDesk":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
