"""Python client for the front-desk records API."""
from .app import FrontDesk, PatientFile
from .cache import Broadcast, CacheState, PendingKind, PendingMutation, ReconcileReport, RecordCache
from .config import ClientConfig
from .errors import FrontDeskError, NotFound, TransportFailure, ValidationFailure
from .models import InsuranceForm, MedicalReport, Patient, Record, generate_report_id
from .resources import (
    INSURANCE_FORMS,
    MEDICAL_REPORTS,
    PATIENTS,
    CreateResult,
    DeleteResult,
    ListResult,
    Resource,
    ResourceClient,
    UpdateResult,
)
from .transport import Transport

__all__ = [
    "Broadcast",
    "CacheState",
    "ClientConfig",
    "CreateResult",
    "DeleteResult",
    "FrontDesk",
    "FrontDeskError",
    "INSURANCE_FORMS",
    "InsuranceForm",
    "ListResult",
    "MEDICAL_REPORTS",
    "MedicalReport",
    "NotFound",
    "PATIENTS",
    "PatientFile",
    "Patient",
    "PendingKind",
    "PendingMutation",
    "ReconcileReport",
    "Record",
    "RecordCache",
    "Resource",
    "ResourceClient",
    "Transport",
    "TransportFailure",
    "UpdateResult",
    "ValidationFailure",
    "generate_report_id",
]
