"""
URL mappings for the front-desk records API.

Each document type gets the same set of routes under ``/api/``.
Trailing slashes are deliberately omitted.  The patient-scoped listing
and business-id lookup routes are registered before the detail routes
so that they read naturally; the ``str`` converter never matches across
a slash so the order does not change the matching.  The client fallback
comes last.
"""
from django.urls import path, include, re_path

from .views import health, insurance_forms, medical_reports, patients, spa


urlpatterns = [
    # django_prometheus registers its own 'metrics' path
    path('', include('django_prometheus.urls')),
    path('healthz', health.healthz),
    # Patients
    path('api/patients', patients.patients),
    path('api/patients/id/<str:patient_id>', patients.patient_by_patient_id),
    path('api/patients/patient/<str:patient_id>', patients.patients_for_patient),
    path('api/patients/<str:pk>', patients.patient_detail),
    # Medical reports
    path('api/medical-reports', medical_reports.medical_reports),
    path('api/medical-reports/patient/<str:patient_id>', medical_reports.medical_reports_for_patient),
    path('api/medical-reports/<str:pk>', medical_reports.medical_report_detail),
    # Insurance forms
    path('api/insurance-forms', insurance_forms.insurance_forms),
    path('api/insurance-forms/patient/<str:patient_id>', insurance_forms.insurance_forms_for_patient),
    path('api/insurance-forms/<str:pk>', insurance_forms.insurance_form_detail),
    # Unknown API paths answer JSON; everything else is the client's
    re_path(r'^api/(?P<path>.*)$', spa.api_not_found),
    re_path(r'^(?P<path>.*)$', spa.client_index),
]
