"""
Django admin registrations for the record models.

Registering the documents here lets staff inspect and correct records
via the ``/admin/`` URL during development.
"""

from django.contrib import admin

from .models import InsuranceForm, MedicalReport, Patient


@admin.register(Patient)
class PatientAdmin(admin.ModelAdmin):
    list_display = ('id', 'patient_id', 'reg_id', 'name', 'age', 'gender', 'created_at')
    list_filter = ('gender', 'blood_group')
    search_fields = ('patient_id', 'reg_id', 'name')


@admin.register(MedicalReport)
class MedicalReportAdmin(admin.ModelAdmin):
    list_display = ('id', 'report_id', 'patient_id', 'doctor_name', 'report_date')
    search_fields = ('report_id', 'patient_id', 'doctor_name')


@admin.register(InsuranceForm)
class InsuranceFormAdmin(admin.ModelAdmin):
    list_display = ('id', 'form_id', 'patient_id', 'patient_name', 'insurance_company', 'current_date')
    search_fields = ('form_id', 'patient_id', 'patient_name', 'policy_number')
