from rest_framework import serializers

from records.models import InsuranceForm
from .documents import DocumentDateField, DocumentSerializer


class InsuranceFormSerializer(DocumentSerializer):
    formId = serializers.CharField(source='form_id', max_length=16)
    currentDate = DocumentDateField(source='current_date')
    patientId = serializers.CharField(source='patient_id', max_length=16)
    patientName = serializers.CharField(source='patient_name', max_length=255)
    dateOfBirth = DocumentDateField(source='date_of_birth')
    gender = serializers.CharField(max_length=20)
    contactNumber = serializers.CharField(source='contact_number', max_length=32)
    insuranceCompany = serializers.CharField(source='insurance_company', max_length=255)
    policyNumber = serializers.CharField(source='policy_number', max_length=32)
    totalCharges = serializers.FloatField(source='total_charges', min_value=0)
    amountPaidByPatient = serializers.FloatField(source='amount_paid_by_patient', min_value=0)
    additionalNotes = serializers.CharField(source='additional_notes', required=False, allow_blank=True, default='')

    class Meta:
        model = InsuranceForm
        fields = [
            '_id', 'formId', 'currentDate', 'patientId', 'patientName', 'dateOfBirth', 'gender',
            'contactNumber', 'insuranceCompany', 'policyNumber', 'totalCharges',
            'amountPaidByPatient', 'additionalNotes',
        ]
        text_fields = ('additional_notes',)
