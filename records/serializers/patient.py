from rest_framework import serializers

from records.models import Patient
from .documents import DocumentDateField, DocumentSerializer


class PatientSerializer(DocumentSerializer):
    regId = serializers.CharField(source='reg_id', max_length=16)
    patientId = serializers.CharField(source='patient_id', max_length=16)
    name = serializers.CharField(max_length=255)
    age = serializers.IntegerField(min_value=0, max_value=150)
    gender = serializers.CharField(max_length=20)
    phone = serializers.CharField(max_length=32)
    email = serializers.CharField(max_length=255)
    address = serializers.CharField(max_length=500)
    bloodGroup = serializers.CharField(source='blood_group', max_length=5)
    dateOfBirth = DocumentDateField(source='date_of_birth')
    allergy = serializers.CharField(required=False, allow_blank=True, default='')
    medicalHistory = serializers.CharField(source='medical_history', required=False, allow_blank=True, default='')
    insurance = serializers.CharField(required=False, allow_blank=True, max_length=255, default='')

    class Meta:
        model = Patient
        fields = [
            '_id', 'regId', 'patientId', 'name', 'age', 'gender', 'phone', 'email',
            'address', 'bloodGroup', 'dateOfBirth', 'allergy', 'medicalHistory', 'insurance',
        ]
        text_fields = ('allergy', 'medical_history')
