from rest_framework import serializers

from records.models import MedicalReport
from .documents import DocumentDateField, DocumentSerializer


class MedicalReportSerializer(DocumentSerializer):
    reportId = serializers.CharField(source='report_id', max_length=32)
    patientId = serializers.CharField(source='patient_id', max_length=16)
    doctorName = serializers.CharField(source='doctor_name', max_length=255)
    reportDate = DocumentDateField(source='report_date')
    diagnosis = serializers.CharField()
    treatment = serializers.CharField()

    class Meta:
        model = MedicalReport
        fields = ['_id', 'reportId', 'patientId', 'doctorName', 'reportDate', 'diagnosis', 'treatment']
        text_fields = ('diagnosis', 'treatment')
